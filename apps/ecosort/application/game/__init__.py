"""Game Feature - 분리배출 미니게임 / 포인트."""

from ecosort.application.game.progress_store import (
    GAME_COUNT_KEY,
    POINTS_KEY,
    GameProgressStore,
)
from ecosort.application.game.sorting_game import SortingGame

__all__ = [
    "GAME_COUNT_KEY",
    "GameProgressStore",
    "POINTS_KEY",
    "SortingGame",
]
