"""History Feature - 스캔 이력 (최신순, 최대 50건)."""

from ecosort.application.history.bounded_log import BoundedLog
from ecosort.application.history.history_store import HISTORY_KEY, HistoryStore

__all__ = [
    "BoundedLog",
    "HISTORY_KEY",
    "HistoryStore",
]
