"""GameProgressStore - 포인트 / 미니게임 카운터 저장소."""

from __future__ import annotations

import logging

import anyio

from ecosort.application.common.ports.state_storage import StateStoragePort
from ecosort.domain.exceptions import StorageError
from ecosort.domain.value_objects import GameProgress

logger = logging.getLogger(__name__)

POINTS_KEY = "ecosort:eco_points"
GAME_COUNT_KEY = "ecosort:game_count"

# 포인트 정책
SCAN_POINTS = 25
CORRECT_SORT_POINTS = 15


class GameProgressStore:
    """누적 포인트, 미니게임 분류 횟수 (정수 2개)."""

    def __init__(self, storage: StateStoragePort):
        self._storage = storage
        self._progress = GameProgress()
        self._lock = anyio.Lock()

    async def load(self) -> None:
        """영속 상태 로딩."""
        self._progress = GameProgress(
            points=await self._read_int(POINTS_KEY),
            items_sorted=await self._read_int(GAME_COUNT_KEY),
        )

    async def _read_int(self, key: str) -> int:
        try:
            raw = await self._storage.get(key)
        except StorageError as e:
            logger.warning("progress_load_failed", extra={"key": key, "error": e.reason})
            return 0
        if raw is None:
            return 0
        try:
            return max(int(raw), 0)
        except ValueError:
            logger.warning("progress_load_malformed", extra={"key": key})
            return 0

    async def _persist(self) -> None:
        async with self._lock:
            progress = self._progress
            try:
                await self._storage.set(POINTS_KEY, str(progress.points))
                await self._storage.set(GAME_COUNT_KEY, str(progress.items_sorted))
            except StorageError as e:
                logger.warning(
                    "progress_persist_failed",
                    extra={"key": e.key, "error": e.reason},
                )

    def get(self) -> GameProgress:
        return self._progress

    async def award_scan(self) -> GameProgress:
        """실제 스캔 완료 보상."""
        self._progress = GameProgress(
            points=self._progress.points + SCAN_POINTS,
            items_sorted=self._progress.items_sorted,
        )
        progress = self._progress
        await self._persist()
        return progress

    async def award_sort(self) -> GameProgress:
        """미니게임 정답 보상 (분류 횟수 +1)."""
        self._progress = GameProgress(
            points=self._progress.points + CORRECT_SORT_POINTS,
            items_sorted=self._progress.items_sorted + 1,
        )
        progress = self._progress
        await self._persist()
        return progress
