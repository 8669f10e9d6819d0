"""HistoryStore - 스캔 이력 저장소.

프로세스 시작 시 1회 로딩(load), 이후 메모리 상태가 단일 진실 공급원.
변경 시마다 영속화 (실패해도 메모리 상태 유지).
영속화는 Lock 안에서 스냅샷을 찍어 마지막 쓰기가 항상 최신 상태가 되도록 합니다.
"""

from __future__ import annotations

import json
import logging

import anyio
from pydantic import TypeAdapter, ValidationError

from ecosort.application.common.ports.state_storage import StateStoragePort
from ecosort.application.history.bounded_log import BoundedLog
from ecosort.domain.exceptions import StorageError
from ecosort.domain.value_objects import HistoryEntry, HistoryStats, WasteClassification

logger = logging.getLogger(__name__)

HISTORY_KEY = "ecosort:history"
DEFAULT_HISTORY_LIMIT = 50

_entries_adapter = TypeAdapter(list[HistoryEntry])


class HistoryStore:
    """스캔 이력 저장소 (최신순, 용량 제한)."""

    def __init__(
        self,
        storage: StateStoragePort,
        limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        """초기화 (I/O 없음, load()로 영속 상태 로딩).

        Args:
            storage: 상태 저장소 Port
            limit: 최대 보관 건수
        """
        self._storage = storage
        self._log: BoundedLog[HistoryEntry] = BoundedLog(limit)
        self._lock = anyio.Lock()

    async def load(self) -> None:
        """영속 상태 로딩. 손상된 데이터는 없는 것으로 취급."""
        entries = await self._read()
        self._log = BoundedLog(self._log.capacity, entries)
        logger.info(
            "HistoryStore loaded (entries=%d, limit=%d)",
            len(self._log),
            self._log.capacity,
        )

    async def _read(self) -> list[HistoryEntry]:
        try:
            raw = await self._storage.get(HISTORY_KEY)
        except StorageError as e:
            logger.warning(
                "history_load_failed",
                extra={"key": HISTORY_KEY, "error": e.reason},
            )
            return []

        if not raw:
            return []

        try:
            return _entries_adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(
                "history_load_malformed",
                extra={"key": HISTORY_KEY, "error": str(e)},
            )
            return []

    async def _persist(self) -> None:
        async with self._lock:
            payload = json.dumps([entry.to_dict() for entry in self._log])
            try:
                await self._storage.set(HISTORY_KEY, payload)
            except StorageError as e:
                logger.warning(
                    "history_persist_failed",
                    extra={"key": HISTORY_KEY, "error": e.reason},
                )

    async def record(
        self,
        result: WasteClassification,
        image_url: str | None = None,
        is_manual: bool = False,
    ) -> HistoryEntry:
        """분류 결과를 이력에 추가.

        Args:
            result: 분류 결과
            image_url: 이미지 URL (이미지 스캔일 때)
            is_manual: 텍스트 검색 여부

        Returns:
            생성된 HistoryEntry
        """
        entry = HistoryEntry.create(result, image_url=image_url, is_manual=is_manual)
        evicted = self._log.push(entry)
        await self._persist()

        logger.info(
            "History entry recorded",
            extra={
                "entry_id": entry.id,
                "is_manual_search": is_manual,
                "evicted_id": evicted.id if evicted else None,
            },
        )
        return entry

    async def clear(self) -> None:
        """이력 전체 삭제 (영속 상태 포함)."""
        self._log.clear()
        async with self._lock:
            try:
                await self._storage.delete(HISTORY_KEY)
            except StorageError as e:
                logger.warning(
                    "history_delete_failed",
                    extra={"key": HISTORY_KEY, "error": e.reason},
                )
        logger.info("History cleared")

    def entries(self) -> list[HistoryEntry]:
        """이력 목록 (최신순)."""
        return self._log.snapshot()

    def stats(self) -> HistoryStats:
        """이력 통계 (매번 계산)."""
        return HistoryStats.from_entries(self._log)

    def __len__(self) -> int:
        return len(self._log)
