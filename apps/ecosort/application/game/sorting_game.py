"""SortingGame - "어느 수거함일까?" 미니게임."""

from __future__ import annotations

import logging

from ecosort.application.game.progress_store import (
    CORRECT_SORT_POINTS,
    GameProgressStore,
)
from ecosort.domain.enums import WasteStream
from ecosort.domain.value_objects import SortGameItem, SortOutcome

logger = logging.getLogger(__name__)


class SortingGame:
    """항목 목록을 순환하며 선택한 스트림을 판정.

    피드백 표시 타이머는 클라이언트 몫이며, 판정 즉시 다음 항목으로 넘어갑니다.
    """

    def __init__(self, items: list[SortGameItem], progress: GameProgressStore):
        """초기화.

        Args:
            items: 출제 항목 (1개 이상)
            progress: 포인트 저장소
        """
        if not items:
            raise ValueError("SortingGame requires at least one item")
        self._items = list(items)
        self._progress = progress
        self._index = 0

    def current_item(self) -> SortGameItem:
        return self._items[self._index]

    async def sort(self, stream: WasteStream) -> SortOutcome:
        """현재 항목 판정 후 다음 항목으로 이동.

        Args:
            stream: 사용자가 선택한 스트림

        Returns:
            판정 결과
        """
        item = self.current_item()
        is_correct = item.stream == stream
        # 영속화 await 전에 다음 항목으로 이동
        self._index = (self._index + 1) % len(self._items)

        if is_correct:
            await self._progress.award_sort()
            message = f"Correct! {item.reason}"
            points = CORRECT_SORT_POINTS
        else:
            message = f"Not quite. {item.reason}"
            points = 0

        logger.info(
            "Sort game answered",
            extra={"item": item.name, "chosen": stream.value, "is_correct": is_correct},
        )
        return SortOutcome(
            item=item,
            chosen=stream,
            is_correct=is_correct,
            message=message,
            points_awarded=points,
        )
