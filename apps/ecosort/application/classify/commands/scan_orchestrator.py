"""ScanOrchestrator - 스캔 흐름 조합.

상태 레코드(ScanState) 하나로 진행 상태를 관리합니다.
동시 요청은 in-flight 상태로 거부 (이벤트 루프 단일 스레드, 락 없음).
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from ecosort.application.classify.client import ClassificationClient
from ecosort.application.classify.dto.image_payload import ImagePayload
from ecosort.application.classify.dto.scan_state import ScanState
from ecosort.application.game.progress_store import GameProgressStore
from ecosort.application.history.history_store import HistoryStore
from ecosort.application.preferences.location_store import LocationPreferenceStore
from ecosort.domain.exceptions import (
    ClassificationError,
    ConfirmationRequiredError,
    EmptyQueryError,
    RequestInFlightError,
)
from ecosort.domain.value_objects import HistoryEntry, WasteClassification

logger = logging.getLogger(__name__)


class ScanOrchestrator:
    """스캔 오케스트레이터.

    1. 상태 전이 Idle → Requesting (진행 중이면 거부)
    2. ClassificationClient 호출
    3. 성공: 이력 기록 + 포인트 적립 → Succeeded
    4. 실패: 이력 변경 없음, 이전 결과 제거 → Failed
    5. 예상 밖 종료(취소, 기록 단계 오류): Idle로 복귀
    """

    def __init__(
        self,
        client: ClassificationClient,
        history: HistoryStore,
        locations: LocationPreferenceStore,
        progress: GameProgressStore,
    ):
        """초기화.

        Args:
            client: 분류 클라이언트
            history: 이력 저장소
            locations: 지역 설정 저장소
            progress: 포인트 저장소
        """
        self._client = client
        self._history = history
        self._locations = locations
        self._progress = progress
        self._state = ScanState()

    @property
    def state(self) -> ScanState:
        return self._state

    async def scan_image(
        self,
        image: ImagePayload,
        image_url: str | None = None,
    ) -> HistoryEntry:
        """이미지 스캔.

        Args:
            image: 검증된 이미지
            image_url: 이력에 남길 이미지 URL

        Returns:
            기록된 HistoryEntry

        Raises:
            RequestInFlightError: 진행 중인 요청이 있음
            ClassificationError: 분류 실패 (상태는 Failed)
        """
        location = self._locations.get()
        return await self._run(
            lambda: self._client.classify_by_image(image, location),
            image_url=image_url,
            is_manual=False,
        )

    async def search_item(self, query: str) -> HistoryEntry:
        """품목 이름 검색.

        Raises:
            EmptyQueryError: 검색어가 비어 있음 (상태 변경 없음)
            RequestInFlightError: 진행 중인 요청이 있음
            ClassificationError: 분류 실패 (상태는 Failed)
        """
        if not query or not query.strip():
            raise EmptyQueryError()

        location = self._locations.get()
        return await self._run(
            lambda: self._client.classify_by_text(query.strip(), location),
            image_url=None,
            is_manual=True,
        )

    async def _run(
        self,
        request: Callable[[], Awaitable[WasteClassification]],
        image_url: str | None,
        is_manual: bool,
    ) -> HistoryEntry:
        # 종료 상태에서 새 요청 → Idle을 거쳐 Requesting
        state = self._state.reset() if self._state.phase.is_terminal else self._state
        self._state = state.begin()

        try:
            try:
                result = await request()
            except ClassificationError as e:
                self._state = self._state.fail(e)
                logger.warning(
                    "Scan failed",
                    extra={
                        "error_code": e.code,
                        "reason": e.reason,
                        "is_manual_search": is_manual,
                    },
                )
                raise

            entry = await self._history.record(
                result, image_url=image_url, is_manual=is_manual
            )
            await self._progress.award_scan()
            self._state = self._state.succeed(entry)
        finally:
            # 취소, 기록 단계 오류 등 예상 밖 종료: in-flight 해제
            if self._state.in_flight:
                logger.error(
                    "Scan aborted",
                    extra={"is_manual_search": is_manual},
                )
                self._state = ScanState()

        logger.info(
            "Scan succeeded",
            extra={"entry_id": entry.id, "is_manual_search": is_manual},
        )
        return entry

    def dismiss(self) -> ScanState:
        """결과/오류 확인 후 Idle로 복귀."""
        self._state = self._state.reset()
        return self._state

    async def clear_history(self, confirmed: bool) -> None:
        """이력 전체 삭제.

        Args:
            confirmed: 사용자 확인 여부

        Raises:
            ConfirmationRequiredError: 확인되지 않음
            RequestInFlightError: 진행 중인 요청이 있음
        """
        if not confirmed:
            raise ConfirmationRequiredError("clear history")
        if self._state.in_flight:
            raise RequestInFlightError()
        await self._history.clear()
