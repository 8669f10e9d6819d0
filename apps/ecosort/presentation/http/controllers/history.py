"""History API Controller.

- GET /history: 이력 목록 (최신순)
- DELETE /history?confirm=true: 이력 전체 삭제
- GET /history/stats: 이력 통계
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from ecosort.setup.dependencies import HistoryStoreDep, ScanOrchestratorDep

router = APIRouter(prefix="/history", tags=["history"])


@router.get("", summary="스캔 이력 목록")
async def list_history(history: HistoryStoreDep) -> list[dict]:
    return [entry.to_dict() for entry in history.entries()]


@router.delete("", summary="스캔 이력 전체 삭제")
async def clear_history(
    orchestrator: ScanOrchestratorDep,
    confirm: bool = Query(False, description="삭제 확인 (true 필수)"),
) -> dict:
    """이력 전체 삭제.

    Raises:
        ConfirmationRequiredError: confirm=true 누락 (400)
        RequestInFlightError: 진행 중인 요청 있음 (409)
    """
    await orchestrator.clear_history(confirmed=confirm)
    return {"status": "cleared"}


@router.get("/stats", summary="이력 통계")
async def history_stats(history: HistoryStoreDep) -> dict:
    """총 스캔 수, 재활용 수, 재활용 비율(%)."""
    return history.stats().to_dict()
