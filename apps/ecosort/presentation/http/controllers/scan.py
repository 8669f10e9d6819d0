"""Scan API Controller.

메인 API 엔드포인트:
- POST /scan/image: 이미지 분류
- POST /scan/search: 품목 이름 검색 (검색 그라운딩)
- GET /scan/state: 현재 스캔 상태
- POST /scan/dismiss: 결과/오류 확인 후 Idle 복귀
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, File, Form, UploadFile
from pydantic import BaseModel, Field

from ecosort.application.classify.dto import ImagePayload
from ecosort.setup.dependencies import ScanOrchestratorDep

router = APIRouter(prefix="/scan", tags=["scan"])
logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Schemas
# ─────────────────────────────────────────────────────────────────────────────


class SearchRequest(BaseModel):
    """품목 검색 요청 스키마."""

    query: str = Field(
        description="품목 이름",
        examples=["pizza box", "AA battery"],
    )


# ─────────────────────────────────────────────────────────────────────────────
# Endpoints
# ─────────────────────────────────────────────────────────────────────────────


@router.post(
    "/image",
    summary="이미지 분류",
    description="촬영/업로드한 이미지를 분류하고 이력에 기록합니다.",
)
async def scan_image(
    orchestrator: ScanOrchestratorDep,
    file: Annotated[UploadFile, File(description="분류할 이미지")],
    image_url: Annotated[str | None, Form(description="이력에 남길 이미지 URL")] = None,
) -> dict:
    """이미지 분류 요청.

    Raises:
        InvalidImageError: 빈 이미지 또는 지원하지 않는 형식 (400)
        RequestInFlightError: 진행 중인 요청 있음 (409)
        ClassificationError: 분류 실패 (502)
    """
    data = await file.read()
    image = ImagePayload.from_upload(data, file.content_type)

    entry = await orchestrator.scan_image(image, image_url=image_url)
    return entry.to_dict()


@router.post(
    "/search",
    summary="품목 이름 검색",
    description="품목 이름으로 분류하고 웹 출처(sources)를 함께 반환합니다.",
)
async def search_item(
    request: SearchRequest,
    orchestrator: ScanOrchestratorDep,
) -> dict:
    """품목 검색 요청.

    Raises:
        EmptyQueryError: 검색어 없음 (400)
        RequestInFlightError: 진행 중인 요청 있음 (409)
        ClassificationError: 검색 실패 (502)
    """
    entry = await orchestrator.search_item(request.query)
    return entry.to_dict()


@router.get("/state", summary="현재 스캔 상태")
async def get_state(orchestrator: ScanOrchestratorDep) -> dict:
    """현재 ScanState 조회."""
    return orchestrator.state.to_dict()


@router.post("/dismiss", summary="결과/오류 닫기")
async def dismiss(orchestrator: ScanOrchestratorDep) -> dict:
    """결과 확인 후 Idle로 복귀.

    Raises:
        RequestInFlightError: 진행 중에는 닫을 수 없음 (409)
    """
    return orchestrator.dismiss().to_dict()
