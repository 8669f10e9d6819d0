"""Sorting Game API Controller.

- GET /game/item: 현재 출제 항목
- POST /game/sort: 스트림 선택 판정
- GET /game/progress: 누적 포인트
"""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel, Field

from ecosort.domain.enums import WasteStream
from ecosort.setup.dependencies import ProgressStoreDep, SortingGameDep

router = APIRouter(prefix="/game", tags=["game"])


class SortRequest(BaseModel):
    """판정 요청 스키마."""

    stream: WasteStream = Field(description="선택한 배출 스트림")


@router.get("/item", summary="현재 항목")
async def current_item(game: SortingGameDep) -> dict:
    return game.current_item().to_dict()


@router.post("/sort", summary="분류 판정")
async def sort_item(request: SortRequest, game: SortingGameDep) -> dict:
    """판정 후 다음 항목으로 이동."""
    return (await game.sort(request.stream)).to_dict()


@router.get("/progress", summary="누적 포인트")
async def progress(progress_store: ProgressStoreDep) -> dict:
    return progress_store.get().to_dict()
