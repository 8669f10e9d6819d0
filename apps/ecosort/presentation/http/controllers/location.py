"""Location API Controller."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel, Field

from ecosort.setup.dependencies import AssetRepositoryDep, LocationStoreDep

router = APIRouter(prefix="/location", tags=["location"])


class LocationUpdateRequest(BaseModel):
    """지역 변경 요청 스키마."""

    country: str = Field(
        min_length=1,
        description="지역명 (목록 외 자유 입력 허용)",
        examples=["Germany", "Japan"],
    )


@router.get("", summary="현재 지역")
async def get_location(locations: LocationStoreDep) -> dict:
    return locations.get().model_dump()


@router.put("", summary="지역 변경")
async def update_location(
    request: LocationUpdateRequest,
    locations: LocationStoreDep,
) -> dict:
    return (await locations.update(request.country)).model_dump()


@router.get("/regions", summary="지원 지역 목록")
async def list_regions(assets: AssetRepositoryDep) -> list[str]:
    """지역 선택 목록 (첫 항목이 기본값)."""
    return assets.get_regions()
