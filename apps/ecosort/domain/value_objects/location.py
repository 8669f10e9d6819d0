"""Location Value Object."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

DEFAULT_COUNTRY = "Global (General Rules)"


class Location(BaseModel):
    """사용자 지역 정보.

    자유 형식 문자열을 허용합니다 (UI 목록은 참고용).
    """

    model_config = ConfigDict(frozen=True)

    country: str
