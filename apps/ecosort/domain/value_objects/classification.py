"""Waste Classification Value Objects.

Provider 구조화 출력 계약 (응답 스키마) 겸 검증 모델.
enum 범위, 필수 필드, follow-up 불변식을 위반하면 ValidationError.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ecosort.domain.enums import BinColor, Material, WasteStream
from ecosort.domain.value_objects.location import Location


class GroundingSource(BaseModel):
    """검색 그라운딩 출처."""

    model_config = ConfigDict(frozen=True)

    uri: str
    title: str


class BinRecommendation(BaseModel):
    """수거함 추천."""

    model_config = ConfigDict(frozen=True)

    stream: WasteStream
    bin_color: BinColor
    instructions: List[str]


class ClassificationPayload(BaseModel):
    """Provider 응답 구조 (sources 제외).

    model_json_schema()가 그대로 response schema로 전달됩니다.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    item_detected: str = Field(min_length=1)
    material: Material
    confidence: float = Field(ge=0, le=100, description="Confidence percentage (0-100)")
    needs_followup: bool
    followup_question: Optional[str] = None
    location: Location
    bin_recommendation: BinRecommendation
    why: List[str]

    @field_validator("followup_question", mode="before")
    @classmethod
    def _blank_question_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def _followup_iff_question(self) -> ClassificationPayload:
        # followup_question은 needs_followup이 true일 때만 존재
        if self.needs_followup and self.followup_question is None:
            raise ValueError("followup_question is required when needs_followup is true")
        if not self.needs_followup and self.followup_question is not None:
            raise ValueError("followup_question must be absent when needs_followup is false")
        return self

    @classmethod
    def response_schema(cls) -> dict[str, Any]:
        """Provider에 전달할 JSON 스키마."""
        return ClassificationPayload.model_json_schema()


class WasteClassification(ClassificationPayload):
    """분류 결과 (텍스트 검색 시 출처 포함)."""

    sources: Optional[List[GroundingSource]] = None

    @classmethod
    def from_payload(
        cls,
        payload: ClassificationPayload,
        sources: list[GroundingSource] | None = None,
    ) -> WasteClassification:
        """Provider 응답에 출처를 붙여 결과 생성."""
        return cls(**payload.model_dump(), sources=sources or None)

    @property
    def stream(self) -> WasteStream:
        """추천 배출 스트림."""
        return self.bin_recommendation.stream
