"""Scan History Value Objects."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Any, Iterable, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from ecosort.domain.enums import WasteStream
from ecosort.domain.value_objects.classification import WasteClassification


class HistoryEntry(BaseModel):
    """스캔 이력 항목 (생성 후 불변).

    영속화 시 camelCase 키 사용 (imageUrl, isManualSearch).
    timestamp는 epoch milliseconds.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    timestamp: int
    result: WasteClassification
    is_manual_search: bool = Field(default=False, alias="isManualSearch")

    @classmethod
    def create(
        cls,
        result: WasteClassification,
        image_url: str | None = None,
        is_manual: bool = False,
    ) -> HistoryEntry:
        """새 ID와 현재 시각으로 항목 생성."""
        return cls(
            id=str(uuid4()),
            image_url=image_url,
            timestamp=int(time.time() * 1000),
            result=result,
            is_manual_search=is_manual,
        )

    def to_dict(self) -> dict[str, Any]:
        """영속화/API 응답용 dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


@dataclass(frozen=True, slots=True)
class HistoryStats:
    """이력 통계 (저장하지 않고 매번 계산).

    Attributes:
        total: 전체 스캔 수
        recyclables: Recyclables 스트림 수
        diversion_rate: 재활용 비율 (%, 반올림)
    """

    total: int
    recyclables: int
    diversion_rate: int

    @classmethod
    def from_entries(cls, entries: Iterable[HistoryEntry]) -> HistoryStats:
        """이력 항목으로부터 통계 계산."""
        items = list(entries)
        total = len(items)
        recyclables = sum(
            1 for entry in items if entry.result.stream == WasteStream.RECYCLABLES
        )
        # half-up 반올림 (12.5 → 13)
        rate = math.floor(recyclables / total * 100 + 0.5) if total > 0 else 0
        return cls(total=total, recyclables=recyclables, diversion_rate=rate)

    def to_dict(self) -> dict[str, int]:
        """API 응답용 dict."""
        return {
            "total": self.total,
            "recyclables": self.recyclables,
            "diversionRate": self.diversion_rate,
        }
