"""Sorting Game Value Objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ecosort.domain.enums import WasteStream


@dataclass(frozen=True, slots=True)
class SortGameItem:
    """미니게임 항목.

    Attributes:
        name: 항목 이름 (예: Dirty Pizza Box)
        stream: 정답 스트림
        image_url: 표시용 이미지 URL
        reason: 정답 해설
    """

    name: str
    stream: WasteStream
    image_url: str
    reason: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SortGameItem:
        """YAML 항목에서 생성."""
        return cls(
            name=data["name"],
            stream=WasteStream(data["stream"]),
            image_url=data.get("image_url", ""),
            reason=data.get("reason", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        """API 응답용 dict (정답 스트림 제외)."""
        return {"name": self.name, "image_url": self.image_url}


@dataclass(frozen=True, slots=True)
class SortOutcome:
    """미니게임 판정 결과."""

    item: SortGameItem
    chosen: WasteStream
    is_correct: bool
    message: str
    points_awarded: int

    def to_dict(self) -> dict[str, Any]:
        """API 응답용 dict."""
        return {
            "item": self.item.name,
            "chosen": self.chosen.value,
            "correct_stream": self.item.stream.value,
            "is_correct": self.is_correct,
            "message": self.message,
            "points_awarded": self.points_awarded,
        }


@dataclass(frozen=True, slots=True)
class GameProgress:
    """누적 포인트 / 미니게임 분류 횟수."""

    points: int = 0
    items_sorted: int = 0

    def to_dict(self) -> dict[str, int]:
        """API 응답용 dict."""
        return {"points": self.points, "items_sorted": self.items_sorted}
