"""ModelResponse - Provider 원본 응답."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ModelResponse:
    """Provider 응답 (파싱 전).

    Attributes:
        text: 구조화 출력 본문 (JSON 문자열, 없으면 None)
        citations: 그라운딩 출처 원본 [{"uri": ..., "title": ...}, ...]
    """

    text: Optional[str]
    citations: list[dict[str, Optional[str]]] = field(default_factory=list)
