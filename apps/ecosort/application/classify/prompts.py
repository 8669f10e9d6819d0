"""Prompt Builder - 분류 시스템 프롬프트 (순수 함수).

지역, 재질/스트림 목록, 오염 휴리스틱, 색상 매핑, follow-up 정책을 포함.
네트워크/랜덤 없음: 같은 지역이면 항상 같은 문자열.
"""

from __future__ import annotations

from ecosort.domain.enums import Material, WasteStream
from ecosort.domain.value_objects import Location

FALLBACK_REGION = "Global"

IMAGE_REQUEST = "Classify this item captured in the photo."

_TEMPLATE = """\
You are EcoSort AI, a world-class sustainability and waste-sorting expert.

Goal:
Classify a waste item based on (1) its material properties and (2) the user's region/country.
Current Location: {region}

Rules:
1. Classify the material into exactly one of: {materials}.
2. Recommend a bin stream, exactly one of: {streams}.
3. If the item is clean and dry, it's usually Recyclable. If soiled with food or liquids, it's usually Residual.
4. Use the specific bin color mapping for {region} if known, otherwise use the standard global mapping:
   - Blue/Yellow: Recyclables (Paper/Plastic/Metal)
   - Green/Brown: Organic/Compost
   - Red/Black/Grey: Residual/Landfill
5. Ask at most ONE short follow-up question, and ONLY if the material or contamination status is unclear.
   Set needs_followup to true exactly when you ask it; otherwise leave followup_question empty.
6. Provide 1-2 practical tips for proper disposal in the instructions.
7. Report confidence as a percentage from 0 to 100.
8. Echo the location country as "{region}".

Return JSON only, matching the response schema. Do not wrap it in prose or markdown.
"""


def resolve_region(location: Location | None) -> str:
    """프롬프트에 넣을 지역명 (없거나 공백이면 Global)."""
    if location is None:
        return FALLBACK_REGION
    return location.country.strip() or FALLBACK_REGION


def build_prompt(location: Location | None) -> str:
    """분류 시스템 프롬프트 생성.

    Args:
        location: 사용자 지역 (None 허용)

    Returns:
        프롬프트 문자열
    """
    region = resolve_region(location)
    return _TEMPLATE.format(
        region=region,
        materials=", ".join(material.value for material in Material),
        streams=", ".join(stream.value for stream in WasteStream),
    )


def build_text_request(query: str) -> str:
    """텍스트 검색 요청 문구."""
    return f'Input: Item name: "{query.strip()}"'
