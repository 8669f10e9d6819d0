"""Prompt Builder Unit Tests."""

from __future__ import annotations

from ecosort.application.classify.prompts import (
    FALLBACK_REGION,
    build_prompt,
    build_text_request,
    resolve_region,
)
from ecosort.domain.enums import Material, WasteStream
from ecosort.domain.value_objects import Location


class TestBuildPrompt:
    """build_prompt() 테스트."""

    def test_deterministic_for_same_location(self):
        """같은 지역이면 같은 프롬프트."""
        location = Location(country="Germany")
        assert build_prompt(location) == build_prompt(Location(country="Germany"))

    def test_embeds_country(self):
        prompt = build_prompt(Location(country="Japan"))
        assert "Current Location: Japan" in prompt
        assert "Global" not in prompt.split("Rules:")[0]

    def test_missing_location_falls_back_to_global(self):
        """지역 없음 / 공백 → Global."""
        assert "Current Location: Global" in build_prompt(None)
        assert "Current Location: Global" in build_prompt(Location(country="   "))
        assert build_prompt(None) == build_prompt(Location(country=""))

    def test_lists_every_material_and_stream(self):
        prompt = build_prompt(Location(country="France"))
        for material in Material:
            assert material.value in prompt
        for stream in WasteStream:
            assert stream.value in prompt

    def test_contains_sorting_rules(self):
        prompt = build_prompt(None)
        assert "clean and dry" in prompt
        assert "Blue/Yellow: Recyclables" in prompt
        assert "Green/Brown: Organic" in prompt
        assert "Red/Black/Grey: Residual" in prompt
        assert "at most ONE" in prompt
        assert "Return JSON only" in prompt


class TestRequestSuffix:
    """요청 문구 테스트."""

    def test_text_request_quotes_query(self):
        assert build_text_request("  pizza box ") == 'Input: Item name: "pizza box"'

    def test_resolve_region(self):
        assert resolve_region(None) == FALLBACK_REGION
        assert resolve_region(Location(country=" Korea ")) == "Korea"
