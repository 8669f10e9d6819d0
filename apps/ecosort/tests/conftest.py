"""Pytest Configuration for EcoSort Tests."""

from __future__ import annotations

import json
from typing import Any, Callable

import anyio
import pytest

from ecosort.application.classify.dto import ImagePayload, ModelResponse
from ecosort.application.classify.ports import ClassifierModelPort
from ecosort.application.common.ports import StateStoragePort
from ecosort.domain.exceptions import ProviderUnavailableError, StorageError
from ecosort.domain.value_objects import WasteClassification

# ============================================================
# Fake Implementations
# ============================================================


class InMemoryStateStorage(StateStoragePort):
    """dict 기반 저장소.

    fail=True면 모든 호출이 StorageError, set_delay > 0이면 set()이 비동기로 대기.
    """

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})
        self.fail = False
        self.set_delay = 0.0
        self.closed = False

    def _check(self, key: str) -> None:
        if self.fail:
            raise StorageError(key, "storage unavailable")

    async def get(self, key: str) -> str | None:
        self._check(key)
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._check(key)
        if self.set_delay:
            await anyio.sleep(self.set_delay)
        self.data[key] = value

    async def delete(self, key: str) -> None:
        self._check(key)
        self.data.pop(key, None)

    async def aclose(self) -> None:
        self.closed = True


class FakeClassifierModel(ClassifierModelPort):
    """고정 응답을 돌려주는 분류 모델 (호출 기록)."""

    def __init__(
        self,
        text: str | None = None,
        citations: list[dict[str, Any]] | None = None,
        error: Exception | None = None,
    ):
        self.text = text
        self.citations = citations or []
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    async def generate(
        self,
        prompt: str,
        image: ImagePayload | None = None,
        grounded: bool = False,
    ) -> ModelResponse:
        self.calls.append({"prompt": prompt, "image": image, "grounded": grounded})
        if self.error is not None:
            raise self.error
        return ModelResponse(text=self.text, citations=list(self.citations))

    async def aclose(self) -> None:
        self.closed = True


# ============================================================
# Fixtures
# ============================================================


@pytest.fixture
def anyio_backend():
    """anyio 백엔드 (asyncio만 사용)."""
    return "asyncio"


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    """샘플 Provider 응답 (재활용 가능 페트병)."""
    return {
        "item_detected": "Plastic water bottle",
        "material": "plastic",
        "confidence": 92,
        "needs_followup": False,
        "location": {"country": "Germany"},
        "bin_recommendation": {
            "stream": "Recyclables",
            "bin_color": "Yellow",
            "instructions": ["Empty the bottle", "Put the cap back on"],
        },
        "why": ["PET is widely recycled"],
    }


@pytest.fixture
def make_classification(sample_payload) -> Callable[..., WasteClassification]:
    """스트림만 바꾼 WasteClassification 생성기."""

    def _make(stream: str = "Recyclables", **overrides: Any) -> WasteClassification:
        data = json.loads(json.dumps(sample_payload))
        data["bin_recommendation"]["stream"] = stream
        data.update(overrides)
        return WasteClassification.model_validate(data)

    return _make


@pytest.fixture
def storage() -> InMemoryStateStorage:
    return InMemoryStateStorage()


@pytest.fixture
def fake_model_factory() -> Callable[..., FakeClassifierModel]:
    return FakeClassifierModel


@pytest.fixture
def fake_model(sample_payload) -> FakeClassifierModel:
    """정상 응답 모델."""
    return FakeClassifierModel(text=json.dumps(sample_payload))


@pytest.fixture
def failing_model() -> FakeClassifierModel:
    """네트워크 오류 모델."""
    return FakeClassifierModel(
        error=ProviderUnavailableError(reason="connection reset"),
    )


@pytest.fixture
def png_image() -> ImagePayload:
    return ImagePayload(data=b"\x89PNG\r\n\x1a\nfake", mime_type="image/png")
