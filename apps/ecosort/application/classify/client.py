"""ClassificationClient - 분류 요청 + 검증 디코딩.

이미지 분류와 텍스트 검색(그라운딩)은 프롬프트/스키마 처리를 공유하고,
payload 형태와 출처 요청 여부만 다릅니다.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Iterable

from pydantic import ValidationError

from ecosort.application.classify.dto.image_payload import ImagePayload
from ecosort.application.classify.dto.model_response import ModelResponse
from ecosort.application.classify.ports.classifier_model import ClassifierModelPort
from ecosort.application.classify.prompts import (
    IMAGE_REQUEST,
    build_prompt,
    build_text_request,
)
from ecosort.domain.exceptions import (
    EmptyQueryError,
    ProviderUnavailableError,
    SchemaViolationError,
)
from ecosort.domain.exceptions.classification import (
    GENERIC_CLASSIFY_MESSAGE,
    GENERIC_SEARCH_MESSAGE,
)
from ecosort.domain.value_objects import (
    ClassificationPayload,
    GroundingSource,
    Location,
    WasteClassification,
)

logger = logging.getLogger(__name__)


def extract_sources(citations: Iterable[dict[str, Any]]) -> list[GroundingSource]:
    """그라운딩 출처 정리.

    uri가 없거나 공백인 항목은 버리고, title이 없으면 uri로 대체.

    Args:
        citations: Provider 원본 출처 목록

    Returns:
        GroundingSource 목록 (입력 순서 유지)
    """
    sources: list[GroundingSource] = []
    for citation in citations:
        if not isinstance(citation, dict):
            continue
        uri = citation.get("uri")
        if not isinstance(uri, str) or not uri.strip():
            continue
        title = citation.get("title")
        if not isinstance(title, str) or not title.strip():
            title = uri
        sources.append(GroundingSource(uri=uri.strip(), title=title.strip()))
    return sources


def decode_classification(
    response: ModelResponse,
    failure_message: str = GENERIC_CLASSIFY_MESSAGE,
) -> ClassificationPayload:
    """응답 본문을 검증하며 디코딩.

    Raises:
        ProviderUnavailableError: 본문이 비어 있음
        SchemaViolationError: JSON 파싱 실패 또는 스키마 위반
    """
    if response.text is None or not response.text.strip():
        raise ProviderUnavailableError(failure_message, reason="empty response body")

    try:
        return ClassificationPayload.model_validate_json(response.text)
    except ValidationError as e:
        raise SchemaViolationError(failure_message, reason=str(e)) from e


class ClassificationClient:
    """분류 클라이언트.

    ClassifierModelPort에 1회 요청 (재시도 없음) 후 검증된 결과를 반환합니다.
    """

    def __init__(self, model: ClassifierModelPort):
        """초기화.

        Args:
            model: 분류 모델 Port
        """
        self._model = model

    async def classify_by_image(
        self,
        image: ImagePayload,
        location: Location | None,
    ) -> WasteClassification:
        """이미지 분류.

        Args:
            image: 촬영/업로드 이미지
            location: 사용자 지역

        Returns:
            분류 결과

        Raises:
            ClassificationError: Provider 실패 또는 스키마 위반
        """
        start = time.perf_counter()
        prompt = f"{build_prompt(location)}\n{IMAGE_REQUEST}"

        response = await self._model.generate(prompt, image=image, grounded=False)
        payload = decode_classification(response, GENERIC_CLASSIFY_MESSAGE)

        logger.info(
            "Image classification completed",
            extra={
                "material": payload.material.value,
                "stream": payload.bin_recommendation.stream.value,
                "elapsed_ms": (time.perf_counter() - start) * 1000,
            },
        )
        return WasteClassification.from_payload(payload)

    async def classify_by_text(
        self,
        query: str,
        location: Location | None,
    ) -> WasteClassification:
        """텍스트 검색 분류 (검색 그라운딩).

        Args:
            query: 품목 이름
            location: 사용자 지역

        Returns:
            분류 결과 (출처가 있으면 sources 포함)

        Raises:
            EmptyQueryError: 검색어가 비어 있음
            ClassificationError: Provider 실패 또는 스키마 위반
        """
        if not query or not query.strip():
            raise EmptyQueryError()

        start = time.perf_counter()
        prompt = f"{build_prompt(location)}\n\n{build_text_request(query)}"

        try:
            response = await self._model.generate(prompt, image=None, grounded=True)
        except ProviderUnavailableError as e:
            raise ProviderUnavailableError(GENERIC_SEARCH_MESSAGE, reason=e.reason) from e
        payload = decode_classification(response, GENERIC_SEARCH_MESSAGE)
        sources = extract_sources(response.citations)

        logger.info(
            "Text lookup completed",
            extra={
                "material": payload.material.value,
                "stream": payload.bin_recommendation.stream.value,
                "sources": len(sources),
                "elapsed_ms": (time.perf_counter() - start) * 1000,
            },
        )
        return WasteClassification.from_payload(payload, sources)
