"""Google Gemini Classifier Adapter - ClassifierModelPort 구현체.

Gemini API generate_content (async) 사용.
- response_json_schema로 구조화 출력 강제
- 텍스트 검색은 googleSearch 도구로 그라운딩
"""

from __future__ import annotations

import logging
from typing import Any

from google import genai
from google.genai import types

from ecosort.application.classify.dto.image_payload import ImagePayload
from ecosort.application.classify.dto.model_response import ModelResponse
from ecosort.application.classify.ports.classifier_model import ClassifierModelPort
from ecosort.domain.exceptions import ProviderUnavailableError
from ecosort.domain.value_objects import ClassificationPayload
from ecosort.infrastructure.llm.gemini.config import MAX_OUTPUT_TOKENS, TEMPERATURE

logger = logging.getLogger(__name__)


def extract_grounding_citations(response: Any) -> list[dict[str, str | None]]:
    """첫 번째 후보의 groundingChunks에서 web 출처 추출.

    web 필드가 없는 chunk는 건너뜁니다. uri/title 검증은 호출 측 몫.
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []

    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    citations: list[dict[str, str | None]] = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        if web is None:
            continue
        citations.append({"uri": web.uri, "title": web.title})
    return citations


class GeminiClassifierAdapter(ClassifierModelPort):
    """Google Gemini API 구현체.

    재시도 없이 1회 호출. 모든 SDK/네트워크 오류는 ProviderUnavailableError로 변환.
    """

    def __init__(
        self,
        model: str = "gemini-3-flash-preview",
        api_key: str | None = None,
    ):
        """초기화.

        Args:
            model: Gemini 모델명 (기본: gemini-3-flash-preview)
            api_key: Google API 키 (None이면 GOOGLE_API_KEY 환경변수 사용)
        """
        if api_key:
            self._client = genai.Client(api_key=api_key)
        else:
            # 환경변수 GOOGLE_API_KEY 자동 사용
            self._client = genai.Client()

        self._model = model
        self._schema = ClassificationPayload.response_schema()
        logger.info(
            "GeminiClassifierAdapter initialized (model=%s)",
            model,
        )

    def _build_config(self, grounded: bool) -> dict[str, Any]:
        config: dict[str, Any] = {
            "response_mime_type": "application/json",
            "response_json_schema": self._schema,
            "max_output_tokens": MAX_OUTPUT_TOKENS,
            "temperature": TEMPERATURE,
        }
        if grounded:
            config["tools"] = [types.Tool(google_search=types.GoogleSearch())]
        return config

    async def generate(
        self,
        prompt: str,
        image: ImagePayload | None = None,
        grounded: bool = False,
    ) -> ModelResponse:
        """구조화 분류 응답 생성.

        Args:
            prompt: 시스템 지시 + 요청 문구
            image: 분석할 이미지 (텍스트 검색이면 None)
            grounded: googleSearch 그라운딩 사용 여부

        Returns:
            원본 응답 (text, citations)
        """
        if image is not None:
            contents: Any = [
                types.Part.from_bytes(data=image.data, mime_type=image.mime_type),
                prompt,
            ]
        else:
            contents = prompt

        logger.debug(
            "Gemini API call starting (model=%s, grounded=%s)",
            self._model,
            grounded,
        )

        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=contents,
                config=self._build_config(grounded),
            )
        except Exception as e:
            logger.error(
                "Gemini API call failed",
                extra={"model": self._model, "error": str(e)},
            )
            raise ProviderUnavailableError(reason=str(e)) from e

        citations = extract_grounding_citations(response) if grounded else []

        logger.debug(
            "Gemini API call completed (citations=%d)",
            len(citations),
        )

        return ModelResponse(text=response.text, citations=citations)

    async def aclose(self) -> None:
        """비동기 SDK 클라이언트(HTTP 세션) 정리."""
        await self._client.aio.aclose()
        logger.info("GeminiClassifierAdapter closed (model=%s)", self._model)
