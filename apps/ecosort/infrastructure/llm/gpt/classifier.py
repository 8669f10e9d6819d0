"""GPT Classifier Adapter - ClassifierModelPort 구현체.

OpenAI Responses API 사용 (gpt-5.1 등).
- text.format json_schema로 구조화 출력
- 텍스트 검색은 web_search 도구로 그라운딩 (url_citation 주석)
"""

from __future__ import annotations

import base64
import logging
from typing import Any

import httpx
from openai import AsyncOpenAI

from ecosort.application.classify.dto.image_payload import ImagePayload
from ecosort.application.classify.dto.model_response import ModelResponse
from ecosort.application.classify.ports.classifier_model import ClassifierModelPort
from ecosort.domain.exceptions import ProviderUnavailableError
from ecosort.domain.value_objects import ClassificationPayload
from ecosort.infrastructure.llm.gpt.config import (
    MAX_RETRIES,
    OPENAI_LIMITS,
    OPENAI_TIMEOUT,
)

logger = logging.getLogger(__name__)


def extract_url_citations(response: Any) -> list[dict[str, str | None]]:
    """message 출력의 url_citation 주석을 출처로 변환."""
    citations: list[dict[str, str | None]] = []
    for item in getattr(response, "output", None) or []:
        if getattr(item, "type", None) != "message":
            continue
        for part in getattr(item, "content", None) or []:
            for annotation in getattr(part, "annotations", None) or []:
                if getattr(annotation, "type", None) != "url_citation":
                    continue
                citations.append(
                    {
                        "uri": getattr(annotation, "url", None),
                        "title": getattr(annotation, "title", None),
                    }
                )
    return citations


class GPTClassifierAdapter(ClassifierModelPort):
    """GPT Responses API 구현체."""

    def __init__(
        self,
        model: str = "gpt-5.1",
        api_key: str | None = None,
    ):
        """초기화.

        Args:
            model: GPT 모델명 (기본: gpt-5.1)
            api_key: OpenAI API 키 (None이면 환경변수 사용)
        """
        self._http_client = httpx.AsyncClient(
            timeout=OPENAI_TIMEOUT,
            limits=OPENAI_LIMITS,
        )
        self._client = AsyncOpenAI(
            api_key=api_key,
            http_client=self._http_client,
            max_retries=MAX_RETRIES,
        )
        self._model = model
        self._text_format = {
            "format": {
                "type": "json_schema",
                "name": "waste_classification",
                "schema": ClassificationPayload.response_schema(),
                "strict": False,
            }
        }
        logger.info(
            "GPTClassifierAdapter initialized (model=%s)",
            model,
        )

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
            grounded: web_search 그라운딩 사용 여부

        Returns:
            원본 응답 (text, citations)
        """
        content_items: list[dict[str, Any]] = [{"type": "input_text", "text": prompt}]
        if image is not None:
            encoded = base64.b64encode(image.data).decode("ascii")
            content_items.append(
                {
                    "type": "input_image",
                    "image_url": f"data:{image.mime_type};base64,{encoded}",
                    "detail": "low",
                }
            )

        request: dict[str, Any] = {
            "model": self._model,
            "input": [{"role": "user", "content": content_items}],
            "text": self._text_format,
        }
        if grounded:
            request["tools"] = [{"type": "web_search"}]

        logger.debug(
            "GPT API call starting (model=%s, grounded=%s)",
            self._model,
            grounded,
        )

        try:
            response = await self._client.responses.create(**request)
        except Exception as e:
            logger.error(
                "GPT API call failed",
                extra={"model": self._model, "error": str(e)},
            )
            raise ProviderUnavailableError(reason=str(e)) from e

        citations = extract_url_citations(response) if grounded else []

        logger.debug("GPT API call completed (citations=%d)", len(citations))

        return ModelResponse(text=response.output_text, citations=citations)

    async def aclose(self) -> None:
        """AsyncOpenAI 및 주입한 httpx.AsyncClient 정리."""
        await self._client.close()
        logger.info("GPTClassifierAdapter closed (model=%s)", self._model)
