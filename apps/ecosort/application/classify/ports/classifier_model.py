"""Classifier Model Port - 생성형 AI 분류 호출 추상화."""

from abc import ABC, abstractmethod

from ecosort.application.classify.dto.image_payload import ImagePayload
from ecosort.application.classify.dto.model_response import ModelResponse


class ClassifierModelPort(ABC):
    """분류 모델 포트.

    Gemini, OpenAI GPT 등 다양한 구현체를 DI로 주입.
    구현체는 응답 스키마(ClassificationPayload)로 구조화 출력을 강제하고,
    재시도 없이 1회만 호출합니다.
    """

    @abstractmethod
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
            grounded: 검색 그라운딩 사용 여부 (출처 반환)

        Returns:
            원본 응답 (text, citations)

        Raises:
            ProviderUnavailableError: 네트워크/Provider 오류
        """
        pass

    @abstractmethod
    async def aclose(self) -> None:
        """SDK/HTTP 클라이언트 정리 (앱 종료 시 1회)."""
        pass
