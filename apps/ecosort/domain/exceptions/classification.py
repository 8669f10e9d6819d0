"""분류 경로 예외.

Provider 실패와 스키마 위반을 구분합니다.
사용자에게 노출되는 메시지는 항상 일반 메시지이며, 상세 원인은 로그로만 남깁니다.
"""

from ecosort.domain.exceptions.base import DomainError

GENERIC_CLASSIFY_MESSAGE = "Failed to classify item."
GENERIC_SEARCH_MESSAGE = "Search failed."


class ClassificationError(DomainError):
    """분류 요청 실패 (베이스).

    Attributes:
        code: 에러 코드 (HTTP 응답, ScanState 용)
        reason: 내부 원인 (로깅 전용)
    """

    code = "CLASSIFICATION_FAILED"

    def __init__(
        self,
        message: str = GENERIC_CLASSIFY_MESSAGE,
        reason: str | None = None,
    ) -> None:
        self.reason = reason
        super().__init__(message)


class ProviderUnavailableError(ClassificationError):
    """네트워크/Provider 오류 또는 빈 응답."""

    code = "CLASSIFICATION_FAILED"


class SchemaViolationError(ClassificationError):
    """응답 본문이 분류 스키마를 위반 (파싱 실패, enum 위반, 필수 필드 누락)."""

    code = "SCHEMA_VIOLATION"


class InvalidImageError(DomainError):
    """이미지 입력 오류 (빈 데이터, 지원하지 않는 MIME 타입).

    분류/이력 상태에 영향을 주지 않습니다.
    """

    def __init__(self, message: str = "Image could not be read") -> None:
        super().__init__(message)


class EmptyQueryError(DomainError):
    """검색어가 비어 있음."""

    def __init__(self) -> None:
        super().__init__("Search query is required")


class UnsupportedModelError(DomainError):
    """지원하지 않는 모델."""

    def __init__(self, model: str, supported_models: list[str]) -> None:
        self.model = model
        self.supported_models = supported_models
        super().__init__(f"Unsupported model: '{model}'")
