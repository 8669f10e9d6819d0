"""ImagePayload - 분류 요청 이미지."""

from __future__ import annotations

from dataclasses import dataclass

from ecosort.domain.exceptions import InvalidImageError

ALLOWED_IMAGE_TYPES = frozenset(
    {
        "image/jpeg",
        "image/png",
        "image/webp",
        "image/heic",
        "image/heif",
    }
)

# Gemini inline data 한도
MAX_IMAGE_BYTES = 20 * 1024 * 1024


@dataclass(frozen=True, slots=True)
class ImagePayload:
    """이미지 바이트 + MIME 타입.

    생성 시점에 검증하므로 잘못된 입력은 분류 상태를 건드리지 않습니다.

    Raises:
        InvalidImageError: 빈 데이터, 크기 초과, 지원하지 않는 MIME 타입
    """

    data: bytes
    mime_type: str = "image/jpeg"

    def __post_init__(self) -> None:
        if not self.data:
            raise InvalidImageError("Image is empty")
        if len(self.data) > MAX_IMAGE_BYTES:
            raise InvalidImageError(
                f"Image exceeds {MAX_IMAGE_BYTES // (1024 * 1024)}MB limit"
            )
        if self.mime_type not in ALLOWED_IMAGE_TYPES:
            raise InvalidImageError(f"Unsupported image type: '{self.mime_type}'")

    @classmethod
    def from_upload(cls, data: bytes, content_type: str | None) -> ImagePayload:
        """업로드 파일로부터 생성 (charset 등 파라미터 제거)."""
        mime_type = (content_type or "image/jpeg").split(";")[0].strip().lower()
        return cls(data=data, mime_type=mime_type)
