"""Classify DTOs."""

from ecosort.application.classify.dto.image_payload import ImagePayload
from ecosort.application.classify.dto.model_response import ModelResponse
from ecosort.application.classify.dto.scan_state import ScanState

__all__ = [
    "ImagePayload",
    "ModelResponse",
    "ScanState",
]
