"""EcoSort 도메인 예외."""

from ecosort.domain.exceptions.base import DomainError
from ecosort.domain.exceptions.classification import (
    ClassificationError,
    EmptyQueryError,
    InvalidImageError,
    ProviderUnavailableError,
    SchemaViolationError,
    UnsupportedModelError,
)
from ecosort.domain.exceptions.scan import (
    ConfirmationRequiredError,
    InvalidScanTransitionError,
    RequestInFlightError,
)
from ecosort.domain.exceptions.storage import StorageError

__all__ = [
    "ClassificationError",
    "ConfirmationRequiredError",
    "DomainError",
    "EmptyQueryError",
    "InvalidImageError",
    "InvalidScanTransitionError",
    "ProviderUnavailableError",
    "RequestInFlightError",
    "SchemaViolationError",
    "StorageError",
    "UnsupportedModelError",
]
