"""Exception Handlers.

도메인 예외를 HTTP 응답으로 변환합니다.
분류 실패는 일반 메시지만 노출하고, 상세 원인은 로그로 남깁니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ecosort.domain.exceptions import (
    ClassificationError,
    ConfirmationRequiredError,
    DomainError,
    EmptyQueryError,
    InvalidImageError,
    InvalidScanTransitionError,
    RequestInFlightError,
    UnsupportedModelError,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(InvalidImageError)
    async def invalid_image_handler(request: Request, exc: InvalidImageError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_IMAGE"},
        )

    @app.exception_handler(EmptyQueryError)
    async def empty_query_handler(request: Request, exc: EmptyQueryError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "EMPTY_QUERY"},
        )

    @app.exception_handler(ConfirmationRequiredError)
    async def confirmation_required_handler(
        request: Request, exc: ConfirmationRequiredError
    ):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "CONFIRMATION_REQUIRED"},
        )

    @app.exception_handler(UnsupportedModelError)
    async def unsupported_model_handler(request: Request, exc: UnsupportedModelError):
        return JSONResponse(
            status_code=400,
            content={
                "detail": {
                    "error": "unsupported_model",
                    "message": exc.message,
                    "supported_models": exc.supported_models,
                },
                "code": "UNSUPPORTED_MODEL",
            },
        )

    @app.exception_handler(RequestInFlightError)
    async def request_in_flight_handler(request: Request, exc: RequestInFlightError):
        return JSONResponse(
            status_code=409,
            content={"detail": exc.message, "code": "REQUEST_IN_FLIGHT"},
        )

    @app.exception_handler(InvalidScanTransitionError)
    async def invalid_transition_handler(
        request: Request, exc: InvalidScanTransitionError
    ):
        return JSONResponse(
            status_code=409,
            content={"detail": exc.message, "code": "INVALID_SCAN_TRANSITION"},
        )

    @app.exception_handler(ClassificationError)
    async def classification_error_handler(request: Request, exc: ClassificationError):
        logger.error(
            "Classification request failed",
            extra={"path": request.url.path, "code": exc.code, "reason": exc.reason},
        )
        return JSONResponse(
            status_code=502,
            content={"detail": exc.message, "code": exc.code},
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "DOMAIN_ERROR"},
        )
