"""EcoSort API Main Application.

분리배출 분류 서비스:
- 이미지 분류 / 품목 검색 (검색 그라운딩)
- 스캔 이력, 지역 설정, 미니게임
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ecosort.presentation.http.controllers import (
    game_router,
    health_router,
    history_router,
    location_router,
    scan_router,
)
from ecosort.presentation.http.errors import register_exception_handlers
from ecosort.setup.config import get_settings
from ecosort.setup.container import Container
from ecosort.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI 라이프스팬 이벤트.

    Startup: Container 조립 (저장소 로딩, 모델 클라이언트 생성)
    Shutdown: 모델 HTTP 클라이언트, Redis 커넥션 정리
    """
    logger.info(f"Starting {settings.service_name} v{settings.service_version}")
    container: Container = app.state.container
    if not container.initialized:
        await container.init()
    try:
        yield
    finally:
        await container.close()
        logger.info(f"Shutting down {settings.service_name}")


def create_app(container: Container | None = None) -> FastAPI:
    """FastAPI 애플리케이션 생성.

    Args:
        container: 미리 조립된 Container (None이면 lifespan에서 설정 기반으로 조립)
    """
    setup_logging()

    app = FastAPI(
        title="EcoSort API",
        description="AI-powered waste classification and disposal guidance",
        version=settings.service_version,
        docs_url="/api/v1/docs",
        redoc_url="/api/v1/redoc",
        openapi_url="/api/v1/openapi.json",
        lifespan=lifespan,
    )
    app.state.container = container or Container(settings)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    register_exception_handlers(app)

    # Routers
    app.include_router(health_router)
    app.include_router(scan_router, prefix="/api/v1")
    app.include_router(history_router, prefix="/api/v1")
    app.include_router(location_router, prefix="/api/v1")
    app.include_router(game_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
