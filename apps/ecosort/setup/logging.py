"""Logging Configuration.

기본은 ECS 호환 JSON 로깅, 로컬 개발 시 log_format=text로 사람이 읽는 포맷.
create_app()이 여러 번 호출되어도 핸들러/레코드 팩토리는 한 번만 설치됩니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import ecs_logging

from ecosort.setup.config import get_settings

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# 분류 SDK / HTTP 클라이언트의 요청 단위 로그
NOISY_LOGGERS = ("httpx", "httpcore", "google_genai", "openai", "urllib3")

_factory_installed = False


def _service_record_factory(service: dict[str, str]):
    old_factory = logging.getLogRecordFactory()

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = old_factory(*args, **kwargs)
        record.service = service
        return record

    return record_factory


def setup_logging() -> None:
    """로깅 설정."""
    global _factory_installed
    settings = get_settings()

    handler = logging.StreamHandler(sys.stdout)
    if settings.log_format == "text":
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    else:
        handler.setFormatter(ecs_logging.StdlibFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # 서비스 메타데이터 (ECS service.*)
    if not _factory_installed:
        logging.setLogRecordFactory(
            _service_record_factory(
                {
                    "name": settings.service_name,
                    "version": settings.service_version,
                    "environment": settings.environment,
                }
            )
        )
        _factory_installed = True

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
