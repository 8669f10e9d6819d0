"""Redis State Storage - StateStoragePort 구현체.

여러 인스턴스가 같은 이력/설정을 공유해야 할 때 사용.
요청 경로에서 호출되므로 redis.asyncio 클라이언트를 사용합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from ecosort.application.common.ports.state_storage import StateStoragePort
from ecosort.domain.exceptions import StorageError

if TYPE_CHECKING:
    import redis.asyncio as aioredis

logger = logging.getLogger(__name__)

# Redis connection settings
SOCKET_CONNECT_TIMEOUT = 5.0  # seconds
SOCKET_TIMEOUT = 5.0  # seconds


def _build_async_client(redis_url: str) -> "aioredis.Redis":
    """비동기 Redis 클라이언트 생성 (재시도 없음)."""
    import redis.asyncio as aioredis

    return aioredis.from_url(
        redis_url,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=SOCKET_CONNECT_TIMEOUT,
        socket_timeout=SOCKET_TIMEOUT,
    )


class RedisStateStorage(StateStoragePort):
    """Redis 기반 상태 저장소 (TTL 없음)."""

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        client: "aioredis.Redis | None" = None,
    ):
        """초기화.

        Args:
            redis_url: Redis URL
            client: 주입할 클라이언트 (테스트용, None이면 lazy 생성)
        """
        self._redis_url = redis_url
        self._client = client
        logger.info("RedisStateStorage initialized (url=%s)", self._redis_url)

    def _get_client(self) -> "aioredis.Redis":
        """Lazy Redis 클라이언트 생성."""
        if self._client is None:
            self._client = _build_async_client(self._redis_url)
        return self._client

    async def get(self, key: str) -> str | None:
        try:
            value = await self._get_client().get(key)
        except RedisError as e:
            raise StorageError(key, str(e)) from e
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str) -> None:
        try:
            await self._get_client().set(key, value)
        except RedisError as e:
            raise StorageError(key, str(e)) from e

    async def delete(self, key: str) -> None:
        try:
            await self._get_client().delete(key)
        except RedisError as e:
            raise StorageError(key, str(e)) from e

    async def aclose(self) -> None:
        """클라이언트 연결 풀 정리."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
