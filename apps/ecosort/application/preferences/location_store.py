"""LocationPreferenceStore - 지역 설정 저장소."""

from __future__ import annotations

import logging

import anyio
from pydantic import ValidationError

from ecosort.application.common.ports.state_storage import StateStoragePort
from ecosort.domain.exceptions import StorageError
from ecosort.domain.value_objects import DEFAULT_COUNTRY, Location

logger = logging.getLogger(__name__)

LOCATION_KEY = "ecosort:location"


class LocationPreferenceStore:
    """단일 {country} 레코드 저장소.

    손상된 레코드는 기본 지역으로 대체합니다.
    """

    def __init__(
        self,
        storage: StateStoragePort,
        default_country: str = DEFAULT_COUNTRY,
    ):
        self._storage = storage
        self._default = Location(country=default_country)
        self._location = self._default
        self._lock = anyio.Lock()

    async def load(self) -> None:
        """영속 상태 로딩."""
        self._location = await self._read()

    async def _read(self) -> Location:
        try:
            raw = await self._storage.get(LOCATION_KEY)
        except StorageError as e:
            logger.warning(
                "location_load_failed",
                extra={"key": LOCATION_KEY, "error": e.reason},
            )
            return self._default

        if not raw:
            return self._default

        try:
            return Location.model_validate_json(raw)
        except ValidationError:
            logger.warning("location_load_malformed", extra={"key": LOCATION_KEY})
            return self._default

    def get(self) -> Location:
        """현재 지역."""
        return self._location

    async def update(self, country: str) -> Location:
        """지역 변경 후 영속화.

        Args:
            country: 지역명 (자유 형식)

        Returns:
            변경된 Location
        """
        location = Location(country=country)
        self._location = location
        async with self._lock:
            try:
                await self._storage.set(LOCATION_KEY, self._location.model_dump_json())
            except StorageError as e:
                logger.warning(
                    "location_persist_failed",
                    extra={"key": LOCATION_KEY, "error": e.reason},
                )
        logger.info("Location updated", extra={"country": country})
        return location
