"""Dependency Container.

Clean Architecture의 Composition Root입니다.
상태를 가진 객체(저장소, 오케스트레이터)는 앱 lifespan에서 한 번만 조립하고,
요청 경로의 Provider는 조립된 인스턴스를 읽기만 합니다.
"""

from __future__ import annotations

import logging

from ecosort.application.classify.client import ClassificationClient
from ecosort.application.classify.commands import ScanOrchestrator
from ecosort.application.classify.ports import ClassifierModelPort
from ecosort.application.common.ports import AssetRepositoryPort, StateStoragePort
from ecosort.application.game import GameProgressStore, SortingGame
from ecosort.application.history import HistoryStore
from ecosort.application.preferences import LocationPreferenceStore
from ecosort.domain.exceptions import UnsupportedModelError
from ecosort.domain.value_objects import DEFAULT_COUNTRY
from ecosort.infrastructure.asset_loader import FileAssetRepository
from ecosort.infrastructure.llm import GeminiClassifierAdapter, GPTClassifierAdapter
from ecosort.infrastructure.persistence_file import FileStateStorage
from ecosort.infrastructure.persistence_redis import RedisStateStorage
from ecosort.setup.config import Settings, get_settings

logger = logging.getLogger(__name__)


# ============================================================
# Infrastructure Factories
# ============================================================


def build_state_storage(settings: Settings) -> StateStoragePort:
    """StateStorage 생성 (file | redis)."""
    if settings.storage_backend == "redis":
        return RedisStateStorage(redis_url=settings.redis_url)
    return FileStateStorage(base_dir=settings.storage_dir)


def build_classifier_model(
    settings: Settings,
    model: str | None = None,
) -> ClassifierModelPort:
    """ClassifierModel 생성.

    Args:
        settings: 서비스 설정
        model: 모델명 (None이면 기본값 사용)

    Returns:
        ClassifierModelPort 구현체

    Raises:
        UnsupportedModelError: 지원하지 않는 모델인 경우
    """
    if model is None:
        model = settings.llm_default_model

    # 가드레일: 지원 모델 검증
    if not settings.validate_model(model):
        raise UnsupportedModelError(model, settings.get_supported_models())

    provider = settings.resolve_provider(model)
    api_key = settings.get_api_key(provider)

    if provider == "gemini":
        return GeminiClassifierAdapter(model=model, api_key=api_key)
    return GPTClassifierAdapter(model=model, api_key=api_key)


# ============================================================
# Container
# ============================================================


class Container:
    """의존성 컨테이너.

    어댑터(storage, assets, model)를 주입하면 그대로 사용하고,
    없으면 init()에서 설정 기반으로 생성합니다.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        storage: StateStoragePort | None = None,
        assets: AssetRepositoryPort | None = None,
        model: ClassifierModelPort | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._storage = storage
        self._assets = assets
        self._model = model
        self._history: HistoryStore | None = None
        self._locations: LocationPreferenceStore | None = None
        self._progress: GameProgressStore | None = None
        self._game: SortingGame | None = None
        self._orchestrator: ScanOrchestrator | None = None

    @property
    def initialized(self) -> bool:
        return self._orchestrator is not None

    async def init(self) -> None:
        """어댑터 생성 → 저장소/오케스트레이터 조립 및 영속 상태 로딩."""
        if self._storage is None:
            self._storage = build_state_storage(self._settings)
        if self._assets is None:
            self._assets = FileAssetRepository(assets_path=self._settings.assets_path)
        if self._model is None:
            self._model = build_classifier_model(self._settings)

        regions = self._assets.get_regions()
        default_country = regions[0] if regions else DEFAULT_COUNTRY

        history = HistoryStore(storage=self._storage, limit=self._settings.history_limit)
        locations = LocationPreferenceStore(
            storage=self._storage, default_country=default_country
        )
        progress = GameProgressStore(storage=self._storage)
        await history.load()
        await locations.load()
        await progress.load()

        self._history = history
        self._locations = locations
        self._progress = progress
        self._game = SortingGame(items=self._assets.get_sort_game_items(), progress=progress)
        self._orchestrator = ScanOrchestrator(
            client=ClassificationClient(model=self._model),
            history=history,
            locations=locations,
            progress=progress,
        )
        logger.info(
            "Container initialized",
            extra={"storage_backend": type(self._storage).__name__, "history": len(history)},
        )

    async def close(self) -> None:
        """리소스 정리 (모델 HTTP 세션, Redis 커넥션)."""
        try:
            if self._model is not None:
                await self._model.aclose()
        finally:
            if self._storage is not None:
                await self._storage.aclose()
        logger.info("Container closed")

    # ─────────────────────────────────────────────────────────────
    # Accessors
    # ─────────────────────────────────────────────────────────────

    def _require(self, value):
        if value is None:
            raise RuntimeError("Container not initialized")
        return value

    @property
    def assets(self) -> AssetRepositoryPort:
        return self._require(self._assets)

    @property
    def history(self) -> HistoryStore:
        return self._require(self._history)

    @property
    def locations(self) -> LocationPreferenceStore:
        return self._require(self._locations)

    @property
    def progress(self) -> GameProgressStore:
        return self._require(self._progress)

    @property
    def game(self) -> SortingGame:
        return self._require(self._game)

    @property
    def orchestrator(self) -> ScanOrchestrator:
        return self._require(self._orchestrator)
