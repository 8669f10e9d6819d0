"""EcoSort Dependencies - FastAPI Dependency Injection.

lifespan에서 조립된 Container(app.state.container)를 요청별로 꺼내 씁니다.
Provider는 인스턴스를 만들지 않으므로 동시 첫 요청에서도 상태 객체는 하나입니다.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from ecosort.application.classify.commands import ScanOrchestrator
from ecosort.application.common.ports import AssetRepositoryPort
from ecosort.application.game import GameProgressStore, SortingGame
from ecosort.application.history import HistoryStore
from ecosort.application.preferences import LocationPreferenceStore
from ecosort.setup.container import Container

# ─────────────────────────────────────────────────────────────────────────────
# Container
# ─────────────────────────────────────────────────────────────────────────────


async def get_container(request: Request) -> Container:
    """lifespan에서 초기화된 Container 반환."""
    return request.app.state.container


ContainerDep = Annotated[Container, Depends(get_container)]


# ─────────────────────────────────────────────────────────────────────────────
# Application Dependencies (Stores / Orchestrator)
# ─────────────────────────────────────────────────────────────────────────────


async def get_asset_repository(container: ContainerDep) -> AssetRepositoryPort:
    """AssetRepository 반환."""
    return container.assets


async def get_history_store(container: ContainerDep) -> HistoryStore:
    """HistoryStore 반환."""
    return container.history


async def get_location_store(container: ContainerDep) -> LocationPreferenceStore:
    """LocationPreferenceStore 반환."""
    return container.locations


async def get_progress_store(container: ContainerDep) -> GameProgressStore:
    """GameProgressStore 반환."""
    return container.progress


async def get_sorting_game(container: ContainerDep) -> SortingGame:
    """SortingGame 반환."""
    return container.game


async def get_scan_orchestrator(container: ContainerDep) -> ScanOrchestrator:
    """ScanOrchestrator 반환 (ScanState 보유)."""
    return container.orchestrator


# ─────────────────────────────────────────────────────────────────────────────
# Type Aliases for Dependency Injection
# ─────────────────────────────────────────────────────────────────────────────


AssetRepositoryDep = Annotated[AssetRepositoryPort, Depends(get_asset_repository)]
HistoryStoreDep = Annotated[HistoryStore, Depends(get_history_store)]
LocationStoreDep = Annotated[LocationPreferenceStore, Depends(get_location_store)]
ProgressStoreDep = Annotated[GameProgressStore, Depends(get_progress_store)]
SortingGameDep = Annotated[SortingGame, Depends(get_sorting_game)]
ScanOrchestratorDep = Annotated[ScanOrchestrator, Depends(get_scan_orchestrator)]
