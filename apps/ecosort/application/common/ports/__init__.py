"""Common Ports (ABC)."""

from ecosort.application.common.ports.asset_repository import AssetRepositoryPort
from ecosort.application.common.ports.state_storage import StateStoragePort

__all__ = [
    "AssetRepositoryPort",
    "StateStoragePort",
]
