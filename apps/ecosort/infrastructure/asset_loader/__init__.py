"""Asset Loader Infrastructure - YAML Loading."""

from ecosort.infrastructure.asset_loader.asset_repository_impl import FileAssetRepository

__all__ = ["FileAssetRepository"]
