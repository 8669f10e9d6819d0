"""File Asset Repository - AssetRepositoryPort 구현체.

파일 시스템 기반 YAML 로딩 (지역 목록, 미니게임 항목).
"""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Any

import yaml

from ecosort.application.common.ports.asset_repository import AssetRepositoryPort
from ecosort.domain.value_objects import SortGameItem

logger = logging.getLogger(__name__)


class FileAssetRepository(AssetRepositoryPort):
    """파일 시스템 기반 에셋 리포지토리."""

    def __init__(self, assets_path: str | Path):
        """초기화.

        Args:
            assets_path: 정적 에셋 경로 (data/ 포함)
        """
        self._assets_path = Path(assets_path)
        self._data_dir = self._assets_path / "data"
        self._cache: dict[str, Any] = {}
        logger.info(
            "FileAssetRepository initialized (path=%s)",
            self._assets_path,
        )

    def _load_yaml(self, name: str) -> Any:
        cache_key = f"yaml:{name}"
        if cache_key in self._cache:
            return self._cache[cache_key]

        filepath = self._data_dir / f"{name}.yaml"
        if not filepath.exists():
            raise FileNotFoundError(f"Asset not found: {filepath}")

        with filepath.open("r", encoding="utf-8") as f:
            content = f.read()

        # SHA1 해시로 로딩 검증
        digest = hashlib.sha1(content.encode("utf-8")).hexdigest()
        logger.info(
            "Asset loaded (path=%s, len=%d, sha1=%s)",
            filepath,
            len(content),
            digest,
        )

        data = yaml.safe_load(content)
        self._cache[cache_key] = data
        return data

    def get_regions(self) -> list[str]:
        """지원 지역 목록.

        Returns:
            regions.yaml의 regions 목록
        """
        data = self._load_yaml("regions") or {}
        return [str(region) for region in data.get("regions", [])]

    def get_sort_game_items(self) -> list[SortGameItem]:
        """미니게임 항목 목록.

        Returns:
            sort_game_items.yaml의 items 목록
        """
        data = self._load_yaml("sort_game_items") or {}
        return [SortGameItem.from_dict(item) for item in data.get("items", [])]
