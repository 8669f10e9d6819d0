"""Asset Repository Port - 정적 에셋 로딩 추상화."""

from abc import ABC, abstractmethod

from ecosort.domain.value_objects import SortGameItem


class AssetRepositoryPort(ABC):
    """에셋 리포지토리 포트.

    파일 시스템, ConfigMap 등 다양한 구현체를 DI로 주입.
    """

    @abstractmethod
    def get_regions(self) -> list[str]:
        """지원 지역 목록.

        Returns:
            지역명 목록 (첫 항목이 기본값)
        """
        pass

    @abstractmethod
    def get_sort_game_items(self) -> list[SortGameItem]:
        """미니게임 항목 목록.

        Returns:
            SortGameItem 목록 (출제 순서)
        """
        pass
