"""State Storage Port - 로컬 영속 저장소 추상화."""

from abc import ABC, abstractmethod


class StateStoragePort(ABC):
    """키/값 문자열 저장소 포트 (async).

    파일 시스템, Redis 등 다양한 구현체를 DI로 주입.
    요청 경로(이벤트 루프)에서 호출되므로 블로킹 I/O를 직접 수행하지 않습니다.
    구현체는 실패 시 StorageError를 발생시킵니다.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """값 조회.

        Args:
            key: 저장 키 (예: "ecosort:history")

        Returns:
            저장된 문자열 (없으면 None)
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """값 저장 (덮어쓰기).

        Args:
            key: 저장 키
            value: 직렬화된 문자열
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """값 삭제 (없으면 무시).

        Args:
            key: 저장 키
        """
        pass

    @abstractmethod
    async def aclose(self) -> None:
        """연결 등 리소스 정리."""
        pass
