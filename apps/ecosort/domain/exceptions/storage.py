"""로컬 저장소 예외."""

from ecosort.domain.exceptions.base import DomainError


class StorageError(DomainError):
    """저장소 읽기/쓰기 실패.

    호출 측에서는 비치명적 오류로 취급합니다 (메모리 상태가 세션 동안 유효).
    """

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Storage operation failed for '{key}': {reason}")
