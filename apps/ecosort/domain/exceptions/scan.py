"""스캔 상태 예외."""

from ecosort.domain.exceptions.base import DomainError


class RequestInFlightError(DomainError):
    """이미 진행 중인 분류 요청이 있음."""

    def __init__(self) -> None:
        super().__init__("A classification request is already in progress")


class InvalidScanTransitionError(DomainError):
    """허용되지 않는 상태 전이."""

    def __init__(self, current: str, target: str) -> None:
        self.current = current
        self.target = target
        super().__init__(f"Cannot move scan state from '{current}' to '{target}'")


class ConfirmationRequiredError(DomainError):
    """명시적 사용자 확인 필요 (이력 전체 삭제 등)."""

    def __init__(self, action: str) -> None:
        self.action = action
        super().__init__(f"Confirmation required for: {action}")
