"""Scan Phase Enum."""

from enum import Enum


class ScanPhase(str, Enum):
    """스캔 요청 상태.

    Idle → Requesting → {Succeeded, Failed} → Idle
    """

    IDLE = "idle"
    REQUESTING = "requesting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """종료 상태(성공/실패)인지 확인."""
        return self in (ScanPhase.SUCCEEDED, ScanPhase.FAILED)
