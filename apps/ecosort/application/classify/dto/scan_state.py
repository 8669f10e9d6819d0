"""ScanState - 스캔 진행 상태 레코드."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ecosort.domain.enums import ScanPhase
from ecosort.domain.exceptions import (
    ClassificationError,
    InvalidScanTransitionError,
    RequestInFlightError,
)
from ecosort.domain.value_objects import HistoryEntry


@dataclass(frozen=True)
class ScanState:
    """단일 상태 머신 레코드.

    전이:
        IDLE → REQUESTING (begin)
        REQUESTING → SUCCEEDED (succeed) | FAILED (fail)
        SUCCEEDED | FAILED → IDLE (reset)
    """

    phase: ScanPhase = ScanPhase.IDLE
    entry: HistoryEntry | None = None
    error: str | None = None
    error_code: str | None = None

    @property
    def in_flight(self) -> bool:
        return self.phase == ScanPhase.REQUESTING

    def begin(self) -> ScanState:
        if self.phase == ScanPhase.REQUESTING:
            raise RequestInFlightError()
        if self.phase != ScanPhase.IDLE:
            raise InvalidScanTransitionError(self.phase.value, ScanPhase.REQUESTING.value)
        return ScanState(phase=ScanPhase.REQUESTING)

    def succeed(self, entry: HistoryEntry) -> ScanState:
        self._require(ScanPhase.REQUESTING, ScanPhase.SUCCEEDED)
        return ScanState(phase=ScanPhase.SUCCEEDED, entry=entry)

    def fail(self, error: ClassificationError) -> ScanState:
        # 이전 결과는 남기지 않음
        self._require(ScanPhase.REQUESTING, ScanPhase.FAILED)
        return ScanState(
            phase=ScanPhase.FAILED,
            error=error.message,
            error_code=error.code,
        )

    def reset(self) -> ScanState:
        if self.phase == ScanPhase.REQUESTING:
            raise RequestInFlightError()
        return replace(self, phase=ScanPhase.IDLE, entry=None, error=None, error_code=None)

    def _require(self, expected: ScanPhase, target: ScanPhase) -> None:
        if self.phase != expected:
            raise InvalidScanTransitionError(self.phase.value, target.value)

    def to_dict(self) -> dict[str, Any]:
        """API 응답용 dict."""
        return {
            "phase": self.phase.value,
            "entry": self.entry.to_dict() if self.entry else None,
            "error": self.error,
            "error_code": self.error_code,
        }
