"""ScanState Unit Tests."""

from __future__ import annotations

import pytest

from ecosort.application.classify.dto import ScanState
from ecosort.domain.enums import ScanPhase
from ecosort.domain.exceptions import (
    InvalidScanTransitionError,
    ProviderUnavailableError,
    RequestInFlightError,
    SchemaViolationError,
)
from ecosort.domain.value_objects import HistoryEntry


class TestScanStateTransitions:
    """상태 전이 테스트."""

    def test_initial_state_is_idle(self):
        state = ScanState()
        assert state.phase == ScanPhase.IDLE
        assert state.in_flight is False

    def test_begin_from_idle(self):
        state = ScanState().begin()
        assert state.phase == ScanPhase.REQUESTING
        assert state.in_flight is True

    def test_begin_while_requesting_rejected(self):
        with pytest.raises(RequestInFlightError):
            ScanState().begin().begin()

    def test_begin_from_terminal_rejected(self, make_classification):
        entry = HistoryEntry.create(make_classification())
        succeeded = ScanState().begin().succeed(entry)
        with pytest.raises(InvalidScanTransitionError):
            succeeded.begin()

    def test_succeed(self, make_classification):
        entry = HistoryEntry.create(make_classification())
        state = ScanState().begin().succeed(entry)
        assert state.phase == ScanPhase.SUCCEEDED
        assert state.entry == entry
        assert state.error is None

    def test_fail_keeps_code_and_generic_message(self):
        state = ScanState().begin().fail(SchemaViolationError(reason="bad enum"))
        assert state.phase == ScanPhase.FAILED
        assert state.entry is None
        assert state.error == "Failed to classify item."
        assert state.error_code == "SCHEMA_VIOLATION"

    def test_fail_from_idle_rejected(self):
        with pytest.raises(InvalidScanTransitionError):
            ScanState().fail(ProviderUnavailableError())

    def test_reset_from_failed(self):
        state = ScanState().begin().fail(ProviderUnavailableError()).reset()
        assert state == ScanState()

    def test_reset_while_requesting_rejected(self):
        with pytest.raises(RequestInFlightError):
            ScanState().begin().reset()

    def test_to_dict(self):
        state = ScanState().begin().fail(ProviderUnavailableError())
        assert state.to_dict() == {
            "phase": "failed",
            "entry": None,
            "error": "Failed to classify item.",
            "error_code": "CLASSIFICATION_FAILED",
        }
