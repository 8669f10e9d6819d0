"""BoundedLog Unit Tests."""

from __future__ import annotations

import pytest

from ecosort.application.history import BoundedLog


class TestBoundedLog:
    """BoundedLog 테스트."""

    def test_newest_first(self):
        log: BoundedLog[int] = BoundedLog(3)
        for i in range(3):
            log.push(i)
        assert log.snapshot() == [2, 1, 0]

    def test_evicts_oldest_at_capacity(self):
        log: BoundedLog[int] = BoundedLog(3, [2, 1, 0])

        evicted = log.push(3)

        assert evicted == 0
        assert log.snapshot() == [3, 2, 1]
        assert len(log) == 3

    def test_no_eviction_below_capacity(self):
        log: BoundedLog[str] = BoundedLog(2)
        assert log.push("a") is None

    def test_initial_items_truncated_to_capacity(self):
        log: BoundedLog[int] = BoundedLog(2, [5, 4, 3])
        assert log.snapshot() == [5, 4]

    def test_clear(self):
        log: BoundedLog[int] = BoundedLog(2, [1])
        log.clear()
        assert len(log) == 0
        assert list(log) == []

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            BoundedLog(0)
