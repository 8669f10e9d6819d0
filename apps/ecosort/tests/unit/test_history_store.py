"""HistoryStore Unit Tests."""

from __future__ import annotations

import json
import time

import anyio
import pytest

from ecosort.application.history import HISTORY_KEY, HistoryStore


async def loaded_store(storage, limit: int = 50) -> HistoryStore:
    store = HistoryStore(storage, limit=limit)
    await store.load()
    return store


class TestHistoryRecord:
    """record() 테스트."""

    @pytest.mark.anyio
    async def test_bound_and_order(self, storage, make_classification):
        """51건 기록 → 최신 50건만 최신순 유지."""
        # Given
        store = await loaded_store(storage, limit=50)
        entries = [await store.record(make_classification()) for _ in range(51)]

        # When
        kept = store.entries()

        # Then
        assert len(kept) == 50
        assert kept[0].id == entries[-1].id
        assert kept[-1].id == entries[1].id
        assert entries[0].id not in {entry.id for entry in kept}

    @pytest.mark.anyio
    async def test_persists_camel_case(self, storage, make_classification):
        store = await loaded_store(storage)
        entry = await store.record(
            make_classification(),
            image_url="https://img.example/1.jpg",
            is_manual=False,
        )

        persisted = json.loads(storage.data[HISTORY_KEY])

        assert persisted[0]["id"] == entry.id
        assert persisted[0]["imageUrl"] == "https://img.example/1.jpg"
        assert persisted[0]["isManualSearch"] is False
        assert isinstance(persisted[0]["timestamp"], int)

    @pytest.mark.anyio
    async def test_reload_from_storage(self, storage, make_classification):
        first = await loaded_store(storage)
        recorded = await first.record(make_classification(), is_manual=True)

        reloaded = await loaded_store(storage)

        assert [entry.id for entry in reloaded.entries()] == [recorded.id]
        assert reloaded.entries()[0].is_manual_search is True

    @pytest.mark.anyio
    async def test_storage_failure_is_non_fatal(self, storage, make_classification):
        """저장 실패해도 메모리 상태는 갱신."""
        store = await loaded_store(storage)
        storage.fail = True

        await store.record(make_classification())

        assert len(store) == 1

    @pytest.mark.anyio
    async def test_concurrent_records_persist_latest_snapshot(
        self, storage, make_classification
    ):
        """동시 기록 → 마지막으로 저장된 값에 모든 항목 포함."""
        store = await loaded_store(storage)
        storage.set_delay = 0.05

        async with anyio.create_task_group() as tg:
            for _ in range(3):
                tg.start_soon(store.record, make_classification())

        persisted = json.loads(storage.data[HISTORY_KEY])
        assert len(persisted) == 3
        assert [item["id"] for item in persisted] == [e.id for e in store.entries()]


class TestHistoryRecordEventLoop:
    """느린 저장소에서도 이벤트 루프가 멈추지 않는지 검증."""

    @pytest.mark.anyio
    async def test_slow_storage_keeps_loop_responsive(self, storage, make_classification):
        """set()이 0.5초 걸려도 50ms 주기 작업의 최대 간격은 짧게 유지."""
        # Given
        store = await loaded_store(storage)
        storage.set_delay = 0.5
        gaps: list[float] = []
        done = anyio.Event()

        async def ticker() -> None:
            last = time.monotonic()
            while not done.is_set():
                await anyio.sleep(0.05)
                now = time.monotonic()
                gaps.append(now - last)
                last = now

        # When
        async with anyio.create_task_group() as tg:
            tg.start_soon(ticker)
            await store.record(make_classification())
            done.set()

        # Then
        assert len(gaps) >= 5
        assert max(gaps) < 0.2


class TestHistoryLoad:
    """로딩 테스트."""

    def test_construction_does_not_read_storage(self, storage):
        storage.fail = True
        assert len(HistoryStore(storage)) == 0

    @pytest.mark.anyio
    async def test_malformed_payload_is_empty(self, storage):
        storage.data[HISTORY_KEY] = '{"not": "a list"'
        assert (await loaded_store(storage)).entries() == []

    @pytest.mark.anyio
    async def test_invalid_entries_are_empty(self, storage):
        storage.data[HISTORY_KEY] = json.dumps([{"id": "x"}])
        assert len(await loaded_store(storage)) == 0

    @pytest.mark.anyio
    async def test_unreadable_storage_is_empty(self, storage):
        storage.fail = True
        assert len(await loaded_store(storage)) == 0


class TestHistoryStats:
    """stats() 테스트."""

    @pytest.mark.anyio
    async def test_diversion_rate(self, storage, make_classification):
        """4건 중 재활용 3건 → 75%."""
        store = await loaded_store(storage)
        for stream in ["Recyclables", "Recyclables", "Organic", "Recyclables"]:
            await store.record(make_classification(stream))

        stats = store.stats()

        assert stats.total == 4
        assert stats.recyclables == 3
        assert stats.diversion_rate == 75
        assert stats.to_dict() == {"total": 4, "recyclables": 3, "diversionRate": 75}

    def test_empty_history(self, storage):
        stats = HistoryStore(storage).stats()
        assert (stats.total, stats.recyclables, stats.diversion_rate) == (0, 0, 0)

    @pytest.mark.anyio
    async def test_rounds_half_up(self, storage, make_classification):
        """1/8 = 12.5% → 13."""
        store = await loaded_store(storage)
        await store.record(make_classification("Recyclables"))
        for _ in range(7):
            await store.record(make_classification("Residual"))
        assert store.stats().diversion_rate == 13

    @pytest.mark.anyio
    async def test_rounds_down_below_half(self, storage, make_classification):
        """1/3 = 33.3% → 33."""
        store = await loaded_store(storage)
        await store.record(make_classification("Recyclables"))
        await store.record(make_classification("Hazardous"))
        await store.record(make_classification("E-waste"))
        assert store.stats().diversion_rate == 33


class TestHistoryClear:
    """clear() 테스트."""

    @pytest.mark.anyio
    async def test_clear_removes_persisted_state(self, storage, make_classification):
        store = await loaded_store(storage)
        for _ in range(3):
            await store.record(make_classification())

        await store.clear()

        assert store.entries() == []
        assert store.stats().total == 0
        assert HISTORY_KEY not in storage.data
        assert (await loaded_store(storage)).entries() == []
