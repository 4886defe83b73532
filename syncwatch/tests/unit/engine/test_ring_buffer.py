"""Tests for RingBuffer and RingBufferStore."""

from __future__ import annotations

import pytest

from syncwatch.engine.ring_buffer import RingBuffer, RingBufferStore
from syncwatch.models.snapshot import MetricSample


def _s(t: float, v: float = 0.0) -> MetricSample:
    return MetricSample(timestamp=t, value=v)


class TestRingBuffer:
    """Tests for a single bounded buffer."""

    def test_rejects_zero_capacity(self) -> None:
        """Capacity must be at least one."""
        with pytest.raises(ValueError):
            RingBuffer(0)

    def test_append_evicts_oldest_past_capacity(self) -> None:
        """Only the newest ``capacity`` samples are kept."""
        buffer = RingBuffer(3)
        for t in range(5):
            buffer.append(_s(t, t * 10))
        assert [s.timestamp for s in buffer.read()] == [2, 3, 4]
        assert buffer.values() == [20, 30, 40]
        assert buffer.latest().timestamp == 4

    def test_seed_sorts_and_truncates(self) -> None:
        """seed() replaces contents in ascending time order."""
        buffer = RingBuffer(2)
        buffer.append(_s(100))
        buffer.seed([_s(3), _s(1), _s(2)])
        assert [s.timestamp for s in buffer] == [2, 3]

    def test_late_sample_is_inserted_in_time_order(self) -> None:
        """A sample older than the newest lands at its sorted position."""
        buffer = RingBuffer(5)
        buffer.seed([_s(10), _s(20), _s(30)])
        buffer.append(_s(25))
        stamps = [s.timestamp for s in buffer.read()]
        assert stamps == sorted(stamps)
        assert stamps == [10, 20, 25, 30]
        assert buffer.latest().timestamp == 30

    def test_late_sample_in_full_buffer_evicts_oldest(self) -> None:
        """Inserting into a full buffer still keeps only the newest ``capacity``."""
        buffer = RingBuffer(3)
        buffer.seed([_s(10), _s(20), _s(30)])
        buffer.append(_s(25))
        assert [s.timestamp for s in buffer] == [20, 25, 30]

    def test_sample_older_than_full_history_is_dropped(self) -> None:
        """A full buffer ignores a sample older than everything it holds."""
        buffer = RingBuffer(3)
        buffer.seed([_s(10), _s(20), _s(30)])
        buffer.append(_s(5))
        assert [s.timestamp for s in buffer] == [10, 20, 30]

    def test_latest_on_empty_buffer(self) -> None:
        """latest() is None when nothing was recorded."""
        assert RingBuffer(2).latest() is None


class TestRingBufferStore:
    """Tests for per-channel isolation."""

    def test_channels_are_isolated(self) -> None:
        """Appending to one channel never touches another."""
        store = RingBufferStore(["cpu", "memory"], capacity=2)
        store.append("cpu", _s(1, 50))
        assert store.read("memory") == []
        assert store.latest("cpu").value == 50

    def test_append_many_adds_one_sample_per_channel(self) -> None:
        """append_many() records one tick across channels."""
        store = RingBufferStore(["cpu", "memory"], capacity=2)
        store.append_many({"cpu": _s(1, 10), "memory": _s(1, 20)})
        store.append_many({"cpu": _s(2, 11), "memory": _s(2, 21)})
        store.append_many({"cpu": _s(3, 12), "memory": _s(3, 22)})
        assert [s.value for s in store.read("cpu")] == [11, 12]
        assert [s.value for s in store.read("memory")] == [21, 22]

    def test_unknown_channel_reads_empty(self) -> None:
        """Reading a channel that was never created returns an empty list."""
        store = RingBufferStore(capacity=2)
        assert store.read("disk") == []
        assert store.latest("disk") is None

    def test_clear_empties_every_channel(self) -> None:
        """clear() keeps channels but drops all samples."""
        store = RingBufferStore(["cpu"], capacity=2)
        store.append("cpu", _s(1))
        store.clear()
        assert store.read("cpu") == []
        assert store.channels == ["cpu"]
