"""Fixed-capacity per-channel time-series history."""

from __future__ import annotations

import logging
from bisect import bisect_right
from collections import deque
from collections.abc import Iterable, Iterator

from syncwatch.constants.defaults import HISTORY_CAPACITY_DEFAULT
from syncwatch.models.snapshot import MetricSample

logger = logging.getLogger(__name__)


class RingBuffer:
    """Bounded sample buffer; appending past capacity evicts the oldest sample.

    Samples are always held in ascending timestamp order. ``seed`` sorts its
    input; ``append`` inserts a late sample at its sorted position, and a
    sample older than everything in a full buffer is dropped.
    """

    def __init__(self, capacity: int = HISTORY_CAPACITY_DEFAULT) -> None:
        if capacity < 1:
            raise ValueError(f"Ring buffer capacity must be >= 1, got {capacity}")
        self._samples: deque[MetricSample] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._samples.maxlen or 0

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[MetricSample]:
        return iter(self._samples)

    def seed(self, series: Iterable[MetricSample]) -> None:
        """Replace the contents with ``series`` (newest ``capacity`` samples kept)."""
        ordered = sorted(series, key=lambda sample: sample.timestamp)
        self._samples.clear()
        self._samples.extend(ordered)

    def append(self, sample: MetricSample) -> None:
        samples = self._samples
        if not samples or sample.timestamp >= samples[-1].timestamp:
            samples.append(sample)
            return
        if len(samples) == samples.maxlen and sample.timestamp < samples[0].timestamp:
            logger.debug("Dropped sample at %s older than the full history", sample.timestamp)
            return
        ordered = list(samples)
        ordered.insert(bisect_right([s.timestamp for s in ordered], sample.timestamp), sample)
        samples.clear()
        samples.extend(ordered)

    def read(self) -> list[MetricSample]:
        return list(self._samples)

    def values(self) -> list[float]:
        return [sample.value for sample in self._samples]

    def latest(self) -> MetricSample | None:
        return self._samples[-1] if self._samples else None

    def clear(self) -> None:
        self._samples.clear()


class RingBufferStore:
    """Isolated ring buffers keyed by channel name."""

    def __init__(
        self,
        channels: Iterable[str] = (),
        capacity: int = HISTORY_CAPACITY_DEFAULT,
    ) -> None:
        self._capacity = capacity
        self._buffers: dict[str, RingBuffer] = {}
        for channel in channels:
            self._buffer(channel)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def channels(self) -> list[str]:
        return list(self._buffers)

    def _buffer(self, channel: str) -> RingBuffer:
        buffer = self._buffers.get(channel)
        if buffer is None:
            buffer = RingBuffer(self._capacity)
            self._buffers[channel] = buffer
        return buffer

    def seed(self, channel: str, series: Iterable[MetricSample]) -> None:
        """Replace ``channel``'s history wholesale (initial backfill)."""
        self._buffer(channel).seed(series)
        logger.debug("Seeded channel %s with %s samples", channel, len(self._buffers[channel]))

    def append(self, channel: str, sample: MetricSample) -> None:
        self._buffer(channel).append(sample)

    def append_many(self, samples: dict[str, MetricSample]) -> None:
        """Append one sample per channel (one live tick)."""
        for channel, sample in samples.items():
            self.append(channel, sample)

    def read(self, channel: str) -> list[MetricSample]:
        buffer = self._buffers.get(channel)
        return buffer.read() if buffer is not None else []

    def latest(self, channel: str) -> MetricSample | None:
        buffer = self._buffers.get(channel)
        return buffer.latest() if buffer is not None else None

    def clear(self) -> None:
        for buffer in self._buffers.values():
            buffer.clear()


__all__ = [
    "RingBuffer",
    "RingBufferStore",
]
