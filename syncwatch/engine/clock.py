"""Timer abstraction shared by the poll scheduler and highlight expiry.

Every time-driven side effect in the engine (poll ticks, the countdown,
highlight TTLs) is scheduled through a ``Clock``. ``LoopClock`` runs on the
active asyncio loop (the Textual app loop at runtime); ``ManualClock`` only
moves when ``advance()`` is called, which makes timer behaviour fully
deterministic under test.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
import time
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    """Handle to a scheduled callback."""

    def cancel(self) -> None: ...


class Clock(Protocol):
    """Source of time and one-shot timers."""

    def now(self) -> float: ...

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class LoopClock:
    """Clock backed by the running asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now(self) -> float:
        return time.monotonic()

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        return self._get_loop().call_later(max(0.0, delay), callback)


class _ManualTimer:
    """Timer entry owned by a ManualClock."""

    __slots__ = ("callback", "cancelled", "due")

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualClock:
    """Deterministic clock advanced explicitly.

    Timers due at the same instant fire in the order they were scheduled.
    Callbacks scheduled while advancing fire in the same ``advance()`` call
    when they fall within the target time.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._queue: list[tuple[float, int, _ManualTimer]] = []
        self._sequence = itertools.count()

    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        timer = _ManualTimer(self._now + max(0.0, delay), callback)
        heapq.heappush(self._queue, (timer.due, next(self._sequence), timer))
        return timer

    @property
    def pending(self) -> int:
        """Number of scheduled timers that have not fired or been cancelled."""
        return sum(1 for _, _, timer in self._queue if not timer.cancelled)

    def advance(self, seconds: float) -> None:
        """Move time forward, firing every timer that becomes due."""
        target = self._now + seconds
        while self._queue and self._queue[0][0] <= target:
            due, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self._now = due
            timer.callback()
        self._now = target


__all__ = [
    "Clock",
    "LoopClock",
    "ManualClock",
    "TimerHandle",
]
