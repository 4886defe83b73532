"""Recurring poll timer with an optional countdown-to-next-tick.

State machine: IDLE -> RUNNING -> IDLE. While running, ``on_tick`` fires
every ``interval`` seconds. A tick that raises, or whose returned awaitable
fails, is recorded in ``last_error`` and polling carries on at the next
interval; there is no backoff and no retry cap.

``start()`` always stops the current timer first, so a scheduler never has
more than one pending tick.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import math
from collections.abc import Awaitable, Callable
from typing import Any

from syncwatch.constants.enums import SchedulerState
from syncwatch.engine.clock import Clock, TimerHandle

logger = logging.getLogger(__name__)

TickCallback = Callable[[], Awaitable[Any] | None]
ErrorCallback = Callable[[BaseException], None]


class PollScheduler:
    """Runs one recurring timer for a view."""

    _COUNTDOWN_STEP_SECONDS = 1.0

    def __init__(
        self,
        clock: Clock,
        *,
        name: str = "poll",
        on_error: ErrorCallback | None = None,
        spawn: Callable[[Awaitable[Any]], asyncio.Future[Any]] | None = None,
    ) -> None:
        self._clock = clock
        self.name = name
        self._on_error = on_error
        self._spawn = spawn or asyncio.ensure_future
        self._state = SchedulerState.IDLE
        self._interval = 0.0
        self._on_tick: TickCallback | None = None
        self._tick_handle: TimerHandle | None = None
        self._countdown_handle: TimerHandle | None = None
        self._countdown = 0
        self._run_id = 0
        self.tick_count = 0
        self.last_error: BaseException | None = None
        self.consecutive_failures = 0

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is SchedulerState.RUNNING

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def countdown(self) -> int:
        """Whole seconds until the next tick (0 when idle)."""
        return self._countdown if self.is_running else 0

    # =========================================================================
    # Control
    # =========================================================================

    def start(self, interval: float, on_tick: TickCallback) -> None:
        """Start ticking every ``interval`` seconds, replacing any running timer."""
        if interval <= 0:
            raise ValueError(f"Poll interval must be positive, got {interval}")
        self.stop()
        self._run_id += 1
        self._interval = float(interval)
        self._on_tick = on_tick
        self._state = SchedulerState.RUNNING
        self._schedule_tick()
        self.reset_countdown()
        logger.debug("Scheduler %s started (interval=%ss)", self.name, interval)

    def stop(self) -> None:
        """Cancel the pending tick and countdown; safe to call when idle."""
        if self._tick_handle is not None:
            self._tick_handle.cancel()
            self._tick_handle = None
        if self._countdown_handle is not None:
            self._countdown_handle.cancel()
            self._countdown_handle = None
        if self._state is SchedulerState.RUNNING:
            logger.debug("Scheduler %s stopped", self.name)
        self._state = SchedulerState.IDLE
        self._countdown = 0

    def restart(self, interval: float | None = None) -> None:
        """Restart with the current callback, optionally changing the interval."""
        if self._on_tick is None:
            return
        self.start(interval if interval is not None else self._interval, self._on_tick)

    def set_enabled(self, enabled: bool, interval: float | None = None) -> None:
        """Toggle polling; enabling always starts from a fresh timer."""
        if enabled:
            self.restart(interval)
        else:
            self.stop()

    def reset_countdown(self) -> None:
        """Reset the countdown display to a full interval."""
        if not self.is_running:
            return
        if self._countdown_handle is not None:
            self._countdown_handle.cancel()
        self._countdown = max(1, math.ceil(self._interval))
        self._countdown_handle = self._clock.call_later(
            self._COUNTDOWN_STEP_SECONDS, self._on_countdown
        )

    # =========================================================================
    # Internals
    # =========================================================================

    def _schedule_tick(self) -> None:
        self._tick_handle = self._clock.call_later(self._interval, self._fire)

    def _on_countdown(self) -> None:
        if not self.is_running:
            return
        if self._countdown <= 1:
            self._countdown = max(1, math.ceil(self._interval))
        else:
            self._countdown -= 1
        self._countdown_handle = self._clock.call_later(
            self._COUNTDOWN_STEP_SECONDS, self._on_countdown
        )

    def _fire(self) -> None:
        if not self.is_running or self._on_tick is None:
            return
        # Re-arm before running the callback so a failing tick cannot stop polling.
        self._schedule_tick()
        self.reset_countdown()
        self.tick_count += 1
        run_id = self._run_id
        try:
            result = self._on_tick()
        except Exception as exc:
            self._record_failure(exc)
            return
        if inspect.isawaitable(result):
            future = self._spawn(result)
            future.add_done_callback(
                lambda fut: self._on_tick_done(fut, run_id)
            )
        else:
            self.consecutive_failures = 0

    def _on_tick_done(self, future: asyncio.Future[Any], run_id: int) -> None:
        if future.cancelled():
            return
        error = future.exception()
        if run_id != self._run_id:
            return
        if error is not None:
            self._record_failure(error)
        else:
            self.consecutive_failures = 0

    def _record_failure(self, error: BaseException) -> None:
        self.last_error = error
        self.consecutive_failures += 1
        logger.warning(
            "Scheduler %s tick failed (%s consecutive): %s",
            self.name,
            self.consecutive_failures,
            error,
        )
        if self._on_error is not None:
            self._on_error(error)


__all__ = [
    "PollScheduler",
]
