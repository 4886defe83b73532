"""Generation-tagged concurrent fetching.

Every fetch increments the generation counter before issuing its requests
and captures the value. When the requests complete, the captured value is
compared with the counter: if a newer fetch has started in the meantime the
result is discarded unconditionally. The most recently *started* fetch
wins, regardless of completion order.

Two grouping modes are supported:

- ``fetch_atomic``: calls that must succeed together (logs + log file
  info). Any failure fails the whole tick.
- ``fetch_independent``: calls that fail independently (the data sources
  behind different monitor tabs). Each call reports its own result.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from syncwatch.engine.errors import ConcurrencyStale
from syncwatch.engine.lifecycle import LifecycleGuard

logger = logging.getLogger(__name__)

FetchCall = Callable[[], Awaitable[Any]]


@dataclass
class FetchOutcome:
    """Result of one generation-tagged fetch."""

    generation: int
    values: dict[str, Any] = field(default_factory=dict)
    errors: dict[str, BaseException] = field(default_factory=dict)
    stale: bool = False
    inactive: bool = False
    duration_ms: float = 0.0

    @property
    def discarded(self) -> bool:
        """True when the result must not be applied to view state."""
        return self.stale or self.inactive

    @property
    def ok(self) -> bool:
        return not self.discarded and not self.errors

    @property
    def error(self) -> BaseException | None:
        """First recorded error, if any."""
        return next(iter(self.errors.values()), None)


class SnapshotFetcher:
    """Issues concurrent requests tagged with a monotonically increasing generation."""

    def __init__(self, name: str = "fetch", guard: LifecycleGuard | None = None) -> None:
        self.name = name
        self._guard = guard
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    def invalidate(self) -> None:
        """Supersede any in-flight fetch without starting a new one."""
        self._generation += 1

    async def fetch_atomic(self, calls: Mapping[str, FetchCall]) -> FetchOutcome:
        """Run ``calls`` concurrently; any failure fails the whole group."""
        generation, results, started = await self._run(calls)
        outcome = self._finish(generation, started)
        if outcome.discarded:
            return outcome
        for key, result in zip(calls, results, strict=True):
            if isinstance(result, BaseException):
                outcome.errors[key] = result
                outcome.values.clear()
                logger.warning("Fetch %s failed on %s: %s", self.name, key, result)
                break
            outcome.values[key] = result
        return outcome

    async def fetch_independent(self, calls: Mapping[str, FetchCall]) -> FetchOutcome:
        """Run ``calls`` concurrently; each call succeeds or fails on its own."""
        generation, results, started = await self._run(calls)
        outcome = self._finish(generation, started)
        if outcome.discarded:
            return outcome
        for key, result in zip(calls, results, strict=True):
            if isinstance(result, BaseException):
                outcome.errors[key] = result
                logger.warning("Fetch %s source %s failed: %s", self.name, key, result)
            else:
                outcome.values[key] = result
        return outcome

    async def _run(
        self, calls: Mapping[str, FetchCall]
    ) -> tuple[int, list[Any], float]:
        self._generation += 1
        generation = self._generation
        started = time.monotonic()
        results = await asyncio.gather(
            *(call() for call in calls.values()),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, asyncio.CancelledError):
                raise result
        return generation, list(results), started

    def _finish(self, generation: int, started: float) -> FetchOutcome:
        outcome = FetchOutcome(
            generation=generation,
            duration_ms=(time.monotonic() - started) * 1000,
        )
        if self._guard is not None and not self._guard.is_active:
            outcome.inactive = True
            logger.debug("Fetch %s#%s completed after teardown", self.name, generation)
        elif not self.is_current(generation):
            outcome.stale = True
            logger.debug(
                "Discarding fetch %s: %s",
                self.name,
                ConcurrencyStale(generation, self._generation),
            )
        return outcome


__all__ = [
    "FetchCall",
    "FetchOutcome",
    "SnapshotFetcher",
]
