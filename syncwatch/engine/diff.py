"""Snapshot diffing and the time-limited "new arrival" highlight.

The first commit for a view only establishes the baseline: an initial load
is never reported as new. Afterwards, the keys present in the incoming
snapshot but absent from the previously committed one form a highlight
batch that clears itself ``ttl`` seconds after it was computed.

A new non-empty batch replaces any batch still pending from the previous
poll (no union). The previous-key reference is committed synchronously in
the same call, strictly before the batch's expiry is scheduled.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from typing import Any

from syncwatch.constants.defaults import HIGHLIGHT_TTL_SECONDS_DEFAULT
from syncwatch.engine.clock import Clock, TimerHandle

logger = logging.getLogger(__name__)

KeyOf = Callable[[Any], Hashable | None]


def record_key(record: Any) -> Hashable | None:
    """Default identity-key extractor for typed records."""
    identity_key = getattr(record, "identity_key", None)
    if callable(identity_key):
        return identity_key()
    return None


def collect_keys(records: Iterable[Any], key_of: KeyOf = record_key) -> set[Hashable]:
    """Identity keys of ``records``; records without a key are skipped."""
    keys: set[Hashable] = set()
    for record in records:
        key = key_of(record)
        if key is not None:
            keys.add(key)
    return keys


def diff(
    previous_keys: set[Hashable] | None,
    incoming: Iterable[Any],
    key_of: KeyOf = record_key,
) -> set[Hashable]:
    """Keys in ``incoming`` absent from ``previous_keys``.

    ``previous_keys=None`` means no previous snapshot exists, which always
    yields an empty set.
    """
    if previous_keys is None:
        return set()
    return collect_keys(incoming, key_of) - previous_keys


@dataclass(frozen=True)
class HighlightBatch:
    """One poll's set of newly arrived keys."""

    keys: frozenset[Hashable]
    created_at: float
    expires_at: float


class DiffEngine:
    """Tracks the last committed snapshot's keys and the pending highlight batch."""

    def __init__(
        self,
        clock: Clock,
        *,
        ttl: float = HIGHLIGHT_TTL_SECONDS_DEFAULT,
        key_of: KeyOf = record_key,
        on_expire: Callable[[], None] | None = None,
    ) -> None:
        self._clock = clock
        self._ttl = ttl
        self._key_of = key_of
        self._on_expire = on_expire
        self._previous_keys: set[Hashable] | None = None
        self._batch: HighlightBatch | None = None
        self._expiry: TimerHandle | None = None

    @property
    def has_baseline(self) -> bool:
        return self._previous_keys is not None

    @property
    def previous_keys(self) -> frozenset[Hashable]:
        return frozenset(self._previous_keys or ())

    @property
    def batch(self) -> HighlightBatch | None:
        return self._batch

    @property
    def new_keys(self) -> frozenset[Hashable]:
        """Keys currently flagged as new (empty once the TTL has elapsed)."""
        return self._batch.keys if self._batch is not None else frozenset()

    def is_new(self, key: Hashable | None) -> bool:
        return key is not None and key in self.new_keys

    def is_record_new(self, record: Any) -> bool:
        return self.is_new(self._key_of(record))

    def commit(self, records: Iterable[Any]) -> frozenset[Hashable]:
        """Diff ``records`` against the previous commit and make them the new baseline.

        Returns the keys detected as new in this poll.
        """
        records = list(records)
        new_keys = frozenset(diff(self._previous_keys, records, self._key_of))
        self._previous_keys = collect_keys(records, self._key_of)
        if new_keys:
            self._replace_batch(new_keys)
        return new_keys

    def clear_highlight(self) -> None:
        if self._expiry is not None:
            self._expiry.cancel()
            self._expiry = None
        self._batch = None

    def reset(self) -> None:
        """Forget the baseline and any pending highlight (view teardown or data wipe)."""
        self.clear_highlight()
        self._previous_keys = None

    def _replace_batch(self, keys: frozenset[Hashable]) -> None:
        if self._expiry is not None:
            self._expiry.cancel()
        now = self._clock.now()
        batch = HighlightBatch(keys=keys, created_at=now, expires_at=now + self._ttl)
        self._batch = batch
        self._expiry = self._clock.call_later(self._ttl, lambda: self._expire(batch))
        logger.debug("Highlighting %s new record(s)", len(keys))

    def _expire(self, batch: HighlightBatch) -> None:
        if self._batch is not batch:
            return
        self._batch = None
        self._expiry = None
        if self._on_expire is not None:
            self._on_expire()


__all__ = [
    "DiffEngine",
    "HighlightBatch",
    "KeyOf",
    "collect_keys",
    "diff",
    "record_key",
]
