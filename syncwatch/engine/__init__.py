"""Live telemetry aggregation engine.

UI-independent building blocks shared by the log viewer and the unified
monitor: lifecycle guarding, clock-driven polling, generation-tagged
fetching, snapshot diffing, bounded metric history, tree aggregation,
pagination and the auto-scroll decision.
"""

from syncwatch.engine.clock import Clock, LoopClock, ManualClock
from syncwatch.engine.diff import DiffEngine, HighlightBatch, diff
from syncwatch.engine.errors import (
    ConcurrencyStale,
    ErrorBanner,
    NetworkError,
    SyncWatchError,
    UserDeclined,
    ValidationError,
)
from syncwatch.engine.fetcher import FetchOutcome, SnapshotFetcher
from syncwatch.engine.lifecycle import LifecycleGuard, ViewSession
from syncwatch.engine.paginator import Paginator
from syncwatch.engine.ring_buffer import RingBuffer, RingBufferStore
from syncwatch.engine.scheduler import PollScheduler
from syncwatch.engine.scroll import ScrollAnchor, Viewport, is_at_bottom
from syncwatch.engine.tree import (
    ExpansionState,
    TreeAggregator,
    TreeNode,
    TreeRow,
    order_keys,
)

__all__ = [
    "Clock",
    "ConcurrencyStale",
    "DiffEngine",
    "ErrorBanner",
    "ExpansionState",
    "FetchOutcome",
    "HighlightBatch",
    "LifecycleGuard",
    "LoopClock",
    "ManualClock",
    "NetworkError",
    "Paginator",
    "PollScheduler",
    "RingBuffer",
    "RingBufferStore",
    "ScrollAnchor",
    "SnapshotFetcher",
    "SyncWatchError",
    "TreeAggregator",
    "TreeNode",
    "TreeRow",
    "UserDeclined",
    "ValidationError",
    "ViewSession",
    "Viewport",
    "diff",
    "is_at_bottom",
    "order_keys",
]
