"""Monitor screen presenter - tabbed polling for the unified monitor."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from syncwatch.constants.enums import MonitorTab, ViewState
from syncwatch.constants.values import DB_ENGINE_PRIORITY, METRIC_CHANNELS, PERFORMANCE_TIERS
from syncwatch.controllers.monitor.controller import MonitorController
from syncwatch.engine.clock import Clock
from syncwatch.engine.diff import DiffEngine
from syncwatch.engine.errors import NetworkError, UserDeclined, ValidationError
from syncwatch.engine.fetcher import FetchCall, FetchOutcome, SnapshotFetcher
from syncwatch.engine.ring_buffer import RingBufferStore
from syncwatch.engine.tree import TreeAggregator, TreeRow
from syncwatch.models.records.monitor_records import (
    PerformanceRecord,
    ProcessingEventRecord,
    SessionRecord,
    TransferRecord,
)
from syncwatch.models.snapshot import MetricSample
from syncwatch.models.state.app_settings import AppSettings
from syncwatch.screens.base_presenter import Confirm, PolledPresenter, UpdateCallback

logger = logging.getLogger(__name__)

# Fetch groups: calls inside a group succeed or fail together, groups are independent.
GROUP_ACTIVITY = "activity"
GROUP_PERFORMANCE = "performance"
GROUP_TRANSFER = "transfer"
GROUP_SYSTEM = "system"

FETCH_GROUPS = (GROUP_ACTIVITY, GROUP_PERFORMANCE, GROUP_TRANSFER, GROUP_SYSTEM)

TAB_GROUPS: dict[MonitorTab, tuple[str, ...]] = {
    MonitorTab.MONITOR: (GROUP_ACTIVITY,),
    MonitorTab.LIVE: (GROUP_ACTIVITY,),
    MonitorTab.PERFORMANCE: (GROUP_ACTIVITY, GROUP_PERFORMANCE),
    MonitorTab.SYSTEM: (GROUP_ACTIVITY, GROUP_SYSTEM),
    MonitorTab.TRANSFER: (GROUP_ACTIVITY, GROUP_TRANSFER),
}

TREE_TABS = (MonitorTab.MONITOR, MonitorTab.LIVE, MonitorTab.PERFORMANCE, MonitorTab.TRANSFER)


@dataclass(frozen=True)
class PerformanceSummary:
    """Aggregates over the loaded query-performance rows."""

    tiers: dict[str, int]
    blocking: int
    non_blocking: int
    avg_mean_time_ms: float


class MonitorPresenter(PolledPresenter):
    """Presenter for MonitorScreen.

    One scheduler serves whichever tab is active. Switching tabs stops the
    running timer before the next tab's timer is started, so a view never
    has two timers at once.
    """

    view_name = "monitor"

    def __init__(
        self,
        controller: MonitorController,
        clock: Clock,
        *,
        settings: AppSettings | None = None,
        tab: MonitorTab = MonitorTab.MONITOR,
        on_update: UpdateCallback | None = None,
        spawn: Callable[[Awaitable[Any]], asyncio.Future[Any]] | None = None,
    ) -> None:
        super().__init__(clock, on_update=on_update, spawn=spawn)
        settings = settings or AppSettings()
        self._controller = controller
        self.tab = tab
        self.monitor_interval = settings.monitor_refresh_interval
        self.system_interval = settings.system_refresh_interval
        self.fetchers = {
            group: SnapshotFetcher(f"{self.view_name}.{group}", guard=self.session)
            for group in FETCH_GROUPS
        }
        self.diffs = {
            tab_: DiffEngine(clock, ttl=settings.highlight_ttl_seconds, on_expire=self.notify)
            for tab_ in TREE_TABS
        }
        self.trees = {
            MonitorTab.MONITOR: TreeAggregator(),
            MonitorTab.LIVE: TreeAggregator(DB_ENGINE_PRIORITY),
            MonitorTab.PERFORMANCE: TreeAggregator(),
            MonitorTab.TRANSFER: TreeAggregator(DB_ENGINE_PRIORITY),
        }
        # The backfill has its own generation so a stats tick cannot make it stale.
        self.history_fetcher = SnapshotFetcher(f"{self.view_name}.history", guard=self.session)
        self.history = RingBufferStore(METRIC_CHANNELS, settings.history_capacity)
        self.visible_channels: set[str] = set(METRIC_CHANNELS)
        self.system_seeded = False
        self._seeding = False

        self.sessions: list[SessionRecord] = []
        self.processing_events: list[ProcessingEventRecord] = []
        self.processing_stats: dict[str, Any] = {}
        self.performance: list[PerformanceRecord] = []
        self.performance_metrics: dict[str, Any] = {}
        self.transfers: list[TransferRecord] = []
        self.transfer_stats: dict[str, Any] = {}
        self.dashboard_stats: dict[str, Any] = {}

    # =========================================================================
    # Lifecycle & tabs
    # =========================================================================

    def interval_for(self, tab: MonitorTab) -> int:
        return self.system_interval if tab is MonitorTab.SYSTEM else self.monitor_interval

    def activate(self) -> None:
        self.session.activate()
        self.scheduler.start(self.interval_for(self.tab), self.refresh)

    async def start(self) -> None:
        """Activate and load the active tab."""
        self.activate()
        await self.refresh()

    def deactivate(self) -> None:
        super().deactivate()
        for diff in self.diffs.values():
            diff.reset()
        for fetcher in self.fetchers.values():
            fetcher.invalidate()
        self.history_fetcher.invalidate()

    def set_tab(self, tab: MonitorTab) -> bool:
        """Make ``tab`` active and re-time polling for it.

        Returns False when ``tab`` was already active.
        """
        if tab is self.tab:
            return False
        self.scheduler.stop()
        previous, self.tab = self.tab, tab
        if self.session.is_active:
            self.scheduler.start(self.interval_for(tab), self.refresh)
        logger.debug("Monitor tab %s -> %s", previous.value, tab.value)
        self.notify()
        return True

    async def switch_tab(self, tab: MonitorTab) -> bool:
        """Switch tabs and load the new tab right away."""
        if not self.set_tab(tab):
            return False
        await self.refresh()
        return True

    # =========================================================================
    # Fetching
    # =========================================================================

    async def refresh(
        self, *, manual: bool = False, groups: Iterable[str] | None = None
    ) -> bool:
        """Fetch the active tab's groups; returns True when every group applied.

        Polling the system group backfills the history first, and retries the
        backfill on every poll until it lands. While a backfill is in flight
        other polls skip the system group.
        """
        if not self.session.is_active:
            return False
        self._begin_fetch(manual=manual)
        groups = tuple(groups) if groups is not None else TAB_GROUPS[self.tab]
        if GROUP_SYSTEM in groups and not self.system_seeded:
            if self._seeding:
                groups = tuple(group for group in groups if group != GROUP_SYSTEM)
            else:
                await self.seed_system_history()
        outcomes = await asyncio.gather(*(self._fetch_group(group) for group in groups))
        if all(outcome.discarded for outcome in outcomes):
            return False
        failures = [outcome.error for outcome in outcomes if outcome.error is not None]
        if failures:
            self._fail(failures[-1])
            return False
        self.banner.clear()
        self.state = ViewState.READY
        self.notify()
        return True

    def _group_calls(self, group: str) -> dict[str, FetchCall]:
        controller = self._controller
        if group == GROUP_ACTIVITY:
            return {
                "sessions": controller.fetch_sessions,
                "events": controller.fetch_processing_events,
                "stats": controller.fetch_processing_stats,
            }
        if group == GROUP_PERFORMANCE:
            return {
                "rows": controller.fetch_performance,
                "metrics": controller.fetch_performance_metrics,
            }
        if group == GROUP_TRANSFER:
            return {
                "rows": controller.fetch_transfers,
                "stats": controller.fetch_transfer_stats,
            }
        return {"stats": controller.fetch_dashboard_stats}

    async def _fetch_group(self, group: str) -> FetchOutcome:
        outcome = await self.fetchers[group].fetch_atomic(self._group_calls(group))
        if outcome.discarded:
            return outcome
        if outcome.error is not None:
            if not isinstance(outcome.error, NetworkError):
                raise outcome.error
            return outcome
        self._apply_group(group, outcome.values)
        return outcome

    def _apply_group(self, group: str, values: dict[str, Any]) -> None:
        if group == GROUP_ACTIVITY:
            self.sessions = values["sessions"]
            self.processing_events = values["events"]
            self.processing_stats = values["stats"]
            self._rebuild(MonitorTab.MONITOR, self.sessions, lambda s: s.database)
            self._rebuild(
                MonitorTab.LIVE,
                self.processing_events,
                lambda e: e.engine,
                lambda e: e.schema,
            )
        elif group == GROUP_PERFORMANCE:
            self.performance = values["rows"]
            self.performance_metrics = values["metrics"]
            self._rebuild(MonitorTab.PERFORMANCE, self.performance, lambda p: p.database)
        elif group == GROUP_TRANSFER:
            self.transfers = values["rows"]
            self.transfer_stats = values["stats"]
            self._rebuild(MonitorTab.TRANSFER, self.transfers, lambda t: t.engine)
        else:
            self._append_system_sample(values["stats"])

    def _rebuild(
        self,
        tab: MonitorTab,
        records: list[Any],
        key_of: Callable[[Any], str],
        child_key_of: Callable[[Any], str] | None = None,
    ) -> None:
        self.diffs[tab].commit(records)
        self.trees[tab].build(records, key_of, child_key_of)

    def performance_summary(self) -> PerformanceSummary:
        rows = self.performance
        tiers = {
            tier: sum(1 for row in rows if (row.performance_tier or "").upper() == tier)
            for tier in PERFORMANCE_TIERS
        }
        blocking = sum(1 for row in rows if row.is_blocking)
        total_time = sum(row.mean_time_ms or 0.0 for row in rows)
        return PerformanceSummary(
            tiers=tiers,
            blocking=blocking,
            non_blocking=len(rows) - blocking,
            avg_mean_time_ms=total_time / len(rows) if rows else 0.0,
        )

    # =========================================================================
    # System resources
    # =========================================================================

    async def seed_system_history(self) -> bool:
        """Backfill every channel from the resource history endpoint."""
        if not self.session.is_active:
            return False
        self._seeding = True
        try:
            outcome = await self.history_fetcher.fetch_atomic(
                {
                    "history": lambda: self._controller.fetch_system_history(
                        end=self._clock.now(),
                        step=self.system_interval,
                        limit=self.history.capacity,
                    )
                }
            )
        finally:
            self._seeding = False
        if outcome.discarded:
            return False
        if outcome.error is not None:
            if not isinstance(outcome.error, NetworkError):
                raise outcome.error
            logger.warning("System history backfill failed: %s", outcome.error)
            return False
        series, stats = outcome.values["history"]
        self.dashboard_stats = stats
        if any(series.values()):
            for channel, samples in series.items():
                self.history.seed(channel, samples)
        self.system_seeded = True
        self.notify()
        return True

    def _append_system_sample(self, stats: dict[str, Any]) -> None:
        self.dashboard_stats = stats
        label = datetime.now().strftime("%H:%M:%S")
        samples = self._controller.metrics_parser.samples(stats, self._clock.now(), label)
        self.history.append_many(samples)

    def channel_series(self, channel: str) -> list[MetricSample]:
        return self.history.read(channel)

    def toggle_channel(self, channel: str) -> bool:
        """Show or hide one channel; returns the new visibility."""
        if channel not in METRIC_CHANNELS:
            raise ValueError(f"Unknown metric channel: {channel}")
        if channel in self.visible_channels:
            self.visible_channels.discard(channel)
        else:
            self.visible_channels.add(channel)
        self.notify()
        return channel in self.visible_channels

    # =========================================================================
    # Trees
    # =========================================================================

    def tree_rows(self, tab: MonitorTab | None = None) -> list[TreeRow]:
        tree = self.trees.get(tab or self.tab)
        return tree.flatten() if tree is not None else []

    def toggle_node(self, path: str) -> bool:
        tree = self.trees.get(self.tab)
        if tree is None:
            return False
        expanded = tree.toggle(path)
        self.notify()
        return expanded

    def is_new(self, record: Any, tab: MonitorTab | None = None) -> bool:
        diff = self.diffs.get(tab or self.tab)
        return diff is not None and diff.is_record_new(record)

    # =========================================================================
    # Actions
    # =========================================================================

    async def kill_session(self, pid: int | None, confirm: Confirm) -> bool:
        """Terminate a session after confirmation, then refresh activity.

        Raises:
            ValidationError: ``pid`` is missing.
        """
        if pid is None:
            raise ValidationError("Session has no process id", field="pid")
        try:
            await self._confirm(confirm, f"kill session {pid}")
        except UserDeclined:
            logger.debug("Kill of session %s declined", pid)
            return False
        self.banner.clear()
        try:
            await self._controller.kill_session(pid)
        except NetworkError as exc:
            self._fail(exc)
            return False
        await self.refresh(manual=True, groups=(GROUP_ACTIVITY,))
        return True

    async def set_schedule_enabled(self, backup_id: int | str | None, enabled: bool) -> bool:
        """Enable or disable a backup schedule.

        Raises:
            ValidationError: ``backup_id`` is missing.
        """
        if backup_id in (None, ""):
            raise ValidationError("Backup id is required", field="backup_id")
        self.banner.clear()
        try:
            await self._controller.set_schedule_enabled(backup_id, enabled)
        except NetworkError as exc:
            self._fail(exc)
            return False
        self.notify()
        return True
