"""Logs screen presenter - polling, filtering and export for the log viewer."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import Any

from syncwatch.constants.enums import ViewState
from syncwatch.constants.values import FILTER_ALL, LOG_LEVEL_PRIORITY
from syncwatch.controllers.logs.controller import LogsController
from syncwatch.engine.clock import Clock
from syncwatch.engine.diff import DiffEngine
from syncwatch.engine.errors import NetworkError, UserDeclined
from syncwatch.engine.fetcher import SnapshotFetcher
from syncwatch.engine.paginator import Paginator
from syncwatch.engine.scroll import ScrollAnchor, Viewport
from syncwatch.engine.tree import TreeAggregator, TreeRow
from syncwatch.models.filters import LogFilters
from syncwatch.models.records.log_record import LogFileInfo, LogRecord
from syncwatch.models.snapshot import Snapshot
from syncwatch.models.state.app_settings import AppSettings
from syncwatch.screens.base_presenter import Confirm, PolledPresenter, UpdateCallback
from syncwatch.utils.formatting import format_file_size

logger = logging.getLogger(__name__)

EXPORT_RULE_WIDTH = 80


class LogsPresenter(PolledPresenter):
    """Presenter for LogsScreen.

    Each tick fetches the log entries and the log store metadata as one
    atomic group; the result replaces the dataset, feeds the new-entry
    highlight, the level/category tree and the paginator.
    """

    view_name = "logs"

    def __init__(
        self,
        controller: LogsController,
        clock: Clock,
        *,
        settings: AppSettings | None = None,
        on_update: UpdateCallback | None = None,
        spawn: Callable[[Awaitable[Any]], asyncio.Future[Any]] | None = None,
    ) -> None:
        super().__init__(clock, on_update=on_update, spawn=spawn)
        settings = settings or AppSettings()
        self._controller = controller
        self.refresh_interval = settings.logs_refresh_interval
        self.auto_refresh = settings.logs_auto_refresh
        self.fetcher = SnapshotFetcher(self.view_name, guard=self.session)
        self.diff = DiffEngine(clock, ttl=settings.highlight_ttl_seconds, on_expire=self.notify)
        self.paginator: Paginator[LogRecord] = Paginator(settings.page_size)
        self.tree = TreeAggregator(LOG_LEVEL_PRIORITY)
        self.anchor = ScrollAnchor()
        self.viewport: Viewport | None = None
        self.filters = LogFilters()
        self.records: list[LogRecord] = []
        self.info: LogFileInfo | None = None
        self.snapshot: Snapshot | None = None
        self.categories: list[str] = [FILTER_ALL]
        self.functions: list[str] = [FILTER_ALL]
        self.last_added = 0

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def activate(self) -> None:
        """Mark the view live and start auto-refresh when enabled."""
        self.session.activate()
        if self.auto_refresh:
            self.scheduler.start(self.refresh_interval, self.refresh)

    async def start(self) -> None:
        """Activate, then load filter options and the first page of logs."""
        self.activate()
        await asyncio.gather(self.load_filter_options(), self.refresh())

    def deactivate(self) -> None:
        super().deactivate()
        self.diff.reset()
        self.fetcher.invalidate()

    async def load_filter_options(self) -> None:
        """Load category and function lists; failures leave just ``ALL``."""
        results = await asyncio.gather(
            self._controller.fetch_categories(),
            self._controller.fetch_functions(),
            return_exceptions=True,
        )
        if not self.session.is_active:
            return
        categories, functions = results
        if isinstance(categories, NetworkError):
            logger.warning("Failed to load log categories: %s", categories)
        elif isinstance(categories, BaseException):
            raise categories
        else:
            self.categories = categories
        if isinstance(functions, NetworkError):
            logger.warning("Failed to load log functions: %s", functions)
        elif isinstance(functions, BaseException):
            raise functions
        else:
            self.functions = functions
        self.notify()

    # =========================================================================
    # Fetching
    # =========================================================================

    async def refresh(self, *, manual: bool = False) -> bool:
        """Fetch logs and log info; returns True when the result was applied."""
        if not self.session.is_active:
            return False
        self._begin_fetch(manual=manual)
        filters = self.filters
        outcome = await self.fetcher.fetch_atomic(
            {
                "logs": lambda: self._controller.fetch_logs(filters),
                "info": self._controller.fetch_info,
            }
        )
        if outcome.discarded:
            return False
        if outcome.error is not None:
            if not isinstance(outcome.error, NetworkError):
                raise outcome.error
            self._fail(outcome.error)
            return False
        snapshot = Snapshot(
            source=self.view_name,
            received_at=self._clock.now(),
            generation=outcome.generation,
            records=outcome.values["logs"],
        )
        self._apply(snapshot, outcome.values["info"])
        return True

    def _apply(self, snapshot: Snapshot, info: LogFileInfo) -> None:
        if self.viewport is not None:
            self.anchor.capture(self.viewport)
        records = snapshot.records
        new_keys = self.diff.commit(records)
        self.snapshot = snapshot
        self.records = records
        self.info = info
        self.paginator.set_dataset(records)
        self.tree.build(
            records,
            key_of=lambda record: record.level_key,
            child_key_of=lambda record: record.category_key,
        )
        self.last_added = len(new_keys)
        self.state = ViewState.READY
        self.banner.clear()
        self.notify()
        if self.viewport is not None:
            self.anchor.settle(self.viewport, self.last_added)

    # =========================================================================
    # Filters & auto-refresh
    # =========================================================================

    async def apply_filters(self, **changes: Any) -> bool:
        """Validate and apply filter changes, then refetch from page 1.

        Raises:
            ValidationError: The new filters are invalid; nothing changes.
        """
        candidate = self.filters.model_copy(update=changes)
        candidate.check()
        self.filters = candidate
        self.paginator.reset()
        self.scheduler.reset_countdown()
        return await self.refresh(manual=True)

    async def clear_filters(self) -> bool:
        self.filters = LogFilters()
        self.paginator.reset()
        self.scheduler.reset_countdown()
        return await self.refresh(manual=True)

    def toggle_auto_refresh(self) -> bool:
        self.auto_refresh = not self.auto_refresh
        if self.auto_refresh:
            self.scheduler.start(self.refresh_interval, self.refresh)
        else:
            self.scheduler.stop()
        self.notify()
        return self.auto_refresh

    # =========================================================================
    # Pagination & tree
    # =========================================================================

    @property
    def page_rows(self) -> list[LogRecord]:
        return self.paginator.slice()

    def go_to_page(self, number: int) -> bool:
        changed = self.paginator.page(number)
        if changed:
            self.notify()
        return changed

    def next_page(self) -> bool:
        return self.go_to_page(self.paginator.current_page + 1)

    def previous_page(self) -> bool:
        return self.go_to_page(self.paginator.current_page - 1)

    def first_page(self) -> bool:
        return self.go_to_page(1)

    def last_page(self) -> bool:
        return self.go_to_page(self.paginator.total_pages)

    def tree_rows(self) -> list[TreeRow]:
        return self.tree.flatten()

    def toggle_node(self, path: str) -> bool:
        expanded = self.tree.toggle(path)
        self.notify()
        return expanded

    def is_new(self, record: LogRecord) -> bool:
        return self.diff.is_record_new(record)

    # =========================================================================
    # Actions
    # =========================================================================

    async def clear_logs(self, confirm: Confirm) -> bool:
        """Delete all logs after confirmation, then reload from page 1."""
        try:
            await self._confirm(confirm, "clear logs")
        except UserDeclined:
            logger.debug("Clear logs declined")
            return False
        self.banner.clear()
        try:
            await self._controller.clear_logs()
        except NetworkError as exc:
            self._fail(exc)
            return False
        self.paginator.reset()
        self.diff.reset()
        await self.refresh(manual=True)
        return True

    def export_text(self, now: datetime | None = None) -> str:
        """Plain-text export of the loaded dataset with a summary header.

        Exports the records from the last applied poll as they are; nothing is
        refetched, so entries written since that poll are not included.
        """
        now = now or datetime.now()
        info = self.info
        size = format_file_size(info.size or 0) if info is not None else "Unknown"
        header = [
            f"SyncWatch Logs - {now.strftime('%Y-%m-%d %H:%M:%S')}",
            f"Total Entries: {len(self.records)}",
            f"Level Filter: {self.filters.level}",
            f"Category Filter: {self.filters.category}",
            f"File: {(info.file_path if info else None) or 'Unknown'}",
            f"Size: {size}",
            f"Last Modified: {(info.last_modified if info else None) or 'Unknown'}",
            "=" * EXPORT_RULE_WIDTH,
            "",
        ]
        return "\n".join(header + [record.to_line() for record in self.records])
