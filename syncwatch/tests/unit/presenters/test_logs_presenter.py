"""Unit tests for LogsPresenter - polling, highlight, pagination and actions.

Tests drive the presenter with a ManualClock and an AsyncMock controller,
so every timer and every fetch completion is explicit.
"""

from __future__ import annotations

import asyncio
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from syncwatch.constants.enums import ViewState
from syncwatch.engine.clock import ManualClock
from syncwatch.engine.errors import NetworkError, ValidationError
from syncwatch.models.records.log_record import LogFileInfo, LogRecord
from syncwatch.models.state.app_settings import AppSettings
from syncwatch.screens.logs.presenter import LogsPresenter

# =============================================================================
# Test Fixtures
# =============================================================================


def _logs(count: int) -> list[LogRecord]:
    levels = ["INFO", "ERROR", "WARNING"]
    return [
        LogRecord(
            id=i,
            timestamp=f"2024-01-01T00:00:{i:02d}",
            level=levels[i % 3],
            category="SYNC" if i % 2 else "API",
            function="run",
            message=f"message {i}",
        )
        for i in range(1, count + 1)
    ]


def _controller(records: list[LogRecord] | None = None) -> MagicMock:
    controller = MagicMock()
    controller.fetch_logs = AsyncMock(return_value=records if records is not None else _logs(50))
    controller.fetch_info = AsyncMock(
        return_value=LogFileInfo(file_path="db_logs", size=1536, last_modified="2024-01-01")
    )
    controller.fetch_categories = AsyncMock(return_value=["ALL", "API", "SYNC"])
    controller.fetch_functions = AsyncMock(return_value=["ALL", "run"])
    controller.clear_logs = AsyncMock(return_value={"success": True})
    return controller


async def _drain() -> None:
    for _ in range(10):
        await asyncio.sleep(0)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def updates() -> MagicMock:
    return MagicMock()


# =============================================================================
# Loading & highlight
# =============================================================================


class TestLogsPresenterLoading:
    """Tests for start/refresh and the new-entry highlight."""

    @pytest.mark.asyncio
    async def test_start_loads_logs_and_options(self, clock: ManualClock, updates: MagicMock) -> None:
        """start() loads filter options and the first dataset."""
        controller = _controller()
        presenter = LogsPresenter(controller, clock, on_update=updates)
        await presenter.start()

        assert len(presenter.records) == 50
        assert presenter.info.file_path == "db_logs"
        assert presenter.categories == ["ALL", "API", "SYNC"]
        assert presenter.functions == ["ALL", "run"]
        assert presenter.state is ViewState.READY
        assert presenter.diff.new_keys == frozenset()
        assert presenter.snapshot.source == "logs"
        assert presenter.snapshot.generation == presenter.fetcher.generation
        assert updates.called

    @pytest.mark.asyncio
    async def test_new_entries_highlight_then_clear(self, clock: ManualClock) -> None:
        """50 -> 52 entries flags the two new ids for 1.5 seconds, on two pages."""
        controller = _controller(_logs(50))
        presenter = LogsPresenter(controller, clock, settings=AppSettings(page_size=50))
        await presenter.start()

        controller.fetch_logs.return_value = _logs(52)
        assert await presenter.refresh() is True

        assert presenter.diff.new_keys == frozenset({51, 52})
        assert presenter.last_added == 2
        assert presenter.paginator.total_pages == 2
        assert presenter.is_new(presenter.records[-1])

        clock.advance(1.0)
        assert presenter.diff.new_keys == frozenset({51, 52})
        clock.advance(0.5)
        assert presenter.diff.new_keys == frozenset()

    @pytest.mark.asyncio
    async def test_auto_refresh_ticks_on_interval(self, clock: ManualClock) -> None:
        """With auto-refresh on, a fetch happens every refresh interval."""
        controller = _controller()
        presenter = LogsPresenter(controller, clock, settings=AppSettings(logs_refresh_interval=5))
        await presenter.start()
        assert controller.fetch_logs.await_count == 1

        clock.advance(5)
        await _drain()
        assert controller.fetch_logs.await_count == 2
        assert presenter.countdown == 5

    @pytest.mark.asyncio
    async def test_auto_refresh_off_does_not_poll(self, clock: ManualClock) -> None:
        """Disabled auto-refresh schedules nothing."""
        controller = _controller()
        presenter = LogsPresenter(controller, clock, settings=AppSettings(logs_auto_refresh=False))
        await presenter.start()
        assert clock.pending == 0

        assert presenter.toggle_auto_refresh() is True
        assert clock.pending == 2
        assert presenter.toggle_auto_refresh() is False
        assert clock.pending == 0

    @pytest.mark.asyncio
    async def test_network_error_keeps_previous_data(self, clock: ManualClock) -> None:
        """A failed poll shows the banner and keeps the last dataset."""
        controller = _controller()
        presenter = LogsPresenter(controller, clock)
        await presenter.start()

        controller.fetch_info.side_effect = NetworkError("Connection refused")
        assert await presenter.refresh() is False

        assert presenter.banner.message == "Connection refused"
        assert len(presenter.records) == 50
        assert presenter.state is ViewState.READY

        controller.fetch_info.side_effect = None
        await presenter.refresh()
        assert presenter.banner.visible is False

    @pytest.mark.asyncio
    async def test_filter_options_failure_keeps_all(self, clock: ManualClock) -> None:
        """Failing option lists fall back to just ALL."""
        controller = _controller()
        controller.fetch_categories.side_effect = NetworkError("down")
        presenter = LogsPresenter(controller, clock)
        await presenter.start()
        assert presenter.categories == ["ALL"]
        assert presenter.functions == ["ALL", "run"]


# =============================================================================
# Concurrency & lifecycle
# =============================================================================


class TestLogsPresenterConcurrency:
    """Tests for stale and post-teardown completions."""

    @pytest.mark.asyncio
    async def test_stale_result_is_discarded(self, clock: ManualClock) -> None:
        """A slow earlier fetch never overwrites a newer one."""
        controller = _controller()
        presenter = LogsPresenter(controller, clock)
        await presenter.start()

        release = asyncio.Event()
        newer = _logs(3)

        async def slow_then_fast(filters):
            if not release.is_set():
                release.set()
                await asyncio.sleep(0.01)
                return _logs(99)
            return newer

        controller.fetch_logs.side_effect = slow_then_fast
        first = asyncio.ensure_future(presenter.refresh())
        await asyncio.sleep(0)
        second = await presenter.refresh()
        first_result = await first

        assert second is True
        assert first_result is False
        assert presenter.records == newer

    @pytest.mark.asyncio
    async def test_completion_after_deactivate_is_dropped(self, clock: ManualClock, updates: MagicMock) -> None:
        """Leaving the view drops late results and stops the timer."""
        controller = _controller()
        presenter = LogsPresenter(controller, clock, on_update=updates)
        await presenter.start()
        before = list(presenter.records)
        gate = asyncio.Event()

        async def late(filters):
            await gate.wait()
            return _logs(80)

        controller.fetch_logs.side_effect = late
        pending = asyncio.ensure_future(presenter.refresh())
        await asyncio.sleep(0)
        presenter.deactivate()
        updates.reset_mock()
        gate.set()

        assert await pending is False
        assert presenter.records == before
        assert clock.pending == 0
        updates.assert_not_called()

    @pytest.mark.asyncio
    async def test_refresh_on_inactive_view_is_noop(self, clock: ManualClock) -> None:
        """refresh() before start() does nothing."""
        controller = _controller()
        presenter = LogsPresenter(controller, clock)
        assert await presenter.refresh() is False
        controller.fetch_logs.assert_not_awaited()


# =============================================================================
# Filters, paging & tree
# =============================================================================


class TestLogsPresenterFilters:
    """Tests for filters, pagination and the level tree."""

    @pytest.mark.asyncio
    async def test_invalid_filters_block_fetch(self, clock: ManualClock) -> None:
        """Out-of-range lines raise ValidationError and leave filters alone."""
        controller = _controller()
        presenter = LogsPresenter(controller, clock)
        await presenter.start()

        with pytest.raises(ValidationError):
            await presenter.apply_filters(lines=5)
        assert presenter.filters.lines == 10000
        assert controller.fetch_logs.await_count == 1

    @pytest.mark.asyncio
    async def test_apply_filters_refetches_from_page_one(self, clock: ManualClock) -> None:
        """Valid filters reset paging and are forwarded to the controller."""
        controller = _controller(_logs(120))
        presenter = LogsPresenter(controller, clock)
        await presenter.start()
        presenter.last_page()
        assert presenter.paginator.current_page == 3

        await presenter.apply_filters(level="ERROR", search="fail")
        sent = controller.fetch_logs.await_args.args[0]
        assert sent.level == "ERROR"
        assert sent.search == "fail"
        assert presenter.paginator.current_page == 1

    @pytest.mark.asyncio
    async def test_clear_filters_restores_defaults(self, clock: ManualClock) -> None:
        """clear_filters() goes back to the default filter set."""
        controller = _controller()
        presenter = LogsPresenter(controller, clock)
        await presenter.start()
        await presenter.apply_filters(level="ERROR")
        await presenter.clear_filters()
        assert presenter.filters.level == "ALL"

    @pytest.mark.asyncio
    async def test_paging(self, clock: ManualClock) -> None:
        """Page navigation slices the full dataset."""
        controller = _controller(_logs(120))
        presenter = LogsPresenter(controller, clock)
        await presenter.start()

        assert len(presenter.page_rows) == 50
        assert presenter.next_page() is True
        assert presenter.page_rows[0].id == 51
        assert presenter.last_page() is True
        assert len(presenter.page_rows) == 20
        assert presenter.next_page() is False
        assert presenter.first_page() is True
        assert presenter.previous_page() is False

    @pytest.mark.asyncio
    async def test_tree_groups_by_level_then_category(self, clock: ManualClock) -> None:
        """Tree roots follow level priority; children are categories."""
        controller = _controller(_logs(6))
        presenter = LogsPresenter(controller, clock)
        await presenter.start()

        assert [row.path for row in presenter.tree_rows()] == ["ERROR", "WARNING", "INFO"]
        presenter.toggle_node("ERROR")
        paths = [row.path for row in presenter.tree_rows()]
        assert paths[:3] == ["ERROR", "ERROR.API", "ERROR.SYNC"]


# =============================================================================
# Auto-scroll
# =============================================================================


class _Viewport:
    """Scrollable stand-in; each render adds ``row_height`` per record to the content."""

    def __init__(self, scroll_top: float, scroll_height: float = 500, client_height: float = 20) -> None:
        self.scroll_top = scroll_top
        self.scroll_height = scroll_height
        self.client_height = client_height
        self.scrolls: list[bool] = []

    def grow(self, rows: int, row_height: float = 100) -> None:
        self.scroll_height += rows * row_height

    def scroll_to_bottom(self, *, smooth: bool = True) -> None:
        self.scrolls.append(smooth)
        self.scroll_top = self.scroll_height - self.client_height


def _anchored_presenter(clock: ManualClock, viewport: _Viewport) -> tuple[LogsPresenter, MagicMock]:
    controller = _controller(_logs(50))
    presenter = LogsPresenter(controller, clock, on_update=lambda: viewport.grow(presenter.last_added))
    presenter.viewport = viewport
    return presenter, controller


class TestLogsPresenterAutoScroll:
    """Tests for the bottom measurement around each applied poll."""

    @pytest.mark.asyncio
    async def test_at_bottom_with_new_records_scrolls(self, clock: ManualClock) -> None:
        """A viewport at the bottom follows new entries with a smooth scroll."""
        viewport = _Viewport(scroll_top=480)
        presenter, controller = _anchored_presenter(clock, viewport)
        await presenter.start()
        assert viewport.scrolls == []

        controller.fetch_logs.return_value = _logs(52)
        await presenter.refresh()

        assert viewport.scrolls == [True]
        assert viewport.scroll_top == viewport.scroll_height - viewport.client_height

    @pytest.mark.asyncio
    async def test_scrolled_up_with_new_records_stays(self, clock: ManualClock) -> None:
        """More than 10 rows above the bottom, new entries leave the position alone."""
        viewport = _Viewport(scroll_top=100)
        presenter, controller = _anchored_presenter(clock, viewport)
        await presenter.start()

        controller.fetch_logs.return_value = _logs(52)
        await presenter.refresh()

        assert viewport.scrolls == []
        assert viewport.scroll_top == 100

    @pytest.mark.asyncio
    async def test_at_bottom_without_new_records_stays(self, clock: ManualClock) -> None:
        """An unchanged poll does not scroll even at the bottom."""
        viewport = _Viewport(scroll_top=480)
        presenter, _ = _anchored_presenter(clock, viewport)
        await presenter.start()
        await presenter.refresh()

        assert presenter.last_added == 0
        assert viewport.scrolls == []

    @pytest.mark.asyncio
    async def test_bottom_is_measured_before_the_update(self, clock: ManualClock) -> None:
        """Content growth from the update itself does not count as scrolling away."""
        viewport = _Viewport(scroll_top=480)
        presenter, controller = _anchored_presenter(clock, viewport)
        await presenter.start()

        controller.fetch_logs.return_value = _logs(60)
        await presenter.refresh()
        # The render grew the content by 10 rows before settle ran.
        assert viewport.scroll_height == 1500
        assert viewport.scrolls == [True]


# =============================================================================
# Actions
# =============================================================================


class TestLogsPresenterActions:
    """Tests for clear logs and export."""

    @pytest.mark.asyncio
    async def test_clear_logs_declined(self, clock: ManualClock) -> None:
        """Declining sends nothing and changes nothing."""
        controller = _controller()
        presenter = LogsPresenter(controller, clock)
        await presenter.start()

        assert await presenter.clear_logs(lambda: False) is False
        controller.clear_logs.assert_not_awaited()
        assert len(presenter.records) == 50
        assert presenter.banner.visible is False

    @pytest.mark.asyncio
    async def test_clear_logs_confirmed(self, clock: ManualClock) -> None:
        """Confirming deletes, resets to page 1 and reloads without highlights."""
        controller = _controller(_logs(120))
        presenter = LogsPresenter(controller, clock)
        await presenter.start()
        presenter.last_page()

        async def confirm() -> bool:
            return True

        controller.fetch_logs.return_value = _logs(2)
        assert await presenter.clear_logs(confirm) is True
        controller.clear_logs.assert_awaited_once()
        assert presenter.paginator.current_page == 1
        assert len(presenter.records) == 2
        assert presenter.diff.new_keys == frozenset()

    @pytest.mark.asyncio
    async def test_clear_logs_failure_shows_banner(self, clock: ManualClock) -> None:
        """A failed delete surfaces in the banner."""
        controller = _controller()
        controller.clear_logs.side_effect = NetworkError("Forbidden")
        presenter = LogsPresenter(controller, clock)
        await presenter.start()

        assert await presenter.clear_logs(lambda: True) is False
        assert presenter.banner.message == "Forbidden"

    @pytest.mark.asyncio
    async def test_export_text(self, clock: ManualClock) -> None:
        """Export has a summary header followed by one line per entry."""
        controller = _controller(_logs(2))
        presenter = LogsPresenter(controller, clock)
        await presenter.start()

        text = presenter.export_text(now=datetime(2024, 5, 1, 12, 0, 0))
        lines = text.splitlines()
        assert lines[0] == "SyncWatch Logs - 2024-05-01 12:00:00"
        assert "Total Entries: 2" in lines
        assert "Size: 1.5 KB" in lines
        assert "=" * 80 in lines
        assert lines[-1] == "2024-01-01T00:00:02 [WARNING] [run] message 2"

    @pytest.mark.asyncio
    async def test_export_uses_loaded_dataset(self, clock: ManualClock) -> None:
        """Export renders the last applied poll and issues no request."""
        controller = _controller(_logs(2))
        presenter = LogsPresenter(controller, clock)
        await presenter.start()
        controller.fetch_logs.return_value = _logs(5)

        text = presenter.export_text()

        assert "Total Entries: 2" in text.splitlines()
        assert controller.fetch_logs.await_count == 1
