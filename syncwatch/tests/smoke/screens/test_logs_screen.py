"""Smoke tests for LogsScreen - widget composition, keybindings and mounting.

This module tests:
- Screen class attributes and properties
- Widget composition verification
- A headless mount against a mocked controller
"""

from __future__ import annotations

import inspect
from unittest.mock import AsyncMock, MagicMock

import pytest
from textual.app import App
from textual.widgets import DataTable

from syncwatch.engine.clock import LoopClock
from syncwatch.models.records.log_record import LogFileInfo, LogRecord
from syncwatch.screens import BaseScreen, LogsPresenter, LogsScreen
from syncwatch.screens.logs.config import LIST_TABLE_ID, TREE_TABLE_ID

# =============================================================================
# Widget Composition Tests
# =============================================================================


class TestLogsScreenWidgetComposition:
    """Test LogsScreen widget composition."""

    def test_is_base_screen(self) -> None:
        """LogsScreen is a polled BaseScreen."""
        assert issubclass(LogsScreen, BaseScreen)

    def test_screen_has_bindings(self) -> None:
        """LogsScreen declares its key bindings."""
        actions = {action for _, action, _ in LogsScreen.BINDINGS}
        assert {"refresh", "toggle_auto_refresh", "export", "clear_logs", "toggle_view"} <= actions

    def test_compose_declares_tables(self) -> None:
        """List and tree tables live in the view switcher."""
        source = inspect.getsource(LogsScreen.compose_body)
        assert "LIST_TABLE_ID" in source
        assert "TREE_TABLE_ID" in source
        assert LIST_TABLE_ID != TREE_TABLE_ID

    def test_injected_presenter_is_used(self) -> None:
        """A presenter passed in is used instead of building one from the app."""
        presenter = LogsPresenter(MagicMock(), LoopClock())
        assert LogsScreen(presenter).presenter is presenter

    def test_screen_has_actions(self) -> None:
        """Every bound action has a handler."""
        for _, action, _ in LogsScreen.BINDINGS:
            assert hasattr(LogsScreen, f"action_{action}"), action


# =============================================================================
# Mount Tests
# =============================================================================


class _LogsHost(App[None]):
    def __init__(self, screen: LogsScreen) -> None:
        super().__init__()
        self._logs_screen = screen

    def on_mount(self) -> None:
        self.push_screen(self._logs_screen)


def _controller() -> MagicMock:
    controller = MagicMock()
    controller.fetch_logs = AsyncMock(
        return_value=[
            LogRecord(id=1, level="INFO", category="API", message="started"),
            LogRecord(id=2, level="ERROR", category="SYNC", message="failed"),
            LogRecord(id=3, level="INFO", category="SYNC", message="done"),
        ]
    )
    controller.fetch_info = AsyncMock(return_value=LogFileInfo(file_path="db_logs", size=10))
    controller.fetch_categories = AsyncMock(return_value=["ALL", "API", "SYNC"])
    controller.fetch_functions = AsyncMock(return_value=["ALL"])
    return controller


class TestLogsScreenMount:
    """Mount LogsScreen headless with a mocked controller."""

    @pytest.mark.asyncio
    async def test_mount_renders_rows(self) -> None:
        """The first poll fills the list table and the tree roots."""
        presenter = LogsPresenter(_controller(), LoopClock())
        app = _LogsHost(LogsScreen(presenter))
        async with app.run_test(size=(160, 40)) as pilot:
            await app.workers.wait_for_complete()
            await pilot.pause()
            screen = app.screen
            assert isinstance(screen, LogsScreen)
            assert screen.query_one(f"#{LIST_TABLE_ID}", DataTable).row_count == 3
            assert screen.query_one(f"#{TREE_TABLE_ID}", DataTable).row_count == 2
            assert presenter.is_active
