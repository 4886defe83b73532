"""Main application class for SyncWatch TUI."""

from __future__ import annotations

import logging

from textual.app import App
from textual.binding import Binding

from syncwatch.constants import APP_TITLE
from syncwatch.constants.enums import MonitorTab
from syncwatch.controllers import DataSyncClient, LogsController, MonitorController
from syncwatch.keyboard.app import APP_BINDINGS
from syncwatch.models.state.config_manager import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
)

logger = logging.getLogger(__name__)

VIEW_LOGS = "logs"
VIEW_MONITOR = "monitor"


class SyncWatchApp(App[None]):
    """Main TUI application for SyncWatch.

    Exactly one view is mounted at a time: navigating swaps the screen, so
    the previous view unmounts and its presenter stops polling before the
    next one starts.
    """

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS

    # Type hint for settings attribute
    settings: AppSettings

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        view: str = VIEW_MONITOR,
        tab: MonitorTab = MonitorTab.MONITOR,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.base_url = base_url
        self.token = token
        self.initial_view = view
        self.initial_tab = tab

        # Load settings on startup
        self._load_settings()
        self.client = DataSyncClient(
            self.settings.base_url,
            self.settings.api_token,
            timeout=self.settings.request_timeout_seconds,
        )
        self.logs_controller = LogsController(self.client)
        self.monitor_controller = MonitorController(self.client)

    def _load_settings(self) -> None:
        """Load application settings from persistent storage."""
        try:
            self.settings = ConfigManager.load()
        except ConfigLoadError as exc:
            logger.warning("Using default settings: %s", exc)
            self.settings = AppSettings()

        # Apply CLI overrides if provided
        overrides = {}
        if self.base_url:
            overrides["base_url"] = self.base_url
        if self.token:
            overrides["api_token"] = self.token
        if overrides:
            self.settings = AppSettings.model_validate(
                {**self.settings.model_dump(), **overrides}
            )

        if self.settings.theme in self.available_themes:
            self.theme = self.settings.theme
        else:
            logger.warning("Unknown theme %r, keeping the default", self.settings.theme)

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen(self._make_screen(self.initial_view))

    def _make_screen(self, view: str):
        from syncwatch.screens import LogsScreen, MonitorScreen

        if view == VIEW_LOGS:
            return LogsScreen()
        return MonitorScreen(initial_tab=self.initial_tab)

    def _navigate(self, view: str) -> None:
        from syncwatch.screens import LogsScreen, MonitorScreen

        target = LogsScreen if view == VIEW_LOGS else MonitorScreen
        if isinstance(self.screen, target):
            return
        self.switch_screen(self._make_screen(view))

    def action_nav_logs(self) -> None:
        """Navigate to the log viewer."""
        self._navigate(VIEW_LOGS)

    def action_nav_monitor(self) -> None:
        """Navigate to the unified monitor."""
        self._navigate(VIEW_MONITOR)

    async def on_unmount(self) -> None:
        """Close the HTTP client when the app exits."""
        await self.client.aclose()


__all__ = [
    "VIEW_LOGS",
    "VIEW_MONITOR",
    "SyncWatchApp",
]
