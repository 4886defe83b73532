"""SyncWatch TUI Screens.

Domain Structure:
    - logs/    - Application log viewer
    - monitor/ - Unified monitor (activity, live processing, performance,
                 system resources, transfers)

Each domain pairs a Textual screen with a presenter that owns polling,
diffing and aggregation, so presenters can be driven without a terminal.
"""

from __future__ import annotations

from syncwatch.keyboard import BASE_SCREEN_BINDINGS
from syncwatch.keyboard.navigation import LOGS_SCREEN_BINDINGS, MONITOR_SCREEN_BINDINGS
from syncwatch.screens.base_presenter import PolledPresenter
from syncwatch.screens.base_screen import BaseScreen
from syncwatch.screens.logs import LogsPresenter, LogsScreen
from syncwatch.screens.monitor import MonitorPresenter, MonitorScreen

__all__ = [
    # Keybindings
    "BASE_SCREEN_BINDINGS",
    "LOGS_SCREEN_BINDINGS",
    "MONITOR_SCREEN_BINDINGS",
    # Base
    "BaseScreen",
    "PolledPresenter",
    # Logs
    "LogsPresenter",
    "LogsScreen",
    # Monitor
    "MonitorPresenter",
    "MonitorScreen",
]
