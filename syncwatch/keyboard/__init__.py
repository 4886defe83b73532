"""Keyboard bindings module.

This module provides all keyboard bindings for the SyncWatch TUI.
Bindings are organized into two categories:

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (*_SCREEN_BINDINGS)
"""

from syncwatch.keyboard.app import APP_BINDINGS
from syncwatch.keyboard.navigation import (
    BASE_SCREEN_BINDINGS,
    LOGS_SCREEN_BINDINGS,
    MONITOR_SCREEN_BINDINGS,
)

__all__ = [
    "APP_BINDINGS",
    "BASE_SCREEN_BINDINGS",
    "LOGS_SCREEN_BINDINGS",
    "MONITOR_SCREEN_BINDINGS",
]
