"""Widgets for the SyncWatch TUI.

- data: scroll viewport adapter for tables
- feedback: confirmation dialog
"""

from syncwatch.widgets.data import WidgetViewport
from syncwatch.widgets.feedback import ConfirmDialog, ask_confirmation

__all__ = [
    "ConfirmDialog",
    "WidgetViewport",
    "ask_confirmation",
]
