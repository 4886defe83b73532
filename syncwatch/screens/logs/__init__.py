"""Logs screen module exports."""

from syncwatch.screens.logs.logs_screen import LogsScreen
from syncwatch.screens.logs.presenter import LogsPresenter

__all__ = [
    "LogsPresenter",
    "LogsScreen",
]
