"""Monitor screen module exports."""

from syncwatch.screens.monitor.config import TAB_TITLES
from syncwatch.screens.monitor.monitor_screen import MonitorScreen
from syncwatch.screens.monitor.presenter import (
    FETCH_GROUPS,
    TAB_GROUPS,
    MonitorPresenter,
    PerformanceSummary,
)

__all__ = [
    "FETCH_GROUPS",
    "TAB_GROUPS",
    "TAB_TITLES",
    "MonitorPresenter",
    "MonitorScreen",
    "PerformanceSummary",
]
