"""Monitor screen configuration - tab IDs, widget IDs and column definitions."""

from __future__ import annotations

from syncwatch.constants.enums import MonitorTab
from syncwatch.constants.values import (
    CHANNEL_CPU,
    CHANNEL_DB_CONNECTIONS,
    CHANNEL_DB_EFFICIENCY,
    CHANNEL_DB_QPS,
    CHANNEL_MEMORY,
    CHANNEL_NETWORK,
    CHANNEL_THROUGHPUT,
)

# =============================================================================
# Tab IDs
# =============================================================================

TAB_PREFIX = "tab-"

TAB_TITLES: dict[MonitorTab, str] = {
    MonitorTab.MONITOR: "Activity",
    MonitorTab.LIVE: "Live Processing",
    MonitorTab.PERFORMANCE: "Performance",
    MonitorTab.SYSTEM: "System",
    MonitorTab.TRANSFER: "Transfers",
}


def tab_id(tab: MonitorTab) -> str:
    return f"{TAB_PREFIX}{tab.value}"


def pane_id(tab: MonitorTab) -> str:
    return f"pane-{tab.value}"


def table_id(tab: MonitorTab) -> str:
    return f"monitor-{tab.value}-table"


def tab_from_id(widget_id: str | None) -> MonitorTab | None:
    if not widget_id or not widget_id.startswith(TAB_PREFIX):
        return None
    try:
        return MonitorTab(widget_id[len(TAB_PREFIX):])
    except ValueError:
        return None


# =============================================================================
# Widget IDs
# =============================================================================

TABS_ID = "monitor-tabs"
SWITCHER_ID = "monitor-content-switcher"
STATUS_ID = "monitor-status"
SUMMARY_ID_SUFFIX = "-summary"
CHANNELS_LIST_ID = "system-channel-list"
SYSTEM_STATS_ID = "system-stats"


def summary_id(tab: MonitorTab) -> str:
    return f"monitor-{tab.value}{SUMMARY_ID_SUFFIX}"


def plot_id(channel: str) -> str:
    return f"system-plot-{channel.replace('_', '-')}"


# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

SESSION_COLUMNS: list[tuple[str, int]] = [
    ("Database / Session", 34),
    ("User", 14),
    ("State", 12),
    ("Duration", 12),
    ("Schema.Table", 28),
    ("Query", 60),
]

PROCESSING_COLUMNS: list[tuple[str, int]] = [
    ("Engine / Schema / Table", 40),
    ("Status", 12),
    ("Strategy", 14),
    ("Records", 10),
    ("Processed At", 24),
]

PERFORMANCE_COLUMNS: list[tuple[str, int]] = [
    ("Database / Query", 50),
    ("Type", 10),
    ("Tier", 10),
    ("Calls", 8),
    ("Mean", 12),
    ("Total", 12),
    ("Efficiency", 10),
]

TRANSFER_COLUMNS: list[tuple[str, int]] = [
    ("Engine / Table", 40),
    ("Type", 12),
    ("Status", 12),
    ("Records", 10),
    ("Size", 12),
    ("Created At", 24),
]

TAB_COLUMNS: dict[MonitorTab, list[tuple[str, int]]] = {
    MonitorTab.MONITOR: SESSION_COLUMNS,
    MonitorTab.LIVE: PROCESSING_COLUMNS,
    MonitorTab.PERFORMANCE: PERFORMANCE_COLUMNS,
    MonitorTab.TRANSFER: TRANSFER_COLUMNS,
}

# =============================================================================
# Charts
# =============================================================================

CHANNEL_COLORS: dict[str, str] = {
    CHANNEL_CPU: "cyan",
    CHANNEL_MEMORY: "magenta",
    CHANNEL_NETWORK: "yellow",
    CHANNEL_THROUGHPUT: "green",
    CHANNEL_DB_CONNECTIONS: "blue",
    CHANNEL_DB_QPS: "orange",
    CHANNEL_DB_EFFICIENCY: "red",
}

CHART_TICK_COUNT = 6

STATUS_STYLES: dict[str, str] = {
    "active": "green",
    "idle": "dim",
    "idle in transaction": "yellow",
    "completed": "green",
    "success": "green",
    "failed": "bold red",
    "error": "bold red",
    "running": "cyan",
    "pending": "yellow",
}

NEW_ROW_STYLE = "bold green"
