"""Screen-specific keyboard bindings."""

from typing import Annotated

# ============================================================================
# Base Screen Bindings
# ============================================================================

BASE_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("r", "refresh", "Refresh"),
]

# ============================================================================
# Logs Screen Bindings
# ============================================================================

LOGS_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("r", "refresh", "Refresh"),
    ("a", "toggle_auto_refresh", "Auto-refresh"),
    ("slash", "focus_search", "Search"),
    ("f", "clear_filters", "Clear Filters"),
    ("t", "toggle_view", "Tree/List"),
    ("x", "export", "Export"),
    ("ctrl+d", "clear_logs", "Clear Logs"),
    ("left", "previous_page", "Prev Page"),
    ("right", "next_page", "Next Page"),
    ("home", "first_page", "First Page"),
    ("end", "last_page", "Last Page"),
]

# ============================================================================
# Monitor Screen Bindings
# ============================================================================

MONITOR_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("r", "refresh", "Refresh"),
    ("1", "switch_tab('monitor')", "Activity"),
    ("2", "switch_tab('live')", "Live"),
    ("3", "switch_tab('performance')", "Performance"),
    ("4", "switch_tab('system')", "System"),
    ("5", "switch_tab('transfer')", "Transfer"),
    ("k", "kill_session", "Kill Session"),
    ("space", "toggle_node", "Expand"),
]

__all__ = [
    "BASE_SCREEN_BINDINGS",
    "LOGS_SCREEN_BINDINGS",
    "MONITOR_SCREEN_BINDINGS",
]
