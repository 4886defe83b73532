"""Logs screen configuration - widget IDs, column definitions and styles."""

from __future__ import annotations

# =============================================================================
# Widget IDs
# =============================================================================

LEVEL_SELECT_ID = "logs-level-select"
CATEGORY_SELECT_ID = "logs-category-select"
FUNCTION_SELECT_ID = "logs-function-select"
SEARCH_INPUT_ID = "logs-search-input"
LINES_INPUT_ID = "logs-lines-input"
START_DATE_INPUT_ID = "logs-start-date-input"
END_DATE_INPUT_ID = "logs-end-date-input"
STATUS_ID = "logs-status"
SWITCHER_ID = "logs-view-switcher"
LIST_TABLE_ID = "logs-table"
TREE_TABLE_ID = "logs-tree-table"

# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

LOG_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Timestamp", 24),
    ("Level", 9),
    ("Category", 16),
    ("Function", 24),
    ("Message", 80),
]

LOG_TREE_COLUMNS: list[tuple[str, int]] = [
    ("Group", 40),
    ("Entries", 9),
    ("Message", 80),
]

# =============================================================================
# Styles
# =============================================================================

LEVEL_STYLES: dict[str, str] = {
    "ERROR": "bold red",
    "CRITICAL": "bold red",
    "WARNING": "yellow",
    "INFO": "cyan",
    "DEBUG": "dim",
    "TRACE": "dim",
}

NEW_ROW_STYLE = "bold green"
