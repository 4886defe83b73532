"""Limit and threshold constants for the TUI.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Validation limits
# ============================================================================

LOG_LINES_MIN: Final = 10
LOG_LINES_MAX: Final = 100000
SEARCH_MAX_LENGTH: Final = 200
REFRESH_INTERVAL_MIN: Final = 1
PAGE_SIZE_MIN: Final = 1
HISTORY_CAPACITY_MIN: Final = 1

# ============================================================================
# Display limits
# ============================================================================

MAX_ERROR_MESSAGE_LENGTH: Final = 120
QUERY_PREVIEW_LENGTH: Final = 60
RECENT_EVENTS_DISPLAY: Final = 20

__all__ = [
    "HISTORY_CAPACITY_MIN",
    "LOG_LINES_MAX",
    "LOG_LINES_MIN",
    "MAX_ERROR_MESSAGE_LENGTH",
    "PAGE_SIZE_MIN",
    "QUERY_PREVIEW_LENGTH",
    "RECENT_EVENTS_DISPLAY",
    "REFRESH_INTERVAL_MIN",
    "SEARCH_MAX_LENGTH",
]
