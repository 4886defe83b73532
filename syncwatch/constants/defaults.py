"""Default values for settings.

All default values used in AppSettings model and engine components.
"""

from typing import Final

# ============================================================================
# Connection defaults
# ============================================================================

BASE_URL_DEFAULT: Final = "http://localhost:3000"
THEME_DEFAULT: Final = "textual-dark"

# ============================================================================
# Polling defaults (seconds)
# ============================================================================

LOGS_REFRESH_INTERVAL_DEFAULT: Final = 5
MONITOR_REFRESH_INTERVAL_DEFAULT: Final = 5
SYSTEM_REFRESH_INTERVAL_DEFAULT: Final = 10
LOGS_AUTO_REFRESH_DEFAULT: Final = True

# ============================================================================
# Engine defaults
# ============================================================================

PAGE_SIZE_DEFAULT: Final = 50
HISTORY_CAPACITY_DEFAULT: Final = 60
HIGHLIGHT_TTL_SECONDS_DEFAULT: Final = 1.5
SCROLL_BOTTOM_THRESHOLD_DEFAULT: Final = 10

# ============================================================================
# Log viewer defaults
# ============================================================================

LOG_LINES_DEFAULT: Final = 10000
MONITOR_ROW_LIMIT_DEFAULT: Final = 100
TRANSFER_WINDOW_DAYS_DEFAULT: Final = 7

__all__ = [
    "BASE_URL_DEFAULT",
    "HIGHLIGHT_TTL_SECONDS_DEFAULT",
    "HISTORY_CAPACITY_DEFAULT",
    "LOGS_AUTO_REFRESH_DEFAULT",
    "LOGS_REFRESH_INTERVAL_DEFAULT",
    "LOG_LINES_DEFAULT",
    "MONITOR_REFRESH_INTERVAL_DEFAULT",
    "MONITOR_ROW_LIMIT_DEFAULT",
    "PAGE_SIZE_DEFAULT",
    "SCROLL_BOTTOM_THRESHOLD_DEFAULT",
    "SYSTEM_REFRESH_INTERVAL_DEFAULT",
    "THEME_DEFAULT",
    "TRANSFER_WINDOW_DAYS_DEFAULT",
]
