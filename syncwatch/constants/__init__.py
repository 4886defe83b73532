"""Constants module for SyncWatch.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, channel names, priority lists)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings
"""

from syncwatch.constants.defaults import (
    BASE_URL_DEFAULT,
    HIGHLIGHT_TTL_SECONDS_DEFAULT,
    HISTORY_CAPACITY_DEFAULT,
    PAGE_SIZE_DEFAULT,
    THEME_DEFAULT,
)
from syncwatch.constants.enums import (
    LogLevel,
    MonitorTab,
    RecordKind,
    SchedulerState,
    ViewState,
)
from syncwatch.constants.limits import (
    LOG_LINES_MAX,
    LOG_LINES_MIN,
    SEARCH_MAX_LENGTH,
)
from syncwatch.constants.timeouts import (
    CONNECT_TIMEOUT,
    REQUEST_TIMEOUT,
)
from syncwatch.constants.values import (
    APP_TITLE,
    METRIC_CHANNELS,
)

__all__ = [
    "APP_TITLE",
    "BASE_URL_DEFAULT",
    "CONNECT_TIMEOUT",
    "HIGHLIGHT_TTL_SECONDS_DEFAULT",
    "HISTORY_CAPACITY_DEFAULT",
    "LOG_LINES_MAX",
    "LOG_LINES_MIN",
    "METRIC_CHANNELS",
    "PAGE_SIZE_DEFAULT",
    "REQUEST_TIMEOUT",
    "SEARCH_MAX_LENGTH",
    "THEME_DEFAULT",
    "LogLevel",
    "MonitorTab",
    "RecordKind",
    "SchedulerState",
    "ViewState",
]
