"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# View State Enums
# =============================================================================

class ViewState(Enum):
    """Per-view lifecycle of a polled dataset."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    REFRESHING = "refreshing"


class SchedulerState(Enum):
    """PollScheduler state values."""

    IDLE = "idle"
    RUNNING = "running"


# =============================================================================
# Monitor Enums
# =============================================================================

class MonitorTab(Enum):
    """Unified monitor tabs."""

    MONITOR = "monitor"
    LIVE = "live"
    PERFORMANCE = "performance"
    SYSTEM = "system"
    TRANSFER = "transfer"


class RecordKind(Enum):
    """Discriminator for record variants."""

    LOG = "log"
    SESSION = "session"
    PROCESSING = "processing"
    PERFORMANCE = "performance"
    TRANSFER = "transfer"


# =============================================================================
# Log Enums
# =============================================================================

class LogLevel(Enum):
    """Log level filter values."""

    ALL = "ALL"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


__all__ = [
    "LogLevel",
    "MonitorTab",
    "RecordKind",
    "SchedulerState",
    "ViewState",
]
