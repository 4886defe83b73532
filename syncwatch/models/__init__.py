"""Data models for SyncWatch."""

from syncwatch.models.records import (
    LogFileInfo,
    LogRecord,
    PerformanceRecord,
    ProcessingEventRecord,
    Record,
    SessionRecord,
    TransferRecord,
)
from syncwatch.models.snapshot import MetricSample, Snapshot
from syncwatch.models.state import AppSettings, ConfigManager

__all__ = [
    "AppSettings",
    "ConfigManager",
    "LogFileInfo",
    "LogRecord",
    "MetricSample",
    "PerformanceRecord",
    "ProcessingEventRecord",
    "Record",
    "SessionRecord",
    "Snapshot",
    "TransferRecord",
]
