"""Parsers for the monitor controller."""

from syncwatch.controllers.monitor.parsers.metrics_parser import MetricsParser, to_float
from syncwatch.controllers.monitor.parsers.record_parser import RecordParser

__all__ = [
    "MetricsParser",
    "RecordParser",
    "to_float",
]
