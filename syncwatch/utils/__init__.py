"""Utility functions for SyncWatch."""

from syncwatch.utils.formatting import (
    format_duration_ms,
    format_file_size,
    format_uptime,
    truncate,
)
from syncwatch.utils.sql_text import extract_schema_table

__all__ = [
    "extract_schema_table",
    "format_duration_ms",
    "format_file_size",
    "format_uptime",
    "truncate",
]
