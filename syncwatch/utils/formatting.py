"""Human-readable formatting helpers for sizes, durations and uptimes."""

from __future__ import annotations

import math
from typing import Any

from syncwatch.constants.values import NOT_AVAILABLE

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")
_SIZE_BASE = 1024


def _format_number(value: float) -> str:
    """Two decimals at most, trailing zeros dropped (``1.50`` -> ``1.5``)."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return text or "0"


def format_file_size(size_bytes: Any) -> str:
    """Format a byte count using base-1024 units up to GB.

    Examples:
        >>> format_file_size(0)
        '0 Bytes'
        >>> format_file_size(1536)
        '1.5 KB'
    """
    try:
        value = float(size_bytes)
    except (TypeError, ValueError):
        return NOT_AVAILABLE
    if value <= 0 or math.isnan(value):
        return "0 Bytes"
    index = min(int(math.floor(math.log(value) / math.log(_SIZE_BASE))), len(_SIZE_UNITS) - 1)
    index = max(index, 0)
    return f"{_format_number(value / _SIZE_BASE**index)} {_SIZE_UNITS[index]}"


def format_duration_ms(milliseconds: Any) -> str:
    """Format a millisecond duration as microseconds, milliseconds or seconds.

    Missing, zero and non-numeric values render as ``N/A``.
    """
    if not milliseconds:
        return NOT_AVAILABLE
    try:
        value = float(milliseconds)
    except (TypeError, ValueError):
        return NOT_AVAILABLE
    if math.isnan(value):
        return NOT_AVAILABLE
    if value < 1:
        return f"{value * 1000:.2f}μs"
    if value < 1000:
        return f"{value:.2f}ms"
    return f"{value / 1000:.2f}s"


def format_uptime(seconds: Any) -> str:
    """Format an uptime in seconds as ``<d>d <h>h <m>m``."""
    if not seconds:
        return NOT_AVAILABLE
    try:
        total = int(float(seconds))
    except (TypeError, ValueError):
        return NOT_AVAILABLE
    days, remainder = divmod(total, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes = remainder // 60
    return f"{days}d {hours}h {minutes}m"


def truncate(text: str | None, length: int) -> str:
    """Shorten text to ``length`` characters, marking the cut with ``...``."""
    if not text:
        return ""
    flat = " ".join(text.split())
    if len(flat) <= length:
        return flat
    return flat[: max(length - 3, 0)] + "..."
