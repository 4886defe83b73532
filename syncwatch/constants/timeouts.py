"""Timeout constants for the TUI.

All timeout values for API requests (float, in seconds).
"""

from typing import Final

REQUEST_TIMEOUT: Final = 10.0
CONNECT_TIMEOUT: Final = 5.0

__all__ = [
    "CONNECT_TIMEOUT",
    "REQUEST_TIMEOUT",
]
