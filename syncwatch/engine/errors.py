"""Error taxonomy and the latest-wins error banner.

- NetworkError: request failed or returned a non-success status. Shown in
  the banner; previously loaded data stays visible.
- ConcurrencyStale: a completion whose generation was superseded. Never
  shown; only used to tag dropped results.
- ValidationError: an action was attempted with invalid input. Shown
  inline, blocks the action, leaves polling untouched.
- UserDeclined: a destructive action was not confirmed. Aborts silently.
"""

from __future__ import annotations

import logging

from syncwatch.constants.limits import MAX_ERROR_MESSAGE_LENGTH

logger = logging.getLogger(__name__)


class SyncWatchError(Exception):
    """Base exception for SyncWatch errors."""


class NetworkError(SyncWatchError):
    """Raised when a request fails or the server answers with an error status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ConcurrencyStale(SyncWatchError):
    """Marks a result produced by a fetch generation that is no longer current."""

    def __init__(self, generation: int, current: int) -> None:
        super().__init__(f"generation {generation} superseded by {current}")
        self.generation = generation
        self.current = current


class ValidationError(SyncWatchError):
    """Raised when an action is attempted with missing or invalid input."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class UserDeclined(SyncWatchError):
    """Raised when a destructive action's confirmation was rejected."""


def friendly_error(error: BaseException) -> str:
    """Convert an exception to a short user-facing message."""
    msg = str(error)
    lowered = msg.lower()
    if "timed out" in lowered or "timeout" in lowered:
        return "Connection timed out"
    if "connection refused" in lowered:
        return "Connection refused"
    if len(msg) > MAX_ERROR_MESSAGE_LENGTH:
        return msg[: MAX_ERROR_MESSAGE_LENGTH - 3] + "..."
    return msg or error.__class__.__name__


class ErrorBanner:
    """Single latest-wins error message for a view."""

    def __init__(self) -> None:
        self._message: str | None = None

    @property
    def message(self) -> str | None:
        return self._message

    @property
    def visible(self) -> bool:
        return self._message is not None

    def show(self, error: BaseException | str) -> None:
        if isinstance(error, BaseException):
            self._message = friendly_error(error)
        else:
            self._message = error

    def clear(self) -> None:
        self._message = None


__all__ = [
    "ConcurrencyStale",
    "ErrorBanner",
    "NetworkError",
    "SyncWatchError",
    "UserDeclined",
    "ValidationError",
    "friendly_error",
]
