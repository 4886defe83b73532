"""View lifecycle guard.

Each view (log viewer, unified monitor) owns one ``LifecycleGuard``. Every
asynchronous completion checks it before mutating view state, so results
that arrive after teardown are dropped without error or retry.
"""

from __future__ import annotations

import functools
import itertools
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

_T = TypeVar("_T")

_session_ids = itertools.count(1)


class LifecycleGuard:
    """Tracks whether the owning view is still active."""

    def __init__(self, name: str = "view") -> None:
        self.name = name
        self.session_id = next(_session_ids)
        self._active = False

    @property
    def is_active(self) -> bool:
        return self._active

    def activate(self) -> None:
        self._active = True
        logger.debug("View %s#%s activated", self.name, self.session_id)

    def deactivate(self) -> None:
        self._active = False
        logger.debug("View %s#%s deactivated", self.name, self.session_id)

    def run_if_active(self, callback: Callable[..., _T], *args: Any) -> _T | None:
        """Invoke ``callback`` only while active; otherwise a silent no-op."""
        if not self._active:
            logger.debug(
                "Dropping %s for inactive view %s#%s",
                getattr(callback, "__name__", "callback"),
                self.name,
                self.session_id,
            )
            return None
        return callback(*args)

    def guarded(
        self, func: Callable[..., Awaitable[_T]]
    ) -> Callable[..., Awaitable[_T | None]]:
        """Wrap a coroutine function so it never starts on an inactive view."""

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> _T | None:
            if not self._active:
                return None
            return await func(*args, **kwargs)

        return wrapper


ViewSession = LifecycleGuard

__all__ = [
    "LifecycleGuard",
    "ViewSession",
]
