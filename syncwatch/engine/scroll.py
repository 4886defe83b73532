"""Auto-scroll decision for a live log viewport."""

from __future__ import annotations

import logging
from typing import Protocol

from syncwatch.constants.defaults import SCROLL_BOTTOM_THRESHOLD_DEFAULT

logger = logging.getLogger(__name__)


class Viewport(Protocol):
    """Minimal view of a scrollable container."""

    @property
    def scroll_height(self) -> float: ...

    @property
    def scroll_top(self) -> float: ...

    @property
    def client_height(self) -> float: ...

    def scroll_to_bottom(self, *, smooth: bool = True) -> None: ...


def is_at_bottom(viewport: Viewport, threshold: float = SCROLL_BOTTOM_THRESHOLD_DEFAULT) -> bool:
    return viewport.scroll_height - viewport.scroll_top - viewport.client_height < threshold


class ScrollAnchor:
    """Measures "at bottom" right before an update and scrolls after it if needed.

    ``capture`` must be called immediately before new data is applied; a
    measurement from an earlier render is never reused because the user may
    have scrolled since. ``settle`` consumes the measurement.
    """

    def __init__(self, threshold: float = SCROLL_BOTTOM_THRESHOLD_DEFAULT) -> None:
        self.threshold = threshold
        self._was_at_bottom: bool | None = None

    @property
    def was_at_bottom(self) -> bool:
        return bool(self._was_at_bottom)

    def capture(self, viewport: Viewport) -> bool:
        self._was_at_bottom = is_at_bottom(viewport, self.threshold)
        return self._was_at_bottom

    def settle(self, viewport: Viewport, added: int) -> bool:
        """Scroll to the bottom when the viewport was there and records were added."""
        was_at_bottom = self._was_at_bottom
        self._was_at_bottom = None
        if not was_at_bottom or added <= 0:
            return False
        viewport.scroll_to_bottom(smooth=True)
        logger.debug("Auto-scrolled after %s new record(s)", added)
        return True


__all__ = [
    "ScrollAnchor",
    "Viewport",
    "is_at_bottom",
]
