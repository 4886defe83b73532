"""Fixed-size pagination over a dataset that can change under it."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from syncwatch.constants.defaults import PAGE_SIZE_DEFAULT

_T = TypeVar("_T")


class Paginator(Generic[_T]):
    """Keeps ``1 <= current_page <= max(1, total_pages)`` on every dataset update.

    Slices are always cut from the full dataset, never from a previously
    sliced page.
    """

    def __init__(self, page_size: int = PAGE_SIZE_DEFAULT) -> None:
        if page_size < 1:
            raise ValueError(f"Page size must be >= 1, got {page_size}")
        self._page_size = page_size
        self._items: list[_T] = []
        self._current_page = 1

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def total_pages(self) -> int:
        return math.ceil(len(self._items) / self._page_size)

    @property
    def total_items(self) -> int:
        return len(self._items)

    @property
    def items(self) -> list[_T]:
        return self._items

    def set_dataset(self, items: Sequence[_T]) -> None:
        self._items = list(items)
        self._clamp()

    def set_page_size(self, page_size: int) -> None:
        if page_size < 1:
            raise ValueError(f"Page size must be >= 1, got {page_size}")
        self._page_size = page_size
        self._clamp()

    def page(self, number: int) -> bool:
        """Go to page ``number``; returns False when out of range or unchanged."""
        if number < 1 or number > self.total_pages or number == self._current_page:
            return False
        self._current_page = number
        return True

    def reset(self) -> None:
        """Return to page 1 regardless of the dataset size."""
        self._current_page = 1

    def first(self) -> bool:
        return self.page(1)

    def last(self) -> bool:
        return self.page(self.total_pages)

    def next(self) -> bool:
        return self.page(self._current_page + 1)

    def previous(self) -> bool:
        return self.page(self._current_page - 1)

    def slice(self) -> list[_T]:
        start = (self._current_page - 1) * self._page_size
        return self._items[start : start + self._page_size]

    def describe(self) -> str:
        return f"Page {self._current_page} of {max(1, self.total_pages)} ({self.total_items} items)"

    def _clamp(self) -> None:
        self._current_page = min(max(1, self._current_page), max(1, self.total_pages))

    def state(self) -> dict[str, Any]:
        return {
            "current_page": self._current_page,
            "page_size": self._page_size,
            "total_pages": self.total_pages,
        }


__all__ = [
    "Paginator",
]
