"""Tests for Paginator."""

from __future__ import annotations

import pytest

from syncwatch.engine.paginator import Paginator


class TestPaginator:
    """Tests for paging over a changing dataset."""

    def test_rejects_invalid_page_size(self) -> None:
        """Page size must be positive."""
        with pytest.raises(ValueError):
            Paginator(0)

    def test_empty_dataset(self) -> None:
        """An empty dataset is page 1 of 0 with an empty slice."""
        pager: Paginator[int] = Paginator(50)
        assert pager.current_page == 1
        assert pager.total_pages == 0
        assert pager.slice() == []
        assert pager.describe() == "Page 1 of 1 (0 items)"

    def test_slices_from_full_dataset(self) -> None:
        """Each page is cut from the full dataset."""
        pager: Paginator[int] = Paginator(50)
        pager.set_dataset(range(52))
        assert pager.total_pages == 2
        assert pager.slice() == list(range(50))
        assert pager.next() is True
        assert pager.slice() == [50, 51]

    def test_out_of_range_navigation_is_rejected(self) -> None:
        """page() ignores numbers outside 1..total_pages."""
        pager: Paginator[int] = Paginator(10)
        pager.set_dataset(range(25))
        assert pager.page(0) is False
        assert pager.page(4) is False
        assert pager.previous() is False
        assert pager.last() is True
        assert pager.current_page == 3
        assert pager.next() is False

    def test_shrinking_dataset_clamps_page(self) -> None:
        """Current page is clamped when the dataset shrinks."""
        pager: Paginator[int] = Paginator(10)
        pager.set_dataset(range(30))
        pager.last()
        pager.set_dataset(range(12))
        assert pager.current_page == 2
        pager.set_dataset([])
        assert pager.current_page == 1

    def test_reset_returns_to_first_page(self) -> None:
        """reset() always goes to page 1."""
        pager: Paginator[int] = Paginator(10)
        pager.set_dataset(range(30))
        pager.last()
        pager.reset()
        assert pager.current_page == 1

    def test_set_page_size_reclamps(self) -> None:
        """Changing page size keeps the page within range."""
        pager: Paginator[int] = Paginator(10)
        pager.set_dataset(range(30))
        pager.last()
        pager.set_page_size(20)
        assert pager.state() == {"current_page": 2, "page_size": 20, "total_pages": 2}
