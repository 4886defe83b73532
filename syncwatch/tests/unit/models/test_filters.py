"""Tests for LogFilters validation and query rendering."""

from __future__ import annotations

import pytest

from syncwatch.engine.errors import ValidationError
from syncwatch.models.filters import LogFilters, sanitize_search


class TestSanitizeSearch:
    """Tests for search text cleanup."""

    def test_trims_and_caps(self) -> None:
        """Whitespace is trimmed and length capped."""
        assert sanitize_search("  error  ") == "error"
        assert len(sanitize_search("x" * 500)) == 200

    def test_empty(self) -> None:
        """None and blanks become empty strings."""
        assert sanitize_search(None) == ""
        assert sanitize_search("   ") == ""


class TestLogFiltersCheck:
    """Tests for LogFilters.check()."""

    def test_defaults_are_valid(self) -> None:
        """Default filters pass validation."""
        LogFilters().check()

    @pytest.mark.parametrize("lines", [9, 100001])
    def test_lines_out_of_range(self, lines: int) -> None:
        """Line counts outside 10..100000 are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            LogFilters(lines=lines).check()
        assert exc_info.value.field == "lines"

    def test_inverted_date_range(self) -> None:
        """Start after end is rejected."""
        filters = LogFilters(start_date="2024-02-01", end_date="2024-01-01")
        with pytest.raises(ValidationError):
            filters.check()

    def test_mixed_timezone_dates_compare(self) -> None:
        """An aware and a naive date can still be compared."""
        LogFilters(start_date="2024-01-01T00:00:00Z", end_date="2024-01-02").check()

    def test_unparseable_date(self) -> None:
        """Garbage dates raise ValidationError."""
        with pytest.raises(ValidationError):
            LogFilters(start_date="yesterday", end_date="2024-01-01").check()


class TestLogFiltersParams:
    """Tests for LogFilters.to_params()."""

    def test_default_params_only_lines(self) -> None:
        """ALL values and blanks are omitted."""
        assert LogFilters().to_params() == {"lines": 10000}

    def test_all_params(self) -> None:
        """Set values are sent with server key names."""
        filters = LogFilters(
            lines=500,
            level="ERROR",
            category="SYNC",
            function="run",
            search="  timeout ",
            start_date="2024-01-01",
            end_date="2024-01-02",
            auto_cleanup=True,
            delete_debug=True,
            delete_duplicates=False,
            delete_older_than=30,
        )
        assert filters.to_params() == {
            "lines": 500,
            "level": "ERROR",
            "category": "SYNC",
            "function": "run",
            "search": "timeout",
            "startDate": "2024-01-01",
            "endDate": "2024-01-02",
            "autoCleanup": "true",
            "deleteDebug": "true",
            "deleteOlderThan": 30,
        }
