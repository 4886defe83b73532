"""Tests for extract_schema_table()."""

from __future__ import annotations

import pytest

from syncwatch.utils.sql_text import extract_schema_table


class TestExtractSchemaTable:
    """Tests for table extraction from SQL text."""

    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            ("SELECT * FROM sales.orders WHERE id = 1", ("sales", "orders")),
            ("select * from orders", ("public", "orders")),
            ("INSERT INTO audit.log VALUES (1)", ("audit", "log")),
            ("UPDATE customers SET a = 1", ("public", "customers")),
            ("SELECT 1", ("N/A", "N/A")),
            ("", ("N/A", "N/A")),
            (None, ("N/A", "N/A")),
        ],
    )
    def test_extract(self, query, expected) -> None:
        """The first FROM/JOIN/INTO/UPDATE target is returned."""
        assert extract_schema_table(query) == expected
