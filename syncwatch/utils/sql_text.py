"""Best-effort extraction of the target table from SQL text."""

from __future__ import annotations

import re

from syncwatch.constants.values import DEFAULT_SCHEMA, NOT_AVAILABLE

_TABLE_REFERENCE = re.compile(r"(?:FROM|JOIN|INTO|UPDATE)\s+(?:(\w+)\.)?(\w+)", re.IGNORECASE)


def extract_schema_table(query: str | None) -> tuple[str, str]:
    """Return ``(schema, table)`` for the first table referenced in ``query``.

    Unqualified tables are reported in the ``public`` schema. Queries with
    no recognizable table reference yield ``("N/A", "N/A")``.
    """
    if not query:
        return NOT_AVAILABLE, NOT_AVAILABLE
    match = _TABLE_REFERENCE.search(query)
    if match is None:
        return NOT_AVAILABLE, NOT_AVAILABLE
    return match.group(1) or DEFAULT_SCHEMA, match.group(2) or NOT_AVAILABLE
