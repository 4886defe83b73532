"""Record parser for monitor controller - parses monitor rows into records."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from syncwatch.models.records.monitor_records import (
    PerformanceRecord,
    ProcessingEventRecord,
    SessionRecord,
    TransferRecord,
)
from syncwatch.utils.sql_text import extract_schema_table

logger = logging.getLogger(__name__)

_M = TypeVar("_M", bound=BaseModel)


class RecordParser:
    """Parses monitor endpoint rows into typed records."""

    @staticmethod
    def _rows(payload: Any) -> list[dict[str, Any]]:
        """Accept both bare lists and ``{"data": [...], "pagination": ...}``."""
        if isinstance(payload, dict):
            payload = payload.get("data", [])
        if not isinstance(payload, list):
            return []
        return [row for row in payload if isinstance(row, dict)]

    def _parse_rows(self, payload: Any, model: type[_M], kind: str) -> list[_M]:
        records: list[_M] = []
        for row in self._rows(payload):
            try:
                records.append(model.model_validate({**row, "kind": kind}))
            except PydanticValidationError as exc:
                logger.debug("Skipping malformed %s row: %s", kind, exc)
        return records

    def parse_sessions(self, payload: Any) -> list[SessionRecord]:
        """Parse active sessions, deriving schema/table from the query text."""
        sessions: list[SessionRecord] = []
        for row in self._rows(payload):
            schema, table = extract_schema_table(row.get("query"))
            enriched = {
                **row,
                "schema_name": row.get("schema_name") or schema,
                "table_name": row.get("table_name") or table,
            }
            sessions.extend(self._parse_rows([enriched], SessionRecord, "session"))
        return sessions

    def parse_processing_events(self, payload: Any) -> list[ProcessingEventRecord]:
        return self._parse_rows(payload, ProcessingEventRecord, "processing")

    def parse_performance(self, payload: Any) -> list[PerformanceRecord]:
        return self._parse_rows(payload, PerformanceRecord, "performance")

    def parse_transfers(self, payload: Any) -> list[TransferRecord]:
        return self._parse_rows(payload, TransferRecord, "transfer")

    @staticmethod
    def parse_summary(payload: Any) -> dict[str, Any]:
        """Summary/statistics objects are shown as-is."""
        return dict(payload) if isinstance(payload, dict) else {}
