"""Log parser for logs controller - turns API payloads into log models."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from syncwatch.constants.values import FILTER_ALL
from syncwatch.models.records.log_record import LogFileInfo, LogRecord

logger = logging.getLogger(__name__)


class LogParser:
    """Parses log endpoint payloads into structured formats."""

    def parse_logs(self, payload: Any) -> list[LogRecord]:
        """Parse ``{"logs": [...]}`` (or a bare list) into log records.

        Rows that fail validation are skipped and logged.
        """
        rows = payload.get("logs", []) if isinstance(payload, dict) else payload
        records: list[LogRecord] = []
        for row in rows or []:
            if not isinstance(row, dict):
                continue
            try:
                records.append(LogRecord.model_validate({**row, "kind": "log"}))
            except PydanticValidationError as exc:
                logger.debug("Skipping malformed log row: %s", exc)
        return records

    def parse_info(self, payload: Any) -> LogFileInfo:
        if not isinstance(payload, dict):
            return LogFileInfo(exists=False)
        return LogFileInfo.model_validate(payload)

    def parse_values(self, payload: Any) -> list[str]:
        """Parse a distinct-values list, always led by ``ALL``."""
        values = [str(value) for value in payload or [] if value not in (None, "")]
        return [FILTER_ALL, *sorted(set(values) - {FILTER_ALL})]
