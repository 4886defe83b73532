"""Logs controller - application log access over the REST API."""

from __future__ import annotations

import logging
from typing import Any

from syncwatch.controllers.api.client import DataSyncClient
from syncwatch.controllers.base.base_controller import BaseController
from syncwatch.controllers.logs.parsers.log_parser import LogParser
from syncwatch.models.filters import LogFilters
from syncwatch.models.records.log_record import LogFileInfo, LogRecord

logger = logging.getLogger(__name__)


class LogsController(BaseController):
    """Fetches log entries, log store metadata and filter option lists."""

    LOGS_PATH = "/api/logs"
    INFO_PATH = "/api/logs/info"
    CATEGORIES_PATH = "/api/logs/categories"
    FUNCTIONS_PATH = "/api/logs/functions"

    def __init__(self, client: DataSyncClient) -> None:
        super().__init__(client)
        self._parser = LogParser()

    async def check_connection(self) -> bool:
        return await self._probe(self.INFO_PATH)

    async def fetch_logs(self, filters: LogFilters) -> list[LogRecord]:
        payload = await self._client.get_json(self.LOGS_PATH, filters.to_params())
        return self._parser.parse_logs(payload)

    async def fetch_info(self) -> LogFileInfo:
        payload = await self._client.get_json(self.INFO_PATH)
        return self._parser.parse_info(payload)

    async def fetch_categories(self) -> list[str]:
        return self._parser.parse_values(await self._client.get_json(self.CATEGORIES_PATH))

    async def fetch_functions(self) -> list[str]:
        return self._parser.parse_values(await self._client.get_json(self.FUNCTIONS_PATH))

    async def clear_logs(self) -> dict[str, Any]:
        """Delete every log entry."""
        result = await self._client.delete_json(self.LOGS_PATH, {"deleteAll": "true"})
        logger.info("Cleared all logs")
        return result if isinstance(result, dict) else {}
