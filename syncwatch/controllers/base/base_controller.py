"""Base controller for SyncWatch data sources.

Controllers own the request shapes and payload parsing for one area of the
REST API. They are stateless apart from the shared client, so presenters
can call them from any poll tick.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from syncwatch.controllers.api.client import DataSyncClient
from syncwatch.engine.errors import NetworkError

logger = logging.getLogger(__name__)


class BaseController(ABC):
    """Base controller class bound to one :class:`DataSyncClient`."""

    def __init__(self, client: DataSyncClient) -> None:
        self._client = client

    @property
    def client(self) -> DataSyncClient:
        return self._client

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if connection is available, False otherwise
        """
        ...

    async def _probe(self, path: str, params: dict[str, Any] | None = None) -> bool:
        try:
            await self._client.get_json(path, params)
        except NetworkError as exc:
            logger.debug("Connection check %s failed: %s", path, exc)
            return False
        return True
