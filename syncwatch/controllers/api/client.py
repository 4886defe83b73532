"""Async HTTP client for the DataSync REST API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from syncwatch.constants.defaults import BASE_URL_DEFAULT
from syncwatch.constants.timeouts import CONNECT_TIMEOUT, REQUEST_TIMEOUT
from syncwatch.constants.values import USER_AGENT
from syncwatch.engine.errors import NetworkError

logger = logging.getLogger(__name__)


class DataSyncClient:
    """Thin wrapper over ``httpx.AsyncClient`` returning decoded JSON.

    Every transport failure and every non-2xx answer is raised as
    :class:`NetworkError`. When the server answers with a JSON body its
    ``details`` (or else ``error``) field becomes the message.
    """

    def __init__(
        self,
        base_url: str = BASE_URL_DEFAULT,
        token: str = "",
        *,
        timeout: float = REQUEST_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=httpx.Timeout(timeout, connect=min(CONNECT_TIMEOUT, timeout)),
            follow_redirects=True,
            transport=transport,
        )

    async def __aenter__(self) -> DataSyncClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self._request("GET", path, params=params)

    async def post_json(self, path: str, payload: dict[str, Any] | None = None) -> Any:
        return await self._request("POST", path, json=payload or {})

    async def delete_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self._request("DELETE", path, params=params)

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            message = self._error_message(exc.response)
            logger.warning("%s %s -> %s: %s", method, path, exc.response.status_code, message)
            raise NetworkError(message, status_code=exc.response.status_code) from exc
        except httpx.RequestError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise NetworkError(str(exc) or exc.__class__.__name__) from exc

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise NetworkError(f"Invalid JSON from {path}") from exc

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        fallback = f"HTTP {response.status_code}: {response.reason_phrase}"
        try:
            body = response.json()
        except ValueError:
            return fallback
        if not isinstance(body, dict):
            return fallback
        return str(body.get("details") or body.get("error") or fallback)


__all__ = [
    "DataSyncClient",
]
