"""Tests for DataSyncClient using httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from syncwatch.controllers.api.client import DataSyncClient
from syncwatch.engine.errors import NetworkError


def _client(handler, token: str = "") -> DataSyncClient:
    return DataSyncClient(
        "http://datasync.test/", token, transport=httpx.MockTransport(handler)
    )


class TestDataSyncClient:
    """Tests for request shaping and error mapping."""

    @pytest.mark.asyncio
    async def test_get_json_sends_params_and_auth(self) -> None:
        """GET requests carry query params and the bearer token."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        async with _client(handler, token="abc") as client:
            result = await client.get_json("/api/logs", {"lines": 10})

        assert result == {"ok": True}
        assert seen[0].url.path == "/api/logs"
        assert seen[0].url.params["lines"] == "10"
        assert seen[0].headers["Authorization"] == "Bearer abc"
        assert seen[0].headers["User-Agent"].startswith("syncwatch/")
        assert client.is_closed

    @pytest.mark.asyncio
    async def test_no_auth_header_without_token(self) -> None:
        """Anonymous clients send no Authorization header."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        async with _client(handler) as client:
            await client.get_json("/api/x")
        assert "Authorization" not in seen[0].headers

    @pytest.mark.asyncio
    async def test_post_json_sends_body(self) -> None:
        """POST sends a JSON object body, empty by default."""
        bodies: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={"success": True})

        async with _client(handler) as client:
            await client.post_json("/api/kill")
            await client.post_json("/api/kill", {"force": True})
        assert bodies == [{}, {"force": True}]

    @pytest.mark.asyncio
    async def test_error_status_uses_details_then_error(self) -> None:
        """Server-provided details/error text becomes the message."""
        responses = iter(
            [
                httpx.Response(500, json={"error": "Failed", "details": "db down"}),
                httpx.Response(403, json={"error": "Forbidden"}),
                httpx.Response(502, text="<html>bad gateway</html>"),
            ]
        )

        async with _client(lambda request: next(responses)) as client:
            with pytest.raises(NetworkError) as first:
                await client.get_json("/a")
            with pytest.raises(NetworkError) as second:
                await client.get_json("/b")
            with pytest.raises(NetworkError) as third:
                await client.get_json("/c")

        assert str(first.value) == "db down"
        assert first.value.status_code == 500
        assert str(second.value) == "Forbidden"
        assert str(third.value) == "HTTP 502: Bad Gateway"

    @pytest.mark.asyncio
    async def test_transport_error_becomes_network_error(self) -> None:
        """Connection failures raise NetworkError without a status code."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as client:
            with pytest.raises(NetworkError) as exc_info:
                await client.get_json("/api/logs")
        assert exc_info.value.status_code is None
        assert "connection refused" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_empty_body_returns_none(self) -> None:
        """204-style empty answers decode to None."""
        async with _client(lambda request: httpx.Response(204)) as client:
            assert await client.delete_json("/api/logs") is None

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self) -> None:
        """A 200 with a non-JSON body is a NetworkError."""
        async with _client(lambda request: httpx.Response(200, text="not json")) as client:
            with pytest.raises(NetworkError):
                await client.get_json("/api/logs")
