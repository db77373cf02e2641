"""
Unit tests for HttpxTransport, using httpx.MockTransport so no traffic
leaves the process.
"""

from __future__ import annotations

import json

import httpx
import pytest

from twitch_helix import HttpxTransport
from twitch_helix.exceptions import TransportError


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestHttpxTransport:
    """Tests for the httpx-backed transport."""

    @pytest.mark.asyncio
    async def test_round_trip(self):
        """Method, URL, headers and body are passed through unchanged."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200, json={"data": []}, headers={"Ratelimit-Remaining": "799"}
            )

        async with mock_client(handler) as client:
            transport = HttpxTransport(client=client)
            response = await transport.execute_http(
                "POST",
                "https://api.twitch.tv/helix/things?id=1",
                {"Authorization": "Bearer abc"},
                b'{"a": 1}',
            )

        assert response.status == 200
        assert json.loads(response.body) == {"data": []}
        assert response.headers["ratelimit-remaining"] == "799"
        assert seen[0].method == "POST"
        assert str(seen[0].url) == "https://api.twitch.tv/helix/things?id=1"
        assert seen[0].headers["Authorization"] == "Bearer abc"
        assert seen[0].content == b'{"a": 1}'

    @pytest.mark.asyncio
    async def test_error_status_is_not_raised(self):
        """Non-2xx statuses are returned, not raised."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="unavailable")

        async with mock_client(handler) as client:
            response = await HttpxTransport(client=client).execute_http("GET", "https://x/", {})

        assert response.status == 503
        assert response.text() == "unavailable"

    @pytest.mark.asyncio
    async def test_connect_error(self):
        """httpx network errors become TransportError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with mock_client(handler) as client:
            with pytest.raises(TransportError, match="ConnectError"):
                await HttpxTransport(client=client).execute_http("GET", "https://x/", {})

    @pytest.mark.asyncio
    async def test_timeout(self):
        """httpx timeouts become TransportError."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        async with mock_client(handler) as client:
            with pytest.raises(TransportError, match="timed out"):
                await HttpxTransport(client=client).execute_http("GET", "https://x/", {})

    @pytest.mark.asyncio
    async def test_borrowed_client_is_not_closed(self):
        """aclose() leaves a caller-supplied client open."""
        client = mock_client(lambda request: httpx.Response(204))

        transport = HttpxTransport(client=client)
        await transport.aclose()

        assert client.is_closed is False
        await client.aclose()

    @pytest.mark.asyncio
    async def test_owned_client_is_closed(self):
        """A lazily created client is closed by aclose()."""
        transport = HttpxTransport()
        owned = await transport._get_client()

        async with transport:
            pass

        assert owned.is_closed is True
