# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Default transport built on httpx.

HttpxTransport performs exactly one round trip per call and translates
httpx network failures into TransportError. It can either own its
``httpx.AsyncClient`` (created lazily, closed by aclose()) or borrow one
passed in by the caller, in which case closing it stays the caller's job.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx
from typing_extensions import Self

from .config import HelixConfig
from .exceptions import TransportError
from .protocols.transport import HttpResponse

logger = logging.getLogger(__name__)


class HttpxTransport:
    """
    TransportProtocol implementation backed by ``httpx.AsyncClient``.

    Example:
        async with HttpxTransport() as transport:
            client = HelixClient(transport)
            users = await client.execute(GetUsersRequest(login=["dallas"]), token)
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        config: HelixConfig | None = None,
    ) -> None:
        self._config = config or HelixConfig()
        self._client = client
        self._owns_client = client is None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    timeout = httpx.Timeout(
                        self._config.timeout, connect=self._config.connect_timeout
                    )
                    self._client = httpx.AsyncClient(timeout=timeout)
        return self._client

    async def execute_http(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None = None,
    ) -> HttpResponse:
        client = await self._get_client()
        try:
            response = await client.request(method, url, headers=headers, content=body)
        except httpx.TimeoutException as e:
            raise TransportError(f"{method} {url} timed out: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {url} failed: {type(e).__name__}: {e}") from e
        return HttpResponse(
            status=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        await self.aclose()


__all__ = ["HttpxTransport"]
