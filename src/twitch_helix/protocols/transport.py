# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for the HTTP transport collaborator."""

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class HttpRequest:
    """A fully assembled HTTP request, ready for the transport."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass(frozen=True)
class HttpResponse:
    """Raw HTTP response as returned by a transport."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


@runtime_checkable
class TransportProtocol(Protocol):
    """
    Minimal protocol for the HTTP transport.

    The core library does NOT do connection handling, TLS, DNS, pooling or
    timeouts; a transport owns all of that and only has to perform one round
    trip per call. Network failures should be raised as TransportError.
    """

    async def execute_http(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None = None,
    ) -> HttpResponse:
        """Send one request and return the raw response."""
        ...
