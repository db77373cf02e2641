# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for bearer credentials."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CredentialProtocol(Protocol):
    """
    What the dispatcher needs from an OAuth token.

    The dispatcher only reads a credential. It never refreshes it: callers
    check is_expired() before dispatching and substitute a refreshed token
    value themselves.
    """

    @property
    def bearer(self) -> str:
        """The raw access token, sent as ``Authorization: Bearer <token>``."""
        ...

    @property
    def client_id(self) -> str:
        """Client id the token was issued to, sent as ``Client-Id``."""
        ...

    def scopes(self) -> frozenset[str]:
        """Scopes granted to this token."""
        ...

    def is_expired(self) -> bool:
        """Whether the token is past its expiry."""
        ...
