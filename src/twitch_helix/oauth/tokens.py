# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Token values.

Tokens are immutable. Refreshing a token produces a new value (see
oauth.flows) that the caller substitutes for the old one; nothing in this
package mutates a token in place.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from ..types.scope import scope_set


def expiry_from_now(expires_in: float | None, now: datetime | None = None) -> datetime | None:
    """Absolute UTC expiry for a relative ``expires_in`` in seconds."""
    if expires_in is None:
        return None
    current = now or datetime.now(timezone.utc)
    return current + timedelta(seconds=expires_in)


@dataclass(frozen=True)
class _Token:
    access_token: str = field(repr=False)
    client_id: str
    granted_scopes: frozenset[str] = frozenset()
    expires_at: datetime | None = None
    leeway: float = 0.0
    """Report expiry this many seconds early."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "granted_scopes", scope_set(self.granted_scopes))
        if self.expires_at is not None and self.expires_at.tzinfo is None:
            object.__setattr__(
                self, "expires_at", self.expires_at.replace(tzinfo=timezone.utc)
            )

    @property
    def bearer(self) -> str:
        return self.access_token

    def scopes(self) -> frozenset[str]:
        return self.granted_scopes

    def expires_in(self, now: datetime | None = None) -> timedelta | None:
        """Time left before expiry; None if the expiry is unknown."""
        if self.expires_at is None:
            return None
        return self.expires_at - (now or datetime.now(timezone.utc))

    def is_expired(self, now: datetime | None = None) -> bool:
        """
        Whether the token is past its expiry (minus ``leeway``).

        A token with unknown expiry is never reported as expired; Helix
        answers 401 for it once it is.
        """
        remaining = self.expires_in(now)
        if remaining is None:
            return False
        return remaining <= timedelta(seconds=self.leeway)


@dataclass(frozen=True)
class UserToken(_Token):
    """
    Token issued to a user through the authorization code or implicit flow.

    Example:
        token = await user_token_from_existing(transport, "abcd1234", refresh_token="efgh")
        if token.is_expired():
            token = await refresh_user_token(transport, token, client_secret)
    """

    login: str = ""
    user_id: str = ""
    refresh_token: str | None = field(default=None, repr=False)


@dataclass(frozen=True)
class AppAccessToken(_Token):
    """
    Token from the client credentials flow. Has no user and no refresh
    token; get a new one with get_app_access_token() when it expires.
    """

    client_secret: str | None = field(default=None, repr=False)


__all__ = ["AppAccessToken", "UserToken", "expiry_from_now"]
