"""
Unit tests for token values.
"""

from datetime import datetime, timedelta, timezone

import pytest

from twitch_helix.oauth import AppAccessToken, UserToken, expiry_from_now
from twitch_helix.types import Scope

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class TestExpiryFromNow:
    def test_none(self):
        """No expires_in gives no expiry."""
        assert expiry_from_now(None) is None

    def test_relative_to_now(self):
        """expires_in counts from now."""
        assert expiry_from_now(3600, now=NOW) == NOW + timedelta(hours=1)


class TestTokenExpiry:
    """Tests for is_expired() and expires_in()."""

    def test_not_expired(self):
        """A future expiry is not expired."""
        token = UserToken(access_token="a", client_id="c", expires_at=NOW + timedelta(hours=1))

        assert token.is_expired(now=NOW) is False
        assert token.expires_in(now=NOW) == timedelta(hours=1)

    def test_expired(self):
        """A past expiry is expired."""
        token = UserToken(access_token="a", client_id="c", expires_at=NOW - timedelta(seconds=1))
        assert token.is_expired(now=NOW) is True

    def test_expiry_instant_counts_as_expired(self):
        """The expiry instant itself counts as expired."""
        token = UserToken(access_token="a", client_id="c", expires_at=NOW)
        assert token.is_expired(now=NOW) is True

    def test_leeway(self):
        """Leeway reports expiry early."""
        token = UserToken(
            access_token="a",
            client_id="c",
            expires_at=NOW + timedelta(seconds=30),
            leeway=60,
        )
        assert token.is_expired(now=NOW) is True

    def test_unknown_expiry_never_expires(self):
        """Tokens without a known expiry are not reported expired."""
        token = AppAccessToken(access_token="a", client_id="c")

        assert token.expires_in(now=NOW) is None
        assert token.is_expired(now=NOW) is False

    def test_naive_expiry_is_utc(self):
        """A naive expiry is taken as UTC."""
        token = UserToken(
            access_token="a", client_id="c", expires_at=datetime(2024, 6, 1, 13, 0)
        )

        assert token.expires_at.tzinfo is timezone.utc
        assert token.expires_in(now=NOW) == timedelta(hours=1)


class TestTokenCredential:
    """Tests for the credential surface of tokens."""

    def test_bearer_and_client_id(self):
        """bearer and client_id expose the token fields."""
        token = UserToken(access_token="secret", client_id="c")

        assert token.bearer == "secret"
        assert token.client_id == "c"

    def test_scopes_are_normalised(self):
        """Scope enum members and strings end up as plain strings."""
        token = UserToken(
            access_token="a",
            client_id="c",
            granted_scopes=frozenset({Scope.BITS_READ, "user:read:email"}),
        )

        assert token.scopes() == frozenset({"bits:read", "user:read:email"})

    def test_secrets_not_in_repr(self):
        """Access and refresh tokens are kept out of repr()."""
        token = UserToken(
            access_token="secret-access", client_id="c", refresh_token="secret-refresh"
        )
        app = AppAccessToken(access_token="secret-app", client_id="c", client_secret="s3")

        assert "secret-access" not in repr(token)
        assert "secret-refresh" not in repr(token)
        assert "secret-app" not in repr(app)
        assert "s3" not in repr(app)

    def test_tokens_are_immutable(self):
        """Token fields cannot be reassigned."""
        token = UserToken(access_token="a", client_id="c")
        with pytest.raises(AttributeError):
            token.access_token = "b"  # type: ignore[misc]
