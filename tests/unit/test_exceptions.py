"""Unit tests for the exceptions module.

Tests the exception hierarchy defined in twitch_helix.exceptions.
"""

import asyncio

import pytest

from twitch_helix.exceptions import (
    ConfigurationError,
    EventSubError,
    EventSubParseError,
    EventSubVerificationError,
    ForbiddenError,
    HelixAPIError,
    HelixError,
    InsufficientScopeError,
    InvalidParameterError,
    MalformedResponseError,
    NotFoundError,
    OAuthError,
    PaginationExhaustedError,
    RateLimitedError,
    RequestCancelledError,
    ServerError,
    TransportError,
    UnauthorizedError,
)


class TestHelixError:
    """Tests for the base HelixError exception."""

    def test_can_be_caught_as_exception(self):
        """HelixError can be caught as a standard Exception."""
        with pytest.raises(Exception):  # noqa: B017
            raise HelixError("test error")

    def test_message_preserved(self):
        """HelixError preserves its message."""
        assert str(HelixError("test message")) == "test message"

    @pytest.mark.parametrize(
        "error_class",
        [
            ConfigurationError,
            InvalidParameterError,
            MalformedResponseError,
            PaginationExhaustedError,
            TransportError,
            OAuthError,
            EventSubError,
        ],
    )
    def test_library_errors_share_base(self, error_class):
        """Every library error is a HelixError."""
        assert issubclass(error_class, HelixError)


class TestInvalidParameterError:
    """Tests for InvalidParameterError."""

    def test_stores_parameter(self):
        """The offending parameter name is kept."""
        error = InvalidParameterError("bad first", parameter="first")
        assert error.parameter == "first"

    def test_parameter_defaults_to_none(self):
        """parameter is optional."""
        assert InvalidParameterError("bad").parameter is None


class TestInsufficientScopeError:
    """Tests for InsufficientScopeError."""

    def test_stores_required_and_missing(self):
        """Required and missing scope sets are kept."""
        required = frozenset({"bits:read", "user:read:email"})
        error = InsufficientScopeError(required, frozenset({"bits:read"}))

        assert error.required == required
        assert error.missing == frozenset({"bits:read"})

    def test_message_lists_missing_scopes_sorted(self):
        """The message names the missing scopes in sorted order."""
        error = InsufficientScopeError(
            frozenset({"b", "a"}), frozenset({"b", "a"})
        )
        assert "a, b" in str(error)


class TestHelixAPIError:
    """Tests for HelixAPIError and its status-specific subclasses."""

    def test_stores_fields(self):
        """Status, error, message and URL are kept."""
        error = HelixAPIError(
            400, error="Bad Request", message="Malformed query", url="https://x/"
        )

        assert error.status == 400
        assert error.error == "Bad Request"
        assert error.message == "Malformed query"
        assert error.url == "https://x/"

    def test_message_includes_status_and_details(self):
        """The string form includes status, error name and message."""
        text = str(HelixAPIError(400, error="Bad Request", message="Malformed query"))

        assert "400" in text
        assert "Bad Request" in text
        assert "Malformed query" in text

    def test_message_with_status_only(self):
        """Only the status is required."""
        assert str(HelixAPIError(418)) == "helix returned 418"

    @pytest.mark.parametrize(
        "error_class",
        [UnauthorizedError, ForbiddenError, NotFoundError, ServerError],
    )
    def test_subclasses_are_api_errors(self, error_class):
        """Status-specific errors can be caught as HelixAPIError."""
        with pytest.raises(HelixAPIError):
            raise error_class(500)


class TestRateLimitedError:
    """Tests for RateLimitedError."""

    def test_status_is_429(self):
        """RateLimitedError always carries status 429."""
        assert RateLimitedError().status == 429

    def test_stores_retry_hints(self):
        """retry_after and reset_at are kept."""
        error = RateLimitedError(retry_after=12.5, reset_at=1700000000.0)

        assert error.retry_after == 12.5
        assert error.reset_at == 1700000000.0

    def test_retry_hints_default_to_none(self):
        """Without hints both values are None."""
        error = RateLimitedError()

        assert error.retry_after is None
        assert error.reset_at is None


class TestMalformedResponseError:
    """Tests for MalformedResponseError."""

    def test_stores_body_and_url(self):
        """The raw body and URL are kept for diagnostics."""
        error = MalformedResponseError("bad", body="{", url="https://x/")

        assert error.body == "{"
        assert error.url == "https://x/"


class TestRequestCancelledError:
    """Tests for RequestCancelledError."""

    def test_is_helix_error(self):
        """Cancellation can be caught as a library error."""
        assert isinstance(RequestCancelledError("cancelled"), HelixError)

    def test_is_cancelled_error(self):
        """Cancellation still propagates as asyncio.CancelledError."""
        with pytest.raises(asyncio.CancelledError):
            raise RequestCancelledError("cancelled")


class TestOAuthError:
    """Tests for OAuthError."""

    def test_stores_status(self):
        """The HTTP status is kept when known."""
        assert OAuthError("refused", status=400).status == 400

    def test_status_defaults_to_none(self):
        """status is optional."""
        assert OAuthError("refused").status is None


class TestEventSubErrors:
    """Tests for the EventSub error types."""

    def test_verification_error_is_eventsub_error(self):
        """EventSubVerificationError can be caught as EventSubError."""
        with pytest.raises(EventSubError):
            raise EventSubVerificationError("bad signature")

    def test_parse_error_stores_type_and_version(self):
        """EventSubParseError keeps the subscription type and version."""
        error = EventSubParseError("bad", event_type="stream.online", version="1")

        assert error.event_type == "stream.online"
        assert error.version == "1"
        assert isinstance(error, EventSubError)
