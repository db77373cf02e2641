# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the twitch_helix library.

This module defines the exception hierarchy used throughout the library.
All exceptions inherit from HelixError, making it easy to catch every
library error with a single except clause. Errors that originate from a
Helix response inherit from HelixAPIError and carry the HTTP status.
"""

import asyncio


class HelixError(Exception):
    """Base exception for all twitch_helix errors.

    Example:
        try:
            response = await client.execute(request, token)
        except HelixError as e:
            logger.error(f"Helix call failed: {e}")
    """

    pass


class ConfigurationError(HelixError):
    """Raised when a HelixConfig or client is configured with invalid values."""

    pass


class InvalidParameterError(HelixError):
    """Raised when a request fails local validation at construction time.

    Attributes:
        parameter: Name of the offending parameter, when it can be determined.
    """

    def __init__(self, message: str, parameter: str | None = None):
        super().__init__(message)
        self.parameter = parameter


class InsufficientScopeError(HelixError):
    """Raised before any network call when a credential lacks a required scope.

    Attributes:
        required: The full set of scopes the request requires.
        missing: The scopes the credential does not grant.

    Example:
        try:
            await client.execute(GetBroadcasterSubscriptionsRequest(...), token)
        except InsufficientScopeError as e:
            print("re-authorize with", sorted(e.missing))
    """

    def __init__(self, required: frozenset[str], missing: frozenset[str]):
        super().__init__(
            f"credential is missing required scope(s): {', '.join(sorted(missing))}"
        )
        self.required = required
        self.missing = missing


class HelixAPIError(HelixError):
    """Raised when Helix answers with a non-2xx status.

    Attributes:
        status: HTTP status code of the response.
        error: Short error name from the Helix error body (e.g. "Bad Request").
        message: Human readable message from the Helix error body.
        url: The URL that was requested.
    """

    def __init__(
        self,
        status: int,
        error: str | None = None,
        message: str | None = None,
        url: str | None = None,
    ):
        text = f"helix returned {status}"
        if error:
            text += f" - {error}"
        if message:
            text += f": {message}"
        if url:
            text += f" when calling {url}"
        super().__init__(text)
        self.status = status
        self.error = error
        self.message = message
        self.url = url


class UnauthorizedError(HelixAPIError):
    """Raised on 401: the bearer credential was rejected (invalid or expired)."""

    pass


class ForbiddenError(HelixAPIError):
    """Raised on 403: the credential is valid but not allowed to do this."""

    pass


class NotFoundError(HelixAPIError):
    """Raised on 404."""

    pass


class RateLimitedError(HelixAPIError):
    """Raised on 429. No retry is attempted by the library.

    Attributes:
        retry_after: Seconds to wait before retrying, taken from the
            Retry-After header (or derived from Ratelimit-Reset).
            None if the server gave no hint.
        reset_at: Unix timestamp at which the bucket refills, if known.

    Example:
        try:
            await client.execute(request, token)
        except RateLimitedError as e:
            await asyncio.sleep(e.retry_after or 1.0)
    """

    def __init__(
        self,
        retry_after: float | None = None,
        reset_at: float | None = None,
        error: str | None = None,
        message: str | None = None,
        url: str | None = None,
    ):
        super().__init__(429, error=error, message=message, url=url)
        self.retry_after = retry_after
        self.reset_at = reset_at


class ServerError(HelixAPIError):
    """Raised on any 5xx status."""

    pass


class MalformedResponseError(HelixError):
    """Raised when a 2xx response body cannot be deserialized.

    Attributes:
        body: The raw response text (may be truncated by the caller when logging).
        url: The URL that was requested.
    """

    def __init__(self, message: str, body: str | None = None, url: str | None = None):
        super().__init__(message)
        self.body = body
        self.url = url


class PaginationExhaustedError(HelixError):
    """Raised when advancing a paginator that has no further pages."""

    pass


class RequestCancelledError(HelixError, asyncio.CancelledError):
    """Raised when a dispatch is cancelled while the transport call is in flight.

    Also an asyncio.CancelledError, so task cancellation keeps propagating
    through code that only knows about asyncio.
    """

    pass


class TransportError(HelixError):
    """Raised when the transport fails below HTTP (DNS, TLS, connection, timeout)."""

    pass


class OAuthError(HelixError):
    """Raised when an id.twitch.tv OAuth call fails.

    Attributes:
        status: HTTP status code, if a response was received.
    """

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class EventSubError(HelixError):
    """Base class for EventSub webhook handling errors."""

    pass


class EventSubVerificationError(EventSubError):
    """Raised when a webhook message signature does not verify."""

    pass


class EventSubParseError(EventSubError):
    """Raised when a webhook message cannot be parsed.

    Attributes:
        event_type: The subscription type named in the message, if known.
        version: The subscription version named in the message, if known.
    """

    def __init__(
        self,
        message: str,
        event_type: str | None = None,
        version: str | None = None,
    ):
        super().__init__(message)
        self.event_type = event_type
        self.version = version
