# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""twitch-helix - Typed asyncio client for the Twitch Helix API and EventSub.

This library provides typed request/response models for Helix endpoints,
a single generic dispatch and pagination machinery, EventSub webhook
handling and the minimal OAuth2 glue needed to obtain credentials.

Key Features:
    - One frozen, validated request class per endpoint
    - Stateless Dispatcher, safe to share across tasks
    - Forward-only Paginator with async iteration
    - Typed errors for every failure, no hidden retries
    - EventSub webhook signature verification and message parsing
    - Pluggable transport (httpx by default)

Quick Start:
    >>> from twitch_helix import HelixClient, user_token_from_existing
    >>> from twitch_helix.endpoints import GetStreamsRequest
    >>>
    >>> async with HelixClient() as client:
    ...     token = await user_token_from_existing(client.transport, "access-token")
    ...     response = await client.execute(GetStreamsRequest(first=10), token)
    ...     for stream in response:
    ...         print(stream.user_login, stream.viewer_count)

Main Exports:
    - HelixClient, Dispatcher: Executing requests
    - Paginator: Walking paginated results
    - Request, PaginatedRequest, Response: Generic request/response types
    - UserToken, AppAccessToken: Credentials
    - HelixConfig: Configuration options
    - HttpxTransport, TransportProtocol: HTTP transport

Version: 1.0.0
"""

__version__ = "1.0.0"

from .client import HelixClient
from .config import TWITCH_AUTH_URL, TWITCH_HELIX_URL, HelixConfig
from .dispatcher import Dispatcher
from .exceptions import (
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
from .oauth import (
    AppAccessToken,
    UserToken,
    ValidatedToken,
    get_app_access_token,
    refresh_user_token,
    revoke_token,
    user_token_from_existing,
    validate_token,
)
from .observability import DispatchMetrics, PrometheusDispatchMetrics
from .pagination import PaginationState, Paginator
from .protocols import (
    CredentialProtocol,
    HttpRequest,
    HttpResponse,
    TransportProtocol,
)
from .transport import HttpxTransport
from .types import (
    HelixModel,
    HttpMethod,
    PaginatedRequest,
    RateLimitInfo,
    Request,
    Response,
    Scope,
)

__all__ = [
    "TWITCH_AUTH_URL",
    "TWITCH_HELIX_URL",
    # Credentials
    "AppAccessToken",
    "ConfigurationError",
    # Protocols
    "CredentialProtocol",
    # Core
    "Dispatcher",
    "DispatchMetrics",
    "EventSubError",
    "EventSubParseError",
    "EventSubVerificationError",
    "ForbiddenError",
    "HelixAPIError",
    "HelixClient",
    "HelixConfig",
    # Exceptions
    "HelixError",
    # Types
    "HelixModel",
    "HttpMethod",
    "HttpRequest",
    "HttpResponse",
    "HttpxTransport",
    "InsufficientScopeError",
    "InvalidParameterError",
    "MalformedResponseError",
    "NotFoundError",
    "OAuthError",
    "PaginatedRequest",
    "PaginationExhaustedError",
    "PaginationState",
    "Paginator",
    "PrometheusDispatchMetrics",
    "RateLimitInfo",
    "RateLimitedError",
    "Request",
    "RequestCancelledError",
    "Response",
    "Scope",
    "ServerError",
    "TransportError",
    "TransportProtocol",
    "UnauthorizedError",
    "UserToken",
    "ValidatedToken",
    "get_app_access_token",
    "refresh_user_token",
    "revoke_token",
    "user_token_from_existing",
    "validate_token",
]
