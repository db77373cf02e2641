# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Minimal OAuth2 calls against id.twitch.tv.

All calls go through a TransportProtocol, the same collaborator the
dispatcher uses, so one HttpxTransport serves both Helix and OAuth.

Refresh contract:
    The dispatcher never refreshes. Callers check ``token.is_expired()``
    (or react to UnauthorizedError), call refresh_user_token() or
    get_app_access_token(), and use the returned token from then on.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import urljoin

from pydantic import BaseModel, ValidationError

from ..config import HelixConfig
from ..exceptions import OAuthError, TransportError, UnauthorizedError
from ..protocols.credential import CredentialProtocol
from ..protocols.transport import HttpResponse, TransportProtocol
from ..types.query import encode_params, to_query_string
from ..types.scope import Scope, scope_set
from .tokens import AppAccessToken, UserToken, expiry_from_now

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class ValidatedToken(BaseModel):
    """Answer of ``GET /oauth2/validate``. App tokens carry no login or user id."""

    client_id: str
    login: str | None = None
    user_id: str | None = None
    scopes: list[str] | None = None
    expires_in: int | None = None

    def scope_set(self) -> frozenset[str]:
        return scope_set(self.scopes)


class TokenResponse(BaseModel):
    """Answer of ``POST /oauth2/token``."""

    access_token: str
    refresh_token: str | None = None
    expires_in: int | None = None
    scope: list[str] | None = None
    token_type: str = "bearer"


class OAuthErrorBody(BaseModel):
    status: int | None = None
    message: str | None = None
    error: str | None = None


def _form(params: Mapping[str, Any]) -> bytes:
    return to_query_string(encode_params(params)).encode()


async def _send(
    transport: TransportProtocol,
    method: str,
    url: str,
    headers: dict[str, str],
    body: bytes | None = None,
) -> HttpResponse:
    logger.debug(f"OAuth {method} {url}")
    try:
        return await transport.execute_http(method, url, headers, body)
    except OSError as e:
        raise TransportError(f"{method} {url} failed: {e}") from e


def _raise_for_status(response: HttpResponse, url: str, action: str) -> None:
    if response.is_success:
        return
    try:
        body = OAuthErrorBody.model_validate_json(response.body)
        message = body.message or body.error
    except ValidationError:
        message = response.text() or None
    if response.status == 401:
        raise UnauthorizedError(401, error="Unauthorized", message=message, url=url)
    logger.warning(f"OAuth {action} failed with {response.status}: {message}")
    raise OAuthError(f"{action} failed ({response.status}): {message}", status=response.status)


def _parse(model: type[BaseModel], response: HttpResponse, action: str) -> Any:
    try:
        return model.model_validate_json(response.body)
    except ValidationError as e:
        raise OAuthError(
            f"{action} returned an unexpected body: {e}", status=response.status
        ) from e


async def validate_token(
    transport: TransportProtocol,
    access_token: str,
    *,
    config: HelixConfig | None = None,
) -> ValidatedToken:
    """
    Validate an access token.

    Raises:
        UnauthorizedError: The token is invalid or expired.
        OAuthError: Twitch answered with another error.
    """
    config = config or HelixConfig()
    url = urljoin(config.auth_url, "validate")
    response = await _send(
        transport,
        "GET",
        url,
        {"Authorization": f"OAuth {access_token}", "User-Agent": config.user_agent},
    )
    _raise_for_status(response, url, "token validation")
    return _parse(ValidatedToken, response, "token validation")


async def user_token_from_existing(
    transport: TransportProtocol,
    access_token: str,
    refresh_token: str | None = None,
    *,
    config: HelixConfig | None = None,
) -> UserToken:
    """Build a UserToken for an access token obtained elsewhere, validating it first."""
    config = config or HelixConfig()
    validated = await validate_token(transport, access_token, config=config)
    if validated.login is None or validated.user_id is None:
        raise OAuthError("token is not a user token (no login or user id)")
    return UserToken(
        access_token=access_token,
        client_id=validated.client_id,
        granted_scopes=validated.scope_set(),
        expires_at=expiry_from_now(validated.expires_in),
        leeway=config.expiry_leeway,
        login=validated.login,
        user_id=validated.user_id,
        refresh_token=refresh_token,
    )


async def get_app_access_token(
    transport: TransportProtocol,
    client_id: str,
    client_secret: str,
    scopes: Iterable[str | Scope] = (),
    *,
    config: HelixConfig | None = None,
) -> AppAccessToken:
    """Obtain an app access token with the client credentials flow."""
    config = config or HelixConfig()
    url = urljoin(config.auth_url, "token")
    requested = scope_set(scopes)
    params: dict[str, Any] = {
        "client_id": client_id,
        "client_secret": client_secret,
        "grant_type": "client_credentials",
    }
    if requested:
        params["scope"] = " ".join(sorted(requested))
    response = await _send(
        transport,
        "POST",
        url,
        {"Content-Type": FORM_CONTENT_TYPE, "User-Agent": config.user_agent},
        _form(params),
    )
    _raise_for_status(response, url, "client credentials grant")
    token: TokenResponse = _parse(TokenResponse, response, "client credentials grant")
    return AppAccessToken(
        access_token=token.access_token,
        client_id=client_id,
        granted_scopes=scope_set(token.scope) if token.scope is not None else requested,
        expires_at=expiry_from_now(token.expires_in),
        leeway=config.expiry_leeway,
        client_secret=client_secret,
    )


async def refresh_user_token(
    transport: TransportProtocol,
    token: UserToken,
    client_secret: str | None = None,
    *,
    config: HelixConfig | None = None,
) -> UserToken:
    """
    Exchange ``token``'s refresh token for a new user token.

    Returns a new UserToken; ``token`` itself is left untouched.

    Raises:
        OAuthError: The token has no refresh token or Twitch refused it.
    """
    if not token.refresh_token:
        raise OAuthError("token has no refresh token")
    config = config or HelixConfig()
    url = urljoin(config.auth_url, "token")
    params: dict[str, Any] = {
        "client_id": token.client_id,
        "client_secret": client_secret,
        "grant_type": "refresh_token",
        "refresh_token": token.refresh_token,
    }
    response = await _send(
        transport,
        "POST",
        url,
        {"Content-Type": FORM_CONTENT_TYPE, "User-Agent": config.user_agent},
        _form(params),
    )
    _raise_for_status(response, url, "token refresh")
    refreshed: TokenResponse = _parse(TokenResponse, response, "token refresh")
    logger.info(f"Refreshed user token for {token.login or token.user_id}")
    return UserToken(
        access_token=refreshed.access_token,
        client_id=token.client_id,
        granted_scopes=(
            scope_set(refreshed.scope) if refreshed.scope is not None else token.scopes()
        ),
        expires_at=expiry_from_now(refreshed.expires_in),
        leeway=config.expiry_leeway,
        login=token.login,
        user_id=token.user_id,
        refresh_token=refreshed.refresh_token or token.refresh_token,
    )


async def revoke_token(
    transport: TransportProtocol,
    token: CredentialProtocol | str,
    client_id: str | None = None,
    *,
    config: HelixConfig | None = None,
) -> None:
    """
    Revoke an access token.

    Args:
        token: A credential, or a raw access token together with ``client_id``.
    """
    if isinstance(token, str):
        if client_id is None:
            raise OAuthError("client_id is required to revoke a raw access token")
        access_token = token
    else:
        access_token = token.bearer
        client_id = client_id or token.client_id
    config = config or HelixConfig()
    url = urljoin(config.auth_url, "revoke")
    response = await _send(
        transport,
        "POST",
        url,
        {"Content-Type": FORM_CONTENT_TYPE, "User-Agent": config.user_agent},
        _form({"client_id": client_id, "token": access_token}),
    )
    _raise_for_status(response, url, "token revocation")


__all__ = [
    "OAuthErrorBody",
    "TokenResponse",
    "ValidatedToken",
    "get_app_access_token",
    "refresh_user_token",
    "revoke_token",
    "user_token_from_existing",
    "validate_token",
]
