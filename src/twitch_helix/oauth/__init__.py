# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""OAuth2 token values and the id.twitch.tv calls that produce them."""

from .flows import (
    OAuthErrorBody,
    TokenResponse,
    ValidatedToken,
    get_app_access_token,
    refresh_user_token,
    revoke_token,
    user_token_from_existing,
    validate_token,
)
from .tokens import AppAccessToken, UserToken, expiry_from_now

__all__ = [
    "AppAccessToken",
    "OAuthErrorBody",
    "TokenResponse",
    "UserToken",
    "ValidatedToken",
    "expiry_from_now",
    "get_app_access_token",
    "refresh_user_token",
    "revoke_token",
    "user_token_from_existing",
    "validate_token",
]
