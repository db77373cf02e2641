# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Client configuration for twitch_helix.

HelixConfig is a plain dataclass with documented defaults. It is validated
once at construction and shared (read-only) by the dispatcher, the default
transport and the OAuth helpers.
"""

from dataclasses import dataclass

from .exceptions import ConfigurationError

TWITCH_HELIX_URL = "https://api.twitch.tv/helix/"
TWITCH_AUTH_URL = "https://id.twitch.tv/oauth2/"


@dataclass(frozen=True)
class HelixConfig:
    """
    Configuration for the Helix dispatcher and its collaborators.
    """

    # === Endpoints ===

    base_url: str = TWITCH_HELIX_URL
    """Root URL of the Helix API. Request paths are joined onto it."""

    auth_url: str = TWITCH_AUTH_URL
    """Root URL of the OAuth2 service (validate, token, revoke)."""

    # === Transport ===

    timeout: float = 30.0
    """Request timeout in seconds, passed through to the transport."""

    connect_timeout: float = 10.0
    """Connect timeout in seconds, passed through to the transport."""

    user_agent: str = "twitch-helix/1.0.0"
    """User-Agent header sent with every request."""

    # === Deserialization ===

    strict: bool = False
    """Reject response items carrying fields the models do not know about."""

    # === Tokens ===

    expiry_leeway: float = 0.0
    """Seconds before the real expiry at which tokens report is_expired()."""

    # === Metrics and Monitoring ===

    metrics_enabled: bool = True
    """Record per-endpoint dispatch counters."""

    prometheus_enabled: bool = False
    """Also export dispatch metrics through prometheus_client."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for name in ("base_url", "auth_url"):
            url = getattr(self, name)
            if not url.startswith(("http://", "https://")):
                raise ConfigurationError(f"{name} must be an http(s) URL")
            if not url.endswith("/"):
                # urljoin drops the last path segment without a trailing slash
                object.__setattr__(self, name, url + "/")
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")
        if self.connect_timeout <= 0:
            raise ConfigurationError("connect_timeout must be positive")
        if self.expiry_leeway < 0:
            raise ConfigurationError("expiry_leeway must not be negative")
        if not self.user_agent:
            raise ConfigurationError("user_agent must not be empty")


__all__ = [
    "TWITCH_AUTH_URL",
    "TWITCH_HELIX_URL",
    "HelixConfig",
]
