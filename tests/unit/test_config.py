"""
Unit tests for HelixConfig.

Covers the documented defaults and the validation done in __post_init__.
"""

import pytest

from twitch_helix.config import TWITCH_AUTH_URL, TWITCH_HELIX_URL, HelixConfig
from twitch_helix.exceptions import ConfigurationError


class TestHelixConfigDefaults:
    """Tests for default values."""

    def test_default_urls(self):
        """Defaults point at the public Twitch endpoints."""
        config = HelixConfig()

        assert config.base_url == TWITCH_HELIX_URL
        assert config.auth_url == TWITCH_AUTH_URL

    def test_default_behaviour_flags(self):
        """Lenient parsing, metrics on, Prometheus off."""
        config = HelixConfig()

        assert config.strict is False
        assert config.metrics_enabled is True
        assert config.prometheus_enabled is False
        assert config.expiry_leeway == 0.0

    def test_is_frozen(self):
        """Config values cannot be reassigned."""
        config = HelixConfig()
        with pytest.raises(AttributeError):
            config.strict = True  # type: ignore[misc]


class TestHelixConfigValidation:
    """Tests for __post_init__ validation."""

    def test_trailing_slash_is_added(self):
        """Base URLs get a trailing slash so paths join below them."""
        config = HelixConfig(base_url="http://localhost:8080/mock")
        assert config.base_url == "http://localhost:8080/mock/"

    def test_rejects_non_http_url(self):
        """Only http(s) URLs are accepted."""
        with pytest.raises(ConfigurationError, match="base_url"):
            HelixConfig(base_url="ftp://example.com/")

    def test_rejects_non_http_auth_url(self):
        """auth_url is validated the same way."""
        with pytest.raises(ConfigurationError, match="auth_url"):
            HelixConfig(auth_url="id.twitch.tv/oauth2/")

    @pytest.mark.parametrize("timeout", [0, -1.0])
    def test_rejects_non_positive_timeout(self, timeout):
        """timeout must be positive."""
        with pytest.raises(ConfigurationError, match="timeout"):
            HelixConfig(timeout=timeout)

    def test_rejects_non_positive_connect_timeout(self):
        """connect_timeout must be positive."""
        with pytest.raises(ConfigurationError, match="connect_timeout"):
            HelixConfig(connect_timeout=0)

    def test_rejects_negative_leeway(self):
        """expiry_leeway must not be negative."""
        with pytest.raises(ConfigurationError, match="expiry_leeway"):
            HelixConfig(expiry_leeway=-5)

    def test_rejects_empty_user_agent(self):
        """user_agent must not be empty."""
        with pytest.raises(ConfigurationError, match="user_agent"):
            HelixConfig(user_agent="")
