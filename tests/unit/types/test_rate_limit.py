"""
Unit tests for rate limit types.

These tests verify:
- RateLimitInfo dataclass
- parse_retry_after()
- parse_rate_limit_headers()
"""

import time
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime

import pytest

from twitch_helix.types import RateLimitInfo, parse_rate_limit_headers, parse_retry_after


class TestRateLimitInfo:
    """Tests for RateLimitInfo dataclass."""

    def test_defaults(self):
        """All header values default to None."""
        info = RateLimitInfo()

        assert info.limit is None
        assert info.remaining is None
        assert info.reset is None
        assert info.retry_after is None
        assert info.is_rate_limited is False

    def test_seconds_until_reset_none_without_reset(self):
        """No reset time gives no countdown."""
        assert RateLimitInfo().seconds_until_reset is None

    def test_seconds_until_reset_never_negative(self):
        """A reset in the past yields 0."""
        info = RateLimitInfo(reset=time.time() - 100)
        assert info.seconds_until_reset == 0.0

    def test_seconds_until_reset_future(self):
        """A future reset gives a positive countdown."""
        info = RateLimitInfo(reset=time.time() + 30)
        assert 29.0 <= info.seconds_until_reset <= 30.0


class TestParseRetryAfter:
    """Tests for parse_retry_after()."""

    def test_none(self):
        """A missing header gives None."""
        assert parse_retry_after(None) is None

    @pytest.mark.parametrize("value,expected", [("30", 30.0), ("1.5", 1.5), (" 7 ", 7.0)])
    def test_delta_seconds(self, value, expected):
        """Numeric values are taken as seconds."""
        assert parse_retry_after(value) == expected

    def test_http_date(self):
        """HTTP-dates are converted relative to now."""
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        value = format_datetime(now + timedelta(seconds=45), usegmt=True)

        assert parse_retry_after(value, now=now.timestamp()) == 45.0

    def test_http_date_in_the_past(self):
        """HTTP-dates in the past yield 0."""
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        value = format_datetime(now - timedelta(seconds=45), usegmt=True)

        assert parse_retry_after(value, now=now.timestamp()) == 0.0

    def test_garbage(self):
        """Unparseable values yield None."""
        assert parse_retry_after("soon") is None

    @pytest.mark.parametrize("value", ["-5", "nan", "inf", "-inf"])
    def test_negative_or_non_finite(self, value):
        """Negative and non-finite delta-seconds are ignored."""
        assert parse_retry_after(value) is None


class TestParseRateLimitHeaders:
    """Tests for parse_rate_limit_headers()."""

    def test_parses_helix_headers(self):
        """Ratelimit-* headers are parsed into numbers."""
        info = parse_rate_limit_headers(
            {
                "Ratelimit-Limit": "800",
                "Ratelimit-Remaining": "799",
                "Ratelimit-Reset": "1700000000",
            },
            200,
        )

        assert info.limit == 800
        assert info.remaining == 799
        assert info.reset == 1700000000.0
        assert info.is_rate_limited is False

    def test_case_insensitive(self):
        """Header names match regardless of case."""
        info = parse_rate_limit_headers({"ratelimit-remaining": "5"})
        assert info.remaining == 5

    def test_missing_headers(self):
        """Absent headers leave fields as None."""
        info = parse_rate_limit_headers({})

        assert info.limit is None
        assert info.remaining is None
        assert info.reset is None

    def test_non_integer_values_are_ignored(self):
        """Garbage header values are ignored, not raised."""
        info = parse_rate_limit_headers(
            {"Ratelimit-Limit": "lots", "Ratelimit-Reset": "later"}
        )

        assert info.limit is None
        assert info.reset is None

    def test_429_uses_retry_after(self):
        """A 429 keeps the exact Retry-After value."""
        info = parse_rate_limit_headers({"Retry-After": "17"}, 429)

        assert info.is_rate_limited is True
        assert info.retry_after == 17.0

    def test_429_derives_retry_after_from_reset(self):
        """Without Retry-After, a 429 derives the wait from Ratelimit-Reset."""
        reset = int(time.time()) + 20
        info = parse_rate_limit_headers({"Ratelimit-Reset": str(reset)}, 429)

        assert info.retry_after is not None
        assert 0.0 <= info.retry_after <= 20.0

    def test_success_does_not_derive_retry_after(self):
        """retry_after is only derived for 429 responses."""
        reset = int(time.time()) + 20
        info = parse_rate_limit_headers({"Ratelimit-Reset": str(reset)}, 200)

        assert info.retry_after is None
