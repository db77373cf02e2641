# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Rate limit information parsed from Helix response headers.

Helix reports its token bucket through ``Ratelimit-Limit``,
``Ratelimit-Remaining`` and ``Ratelimit-Reset`` (unix seconds). A 429 may
also carry a standard ``Retry-After`` header, either delta-seconds or an
HTTP-date.
"""

import logging
import math
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from email.utils import parsedate_to_datetime

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateLimitInfo:
    """Parsed rate limit information from an API response."""

    limit: int | None = None
    remaining: int | None = None
    reset: float | None = None  # Unix timestamp
    retry_after: float | None = None  # Seconds
    is_rate_limited: bool = False  # True if 429 response
    timestamp: float = field(default_factory=time.time)

    @property
    def seconds_until_reset(self) -> float | None:
        if self.reset is None:
            return None
        return max(0.0, self.reset - time.time())


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        logger.debug(f"Ignoring non-integer rate limit header value: {value!r}")
        return None


def parse_retry_after(value: str | None, now: float | None = None) -> float | None:
    """
    Parse a Retry-After header value into seconds.

    Accepts delta-seconds (``"30"``, ``"1.5"``) and HTTP-dates. HTTP-dates in
    the past yield 0.0. Unparseable, negative and non-finite values yield None.
    """
    if value is None:
        return None
    value = value.strip()
    try:
        seconds = float(value)
    except ValueError:
        pass
    else:
        if not math.isfinite(seconds) or seconds < 0:
            logger.debug(f"Ignoring out-of-range Retry-After header: {value!r}")
            return None
        return seconds
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        logger.debug(f"Ignoring unparseable Retry-After header: {value!r}")
        return None
    current = time.time() if now is None else now
    return max(0.0, when.timestamp() - current)


def parse_rate_limit_headers(
    headers: Mapping[str, str],
    status_code: int | None = None,
) -> RateLimitInfo:
    """
    Build a RateLimitInfo from response headers.

    Header matching is case-insensitive. When a 429 carries no Retry-After,
    retry_after is derived from Ratelimit-Reset.
    """
    reset_raw = _get_header(headers, "Ratelimit-Reset")
    reset = float(reset_raw) if reset_raw and reset_raw.strip().isdigit() else None
    retry_after = parse_retry_after(_get_header(headers, "Retry-After"))
    is_rate_limited = status_code == 429
    if is_rate_limited and retry_after is None and reset is not None:
        retry_after = max(0.0, reset - time.time())
    return RateLimitInfo(
        limit=_parse_int(_get_header(headers, "Ratelimit-Limit")),
        remaining=_parse_int(_get_header(headers, "Ratelimit-Remaining")),
        reset=reset,
        retry_after=retry_after,
        is_rate_limited=is_rate_limited,
    )


__all__ = ["RateLimitInfo", "parse_rate_limit_headers", "parse_retry_after"]
