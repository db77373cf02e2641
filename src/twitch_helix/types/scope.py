# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
OAuth scope names used by the Helix endpoints in this package.

Scopes travel as plain strings (that is what the validate endpoint returns),
so scope sets are always normalised to ``frozenset[str]`` with scope_set().
"""

from collections.abc import Iterable
from enum import Enum


class Scope(str, Enum):
    """
    Named permission grants required by Helix endpoints.

    Only the scopes needed by the endpoints shipped with this package are
    listed; any other scope string is accepted wherever a scope is expected.
    """

    ANALYTICS_READ_GAMES = "analytics:read:games"
    BITS_READ = "bits:read"
    CHANNEL_MANAGE_BROADCAST = "channel:manage:broadcast"
    CHANNEL_MANAGE_VIDEOS = "channel:manage:videos"
    CHANNEL_READ_SUBSCRIPTIONS = "channel:read:subscriptions"
    MODERATOR_READ_FOLLOWERS = "moderator:read:followers"
    USER_READ_EMAIL = "user:read:email"
    USER_READ_FOLLOWS = "user:read:follows"

    def __str__(self) -> str:
        return self.value


def scope_set(scopes: Iterable[str | Scope] | None) -> frozenset[str]:
    """Normalise scopes (enum members or raw strings) into a frozenset of strings."""
    if not scopes:
        return frozenset()
    return frozenset(s.value if isinstance(s, Scope) else str(s) for s in scopes)


__all__ = ["Scope", "scope_set"]
