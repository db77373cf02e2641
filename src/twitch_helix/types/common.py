# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Enumerations shared by Helix resources and EventSub payloads."""

from enum import Enum


class BroadcasterType(str, Enum):
    PARTNER = "partner"
    AFFILIATE = "affiliate"
    NONE = ""


class UserType(str, Enum):
    ADMIN = "admin"
    GLOBAL_MOD = "global_mod"
    STAFF = "staff"
    NONE = ""


class SubscriptionTier(str, Enum):
    """Subscription tier; Prime subscriptions report as tier 1."""

    TIER_1 = "1000"
    TIER_2 = "2000"
    TIER_3 = "3000"


class StreamType(str, Enum):
    """Kind of broadcast. Helix reports an empty string on errors."""

    LIVE = "live"
    PLAYLIST = "playlist"
    WATCH_PARTY = "watch_party"
    PREMIERE = "premiere"
    RERUN = "rerun"
    NONE = ""


__all__ = ["BroadcasterType", "StreamType", "SubscriptionTier", "UserType"]
