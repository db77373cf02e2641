# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Subscriptions: Get Broadcaster Subscriptions."""

from typing import Any, ClassVar

from pydantic import Field

from ..types.common import SubscriptionTier
from ..types.model import HelixModel
from ..types.request import PaginatedRequest
from ..types.scope import Scope, scope_set


class BroadcasterSubscription(HelixModel):
    broadcaster_id: str
    broadcaster_login: str
    broadcaster_name: str
    # Empty strings when the subscription was not a gift
    gifter_id: str = ""
    gifter_login: str = ""
    gifter_name: str = ""
    is_gift: bool
    plan_name: str
    tier: SubscriptionTier
    user_id: str
    user_name: str
    user_login: str


class GetBroadcasterSubscriptionsRequest(PaginatedRequest[BroadcasterSubscription]):
    """
    Get Broadcaster Subscriptions: ``GET /helix/subscriptions``.

    Besides ``total`` the envelope carries the broadcaster's subscriber
    points in ``other["points"]``.
    """

    PATH: ClassVar[str] = "subscriptions"
    SCOPE: ClassVar[frozenset[str]] = scope_set([Scope.CHANNEL_READ_SUBSCRIPTIONS])
    RESPONSE: ClassVar[Any] = BroadcasterSubscription

    broadcaster_id: str
    user_id: list[str] = Field(default_factory=list, max_length=100)
    before: str | None = None


__all__ = ["BroadcasterSubscription", "GetBroadcasterSubscriptionsRequest"]
