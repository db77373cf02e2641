# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
EventSub: Create, Get and Delete EventSub Subscriptions.

Webhook subscriptions must be managed with an app access token. The
envelopes of all three calls carry ``total``, plus ``total_cost`` and
``max_total_cost`` in ``other``.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..eventsub.subscription import (
    EventSubscription,
    EventType,
    Status,
    Subscription,
    Transport,
)
from ..types.request import HttpMethod, PaginatedRequest, Request


class CreateEventSubSubscriptionBody(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: EventType | str = Field(union_mode="left_to_right")
    version: str
    condition: dict[str, Any]
    transport: Transport


class CreateEventSubSubscriptionRequest(Request[Subscription]):
    """
    Create EventSub Subscription: ``POST /helix/eventsub/subscriptions``.

    Build it from a typed subscription with for_subscription().
    """

    METHOD: ClassVar[HttpMethod] = HttpMethod.POST
    PATH: ClassVar[str] = "eventsub/subscriptions"
    MUTATES: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = Subscription

    body: CreateEventSubSubscriptionBody

    @classmethod
    def for_subscription(
        cls, subscription: EventSubscription, transport: Transport
    ) -> "CreateEventSubSubscriptionRequest":
        return cls(
            body=CreateEventSubSubscriptionBody(
                type=subscription.EVENT_TYPE,
                version=subscription.VERSION,
                condition=subscription.condition(),
                transport=transport,
            )
        )


class GetEventSubSubscriptionsRequest(PaginatedRequest[Subscription]):
    """
    Get EventSub Subscriptions: ``GET /helix/eventsub/subscriptions``.

    At most one of the filters may be given. The endpoint takes no page
    size, so ``first`` is not sent unless set.
    """

    PATH: ClassVar[str] = "eventsub/subscriptions"
    RESPONSE: ClassVar[Any] = Subscription

    first: int | None = Field(default=None, ge=1, le=100)
    status: Status | None = None
    event_type: EventType | str | None = Field(
        default=None, alias="type", union_mode="left_to_right"
    )
    user_id: str | None = None
    subscription_id: str | None = None

    @model_validator(mode="after")
    def check_filters(self) -> "GetEventSubSubscriptionsRequest":
        given = [
            value
            for value in (self.status, self.event_type, self.user_id, self.subscription_id)
            if value is not None
        ]
        if len(given) > 1:
            raise ValueError("at most one of status, type, user_id or subscription_id may be given")
        return self


class DeleteEventSubSubscriptionRequest(Request[dict[str, Any]]):
    """Delete EventSub Subscription. Twitch answers 204 No Content."""

    METHOD: ClassVar[HttpMethod] = HttpMethod.DELETE
    PATH: ClassVar[str] = "eventsub/subscriptions"
    MUTATES: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = dict[str, Any]

    id: str


__all__ = [
    "CreateEventSubSubscriptionBody",
    "CreateEventSubSubscriptionRequest",
    "DeleteEventSubSubscriptionRequest",
    "GetEventSubSubscriptionsRequest",
]
