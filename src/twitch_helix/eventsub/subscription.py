# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
EventSub subscription types.

This module provides:
1. EventType / Status / TransportMethod - string enums mirroring Twitch's values
2. Transport / TransportResponse - how notifications are delivered
3. Subscription - a subscription as reported by Helix and inside webhook messages
4. EventSubscription - base class for typed subscription conditions
"""

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar

from pydantic import ConfigDict, Field

from ..exceptions import InvalidParameterError
from ..types.model import HelixModel


class EventType(str, Enum):
    """Subscription types with a payload model in this package (plus a few common ones)."""

    CHANNEL_UPDATE = "channel.update"
    CHANNEL_FOLLOW = "channel.follow"
    CHANNEL_SUBSCRIBE = "channel.subscribe"
    CHANNEL_SUBSCRIPTION_END = "channel.subscription.end"
    CHANNEL_SUBSCRIPTION_GIFT = "channel.subscription.gift"
    CHANNEL_CHEER = "channel.cheer"
    CHANNEL_RAID = "channel.raid"
    CHANNEL_BAN = "channel.ban"
    CHANNEL_UNBAN = "channel.unban"
    CHANNEL_POLL_BEGIN = "channel.poll.begin"
    CHANNEL_PREDICTION_BEGIN = "channel.prediction.begin"
    CHANNEL_HYPE_TRAIN_BEGIN = "channel.hype_train.begin"
    STREAM_ONLINE = "stream.online"
    STREAM_OFFLINE = "stream.offline"
    USER_UPDATE = "user.update"
    USER_AUTHORIZATION_GRANT = "user.authorization.grant"
    USER_AUTHORIZATION_REVOKE = "user.authorization.revoke"

    def __str__(self) -> str:
        return self.value


class Status(str, Enum):
    """Lifecycle status of a subscription."""

    ENABLED = "enabled"
    WEBHOOK_CALLBACK_VERIFICATION_PENDING = "webhook_callback_verification_pending"
    WEBHOOK_CALLBACK_VERIFICATION_FAILED = "webhook_callback_verification_failed"
    NOTIFICATION_FAILURES_EXCEEDED = "notification_failures_exceeded"
    AUTHORIZATION_REVOKED = "authorization_revoked"
    MODERATOR_REMOVED = "moderator_removed"
    USER_REMOVED = "user_removed"
    VERSION_REMOVED = "version_removed"


class TransportMethod(str, Enum):
    WEBHOOK = "webhook"
    WEBSOCKET = "websocket"
    CONDUIT = "conduit"


class Transport(HelixModel):
    """Delivery settings sent when creating a subscription."""

    method: TransportMethod = TransportMethod.WEBHOOK
    callback: str | None = None
    secret: str | None = Field(default=None, repr=False)
    session_id: str | None = None
    conduit_id: str | None = None

    @classmethod
    def webhook(cls, callback: str, secret: str) -> "Transport":
        """Webhook transport. ``secret`` must be 10-100 ASCII characters."""
        if not 10 <= len(secret) <= 100:
            raise InvalidParameterError(
                "webhook secret must be between 10 and 100 characters",
                parameter="secret",
            )
        return cls(method=TransportMethod.WEBHOOK, callback=callback, secret=secret)


class TransportResponse(HelixModel):
    """Delivery settings as reported back by Twitch (the secret is never echoed)."""

    method: TransportMethod | str = Field(union_mode="left_to_right")
    callback: str | None = None
    session_id: str | None = None
    conduit_id: str | None = None
    connected_at: datetime | None = None
    disconnected_at: datetime | None = None


class Subscription(HelixModel):
    """An EventSub subscription."""

    id: str
    status: Status | str = Field(union_mode="left_to_right")
    type: EventType | str = Field(union_mode="left_to_right")
    version: str
    condition: dict[str, Any] = Field(default_factory=dict)
    transport: TransportResponse
    created_at: datetime
    cost: int = 0


class EventSubscription(HelixModel):
    """
    Typed subscription condition for one (type, version) pair.

    Subclasses declare the condition fields and the class-level description
    of the subscription; ``PAYLOAD`` is the model of the ``event`` object
    delivered in notifications.

    Example:
        >>> StreamOnlineV1(broadcaster_user_id="1337").condition()
        {'broadcaster_user_id': '1337'}
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    EVENT_TYPE: ClassVar[EventType]
    VERSION: ClassVar[str] = "1"
    SCOPE: ClassVar[frozenset[str]] = frozenset()
    PAYLOAD: ClassVar[type[HelixModel]]

    def condition(self) -> dict[str, Any]:
        """The ``condition`` object for Create EventSub Subscription."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


__all__ = [
    "EventSubscription",
    "EventType",
    "Status",
    "Subscription",
    "Transport",
    "TransportMethod",
    "TransportResponse",
]
