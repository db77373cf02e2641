# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Typed EventSub subscriptions and their notification payloads.

Each subscription class carries its condition fields and names the model of
the ``event`` object Twitch delivers for it. Only a representative set of
subscription types is modelled; notifications for other types are still
parsed, with the raw event left as a dict.
"""

from datetime import datetime
from typing import ClassVar

from ..types.common import StreamType, SubscriptionTier
from ..types.model import HelixModel
from ..types.scope import Scope, scope_set
from .subscription import EventSubscription, EventType


class _BroadcasterEvent(HelixModel):
    broadcaster_user_id: str
    broadcaster_user_login: str
    broadcaster_user_name: str


# channel.update


class ChannelUpdateV2Payload(_BroadcasterEvent):
    title: str
    language: str
    category_id: str
    category_name: str
    content_classification_labels: list[str] = []


class ChannelUpdateV2(EventSubscription):
    """The broadcaster updated their channel properties."""

    EVENT_TYPE: ClassVar[EventType] = EventType.CHANNEL_UPDATE
    VERSION: ClassVar[str] = "2"
    PAYLOAD: ClassVar[type[HelixModel]] = ChannelUpdateV2Payload

    broadcaster_user_id: str


# channel.follow


class ChannelFollowV2Payload(_BroadcasterEvent):
    user_id: str
    user_login: str
    user_name: str
    followed_at: datetime


class ChannelFollowV2(EventSubscription):
    """A user followed the channel. Requires a moderator of the channel."""

    EVENT_TYPE: ClassVar[EventType] = EventType.CHANNEL_FOLLOW
    VERSION: ClassVar[str] = "2"
    SCOPE: ClassVar[frozenset[str]] = scope_set([Scope.MODERATOR_READ_FOLLOWERS])
    PAYLOAD: ClassVar[type[HelixModel]] = ChannelFollowV2Payload

    broadcaster_user_id: str
    moderator_user_id: str


# channel.subscribe


class ChannelSubscribeV1Payload(_BroadcasterEvent):
    user_id: str
    user_login: str
    user_name: str
    tier: SubscriptionTier
    is_gift: bool


class ChannelSubscribeV1(EventSubscription):
    EVENT_TYPE: ClassVar[EventType] = EventType.CHANNEL_SUBSCRIBE
    SCOPE: ClassVar[frozenset[str]] = scope_set([Scope.CHANNEL_READ_SUBSCRIPTIONS])
    PAYLOAD: ClassVar[type[HelixModel]] = ChannelSubscribeV1Payload

    broadcaster_user_id: str


# channel.cheer


class ChannelCheerV1Payload(_BroadcasterEvent):
    is_anonymous: bool
    # None when the cheer is anonymous
    user_id: str | None = None
    user_login: str | None = None
    user_name: str | None = None
    message: str
    bits: int


class ChannelCheerV1(EventSubscription):
    EVENT_TYPE: ClassVar[EventType] = EventType.CHANNEL_CHEER
    SCOPE: ClassVar[frozenset[str]] = scope_set([Scope.BITS_READ])
    PAYLOAD: ClassVar[type[HelixModel]] = ChannelCheerV1Payload

    broadcaster_user_id: str


# channel.raid


class ChannelRaidV1Payload(HelixModel):
    from_broadcaster_user_id: str
    from_broadcaster_user_login: str
    from_broadcaster_user_name: str
    to_broadcaster_user_id: str
    to_broadcaster_user_login: str
    to_broadcaster_user_name: str
    viewers: int


class ChannelRaidV1(EventSubscription):
    """
    A broadcaster raided another broadcaster's channel.

    Exactly one of ``from_broadcaster_user_id`` and ``to_broadcaster_user_id``
    should be set.
    """

    EVENT_TYPE: ClassVar[EventType] = EventType.CHANNEL_RAID
    PAYLOAD: ClassVar[type[HelixModel]] = ChannelRaidV1Payload

    from_broadcaster_user_id: str | None = None
    to_broadcaster_user_id: str | None = None


# stream.online / stream.offline


class StreamOnlineV1Payload(_BroadcasterEvent):
    id: str
    type: StreamType
    started_at: datetime


class StreamOnlineV1(EventSubscription):
    EVENT_TYPE: ClassVar[EventType] = EventType.STREAM_ONLINE
    PAYLOAD: ClassVar[type[HelixModel]] = StreamOnlineV1Payload

    broadcaster_user_id: str


class StreamOfflineV1Payload(_BroadcasterEvent):
    pass


class StreamOfflineV1(EventSubscription):
    EVENT_TYPE: ClassVar[EventType] = EventType.STREAM_OFFLINE
    PAYLOAD: ClassVar[type[HelixModel]] = StreamOfflineV1Payload

    broadcaster_user_id: str


# user.update


class UserUpdateV1Payload(HelixModel):
    user_id: str
    user_login: str
    user_name: str
    # Only present with the user:read:email scope
    email: str | None = None
    email_verified: bool | None = None
    description: str


class UserUpdateV1(EventSubscription):
    EVENT_TYPE: ClassVar[EventType] = EventType.USER_UPDATE
    PAYLOAD: ClassVar[type[HelixModel]] = UserUpdateV1Payload

    user_id: str


SUBSCRIPTIONS: tuple[type[EventSubscription], ...] = (
    ChannelUpdateV2,
    ChannelFollowV2,
    ChannelSubscribeV1,
    ChannelCheerV1,
    ChannelRaidV1,
    StreamOnlineV1,
    StreamOfflineV1,
    UserUpdateV1,
)

_REGISTRY: dict[tuple[str, str], type[EventSubscription]] = {
    (sub.EVENT_TYPE.value, sub.VERSION): sub for sub in SUBSCRIPTIONS
}


def lookup_subscription(event_type: str, version: str) -> type[EventSubscription] | None:
    """Find the subscription class modelling ``event_type`` at ``version``."""
    return _REGISTRY.get((str(event_type), version))


__all__ = [
    "SUBSCRIPTIONS",
    "ChannelCheerV1",
    "ChannelCheerV1Payload",
    "ChannelFollowV2",
    "ChannelFollowV2Payload",
    "ChannelRaidV1",
    "ChannelRaidV1Payload",
    "ChannelSubscribeV1",
    "ChannelSubscribeV1Payload",
    "ChannelUpdateV2",
    "ChannelUpdateV2Payload",
    "StreamOfflineV1",
    "StreamOfflineV1Payload",
    "StreamOnlineV1",
    "StreamOnlineV1Payload",
    "UserUpdateV1",
    "UserUpdateV1Payload",
    "lookup_subscription",
]
