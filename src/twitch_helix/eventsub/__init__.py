# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""EventSub: subscription types, event payloads and webhook handling."""

from .events import (
    SUBSCRIPTIONS,
    ChannelCheerV1,
    ChannelCheerV1Payload,
    ChannelFollowV2,
    ChannelFollowV2Payload,
    ChannelRaidV1,
    ChannelRaidV1Payload,
    ChannelSubscribeV1,
    ChannelSubscribeV1Payload,
    ChannelUpdateV2,
    ChannelUpdateV2Payload,
    StreamOfflineV1,
    StreamOfflineV1Payload,
    StreamOnlineV1,
    StreamOnlineV1Payload,
    UserUpdateV1,
    UserUpdateV1Payload,
    lookup_subscription,
)
from .subscription import (
    EventSubscription,
    EventType,
    Status,
    Subscription,
    Transport,
    TransportMethod,
    TransportResponse,
)
from .webhook import (
    MessageType,
    Notification,
    Revocation,
    VerificationRequest,
    WebhookMessage,
    compute_signature,
    parse,
    parse_http,
    verify_payload,
    verify_request,
)

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
    # Subscriptions
    "EventSubscription",
    "EventType",
    # Webhooks
    "MessageType",
    "Notification",
    "Revocation",
    "Status",
    "StreamOfflineV1",
    "StreamOfflineV1Payload",
    "StreamOnlineV1",
    "StreamOnlineV1Payload",
    "Subscription",
    "Transport",
    "TransportMethod",
    "TransportResponse",
    "UserUpdateV1",
    "UserUpdateV1Payload",
    "VerificationRequest",
    "WebhookMessage",
    "compute_signature",
    "lookup_subscription",
    "parse",
    "parse_http",
    "verify_payload",
    "verify_request",
]
