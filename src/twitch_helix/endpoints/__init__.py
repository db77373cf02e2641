# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Helix endpoint requests and response models.

One module per Helix resource. Every request class is a Request (or
PaginatedRequest) subclass bound to its response element model.
"""

from .channels import (
    ChannelInformation,
    ContentClassificationLabel,
    Follower,
    GetChannelFollowersRequest,
    GetChannelInformationRequest,
    ModifyChannelInformationBody,
    ModifyChannelInformationRequest,
)
from .eventsub import (
    CreateEventSubSubscriptionBody,
    CreateEventSubSubscriptionRequest,
    DeleteEventSubSubscriptionRequest,
    GetEventSubSubscriptionsRequest,
)
from .games import Game, GetGamesRequest, GetTopGamesRequest
from .streams import GetFollowedStreamsRequest, GetStreamsRequest, Stream, StreamTypeFilter
from .subscriptions import BroadcasterSubscription, GetBroadcasterSubscriptionsRequest
from .users import GetUsersRequest, User
from .videos import (
    DeleteVideosRequest,
    GetVideosRequest,
    MutedSegment,
    Video,
    VideoPeriod,
    VideoSort,
    VideoType,
    VideoTypeFilter,
)

__all__ = [
    # Subscriptions
    "BroadcasterSubscription",
    # Channels
    "ChannelInformation",
    "ContentClassificationLabel",
    # EventSub
    "CreateEventSubSubscriptionBody",
    "CreateEventSubSubscriptionRequest",
    "DeleteEventSubSubscriptionRequest",
    # Videos
    "DeleteVideosRequest",
    "Follower",
    # Games
    "Game",
    "GetBroadcasterSubscriptionsRequest",
    "GetChannelFollowersRequest",
    "GetChannelInformationRequest",
    "GetEventSubSubscriptionsRequest",
    # Streams
    "GetFollowedStreamsRequest",
    "GetGamesRequest",
    "GetStreamsRequest",
    "GetTopGamesRequest",
    # Users
    "GetUsersRequest",
    "GetVideosRequest",
    "ModifyChannelInformationBody",
    "ModifyChannelInformationRequest",
    "MutedSegment",
    "Stream",
    "StreamTypeFilter",
    "User",
    "Video",
    "VideoPeriod",
    "VideoSort",
    "VideoType",
    "VideoTypeFilter",
]
