# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Streams: Get Streams and Get Followed Streams."""

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar

from pydantic import Field

from ..types.common import StreamType
from ..types.model import HelixModel
from ..types.request import PaginatedRequest
from ..types.scope import Scope, scope_set


class StreamTypeFilter(str, Enum):
    ALL = "all"
    LIVE = "live"


class Stream(HelixModel):
    id: str
    user_id: str
    user_login: str
    user_name: str
    game_id: str
    game_name: str
    type: StreamType
    title: str
    tags: list[str] = Field(default_factory=list)
    viewer_count: int
    started_at: datetime
    language: str
    thumbnail_url: str
    is_mature: bool = False


class GetStreamsRequest(PaginatedRequest[Stream]):
    """
    Get Streams: ``GET /helix/streams``.

    Live streams, most viewers first. Each filter takes up to 100 values.
    """

    PATH: ClassVar[str] = "streams"
    RESPONSE: ClassVar[Any] = Stream

    user_id: list[str] = Field(default_factory=list, max_length=100)
    user_login: list[str] = Field(default_factory=list, max_length=100)
    game_id: list[str] = Field(default_factory=list, max_length=100)
    stream_type: StreamTypeFilter | None = Field(default=None, alias="type")
    language: list[str] = Field(default_factory=list, max_length=100)
    before: str | None = None


class GetFollowedStreamsRequest(PaginatedRequest[Stream]):
    """Get Followed Streams: live streams of channels ``user_id`` follows."""

    PATH: ClassVar[str] = "streams/followed"
    SCOPE: ClassVar[frozenset[str]] = scope_set([Scope.USER_READ_FOLLOWS])
    RESPONSE: ClassVar[Any] = Stream

    user_id: str


__all__ = [
    "GetFollowedStreamsRequest",
    "GetStreamsRequest",
    "Stream",
    "StreamTypeFilter",
]
