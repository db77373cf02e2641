# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Videos: Get Videos and Delete Videos."""

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar

from pydantic import Field, model_validator

from ..types.model import HelixModel
from ..types.request import HttpMethod, PaginatedRequest, Request
from ..types.scope import Scope, scope_set


class VideoType(str, Enum):
    ARCHIVE = "archive"
    HIGHLIGHT = "highlight"
    UPLOAD = "upload"


class VideoTypeFilter(str, Enum):
    ALL = "all"
    ARCHIVE = "archive"
    HIGHLIGHT = "highlight"
    UPLOAD = "upload"


class VideoPeriod(str, Enum):
    ALL = "all"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class VideoSort(str, Enum):
    TIME = "time"
    TRENDING = "trending"
    VIEWS = "views"


class MutedSegment(HelixModel):
    duration: int
    offset: int


class Video(HelixModel):
    id: str
    stream_id: str | None = None
    user_id: str
    user_login: str
    user_name: str
    title: str
    description: str
    created_at: datetime
    published_at: datetime
    url: str
    thumbnail_url: str
    viewable: str
    view_count: int
    language: str
    type: VideoType
    # e.g. "3h8m33s"
    duration: str
    muted_segments: list[MutedSegment] | None = None


class GetVideosRequest(PaginatedRequest[Video]):
    """
    Get Videos: ``GET /helix/videos``.

    Exactly one of ``id``, ``user_id`` or ``game_id`` must be given. The
    ``language``, ``period``, ``sort`` and ``type`` filters and pagination
    only apply to the ``user_id`` and ``game_id`` forms.
    """

    PATH: ClassVar[str] = "videos"
    RESPONSE: ClassVar[Any] = Video

    id: list[str] = Field(default_factory=list, max_length=100)
    user_id: str | None = None
    game_id: str | None = None
    language: str | None = None
    period: VideoPeriod | None = None
    sort: VideoSort | None = None
    video_type: VideoTypeFilter | None = Field(default=None, alias="type")
    before: str | None = None

    @model_validator(mode="after")
    def check_selector(self) -> "GetVideosRequest":
        given = sum((bool(self.id), self.user_id is not None, self.game_id is not None))
        if given != 1:
            raise ValueError("exactly one of id, user_id or game_id must be given")
        return self


class DeleteVideosRequest(Request[str]):
    """
    Delete Videos: ``DELETE /helix/videos`` for up to 5 ids.

    The envelope's data holds the ids that were deleted.
    """

    METHOD: ClassVar[HttpMethod] = HttpMethod.DELETE
    PATH: ClassVar[str] = "videos"
    SCOPE: ClassVar[frozenset[str]] = scope_set([Scope.CHANNEL_MANAGE_VIDEOS])
    MUTATES: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = str

    id: list[str] = Field(min_length=1, max_length=5)


__all__ = [
    "DeleteVideosRequest",
    "GetVideosRequest",
    "MutedSegment",
    "Video",
    "VideoPeriod",
    "VideoSort",
    "VideoType",
    "VideoTypeFilter",
]
