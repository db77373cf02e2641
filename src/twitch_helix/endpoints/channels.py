# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Channels: Get Channel Information, Modify Channel Information and
Get Channel Followers.
"""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..types.model import HelixModel
from ..types.request import HttpMethod, PaginatedRequest, Request
from ..types.scope import Scope, scope_set


class ChannelInformation(HelixModel):
    broadcaster_id: str
    broadcaster_login: str
    broadcaster_name: str
    broadcaster_language: str
    game_id: str
    game_name: str
    title: str
    delay: int = 0
    tags: list[str] = Field(default_factory=list)
    content_classification_labels: list[str] = Field(default_factory=list)
    is_branded_content: bool = False


class GetChannelInformationRequest(Request[ChannelInformation]):
    """Get Channel Information: ``GET /helix/channels`` for up to 100 broadcasters."""

    PATH: ClassVar[str] = "channels"
    RESPONSE: ClassVar[Any] = ChannelInformation

    broadcaster_id: list[str] = Field(min_length=1, max_length=100)


class ContentClassificationLabel(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    is_enabled: bool


class ModifyChannelInformationBody(BaseModel):
    """
    Fields to change. Unset (None) fields are left untouched; at least one
    must be given.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    game_id: str | None = None
    broadcaster_language: str | None = None
    title: str | None = Field(default=None, min_length=1)
    delay: int | None = Field(default=None, ge=0, le=900)
    tags: list[str] | None = Field(default=None, max_length=10)
    content_classification_labels: list[ContentClassificationLabel] | None = None
    is_branded_content: bool | None = None

    @model_validator(mode="after")
    def check_not_empty(self) -> "ModifyChannelInformationBody":
        if not self.model_dump(exclude_none=True):
            raise ValueError("at least one channel property must be set")
        return self


class ModifyChannelInformationRequest(Request[dict[str, Any]]):
    """
    Modify Channel Information: ``PATCH /helix/channels``.

    Twitch answers 204 No Content, so the response envelope is empty.
    """

    METHOD: ClassVar[HttpMethod] = HttpMethod.PATCH
    PATH: ClassVar[str] = "channels"
    SCOPE: ClassVar[frozenset[str]] = scope_set([Scope.CHANNEL_MANAGE_BROADCAST])
    MUTATES: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = dict[str, Any]

    broadcaster_id: str
    body: ModifyChannelInformationBody


class Follower(HelixModel):
    user_id: str
    user_login: str
    user_name: str
    followed_at: datetime


class GetChannelFollowersRequest(PaginatedRequest[Follower]):
    """
    Get Channel Followers: ``GET /helix/channels/followers``.

    The envelope's ``total`` is the follower count.
    """

    PATH: ClassVar[str] = "channels/followers"
    SCOPE: ClassVar[frozenset[str]] = scope_set([Scope.MODERATOR_READ_FOLLOWERS])
    RESPONSE: ClassVar[Any] = Follower

    broadcaster_id: str
    user_id: str | None = None


__all__ = [
    "ChannelInformation",
    "ContentClassificationLabel",
    "Follower",
    "GetChannelFollowersRequest",
    "GetChannelInformationRequest",
    "ModifyChannelInformationBody",
    "ModifyChannelInformationRequest",
]
