# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Users: Get Users."""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field, model_validator

from ..types.common import BroadcasterType, UserType
from ..types.model import HelixModel
from ..types.request import Request

MAX_USERS_PER_REQUEST = 100


class User(HelixModel):
    id: str
    login: str
    display_name: str
    type: UserType = UserType.NONE
    broadcaster_type: BroadcasterType = BroadcasterType.NONE
    description: str = ""
    profile_image_url: str | None = None
    offline_image_url: str | None = None
    # Only present for user tokens carrying user:read:email
    email: str | None = None
    created_at: datetime
    # Deprecated by Twitch, still sent on some accounts
    view_count: int | None = None


class GetUsersRequest(Request[User]):
    """
    Get Users: ``GET /helix/users``.

    Up to 100 ids and logins combined. With neither, the user owning the
    (user) token is returned.
    """

    PATH: ClassVar[str] = "users"
    RESPONSE: ClassVar[Any] = User

    id: list[str] = Field(default_factory=list)
    login: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_count(self) -> "GetUsersRequest":
        if len(self.id) + len(self.login) > MAX_USERS_PER_REQUEST:
            raise ValueError(
                f"at most {MAX_USERS_PER_REQUEST} ids and logins may be requested at once"
            )
        return self


__all__ = ["MAX_USERS_PER_REQUEST", "GetUsersRequest", "User"]
