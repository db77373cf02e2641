# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Games: Get Games and Get Top Games."""

from typing import Any, ClassVar

from pydantic import Field, model_validator

from ..types.model import HelixModel
from ..types.request import PaginatedRequest, Request

MAX_GAMES_PER_REQUEST = 100


class Game(HelixModel):
    id: str
    name: str
    # Contains {width}x{height} placeholders
    box_art_url: str
    igdb_id: str = ""


class GetGamesRequest(Request[Game]):
    """Get Games: ``GET /helix/games`` by id, name or IGDB id (100 combined)."""

    PATH: ClassVar[str] = "games"
    RESPONSE: ClassVar[Any] = Game

    id: list[str] = Field(default_factory=list)
    name: list[str] = Field(default_factory=list)
    igdb_id: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_count(self) -> "GetGamesRequest":
        count = len(self.id) + len(self.name) + len(self.igdb_id)
        if count == 0:
            raise ValueError("at least one id, name or igdb_id is required")
        if count > MAX_GAMES_PER_REQUEST:
            raise ValueError(f"at most {MAX_GAMES_PER_REQUEST} games may be requested at once")
        return self


class GetTopGamesRequest(PaginatedRequest[Game]):
    """Get Top Games: categories sorted by current viewers."""

    PATH: ClassVar[str] = "games/top"
    RESPONSE: ClassVar[Any] = Game

    before: str | None = None


__all__ = ["MAX_GAMES_PER_REQUEST", "Game", "GetGamesRequest", "GetTopGamesRequest"]
