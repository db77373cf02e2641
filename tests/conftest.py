"""
Shared fixtures for the twitch_helix unit tests.

FakeTransport stands in for HttpxTransport: it records every call and
answers from a queue of canned HttpResponses (or raises queued exceptions),
so no test ever touches the network.
"""

from __future__ import annotations

import json
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from twitch_helix import HelixConfig, UserToken
from twitch_helix.dispatcher import Dispatcher
from twitch_helix.oauth import AppAccessToken
from twitch_helix.protocols.transport import HttpResponse


@dataclass
class RecordedCall:
    method: str
    url: str
    headers: dict[str, str]
    body: bytes | None


class FakeTransport:
    """TransportProtocol double answering from a queue."""

    def __init__(self) -> None:
        self.calls: list[RecordedCall] = []
        self._queue: deque[HttpResponse | BaseException] = deque()

    def queue(self, *responses: HttpResponse | BaseException) -> None:
        self._queue.extend(responses)

    async def execute_http(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None = None,
    ) -> HttpResponse:
        self.calls.append(RecordedCall(method, url, headers, body))
        if not self._queue:
            raise AssertionError(f"unexpected call: {method} {url}")
        answer = self._queue.popleft()
        if isinstance(answer, BaseException):
            raise answer
        return answer


def make_response(
    payload: Any = None,
    status: int = 200,
    headers: dict[str, str] | None = None,
    body: bytes | None = None,
) -> HttpResponse:
    """Build an HttpResponse whose body is ``payload`` encoded as JSON."""
    if body is None:
        body = b"" if payload is None else json.dumps(payload).encode()
    return HttpResponse(status=status, headers=headers or {}, body=body)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def respond() -> Callable[..., HttpResponse]:
    return make_response


@pytest.fixture
def config() -> HelixConfig:
    return HelixConfig(metrics_enabled=True, prometheus_enabled=False)


@pytest.fixture
def dispatcher(transport: FakeTransport, config: HelixConfig) -> Dispatcher:
    return Dispatcher(transport, config=config)


@pytest.fixture
def user_token() -> UserToken:
    return UserToken(
        access_token="user-access-token",
        client_id="client-id",
        granted_scopes=frozenset(
            {
                "channel:manage:broadcast",
                "channel:read:subscriptions",
                "moderator:read:followers",
                "user:read:follows",
            }
        ),
        expires_at=datetime.now(timezone.utc) + timedelta(hours=4),
        login="twitchdev",
        user_id="141981764",
        refresh_token="refresh-token",
    )


@pytest.fixture
def app_token() -> AppAccessToken:
    return AppAccessToken(
        access_token="app-access-token",
        client_id="client-id",
        expires_at=datetime.now(timezone.utc) + timedelta(days=60),
        client_secret="client-secret",
    )


@pytest.fixture
def user_payload() -> Callable[..., dict[str, Any]]:
    """Factory for Get Users items."""

    def build(user_id: str = "141981764", login: str = "twitchdev") -> dict[str, Any]:
        return {
            "id": user_id,
            "login": login,
            "display_name": login.capitalize(),
            "type": "",
            "broadcaster_type": "partner",
            "description": "Supporting third-party developers.",
            "profile_image_url": "https://static-cdn.jtvnw.net/profile.png",
            "offline_image_url": "https://static-cdn.jtvnw.net/offline.png",
            "view_count": 5980557,
            "created_at": "2016-12-14T20:32:28Z",
        }

    return build


@pytest.fixture
def stream_payload() -> Callable[..., dict[str, Any]]:
    """Factory for Get Streams items."""

    def build(stream_id: str = "40952121085", login: str = "lirik") -> dict[str, Any]:
        return {
            "id": stream_id,
            "user_id": "23161357",
            "user_login": login,
            "user_name": login.upper(),
            "game_id": "417752",
            "game_name": "Talk Shows & Podcasts",
            "type": "live",
            "title": "Hey Guys, It's Monday",
            "tags": ["English"],
            "viewer_count": 78365,
            "started_at": "2021-03-10T15:04:21Z",
            "language": "en",
            "thumbnail_url": "https://static-cdn.jtvnw.net/previews-ttv/{width}x{height}.jpg",
            "is_mature": False,
        }

    return build
