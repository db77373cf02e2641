# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
HelixClient: a Dispatcher with convenience helpers.

The helpers are thin wrappers that build the right request, execute it and
unwrap the envelope. Anything not covered here is a matter of constructing
the request and calling execute() directly.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, TypeVar

from typing_extensions import Self

from .config import HelixConfig
from .dispatcher import Dispatcher
from .endpoints.channels import (
    ChannelInformation,
    GetChannelFollowersRequest,
    GetChannelInformationRequest,
    ModifyChannelInformationBody,
    ModifyChannelInformationRequest,
)
from .endpoints.eventsub import (
    CreateEventSubSubscriptionRequest,
    DeleteEventSubSubscriptionRequest,
)
from .endpoints.games import MAX_GAMES_PER_REQUEST, Game, GetGamesRequest
from .endpoints.streams import GetFollowedStreamsRequest, Stream
from .endpoints.subscriptions import (
    BroadcasterSubscription,
    GetBroadcasterSubscriptionsRequest,
)
from .endpoints.users import MAX_USERS_PER_REQUEST, GetUsersRequest, User
from .eventsub.subscription import EventSubscription, Subscription, Transport
from .exceptions import MalformedResponseError
from .observability.metrics import DispatchMetrics, PrometheusDispatchMetrics
from .pagination import Paginator
from .protocols.credential import CredentialProtocol
from .protocols.transport import TransportProtocol
from .transport import HttpxTransport
from .types.request import PaginatedRequest

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _chunks(values: list[str], size: int) -> Iterable[list[str]]:
    for start in range(0, len(values), size):
        yield values[start : start + size]


class HelixClient(Dispatcher):
    """
    Helix client.

    Args:
        transport: Transport to use. When omitted, an HttpxTransport is
            created and closed again by aclose() / ``async with``.
        config: Client configuration.
        metrics: Optional dispatch metrics (see Dispatcher).
        prometheus: Optional Prometheus exporter (see Dispatcher).

    Example:
        async with HelixClient() as client:
            user = await client.get_user_from_login("twitchdev", token)
            async for stream in client.get_followed_streams(token.user_id, token):
                print(stream.title)
    """

    def __init__(
        self,
        transport: TransportProtocol | None = None,
        config: HelixConfig | None = None,
        metrics: DispatchMetrics | None = None,
        prometheus: PrometheusDispatchMetrics | None = None,
    ) -> None:
        config = config or HelixConfig()
        self._owned_transport: HttpxTransport | None = None
        if transport is None:
            self._owned_transport = HttpxTransport(config=config)
            transport = self._owned_transport
        super().__init__(transport, config=config, metrics=metrics, prometheus=prometheus)

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owned_transport is not None:
            await self._owned_transport.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    def paginate(
        self, request: PaginatedRequest[T], credential: CredentialProtocol
    ) -> Paginator[T]:
        """Paginator over every page of ``request``. Nothing is fetched until used."""
        return Paginator(self, request, credential)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def get_user_from_login(
        self, login: str, credential: CredentialProtocol
    ) -> User | None:
        response = await self.execute(GetUsersRequest(login=[login]), credential)
        return response.first()

    async def get_user_from_id(
        self, user_id: str, credential: CredentialProtocol
    ) -> User | None:
        response = await self.execute(GetUsersRequest(id=[user_id]), credential)
        return response.first()

    async def get_users_from_ids(
        self, user_ids: Iterable[str], credential: CredentialProtocol
    ) -> list[User]:
        """Fetch any number of users, 100 per request, in server order per batch."""
        users: list[User] = []
        for batch in _chunks(list(user_ids), MAX_USERS_PER_REQUEST):
            response = await self.execute(GetUsersRequest(id=batch), credential)
            users.extend(response.data)
        return users

    # ------------------------------------------------------------------
    # Channels
    # ------------------------------------------------------------------

    async def get_channel_from_id(
        self, broadcaster_id: str, credential: CredentialProtocol
    ) -> ChannelInformation | None:
        response = await self.execute(
            GetChannelInformationRequest(broadcaster_id=[broadcaster_id]), credential
        )
        return response.first()

    async def get_channel_from_login(
        self, login: str, credential: CredentialProtocol
    ) -> ChannelInformation | None:
        user = await self.get_user_from_login(login, credential)
        if user is None:
            return None
        return await self.get_channel_from_id(user.id, credential)

    async def modify_channel_information(
        self,
        broadcaster_id: str,
        changes: ModifyChannelInformationBody,
        credential: CredentialProtocol,
    ) -> None:
        await self.execute(
            ModifyChannelInformationRequest(broadcaster_id=broadcaster_id, body=changes),
            credential,
        )

    async def get_total_followers_from_id(
        self, broadcaster_id: str, credential: CredentialProtocol
    ) -> int:
        """Follower count of a channel (the ``total`` of Get Channel Followers)."""
        response = await self.execute(
            GetChannelFollowersRequest(broadcaster_id=broadcaster_id, first=1), credential
        )
        if response.total is None:
            raise MalformedResponseError("Get Channel Followers response has no total")
        return response.total

    # ------------------------------------------------------------------
    # Games, streams and subscriptions
    # ------------------------------------------------------------------

    async def get_games_by_id(
        self, game_ids: Iterable[str], credential: CredentialProtocol
    ) -> dict[str, Game]:
        """Games keyed by id. Unknown ids are simply missing from the result."""
        games: dict[str, Game] = {}
        for batch in _chunks(list(game_ids), MAX_GAMES_PER_REQUEST):
            response = await self.execute(GetGamesRequest(id=batch), credential)
            games.update((game.id, game) for game in response)
        return games

    def get_followed_streams(
        self, user_id: str, credential: CredentialProtocol
    ) -> Paginator[Stream]:
        return self.paginate(
            GetFollowedStreamsRequest(user_id=user_id, first=100), credential
        )

    def get_broadcaster_subscriptions(
        self, broadcaster_id: str, credential: CredentialProtocol
    ) -> Paginator[BroadcasterSubscription]:
        return self.paginate(
            GetBroadcasterSubscriptionsRequest(broadcaster_id=broadcaster_id, first=100),
            credential,
        )

    # ------------------------------------------------------------------
    # EventSub
    # ------------------------------------------------------------------

    async def create_eventsub_subscription(
        self,
        subscription: EventSubscription,
        transport: Transport,
        credential: CredentialProtocol,
    ) -> Subscription:
        """Create a subscription; webhook transports need an app access token."""
        request = CreateEventSubSubscriptionRequest.for_subscription(subscription, transport)
        response = await self.execute(request, credential)
        created = response.first()
        if created is None:
            raise MalformedResponseError(
                "Create EventSub Subscription returned no subscription"
            )
        logger.info(f"Created EventSub subscription {created.id} ({created.type})")
        return created

    async def delete_eventsub_subscription(
        self, subscription_id: str, credential: CredentialProtocol
    ) -> None:
        await self.execute(DeleteEventSubSubscriptionRequest(id=subscription_id), credential)


__all__ = ["HelixClient"]
