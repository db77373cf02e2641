# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Forward-only cursor pagination over Helix result sets.

A Paginator owns a paginated request, the last envelope it received and a
credential. Each advance() re-issues the request with the last cursor and
returns the new page's items. Once a page arrives without a cursor the
paginator is exhausted and stays that way.

Usage:
    paginator = Paginator(dispatcher, GetStreamsRequest(first=100), token)
    async for stream in paginator:
        print(stream.user_login)
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

from .exceptions import InvalidParameterError, PaginationExhaustedError
from .protocols.credential import CredentialProtocol
from .types.request import PaginatedRequest
from .types.response import Response

if TYPE_CHECKING:
    from .dispatcher import Dispatcher

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PaginationState(str, Enum):
    """Whether a paginator can produce another page."""

    HAS_MORE = "has_more"
    EXHAUSTED = "exhausted"


class Paginator(Generic[T]):
    """
    Lazy, forward-only walker over the pages of a paginated request.

    A paginator is not restartable. advance() calls are serialised with an
    asyncio.Lock; the cursor and state only change after a page has been
    fetched successfully, so a failed or cancelled advance() can be retried.

    Args:
        dispatcher: Dispatcher used for every page.
        request: The paginated request describing the first page.
        credential: Credential sent with every page. Replace it with
            use_credential() after refreshing a token.
        response: An envelope already fetched for ``request``. When given,
            the first advance() fetches the page after it.
    """

    def __init__(
        self,
        dispatcher: Dispatcher,
        request: PaginatedRequest[T],
        credential: CredentialProtocol,
        response: Response[T] | None = None,
    ) -> None:
        if not isinstance(request, PaginatedRequest):
            raise InvalidParameterError(
                f"{type(request).__name__} is not a paginated request"
            )
        self._dispatcher = dispatcher
        self._request = request
        self._credential = credential
        self._last_response = response
        self._pages_fetched = 0
        # Items of a seeding envelope are yielded once, by the first iteration.
        self._seed_pending = response is not None
        self._lock = asyncio.Lock()
        if response is None or response.cursor is not None:
            self._state = PaginationState.HAS_MORE
        else:
            self._state = PaginationState.EXHAUSTED

    @classmethod
    def from_response(
        cls,
        dispatcher: Dispatcher,
        response: Response[T],
        credential: CredentialProtocol,
    ) -> Paginator[T]:
        """Continue paginating after an envelope returned by the dispatcher."""
        request = response.request
        if not isinstance(request, PaginatedRequest):
            raise PaginationExhaustedError(
                "response has no paginated source request attached"
            )
        return cls(dispatcher, request, credential, response=response)

    @property
    def state(self) -> PaginationState:
        return self._state

    @property
    def exhausted(self) -> bool:
        return self._state is PaginationState.EXHAUSTED

    @property
    def cursor(self) -> str | None:
        """Cursor the next advance() will send (None before the first page)."""
        if self._last_response is None:
            return None
        return self._last_response.cursor

    @property
    def last_response(self) -> Response[T] | None:
        return self._last_response

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    def use_credential(self, credential: CredentialProtocol) -> None:
        """Send ``credential`` with subsequent pages (e.g. after a refresh)."""
        self._credential = credential

    async def advance(self) -> tuple[T, ...]:
        """
        Fetch the next page and return its items.

        Raises:
            PaginationExhaustedError: The last page has already been fetched.
            HelixError: Any error raised by the dispatcher. State is unchanged.
        """
        async with self._lock:
            if self._state is PaginationState.EXHAUSTED:
                raise PaginationExhaustedError(
                    f"{self._request.endpoint_name()} has no further pages"
                )

            previous = self._last_response
            if previous is None:
                request = self._request
            else:
                request = self._request.with_cursor(previous.cursor)

            response = await self._dispatcher.execute(request, self._credential)

            self._last_response = response
            self._pages_fetched += 1
            self._seed_pending = False

            # Helix occasionally hands out a cursor that serves the same page again.
            if previous is not None and previous.data and response.data == previous.data:
                logger.debug(
                    f"{request.endpoint_name()} repeated its last page; "
                    "treating the result set as exhausted"
                )
                self._state = PaginationState.EXHAUSTED
                return ()

            if response.cursor is None:
                self._state = PaginationState.EXHAUSTED
            logger.debug(
                f"{request.endpoint_name()} page {self._pages_fetched}: "
                f"{len(response.data)} item(s), state={self._state.value}"
            )
            return response.data

    async def pages(self) -> AsyncIterator[tuple[T, ...]]:
        """Yield the items of each remaining page."""
        while not self.exhausted:
            yield await self.advance()

    def __aiter__(self) -> AsyncIterator[T]:
        return self._iter_items()

    async def _iter_items(self) -> AsyncIterator[T]:
        if self._seed_pending and self._last_response is not None:
            self._seed_pending = False
            for item in self._last_response.data:
                yield item
        async for page in self.pages():
            for item in page:
                yield item

    async def collect(self, limit: int | None = None) -> list[T]:
        """
        Gather items from the remaining pages into a list.

        Args:
            limit: Stop once this many items have been collected. Pages are
                never fetched beyond the one that reaches the limit.
        """
        if limit is not None and limit < 0:
            raise InvalidParameterError("limit must not be negative", parameter="limit")
        items: list[T] = []
        if limit == 0:
            return items
        async for item in self:
            items.append(item)
            if limit is not None and len(items) >= limit:
                break
        return items


__all__ = ["PaginationState", "Paginator"]
