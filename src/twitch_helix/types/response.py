# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Generic response envelope.

Helix answers every call with ``{"data": [...], "pagination": {"cursor": ...}}``
plus endpoint-specific extras such as ``total`` or ``points``. Response keeps
the data in server order and splits the rest into typed attributes.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..exceptions import PaginationExhaustedError
from .rate_limit import RateLimitInfo
from .request import PaginatedRequest, Request

if TYPE_CHECKING:
    from ..dispatcher import Dispatcher
    from ..protocols.credential import CredentialProtocol

T = TypeVar("T")


@dataclass(frozen=True)
class Response(Generic[T]):
    """
    Response envelope for one Helix call.

    Attributes:
        data: Response items, in the order the server sent them
        cursor: Continuation token for the next page; None means there are
            no further pages
        total: Total result count hint, when the endpoint reports one
        included: Side-loaded related objects keyed by id
        other: Any other top-level fields of the response body
        request: The request that produced this response
        rate_limit: Rate limit headers of the response
        status: HTTP status code
    """

    data: tuple[T, ...] = ()
    cursor: str | None = None
    total: int | None = None
    included: dict[str, dict[str, Any]] | None = None
    other: dict[str, Any] | None = None
    request: Request[T] | None = field(default=None, repr=False, compare=False)
    rate_limit: RateLimitInfo | None = field(default=None, repr=False, compare=False)
    status: int = 200

    def __post_init__(self) -> None:
        # An empty cursor is how Helix sometimes spells "no more pages".
        if self.cursor == "":
            object.__setattr__(self, "cursor", None)

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    @property
    def has_next(self) -> bool:
        return self.cursor is not None

    def first(self) -> T | None:
        """First item of the response, or None if it is empty."""
        return self.data[0] if self.data else None

    def get_other(self, key: str, default: Any = None) -> Any:
        """Get a top-level field that is not part of ``data``."""
        if key == "total":
            return self.total if self.total is not None else default
        if not self.other:
            return default
        return self.other.get(key, default)

    async def get_next(
        self,
        dispatcher: Dispatcher,
        credential: CredentialProtocol,
    ) -> Response[T] | None:
        """
        Fetch the page after this one.

        Returns None when this response has no cursor, or when the server
        answers the cursor with the very same page again.

        Raises:
            PaginationExhaustedError: If the originating request is unknown or
                is not a paginated request.
        """
        if self.cursor is None:
            return None
        if not isinstance(self.request, PaginatedRequest):
            raise PaginationExhaustedError(
                "response has a cursor but no paginated source request attached"
            )
        following = await dispatcher.execute(
            self.request.with_cursor(self.cursor), credential
        )
        if self.data and following.data == self.data:
            return None
        return following


__all__ = ["Response"]
