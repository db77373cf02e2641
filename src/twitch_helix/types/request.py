# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Typed request base classes.

Every Helix endpoint is a frozen pydantic model whose fields are the
endpoint's parameters. The class itself declares everything the dispatcher
needs to know about the endpoint:

* ``METHOD``: HTTP method
* ``PATH``: path relative to the Helix root; ``{name}`` placeholders are
  filled from the field of the same name
* ``SCOPE``: scopes the credential must grant
* ``MUTATES``: whether the call changes server state
* ``RESPONSE``: element type of the response ``data`` array

A field named ``body`` is sent as the JSON request body; all remaining
fields are query parameters. Validation happens at construction time and
raises InvalidParameterError.
"""

from __future__ import annotations

import string
import types
import typing
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from typing_extensions import Self

from ..exceptions import InvalidParameterError
from .query import QueryPairs, encode_params, encode_value, parse_query, to_query_string

T = TypeVar("T")

BODY_FIELD = "body"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


def _is_sequence(annotation: Any) -> bool:
    """Whether a field annotation is a list/tuple (possibly inside Optional)."""
    origin = typing.get_origin(annotation)
    if origin in (list, tuple, set, frozenset):
        return True
    if origin is typing.Union or origin is types.UnionType:
        return any(_is_sequence(arg) for arg in typing.get_args(annotation))
    return False


class Request(BaseModel, Generic[T]):
    """
    Base class for a single Helix API operation.

    Subclasses bind ``T`` to the element type of the response and set the
    class-level endpoint description. Instances are immutable.

    Example:
        >>> class GetThingsRequest(Request[Thing]):
        ...     PATH = "things"
        ...     RESPONSE = Thing
        ...     id: list[str] = []
        >>> GetThingsRequest(id=["1", "2"]).query_string()
        'id=1&id=2'
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    METHOD: ClassVar[HttpMethod] = HttpMethod.GET
    PATH: ClassVar[str] = ""
    SCOPE: ClassVar[frozenset[str]] = frozenset()
    MUTATES: ClassVar[bool] = False
    RESPONSE: ClassVar[Any] = dict
    PAGINATED: ClassVar[bool] = False

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            first = e.errors()[0] if e.errors() else {}
            loc = first.get("loc") or ()
            parameter = str(loc[0]) if loc else None
            raise InvalidParameterError(
                f"invalid parameters for {type(self).__name__}: {e}",
                parameter=parameter,
            ) from e

    @classmethod
    def endpoint_name(cls) -> str:
        """Stable label for logs and metrics, e.g. ``GET users``."""
        return f"{cls.METHOD.value} {cls.PATH}"

    @classmethod
    def _path_fields(cls) -> set[str]:
        return {
            name
            for _, name, _, _ in string.Formatter().parse(cls.PATH)
            if name is not None
        }

    @classmethod
    def _query_fields(cls) -> dict[str, str]:
        """Map field name -> wire name for every query parameter, in declaration order."""
        path_fields = cls._path_fields()
        return {
            name: field.alias or name
            for name, field in cls.model_fields.items()
            if name != BODY_FIELD and name not in path_fields
        }

    def path(self) -> str:
        """The endpoint path with placeholders filled in."""
        values = {name: encode_value(getattr(self, name)) for name in self._path_fields()}
        return self.PATH.format(**values)

    def query_params(self) -> QueryPairs:
        """Ordered (key, value) pairs for the query string."""
        return encode_params(
            {wire: getattr(self, name) for name, wire in self._query_fields().items()}
        )

    def query_string(self) -> str:
        return to_query_string(self.query_params())

    def json_body(self) -> bytes | None:
        """Encoded JSON body, or None if the endpoint takes no body."""
        if BODY_FIELD not in type(self).model_fields:
            return None
        body = getattr(self, BODY_FIELD)
        if body is None:
            return None
        if isinstance(body, BaseModel):
            return body.model_dump_json(by_alias=True, exclude_none=True).encode()
        raise InvalidParameterError(
            f"{type(self).__name__}.body must be a pydantic model", parameter=BODY_FIELD
        )

    @classmethod
    def from_query(cls, query: str, **extra: Any) -> Self:
        """
        Rebuild a request from a query string produced by query_string().

        Path parameters and the body are not part of the query string and can
        be supplied through ``extra``.
        """
        parsed = parse_query(query)
        data: dict[str, Any] = dict(extra)
        for name, wire in cls._query_fields().items():
            if wire not in parsed:
                continue
            values = parsed[wire]
            annotation = cls.model_fields[name].annotation
            data[name] = values if _is_sequence(annotation) else values[-1]
        return cls(**data)


class PaginatedRequest(Request[T], Generic[T]):
    """
    A GET request whose results are cursor-paginated.

    ``first`` is the page size (1-100, default 20) and ``after`` carries the
    cursor of the previous page. Endpoints with a different documented bound
    redeclare ``first``.
    """

    PAGINATED: ClassVar[bool] = True
    CURSOR_PARAM: ClassVar[str] = "after"

    first: int = Field(default=20, ge=1, le=100)
    after: str | None = None

    def with_cursor(self, cursor: str | None) -> Self:
        """Return a copy of this request that starts at ``cursor``."""
        return self.model_copy(update={self.CURSOR_PARAM: cursor})


__all__ = [
    "BODY_FIELD",
    "HttpMethod",
    "PaginatedRequest",
    "Request",
]
