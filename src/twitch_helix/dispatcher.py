# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Dispatcher: executes typed requests against a transport.

The dispatcher turns a Request into one HTTP call and the HTTP response into
a Response envelope (or a typed exception). It keeps no per-call state, so a
single instance can be shared by any number of concurrent tasks.

What the dispatcher deliberately does NOT do:
- retry (rate limits and transient failures surface to the caller)
- refresh tokens (the caller substitutes a refreshed credential)
- cache, pool connections or enforce timeouts (transport concerns)
"""

from __future__ import annotations

import asyncio
import functools
import json
import logging
import time
from typing import Any, TypeVar
from urllib.parse import urljoin

from pydantic import BaseModel, TypeAdapter, ValidationError

from .config import HelixConfig
from .exceptions import (
    ForbiddenError,
    HelixAPIError,
    HelixError,
    InsufficientScopeError,
    MalformedResponseError,
    NotFoundError,
    RateLimitedError,
    RequestCancelledError,
    ServerError,
    TransportError,
    UnauthorizedError,
)
from .observability.metrics import (
    OUTCOME_CANCELLED,
    OUTCOME_CLIENT_ERROR,
    OUTCOME_INSUFFICIENT_SCOPE,
    OUTCOME_MALFORMED,
    OUTCOME_RATE_LIMITED,
    OUTCOME_SERVER_ERROR,
    OUTCOME_SUCCESS,
    OUTCOME_TRANSPORT_ERROR,
    DispatchMetrics,
    PrometheusDispatchMetrics,
    get_prometheus_dispatch_metrics,
)
from .protocols.credential import CredentialProtocol
from .protocols.transport import HttpRequest, HttpResponse, TransportProtocol
from .types.model import DENY_UNKNOWN_FIELDS
from .types.rate_limit import RateLimitInfo, parse_rate_limit_headers
from .types.request import Request
from .types.response import Response

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HelixErrorBody(BaseModel):
    """Error body Helix sends with non-2xx responses."""

    error: str | None = None
    status: int | None = None
    message: str | None = None


@functools.lru_cache(maxsize=None)
def _data_adapter(element_type: Any) -> TypeAdapter[list[Any]]:
    return TypeAdapter(list[element_type])


def _extract_cursor(pagination: Any) -> str | None:
    # Helix sends {"cursor": "..."}, {} or, on a few endpoints, a bare string.
    if isinstance(pagination, str):
        return pagination or None
    if isinstance(pagination, dict):
        cursor = pagination.get("cursor")
        if cursor is None or isinstance(cursor, str):
            return cursor or None
    if pagination is None:
        return None
    raise ValueError(f"unexpected pagination value: {pagination!r}")


def _normalise_included(included: Any) -> dict[str, dict[str, Any]] | None:
    if included is None:
        return None
    if isinstance(included, dict):
        return {str(key): value for key, value in included.items()}
    if isinstance(included, list):
        result: dict[str, dict[str, Any]] = {}
        for item in included:
            if not isinstance(item, dict) or "id" not in item:
                raise ValueError("included objects must carry an id")
            result[str(item["id"])] = item
        return result
    raise ValueError(f"unexpected included value: {type(included).__name__}")


class Dispatcher:
    """
    Executes Request objects and deserializes their Response envelopes.

    Args:
        transport: Any TransportProtocol implementation (e.g. HttpxTransport).
            The dispatcher references it but does not own it.
        config: Client configuration. Defaults to HelixConfig().
        metrics: Outcome counters. Created automatically when
            config.metrics_enabled and none is given.
        prometheus: Prometheus exporter. Defaults to the shared singleton when
            config.prometheus_enabled.

    Example:
        dispatcher = Dispatcher(HttpxTransport())
        response = await dispatcher.execute(GetUsersRequest(login=["dallas"]), token)
        print(response.first())
    """

    def __init__(
        self,
        transport: TransportProtocol,
        config: HelixConfig | None = None,
        metrics: DispatchMetrics | None = None,
        prometheus: PrometheusDispatchMetrics | None = None,
    ) -> None:
        self._transport = transport
        self._config = config or HelixConfig()
        if metrics is None and self._config.metrics_enabled:
            metrics = DispatchMetrics()
        self._metrics = metrics
        if prometheus is None and self._config.prometheus_enabled:
            prometheus = get_prometheus_dispatch_metrics()
        self._prometheus = prometheus

    @property
    def transport(self) -> TransportProtocol:
        return self._transport

    @property
    def config(self) -> HelixConfig:
        return self._config

    @property
    def metrics(self) -> DispatchMetrics | None:
        return self._metrics

    # ------------------------------------------------------------------
    # Request building
    # ------------------------------------------------------------------

    def build_url(self, request: Request[Any]) -> str:
        url = urljoin(self._config.base_url, request.path().lstrip("/"))
        query = request.query_string()
        return f"{url}?{query}" if query else url

    def build_request(
        self, request: Request[Any], credential: CredentialProtocol
    ) -> HttpRequest:
        """Assemble method, URL, headers and body for ``request``."""
        headers = {
            "Authorization": f"Bearer {credential.bearer}",
            "Client-Id": credential.client_id,
            "Accept": "application/json",
            "User-Agent": self._config.user_agent,
        }
        body = request.json_body()
        if body is not None:
            headers["Content-Type"] = "application/json"
        return HttpRequest(
            method=request.METHOD.value,
            url=self.build_url(request),
            headers=headers,
            body=body,
        )

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    async def execute(
        self,
        request: Request[T],
        credential: CredentialProtocol,
        *,
        strict: bool | None = None,
    ) -> Response[T]:
        """
        Execute ``request`` with ``credential`` and return its envelope.

        Args:
            request: The typed request to send.
            credential: Bearer credential; must grant every scope in request.SCOPE.
            strict: Override HelixConfig.strict for this call.

        Raises:
            InsufficientScopeError: Credential lacks a required scope. No
                network call is made.
            UnauthorizedError, ForbiddenError, NotFoundError, RateLimitedError,
            ServerError, HelixAPIError: Helix answered with a non-2xx status.
            MalformedResponseError: A 2xx body could not be deserialized.
            RequestCancelledError: The call was cancelled in flight.
            TransportError: The transport failed below HTTP.
        """
        endpoint = request.endpoint_name()

        granted = credential.scopes()
        missing = request.SCOPE - granted
        if missing:
            self._record(endpoint, OUTCOME_INSUFFICIENT_SCOPE)
            raise InsufficientScopeError(request.SCOPE, frozenset(missing))

        http_request = self.build_request(request, credential)
        logger.debug(f"Sending {http_request.method} {http_request.url}")

        start = time.monotonic()
        try:
            raw = await self._transport.execute_http(
                http_request.method,
                http_request.url,
                dict(http_request.headers),
                http_request.body,
            )
        except asyncio.CancelledError as e:
            self._record(endpoint, OUTCOME_CANCELLED)
            raise RequestCancelledError(
                f"{http_request.method} {http_request.url} was cancelled"
            ) from e
        except TransportError:
            self._record(endpoint, OUTCOME_TRANSPORT_ERROR, time.monotonic() - start)
            raise
        except OSError as e:
            self._record(endpoint, OUTCOME_TRANSPORT_ERROR, time.monotonic() - start)
            raise TransportError(
                f"{http_request.method} {http_request.url} failed: {e}"
            ) from e
        duration = time.monotonic() - start

        try:
            response = self.parse_response(
                request, raw, url=http_request.url, strict=strict
            )
        except HelixError as e:
            self._record(endpoint, _outcome_for(e), duration)
            raise

        self._record(endpoint, OUTCOME_SUCCESS, duration)
        if self._prometheus is not None and response.rate_limit is not None:
            if response.rate_limit.remaining is not None:
                self._prometheus.observe_rate_limit(response.rate_limit.remaining)
        return response

    # ------------------------------------------------------------------
    # Response parsing
    # ------------------------------------------------------------------

    def parse_response(
        self,
        request: Request[T],
        raw: HttpResponse,
        *,
        url: str | None = None,
        strict: bool | None = None,
    ) -> Response[T]:
        """
        Turn a raw HTTP response into an envelope or raise the mapped error.

        Usable on its own when the HTTP call was made outside the dispatcher.
        """
        deny_unknown = self._config.strict if strict is None else strict
        rate_limit = parse_rate_limit_headers(raw.headers, raw.status)

        if not raw.is_success:
            raise self._error_for(raw, rate_limit, url)

        try:
            text = raw.body.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning(f"Malformed response from {url}: body is not UTF-8 ({e})")
            raise MalformedResponseError(
                f"response is not valid UTF-8: {e}", body=raw.text(), url=url
            ) from e
        if raw.status == 204 or not text.strip():
            return Response(
                data=(), request=request, rate_limit=rate_limit, status=raw.status
            )

        try:
            payload = json.loads(text)
        except ValueError as e:
            logger.warning(f"Malformed response from {url}: invalid JSON ({e})")
            raise MalformedResponseError(
                f"response is not valid JSON: {e}", body=text, url=url
            ) from e

        if not isinstance(payload, dict) or "data" not in payload:
            logger.warning(f"Malformed response from {url}: missing data field")
            raise MalformedResponseError(
                "response has no 'data' field", body=text, url=url
            )

        payload = dict(payload)
        data = payload.pop("data")
        if isinstance(data, dict):
            data = [data]
        elif data is None:
            data = []

        try:
            items = _data_adapter(request.RESPONSE).validate_python(
                data, context={DENY_UNKNOWN_FIELDS: deny_unknown}
            )
            cursor = _extract_cursor(payload.pop("pagination", None))
            included = _normalise_included(payload.pop("included", None))
            total = payload.pop("total", None)
            if total is not None:
                total = int(total)
        except (ValidationError, ValueError, TypeError) as e:
            logger.warning(f"Malformed response from {url}: {e}")
            raise MalformedResponseError(
                f"could not deserialize {request.endpoint_name()} response: {e}",
                body=text,
                url=url,
            ) from e

        return Response(
            data=tuple(items),
            cursor=cursor,
            total=total,
            included=included,
            other=payload or None,
            request=request,
            rate_limit=rate_limit,
            status=raw.status,
        )

    def _error_for(
        self,
        raw: HttpResponse,
        rate_limit: RateLimitInfo,
        url: str | None,
    ) -> HelixAPIError:
        error: str | None = None
        message: str | None = None
        try:
            body = HelixErrorBody.model_validate_json(raw.body)
            error, message = body.error, body.message
        except ValidationError:
            message = raw.text() or None

        status = raw.status
        if status == 429:
            logger.warning(
                f"Rate limited calling {url}; retry after {rate_limit.retry_after}s"
            )
            return RateLimitedError(
                retry_after=rate_limit.retry_after,
                reset_at=rate_limit.reset,
                error=error,
                message=message,
                url=url,
            )
        error_class: type[HelixAPIError] = HelixAPIError
        if status == 401:
            error_class = UnauthorizedError
        elif status == 403:
            error_class = ForbiddenError
        elif status == 404:
            error_class = NotFoundError
        elif status >= 500:
            error_class = ServerError
        return error_class(status, error=error, message=message, url=url)

    def _record(self, endpoint: str, outcome: str, duration: float | None = None) -> None:
        if self._metrics is not None:
            self._metrics.record(endpoint, outcome, duration)
        if self._prometheus is not None:
            self._prometheus.observe(endpoint, outcome, duration)


def _outcome_for(error: HelixError) -> str:
    if isinstance(error, RateLimitedError):
        return OUTCOME_RATE_LIMITED
    if isinstance(error, ServerError):
        return OUTCOME_SERVER_ERROR
    if isinstance(error, HelixAPIError):
        return OUTCOME_CLIENT_ERROR
    return OUTCOME_MALFORMED


__all__ = ["Dispatcher", "HelixErrorBody"]
