# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Type definitions: requests, responses, models, scopes and the query codec."""

from .model import DENY_UNKNOWN_FIELDS, HelixModel
from .query import encode_params, encode_value, parse_query, to_query_string
from .rate_limit import RateLimitInfo, parse_rate_limit_headers, parse_retry_after
from .request import BODY_FIELD, HttpMethod, PaginatedRequest, Request
from .response import Response
from .scope import Scope, scope_set

__all__ = [
    "BODY_FIELD",
    "DENY_UNKNOWN_FIELDS",
    "HelixModel",
    "HttpMethod",
    "PaginatedRequest",
    # Rate limit types
    "RateLimitInfo",
    # Request / response
    "Request",
    "Response",
    # Scopes
    "Scope",
    "encode_params",
    "encode_value",
    "parse_query",
    "parse_rate_limit_headers",
    "parse_retry_after",
    "scope_set",
    "to_query_string",
]
