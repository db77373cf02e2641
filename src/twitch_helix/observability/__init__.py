# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Observability for Helix dispatches: outcome counters and Prometheus export."""

from .metrics import (
    OUTCOME_CANCELLED,
    OUTCOME_CLIENT_ERROR,
    OUTCOME_INSUFFICIENT_SCOPE,
    OUTCOME_MALFORMED,
    OUTCOME_RATE_LIMITED,
    OUTCOME_SERVER_ERROR,
    OUTCOME_SUCCESS,
    OUTCOME_TRANSPORT_ERROR,
    OUTCOMES,
    DispatchMetrics,
    PrometheusDispatchMetrics,
    get_prometheus_dispatch_metrics,
    reset_prometheus_dispatch_metrics,
)

__all__ = [
    "OUTCOMES",
    "OUTCOME_CANCELLED",
    "OUTCOME_CLIENT_ERROR",
    "OUTCOME_INSUFFICIENT_SCOPE",
    "OUTCOME_MALFORMED",
    "OUTCOME_RATE_LIMITED",
    "OUTCOME_SERVER_ERROR",
    "OUTCOME_SUCCESS",
    "OUTCOME_TRANSPORT_ERROR",
    "DispatchMetrics",
    "PrometheusDispatchMetrics",
    "get_prometheus_dispatch_metrics",
    "reset_prometheus_dispatch_metrics",
]
