# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Dispatch metrics for twitch_helix.

This module provides:
1. DispatchMetrics - Dataclass counting dispatch outcomes per endpoint
2. PrometheusDispatchMetrics - Prometheus Counter/Histogram export

Usage:
    metrics = DispatchMetrics()

    # Record a successful call
    metrics.record("GET users", OUTCOME_SUCCESS, duration=0.12)

    # Get stats for JSON serialization
    stats = metrics.get_stats()

Important Notes on Endpoint Labels:
    Endpoint labels are the request class's endpoint_name() (method plus path
    template), which is a small, bounded set. Never label with user ids,
    cursors or fully rendered URLs.
"""

from __future__ import annotations

import logging
import threading
from collections import Counter as TallyCounter
from dataclasses import dataclass, field
from typing import Any

from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram

logger = logging.getLogger(__name__)

OUTCOME_SUCCESS = "success"
OUTCOME_INSUFFICIENT_SCOPE = "insufficient_scope"
OUTCOME_RATE_LIMITED = "rate_limited"
OUTCOME_CLIENT_ERROR = "client_error"
OUTCOME_SERVER_ERROR = "server_error"
OUTCOME_MALFORMED = "malformed"
OUTCOME_TRANSPORT_ERROR = "transport_error"
OUTCOME_CANCELLED = "cancelled"

OUTCOMES = (
    OUTCOME_SUCCESS,
    OUTCOME_INSUFFICIENT_SCOPE,
    OUTCOME_RATE_LIMITED,
    OUTCOME_CLIENT_ERROR,
    OUTCOME_SERVER_ERROR,
    OUTCOME_MALFORMED,
    OUTCOME_TRANSPORT_ERROR,
    OUTCOME_CANCELLED,
)


@dataclass
class DispatchMetrics:
    """
    Per-endpoint dispatch outcome counters.

    Thread Safety:
        All updates go through a threading.Lock so a single instance can be
        shared by dispatchers running on different event loops.

    Example:
        >>> metrics = DispatchMetrics()
        >>> metrics.record("GET users", OUTCOME_SUCCESS)
        >>> metrics.record("GET users", OUTCOME_RATE_LIMITED)
        >>> metrics.get_success_rate()
        0.5
    """

    total_requests: int = 0
    total_duration: float = 0.0

    _outcomes: TallyCounter[str] = field(default_factory=TallyCounter, repr=False)
    _per_endpoint: dict[str, TallyCounter[str]] = field(default_factory=dict, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def record(self, endpoint: str, outcome: str, duration: float | None = None) -> None:
        """
        Record the outcome of one dispatch.

        Args:
            endpoint: Categorical endpoint label (e.g. "GET users")
            outcome: One of the OUTCOME_* constants
            duration: Wall time of the call in seconds, if it reached the transport
        """
        with self._lock:
            self.total_requests += 1
            if duration is not None:
                self.total_duration += duration
            self._outcomes[outcome] += 1
            self._per_endpoint.setdefault(endpoint, TallyCounter())[outcome] += 1

    def count(self, outcome: str, endpoint: str | None = None) -> int:
        with self._lock:
            if endpoint is None:
                return self._outcomes[outcome]
            return self._per_endpoint.get(endpoint, TallyCounter())[outcome]

    def get_success_rate(self) -> float:
        """
        Share of dispatches that succeeded.

        Returns 1.0 if nothing has been recorded yet (optimistic default).
        """
        with self._lock:
            if self.total_requests == 0:
                return 1.0
            return self._outcomes[OUTCOME_SUCCESS] / self.total_requests

    def get_stats(self) -> dict[str, Any]:
        """Return metrics as a dictionary for JSON serialization."""
        with self._lock:
            average = (
                self.total_duration / self.total_requests if self.total_requests else 0.0
            )
            return {
                "total_requests": self.total_requests,
                "average_duration": average,
                "outcomes": dict(self._outcomes),
                "per_endpoint": {
                    endpoint: dict(counts)
                    for endpoint, counts in self._per_endpoint.items()
                },
            }

    def reset(self) -> None:
        """Reset all metrics to zero."""
        with self._lock:
            self.total_requests = 0
            self.total_duration = 0.0
            self._outcomes.clear()
            self._per_endpoint.clear()


class PrometheusDispatchMetrics:
    """
    Prometheus metrics for Helix dispatches.

    Metrics:
        - twitch_helix_requests_total: Counter of dispatches by endpoint and outcome
        - twitch_helix_request_duration_seconds: Histogram of round-trip durations
        - twitch_helix_rate_limit_remaining: Last seen Ratelimit-Remaining value
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """
        Initialize Prometheus dispatch metrics.

        Args:
            registry: Optional CollectorRegistry. If None, uses the default registry.
        """
        kwargs: dict[str, Any] = {}
        if registry is not None:
            kwargs["registry"] = registry

        self.requests_total = Counter(
            "twitch_helix_requests_total",
            "Total number of Helix dispatches",
            ["endpoint", "outcome"],
            **kwargs,
        )
        self.request_duration_seconds = Histogram(
            "twitch_helix_request_duration_seconds",
            "Round-trip duration of Helix dispatches",
            ["endpoint"],
            buckets=[0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10, 30],
            **kwargs,
        )
        self.rate_limit_remaining = Gauge(
            "twitch_helix_rate_limit_remaining",
            "Ratelimit-Remaining reported by the most recent Helix response",
            **kwargs,
        )

        logger.info("Prometheus dispatch metrics initialized")

    def observe(self, endpoint: str, outcome: str, duration: float | None = None) -> None:
        self.requests_total.labels(endpoint=endpoint, outcome=outcome).inc()
        if duration is not None:
            self.request_duration_seconds.labels(endpoint=endpoint).observe(duration)

    def observe_rate_limit(self, remaining: int) -> None:
        self.rate_limit_remaining.set(remaining)


# Module-level singleton for the default registry
_prometheus_dispatch_metrics: PrometheusDispatchMetrics | None = None
_prometheus_lock = threading.Lock()


def get_prometheus_dispatch_metrics() -> PrometheusDispatchMetrics:
    """
    Get or create the Prometheus dispatch metrics singleton.

    Registering the same metric names twice in the default registry raises,
    so every dispatcher shares one instance (double-checked locking).
    """
    global _prometheus_dispatch_metrics

    if _prometheus_dispatch_metrics is None:
        with _prometheus_lock:
            if _prometheus_dispatch_metrics is None:
                _prometheus_dispatch_metrics = PrometheusDispatchMetrics()

    return _prometheus_dispatch_metrics


def reset_prometheus_dispatch_metrics() -> None:
    """Reset the Prometheus dispatch metrics singleton (mainly for testing)."""
    global _prometheus_dispatch_metrics
    _prometheus_dispatch_metrics = None


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
