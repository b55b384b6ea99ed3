"""Prometheus metrics for the Purchase Approval service.

Metrics are organized into two categories:

Business Metrics (for Product/Finance):
- purchase_decision_total: Decisions by outcome and reason
- purchase_offer_amount: Approved offer amounts
- purchase_offer_period_months: Approved offer periods

Technical Metrics (for Engineering/SRE):
- purchase_decision_latency_seconds: Decision latency
- profile_lookup_total: Profile store lookups by result
- profile_lookup_latency_seconds: Profile store latency
- http_requests_total: HTTP requests by endpoint/status
- http_request_latency_seconds: HTTP latency by endpoint
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST

from src.core.config import settings


# =============================================================================
# Business Metrics (Product/Finance dashboards)
# =============================================================================

decision_total = Counter(
    "purchase_decision_total",
    "Total number of purchase decisions made",
    ["outcome", "reason"],  # outcome: approved, denied
)

offer_amount = Histogram(
    "purchase_offer_amount",
    "Approved offer amount in currency units",
    buckets=[200, 500, 1000, 1500, 2000, 2500, 3000, 4000, 5000],
)

offer_period = Histogram(
    "purchase_offer_period_months",
    "Approved offer period in months",
    buckets=[6, 9, 12, 15, 18, 21, 24],
)


# =============================================================================
# Technical Metrics (Engineering/SRE dashboards)
# =============================================================================

decision_latency = Histogram(
    "purchase_decision_latency_seconds",
    "Decision request latency in seconds",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)

profile_lookup_total = Counter(
    "profile_lookup_total",
    "Total number of customer profile lookups",
    ["result"],  # found, not_found, error
)

profile_lookup_latency = Histogram(
    "profile_lookup_latency_seconds",
    "Customer profile lookup latency in seconds",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0],
)

http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_decision(
    approved: bool,
    reason: str,
    amount: float | None = None,
    period: int | None = None,
) -> None:
    """Record a decision in metrics."""
    if not settings.metrics_enabled:
        return

    outcome = "approved" if approved else "denied"
    decision_total.labels(outcome=outcome, reason=reason).inc()

    if approved and amount is not None and period is not None:
        offer_amount.observe(amount)
        offer_period.observe(period)


@contextmanager
def track_decision_latency() -> Generator[None, None, None]:
    """Context manager to track decision latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        if settings.metrics_enabled:
            decision_latency.observe(time.perf_counter() - start)


@contextmanager
def track_profile_lookup_latency() -> Generator[None, None, None]:
    """Context manager to track profile lookup latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        if settings.metrics_enabled:
            profile_lookup_latency.observe(time.perf_counter() - start)


def record_profile_lookup(result: str) -> None:
    """Record a profile lookup by result (found, not_found, error)."""
    if not settings.metrics_enabled:
        return

    profile_lookup_total.labels(result=result).inc()


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """
    Record an HTTP request.

    `endpoint` is the matched route template (e.g. "/v1/evaluate-purchase")
    or "unmatched", never the raw URL path.
    """
    if not settings.metrics_enabled:
        return

    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
