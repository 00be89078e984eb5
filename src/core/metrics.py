"""Prometheus metrics for the Loan Gateway service.

Business Metrics:
- loan_applications_total: Loan applications by outcome
- loan_extensions_total: Loan extensions by outcome
- loan_principal_issued_cents_total: Principal issued

Technical Metrics:
- loan_operation_latency_seconds: Service operation latency
- loan_http_requests_total: HTTP requests by endpoint/status
- loan_http_request_latency_seconds: HTTP latency by endpoint
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

loan_applications_total = Counter(
    "loan_applications_total",
    "Total number of loan applications",
    ["outcome"],  # issued, invalid
)

loan_extensions_total = Counter(
    "loan_extensions_total",
    "Total number of loan extension requests",
    ["outcome"],  # extended, invalid, not_found, conflict
)

principal_issued_cents = Counter(
    "loan_principal_issued_cents_total",
    "Total principal issued in cents",
)


# =============================================================================
# Technical Metrics
# =============================================================================

operation_latency = Histogram(
    "loan_operation_latency_seconds",
    "Loan operation latency in seconds",
    ["operation"],  # apply, extend
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

http_requests_total = Counter(
    "loan_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "loan_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_loan_issued(principal_cents: int) -> None:
    """Record a successfully issued loan."""
    loan_applications_total.labels(outcome="issued").inc()
    principal_issued_cents.inc(principal_cents)


def record_application_rejected(outcome: str) -> None:
    """Record a loan application that did not result in a loan."""
    loan_applications_total.labels(outcome=outcome).inc()


def record_extension(outcome: str) -> None:
    """Record a loan extension request by outcome."""
    loan_extensions_total.labels(outcome=outcome).inc()


@contextmanager
def track_operation_latency(operation: str) -> Generator[None, None, None]:
    """Context manager to track loan operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        operation_latency.labels(operation=operation).observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
