"""
Prometheus Metrics for the team-chat backend.

DEPENDENCY:
    pip install prometheus-client

DATA FLOW:
    This file                  presentation/api/metrics.py         Observability Stack
    ─────────                  ────────────────────────────         ───────────────────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus ──► Grafana

METRIC TYPES:
    - Counter: Value only goes up (use case events, errors)
    - Histogram: Distribution (for percentiles like P95, e.g., latency)
"""

from prometheus_client import (
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10],  # in seconds
)

USECASE_EVENTS_TOTAL = Counter(
    "teamchat_usecase_events_total",
    "Total number of completed use case events by name",
    ["event"],
)

ERRORS_TOTAL = Counter(
    "teamchat_errors_total",
    "Total number of unexpected errors by type",
    ["error_type"],
)


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Call to record request latency. Integration point: fastapi_app.MetricsMiddleware"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def increment_usecase_event(event: str):
    """Integration point: observability/telemetry.py PrometheusObservability.record_event"""
    USECASE_EVENTS_TOTAL.labels(event=event).inc()


def increment_error(error_type: str):
    """
    Call to record an unexpected error.

    Args:
        error_type: Exception class name (e.g., "GoogleAPICallError")
    """
    ERRORS_TOTAL.labels(error_type=error_type).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Called by: presentation/api/metrics.py

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "observe_request_latency",
    "increment_usecase_event",
    "increment_error",
    "get_metrics_content",
]
