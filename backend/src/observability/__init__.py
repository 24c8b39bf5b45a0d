"""Observability package for the team-chat backend."""

from src.observability.metrics import (
    observe_request_latency,
    increment_usecase_event,
    increment_error,
    get_metrics_content,
)
from src.observability.telemetry import PrometheusObservability

__all__ = [
    "observe_request_latency",
    "increment_usecase_event",
    "increment_error",
    "get_metrics_content",
    "PrometheusObservability",
]
