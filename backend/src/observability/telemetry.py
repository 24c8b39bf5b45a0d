"""
PrometheusObservability - ObservabilityPort backed by the Prometheus counters.

Events become teamchat_usecase_events_total{event}; captured errors become
teamchat_errors_total{error_type} plus an ERROR log line carrying the context.
"""

import logging

from src.domain.ports.observability import ObservabilityPort
from src.observability.metrics import increment_error, increment_usecase_event

logger = logging.getLogger(__name__)


class PrometheusObservability(ObservabilityPort):
    def record_event(self, name: str, **attributes) -> None:
        increment_usecase_event(name)
        logger.debug("event=%s attributes=%s", name, attributes)

    def capture_error(self, error: BaseException, **context) -> None:
        increment_error(type(error).__name__)
        logger.error(
            "Captured %s: %s (context=%s)", type(error).__name__, error, context
        )
