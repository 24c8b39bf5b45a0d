"""
Observability Port - Where use cases report events and unexpected errors.
Implementation: src/observability/telemetry.py
"""

from abc import ABC, abstractmethod


class ObservabilityPort(ABC):
    @abstractmethod
    def record_event(self, name: str, **attributes) -> None: ...

    @abstractmethod
    def capture_error(self, error: BaseException, **context) -> None: ...


class NullObservability(ObservabilityPort):
    """Default port that drops everything."""

    def record_event(self, name: str, **attributes) -> None:
        pass

    def capture_error(self, error: BaseException, **context) -> None:
        pass
