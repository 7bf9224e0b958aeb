"""
Distributed Tracing
Thin wrapper over the OpenTelemetry API
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from opentelemetry import trace
from opentelemetry.trace import Span

from shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)


class TracerManager:
    """
    Manages distributed tracing spans.

    Spans go through the globally registered OpenTelemetry tracer provider.
    Without an SDK provider installed every span is a no-op, so callers can
    trace unconditionally.

    Attributes:
        enabled: Whether tracing is enabled
        service_name: Name of the service (instrumentation scope)
    """

    def __init__(self, service_name: str = "clinic-service", enabled: bool = True) -> None:
        self.service_name = service_name
        self.enabled = enabled
        self._tracer = trace.get_tracer(service_name)

        if enabled:
            logger.info("Tracer initialized", service_name=service_name)

    @contextmanager
    def span(self, name: str, **attributes: Any) -> Iterator[Span]:
        """
        Open a span for the duration of the block.

        Exceptions raised inside the block are recorded on the span and
        re-raised.

        Usage:
            with get_tracer().span("AppointmentService.book", doctor_id=doctor_id):
                ...
        """
        if not self.enabled:
            yield trace.INVALID_SPAN
            return

        with self._tracer.start_as_current_span(
            name,
            attributes={k: str(v) for k, v in attributes.items() if v is not None},
            record_exception=True,
            set_status_on_exception=True,
        ) as current:
            yield current


# Global tracer instance (configured at startup)
_tracer: TracerManager | None = None


def get_tracer() -> TracerManager:
    """Get the global tracer instance."""
    global _tracer
    if _tracer is None:
        _tracer = TracerManager(enabled=False)
    return _tracer


def configure_tracer(service_name: str = "clinic-service", enabled: bool = True) -> None:
    """
    Configure the global tracer.

    Args:
        service_name: Service name for traces
        enabled: Whether to open real spans
    """
    global _tracer
    _tracer = TracerManager(service_name=service_name, enabled=enabled)
