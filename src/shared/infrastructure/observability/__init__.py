"""
Shared Observability Infrastructure
Logging and tracing
"""
from shared.infrastructure.observability.logger import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)
from shared.infrastructure.observability.tracer import configure_tracer, get_tracer

__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "configure_tracer",
    "get_tracer",
]
