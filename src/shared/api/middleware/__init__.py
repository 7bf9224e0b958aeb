"""
Shared API Middleware
Correlation ID and request logging
"""
from shared.api.middleware.correlation_id_middleware import CorrelationIdMiddleware
from shared.api.middleware.request_logging import RequestLoggingMiddleware

__all__ = [
    "CorrelationIdMiddleware",
    "RequestLoggingMiddleware",
]
