"""
Shared API Layer
HTTP middleware
"""
from shared.api.middleware import CorrelationIdMiddleware, RequestLoggingMiddleware

__all__ = [
    "CorrelationIdMiddleware",
    "RequestLoggingMiddleware",
]
