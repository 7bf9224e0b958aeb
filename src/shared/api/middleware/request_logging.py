"""
Request Logging Middleware
Logs request/response details for observability
"""
from __future__ import annotations

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to log request and response details.

    Logs:
    - Request method, path, client IP
    - Response status code, duration
    - Correlation ID if present
    """

    def __init__(self, app, excluded_paths: tuple[str, ...] = ("/health",)) -> None:
        super().__init__(app)
        self.excluded_paths = excluded_paths

    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        """Process request and log details"""
        if request.url.path in self.excluded_paths:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else None
        correlation_id = getattr(request.state, "request_id", None)

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"{request.method} {request.url.path} - ERROR",
                method=request.method,
                path=request.url.path,
                error=str(e),
                duration_ms=round(duration_ms, 2),
                client_ip=client_ip,
                correlation_id=correlation_id,
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            f"{request.method} {request.url.path} - {response.status_code}",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
            client_ip=client_ip,
            correlation_id=correlation_id,
        )
        return response
