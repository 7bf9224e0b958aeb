"""
Correlation ID Middleware
Adds a unique request ID for log correlation
"""
from __future__ import annotations

import time
from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from shared.infrastructure.observability.logger import bind_context, clear_context

REQUEST_ID_HEADER = "X-Request-ID"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add a correlation/trace ID to all requests.

    Reuses the caller's X-Request-ID header or generates one, stores it on
    `request.state.request_id` (picked up by error responses) and binds it to
    the logging context. Also reports the request duration in a header.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        correlation_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = correlation_id

        bind_context(
            trace_id=correlation_id,
            method=request.method,
            path=request.url.path,
        )

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
            duration_ms = int((time.perf_counter() - start_time) * 1000)

            response.headers[REQUEST_ID_HEADER] = correlation_id
            response.headers["X-Response-Time"] = f"{duration_ms}ms"
            return response
        finally:
            clear_context()
