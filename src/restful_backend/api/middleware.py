"""Request logging middleware."""

from __future__ import annotations

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency of every request."""

    def __init__(self, app) -> None:
        super().__init__(app)
        self.log = logging.getLogger("restful_backend.request")

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = int((time.perf_counter() - start) * 1000)
            self.log.info(
                "method=%s path=%s status=%s latency_ms=%s",
                request.method,
                request.url.path,
                status_code,
                elapsed_ms,
            )


__all__ = ["RequestLoggingMiddleware"]
