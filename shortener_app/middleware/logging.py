"""Request logging middleware."""

import time
import logging
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log start, end and duration of every request. Never alters the response."""

    def __init__(self, app, logger: logging.Logger = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger(__name__)

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        self.logger.info("Request started: %s %s", method, path)

        # Reported when the handler raises; the exception itself still propagates
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            self.logger.info(
                "Request finished: %s %s - Status: %s - Duration: %.2fms",
                method, path, status_code, duration_ms
            )
