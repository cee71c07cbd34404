"""
Request logging middleware.
"""

import logging
import time
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

SLOW_REQUEST_MS = 500


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and processing time of every request.
    Requests slower than SLOW_REQUEST_MS are logged at WARNING.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.url.path == "/health":
            return await call_next(request)

        start_time = time.perf_counter()

        response = await call_next(request)

        process_time = (time.perf_counter() - start_time) * 1000
        response.headers["X-Process-Time"] = f"{process_time:.2f}ms"

        message = (
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"in {process_time:.2f}ms"
        )
        if process_time > SLOW_REQUEST_MS:
            logger.warning(f"Slow request: {message}")
        else:
            logger.info(message)

        return response
