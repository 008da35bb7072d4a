"""Request logging middleware — one log line per request with status and duration."""


import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status code and duration of every request.

    Client errors are logged at WARNING, everything else at INFO. Unhandled
    exceptions are logged by the exception handlers, not here.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = round((time.monotonic() - start) * 1000)

        level = logging.WARNING if 400 <= response.status_code < 500 else logging.INFO
        logger.log(
            level,
            "%s %s → %s (%dms)",
            request.method, request.url.path, response.status_code, duration_ms,
        )
        return response
