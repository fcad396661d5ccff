"""Request logging middleware — one line per request with status and duration."""


import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("stockroom.requests")

# Methods that mutate state
_WRITE_METHODS = {"POST", "PUT", "PATCH", "DELETE"}

class RequestLogMiddleware(BaseHTTPMiddleware):
    """Logs every request as ``METHOD path -> status (N ms)``.

    Writes are logged at INFO, reads at DEBUG, server errors at WARNING.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = round((time.monotonic() - start) * 1000)

        if response.status_code >= 500:
            level = logging.WARNING
        elif request.method in _WRITE_METHODS:
            level = logging.INFO
        else:
            level = logging.DEBUG
        logger.log(
            level,
            "%s %s -> %s (%sms)",
            request.method, request.url.path, response.status_code, duration_ms,
        )
        return response
