"""Access-log middleware — one log line per state-changing request.

Domain audit rows (who changed which vendor) are written by the services
inside the request transaction; this middleware only records the HTTP side.
"""


import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

# Methods that mutate state
_WRITE_METHODS = {"POST", "PUT", "PATCH", "DELETE"}

access_logger = logging.getLogger("vendor_portal.access")


class AuditMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status, duration and client IP of every write."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = round((time.monotonic() - start) * 1000)

        if request.method in _WRITE_METHODS:
            level = logging.WARNING if response.status_code >= 500 else logging.INFO
            access_logger.log(
                level,
                "%s %s -> %d (%dms) ip=%s",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                request.client.host if request.client else "-",
            )

        return response
