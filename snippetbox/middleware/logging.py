"""
Snippetbox: Access Log Middleware
==================================

What:  One line on "snippetbox.access" per Snippetbox request.
How:   Sits just inside RequestIDMiddleware, so the ID is already bound,
       and outside path cleaning and the 500 trap, so redirects and crashes
       are logged with the status the client actually received.
       SNIPPETBOX_ACCESS_LOG=false silences it without touching other logs.

Line format:
    GET /snippet/view 200 0.4ms [3f2a9c1e] from 127.0.0.1

Levels:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Request bodies and headers are never logged.
"""

import logging
import time
from typing import Any, Dict

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from snippetbox.config import settings
from snippetbox.middleware.request_id import request_id_var

logger = logging.getLogger("snippetbox.access")


def level_for_status(status: int) -> int:
    """Map an HTTP status code to the level its access line is logged at."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def access_fields(request: Request, status: int, duration_ms: float) -> Dict[str, Any]:
    """Structured fields attached to an access record."""
    return {
        "request_id": request_id_var.get(""),
        "method": request.method,
        "path": request.url.path,
        "status": status,
        "duration_ms": round(duration_ms, 2),
        "client_ip": request.client.host if request.client else "unknown",
    }


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Writes the access line once the response is ready."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not settings.access_log:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        fields = access_fields(
            request, response.status_code, (time.perf_counter() - started) * 1000
        )

        logger.log(
            level_for_status(fields["status"]),
            "%s %s %d %.1fms [%s] from %s",
            fields["method"],
            fields["path"],
            fields["status"],
            fields["duration_ms"],
            fields["request_id"],
            fields["client_ip"],
            extra=fields,
        )
        return response
