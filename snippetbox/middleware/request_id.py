"""
Snippetbox: Request ID Middleware
==================================

What:  Tags every Snippetbox response with a short correlation ID.
How:   Outermost middleware. A well-formed X-Request-ID from the client is
       kept; anything else is replaced with eight hex characters.
       The ID lives in a ContextVar so the access log, the 500 trap and the
       handlers can all quote it.
When:  Wraps everything, so path-cleaning redirects, 404s, 405s and 500s
       carry the header just like greetings do.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on the same thread each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"

# Client IDs are echoed into headers and log lines
_CLIENT_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,64}")


def new_request_id() -> str:
    """Eight hex characters from a random UUID."""
    return uuid.uuid4().hex[:8]


def choose_request_id(supplied: Optional[str]) -> str:
    """Keep a client-supplied ID if it is short and plain, else mint one."""
    if supplied and _CLIENT_ID_PATTERN.fullmatch(supplied):
        return supplied
    return new_request_id()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Binds the request ID for the duration of one Snippetbox request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = choose_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id

        token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
