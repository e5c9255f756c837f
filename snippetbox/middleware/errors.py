"""
Snippetbox: Unexpected Error Middleware
========================================

What:  Turns any exception a handler did not expect into a plain 500.
How:   Innermost middleware, written as a plain ASGI app. Starlette's
       ExceptionMiddleware has already rendered NotFoundError and
       MethodNotAllowedError, so only truly unexpected errors arrive here.
       The exception stops here: the layers above see an ordinary response.
When:  Inside RequestIDMiddleware and RequestLoggingMiddleware, so a 500
       still carries X-Request-ID and still gets its ERROR access line.

The traceback is logged server-side; the client only sees
"Internal Server Error". If the handler had already started its response
there is nothing left to replace, and the exception is re-raised.
"""

import logging

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from snippetbox.middleware.request_id import request_id_var
from snippetbox.responses import plain_text_error

logger = logging.getLogger(__name__)


class UnexpectedErrorMiddleware:
    """Catch-all for exceptions escaping the route handlers."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_tracking(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_tracking)
        except Exception as exc:
            logger.error(
                "[%s] Unexpected error on %s %s: %s",
                request_id_var.get(""),
                scope.get("method", ""),
                scope.get("path", ""),
                exc,
                exc_info=True,
            )
            if response_started:
                raise
            response = plain_text_error(500, "Internal Server Error")
            await response(scope, receive, send)
