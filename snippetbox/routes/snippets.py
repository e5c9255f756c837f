"""
Snippetbox: Snippet Route Handlers
===================================

What:  Handles /snippet/view (show one snippet) and /snippet/new (create).
How:   Reads the request, delegates to SnippetService, returns plain text.
       Failures are raised as application exceptions and rendered by the
       global handlers in main.py.

Routes:
    ANY  /snippet/view?id=<n>  → 200 "Display snippet #<n>" | 404
    POST /snippet/new          → 200 "Create a new snippet ..."
    ANY  /snippet/new (other)  → 405, Allow: POST

Both routes are registered without a method filter. The router never
answers for a method on these paths; the handlers decide.
"""

import logging

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.routing import Route

from snippetbox.exceptions import MethodNotAllowedError
from snippetbox.services.snippet_service import parse_snippet_id, snippet_service

logger = logging.getLogger(__name__)


async def snippet_view(request: Request) -> PlainTextResponse:
    """
    Display the snippet named by the `id` query parameter.

    The first `id` value wins when the parameter is repeated.

    Raises:
        NotFoundError: `id` is absent, malformed, or negative.
    """
    values = request.query_params.getlist("id")
    snippet_id = parse_snippet_id(values[0] if values else None)
    return PlainTextResponse(snippet_service.describe(snippet_id))


async def snippet_create(request: Request) -> PlainTextResponse:
    """
    Acknowledge a snippet creation request.

    Raises:
        MethodNotAllowedError: The request method is not POST, whatever it is.
    """
    if request.method != "POST":
        raise MethodNotAllowedError(method=request.method, allowed=("POST",))

    logger.info("Snippet creation requested")
    return PlainTextResponse(snippet_service.create())


routes = [
    Route("/snippet/view", snippet_view, name="snippet_view"),
    Route("/snippet/new", snippet_create, name="snippet_create"),
]
