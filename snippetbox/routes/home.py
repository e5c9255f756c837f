"""
Snippetbox: Home Route Handler
===============================

What:  Handles "/" with a fixed greeting.
How:   Registered for the exact path "/" with no method filter, so every
       verb (extension methods included) gets the greeting.
       Other paths never reach it; the router answers them with 404.
"""

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.routing import Route

from snippetbox.services.snippet_service import GREETING


async def index(request: Request) -> PlainTextResponse:
    """Return the Snippetbox greeting."""
    return PlainTextResponse(GREETING)


routes = [
    Route("/", index, name="index"),
]
