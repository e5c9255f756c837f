"""
Snippetbox: FastAPI Application Factory
========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Served by snippetbox.server (python -m snippetbox), or directly by
       uvicorn (uvicorn snippetbox.main:app).
When:  Once at server startup; the returned app handles all requests.

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware Chain:                                       │
    │  ┌────────────┐ ┌─────────┐ ┌────────────┐ ┌──────────┐  │
    │  │ Request ID │→│ Logging │→│ Clean Path │→│ 500 trap │  │
    │  └────────────┘ └─────────┘ └────────────┘ └──────────┘  │
    │                                                          │
    │  Routes (no method filter):                              │
    │  ┌──────────────┐ ┌────────────────┐ ┌────────────────┐  │
    │  │ /            │ │ /snippet/view  │ │ /snippet/new   │  │
    │  └──────────────┘ └────────────────┘ └────────────────┘  │
    │                                                          │
    │  Exception Handlers:                                     │
    │  ┌───────────────────────────────────────────────┐       │
    │  │ NotFound→404 │ MethodNotAllowed→405 + Allow   │       │
    │  └───────────────────────────────────────────────┘       │
    └──────────────────────────────────────────────────────────┘

The documentation routes FastAPI normally adds (/docs, /redoc,
/openapi.json) are disabled: the routing table holds exactly three routes.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from snippetbox import __version__
from snippetbox.config import settings
from snippetbox.exceptions import MethodNotAllowedError, NotFoundError
from snippetbox.middleware.clean_path import CleanPathMiddleware
from snippetbox.middleware.errors import UnexpectedErrorMiddleware
from snippetbox.middleware.logging import RequestLoggingMiddleware
from snippetbox.middleware.request_id import RequestIDMiddleware, request_id_var
from snippetbox.responses import plain_text_error
from snippetbox.routes import home, snippets

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s

    Safe to call more than once; each call replaces the previous handlers.
    """
    log_format = (
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Access lines come from RequestLoggingMiddleware instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and announce readiness.
    Shutdown: log it. There are no resources to release.
    """
    setup_logging()
    logger.info("Snippetbox %s starting up...", __version__)

    yield

    logger.info("Snippetbox shutting down...")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler map:
        NotFoundError             → 404 "404 page not found"
        MethodNotAllowedError     → 405 "Method Not Allowed" + Allow
        Starlette HTTPException   → 404s from the router become NotFoundError

    Anything else is answered with a 500 by UnexpectedErrorMiddleware.
    Internal details (context dicts, tracebacks) are logged, never returned.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        """Nothing here answers the request."""
        rid = request_id_var.get("")
        logger.debug("[%s] Not found: %s | Context: %s", rid, exc.message, exc.context)
        return plain_text_error(404, "404 page not found")

    @app.exception_handler(MethodNotAllowedError)
    async def handle_method_not_allowed(request: Request, exc: MethodNotAllowedError):
        """Known path, wrong verb. Advertise the allowed ones."""
        rid = request_id_var.get("")
        logger.debug("[%s] %s", rid, exc.message)
        return plain_text_error(
            405,
            "Method Not Allowed",
            headers={"Allow": exc.allow_header},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """
        The router raises 404 itself when no route matches the path; render
        it exactly like an application NotFoundError.
        """
        if exc.status_code == 404:
            return await handle_not_found(
                request, NotFoundError(resource="path", resource_id=request.url.path)
            )
        return plain_text_error(exc.status_code, str(exc.detail), headers=exc.headers)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Snippetbox",
        description="Snippetbox placeholder web server: greeting, snippet view and create.",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        # "/snippet/view/" must stay a 404, not turn into a redirect
        redirect_slashes=False,
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CleanPath → UnexpectedError → router
    app.add_middleware(UnexpectedErrorMiddleware)
    app.add_middleware(CleanPathMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    # Plain Starlette routes: no method filter on any of the three paths
    app.router.routes.extend(home.routes)
    app.router.routes.extend(snippets.routes)

    return app


# Module-level instance: `snippetbox.main:app` for uvicorn and the runner
app = create_app()
