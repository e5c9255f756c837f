"""
Snippetbox: Path Cleaning Middleware
=====================================

What:  Redirects requests for unclean paths to their canonical form.
How:   Cleans the raw request path (collapses "//", resolves "." and "..",
       keeps a trailing slash). If the result differs, answers
       301 Moved Permanently with the cleaned path and the original query.
Who:   Applied to every request via Starlette middleware, before routing.

Examples:
    /snippet//view?id=1      → 301 Location: /snippet/view?id=1
    /snippet/../snippet/new  → 301 Location: /snippet/new
    /a/./b/                  → 301 Location: /a/b/
    /snippet/view            → passed through untouched

CONNECT requests carry an authority rather than a path and are never
redirected.
"""

import logging
import posixpath
from urllib.parse import quote

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response

logger = logging.getLogger(__name__)


def clean_path(path: str) -> str:
    """
    Return the canonical form of a URL path.

    - An empty path becomes "/"
    - A missing leading slash is added
    - Runs of slashes collapse to one; "." and ".." segments are resolved
    - ".." never climbs above the root
    - A trailing slash on the input is kept (except for the root itself)
    """
    if not path:
        return "/"
    if not path.startswith("/"):
        path = "/" + path

    cleaned = posixpath.normpath(path)
    # normpath keeps exactly two leading slashes (POSIX allows them to be special)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")

    if path.endswith("/") and cleaned != "/":
        cleaned += "/"
    return cleaned


# Sub-delims and ":"/"@" are legal in a path segment and stay literal
PATH_SAFE = "/:@!$&'()*+,;="


def redirect_location(path: str, query_string: bytes) -> str:
    """
    Build the Location for a cleaned path.

    The path arrives percent-decoded, so it is re-encoded: a decoded "?" or
    "#" must not turn into a query or fragment delimiter.
    """
    location = quote(path, safe=PATH_SAFE)
    if query_string:
        location += "?" + query_string.decode("latin-1")
    return location


class CleanPathMiddleware(BaseHTTPMiddleware):
    """Answers unclean request paths with a permanent redirect."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method == "CONNECT":
            return await call_next(request)

        path = request.scope["path"]
        cleaned = clean_path(path)
        if cleaned == path:
            return await call_next(request)

        location = redirect_location(cleaned, request.scope.get("query_string", b""))

        logger.debug("Redirecting unclean path %s to %s", path, location)
        return RedirectResponse(url=location, status_code=301)
