"""
Snippetbox: Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for the two ways a request can fail.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the plain-text error responses with the right status code.
Who:   Raised by route handlers and services; also produced by main.py when
       translating Starlette's own routing errors.
When:  During request processing. Both kinds are terminal for the request
       and need no retry or recovery.

Exception Hierarchy:
    SnippetboxError (base)
    ├── NotFoundError          → 404 Not Found
    └── MethodNotAllowedError  → 405 Method Not Allowed (+ Allow header)
"""

from typing import Any, Dict, Iterable, Optional


class SnippetboxError(Exception):
    """
    Base exception for all Snippetbox application errors.

    Attributes:
        message:  Short description of the failure (logged server-side)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(SnippetboxError):
    """
    Raised when a request names nothing the server can answer for.

    When:    Unknown path, or a known path whose sub-condition fails
             (e.g. /snippet/view with a missing or malformed id).
    HTTP:    404 Not Found

    A bad snippet id is reported as 404 rather than 400: the response does
    not reveal whether the id was syntactically wrong or simply unknown.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class MethodNotAllowedError(SnippetboxError):
    """
    Raised when a known path is requested with a verb it does not accept.

    HTTP:    405 Method Not Allowed

    The response advertises the permitted verbs in an `Allow` header,
    rendered from `allowed` in the order given.
    """

    def __init__(
        self,
        method: str,
        allowed: Iterable[str] = ("POST",),
        context: Optional[Dict[str, Any]] = None,
    ):
        self.method = method
        self.allowed = tuple(allowed)
        ctx = context or {}
        ctx["method"] = method
        ctx["allowed"] = list(self.allowed)
        super().__init__(
            message=f"Method {method} is not allowed; use {self.allow_header}",
            context=ctx,
        )

    @property
    def allow_header(self) -> str:
        """Value for the `Allow` response header."""
        return ", ".join(self.allowed)
