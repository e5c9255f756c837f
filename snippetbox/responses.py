"""Plain-text error responses shared by the exception handlers and middleware."""

from typing import Dict, Optional

from starlette.responses import PlainTextResponse


def plain_text_error(
    status_code: int,
    message: str,
    headers: Optional[Dict[str, str]] = None,
) -> PlainTextResponse:
    """
    Build a plain-text error response.

    The body is the message plus a newline; the content type is never
    sniffed by the client.
    """
    response_headers = {"X-Content-Type-Options": "nosniff"}
    if headers:
        response_headers.update(headers)
    return PlainTextResponse(
        content=message + "\n",
        status_code=status_code,
        headers=response_headers,
    )
