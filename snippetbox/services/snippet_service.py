"""
Snippetbox: Snippet Service
============================

What:  The request-independent logic behind the snippet routes.
How:   Pure functions over strings; no I/O, no state.
Who:   Called by the route handlers in snippetbox.routes.

Snippet id rules:
    - Optional sign, then ASCII decimal digits ("7", "+7", "007", "-0")
    - Must fit in a signed 64-bit integer
    - Must be non-negative once parsed
    Anything else is reported as NotFoundError, never as a 400.
"""

import logging
import re
from typing import Optional

from snippetbox.exceptions import NotFoundError

logger = logging.getLogger(__name__)

GREETING = "Hello from Snippetbox"

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# Largest value of a signed 64-bit integer
MAX_SNIPPET_ID = 2**63 - 1
MAX_SNIPPET_ID_DIGITS = len(str(MAX_SNIPPET_ID))


def parse_snippet_id(raw: Optional[str]) -> int:
    """
    Parse the raw `id` query value into a snippet id.

    Args:
        raw: The first `id` value from the query string, or None if absent.

    Returns:
        The parsed, non-negative snippet id.

    Raises:
        NotFoundError: The value is absent, malformed, out of range, or negative.
    """
    # int() alone would also accept whitespace, underscores and non-ASCII digits
    if raw is None or not _ID_PATTERN.fullmatch(raw):
        raise NotFoundError(resource="snippet", context={"raw_id": raw})

    # Range check on the digit count first: int() refuses very long strings
    significant = raw.lstrip("+-").lstrip("0")
    if len(significant) > MAX_SNIPPET_ID_DIGITS:
        raise NotFoundError(resource="snippet", context={"raw_id_length": len(raw)})

    value = int(significant or "0")
    if raw.startswith("-") and value:
        value = -value
    if value < 0 or value > MAX_SNIPPET_ID:
        raise NotFoundError(resource="snippet", resource_id=raw)
    return value


class SnippetService:
    """
    Builds the response text for the snippet routes.

    Stateless: one shared instance serves every request.
    """

    def describe(self, snippet_id: int) -> str:
        """Text shown by the view route for a parsed snippet id."""
        logger.debug("Displaying snippet %d", snippet_id)
        return f"Display snippet #{snippet_id}"

    def create(self) -> str:
        """Acknowledgement returned by the create route."""
        return "Create a new snippet ..."


# Singleton instance used by the routes
snippet_service = SnippetService()
