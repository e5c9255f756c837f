# Middleware package init
"""
Snippetbox: Middleware Package
===============================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [Clean Path] → [500 trap] → Router

    1. Request ID first: every later log line and every response,
       redirects and errors included, carries the correlation ID
    2. Logging: times and records the whole request, redirects included
    3. Clean Path: redirects unclean paths before the router sees them
    4. Unexpected errors: turns a crash into a plain 500 inside the chain,
       so the 500 still gets its ID and its access line

    Responses travel back through the same chain in reverse.
"""
