"""
Snippetbox: Package Initializer
================================

What: Marks the `snippetbox` directory as a Python package.
Who:  Used by uvicorn (`snippetbox.main:app`), pytest, and `python -m snippetbox`.

Architecture Note:

    ┌─────────────────────────────────────┐
    │    Middleware (clean path, IDs,     │  ← cross-cutting request concerns
    │    access log)                      │
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Snippet logic)    │  ← id parsing, response text
    └─────────────────────────────────────┘

    There is no persistence layer; every request is handled statelessly.
"""

__version__ = "1.0.0"
