# Routes package init
"""
Snippetbox: Routes Package
===========================

What:  HTTP route handlers.

Route Inventory:
    - home.py:      ANY  /               (greeting)
    - snippets.py:  ANY  /snippet/view   (display snippet by id)
                    POST /snippet/new    (create snippet)

Matching is exact: "/snippet/view/" is not "/snippet/view", and any path not
listed above is answered with 404 by the router itself.

Each module exposes a `routes` list of Starlette `Route` objects. None of
them carries a method filter: "any method" includes extension methods such
as PROPFIND, and only the handlers turn a method away.

Routes stay thin: read the request, call the service, return text.
"""
