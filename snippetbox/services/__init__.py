# Services package init
"""
Snippetbox: Services Layer
===========================

What:  Business logic sitting behind the routes.
How:   Services take plain values and return plain values; routes translate
       between them and HTTP.

Service Inventory:
    - SnippetService: snippet id parsing and response text
"""
