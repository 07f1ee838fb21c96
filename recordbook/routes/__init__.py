# Routes package init
"""
Recordbook — Routes Package
============================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - records.py: /, /new/, /create/, /save/, /show/<slug>, /edit/<slug>,
                  /delete/<slug>   (HTML pages and form targets)
    - health.py:  GET /health      (service health check)

Routes stay thin: they pull data out of the request, call the record store,
and hand the result to the template renderer or redirect.
"""
