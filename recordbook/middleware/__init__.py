# Middleware package init
"""
Recordbook — Middleware Package
================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID + Access Log] → [GZip] → Route Handler

    1. The access log middleware assigns the request ID first, so every
       later log line carries it, then logs the final status and timing
    2. GZip compresses rendered pages above the configured size
"""
