"""
Recordbook — Request ID & Access Log Middleware
================================================

What:  Tags every request with an ID and writes one access line per request
       describing what happened to which record.
How:   The ID is taken from the client's `X-Request-ID` header or generated,
       stored in a ContextVar, stamped onto every log record by
       RequestIDFilter, and echoed back in the response header.
       The access line names the record action (the first path segment,
       `index` for anything else), the slug the route resolved, the status,
       the redirect target of 302s and the elapsed time.

Example access lines:
    GET /show/hello-world show slug=hello-world 200 1.8ms
    POST /create/ create 302 -> /show/hello-world 4.2ms
    GET /show/nope show slug=nope 500 0.9ms
"""

import logging
import time
import uuid
from contextvars import ContextVar

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("recordbook.access")

REQUEST_ID_HEADER = "X-Request-ID"

# Visible to every coroutine serving the current request
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

RECORD_ACTIONS = {"new", "create", "save", "show", "edit", "delete"}

# Polled by monitors; logging them drowns out record traffic
QUIET_PATHS = {"/health"}


class RequestIDFilter(logging.Filter):
    """Adds `request_id` to every log record ('-' outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True


def record_action(path: str) -> str:
    """Name the record action a path maps to; unknown paths show the index."""
    segment = path.lstrip("/").split("/", 1)[0]
    return segment if segment in RECORD_ACTIONS else "index"


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Assigns the request ID and logs the outcome of every record request."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        request_id_var.set(request_id)
        request.state.request_id = request_id

        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id

        path = request.url.path
        if path not in QUIET_PATHS:
            slug = getattr(request.state, "slug", "")
            location = response.headers.get("location")
            # Every failure is a 500, so the status alone sets the level
            level = logging.ERROR if response.status_code >= 500 else logging.INFO
            logger.log(
                level,
                "%s %s %s%s %d%s %.1fms",
                request.method,
                path,
                record_action(path),
                f" slug={slug}" if slug else "",
                response.status_code,
                f" -> {location}" if location else "",
                elapsed_ms,
            )

        return response
