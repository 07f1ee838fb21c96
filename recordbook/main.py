"""
Recordbook — FastAPI Application Factory
=========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (`uvicorn recordbook.main:app`) or by `run()`,
       the `recordbook` console script.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌─────────────────────┐ ┌──────────┐               │
    │  │ Req ID + access log │→│  GZip    │               │
    │  └─────────────────────┘ └──────────┘               │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────────────┐ ┌─────────────┐   │
    │  │ / new create save show edit  │ │ GET /health │   │
    │  │ delete  (HTML + redirects)   │ └─────────────┘   │
    │  └──────────────────────────────┘                   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐  │
    │  │ RecordbookError → 500 text │ Exception → 500 │  │
    │  └──────────────────────────────────────────────┘  │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import PlainTextResponse

from recordbook import __version__
from recordbook.config import settings
from recordbook.exceptions import RecordbookError
from recordbook.middleware.access import AccessLogMiddleware, RequestIDFilter
from recordbook.routes import health, records
from recordbook.services.record_store import record_store

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: 2024-01-15T12:00:00 [INFO] [3f2a9c1d] recordbook.access: ...
    The bracketed request ID is "-" for lines logged outside a request.
    Called once during startup, before anything else logs.
    """
    log_format = "%(asctime)s [%(levelname)s] [%(request_id)s] %(name)s: %(message)s"

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDFilter())

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[handler],
        force=True,
    )

    # recordbook.access already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and report where records and templates live.
    The store directory itself is created lazily by the record store.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("Recordbook %s starting up...", __version__)
    logger.info("Record store: %s", record_store.root)
    logger.info("Templates: %s", settings.templates_dir)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("Recordbook shutting down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    Every failure, whether caused by the client (unknown slug) or by the
    server (disk full, broken template), becomes HTTP 500 with the error
    text as a plain-text body. Nothing redirects on error, so the message
    always reaches the user.
    """

    @app.exception_handler(RecordbookError)
    async def handle_recordbook_error(request: Request, exc: RecordbookError):
        logger.error(
            "%s: %s | Context: %s",
            type(exc).__name__,
            exc.message,
            exc.context,
        )
        return PlainTextResponse(exc.message, status_code=500)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("Unexpected error: %s", str(exc), exc_info=True)
        return PlainTextResponse(str(exc) or type(exc).__name__, status_code=500)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Recordbook",
        description="Create, view, edit and delete short text records stored as files.",
        version=__version__,
        docs_url="/docs",
        redoc_url=None,
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # AccessLog (request ID) → GZip → routes
    app.add_middleware(GZipMiddleware, minimum_size=settings.gzip_minimum_size)
    app.add_middleware(AccessLogMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(records.router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    uvicorn.run(
        "recordbook.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
