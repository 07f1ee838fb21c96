"""
Recordbook — Health Check Route
================================

What:  Health check endpoint for monitoring and container probes.
How:   Checks that the record store directory can be written (or created),
       and reports version and uptime.
Who:   Called by Docker health checks and monitoring systems.

Status levels:
    - healthy:   Store directory usable (HTTP 200)
    - unhealthy: Store directory not writable (HTTP 200, flagged in body)
"""

import logging
import os
import time

from fastapi import APIRouter, Depends

from recordbook import __version__
from recordbook.schemas.record import HealthResponse
from recordbook.services.record_store import RecordStore, get_record_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


def store_available(store: RecordStore) -> bool:
    """
    True when records can be written to the store.

    A store directory that does not exist yet counts as available as long as
    its parent is writable, since it is created on first use.
    """
    root = store.root
    if root.exists():
        return root.is_dir() and os.access(root, os.W_OK | os.X_OK)
    parent = root.parent
    return parent.is_dir() and os.access(parent, os.W_OK | os.X_OK)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Returns the health status of the service and its record store.",
)
async def health_check(
    store: RecordStore = Depends(get_record_store),
) -> HealthResponse:
    """Check whether the record store is usable."""
    store_status = "available"
    overall = "healthy"

    try:
        available = store_available(store)
    except OSError as e:
        logger.warning("Health check: record store unreachable: %s", str(e))
        available = False

    if not available:
        store_status = "unavailable"
        overall = "unhealthy"
        logger.warning("Health check: record store %s is not writable", store.root)

    return HealthResponse(
        status=overall,
        version=__version__,
        store=store_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
