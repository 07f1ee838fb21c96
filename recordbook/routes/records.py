"""
Recordbook — Record Route Handlers
===================================

What:  The HTML pages and form targets of the application.
How:   Each handler extracts what it needs from the request, calls the record
       store, then renders a view or redirects.

Route Inventory:
    /                 → list all records, render index
    /<anything else>  → same as /
    /new/             → render the empty creation form
    /create/, /save/  → save the submitted form, redirect to /show/<slug>
    /show/<slug>      → render one record
    /edit/<slug>      → render the prefilled edit form
    /delete/<slug>    → delete, redirect to /

Every route is a prefix route that answers any HTTP method, and / also
catches every path the other routes leave unmatched. The slug is not a
typed path parameter: it is pulled from the full request path by
`extract_slug`, and anything that does not look like `/<verb>/<slug>` yields
an empty slug that the store rejects.

Errors are only caught here to add a prefix. The store and renderer raise
RecordbookError subclasses and the global handler in main.py turns them into
plain-text 500 responses, so a failed write never redirects.
"""

import logging
import re

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from recordbook.exceptions import RecordbookError, TemplateError
from recordbook.schemas.record import Record
from recordbook.services.record_store import RecordStore, get_record_store
from recordbook.services.renderer import TemplateRenderer, get_renderer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Records"])

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

# /<verb>/<slug> where the slug is letters, digits and hyphens only
VALID_PATH = re.compile(r"/(edit|save|show|delete)/([a-zA-Z0-9\-]+)")


def extract_slug(request: Request) -> str:
    """
    Pull the slug out of the request path.

    Returns an empty string (and logs the miss) when the path does not match
    VALID_PATH; downstream store calls reject the empty slug.
    """
    path = request.url.path
    logger.debug("Extracting slug from %s", path)
    match = VALID_PATH.fullmatch(path)
    if match is None:
        logger.warning("No valid slug in path %s", path)
        return ""
    slug = match.group(2)
    logger.debug("slug is %s", slug)
    # picked up by the access log
    request.state.slug = slug
    return slug


@router.api_route("/", methods=ALL_METHODS, include_in_schema=False)
async def index(
    store: RecordStore = Depends(get_record_store),
    renderer: TemplateRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """
    List every record.

    Also registered as the catch-all route, so any path no other route
    claims shows the index instead of a 404.
    """
    try:
        records = await store.list_all()
    except RecordbookError as exc:
        raise exc.add_prefix("unable to load all records")
    try:
        return renderer.response("index", records=records)
    except TemplateError as exc:
        if exc.phase == "load":
            raise exc.add_prefix("unable to parse file")
        raise exc.add_prefix("unable to render template")


@router.api_route("/new/{rest:path}", methods=ALL_METHODS, include_in_schema=False)
async def new_record(
    renderer: TemplateRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """Empty creation form."""
    return renderer.response("new")


async def _save_form(title: str, content: str, store: RecordStore) -> RedirectResponse:
    """Store a record built from form fields and redirect to its page."""
    record = Record(title=title, content=content)
    logger.info("Saving record titled %r (%d chars)", title, len(content))
    slug = await store.save(record)
    return RedirectResponse(url=f"/show/{slug}", status_code=302)


@router.api_route("/create/{rest:path}", methods=ALL_METHODS, include_in_schema=False)
async def create_record(
    title: str = Form(""),
    content: str = Form(""),
    store: RecordStore = Depends(get_record_store),
) -> RedirectResponse:
    """Target of the creation form."""
    return await _save_form(title, content, store)


@router.api_route("/save/{rest:path}", methods=ALL_METHODS, include_in_schema=False)
async def save_record(
    title: str = Form(""),
    content: str = Form(""),
    store: RecordStore = Depends(get_record_store),
) -> RedirectResponse:
    """
    Target of the edit form.

    Behaves exactly like /create/: the slug in the path is ignored and the
    record is stored under the slug of the submitted title. Changing the
    title therefore writes a new file and leaves the old one in place.
    """
    return await _save_form(title, content, store)


@router.api_route("/show/{rest:path}", methods=ALL_METHODS, include_in_schema=False)
async def show_record(
    slug: str = Depends(extract_slug),
    store: RecordStore = Depends(get_record_store),
    renderer: TemplateRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """Render a single record."""
    try:
        record = await store.load(slug)
    except RecordbookError as exc:
        raise exc.add_prefix("did not find the desired record")
    return renderer.response("show", record=record)


@router.api_route("/edit/{rest:path}", methods=ALL_METHODS, include_in_schema=False)
async def edit_record(
    slug: str = Depends(extract_slug),
    store: RecordStore = Depends(get_record_store),
    renderer: TemplateRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """Render the edit form prefilled with the stored record."""
    record = await store.load(slug)
    return renderer.response("edit", record=record)


@router.api_route("/delete/{rest:path}", methods=ALL_METHODS, include_in_schema=False)
async def delete_record(
    slug: str = Depends(extract_slug),
    store: RecordStore = Depends(get_record_store),
) -> RedirectResponse:
    """Delete a record and go back to the index."""
    await store.delete(slug)
    return RedirectResponse(url="/", status_code=302)


# Registered last so it only sees paths every other route passed on
router.add_api_route("/{rest:path}", index, methods=ALL_METHODS, include_in_schema=False)
