"""
Recordbook — Pydantic Schemas
==============================

What:  The Record model and the health check response.
Why:   One model defines both the template data contract and the on-disk JSON
       format, so the two cannot drift apart.

On-disk format:
    Record files use the keys "Title" and "Content":

        {"Title": "Hello World!", "Content": "body"}

    Python code uses `title` / `content`; the aliases only apply to
    serialization. Missing keys fall back to empty strings, matching how
    older files were read.
"""

from pydantic import BaseModel, Field

from recordbook.services.slug import slugify


class Record(BaseModel):
    """
    What:  A short text record (title + content).
    Who:   Stored by RecordStore, rendered by the index/show/edit views.

    Identity is derived: `slug` is computed from the title every time, so
    re-saving under a new title writes a new file and leaves the old one.
    """

    title: str = Field(default="", alias="Title", description="Record title")
    content: str = Field(default="", alias="Content", description="Record body text")

    model_config = {"populate_by_name": True}

    @property
    def slug(self) -> str:
        """Storage key derived from the title."""
        return slugify(self.title)


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and store status.
    Who:   Returned by GET /health.
    """

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    store: str = Field(description="Record store status: available, unavailable")
    uptime_seconds: float = Field(description="Seconds since service started")
