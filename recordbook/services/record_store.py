"""
Recordbook — Record Store
==========================

What:  Reads, writes, deletes and lists records, one JSON file per record.
Why:   The store directory is the single source of truth; there is no cache
       and no database.
How:   Async file I/O via aiofiles; each operation is a single filesystem call
       whose errors are translated into the application exception hierarchy.
Who:   Injected into the route handlers via `Depends(get_record_store)`.

Directory Structure:
    records/
    ├── hello-world.json     {"Title": "Hello World!", "Content": "body"}
    └── shopping-list.json   {"Title": "Shopping list", "Content": "..."}

Concurrency:
    Nothing is locked. Two saves of the same slug race and the last write
    wins; a listing that runs while a record is deleted can fail on the file
    that disappeared. This is acceptable for the single-user workload the
    application targets.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

import aiofiles
import aiofiles.os
from pydantic import ValidationError as PydanticValidationError

from recordbook.config import settings
from recordbook.exceptions import FileStorageError, NotFoundError, SerializationError
from recordbook.schemas.record import Record

logger = logging.getLogger(__name__)

RECORD_EXTENSION = ".json"

# Owner read/write only
RECORD_FILE_MODE = 0o600


def _owner_only_opener(path: str, flags: int) -> int:
    """Open `path` so that a newly created file gets RECORD_FILE_MODE."""
    return os.open(path, flags, RECORD_FILE_MODE)


class RecordStore:
    """
    File-per-record storage rooted at one directory.

    Operations:
        save(record)  → writes <slug>.json, returns the slug
        load(slug)    → Record
        delete(slug)  → removes <slug>.json
        list_all()    → every record in the directory, in filename order

    Error mapping:
        empty slug / missing file   → NotFoundError
        unparsable file content     → SerializationError
        any other OS-level failure  → FileStorageError
    """

    def __init__(self, store_root: Optional[str] = None):
        """
        Args:
            store_root: Override the default store directory (used in tests).
                        If None, uses settings.store_root.
        """
        self.root = Path(store_root or settings.store_root).resolve()

    def path_for(self, slug: str) -> Path:
        """Location of the file holding `slug`."""
        return self.root / f"{slug}{RECORD_EXTENSION}"

    async def save(self, record: Record) -> str:
        """
        Write `record` to `<slug>.json`, replacing any file with the same slug.

        The directory is created if it does not exist yet. New files are
        created with owner-only permissions.

        Returns:
            The slug the record was stored under.

        Raises:
            SerializationError if the record cannot be encoded.
            FileStorageError if the directory or file cannot be written.
        """
        slug = record.slug
        path = self.path_for(slug)

        try:
            payload = record.model_dump_json(by_alias=True)
        except ValueError as e:
            raise SerializationError(
                message=f"could not serialize record '{slug}': {e}",
                context={"slug": slug},
            )

        try:
            await aiofiles.os.makedirs(self.root, exist_ok=True)
            async with aiofiles.open(
                path, "w", encoding="utf-8", opener=_owner_only_opener
            ) as f:
                await f.write(payload)
        except OSError as e:
            logger.error("Failed to save record at %s: %s", path, str(e))
            raise FileStorageError(
                message=f"could not save record '{slug}': {e}",
                context={"path": str(path), "os_error": str(e)},
            )

        logger.info("Record saved: %s (%d bytes)", path.name, len(payload))
        return slug

    async def load(self, slug: str) -> Record:
        """
        Read and parse the record stored under `slug`.

        An empty slug is rejected before the filesystem is touched.

        Raises:
            NotFoundError if the slug is empty or no file exists for it.
            SerializationError if the file content is not a valid record.
            FileStorageError for any other read failure.
        """
        if not slug:
            raise NotFoundError()

        path = self.path_for(slug)
        try:
            async with aiofiles.open(path, "r", encoding="utf-8") as f:
                raw = await f.read()
        except FileNotFoundError:
            raise NotFoundError(slug, context={"path": str(path)})
        except UnicodeDecodeError as e:
            raise SerializationError(
                message=f"record '{slug}' is corrupt: {e}",
                context={"path": str(path)},
            )
        except OSError as e:
            raise FileStorageError(
                message=f"could not read record '{slug}': {e}",
                context={"path": str(path), "os_error": str(e)},
            )

        try:
            record = Record.model_validate_json(raw)
        except PydanticValidationError as e:
            detail = e.errors()[0]["msg"] if e.error_count() else str(e)
            raise SerializationError(
                message=f"record '{slug}' is corrupt: {detail}",
                context={"path": str(path), "errors": e.error_count()},
            )

        logger.debug("Record loaded: %s", path.name)
        return record

    async def delete(self, slug: str) -> None:
        """
        Remove the file stored under `slug`.

        Raises:
            NotFoundError if the slug is empty or no file exists for it.
            FileStorageError if the file cannot be removed.
        """
        if not slug:
            raise NotFoundError()

        path = self.path_for(slug)
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            raise NotFoundError(slug, context={"path": str(path)})
        except OSError as e:
            logger.error("Failed to delete record at %s: %s", path, str(e))
            raise FileStorageError(
                message=f"could not delete record '{slug}': {e}",
                context={"path": str(path), "os_error": str(e)},
            )

        logger.info("Record deleted: %s", path.name)

    async def list_all(self) -> List[Record]:
        """
        Load every record in the store directory.

        The directory is created on first use, so an empty or missing
        store yields an empty list. Every directory entry is loaded; the
        first entry that fails aborts the whole listing with its error.
        """
        try:
            await aiofiles.os.makedirs(self.root, exist_ok=True)
            names = sorted(await aiofiles.os.listdir(self.root))
        except OSError as e:
            logger.error("Failed to list records in %s: %s", self.root, str(e))
            raise FileStorageError(
                message=f"could not list records: {e}",
                context={"path": str(self.root), "os_error": str(e)},
            )

        records = []
        for name in names:
            slug = name[: -len(RECORD_EXTENSION)] if name.endswith(RECORD_EXTENSION) else name
            records.append(await self.load(slug))

        logger.debug("Listed %d records from %s", len(records), self.root)
        return records


# ── Singleton Instance ────────────────────────────────────────────────────
record_store = RecordStore()


def get_record_store() -> RecordStore:
    """FastAPI dependency returning the application's record store."""
    return record_store
