"""
Recordbook — Custom Exception Hierarchy
========================================

What:  Defines application-specific exceptions for the record workflow.
How:   Each exception class carries a message and optional context dict.
       A global exception handler (registered in main.py) catches these and
       returns the message as a plain-text HTTP 500 response.
Who:   Raised by the record store, the slug extraction and the renderer.

Exception Hierarchy:
    RecordbookError (base)
    ├── NotFoundError        → empty slug, or no file for the slug
    ├── FileStorageError     → read/write/permission failures
    ├── SerializationError   → on-disk record cannot be parsed (or written)
    └── TemplateError        → missing/invalid view, or render failure

Every member of the hierarchy maps to the same status code. The client sees
the message text verbatim; the context dict is only logged.
"""

from typing import Any, Dict, Optional


class RecordbookError(Exception):
    """
    Base exception for all Recordbook application errors.

    Attributes:
        message:  Error description (returned as the response body)
        context:  Additional debug info (logged, not returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def add_prefix(self, prefix: str) -> "RecordbookError":
        """Prepend `prefix: ` to the message and return the same exception."""
        self.message = f"{prefix}: {self.message}"
        self.args = (self.message,)
        return self


class NotFoundError(RecordbookError):
    """
    Raised when a record cannot be located.

    When:    Empty slug on load/delete (rejected before any filesystem access),
             or no `<slug>.json` file in the store directory.
    """

    def __init__(
        self,
        slug: str = "",
        context: Optional[Dict[str, Any]] = None,
    ):
        message = "empty slug"
        if slug:
            message = f"record '{slug}' was not found"
        ctx = context or {}
        ctx["slug"] = slug
        super().__init__(message=message, context=ctx)
        self.slug = slug


class FileStorageError(RecordbookError):
    """
    Raised when file system operations fail.

    What:    Could not read, write, list, or delete a record file.
    When:    Disk full, permission denied, directory not writable, I/O error.
    """

    def __init__(
        self,
        message: str = "File storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class SerializationError(RecordbookError):
    """Raised when a record cannot be converted to or from its JSON file."""

    def __init__(
        self,
        message: str = "Record data is corrupt",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class TemplateError(RecordbookError):
    """
    Raised when a view cannot be produced.

    When:    The template file is missing, has a syntax error, or rendering
             fails because the data does not fit the template (undefined
             attributes are strict).
    Phase:   "load" when the template file could not be read or parsed,
             "render" when it failed while producing the page.
    """

    def __init__(
        self,
        view: str,
        message: str = "Template rendering failed",
        context: Optional[Dict[str, Any]] = None,
        phase: str = "load",
    ):
        ctx = context or {}
        ctx["view"] = view
        ctx["phase"] = phase
        super().__init__(message=message, context=ctx)
        self.view = view
        self.phase = phase
