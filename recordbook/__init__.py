"""
Recordbook — Application Package Initializer
=============================================

What: Marks the `recordbook` directory as a Python package.
Why:  Enables imports like `from recordbook.config import settings`.
Who:  Used implicitly by uvicorn (`recordbook.main:app`) and pytest.

Architecture Note:
    The application is a thin stack of layers:

    ┌─────────────────────────────────────┐
    │        Routes (HTML + redirects)    │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (store, slug, renderer)  │  ← File I/O, templates
    ├─────────────────────────────────────┤
    │         Schemas (Record model)      │  ← Pydantic, on-disk format
    └─────────────────────────────────────┘

    There is no database: each record is one JSON file in the store directory,
    and the directory listing is the full collection.
"""

__version__ = "1.0.0"
