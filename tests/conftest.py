"""
Recordbook — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── temp_store: Path of a not-yet-created store directory
    ├── store: RecordStore rooted at temp_store
    ├── renderer: TemplateRenderer using the bundled templates
    ├── sample_record: A Record with a simple title
    └── test_client: HTTPX AsyncClient wired to the app, using `store`
"""

import os
import tempfile

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Override settings for testing BEFORE any app imports
os.environ["STORE_ROOT"] = tempfile.mkdtemp(prefix="recordbook_test_")
os.environ["LOG_LEVEL"] = "WARNING"

from recordbook.schemas.record import Record  # noqa: E402
from recordbook.services.record_store import RecordStore  # noqa: E402
from recordbook.services.renderer import TemplateRenderer  # noqa: E402


@pytest.fixture
def temp_store(tmp_path):
    """
    Provides a store directory path that does not exist yet.

    Why not created: The store is expected to create it on first use.
    """
    return str(tmp_path / "records")


@pytest.fixture
def store(temp_store):
    """A RecordStore isolated in the test's temporary directory."""
    return RecordStore(temp_store)


@pytest.fixture
def renderer():
    """A TemplateRenderer over the templates bundled with the package."""
    return TemplateRenderer()


@pytest.fixture
def sample_record():
    return Record(title="Hello World!", content="body")


@pytest_asyncio.fixture
async def test_client(store):
    """
    Provides an async HTTP test client for endpoint testing.

    How:     ASGITransport routes requests directly to the app; the record
             store dependency is overridden with the isolated `store`.
    Note:    Redirects are not followed, so 302 responses can be asserted.
    """
    from recordbook.main import app
    from recordbook.services.record_store import get_record_store

    app.dependency_overrides[get_record_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
