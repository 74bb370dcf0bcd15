"""
Backend-specific test fixtures and configuration.

These fixtures wire the FastAPI app to the mock databases and provide an
async HTTP client for route tests.
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio
from pymongo.errors import PyMongoError

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app_with_mocks(mock_catalog_db, mock_auth_db):
    """
    The FastAPI app with both database dependencies pointed at mongomock.
    """
    from catalog.database.connections import get_auth_database, get_catalog_database
    from catalog.main import app

    async def catalog_db():
        return mock_catalog_db

    async def auth_db():
        return mock_auth_db

    app.dependency_overrides[get_catalog_database] = catalog_db
    app.dependency_overrides[get_auth_database] = auth_db
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app_with_mocks):
    """
    Async test client over ASGI (the lifespan, and so the real MongoDB
    connection, is never started).
    """
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app_with_mocks),
        base_url="http://test"
    ) as ac:
        yield ac


# =============================================================================
# Store Failure Helpers
# =============================================================================

class FailingCollection:
    """A collection whose reads work and whose writes fail, as on a dropped connection."""

    def __init__(self, collection):
        self._collection = collection
        self.name = collection.name

    def __getattr__(self, attr):
        return getattr(self._collection, attr)

    async def _fail(self, *args, **kwargs):
        raise PyMongoError(f"connection reset while writing {self.name}")

    update_many = _fail
    delete_many = _fail
    delete_one = _fail
    replace_one = _fail
    find_one_and_update = _fail


class PartiallyFailingDatabase:
    """Wraps a database so that one collection fails and the rest work."""

    def __init__(self, db, failing_collection: str):
        self._db = db
        self._failing_collection = failing_collection

    def __getitem__(self, name: str):
        if name == self._failing_collection:
            return FailingCollection(self._db[name])
        return self._db[name]


@pytest.fixture
def failing_db(mock_catalog_db):
    """Factory: failing_db("schemas") -> catalog db where schemas writes fail."""
    def _make(collection_name: str):
        return PartiallyFailingDatabase(mock_catalog_db, collection_name)
    return _make


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert the error envelope."""
    def _assert(response, status_code: int, message_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert data["success"] is False
        assert "message" in data
        if message_contains:
            assert message_contains.lower() in data["message"].lower()
    return _assert
