# tests/conftest.py
import os

# Set up test environment variables BEFORE any other imports
os.environ.setdefault("TESTING", "true")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("MINIO_ACCESS_KEY", "test-access-key")
os.environ.setdefault("MINIO_SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_FORMAT", "simple")

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.core.context import AppContext
from app.core.dependencies import get_app_context
from app.core.migrations import run_migrations
from app.database import build_engine, build_session_factory
from app.main import app


@pytest.fixture
def database_url(tmp_path):
    """A fresh SQLite file per test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest_asyncio.fixture
async def migrated_db(database_url):
    """Run every migration against the test database."""
    await run_migrations(database_url)
    return database_url


@pytest_asyncio.fixture
async def session_factory(migrated_db):
    """Session factory bound to the migrated test database."""
    engine = build_engine(migrated_db)
    yield build_session_factory(engine)
    await engine.dispose()


@pytest.fixture
def mock_storage():
    """Object store stand-in; every call succeeds."""
    mock = MagicMock()
    mock.bucket = "test-bucket"
    mock.ensure_bucket = AsyncMock()
    mock.upload_file = AsyncMock(
        side_effect=lambda task_id, filename, data, content_type: f"tasks/{task_id}/key_{filename}"
    )
    mock.get_presigned_url = AsyncMock(
        side_effect=lambda key, expires_in=3600: f"http://minio.test/test-bucket/{key}?expires={expires_in}"
    )
    mock.delete_file = AsyncMock()
    mock.file_exists = AsyncMock(return_value=True)
    mock.get_file_metadata = AsyncMock(return_value=(0, "application/octet-stream"))
    return mock


@pytest.fixture
def app_context(session_factory, mock_storage):
    return AppContext.build(session_factory, mock_storage)


@pytest_asyncio.fixture
async def client(app_context):
    """Create a test client wired to the per-test application context."""
    app.dependency_overrides[get_app_context] = lambda: app_context
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def save(session_factory):
    """Persist ORM objects built by the factories."""

    async def _save(*objects):
        async with session_factory() as session:
            session.add_all(objects)
            await session.commit()
            for obj in objects:
                await session.refresh(obj)
        return objects[0] if len(objects) == 1 else objects

    return _save


@pytest.fixture
def graphql(client):
    """POST a GraphQL operation and return the decoded body."""

    async def _execute(query: str, variables: dict | None = None) -> dict:
        response = await client.post("/graphql", json={"query": query, "variables": variables or {}})
        assert response.status_code == 200, response.text
        return response.json()

    return _execute
