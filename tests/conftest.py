"""
Global test fixtures for the icon library backend.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Test settings with a temporary icons directory
- Token helpers
- Application and HTTP client fixtures
"""

import sys
from datetime import timedelta
from pathlib import Path

import pytest
import pytest_asyncio

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


TEST_SECRET = "test-secret-key"


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def icons_dir(tmp_path) -> Path:
    """Upload directory for a single test."""
    return tmp_path / "public" / "icons"


@pytest.fixture
def test_settings(icons_dir):
    """Settings pointing at a temporary icons directory."""
    from iconhub.config import Settings

    return Settings(
        mongo_uri="mongodb://unused:27017",
        mongo_db_name="test",
        jwt_secret_key=TEST_SECRET,
        icons_dir=str(icons_dir),
        enable_public_showcase=True,
    )


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest_asyncio.fixture
async def mock_db(mock_async_mongo_client):
    """Provide the mock icon library database."""
    yield mock_async_mongo_client["test"]


@pytest_asyncio.fixture
async def icons_collection(mock_db):
    """Icons collection, empty (no library document)."""
    yield mock_db["icons"]


@pytest_asyncio.fixture
async def seeded_library(icons_collection):
    """
    Insert a library document with three categories:
    - business: two icons
    - nature: no icons
    - archive: deleted, one icon
    """
    await icons_collection.insert_one({
        "icons": {
            "business": {
                "deleted": False,
                "data": [
                    "http://test/icons/icon-1-1.png",
                    "http://test/icons/icon-2-2.png",
                ],
            },
            "nature": {"deleted": False, "data": []},
            "archive": {
                "deleted": True,
                "data": ["http://test/icons/icon-3-3.svg"],
            },
        }
    })
    yield icons_collection


@pytest_asyncio.fixture
async def seeded_users(mock_db):
    """Credential records in both supported shapes."""
    await mock_db["users"].insert_one({"username": "admin", "password": "admin-pass"})
    await mock_db["users"].insert_one({
        "users": [
            {"username": "editor", "password": "editor-pass"},
            {"username": "viewer", "password": "viewer-pass"},
        ]
    })
    yield mock_db["users"]


# =============================================================================
# Token Fixtures
# =============================================================================

@pytest.fixture
def token_service():
    """Token service sharing the test secret."""
    from iconhub.core.security import TokenService
    return TokenService(secret_key=TEST_SECRET)


@pytest.fixture
def valid_token(token_service) -> str:
    return token_service.issue("admin")


@pytest.fixture
def expired_token() -> str:
    from iconhub.core.security import TokenService
    return TokenService(
        secret_key=TEST_SECRET, expires_delta=timedelta(seconds=-10)
    ).issue("admin")


@pytest.fixture
def auth_headers(valid_token) -> dict:
    """Authorization header with a valid bearer token."""
    return {"Authorization": f"Bearer {valid_token}"}


# =============================================================================
# FastAPI Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def app(test_settings, mock_async_mongo_client):
    """
    Create the FastAPI app wired to the mock MongoDB client.

    The lifespan runs for the duration of the test so services are on app.state.
    """
    from iconhub.main import create_app

    application = create_app(test_settings, mongo_client=mock_async_mongo_client)
    async with application.router.lifespan_context(application):
        yield application


@pytest_asyncio.fixture
async def async_client(app):
    """
    Create an async test client.

    Requests go to http://test, so generated icon URLs start with http://test/icons/.
    """
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


# =============================================================================
# Upload Helpers
# =============================================================================

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
SVG_BYTES = b'<svg xmlns="http://www.w3.org/2000/svg" width="1" height="1"/>'


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture
def svg_bytes() -> bytes:
    return SVG_BYTES
