"""
Backend-specific test fixtures and helpers.

These fixtures extend the global fixtures with helpers for building
services directly against the mock database.
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def icon_store(icons_collection, icons_dir):
    """IconStore over the mock icons collection."""
    from iconhub.services.icon_store import IconStore

    icons_dir.mkdir(parents=True, exist_ok=True)
    yield IconStore(icons_collection, icons_dir)


@pytest_asyncio.fixture
async def upload_handler(icon_store, icons_dir):
    """UploadHandler with the default 5MB limit."""
    from iconhub.services.upload_service import UploadHandler

    yield UploadHandler(icon_store, icons_dir, max_file_size=5 * 1024 * 1024)


@pytest_asyncio.fixture
async def auth_service(mock_db, token_service):
    """AuthService over the mock database."""
    from iconhub.services.auth_service import AuthService

    yield AuthService(mock_db, token_service)


# =============================================================================
# Upload Helpers
# =============================================================================

@pytest.fixture
def make_upload():
    """
    Factory for in-memory Starlette UploadFile objects.

    Usage:
        upload = make_upload("logo.png", b"...", "image/png")
    """
    from io import BytesIO

    from starlette.datastructures import Headers, UploadFile

    def _make(filename: str, content: bytes, content_type: str) -> UploadFile:
        return UploadFile(
            file=BytesIO(content),
            filename=filename,
            headers=Headers({"content-type": content_type}),
        )

    return _make


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert the error envelope structure."""
    def _assert(response, status_code: int, message_contains: str = None, key: str = "success"):
        assert response.status_code == status_code
        data = response.json()
        assert data[key] is False
        assert "message" in data
        if message_contains:
            assert message_contains.lower() in data["message"].lower()
    return _assert
