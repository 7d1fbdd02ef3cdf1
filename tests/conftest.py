"""Test configuration and fixtures for the media upload service."""

import io
from typing import Optional

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from starlette.datastructures import Headers, UploadFile

from media_upload.app import create_app
from media_upload.config.settings import UploadSettings


@pytest.fixture
def upload_root(tmp_path):
    """Storage root inside the test's temporary directory."""
    return tmp_path / "uploads"


@pytest.fixture
def export_root(tmp_path):
    """Archive directory, a sibling of the storage root."""
    return tmp_path / "exports"


@pytest.fixture
def settings(upload_root, export_root, tmp_path):
    """Settings pointing every path at the temporary directory."""
    return UploadSettings(
        _env_file=None,
        upload_dir=upload_root,
        export_dir=export_root,
        static_dir=tmp_path / "static",
        rate_limit_enabled=False,
    )


@pytest.fixture
def app(settings):
    """Create FastAPI test app."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """Create test client."""
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def async_client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


def make_upload_file(
    filename: Optional[str],
    content: bytes,
    content_type: Optional[str] = "image/jpeg"
) -> UploadFile:
    """Build a file part as the multipart parser would deliver it."""
    headers = Headers({"content-type": content_type}) if content_type else Headers({})
    return UploadFile(file=io.BytesIO(content), filename=filename, headers=headers)


@pytest.fixture
def upload_file_factory():
    return make_upload_file
