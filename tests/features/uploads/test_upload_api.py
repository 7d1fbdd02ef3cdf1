"""HTTP tests for the upload, export and status endpoints."""

import io
import zipfile
from pathlib import Path
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from media_upload.app import create_app
from media_upload.features.uploads.services import FilePersister


def jpeg(name: str = "photo.jpg", size: int = 2048):
    return ("files", (name, b"\xff" * size, "image/jpeg"))


class TestUploadEndpoint:
    """Test POST /upload."""

    def test_named_upload(self, client, upload_root):
        response = client.post("/upload", data={"uploadName": "Trip"}, files=[jpeg()])

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Successfully uploaded 1 file(s)"
        assert body["totalFiles"] == 1
        assert body["totalSize"] == 2048
        assert Path(body["uploadPath"]).parent == upload_root.resolve() / "Trip"

        uploaded = body["uploadedFiles"][0]
        assert uploaded["originalName"] == "photo.jpg"
        assert uploaded["mimeType"] == "image/jpeg"
        assert uploaded["size"] == 2048
        assert uploaded["uploadedAt"].endswith("Z")
        assert Path(uploaded["savedPath"]).read_bytes() == b"\xff" * 2048

    def test_multiple_files(self, client):
        response = client.post(
            "/upload",
            files=[
                jpeg("a.jpg", 100),
                ("files", ("b.webm", b"v" * 200, "video/webm")),
            ]
        )

        assert response.status_code == 201
        body = response.json()
        assert body["totalFiles"] == 2
        assert body["totalSize"] == 300
        assert body["message"] == "Successfully uploaded 2 file(s)"

    def test_invalid_type(self, client, upload_root):
        response = client.post(
            "/upload",
            files=[("files", ("blob.bin", b"data", "application/x-unknown"))]
        )

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "Invalid file type",
            "details": "File blob.bin has unsupported type: application/x-unknown",
        }
        assert not upload_root.exists()

    def test_oversized_file_is_removed(self, settings, upload_root):
        app = create_app(settings.model_copy(update={"max_file_size": 1024}))

        with TestClient(app) as client:
            response = client.post("/upload", data={"uploadName": "Trip"}, files=[jpeg(size=1025)])

        assert response.status_code == 400
        assert response.json()["error"] == "File too large"
        assert response.json()["details"] == "File photo.jpg exceeds maximum size limit"
        assert [p for p in upload_root.rglob("*") if p.is_file()] == []

    def test_no_files(self, client):
        response = client.post("/upload", data={"uploadName": "Trip"})

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "No files uploaded",
            "details": "Please provide at least one valid media file",
        }

    def test_empty_body(self, client):
        response = client.post("/upload")

        assert response.status_code == 400
        assert response.json()["error"] == "No files uploaded"

    def test_write_failure_hides_details(self, client):
        with patch.object(FilePersister, "_copy", side_effect=OSError("disk full")):
            response = client.post("/upload", files=[jpeg()])

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Upload failed", "details": None}

    def test_write_failure_details_in_debug(self, settings):
        app = create_app(settings.model_copy(update={"debug": True}))

        with TestClient(app) as client:
            with patch.object(FilePersister, "_copy", side_effect=OSError("disk full")):
                response = client.post("/upload", files=[jpeg()])

        assert response.status_code == 500
        assert response.json()["details"] == "Could not write uploaded file"

    @pytest.mark.asyncio
    async def test_upload_with_async_client(self, async_client):
        response = await async_client.post(
            "/upload",
            data={"uploadName": "Async"},
            files=[jpeg("clip.jpg", 64)]
        )

        assert response.status_code == 201
        assert response.json()["totalSize"] == 64


class TestExportEndpoint:
    """Test GET /export."""

    def test_nothing_to_export(self, client):
        response = client.get("/export")

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": "No files to export",
            "details": "The uploads directory is empty",
        }

    def test_upload_then_export_round_trip(self, client, export_root):
        upload = client.post("/upload", data={"uploadName": "Trip"}, files=[jpeg(size=2048)])
        assert upload.status_code == 201

        response = client.get("/export")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/zip"
        disposition = response.headers["content-disposition"]
        assert disposition.startswith("attachment; filename=uploads_export_")
        assert disposition.endswith(".zip")

        with zipfile.ZipFile(io.BytesIO(response.content)) as archive:
            infos = archive.infolist()
            assert len(infos) == 1
            assert infos[0].filename.startswith("Trip/")
            assert infos[0].filename.endswith("/photo.jpg")
            assert infos[0].file_size == 2048

        # archive is removed once served
        assert list(export_root.glob("*.zip")) == []

    def test_export_failure(self, client):
        client.post("/upload", files=[jpeg()])

        with patch(
            "media_upload.features.uploads.services.archive_exporter.shutil.copyfileobj",
            side_effect=OSError("read error")
        ):
            response = client.get("/export")

        assert response.status_code == 500
        assert response.json()["error"] == "Export failed"


class TestStatusEndpoint:
    """Test GET /status."""

    def test_empty(self, client):
        response = client.get("/status")

        assert response.status_code == 200
        assert response.json() == {"success": True, "totalFiles": 0, "totalSizeBytes": 0}

    def test_after_uploads(self, client):
        client.post("/upload", files=[jpeg("a.jpg", 100)])
        client.post("/upload", files=[jpeg("b.jpg", 200)])

        response = client.get("/status")

        assert response.json() == {"success": True, "totalFiles": 2, "totalSizeBytes": 300}

    def test_status_is_idempotent(self, client):
        client.post("/upload", files=[jpeg()])

        assert client.get("/status").json() == client.get("/status").json()

    def test_head(self, client):
        assert client.head("/status").status_code == 200
