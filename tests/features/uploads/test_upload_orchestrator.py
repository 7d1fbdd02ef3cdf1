"""Tests for the upload orchestrator state machine."""

from unittest.mock import AsyncMock, patch

import pytest

from media_upload.core.exceptions import (
    FileTooLarge,
    InvalidMediaType,
    NoFilesProvided,
    UploadFailed,
)
from media_upload.features.uploads.services import (
    FilePersister,
    StoragePathResolver,
    UploadOrchestrator,
)
from media_upload.features.uploads.validators import (
    FileSizeValidator,
    FileSizeValidatorConfig,
    MediaTypeValidator,
)


def stored_files(root):
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())


class TestUploadOrchestrator:
    """Test processing multipart parts in arrival order."""

    @pytest.fixture
    def orchestrator(self, upload_root):
        return UploadOrchestrator(
            path_resolver=StoragePathResolver(upload_root),
            file_persister=FilePersister(),
            media_type_validator=MediaTypeValidator(),
            file_size_validator=FileSizeValidator(FileSizeValidatorConfig(max_file_size_bytes=1000)),
        )

    @pytest.mark.asyncio
    async def test_single_named_upload(self, orchestrator, upload_root, upload_file_factory):
        parts = [
            ("uploadName", "Trip"),
            ("files", upload_file_factory("photo.jpg", b"j" * 500)),
        ]

        batch = await orchestrator.process(parts)

        assert batch.file_count == 1
        assert batch.total_size == 500
        assert batch.directory.parent == upload_root / "Trip"
        stored = batch.files[0]
        assert stored.original_name == "photo.jpg"
        assert stored.sanitized_name == "photo.jpg"
        assert stored.mime_type == "image/jpeg"
        assert stored.saved_path.read_bytes() == b"j" * 500
        assert stored.uploaded_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_multiple_files_share_one_batch(self, orchestrator, upload_file_factory):
        parts = [
            ("files", upload_file_factory("a.jpg", b"a" * 100)),
            ("files", upload_file_factory("b.mp4", b"b" * 200, "video/mp4")),
        ]

        batch = await orchestrator.process(parts)

        assert batch.file_count == 2
        assert batch.total_size == 300
        assert {f.saved_path.parent for f in batch.files} == {batch.directory}
        assert [f.original_name for f in batch.files] == ["a.jpg", "b.mp4"]

    @pytest.mark.asyncio
    async def test_missing_name_uses_unnamed(self, orchestrator, upload_root, upload_file_factory):
        batch = await orchestrator.process([("files", upload_file_factory("a.png", b"x", "image/png"))])

        assert batch.directory.parent == upload_root / "unnamed"
        assert batch.name is None

    @pytest.mark.asyncio
    async def test_name_after_first_file_does_not_move_batch(
        self, orchestrator, upload_root, upload_file_factory
    ):
        parts = [
            ("files", upload_file_factory("a.jpg", b"a")),
            ("uploadName", "Late"),
            ("files", upload_file_factory("b.jpg", b"b")),
        ]

        batch = await orchestrator.process(parts)

        assert batch.directory.parent == upload_root / "unnamed"
        assert not (upload_root / "Late").exists()
        assert batch.file_count == 2

    @pytest.mark.asyncio
    async def test_last_name_before_first_file_wins(self, orchestrator, upload_root, upload_file_factory):
        parts = [
            ("uploadName", "First"),
            ("uploadName", "Second"),
            ("files", upload_file_factory("a.jpg", b"a")),
        ]

        batch = await orchestrator.process(parts)

        assert batch.directory.parent == upload_root / "Second"

    @pytest.mark.asyncio
    async def test_other_fields_are_ignored(self, orchestrator, upload_file_factory):
        parts = [
            ("description", "holiday"),
            ("files", upload_file_factory("a.jpg", b"a")),
        ]

        batch = await orchestrator.process(parts)

        assert batch.file_count == 1

    @pytest.mark.asyncio
    async def test_no_parts_raises_no_files(self, orchestrator, upload_root):
        with pytest.raises(NoFilesProvided) as exc_info:
            await orchestrator.process([("uploadName", "Trip")])

        assert exc_info.value.message == "No files uploaded"
        assert exc_info.value.details == "Please provide at least one valid media file"
        assert not upload_root.exists()

    @pytest.mark.asyncio
    async def test_invalid_type_creates_nothing(self, orchestrator, upload_root, upload_file_factory):
        parts = [
            ("uploadName", "Trip"),
            ("files", upload_file_factory("notes.txt", b"text", "application/x-unknown")),
        ]

        with pytest.raises(InvalidMediaType) as exc_info:
            await orchestrator.process(parts)

        assert exc_info.value.message == "Invalid file type"
        assert exc_info.value.filename == "notes.txt"
        assert not upload_root.exists()

    @pytest.mark.asyncio
    async def test_missing_content_type_is_invalid(self, orchestrator, upload_file_factory):
        with pytest.raises(InvalidMediaType):
            await orchestrator.process([("files", upload_file_factory("a.jpg", b"a", None))])

    @pytest.mark.asyncio
    async def test_oversized_file_is_deleted(self, orchestrator, upload_root, upload_file_factory):
        parts = [("files", upload_file_factory("big.jpg", b"x" * 1001))]

        with pytest.raises(FileTooLarge) as exc_info:
            await orchestrator.process(parts)

        assert exc_info.value.message == "File too large"
        assert exc_info.value.size == 1001
        assert stored_files(upload_root) == []

    @pytest.mark.asyncio
    async def test_empty_file_is_rejected(self, orchestrator, upload_root, upload_file_factory):
        with pytest.raises(FileTooLarge):
            await orchestrator.process([("files", upload_file_factory("empty.jpg", b""))])

        assert stored_files(upload_root) == []

    @pytest.mark.asyncio
    async def test_rejection_keeps_earlier_files_and_skips_later_ones(
        self, orchestrator, upload_root, upload_file_factory
    ):
        later = upload_file_factory("later.jpg", b"l")
        parts = [
            ("uploadName", "Trip"),
            ("files", upload_file_factory("first.jpg", b"f")),
            ("files", upload_file_factory("bad.exe", b"e", "application/octet-stream")),
            ("files", later),
        ]

        with pytest.raises(InvalidMediaType) as exc_info:
            await orchestrator.process(parts)

        assert exc_info.value.filename == "bad.exe"
        files = stored_files(upload_root)
        assert len(files) == 1
        assert files[0].startswith("Trip/") and files[0].endswith("/first.jpg")
        assert later.file.closed

    @pytest.mark.asyncio
    async def test_first_rejection_is_reported(self, orchestrator, upload_file_factory):
        parts = [
            ("files", upload_file_factory("big.jpg", b"x" * 2000)),
            ("files", upload_file_factory("bad.txt", b"t", "text/plain")),
        ]

        with pytest.raises(FileTooLarge):
            await orchestrator.process(parts)

    @pytest.mark.asyncio
    async def test_every_part_is_closed(self, orchestrator, upload_file_factory):
        parts = [
            ("files", upload_file_factory("a.jpg", b"a")),
            ("files", upload_file_factory("b.jpg", b"b")),
        ]

        await orchestrator.process(parts)

        assert all(part.file.closed for _, part in parts)

    @pytest.mark.asyncio
    async def test_missing_file_name_defaults(self, orchestrator, upload_file_factory):
        batch = await orchestrator.process([("files", upload_file_factory(None, b"a"))])

        stored = batch.files[0]
        assert stored.original_name == "unknown"
        assert stored.saved_path.name == "unnamed_file"

    @pytest.mark.asyncio
    async def test_write_failure_propagates(self, orchestrator, upload_file_factory):
        persist = AsyncMock(side_effect=UploadFailed(details="Could not write uploaded file"))
        part = upload_file_factory("a.jpg", b"a")

        with patch.object(FilePersister, "persist", persist):
            with pytest.raises(UploadFailed):
                await orchestrator.process([("files", part)])

        assert part.file.closed
