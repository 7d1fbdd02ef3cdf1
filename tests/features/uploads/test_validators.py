"""Tests for upload validators."""

import pytest

from media_upload.config.constants import (
    DEFAULT_MAX_FILE_SIZE,
    SUPPORTED_IMAGE_TYPES,
    SUPPORTED_MEDIA_TYPES,
    SUPPORTED_VIDEO_TYPES,
)
from media_upload.core.entities import OutcomeKind
from media_upload.features.uploads.validators import (
    FileSizeValidator,
    FileSizeValidatorConfig,
    MediaTypeValidator,
    MediaTypeValidatorConfig,
    is_valid_file_size,
    is_valid_media_type,
)


class TestMediaTypeValidator:
    """Test declared MIME type validation."""

    @pytest.mark.parametrize("mime_type", sorted(SUPPORTED_MEDIA_TYPES))
    def test_allow_listed_types_are_valid(self, mime_type):
        assert is_valid_media_type(mime_type)

    @pytest.mark.parametrize("mime_type", [
        None,
        "",
        "application/zip",
        "application/x-unknown",
        "text/plain",
        "IMAGE/JPEG",
        "image/jpeg; charset=binary",
        " image/png",
    ])
    def test_other_values_are_invalid(self, mime_type):
        assert not is_valid_media_type(mime_type)

    def test_allow_list_covers_images_and_videos(self):
        assert len(SUPPORTED_IMAGE_TYPES) == 10
        assert len(SUPPORTED_VIDEO_TYPES) == 8
        assert SUPPORTED_MEDIA_TYPES == SUPPORTED_IMAGE_TYPES | SUPPORTED_VIDEO_TYPES

    def test_validate_rejection_names_file_and_type(self):
        outcome = MediaTypeValidator().validate("notes.txt", "text/plain")

        assert outcome.kind is OutcomeKind.REJECTED_INVALID_TYPE
        assert outcome.filename == "notes.txt"
        assert outcome.detail == "File notes.txt has unsupported type: text/plain"

    def test_validate_accepts(self):
        outcome = MediaTypeValidator().validate("clip.mp4", "video/mp4")
        assert outcome.is_accepted

    def test_custom_allow_list(self):
        validator = MediaTypeValidator(MediaTypeValidatorConfig(frozenset({"image/png"})))

        assert validator.is_valid_media_type("image/png")
        assert not validator.is_valid_media_type("image/jpeg")


class TestFileSizeValidator:
    """Test persisted size validation."""

    @pytest.mark.parametrize("size,expected", [
        (-1, False),
        (0, False),
        (1, True),
        (2048, True),
        (DEFAULT_MAX_FILE_SIZE, True),
        (DEFAULT_MAX_FILE_SIZE + 1, False),
    ])
    def test_default_limit(self, size, expected):
        assert is_valid_file_size(size) is expected

    def test_default_limit_is_500_mib(self):
        assert DEFAULT_MAX_FILE_SIZE == 524288000
        assert FileSizeValidator().max_file_size == 524288000

    def test_configured_limit(self):
        validator = FileSizeValidator(FileSizeValidatorConfig(max_file_size_bytes=100))

        assert validator.is_valid_file_size(100)
        assert not validator.is_valid_file_size(101)

    def test_validate_rejection(self):
        validator = FileSizeValidator(FileSizeValidatorConfig(max_file_size_bytes=10))
        outcome = validator.validate("big.png", 11)

        assert outcome.kind is OutcomeKind.REJECTED_TOO_LARGE
        assert outcome.detail == "File big.png exceeds maximum size limit"

    def test_empty_file_is_rejected(self):
        outcome = FileSizeValidator().validate("empty.png", 0)
        assert not outcome.is_accepted
