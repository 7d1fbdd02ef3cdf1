"""Domain-specific exceptions for media uploads.

Validation errors are request-level and map to client errors; storage
errors wrap filesystem failures and map to server errors.
"""

from typing import Optional

from .base import MediaUploadError


# Validation Errors
class UploadValidationError(MediaUploadError):
    """Base class for upload rejections caused by the client's input."""

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        filename: Optional[str] = None,
        error_code: Optional[str] = None
    ):
        context = {"filename": filename} if filename else {}
        super().__init__(message, error_code=error_code, details=details, context=context)
        self.filename = filename


class InvalidMediaType(UploadValidationError):
    """Raised when a file part declares a MIME type outside the allow-list."""

    def __init__(self, filename: str, mime_type: Optional[str]):
        super().__init__(
            message="Invalid file type",
            details=f"File {filename} has unsupported type: {mime_type}",
            filename=filename,
            error_code="INVALID_MEDIA_TYPE"
        )
        self.mime_type = mime_type


class FileTooLarge(UploadValidationError):
    """Raised when a persisted file is empty or exceeds the size limit."""

    def __init__(self, filename: str, size: int, max_size: int):
        super().__init__(
            message="File too large",
            details=f"File {filename} exceeds maximum size limit",
            filename=filename,
            error_code="FILE_TOO_LARGE"
        )
        self.size = size
        self.max_size = max_size


class NoFilesProvided(UploadValidationError):
    """Raised when an upload request carries no file parts."""

    def __init__(self):
        super().__init__(
            message="No files uploaded",
            details="Please provide at least one valid media file",
            error_code="NO_FILES_PROVIDED"
        )


class NothingToExport(MediaUploadError):
    """Raised when an export is requested while the storage root is empty."""

    def __init__(self):
        super().__init__(
            message="No files to export",
            error_code="NOTHING_TO_EXPORT",
            details="The uploads directory is empty"
        )


# Storage Errors
class StorageError(MediaUploadError):
    """Base class for filesystem failures (directory, write, read, archive)."""

    default_message = "Storage error"

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None, **context):
        super().__init__(
            message or self.default_message,
            error_code="IO_ERROR",
            details=details,
            context=context
        )


class UploadFailed(StorageError):
    """Raised when a batch directory or file cannot be written."""
    default_message = "Upload failed"


class ExportFailed(StorageError):
    """Raised when the export archive cannot be built."""
    default_message = "Export failed"


class StatusUnavailable(StorageError):
    """Raised when the storage root cannot be walked for statistics."""
    default_message = "Failed to get status"
