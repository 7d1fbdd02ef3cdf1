"""Exceptions module for the media upload service."""

from .base import MediaUploadError, get_http_status_code
from .domain import (
    # Validation Errors
    UploadValidationError,
    InvalidMediaType,
    FileTooLarge,
    NoFilesProvided,
    NothingToExport,

    # Storage Errors
    StorageError,
    UploadFailed,
    ExportFailed,
    StatusUnavailable,
)
from .http_mapping import HTTP_STATUS_MAP

__all__ = [
    "MediaUploadError",
    "get_http_status_code",
    "HTTP_STATUS_MAP",
    "UploadValidationError",
    "InvalidMediaType",
    "FileTooLarge",
    "NoFilesProvided",
    "NothingToExport",
    "StorageError",
    "UploadFailed",
    "ExportFailed",
    "StatusUnavailable",
]
