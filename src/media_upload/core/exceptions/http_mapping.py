"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .base import MediaUploadError
from .domain import (
    UploadValidationError,
    InvalidMediaType,
    FileTooLarge,
    NoFilesProvided,
    NothingToExport,
    StorageError,
    UploadFailed,
    ExportFailed,
    StatusUnavailable,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    UploadValidationError: 400,
    InvalidMediaType: 400,
    FileTooLarge: 400,
    NoFilesProvided: 400,

    # 404 Not Found
    NothingToExport: 404,

    # 500 Internal Server Error
    StorageError: 500,
    UploadFailed: 500,
    ExportFailed: 500,
    StatusUnavailable: 500,

    # Default for MediaUploadError
    MediaUploadError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Resolve the status code by walking the exception's MRO."""
    for exc_type in type(exception).__mro__:
        if exc_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exc_type]
    return 500
