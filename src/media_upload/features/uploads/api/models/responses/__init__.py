"""Upload API response models."""

from .upload_response import UploadedFileInfo, UploadResponse
from .status_response import StatusResponse

__all__ = [
    "UploadedFileInfo",
    "UploadResponse",
    "StatusResponse",
]
