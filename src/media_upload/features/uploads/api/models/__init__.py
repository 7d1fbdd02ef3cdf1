"""Upload API models."""

from .responses import StatusResponse, UploadedFileInfo, UploadResponse

__all__ = [
    "StatusResponse",
    "UploadedFileInfo",
    "UploadResponse",
]
