"""Base exceptions for the media upload service.

All service errors inherit from MediaUploadError and carry an error code,
a details payload and an HTTP status mapping for API responses.
"""

from typing import Any, Dict, Optional


class MediaUploadError(Exception):
    """Base exception for all media upload errors.

    ``message`` is the short, client-facing reason (e.g. "File too large");
    ``details`` is an optional human-readable explanation.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the exception for logging."""
        return {
            "code": self.error_code,
            "message": self.message,
            "details": self.details,
            "context": self.context,
            "type": self.__class__.__name__,
        }


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code
    """
    from .http_mapping import get_http_status_code as lookup_status_code
    return lookup_status_code(exception)
