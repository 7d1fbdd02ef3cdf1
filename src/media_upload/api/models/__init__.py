"""Application-wide API models."""

from .error_response import ErrorResponse
from .health_response import HealthResponse

__all__ = ["ErrorResponse", "HealthResponse"]
