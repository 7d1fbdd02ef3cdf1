"""Upload HTTP API."""

from .routers import upload_router

__all__ = ["upload_router"]
