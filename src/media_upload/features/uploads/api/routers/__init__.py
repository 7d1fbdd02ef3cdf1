"""Upload API routers."""

from .upload_router import upload_router

__all__ = ["upload_router"]
