"""Media upload API - multipart media uploads with batch storage, zip export
and usage statistics."""

from .__version__ import __version__

__all__ = ["__version__"]
