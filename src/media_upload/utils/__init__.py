"""Utility helpers for the media upload service."""

from .filesystem import iter_regular_files, remove_file

__all__ = [
    "iter_regular_files",
    "remove_file",
]
