"""Upload API dependencies."""

from .upload_dependencies import (
    get_archive_exporter,
    get_stats_collector,
    get_upload_orchestrator,
    get_upload_settings,
)

__all__ = [
    "get_archive_exporter",
    "get_stats_collector",
    "get_upload_orchestrator",
    "get_upload_settings",
]
