"""Upload services."""

from .path_resolver import (
    StoragePathResolver,
    create_storage_path_resolver,
    sanitize_name,
    safe_path_component,
)
from .file_persister import FilePersister, create_file_persister
from .archive_exporter import ArchiveExporter, create_archive_exporter
from .stats_collector import StatsCollector, UploadStats, create_stats_collector
from .upload_orchestrator import UploadOrchestrator, UploadRun, UploadState

__all__ = [
    "StoragePathResolver",
    "create_storage_path_resolver",
    "sanitize_name",
    "safe_path_component",
    "FilePersister",
    "create_file_persister",
    "ArchiveExporter",
    "create_archive_exporter",
    "StatsCollector",
    "UploadStats",
    "create_stats_collector",
    "UploadOrchestrator",
    "UploadRun",
    "UploadState",
]
