"""Upload service dependencies.

ONLY upload service dependencies - builds the upload services from the
settings attached to the running application.
"""

from typing import Annotated

from fastapi import Depends, Request

from .....config.settings import UploadSettings
from ...services import (
    ArchiveExporter,
    StatsCollector,
    UploadOrchestrator,
    create_archive_exporter,
    create_file_persister,
    create_stats_collector,
    create_storage_path_resolver,
)
from ...validators import (
    FileSizeValidatorConfig,
    create_file_size_validator,
    create_media_type_validator,
)


def get_upload_settings(request: Request) -> UploadSettings:
    """Get the settings the application was created with."""
    return request.app.state.settings


async def get_upload_orchestrator(
    settings: Annotated[UploadSettings, Depends(get_upload_settings)]
) -> UploadOrchestrator:
    """Get a fresh orchestrator for one upload request."""
    return UploadOrchestrator(
        path_resolver=create_storage_path_resolver(settings.upload_root),
        file_persister=create_file_persister(settings.copy_buffer_size),
        media_type_validator=create_media_type_validator(),
        file_size_validator=create_file_size_validator(
            FileSizeValidatorConfig(max_file_size_bytes=settings.max_file_size)
        ),
    )


async def get_archive_exporter(
    settings: Annotated[UploadSettings, Depends(get_upload_settings)]
) -> ArchiveExporter:
    """Get archive exporter dependency."""
    return create_archive_exporter(
        settings.upload_root,
        settings.export_root,
        settings.copy_buffer_size,
    )


async def get_stats_collector(
    settings: Annotated[UploadSettings, Depends(get_upload_settings)]
) -> StatsCollector:
    """Get stats collector dependency."""
    return create_stats_collector(settings.upload_root)
