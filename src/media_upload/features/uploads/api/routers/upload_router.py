"""Upload router.

ONLY upload endpoints - multipart upload, zip export and storage status.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import FileResponse
from starlette.background import BackgroundTask

from .....config.settings import UploadSettings
from .....core.exceptions import ExportFailed, NothingToExport, StatusUnavailable
from ...services import ArchiveExporter, StatsCollector, UploadOrchestrator
from ..dependencies import (
    get_archive_exporter,
    get_stats_collector,
    get_upload_orchestrator,
    get_upload_settings,
)
from ..models.responses import StatusResponse, UploadResponse

logger = logging.getLogger(__name__)

upload_router = APIRouter(tags=["Uploads"])


@upload_router.post(
    "/upload",
    response_model=UploadResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload media files",
    description=(
        "Multipart upload of one or more image/video files. An optional "
        "`uploadName` field sent before the files names the batch directory."
    )
)
async def upload_files(
    request: Request,
    settings: Annotated[UploadSettings, Depends(get_upload_settings)],
    orchestrator: Annotated[UploadOrchestrator, Depends(get_upload_orchestrator)]
) -> UploadResponse:
    """Store every file of the request in a fresh batch directory."""
    form = await request.form(
        max_files=settings.max_files_per_request,
        max_fields=settings.max_files_per_request
    )
    try:
        batch = await orchestrator.process(form.multi_items())
    finally:
        await form.close()

    return UploadResponse.from_batch(batch)


@upload_router.api_route(
    "/export",
    methods=["GET", "HEAD"],
    response_class=FileResponse,
    summary="Export all uploads",
    description="Download every stored file as a single zip archive",
    responses={
        200: {"content": {"application/zip": {}}},
        404: {"description": "The uploads directory is empty"},
    }
)
async def export_uploads(
    stats_collector: Annotated[StatsCollector, Depends(get_stats_collector)],
    exporter: Annotated[ArchiveExporter, Depends(get_archive_exporter)]
) -> FileResponse:
    """Build a zip of the whole storage root and stream it back."""
    try:
        stats = await stats_collector.collect()
    except StatusUnavailable as e:
        raise ExportFailed(**e.context) from e

    if stats.file_count == 0:
        raise NothingToExport()

    archive_path = await exporter.export()

    return FileResponse(
        archive_path,
        media_type="application/zip",
        headers={"Content-Disposition": f"attachment; filename={archive_path.name}"},
        background=BackgroundTask(exporter.discard, archive_path)
    )


@upload_router.api_route(
    "/status",
    methods=["GET", "HEAD"],
    response_model=StatusResponse,
    summary="Storage status",
    description="Count and total size of every stored file"
)
async def get_status(
    stats_collector: Annotated[StatsCollector, Depends(get_stats_collector)]
) -> StatusResponse:
    stats = await stats_collector.collect()
    return StatusResponse(
        success=True,
        total_files=stats.file_count,
        total_size_bytes=stats.total_bytes
    )
