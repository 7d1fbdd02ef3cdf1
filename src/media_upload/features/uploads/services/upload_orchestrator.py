"""Upload orchestrator.

ONLY upload orchestration - drives the parts of one multipart request
through validation, batch directory resolution and persistence.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from starlette.datastructures import UploadFile

from ....config.constants import (
    DEFAULT_MIME_TYPE,
    UNKNOWN_FILE,
    UNNAMED_FILE,
    UPLOAD_NAME_FIELD,
)
from ....core.entities import StoredFile, UploadBatch, ValidationOutcome
from ....core.exceptions import (
    FileTooLarge,
    InvalidMediaType,
    NoFilesProvided,
    UploadValidationError,
)
from ..validators import FileSizeValidator, MediaTypeValidator
from .file_persister import FilePersister
from .path_resolver import StoragePathResolver, safe_path_component

logger = logging.getLogger(__name__)

MultipartPart = Tuple[str, Union[str, UploadFile]]


class UploadState(str, Enum):
    """Per-request orchestration states."""
    AWAITING_DIRECTORY = "awaiting_directory"
    PROCESSING = "processing"
    FAILED = "failed"
    COMPLETED = "completed"


@dataclass
class UploadRun:
    """Mutable state of one request's orchestration.

    Lives only for the duration of :meth:`UploadOrchestrator.process`.
    """

    state: UploadState = UploadState.AWAITING_DIRECTORY
    batch_name: Optional[str] = None
    batch: Optional[UploadBatch] = None
    outcomes: List[ValidationOutcome] = field(default_factory=list)
    rejection: Optional[UploadValidationError] = None

    def reject(self, outcome: ValidationOutcome, error: UploadValidationError) -> None:
        self.outcomes.append(outcome)
        self.rejection = error
        self.state = UploadState.FAILED


class UploadOrchestrator:
    """Processes a multipart upload request part by part, in arrival order.

    Directory policy: the batch directory is created lazily, when the first
    file part passes the media type check. An ``uploadName`` field only
    names the batch if it arrives before that point; later name fields are
    ignored. A request whose files are all rejected creates no directory.

    On the first rejection the offending file is discarded (and deleted if
    it was already written), every later part is closed without being
    persisted, and the rejection is raised once all parts are consumed.
    Files accepted earlier in the request stay on disk.
    """

    def __init__(
        self,
        path_resolver: StoragePathResolver,
        file_persister: FilePersister,
        media_type_validator: MediaTypeValidator,
        file_size_validator: FileSizeValidator
    ):
        self._path_resolver = path_resolver
        self._file_persister = file_persister
        self._media_type_validator = media_type_validator
        self._file_size_validator = file_size_validator

    async def process(self, parts: Iterable[MultipartPart]) -> UploadBatch:
        """Run one request's parts through the upload state machine.

        Args:
            parts: ``(field name, value)`` pairs in arrival order; file parts
                are ``UploadFile`` instances, form fields are strings

        Returns:
            The completed batch with at least one stored file

        Raises:
            InvalidMediaType: A file part declared an unsupported MIME type
            FileTooLarge: A file part was empty or exceeded the size limit
            NoFilesProvided: The request contained no file parts
            UploadFailed: The batch directory or a file could not be written
        """
        run = UploadRun()

        for field_name, value in parts:
            if isinstance(value, UploadFile):
                try:
                    await self._handle_file(run, value)
                finally:
                    await value.close()
            elif field_name == UPLOAD_NAME_FIELD:
                self._handle_name(run, value)

        if run.rejection is not None:
            logger.warning(
                f"Upload rejected: {run.rejection.message} - {run.rejection.details}"
            )
            raise run.rejection

        if run.batch is None or not run.batch.files:
            raise NoFilesProvided()

        run.state = UploadState.COMPLETED
        logger.info(
            f"Stored {run.batch.file_count} file(s), {run.batch.total_size} bytes "
            f"in {run.batch.directory}"
        )
        return run.batch

    def _handle_name(self, run: UploadRun, value: str) -> None:
        if run.state is UploadState.AWAITING_DIRECTORY:
            run.batch_name = value
        else:
            logger.debug(f"Ignoring late {UPLOAD_NAME_FIELD} field: batch directory already resolved")

    async def _handle_file(self, run: UploadRun, part: UploadFile) -> None:
        if run.state is UploadState.FAILED:
            return

        original_name = part.filename or UNKNOWN_FILE
        declared_type = part.content_type

        type_outcome = self._media_type_validator.validate(original_name, declared_type)
        if not type_outcome.is_accepted:
            run.reject(type_outcome, InvalidMediaType(original_name, declared_type))
            return

        if run.batch is None:
            run.batch = await self._path_resolver.create_batch(run.batch_name)
            run.state = UploadState.PROCESSING

        saved_path, size = await self._file_persister.persist(
            part.file, part.filename, run.batch.directory
        )

        size_outcome = self._file_size_validator.validate(original_name, size)
        if not size_outcome.is_accepted:
            await self._file_persister.discard(saved_path)
            run.reject(
                size_outcome,
                FileTooLarge(original_name, size, self._file_size_validator.max_file_size)
            )
            return

        run.outcomes.append(size_outcome)
        run.batch.add(
            StoredFile(
                original_name=original_name,
                sanitized_name=safe_path_component(part.filename, UNNAMED_FILE),
                saved_path=saved_path,
                mime_type=declared_type or DEFAULT_MIME_TYPE,
                size=size,
                uploaded_at=datetime.now(timezone.utc),
            )
        )
