"""Storage path resolver.

ONLY storage paths - turns a free-text batch name and the current time into
a sanitized ``{root}/{name}/{YYYYMMDD_HHMMSS}`` directory and creates it.
"""

import asyncio
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from ....config.constants import (
    BATCH_TIMESTAMP_FORMAT,
    MAX_SANITIZED_NAME_LENGTH,
    UNNAMED_BATCH,
)
from ....core.entities import UploadBatch
from ....core.exceptions import UploadFailed

logger = logging.getLogger(__name__)

_UNSAFE_CHARACTERS = re.compile(r"[^A-Za-z0-9._-]")


def sanitize_name(name: str) -> str:
    """Replace characters outside ``[A-Za-z0-9._-]`` with ``_`` and cap at 100.

    Applied identically to batch directory names and file names.
    """
    return _UNSAFE_CHARACTERS.sub("_", name)[:MAX_SANITIZED_NAME_LENGTH]


def safe_path_component(name: Optional[str], fallback: str) -> str:
    """Sanitize ``name`` for use as a single path component.

    Names that sanitize to nothing, or only to dots (``.``, ``..``), would
    resolve to the parent or current directory and fall back instead.
    """
    sanitized = sanitize_name(name or "")
    if not sanitized.strip("."):
        return fallback
    return sanitized


def format_batch_timestamp(moment: datetime) -> str:
    return moment.strftime(BATCH_TIMESTAMP_FORMAT)


class StoragePathResolver:
    """Resolves and creates batch directories under the storage root.

    Two batches with the same name created within the same second resolve
    to the same directory; files in them share the folder.
    """

    def __init__(self, upload_root: Path):
        self._upload_root = upload_root

    def build_path(self, batch_name: Optional[str], moment: datetime) -> Path:
        """Compute the batch directory path without touching the disk."""
        safe_name = safe_path_component(batch_name, UNNAMED_BATCH)
        return self._upload_root / safe_name / format_batch_timestamp(moment)

    async def resolve(self, batch_name: Optional[str], moment: datetime) -> Path:
        """Compute the batch directory and create it with all parents.

        Raises:
            UploadFailed: If the directory cannot be created
        """
        directory = self.build_path(batch_name, moment)

        try:
            await asyncio.to_thread(directory.mkdir, parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create upload directory {directory}: {e}", exc_info=True)
            raise UploadFailed(
                details="Could not create upload directory",
                directory=str(directory)
            ) from e

        logger.debug(f"Upload batch directory ready: {directory}")
        return directory

    async def create_batch(
        self,
        batch_name: Optional[str],
        moment: Optional[datetime] = None
    ) -> UploadBatch:
        """Start a batch stamped with ``moment`` (now, UTC, by default)."""
        moment = moment or datetime.now(timezone.utc)
        directory = await self.resolve(batch_name, moment)
        return UploadBatch(name=batch_name, created_at=moment, directory=directory)


def create_storage_path_resolver(upload_root: Path) -> StoragePathResolver:
    """Create storage path resolver."""
    return StoragePathResolver(upload_root)
