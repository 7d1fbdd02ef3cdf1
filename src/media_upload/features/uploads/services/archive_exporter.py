"""Archive exporter.

ONLY export archives - zips every stored file under the storage root into a
single transient archive.
"""

import asyncio
import logging
import shutil
import time
import zipfile
from pathlib import Path

from ....config.constants import DEFAULT_COPY_BUFFER_SIZE, EXPORT_FILENAME_TEMPLATE
from ....core.exceptions import ExportFailed
from ....utils.filesystem import iter_regular_files, remove_file

logger = logging.getLogger(__name__)


class ArchiveExporter:
    """Builds ``uploads_export_{epochMillis}.zip`` archives of the storage root.

    Entry names are root-relative POSIX paths; directories get no entries of
    their own. Files are streamed through a bounded buffer, so archive size
    does not affect memory use. Files still being written by a concurrent
    upload may be captured partially.
    """

    def __init__(
        self,
        upload_root: Path,
        export_root: Path,
        buffer_size: int = DEFAULT_COPY_BUFFER_SIZE
    ):
        self._upload_root = upload_root
        self._export_root = export_root
        self._buffer_size = buffer_size

    async def export(self) -> Path:
        """Build a fresh archive and return its path.

        The caller serves the archive and then removes it with
        :meth:`discard`. Callers check for an empty root beforehand; an empty
        root still produces a valid, empty archive.

        Raises:
            ExportFailed: If the root is unreadable or the archive cannot be written
        """
        archive_path = self._export_root / EXPORT_FILENAME_TEMPLATE.format(
            millis=int(time.time() * 1000)
        )

        try:
            entry_count = await asyncio.to_thread(self._build_archive, archive_path)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to build export archive {archive_path}: {e}", exc_info=True)
            raise ExportFailed(archive=str(archive_path)) from e

        logger.info(f"Built export archive {archive_path.name} with {entry_count} file(s)")
        return archive_path

    async def discard(self, archive_path: Path) -> None:
        """Remove a served archive."""
        removed = await asyncio.to_thread(remove_file, archive_path)
        if removed:
            logger.debug(f"Removed export archive {archive_path}")

    def _build_archive(self, archive_path: Path) -> int:
        self._export_root.mkdir(parents=True, exist_ok=True)
        entry_count = 0
        try:
            with zipfile.ZipFile(archive_path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
                for entry in iter_regular_files(self._upload_root):
                    file_path = Path(entry.path)
                    # EXPORT_DIR may point inside the upload root
                    if file_path == archive_path:
                        continue
                    arcname = file_path.relative_to(self._upload_root).as_posix()
                    info = zipfile.ZipInfo.from_file(file_path, arcname, strict_timestamps=False)
                    info.compress_type = zipfile.ZIP_DEFLATED
                    with open(file_path, "rb") as source, archive.open(info, "w") as target:
                        shutil.copyfileobj(source, target, self._buffer_size)
                    entry_count += 1
        except Exception:
            remove_file(archive_path)
            raise
        return entry_count


def create_archive_exporter(
    upload_root: Path,
    export_root: Path,
    buffer_size: int = DEFAULT_COPY_BUFFER_SIZE
) -> ArchiveExporter:
    """Create archive exporter."""
    return ArchiveExporter(upload_root, export_root, buffer_size)
