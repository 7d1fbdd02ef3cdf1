"""File persister.

ONLY file persistence - streams one file part to disk through a fixed-size
buffer and reports the exact byte count written.
"""

import asyncio
import logging
from pathlib import Path
from typing import BinaryIO, Optional, Tuple

from ....config.constants import DEFAULT_COPY_BUFFER_SIZE, UNNAMED_FILE
from ....core.exceptions import UploadFailed
from ....utils.filesystem import remove_file
from .path_resolver import safe_path_component

logger = logging.getLogger(__name__)


class FilePersister:
    """Buffered stream-to-disk copier.

    Blocking reads and writes run in a worker thread so the event loop is
    never held up by disk I/O.
    """

    def __init__(self, buffer_size: int = DEFAULT_COPY_BUFFER_SIZE):
        self._buffer_size = buffer_size

    async def persist(
        self,
        source: BinaryIO,
        original_name: Optional[str],
        directory: Path
    ) -> Tuple[Path, int]:
        """Copy ``source`` into ``directory`` under its sanitized name.

        The target file is closed before this returns. A failed copy removes
        the partial file.

        Args:
            source: Readable binary stream of the file part
            original_name: Client-supplied (untrusted) file name
            directory: Existing batch directory

        Returns:
            Absolute saved path and number of bytes copied

        Raises:
            UploadFailed: On read or write failure
        """
        target = directory / safe_path_component(original_name, UNNAMED_FILE)

        try:
            copied = await asyncio.to_thread(self._copy, source, target)
        except OSError as e:
            logger.error(f"Failed to persist {original_name!r} to {target}: {e}", exc_info=True)
            raise UploadFailed(
                details="Could not write uploaded file",
                filename=original_name,
                target=str(target)
            ) from e

        logger.debug(f"Persisted {copied} bytes to {target}")
        return target, copied

    async def discard(self, path: Path) -> bool:
        """Delete a file written by :meth:`persist`."""
        return await asyncio.to_thread(remove_file, path)

    def _copy(self, source: BinaryIO, target: Path) -> int:
        copied = 0
        try:
            with open(target, "wb") as output:
                while True:
                    chunk = source.read(self._buffer_size)
                    if not chunk:
                        break
                    output.write(chunk)
                    copied += len(chunk)
        except OSError:
            remove_file(target)
            raise
        return copied


def create_file_persister(buffer_size: int = DEFAULT_COPY_BUFFER_SIZE) -> FilePersister:
    """Create file persister."""
    return FilePersister(buffer_size)
