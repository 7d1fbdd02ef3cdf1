"""Stats collector.

ONLY usage statistics - counts stored files and sums their sizes under the
storage root.
"""

import asyncio
import logging
from pathlib import Path
from typing import NamedTuple

from ....core.exceptions import StatusUnavailable
from ....utils.filesystem import iter_regular_files

logger = logging.getLogger(__name__)


class UploadStats(NamedTuple):
    """File count and total byte size of the storage root."""

    file_count: int
    total_bytes: int


class StatsCollector:
    """Read-only walker over the storage root."""

    def __init__(self, upload_root: Path):
        self._upload_root = upload_root

    async def collect(self) -> UploadStats:
        """Count regular files and sum their sizes.

        An absent root yields ``(0, 0)``.

        Raises:
            StatusUnavailable: If a directory under the root cannot be read
        """
        try:
            return await asyncio.to_thread(self._collect)
        except OSError as e:
            logger.error(f"Failed to collect upload stats under {self._upload_root}: {e}", exc_info=True)
            raise StatusUnavailable(upload_root=str(self._upload_root)) from e

    def _collect(self) -> UploadStats:
        file_count = 0
        total_bytes = 0
        for entry in iter_regular_files(self._upload_root):
            file_count += 1
            total_bytes += entry.stat(follow_symlinks=False).st_size
        return UploadStats(file_count, total_bytes)


def create_stats_collector(upload_root: Path) -> StatsCollector:
    """Create stats collector."""
    return StatsCollector(upload_root)
