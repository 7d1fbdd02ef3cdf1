"""Upload batch entity.

ONLY upload batch - the named, timestamped directory shared by every file
accepted from one upload request.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .stored_file import StoredFile


@dataclass
class UploadBatch:
    """A batch of stored files living under ``{name}/{timestamp}``."""

    name: Optional[str]
    created_at: datetime
    directory: Path
    files: List[StoredFile] = field(default_factory=list)

    def add(self, stored_file: StoredFile) -> None:
        """Record a file accepted into this batch."""
        self.files.append(stored_file)

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def total_size(self) -> int:
        return sum(stored.size for stored in self.files)
