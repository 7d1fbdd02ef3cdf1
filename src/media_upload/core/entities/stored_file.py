"""Stored file entity.

ONLY stored file - one validated file persisted inside an upload batch
directory.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True)
class StoredFile:
    """A file accepted and written to disk by an upload request.

    Owned by its batch directory; only removed by external deletion.
    """

    original_name: str
    sanitized_name: str
    saved_path: Path
    mime_type: str
    size: int
    uploaded_at: datetime
