"""Media upload core entities."""

from .stored_file import StoredFile
from .upload_batch import UploadBatch
from .validation_outcome import ValidationOutcome, OutcomeKind

__all__ = [
    "StoredFile",
    "UploadBatch",
    "ValidationOutcome",
    "OutcomeKind",
]
