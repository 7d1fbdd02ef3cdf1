"""Upload response models.

ONLY upload responses - structures the result of a successful upload
request for the JSON API.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ......core.entities import StoredFile, UploadBatch


class UploadedFileInfo(BaseModel):
    """Metadata of one stored file."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    original_name: str = Field(..., description="Client-supplied file name")
    saved_path: str = Field(..., description="Absolute path of the stored file")
    mime_type: str = Field(..., description="Declared MIME type")
    size: int = Field(..., gt=0, description="Stored size in bytes")
    uploaded_at: str = Field(..., description="ISO-8601 UTC instant the file was stored")

    @classmethod
    def from_stored_file(cls, stored_file: StoredFile) -> "UploadedFileInfo":
        return cls(
            original_name=stored_file.original_name,
            saved_path=str(stored_file.saved_path),
            mime_type=stored_file.mime_type,
            size=stored_file.size,
            uploaded_at=stored_file.uploaded_at.isoformat().replace("+00:00", "Z"),
        )


class UploadResponse(BaseModel):
    """Response for a completed upload batch."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = Field(default=True)
    message: str = Field(..., description="Human-readable summary")
    uploaded_files: List[UploadedFileInfo] = Field(default_factory=list)
    total_files: int = Field(..., ge=1)
    total_size: int = Field(..., ge=1, description="Sum of stored sizes in bytes")
    upload_path: str = Field(..., description="Absolute batch directory")

    @classmethod
    def from_batch(cls, batch: UploadBatch) -> "UploadResponse":
        """Build the response from a completed batch."""
        return cls(
            success=True,
            message=f"Successfully uploaded {batch.file_count} file(s)",
            uploaded_files=[UploadedFileInfo.from_stored_file(f) for f in batch.files],
            total_files=batch.file_count,
            total_size=batch.total_size,
            upload_path=str(batch.directory),
        )
