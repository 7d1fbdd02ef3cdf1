"""Storage status response model.

ONLY storage statistics - file count and byte total under the upload root.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StatusResponse(BaseModel):
    """Aggregate statistics of the storage root."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = Field(default=True)
    total_files: int = Field(default=0, ge=0, description="Regular files under the upload root")
    total_size_bytes: int = Field(default=0, ge=0, description="Sum of their sizes in bytes")
