"""Error response model.

ONLY error responses - the JSON body of every failed request.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error body."""

    success: bool = Field(default=False)
    error: str = Field(..., description="Short reason")
    details: Optional[str] = Field(default=None, description="Human-readable explanation")
