"""Upload validators."""

from .media_type_validator import (
    MediaTypeValidator,
    MediaTypeValidatorConfig,
    create_media_type_validator,
    is_valid_media_type,
)
from .file_size_validator import (
    FileSizeValidator,
    FileSizeValidatorConfig,
    create_file_size_validator,
    is_valid_file_size,
)

__all__ = [
    "MediaTypeValidator",
    "MediaTypeValidatorConfig",
    "create_media_type_validator",
    "is_valid_media_type",
    "FileSizeValidator",
    "FileSizeValidatorConfig",
    "create_file_size_validator",
    "is_valid_file_size",
]
