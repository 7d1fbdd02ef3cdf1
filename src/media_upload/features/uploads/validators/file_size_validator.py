"""File size validator.

ONLY file size validation - checks the byte count actually written for a
file part against the configured limit.
"""

from dataclasses import dataclass
from typing import Optional

from ....config.constants import DEFAULT_MAX_FILE_SIZE
from ....core.entities import ValidationOutcome


@dataclass(frozen=True)
class FileSizeValidatorConfig:
    """Configuration for file size validator."""

    max_file_size_bytes: int = DEFAULT_MAX_FILE_SIZE  # 500MB default


class FileSizeValidator:
    """File size validation service.

    Empty files are rejected along with oversized ones.
    """

    def __init__(self, config: Optional[FileSizeValidatorConfig] = None):
        self._config = config or FileSizeValidatorConfig()

    @property
    def max_file_size(self) -> int:
        return self._config.max_file_size_bytes

    def is_valid_file_size(self, size: int) -> bool:
        """Check ``0 < size <= max_file_size``."""
        return 0 < size <= self._config.max_file_size_bytes

    def validate(self, filename: str, size: int) -> ValidationOutcome:
        """Validate the size of a persisted file."""
        if self.is_valid_file_size(size):
            return ValidationOutcome.accepted(filename)
        return ValidationOutcome.rejected_too_large(
            filename,
            f"File {filename} exceeds maximum size limit"
        )


_default_validator = FileSizeValidator()


def is_valid_file_size(size: int) -> bool:
    """Check a byte count against the default 500 MiB limit."""
    return _default_validator.is_valid_file_size(size)


def create_file_size_validator(config: Optional[FileSizeValidatorConfig] = None) -> FileSizeValidator:
    """Create file size validator."""
    return FileSizeValidator(config)
