"""Media type validator.

ONLY media type validation - checks the MIME type a client declared for a
file part against the image/video allow-list.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from ....config.constants import SUPPORTED_MEDIA_TYPES
from ....core.entities import ValidationOutcome


@dataclass(frozen=True)
class MediaTypeValidatorConfig:
    """Configuration for media type validator."""

    allowed_mime_types: FrozenSet[str] = field(default=SUPPORTED_MEDIA_TYPES)


class MediaTypeValidator:
    """Declared MIME type validation service.

    The declared value is compared verbatim; parameters such as
    ``; charset=`` are not stripped, and no content sniffing is done.
    """

    def __init__(self, config: Optional[MediaTypeValidatorConfig] = None):
        self._config = config or MediaTypeValidatorConfig()

    def is_valid_media_type(self, declared_mime_type: Optional[str]) -> bool:
        """Check whether a declared MIME type is in the allow-list."""
        if declared_mime_type is None:
            return False
        return declared_mime_type in self._config.allowed_mime_types

    def validate(self, filename: str, declared_mime_type: Optional[str]) -> ValidationOutcome:
        """Validate a file part's declared MIME type."""
        if self.is_valid_media_type(declared_mime_type):
            return ValidationOutcome.accepted(filename)
        return ValidationOutcome.rejected_invalid_type(
            filename,
            f"File {filename} has unsupported type: {declared_mime_type}"
        )


_default_validator = MediaTypeValidator()


def is_valid_media_type(declared_mime_type: Optional[str]) -> bool:
    """Check a MIME type against the default allow-list."""
    return _default_validator.is_valid_media_type(declared_mime_type)


def create_media_type_validator(config: Optional[MediaTypeValidatorConfig] = None) -> MediaTypeValidator:
    """Create media type validator."""
    return MediaTypeValidator(config)
