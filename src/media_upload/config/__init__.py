"""Configuration module for the media upload service."""

from .constants import *
from .settings import UploadSettings, get_settings
from .logging_config import (
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    # Settings
    "UploadSettings",
    "get_settings",

    # Constants
    "DEFAULT_MAX_FILE_SIZE",
    "DEFAULT_COPY_BUFFER_SIZE",
    "MAX_SANITIZED_NAME_LENGTH",
    "SUPPORTED_IMAGE_TYPES",
    "SUPPORTED_VIDEO_TYPES",
    "SUPPORTED_MEDIA_TYPES",

    # Logging configuration
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]
