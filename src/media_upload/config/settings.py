"""
Application settings and configuration management.

Environment-driven settings for the media upload service. A single
UploadSettings instance is handed to every component at construction, so
tests can point the service at a temporary upload root.
"""
from pathlib import Path
from typing import List, Optional
from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..__version__ import __version__
from .constants import DEFAULT_COPY_BUFFER_SIZE, DEFAULT_MAX_FILE_SIZE


class UploadSettings(BaseSettings):
    """Media upload service settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Core Application Settings
    app_name: str = Field(default="Media Upload API")
    app_version: str = Field(default=__version__)
    debug: bool = Field(default=False)
    environment: str = Field(default="development")

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)

    # Storage Configuration
    upload_dir: Path = Field(default=Path("uploads"))
    export_dir: Optional[Path] = Field(default=None)
    static_dir: Path = Field(default=Path("static"))

    # Upload Limits
    max_file_size: int = Field(default=DEFAULT_MAX_FILE_SIZE, gt=0)
    copy_buffer_size: int = Field(default=DEFAULT_COPY_BUFFER_SIZE, gt=0)
    max_files_per_request: int = Field(default=1000, gt=0)

    # CORS Configuration
    cors_origins: List[str] = Field(default=["*"])
    cors_allow_credentials: bool = Field(default=True)

    # Compression
    gzip_minimum_size: int = Field(default=1024)

    # Rate Limiting Configuration
    rate_limit_enabled: bool = Field(default=True)
    upload_rate_limit: str = Field(default="100/minute")
    export_rate_limit: str = Field(default="10/minute")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def upload_root(self) -> Path:
        """Absolute path of the storage root."""
        return self.upload_dir.resolve()

    @property
    def export_root(self) -> Path:
        """Directory that receives export archives.

        Defaults to the parent of the upload root so an archive is never
        written inside the tree it is built from.
        """
        if self.export_dir is not None:
            return self.export_dir.resolve()
        return self.upload_root.parent


@lru_cache()
def get_settings() -> UploadSettings:
    """Get cached settings instance."""
    return UploadSettings()
