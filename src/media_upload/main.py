"""Media upload API main entry point."""

from pathlib import Path
from typing import Optional

import uvicorn
from dotenv import load_dotenv

from .config.logging_config import LoggingConfig


def load_environment(project_root: Optional[Path] = None) -> None:
    """Load ``.env`` then ``.env.local`` (local overrides) from ``project_root``."""
    project_root = project_root or Path.cwd()
    env_file = project_root / ".env"
    if env_file.exists():
        load_dotenv(env_file)

    env_local_file = project_root / ".env.local"
    if env_local_file.exists():
        load_dotenv(env_local_file, override=True)


load_environment()

# Configure logging based on environment
LoggingConfig.configure()

from .app import create_app
from .config.settings import get_settings

logger = LoggingConfig.get_logger(__name__)

# Create the FastAPI application
app = create_app()


def main() -> None:
    """Run the application."""
    settings = get_settings()

    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")

    uvicorn.run(
        "media_upload.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
        access_log=False,
    )


if __name__ == "__main__":
    main()
