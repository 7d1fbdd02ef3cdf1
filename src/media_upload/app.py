"""Media upload API application.

FastAPI application factory wiring settings, exception handlers, the
middleware stack, the upload routes and the static front end.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from .api import register_exception_handlers
from .api.models import HealthResponse
from .config.settings import UploadSettings, get_settings
from .features.uploads.api import upload_router
from .middleware import configure_middleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings: UploadSettings = app.state.settings
    logger.info(
        f"Starting {settings.app_name} v{settings.app_version} "
        f"({settings.environment}), storing uploads in {settings.upload_root}"
    )
    yield
    logger.info(f"Shutting down {settings.app_name}")


def create_app(settings: Optional[UploadSettings] = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Settings to run with; defaults to the cached environment settings

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Upload, organize and export image and video files",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )
    app.state.settings = settings

    register_exception_handlers(app, debug=settings.debug)
    configure_middleware(app, settings)

    app.include_router(upload_router)
    _add_health_endpoints(app)
    _add_static_frontend(app, settings)

    return app


def _add_health_endpoints(app: FastAPI) -> None:
    """Add health check endpoint."""

    @app.api_route("/health", methods=["GET", "HEAD"], response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Basic health check endpoint."""
        return HealthResponse(status="healthy")


def _add_static_frontend(app: FastAPI, settings: UploadSettings) -> None:
    """Serve the bundled front end and redirect the root to it."""

    @app.get("/", include_in_schema=False)
    async def index() -> RedirectResponse:
        return RedirectResponse(url="/static/index.html")

    if settings.static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=settings.static_dir, html=True), name="static")
    else:
        logger.info(f"Static directory {settings.static_dir} not found; front end disabled")
