"""Middleware factory for FastAPI application configuration.

Configures the middleware stack from the application settings in a fixed
order.
"""

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
from starlette.middleware.gzip import GZipMiddleware

from ..config.constants import UPLOAD_NAME_FIELD
from ..config.settings import UploadSettings
from .caching_middleware import CachingHeadersMiddleware
from .logging_middleware import RequestLoggingMiddleware
from .security_middleware import RateLimitMiddleware, RateLimitPolicy

CORS_ALLOW_METHODS = ["OPTIONS", "GET", "POST", "PUT", "DELETE", "PATCH"]
CORS_ALLOW_HEADERS = [
    "Authorization",
    "Content-Type",
    "Access-Control-Allow-Origin",
    UPLOAD_NAME_FIELD,
]


class MiddlewareFactory:
    """Factory for configuring the FastAPI middleware stack."""

    def __init__(self, settings: UploadSettings):
        self.settings = settings

    def rate_limit_policies(self):
        """Named policies for the throttled routes."""
        return [
            RateLimitPolicy.from_string("upload", ["POST"], "/upload", self.settings.upload_rate_limit),
            RateLimitPolicy.from_string("export", ["GET", "HEAD"], "/export", self.settings.export_rate_limit),
        ]

    def configure_full_stack(self, app: FastAPI) -> FastAPI:
        """Configure complete middleware stack.

        Middleware order (outer to inner):
        1. Request logging (sees every response, including CORS preflights)
        2. CORS
        3. GZip compression
        4. Caching headers
        5. Rate limiting (innermost)
        """
        # Starlette wraps each added middleware around the previous ones,
        # so they are added innermost first.
        if self.settings.rate_limit_enabled:
            app.add_middleware(
                RateLimitMiddleware,
                policies=self.rate_limit_policies(),
                exempt_paths=["/health"]
            )

        app.add_middleware(CachingHeadersMiddleware)

        app.add_middleware(GZipMiddleware, minimum_size=self.settings.gzip_minimum_size)

        app.add_middleware(
            CORSMiddleware,
            allow_origins=self.settings.cors_origins,
            allow_credentials=self.settings.cors_allow_credentials,
            allow_methods=CORS_ALLOW_METHODS,
            allow_headers=CORS_ALLOW_HEADERS
        )

        app.add_middleware(RequestLoggingMiddleware)

        return app


def configure_middleware(app: FastAPI, settings: UploadSettings) -> FastAPI:
    """Configure the middleware stack for ``app`` from ``settings``."""
    return MiddlewareFactory(settings).configure_full_stack(app)
