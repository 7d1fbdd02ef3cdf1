"""HTTP middleware for the media upload service."""

from .caching_middleware import CachingHeadersMiddleware
from .factory import MiddlewareFactory, configure_middleware
from .logging_middleware import RequestLoggingMiddleware
from .security_middleware import RateLimitMiddleware, RateLimitPolicy, parse_rate_limit

__all__ = [
    "CachingHeadersMiddleware",
    "MiddlewareFactory",
    "configure_middleware",
    "RequestLoggingMiddleware",
    "RateLimitMiddleware",
    "RateLimitPolicy",
    "parse_rate_limit",
]
