"""Caching headers middleware."""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

JSON_CACHE_CONTROL = "no-cache"
HTML_CACHE_CONTROL = "max-age=3600"


class CachingHeadersMiddleware(BaseHTTPMiddleware):
    """Sets ``Cache-Control`` by content type unless a route already did."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        if "cache-control" in response.headers:
            return response

        content_type = response.headers.get("content-type", "")
        if content_type.startswith("application/json"):
            response.headers["Cache-Control"] = JSON_CACHE_CONTROL
        elif content_type.startswith("text/html"):
            response.headers["Cache-Control"] = HTML_CACHE_CONTROL

        return response
