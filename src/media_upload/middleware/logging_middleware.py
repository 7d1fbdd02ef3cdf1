"""Request logging middleware.

Emits one call-log line per request, tags every response with a request ID
and its processing time, and binds the ID to ``request_id_var`` so log
records from downstream code carry it.
"""

import logging
import time
import uuid
from typing import List, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from ..config.logging_config import request_id_var

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Call logging for every request.

    Log level follows the response status: INFO below 400, WARNING for 4xx
    and ERROR for 5xx.
    """

    def __init__(self, app, exempt_paths: Optional[List[str]] = None):
        super().__init__(app)
        self.exempt_paths = exempt_paths or []

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        token = request_id_var.set(request_id)
        start_time = time.time()
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)
        processing_time = time.time() - start_time

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Processing-Time"] = f"{processing_time:.4f}"

        if not any(request.url.path.startswith(path) for path in self.exempt_paths):
            logger.log(
                self._level_for(response.status_code),
                f"{request.method} {request.url.path} - Status: {response.status_code} - "
                f"Duration: {int(processing_time * 1000)}ms - "
                f"Agent: {request.headers.get('User-Agent', 'unknown')}",
                extra={"request_id": request_id}
            )

        return response

    @staticmethod
    def _level_for(status_code: int) -> int:
        if status_code >= 500:
            return logging.ERROR
        if status_code >= 400:
            return logging.WARNING
        return logging.INFO
