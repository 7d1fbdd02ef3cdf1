"""Rate limiting middleware.

In-memory sliding-window limits per client IP, with named policies bound to
specific routes.
"""

import logging
import math
import time
from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Callable, Deque, Dict, FrozenSet, Iterable, List, Optional, Tuple

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)

PERIOD_SECONDS = {
    "second": 1,
    "minute": 60,
    "hour": 3600,
    "day": 86400
}


def parse_rate_limit(rate_limit_str: str) -> Tuple[int, int]:
    """Parse rate limit string (e.g., '100/minute') to (count, seconds)."""
    parts = rate_limit_str.split("/")
    if len(parts) != 2:
        raise ValueError(f"Invalid rate limit format: {rate_limit_str}")

    count = int(parts[0])
    period = parts[1].strip().lower()

    if period not in PERIOD_SECONDS:
        raise ValueError(f"Invalid period: {period}")

    return count, PERIOD_SECONDS[period]


@dataclass(frozen=True)
class RateLimitPolicy:
    """A named limit applied to one path for a set of methods."""

    name: str
    methods: FrozenSet[str]
    path: str
    limit: int
    window_seconds: int

    @classmethod
    def from_string(
        cls,
        name: str,
        methods: Iterable[str],
        path: str,
        rate_limit: str
    ) -> "RateLimitPolicy":
        limit, window_seconds = parse_rate_limit(rate_limit)
        return cls(name, frozenset(m.upper() for m in methods), path, limit, window_seconds)

    def matches(self, request: Request) -> bool:
        return request.method in self.methods and request.url.path == self.path


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Sliding-window rate limiting per client IP and policy.

    Keys whose window has fully elapsed are swept at most once every
    ``sweep_interval`` seconds, so the log only holds active clients.
    """

    def __init__(
        self,
        app,
        policies: List[RateLimitPolicy],
        exempt_paths: Optional[List[str]] = None,
        sweep_interval: float = 60.0,
        clock: Callable[[], float] = time.time
    ):
        super().__init__(app)
        self.policies = policies
        self.exempt_paths = exempt_paths or ["/health"]
        self.sweep_interval = sweep_interval
        self.clock = clock
        self.request_log: Dict[Tuple[str, str], Deque[float]] = defaultdict(deque)
        self._windows = {policy.name: policy.window_seconds for policy in policies}
        self._last_sweep = clock()

    async def dispatch(self, request: Request, call_next) -> Response:
        """Apply rate limiting."""
        if any(request.url.path.startswith(path) for path in self.exempt_paths):
            return await call_next(request)

        policy = self._find_policy(request)
        if policy is None:
            return await call_next(request)

        current_time = self.clock()
        if current_time - self._last_sweep >= self.sweep_interval:
            self._sweep_expired(current_time)

        client_ip = self._get_client_ip(request)
        limit_key = (policy.name, client_ip)
        request_times = self.request_log[limit_key]

        while request_times and request_times[0] <= current_time - policy.window_seconds:
            request_times.popleft()

        if len(request_times) >= policy.limit:
            retry_after = max(1, math.ceil(request_times[0] + policy.window_seconds - current_time))
            logger.warning(
                f"Rate limit exceeded: policy={policy.name}, client={client_ip}, path={request.url.path}"
            )
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={
                    "success": False,
                    "error": "Too many requests",
                    "details": f"Rate limit exceeded: {policy.limit} requests per {policy.window_seconds} seconds"
                },
                headers={
                    "Retry-After": str(retry_after),
                    "X-RateLimit-Limit": str(policy.limit),
                    "X-RateLimit-Remaining": "0",
                    "X-RateLimit-Reset": str(int(current_time + retry_after))
                }
            )

        request_times.append(current_time)
        remaining = max(0, policy.limit - len(request_times))
        reset_at = int(request_times[0] + policy.window_seconds)

        response = await call_next(request)

        response.headers.update({
            "X-RateLimit-Limit": str(policy.limit),
            "X-RateLimit-Remaining": str(remaining),
            "X-RateLimit-Reset": str(reset_at)
        })
        return response

    def _sweep_expired(self, current_time: float) -> None:
        """Drop keys with no request inside their policy window."""
        for key in list(self.request_log):
            request_times = self.request_log[key]
            window = self._windows[key[0]]
            if not request_times or request_times[-1] <= current_time - window:
                del self.request_log[key]
        self._last_sweep = current_time

    def _find_policy(self, request: Request) -> Optional[RateLimitPolicy]:
        for policy in self.policies:
            if policy.matches(request):
                return policy
        return None

    def _get_client_ip(self, request: Request) -> str:
        """Get client IP address."""
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        real_ip = request.headers.get("X-Real-IP")
        if real_ip:
            return real_ip

        if request.client:
            return request.client.host

        return "unknown"
