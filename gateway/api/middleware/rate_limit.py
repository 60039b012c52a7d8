"""Rate limiting middleware."""

import asyncio
import time
from collections import defaultdict

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Simple in-memory sliding-window rate limiter.

    Only paths under `prefix` are limited.
    """

    def __init__(self, app, calls: int = 100, period: int = 60, prefix: str = "/api") -> None:
        """Initialize rate limiter.

        Args:
            app: FastAPI/Starlette application
            calls: Max calls per period
            period: Period in seconds
            prefix: Path prefix subject to limiting
        """
        super().__init__(app)
        self.calls = calls
        self.period = period
        self.prefix = prefix.rstrip("/") + "/"
        self.requests: dict[str, list[float]] = defaultdict(list)
        self._lock = asyncio.Lock()

    async def dispatch(self, request: Request, call_next) -> Response:
        """Process request with rate limiting."""
        if not request.url.path.startswith(self.prefix):
            return await call_next(request)

        client_id = self._get_client_id(request)

        async with self._lock:
            if not self._is_allowed(client_id):
                return JSONResponse(
                    status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                    content={
                        "detail": {
                            "error": "rate_limited",
                            "message": f"Too many requests. Limit: {self.calls} per {self.period}s",
                            "details": {"retry_after": self.period},
                        }
                    },
                    headers={"Retry-After": str(self.period)},
                )

            self._record_request(client_id)

        return await call_next(request)

    def _get_client_id(self, request: Request) -> str:
        """Get client identifier for rate limiting.

        Priority:
        1. Bearer token from Authorization header
        2. X-Forwarded-For header (for proxied requests)
        3. Client IP address
        """
        auth = request.headers.get("Authorization", "")
        if auth.startswith("Bearer "):
            return f"key:{auth[7:]}"

        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return f"ip:{forwarded.split(',')[0].strip()}"

        client_host = request.client.host if request.client else "unknown"
        return f"ip:{client_host}"

    def _is_allowed(self, client_id: str) -> bool:
        """Check if request is within rate limit."""
        cutoff = time.monotonic() - self.period

        recent = [t for t in self.requests.get(client_id, ()) if t > cutoff]

        # Drop idle clients so the map only holds ids active in the window
        if recent:
            self.requests[client_id] = recent
        else:
            self.requests.pop(client_id, None)

        return len(recent) < self.calls

    def _record_request(self, client_id: str) -> None:
        self.requests[client_id].append(time.monotonic())

    def reset(self) -> None:
        """Clear all rate limit data. Useful for testing."""
        self.requests.clear()
