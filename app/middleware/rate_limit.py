"""Fixed-window, per-client request limiting held in process memory."""
import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.config import settings

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT = "unknown"


@dataclass
class WindowRecord:
    count: int
    reset_time: float


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    count: int
    reset_time: float


class FixedWindowRateLimiter:
    """
    Count requests per key inside fixed windows.

    The first hit after ``reset_time`` starts a new window with count 1.
    Every other hit increments the count and is rejected once the count
    exceeds ``limit``. Keys are never evicted.
    """

    def __init__(
        self,
        limit: int = 100,
        window_seconds: float = 60,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._records: Dict[str, WindowRecord] = {}
        self._lock = threading.Lock()

    def hit(self, key: str) -> RateLimitResult:
        now = self._clock()
        with self._lock:
            record = self._records.get(key)
            if record is None or now > record.reset_time:
                record = WindowRecord(count=1, reset_time=now + self.window_seconds)
                self._records[key] = record
                return RateLimitResult(True, record.count, record.reset_time)

            record.count += 1
            return RateLimitResult(
                record.count <= self.limit, record.count, record.reset_time
            )

    def retry_after(self, result: RateLimitResult) -> int:
        """Whole seconds until the window holding ``result`` resets."""
        return max(1, math.ceil(result.reset_time - self._clock()))

    def reset(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        return len(self._records)


def client_key(request: Request, trust_forwarded: bool = False) -> str:
    """Identify the caller by network address; unresolvable callers share a bucket."""
    if trust_forwarded:
        forwarded = request.headers.get("x-forwarded-for", "").split(",")[0].strip()
        if forwarded:
            return forwarded
    if request.client and request.client.host:
        return request.client.host
    return UNKNOWN_CLIENT


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Reject callers over the limit with 429 before any authentication runs.

    The limiter lives on ``app.state.rate_limiter`` so it can be replaced or
    reset without touching module globals.
    """

    async def dispatch(self, request: Request, call_next):
        limiter: FixedWindowRateLimiter = request.app.state.rate_limiter
        if not settings.rate_limit_enabled:
            return await call_next(request)

        key = client_key(request, settings.rate_limit_trust_forwarded)
        result = limiter.hit(key)
        if not result.allowed:
            logger.warning(
                "Rate limit exceeded: client=%s, count=%d, path=%s",
                key,
                result.count,
                request.url.path,
            )
            return JSONResponse(
                status_code=429,
                content={"error": "Too many requests. Please try again later."},
                headers={"Retry-After": str(limiter.retry_after(result))},
            )

        return await call_next(request)
