"""Rate limiting dependency for FastAPI.

In-memory token buckets keyed by client address. Each bucket holds
up to RATE_LIMIT_PER_MINUTE tokens and refills continuously.
"""

import math
import time
from dataclasses import dataclass, field
from threading import Lock
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from trailerhub.settings import settings


@dataclass
class RateLimitBucket:
    """Token bucket of one client.

    Attributes:
        tokens: Currently available request tokens.
        last_update: Timestamp of the last refill.
    """

    tokens: float
    last_update: float = field(default_factory=time.monotonic)


class RateLimiter:
    """Thread-safe token bucket limiter.

    Attributes:
        capacity: Bucket size, also the per-minute budget.
    """

    def __init__(self, max_requests_per_minute: int) -> None:
        self.capacity = float(max_requests_per_minute)
        self._refill_per_second = max_requests_per_minute / 60.0
        self._buckets: dict[str, RateLimitBucket] = {}
        self._lock = Lock()

    def _bucket(self, key: str) -> RateLimitBucket:
        bucket = self._buckets.get(key)
        if bucket is None:
            bucket = self._buckets[key] = RateLimitBucket(tokens=self.capacity)
            return bucket

        now = time.monotonic()
        bucket.tokens = min(
            self.capacity,
            bucket.tokens + (now - bucket.last_update) * self._refill_per_second,
        )
        bucket.last_update = now
        return bucket

    def acquire(self, key: str) -> float:
        """Take one token for a client.

        Args:
            key: Client identifier.

        Returns:
            0 when allowed, otherwise seconds until a token is available.
        """
        with self._lock:
            bucket = self._bucket(key)
            if bucket.tokens >= 1.0:
                bucket.tokens -= 1.0
                return 0.0
            if self._refill_per_second <= 0:
                return 60.0
            return (1.0 - bucket.tokens) / self._refill_per_second

    def remaining(self, key: str) -> int:
        """Whole tokens left for a client."""
        with self._lock:
            return int(self._bucket(key).tokens)

    def reset(self) -> None:
        """Forget every bucket."""
        with self._lock:
            self._buckets.clear()


_rate_limiter: RateLimiter | None = None


def get_rate_limiter() -> RateLimiter:
    """Get or create the process-wide limiter."""
    global _rate_limiter
    if _rate_limiter is None:
        _rate_limiter = RateLimiter(settings.security.rate_limit_per_minute)
    return _rate_limiter


def check_rate_limit(
    request: Request,
    limiter: Annotated[RateLimiter, Depends(get_rate_limiter)],
) -> None:
    """FastAPI dependency enforcing the per-client budget.

    Raises:
        HTTPException: 429 with Retry-After when the bucket is empty.
    """
    wait = limiter.acquire(client_key(request))
    if wait > 0:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Rate limit exceeded. Try again later.",
            headers={"Retry-After": str(math.ceil(wait))},
        )


def client_key(request: Request) -> str:
    """Client address, honouring the first X-Forwarded-For hop."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"
