"""Fixed-window rate limiter for mutating endpoints.

A throughput/abuse control only: it does not serialize writers across
processes.
"""

import logging
import threading
import time

from fastapi import HTTPException, Request

logger = logging.getLogger(__name__)

TOO_MANY_REQUESTS = "Too many requests, please try again later."


class RateLimiter:
    """In-memory per-client request counter over fixed time windows."""

    def __init__(self, max_requests: int = 1, window_seconds: float = 1.0) -> None:
        self._max_requests = max(1, int(max_requests))
        self._window = max(0.001, float(window_seconds))
        self._windows: dict[str, tuple[float, int]] = {}
        self._lock = threading.Lock()

    def hit(self, key: str) -> bool:
        """Count a request for key. False when the key is over its limit."""
        with self._lock:
            now = time.monotonic()
            self._prune(now)
            started, count = self._windows.get(key, (now, 0))
            if count >= self._max_requests:
                return False
            self._windows[key] = (started, count + 1)
            return True

    def _prune(self, now: float) -> None:
        expired = [k for k, (started, _) in self._windows.items() if now - started >= self._window]
        for key in expired:
            del self._windows[key]

    def tracked_clients(self) -> int:
        with self._lock:
            return len(self._windows)

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()

    async def __call__(self, request: Request) -> None:
        key = request.client.host if request.client else "anonymous"
        if not self.hit(key):
            logger.warning("Rate limit exceeded for %s %s from %s", request.method, request.url.path, key)
            raise HTTPException(429, TOO_MANY_REQUESTS)


async def rate_limit(request: Request) -> None:
    """Route dependency: apply the app's configured limiter."""
    await request.app.state.rate_limiter(request)
