"""Fixed-window rate limiting for public endpoints.

The in-memory limiter only works for a single process; use the Redis
limiter when running more than one instance.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict

import redis

logger = logging.getLogger(__name__)


class IRateLimiter(ABC):

    @abstractmethod
    def hit(self, key: str) -> bool:
        """Record one attempt for key. False when the limit is already reached."""
        pass


@dataclass
class _Window:
    count: int
    reset_at: float


class InMemoryRateLimiter(IRateLimiter):

    def __init__(self, limit: int, window_seconds: int, clock: Callable[[], float] = time.monotonic):
        self.limit = limit
        self.window_seconds = window_seconds
        self.clock = clock
        self._windows: Dict[str, _Window] = {}

    def hit(self, key: str) -> bool:
        now = self.clock()
        window = self._windows.get(key)

        if window is None or now > window.reset_at:
            self._purge(now)
            self._windows[key] = _Window(count=1, reset_at=now + self.window_seconds)
            return True
        if window.count >= self.limit:
            return False
        window.count += 1
        return True

    def _purge(self, now: float) -> None:
        expired = [key for key, window in self._windows.items() if now > window.reset_at]
        for key in expired:
            del self._windows[key]


class RedisRateLimiter(IRateLimiter):

    def __init__(self, client: "redis.Redis", limit: int, window_seconds: int, prefix: str = "ratelimit"):
        self.client = client
        self.limit = limit
        self.window_seconds = window_seconds
        self.prefix = prefix

    def hit(self, key: str) -> bool:
        redis_key = f"{self.prefix}:{key}"
        try:
            # SET NX starts the window with its TTL; works on servers older than Redis 7
            pipe = self.client.pipeline()
            pipe.set(redis_key, 0, ex=self.window_seconds, nx=True)
            pipe.incr(redis_key)
            _, count = pipe.execute()
        except redis.RedisError as e:
            # Fail open: inquiries should not break because Redis is down
            logger.warning("Rate limiter unavailable, allowing request: %s", e)
            return True
        return int(count) <= self.limit
