"""
In-process memory cache.

TTL-bounded LRU cache used to memoize computed reports. Keys are plain
strings built by the caller from the inputs that determine the value.
"""

import time
import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Optional
from collections import OrderedDict

logger = logging.getLogger(__name__)


class LRUCache:
    """Async-safe LRU (Least Recently Used) cache with per-entry expiry."""

    def __init__(
        self,
        max_size: int = 1000,
        ttl_seconds: int = 60,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self.cache: "OrderedDict[str, tuple[Any, float]]" = OrderedDict()
        self.lock = asyncio.Lock()
        self.stats = {
            "hits": 0,
            "misses": 0,
            "evictions": 0,
            "expirations": 0
        }

    async def get(self, key: str) -> Optional[Any]:
        """Get value from cache."""
        async with self.lock:
            if key not in self.cache:
                self.stats["misses"] += 1
                return None

            value, expiry_time = self.cache[key]

            if self.clock() > expiry_time:
                del self.cache[key]
                self.stats["expirations"] += 1
                self.stats["misses"] += 1
                return None

            # Move to end (most recently used)
            self.cache.move_to_end(key)
            self.stats["hits"] += 1
            return value

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        """Set value in cache."""
        async with self.lock:
            expiry_time = self.clock() + (ttl or self.ttl_seconds)

            if key in self.cache:
                del self.cache[key]

            # Remove oldest items if at capacity
            while len(self.cache) >= self.max_size:
                self.cache.popitem(last=False)
                self.stats["evictions"] += 1

            self.cache[key] = (value, expiry_time)

    async def get_or_compute(
        self,
        key: str,
        compute_func: Callable[[], Awaitable[Any]],
        ttl: Optional[int] = None,
    ) -> Any:
        """Return the cached value or await compute_func and store its result"""
        cached_value = await self.get(key)
        if cached_value is not None:
            logger.debug(f"Cache hit for key: {key}")
            return cached_value

        value = await compute_func()
        await self.set(key, value, ttl)
        return value

    async def delete(self, key: str) -> bool:
        """Delete key from cache."""
        async with self.lock:
            if key in self.cache:
                del self.cache[key]
                return True
            return False

    async def clear(self) -> None:
        """Clear all cache entries."""
        async with self.lock:
            self.cache.clear()

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        total_requests = self.stats["hits"] + self.stats["misses"]
        hit_rate = (
            (self.stats["hits"] / total_requests * 100)
            if total_requests > 0
            else 0
        )

        return {
            **self.stats,
            "size": len(self.cache),
            "max_size": self.max_size,
            "hit_rate": f"{hit_rate:.2f}%"
        }
