"""
Tests for the in-process LRU cache used to memoize reports.
"""

import pytest

from core.memory_cache import LRUCache


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


class TestLRUCache:
    """Test LRU eviction, expiry and statistics"""

    @pytest.mark.asyncio
    async def test_get_and_set(self, clock):
        cache = LRUCache(max_size=2, ttl_seconds=60, clock=clock)

        await cache.set("a", 1)

        assert await cache.get("a") == 1
        assert await cache.get("missing") is None

    @pytest.mark.asyncio
    async def test_entries_expire(self, clock):
        """Entries are dropped after their TTL"""
        cache = LRUCache(max_size=2, ttl_seconds=60, clock=clock)
        await cache.set("a", 1)

        clock.advance(61)

        assert await cache.get("a") is None
        assert cache.get_stats()["expirations"] == 1

    @pytest.mark.asyncio
    async def test_per_entry_ttl(self, clock):
        cache = LRUCache(max_size=2, ttl_seconds=60, clock=clock)
        await cache.set("short", 1, ttl=5)

        clock.advance(10)

        assert await cache.get("short") is None

    @pytest.mark.asyncio
    async def test_least_recently_used_is_evicted(self, clock):
        """Reading an entry protects it from eviction"""
        cache = LRUCache(max_size=2, ttl_seconds=60, clock=clock)
        await cache.set("a", 1)
        await cache.set("b", 2)
        await cache.get("a")

        await cache.set("c", 3)

        assert await cache.get("b") is None
        assert await cache.get("a") == 1
        assert await cache.get("c") == 3
        assert cache.get_stats()["evictions"] == 1

    @pytest.mark.asyncio
    async def test_get_or_compute(self, clock):
        """The compute function runs only on a miss"""
        cache = LRUCache(max_size=2, ttl_seconds=60, clock=clock)
        calls = []

        async def compute():
            calls.append(1)
            return "report"

        assert await cache.get_or_compute("key", compute) == "report"
        assert await cache.get_or_compute("key", compute) == "report"
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_delete_and_clear(self, clock):
        cache = LRUCache(max_size=5, ttl_seconds=60, clock=clock)
        await cache.set("a", 1)
        await cache.set("b", 2)

        assert await cache.delete("a") is True
        assert await cache.delete("a") is False

        await cache.clear()
        assert cache.get_stats()["size"] == 0

    @pytest.mark.asyncio
    async def test_stats(self, clock):
        cache = LRUCache(max_size=5, ttl_seconds=60, clock=clock)
        await cache.set("a", 1)
        await cache.get("a")
        await cache.get("b")

        stats = cache.get_stats()

        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["size"] == 1
        assert stats["max_size"] == 5
        assert stats["hit_rate"] == "50.00%"
