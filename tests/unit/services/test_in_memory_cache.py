import pytest

from src.adapter.services.cache import InMemoryCacheService


class FakeClock:
    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.mark.asyncio
async def test_entries_expire_after_ttl():
    clock = FakeClock()
    cache = InMemoryCacheService(default_ttl_seconds=5, timer=clock)

    await cache.set("projects:u1", {"n": 1})
    clock.now = 104.0
    assert await cache.get("projects:u1") == {"n": 1}
    clock.now = 105.0
    assert await cache.get("projects:u1") is None


@pytest.mark.asyncio
async def test_per_entry_ttl_overrides_default():
    clock = FakeClock()
    cache = InMemoryCacheService(default_ttl_seconds=60, timer=clock)

    await cache.set("short", "a", ttl_seconds=2)
    await cache.set("long", "b")
    clock.now = 103.0

    assert await cache.get("short") is None
    assert await cache.get("long") == "b"


@pytest.mark.asyncio
async def test_capacity_is_bounded():
    cache = InMemoryCacheService(max_entries=2)

    await cache.set("a", 1)
    await cache.set("b", 2)
    await cache.set("c", 3)

    assert len([k for k in "abc" if await cache.get(k) is not None]) == 2
    assert await cache.get("c") == 3


@pytest.mark.asyncio
async def test_pattern_invalidation():
    cache = InMemoryCacheService()
    await cache.set("projects:a", 1)
    await cache.set("projects:b", 2)
    await cache.set("other", 3)

    await cache.invalidate_pattern("projects:*")

    assert await cache.get("projects:a") is None
    assert await cache.get("projects:b") is None
    assert await cache.get("other") == 3


@pytest.mark.asyncio
async def test_invalidate_missing_key_is_noop():
    cache = InMemoryCacheService()

    await cache.invalidate("projects:nobody")

    assert await cache.get("projects:nobody") is None
