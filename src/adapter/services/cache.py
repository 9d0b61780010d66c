"""
Cache backends for ICacheService.

Values are stored as JSON. Every backend call is allowed to fail: errors
are logged and a failed get reads as a miss.
"""

import fnmatch
import json
import logging
import time
from typing import Any, Callable, Optional

from cachetools import TLRUCache
from redis import asyncio as aioredis

from src.app.services.cache_service import ICacheService

logger = logging.getLogger(__name__)


class RedisCacheService(ICacheService):
    """Redis-backed cache using the asyncio client"""

    def __init__(self, redis_url: str, default_ttl_seconds: int = 300):
        self.client: aioredis.Redis = aioredis.from_url(redis_url, decode_responses=True)
        self.default_ttl_seconds = default_ttl_seconds

    async def get(self, key: str) -> Optional[Any]:
        try:
            data = await self.client.get(key)
        except Exception:
            logger.exception(f"Redis GET failed for {key}")
            return None
        if data is None:
            return None
        try:
            return json.loads(data)
        except ValueError:
            logger.warning(f"Dropping undecodable cache entry {key}")
            return None

    async def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        try:
            serialized = json.dumps(value, ensure_ascii=False, default=str)
            await self.client.set(key, serialized, ex=ttl_seconds or self.default_ttl_seconds)
        except Exception:
            logger.exception(f"Redis SET failed for {key}")

    async def invalidate(self, key: str) -> None:
        try:
            await self.client.delete(key)
        except Exception:
            logger.exception(f"Redis DEL failed for {key}")

    async def invalidate_pattern(self, pattern: str) -> None:
        try:
            keys = [key async for key in self.client.scan_iter(match=pattern)]
            if keys:
                await self.client.delete(*keys)
        except Exception:
            logger.exception(f"Redis pattern delete failed for {pattern}")

    async def close(self) -> None:
        await self.client.aclose()


class InMemoryCacheService(ICacheService):
    """
    Process-local cache for development and tests.

    Entries are stored as (ttl, json) in a cachetools TLRUCache, so each
    entry expires after its own TTL. Once max_entries is reached the entries
    closest to expiry are evicted first.
    """

    def __init__(
        self,
        default_ttl_seconds: int = 300,
        max_entries: int = 1024,
        timer: Callable[[], float] = time.monotonic,
    ):
        self.default_ttl_seconds = default_ttl_seconds
        self._entries: TLRUCache = TLRUCache(
            maxsize=max_entries,
            ttu=lambda _key, entry, now: now + entry[0],
            timer=timer,
        )

    async def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        return json.loads(entry[1])

    async def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        self._entries[key] = (
            ttl_seconds or self.default_ttl_seconds,
            json.dumps(value, ensure_ascii=False, default=str),
        )

    async def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    async def invalidate_pattern(self, pattern: str) -> None:
        for key in [k for k in list(self._entries.keys()) if fnmatch.fnmatchcase(k, pattern)]:
            self._entries.pop(key, None)

    async def close(self) -> None:
        self._entries.clear()
