from abc import ABC, abstractmethod
from typing import Any, Optional


class ICacheService(ABC):
    """
    Cache-aside store for read views such as per-user project lists.

    Never a source of truth: a miss or an outage only costs a database read.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        pass

    @abstractmethod
    async def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        pass

    @abstractmethod
    async def invalidate(self, key: str) -> None:
        """Drop a single key"""
        pass

    @abstractmethod
    async def invalidate_pattern(self, pattern: str) -> None:
        """Drop every key matching a glob pattern"""
        pass


def project_list_key(user_id) -> str:
    return f"projects:{user_id}"
