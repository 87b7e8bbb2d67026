"""Cache Service Interface

Key/value cache for read-mostly data such as the catalog tree.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class CacheService(ABC):
    """
    Abstract cache

    Values must be JSON-serializable so that every backend can store them.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """
        Get a cached value

        Returns:
            Cached value, or None on miss or expiry
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        """Store a value for ttl_seconds"""
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove a key (no-op when absent)"""
        pass
