"""Cache Service Implementations

In-process TTL cache for single-worker deployments and a Redis-backed cache
for shared deployments. Both store JSON so cached values never alias the
caller's objects.
"""

import json
import logging
import time
from typing import Any, Dict, Optional, Tuple
import redis.asyncio as redis
from redis.exceptions import RedisError
from src.app.services.cache_service import CacheService

logger = logging.getLogger(__name__)


class InMemoryCacheService(CacheService):
    """
    Cache held in a process-local dict

    Expired entries are dropped lazily on read.
    """

    def __init__(self):
        self._entries: Dict[str, Tuple[float, str]] = {}

    async def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None

        expires_at, payload = entry
        if time.monotonic() >= expires_at:
            self._entries.pop(key, None)
            return None
        return json.loads(payload)

    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        self._entries[key] = (time.monotonic() + ttl_seconds, json.dumps(value, default=str))

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)


class RedisCacheService(CacheService):
    """
    Cache stored in Redis with native key expiry

    A Redis outage degrades to cache misses; it never fails the request.
    """

    def __init__(self, redis_url: str, key_prefix: str = "billing:"):
        """
        Initialize Redis cache

        Args:
            redis_url: Connection URL, e.g. redis://localhost:6379/0
            key_prefix: Namespace prepended to every key
        """
        self.client = redis.Redis.from_url(redis_url, decode_responses=True)
        self.key_prefix = key_prefix

    async def get(self, key: str) -> Optional[Any]:
        try:
            payload = await self.client.get(self.key_prefix + key)
        except RedisError as e:
            logger.warning(f"Cache get failed for {key}: {e}")
            return None
        if payload is None:
            return None
        return json.loads(payload)

    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        try:
            await self.client.set(
                self.key_prefix + key, json.dumps(value, default=str), ex=ttl_seconds
            )
        except RedisError as e:
            logger.warning(f"Cache set failed for {key}: {e}")

    async def delete(self, key: str) -> None:
        try:
            await self.client.delete(self.key_prefix + key)
        except RedisError as e:
            logger.warning(f"Cache delete failed for {key}: {e}")


def create_cache_service(backend: str, redis_url: Optional[str] = None) -> CacheService:
    """
    Factory function to create the configured cache service

    Args:
        backend: "memory" or "redis"
        redis_url: Required when backend is "redis"

    Returns:
        CacheService instance
    """
    if backend == "redis":
        if not redis_url:
            raise ValueError("REDIS_URL is required when CACHE_BACKEND is 'redis'")
        logger.info("Using Redis cache backend")
        return RedisCacheService(redis_url)

    if backend != "memory":
        logger.warning(f"Unknown CACHE_BACKEND '{backend}', falling back to in-memory cache")
    return InMemoryCacheService()
