"""Unit tests for cache service backends"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from redis.exceptions import RedisError

from src.adapter.services.cache_service import (
    InMemoryCacheService,
    RedisCacheService,
    create_cache_service,
)


@pytest.mark.asyncio
class TestInMemoryCacheService:

    async def test_set_get_delete(self):
        cache = InMemoryCacheService()

        await cache.set("catalog:tree", {"categories": []}, 60)
        assert await cache.get("catalog:tree") == {"categories": []}

        await cache.delete("catalog:tree")
        assert await cache.get("catalog:tree") is None

    async def test_expired_entry_is_a_miss(self):
        cache = InMemoryCacheService()

        await cache.set("catalog:tree", {"categories": []}, 0)

        assert await cache.get("catalog:tree") is None

    async def test_returned_value_is_a_copy(self):
        cache = InMemoryCacheService()
        value = {"categories": [{"id": 1}]}
        await cache.set("k", value, 60)

        value["categories"].clear()

        assert await cache.get("k") == {"categories": [{"id": 1}]}


@pytest.mark.asyncio
class TestRedisCacheService:

    @pytest.fixture
    def cache(self):
        cache = RedisCacheService("redis://localhost:6379/0", key_prefix="test:")
        cache.client = MagicMock()
        return cache

    async def test_prefix_and_json(self, cache):
        cache.client.get = AsyncMock(return_value='{"a": 1}')
        cache.client.set = AsyncMock()

        await cache.set("k", {"a": 1}, 30)
        value = await cache.get("k")

        cache.client.set.assert_called_once_with("test:k", '{"a": 1}', ex=30)
        cache.client.get.assert_called_once_with("test:k")
        assert value == {"a": 1}

    async def test_outage_degrades_to_miss(self, cache):
        cache.client.get = AsyncMock(side_effect=RedisError("connection refused"))
        cache.client.delete = AsyncMock(side_effect=RedisError("connection refused"))

        assert await cache.get("k") is None
        await cache.delete("k")


class TestCreateCacheService:

    def test_memory(self):
        assert isinstance(create_cache_service("memory"), InMemoryCacheService)

    def test_unknown_backend_falls_back_to_memory(self):
        assert isinstance(create_cache_service("memcached"), InMemoryCacheService)

    def test_redis_requires_url(self):
        with pytest.raises(ValueError):
            create_cache_service("redis", None)

    def test_redis(self):
        assert isinstance(create_cache_service("redis", "redis://localhost:6379/0"), RedisCacheService)
