"""Tests for cache component construction from configuration."""

import pytest
from unittest.mock import patch

from neo_cache_store import (
    CachePolicy,
    CacheStoreConfig,
    CacheStoreConfigurationError,
    FallbackCache,
    InMemoryStore,
    ReadThroughCache,
    StoreBackend,
    create_cache_store,
)


class TestCreateCacheStore:
    """Test create_cache_store."""
    
    def test_default_policy_is_read_through(self):
        cache = create_cache_store(InMemoryStore())
        
        assert isinstance(cache, ReadThroughCache)
        assert isinstance(cache.cache, InMemoryStore)
    
    def test_policy_argument(self):
        assert isinstance(create_cache_store(InMemoryStore(), policy="fallback"), FallbackCache)
        assert isinstance(
            create_cache_store(InMemoryStore(), policy=CachePolicy.READ_THROUGH),
            ReadThroughCache
        )
    
    def test_policy_from_config(self):
        config = CacheStoreConfig(policy=CachePolicy.FALLBACK)
        
        assert isinstance(create_cache_store(InMemoryStore(), config=config), FallbackCache)
    
    def test_argument_overrides_config(self):
        config = CacheStoreConfig(policy=CachePolicy.FALLBACK)
        
        cache = create_cache_store(InMemoryStore(), policy="read_through", config=config)
        
        assert isinstance(cache, ReadThroughCache)
    
    def test_unknown_policy(self):
        with pytest.raises(CacheStoreConfigurationError):
            create_cache_store(InMemoryStore(), policy="write_back")
    
    def test_explicit_cache_is_used(self):
        cache_store = InMemoryStore()
        
        cache = create_cache_store(InMemoryStore(), cache=cache_store)
        
        assert cache.cache is cache_store
    
    def test_redis_backend_builds_redis_cache(self, mock_redis_client):
        config = CacheStoreConfig(cache_backend=StoreBackend.REDIS, redis_url="redis://cache:6379/0")
        
        with patch("neo_cache_store.infrastructure.repositories.redis_store.Redis") as redis_cls:
            redis_cls.from_url.return_value = mock_redis_client
            cache = create_cache_store(InMemoryStore(), config=config)
        
        redis_cls.from_url.assert_called_once_with("redis://cache:6379/0")
        assert cache.cache.key_prefix == config.redis_key_prefix
    
    @pytest.mark.asyncio
    async def test_log_cache_operations(self, caplog):
        config = CacheStoreConfig(log_cache_operations=True)
        cache = create_cache_store(InMemoryStore({"a": "1"}), config=config)
        
        with caplog.at_level("DEBUG", logger="neo_cache_store.application.services.base_cache_store"):
            await cache.get("a")
        
        messages = [record.getMessage() for record in caplog.records]
        assert any("cache:miss" in message for message in messages)
        assert any("cache:set" in message for message in messages)
    
    @pytest.mark.asyncio
    async def test_redis_backend_cache_closes_its_client(self, mock_redis_client):
        config = CacheStoreConfig(cache_backend=StoreBackend.REDIS)
        
        with patch("neo_cache_store.infrastructure.repositories.redis_store.Redis") as redis_cls:
            redis_cls.from_url.return_value = mock_redis_client
            cache = create_cache_store(InMemoryStore(), config=config)
        
        await cache.cache.close()
        
        mock_redis_client.aclose.assert_awaited_once()
