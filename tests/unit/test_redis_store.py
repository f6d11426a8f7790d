"""Tests for the Redis store adapter."""

import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock, patch

from neo_cache_store import InMemoryStore, ReadThroughCache, RedisStore, Store


def scan_results(*keys):
    async def scan_iter(match=None):
        for key in keys:
            yield key
    return scan_iter


class TestRedisStore:
    """Test RedisStore against a mocked async client."""
    
    @pytest.fixture
    def store(self, mock_redis_client):
        return RedisStore(mock_redis_client, key_prefix="test:")
    
    def test_satisfies_store_protocol(self, store):
        assert isinstance(store, Store)
    
    def test_requires_client(self):
        with pytest.raises(ConnectionError):
            RedisStore(None)
    
    @pytest.mark.asyncio
    async def test_get_missing(self, store, mock_redis_client):
        assert await store.get("k") is None
        mock_redis_client.get.assert_awaited_once_with("test:k")
    
    @pytest.mark.asyncio
    async def test_get_deserializes(self, store, mock_redis_client):
        mock_redis_client.get.return_value = b'{"name":"acme","tags":{"__set__":["a"]}}'
        
        assert await store.get("tenant") == {"name": "acme", "tags": {"a"}}
    
    @pytest.mark.asyncio
    async def test_set_serializes(self, store, mock_redis_client):
        await store.set("k", {"when": datetime(2024, 1, 2, 3, 4, 5)})
        
        mock_redis_client.set.assert_awaited_once_with(
            "test:k", b'{"when":{"__datetime__":"2024-01-02T03:04:05"}}'
        )
    
    @pytest.mark.asyncio
    async def test_delete_reports_existence(self, store, mock_redis_client):
        mock_redis_client.delete.return_value = 1
        assert await store.delete("k") is True
        
        mock_redis_client.delete.return_value = 0
        assert await store.delete("k") is False
    
    @pytest.mark.asyncio
    async def test_has(self, store, mock_redis_client):
        mock_redis_client.exists.return_value = 1
        assert await store.has("k") is True
        mock_redis_client.exists.assert_awaited_with("test:k")
    
    @pytest.mark.asyncio
    async def test_clear_only_touches_prefix(self, store, mock_redis_client):
        mock_redis_client.scan_iter = MagicMock(side_effect=scan_results(b"test:a", b"test:b"))
        mock_redis_client.delete.return_value = 2
        
        await store.clear()
        
        mock_redis_client.scan_iter.assert_called_once_with(match="test:*")
        mock_redis_client.delete.assert_awaited_once_with(b"test:a", b"test:b")
    
    @pytest.mark.asyncio
    async def test_clear_batches_deletes(self, mock_redis_client):
        store = RedisStore(mock_redis_client, key_prefix="p:")
        store.CLEAR_BATCH_SIZE = 2
        mock_redis_client.scan_iter = MagicMock(side_effect=scan_results("p:1", "p:2", "p:3"))
        mock_redis_client.delete.return_value = 1
        
        await store.clear()
        
        assert mock_redis_client.delete.await_count == 2
    
    @pytest.mark.asyncio
    async def test_clear_with_no_keys(self, store, mock_redis_client):
        mock_redis_client.scan_iter = MagicMock(side_effect=scan_results())
        
        await store.clear()
        
        mock_redis_client.delete.assert_not_called()
    
    @pytest.mark.asyncio
    async def test_errors_propagate(self, store, mock_redis_client):
        mock_redis_client.get.side_effect = ConnectionError("redis down")
        
        with pytest.raises(ConnectionError):
            await store.get("k")
    
    @pytest.mark.asyncio
    async def test_close_only_owned_client(self, mock_redis_client):
        await RedisStore(mock_redis_client).close()
        mock_redis_client.aclose.assert_not_called()
        
        await RedisStore(mock_redis_client, owns_client=True).close()
        mock_redis_client.aclose.assert_awaited_once()
    
    def test_from_url_owns_client(self, mock_redis_client):
        with patch("neo_cache_store.infrastructure.repositories.redis_store.Redis") as redis_cls:
            redis_cls.from_url.return_value = mock_redis_client
            
            store = RedisStore.from_url("redis://cache:6379/1", key_prefix="svc:")
        
        redis_cls.from_url.assert_called_once_with("redis://cache:6379/1")
        assert store.key_prefix == "svc:"
        assert store._owns_client is True
    
    @pytest.mark.asyncio
    async def test_as_cache_for_read_through(self, store, mock_redis_client):
        """Test a Redis cache populated from an in-memory authoritative store."""
        authoritative = InMemoryStore({"a": "1"})
        cache = ReadThroughCache(store=authoritative, cache=store)
        
        assert await cache.get("a") == "1"
        mock_redis_client.exists.assert_awaited_once_with("test:a")
        mock_redis_client.set.assert_awaited_once_with("test:a", b'"1"')
