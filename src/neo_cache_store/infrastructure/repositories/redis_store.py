"""Redis store repository.

ONLY Redis implementation - store adapter over an async Redis client so a
Redis database can act as the authoritative store or as the cache.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Any, List, Optional

from redis.asyncio import Redis

from ..serializers.json_serializer import JSONSerializer

logger = logging.getLogger(__name__)


class RedisStore:
    """Redis-backed async store.
    
    Features:
    - Keys namespaced under a prefix so clear() only touches this store
    - JSON value serialization with extended type support
    - Injected client, or an owned client built from a URL
    
    Redis errors propagate unchanged to the caller.
    """
    
    CLEAR_BATCH_SIZE = 500
    
    def __init__(
        self,
        redis_client: Redis,
        key_prefix: str = "cache-store:",
        serializer: Optional[JSONSerializer] = None,
        owns_client: bool = False
    ):
        """Initialize Redis store.
        
        Args:
            redis_client: Redis client instance (async Redis connection)
            key_prefix: Prefix for all keys written by this store
            serializer: Value serializer, JSON by default
            owns_client: Close the client in close()
        """
        if redis_client is None:
            raise ConnectionError("Redis client not configured")
        
        self._redis_client = redis_client
        self._key_prefix = key_prefix
        self._serializer = serializer or JSONSerializer()
        self._owns_client = owns_client
    
    @classmethod
    def from_url(
        cls,
        url: str,
        key_prefix: str = "cache-store:",
        serializer: Optional[JSONSerializer] = None
    ) -> "RedisStore":
        """Create a store with its own client connected to url."""
        client = Redis.from_url(url)
        logger.debug("Created Redis client for store (prefix=%s)", key_prefix)
        return cls(client, key_prefix=key_prefix, serializer=serializer, owns_client=True)
    
    @property
    def key_prefix(self) -> str:
        """Prefix applied to every key."""
        return self._key_prefix
    
    def _build_redis_key(self, key: Any) -> str:
        """Build full Redis key with prefix."""
        return f"{self._key_prefix}{key}"
    
    async def get(self, key: Any) -> Optional[Any]:
        """Get value by key."""
        payload = await self._redis_client.get(self._build_redis_key(key))
        if payload is None:
            return None
        return self._serializer.deserialize(payload)
    
    async def set(self, key: Any, value: Any) -> None:
        """Set value for key."""
        payload = self._serializer.serialize(value)
        await self._redis_client.set(self._build_redis_key(key), payload)
    
    async def delete(self, key: Any) -> bool:
        """Delete value by key."""
        deleted = await self._redis_client.delete(self._build_redis_key(key))
        return deleted > 0
    
    async def has(self, key: Any) -> bool:
        """Check if key exists."""
        count = await self._redis_client.exists(self._build_redis_key(key))
        return count > 0
    
    async def clear(self) -> None:
        """Delete every key under this store's prefix."""
        batch: List[Any] = []
        removed = 0
        
        async for redis_key in self._redis_client.scan_iter(match=f"{self._key_prefix}*"):
            batch.append(redis_key)
            if len(batch) >= self.CLEAR_BATCH_SIZE:
                removed += await self._redis_client.delete(*batch)
                batch = []
        
        if batch:
            removed += await self._redis_client.delete(*batch)
        
        logger.debug("Cleared %d keys with prefix %s", removed, self._key_prefix)
    
    async def close(self) -> None:
        """Close the Redis client if this store created it."""
        if self._owns_client:
            await self._redis_client.aclose()
    
    def __repr__(self) -> str:
        return f"RedisStore(key_prefix={self._key_prefix!r})"
