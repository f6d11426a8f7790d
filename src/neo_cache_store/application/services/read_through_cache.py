"""Read-through cache service.

ONLY cache-preferred reads - serves from the cache when it holds the key
and populates it from the authoritative store on a miss.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Optional

from ...core.events.cache_event import CacheEvent
from .base_cache_store import BaseCacheStore, K, V


class ReadThroughCache(BaseCacheStore[K, V]):
    """Read-through cache.
    
    Optimizes for cache-speed reads, assuming the cache is a faithful subset
    of the authoritative store.
    """
    
    async def get(self, key: K) -> Optional[V]:
        """Get value from the cache, or from the store on a miss.
        
        Existence check and read against the cache are separate calls; if
        the cache drops the key in between, the hit resolves to None.
        
        Fires:
            cache:hit(key, value) when the cache holds the key
            cache:miss(key) otherwise, then cache:set(key, value) if the
            store has a value
        """
        if await self._cache.has(key):
            value = await self._cache.get(key)
            self._emit(CacheEvent.HIT, key, value)
            return value
        
        self._emit(CacheEvent.MISS, key)
        
        value = await self._store.get(key)
        if value is not None:
            await self._cache.set(key, value)
            self._emit(CacheEvent.SET, key, value)
        return value
