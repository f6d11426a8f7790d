"""Fallback cache service.

ONLY store-preferred reads - always asks the authoritative store first and
uses the cache only when the store has no value.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Optional

from ...core.events.cache_event import CacheEvent
from .base_cache_store import BaseCacheStore, K, V


class FallbackCache(BaseCacheStore[K, V]):
    """Fallback cache.
    
    The authoritative store is treated as always fresh. Every value it
    returns refreshes the cache; the cache answers only for keys the store
    cannot, e.g. stale-but-usable data while the store is degraded.
    """
    
    async def get(self, key: K) -> Optional[V]:
        """Get value from the store, falling back to the cache.
        
        The store is always queried, even when the cache could answer.
        
        Fires:
            cache:set(key, value) when the store has a value
            cache:hit(key, value) when only the cache has it
            cache:miss(key) when neither has it
        """
        value = await self._store.get(key)
        
        if value is not None:
            await self._cache.set(key, value)
            self._emit(CacheEvent.SET, key, value)
            return value
        
        value = await self._cache.get(key)
        if value is not None:
            self._emit(CacheEvent.HIT, key, value)
        else:
            self._emit(CacheEvent.MISS, key)
        return value
