"""Base cache store service.

ONLY shared cache policy - the set, delete, has and clear operations common
to every caching policy, plus event subscription. Policies supply get().

Following maximum separation architecture - one file = one purpose.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar, Union

from ...core.events.cache_event import CacheEvent, CacheEventListener
from ...core.protocols.store import Store
from ...core.value_objects.cache_store_options import CacheStoreOptions
from .event_emitter import CacheEventEmitter

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


class BaseCacheStore(ABC, Generic[K, V]):
    """Cache component over an authoritative store and a cache store.
    
    Writes go to the authoritative store first, then the cache. Deletions
    reach the cache only when the authoritative store reports the key
    existed. Store failures propagate unchanged; nothing is retried.
    
    Events (subscribe with on()/once()):
    - cache:hit(key, value)
    - cache:miss(key)
    - cache:set(key, value)
    - cache:deleted(key)
    """
    
    def __init__(
        self,
        options: Optional[CacheStoreOptions] = None,
        *,
        store: Optional[Store] = None,
        cache: Optional[Store] = None,
        log_cache_operations: bool = False
    ):
        """Initialize cache store.
        
        Args:
            options: Validated store/cache options
            store: Authoritative store, when options is not given
            cache: Cache store, when options is not given; defaults to InMemoryStore
            log_cache_operations: Log every hit, miss, set and delete at DEBUG
        """
        options = CacheStoreOptions.coerce(options, store=store, cache=cache)
        self._store: Store = options.store
        self._cache: Store = options.cache
        self._events = CacheEventEmitter()
        self._log_cache_operations = log_cache_operations
    
    @property
    def store(self) -> Store:
        """Authoritative store."""
        return self._store
    
    @property
    def cache(self) -> Store:
        """Cache store."""
        return self._cache
    
    @property
    def events(self) -> CacheEventEmitter:
        """Event emitter owned by this component."""
        return self._events
    
    # Event subscription
    def on(self, event: Union[CacheEvent, str], listener: CacheEventListener) -> str:
        """Subscribe to a cache event. Returns a subscription ID."""
        return self._events.on(event, listener)
    
    def once(self, event: Union[CacheEvent, str], listener: CacheEventListener) -> str:
        """Subscribe to the next occurrence of a cache event."""
        return self._events.once(event, listener)
    
    def off(self, subscription_id: str) -> bool:
        """Unsubscribe by subscription ID."""
        return self._events.off(subscription_id)
    
    def remove_listener(self, event: Union[CacheEvent, str], listener: CacheEventListener) -> bool:
        """Unsubscribe a listener from a cache event."""
        return self._events.remove_listener(event, listener)
    
    def listener_count(self, event: Union[CacheEvent, str]) -> int:
        """Get number of listeners for a cache event."""
        return self._events.listener_count(event)
    
    # Store operations
    @abstractmethod
    async def get(self, key: K) -> Optional[V]:
        """Get value for key according to the caching policy."""
        ...
    
    async def set(self, key: K, value: V) -> None:
        """Write value to the authoritative store, then the cache."""
        await self._store.set(key, value)
        await self._cache.set(key, value)
        self._emit(CacheEvent.SET, key, value)
    
    async def delete(self, key: K) -> bool:
        """Delete key from both stores.
        
        The cache is only touched when the authoritative store reports the
        key existed.
        
        Returns:
            The authoritative store's deletion result
        """
        deleted = await self._store.delete(key)
        if deleted:
            await self._cache.delete(key)
            self._emit(CacheEvent.DELETED, key)
        return deleted
    
    async def has(self, key: K) -> bool:
        """Check the cache, then the authoritative store."""
        if await self._cache.has(key):
            return True
        return await self._store.has(key)
    
    async def clear(self) -> None:
        """Clear the authoritative store, then the cache."""
        await self._store.clear()
        await self._cache.clear()
    
    def _emit(self, event: CacheEvent, key: K, *args: Any) -> None:
        if self._log_cache_operations:
            logger.debug("%s %s key=%r", self.__class__.__name__, event.value, key)
        self._events.emit(event, key, *args)
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(store={self._store!r}, cache={self._cache!r})"
