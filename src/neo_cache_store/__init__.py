"""Neo-Cache-Store - read-through and fallback caching over async stores.

Wraps an authoritative key-value store and a fast cache store, reconciling
them with one of two policies and reporting cache:hit, cache:miss,
cache:set and cache:deleted events.
"""

from .__version__ import __version__

from .core.protocols import Store, is_store
from .core.events import CacheEvent, CacheEventListener
from .core.value_objects import CacheStoreOptions
from .core.exceptions import (
    CacheStoreError,
    CacheStoreConfigurationError,
    UnknownCacheEventError,
    StoreSerializationError,
    StoreDeserializationError,
)

from .application.services import (
    CacheEventEmitter,
    BaseCacheStore,
    ReadThroughCache,
    FallbackCache,
    create_cache_store,
)

from .infrastructure import InMemoryStore, RedisStore, JSONSerializer

from .config import (
    CacheStoreConfig,
    CachePolicy,
    StoreBackend,
    create_cache_store_config,
    setup_logging,
)

__all__ = [
    "__version__",
    
    # Protocols
    "Store",
    "is_store",
    
    # Events
    "CacheEvent",
    "CacheEventListener",
    
    # Options
    "CacheStoreOptions",
    
    # Exceptions
    "CacheStoreError",
    "CacheStoreConfigurationError",
    "UnknownCacheEventError",
    "StoreSerializationError",
    "StoreDeserializationError",
    
    # Services
    "CacheEventEmitter",
    "BaseCacheStore",
    "ReadThroughCache",
    "FallbackCache",
    "create_cache_store",
    
    # Stores
    "InMemoryStore",
    "RedisStore",
    "JSONSerializer",
    
    # Configuration
    "CacheStoreConfig",
    "CachePolicy",
    "StoreBackend",
    "create_cache_store_config",
    "setup_logging",
]
