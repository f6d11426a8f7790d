"""Cache store application services."""

from .event_emitter import CacheEventEmitter, Subscription
from .base_cache_store import BaseCacheStore
from .read_through_cache import ReadThroughCache
from .fallback_cache import FallbackCache
from .factory import create_cache_store, resolve_policy

__all__ = [
    "CacheEventEmitter",
    "Subscription",
    "BaseCacheStore",
    "ReadThroughCache",
    "FallbackCache",
    "create_cache_store",
    "resolve_policy",
]
