"""Cache events."""

from .cache_event import CacheEvent, CacheEventListener

__all__ = [
    "CacheEvent",
    "CacheEventListener",
]
