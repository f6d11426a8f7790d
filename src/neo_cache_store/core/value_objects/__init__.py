"""Cache store value objects."""

from .cache_store_options import CacheStoreOptions

__all__ = [
    "CacheStoreOptions",
]
