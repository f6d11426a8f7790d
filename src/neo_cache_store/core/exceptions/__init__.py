"""Cache store exceptions.

One exception per file following maximum separation architecture.
"""

from .base import CacheStoreError
from .configuration_error import CacheStoreConfigurationError
from .unknown_event import UnknownCacheEventError
from .serialization_error import StoreSerializationError, StoreDeserializationError

__all__ = [
    "CacheStoreError",
    "CacheStoreConfigurationError",
    "UnknownCacheEventError",
    "StoreSerializationError",
    "StoreDeserializationError",
]
