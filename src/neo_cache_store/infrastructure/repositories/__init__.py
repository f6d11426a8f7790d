"""Store repository implementations."""

from .memory_store import InMemoryStore
from .redis_store import RedisStore

__all__ = [
    "InMemoryStore",
    "RedisStore",
]
