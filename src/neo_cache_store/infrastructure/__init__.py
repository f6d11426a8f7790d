"""Cache store infrastructure: concrete stores and serializers."""

from .repositories import InMemoryStore, RedisStore
from .serializers import JSONSerializer

__all__ = [
    "InMemoryStore",
    "RedisStore",
    "JSONSerializer",
]
