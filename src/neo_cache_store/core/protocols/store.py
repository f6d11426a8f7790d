"""Store capability protocol.

ONLY store contract - defines the minimal async key-value interface that
both the authoritative store and the cache must satisfy.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Optional, TypeVar
from typing_extensions import Protocol, runtime_checkable

K = TypeVar("K", contravariant=True)
V = TypeVar("V")


@runtime_checkable
class Store(Protocol[K, V]):
    """Async key-value store protocol.
    
    Any object with these five coroutine methods can serve as either the
    authoritative store or the cache: an in-memory mapping, a database
    adapter, a remote cache client.
    
    Absence is reported as None. No ordering, atomicity or durability is
    assumed beyond completion of each individual call.
    """
    
    async def get(self, key: K) -> Optional[V]:
        """Get value by key.
        
        Returns None if the key doesn't exist. Never raises for an unknown key.
        """
        ...
    
    async def set(self, key: K, value: V) -> None:
        """Insert or replace the value stored under key."""
        ...
    
    async def delete(self, key: K) -> bool:
        """Delete value by key.
        
        Returns True if key existed and was deleted, False if key didn't exist.
        """
        ...
    
    async def has(self, key: K) -> bool:
        """Check if key exists without materializing its value."""
        ...
    
    async def clear(self) -> None:
        """Remove all entries."""
        ...


def is_store(candidate: object) -> bool:
    """Check whether an object exposes the Store operations.
    
    runtime_checkable protocols only verify attribute presence, so callables
    are checked explicitly as well.
    """
    if not isinstance(candidate, Store):
        return False
    return all(
        callable(getattr(candidate, name, None))
        for name in ("get", "set", "delete", "has", "clear")
    )
