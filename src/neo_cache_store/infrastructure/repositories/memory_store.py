"""Memory store repository.

ONLY in-memory implementation - dict-backed store used as the default
cache and for development, testing and single-instance deployments.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Dict, Generic, List, Mapping, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class InMemoryStore(Generic[K, V]):
    """Dict-backed async store.
    
    Features:
    - Satisfies the Store protocol
    - Optional initial contents
    - Synchronous inspection helpers (len, in, keys) for tests and diagnostics
    
    No eviction, expiration or size bounds.
    """
    
    def __init__(self, initial: Optional[Mapping[K, V]] = None):
        """Initialize memory store.
        
        Args:
            initial: Entries to copy into the store
        """
        self._data: Dict[K, V] = dict(initial) if initial else {}
    
    async def get(self, key: K) -> Optional[V]:
        """Get value by key."""
        return self._data.get(key)
    
    async def set(self, key: K, value: V) -> None:
        """Set value for key."""
        self._data[key] = value
    
    async def delete(self, key: K) -> bool:
        """Delete value by key."""
        if key in self._data:
            del self._data[key]
            return True
        return False
    
    async def has(self, key: K) -> bool:
        """Check if key exists."""
        return key in self._data
    
    async def clear(self) -> None:
        """Clear all entries."""
        self._data.clear()
    
    async def size(self) -> int:
        """Get total number of entries."""
        return len(self._data)
    
    def keys(self) -> List[K]:
        """Get all keys."""
        return list(self._data.keys())
    
    def to_dict(self) -> Dict[K, V]:
        """Get a shallow copy of the stored entries."""
        return dict(self._data)
    
    def __len__(self) -> int:
        return len(self._data)
    
    def __contains__(self, key: object) -> bool:
        return key in self._data
    
    def __repr__(self) -> str:
        return f"InMemoryStore(entries={len(self._data)})"
