"""Cache event taxonomy.

ONLY event names - the four lifecycle events emitted by cache components
and the listener signatures that receive them.

Following maximum separation architecture - one file = one purpose.
"""

from enum import Enum
from typing import Any, Callable, Union

from ..exceptions.unknown_event import UnknownCacheEventError


class CacheEvent(str, Enum):
    """Cache lifecycle events.
    
    Listener arguments:
    - HIT: (key, value) - value resolved from the cache
    - MISS: (key,) - no cached value was available
    - SET: (key, value) - value written into the cache
    - DELETED: (key,) - key removed from both stores
    """
    
    HIT = "cache:hit"
    MISS = "cache:miss"
    SET = "cache:set"
    DELETED = "cache:deleted"
    
    @classmethod
    def parse(cls, event: Union["CacheEvent", str]) -> "CacheEvent":
        """Resolve an enum member or its string name."""
        if isinstance(event, cls):
            return event
        try:
            return cls(event)
        except ValueError:
            raise UnknownCacheEventError(event) from None


CacheEventListener = Callable[..., Any]
