"""Unknown cache event exception.

ONLY event name errors - raised when subscribing to or emitting an event
that is not part of the cache event taxonomy.

Following maximum separation architecture - one file = one purpose.
"""

from .base import CacheStoreError


class UnknownCacheEventError(CacheStoreError, ValueError):
    """Event name is not one of cache:hit, cache:miss, cache:set, cache:deleted."""
    
    def __init__(self, event: object):
        super().__init__(
            f"Unknown cache event: {event!r}",
            error_code="CACHE_EVENT_UNKNOWN",
            details={"event": repr(event)}
        )
        self.event = event
