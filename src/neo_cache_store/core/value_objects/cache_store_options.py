"""Cache store options value object.

ONLY constructor options - the authoritative store and optional cache
handed to a cache component, validated on creation.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from ..exceptions.configuration_error import CacheStoreConfigurationError
from ..protocols.store import Store, is_store


def _default_cache() -> Store:
    from ...infrastructure.repositories.memory_store import InMemoryStore
    return InMemoryStore()


@dataclass(frozen=True)
class CacheStoreOptions:
    """Options for cache components.
    
    Attributes:
        store: Authoritative store the cache reads through to
        cache: Store used as the cache; a fresh InMemoryStore when omitted
    
    The component holds non-owning references to both stores. Callers create
    and tear them down.
    """
    
    store: Store
    cache: Optional[Store] = field(default=None)
    
    def __post_init__(self):
        """Validate the stores and fill in the default cache."""
        if self.store is None:
            raise CacheStoreConfigurationError.missing_store()
        
        if not is_store(self.store):
            raise CacheStoreConfigurationError.not_a_store("store", self.store)
        
        if self.cache is None:
            object.__setattr__(self, "cache", _default_cache())
        elif not is_store(self.cache):
            raise CacheStoreConfigurationError.not_a_store("cache", self.cache)
        
        if self.cache is self.store:
            raise CacheStoreConfigurationError(
                "'store' and 'cache' must be different store instances",
                field="cache",
                value=self.cache
            )
    
    @classmethod
    def coerce(
        cls,
        options: Optional["CacheStoreOptions"] = None,
        store: Any = None,
        cache: Any = None
    ) -> "CacheStoreOptions":
        """Build options from either an instance or store/cache keywords."""
        if options is not None:
            if store is not None or cache is not None:
                raise CacheStoreConfigurationError(
                    "Pass either options or store/cache keywords, not both"
                )
            if not isinstance(options, cls):
                raise CacheStoreConfigurationError(
                    f"options must be {cls.__name__}, got {type(options).__name__}",
                    field="options",
                    value=options
                )
            return options
        
        return cls(store=store, cache=cache)
