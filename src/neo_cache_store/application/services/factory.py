"""Cache store factory.

ONLY component construction - selects the caching policy and default cache
backend from configuration.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Dict, Optional, Type, Union

from ...config.cache_store_config import CachePolicy, CacheStoreConfig, StoreBackend
from ...core.exceptions.configuration_error import CacheStoreConfigurationError
from ...core.protocols.store import Store
from ...core.value_objects.cache_store_options import CacheStoreOptions
from ...infrastructure.repositories.redis_store import RedisStore
from .base_cache_store import BaseCacheStore
from .fallback_cache import FallbackCache
from .read_through_cache import ReadThroughCache

logger = logging.getLogger(__name__)

POLICY_CLASSES: Dict[CachePolicy, Type[BaseCacheStore]] = {
    CachePolicy.READ_THROUGH: ReadThroughCache,
    CachePolicy.FALLBACK: FallbackCache,
}


def resolve_policy(policy: Union[CachePolicy, str]) -> CachePolicy:
    """Resolve a policy member or name."""
    if isinstance(policy, CachePolicy):
        return policy
    try:
        return CachePolicy(str(policy).strip().lower())
    except ValueError:
        raise CacheStoreConfigurationError(
            f"Unknown cache policy: {policy}",
            field="policy",
            value=policy
        ) from None


def create_cache_store(
    store: Store,
    cache: Optional[Store] = None,
    policy: Optional[Union[CachePolicy, str]] = None,
    config: Optional[CacheStoreConfig] = None
) -> BaseCacheStore:
    """Create a cache component for the configured policy.
    
    Args:
        store: Authoritative store
        cache: Cache store; when omitted the configured backend is used
        policy: Overrides config.policy
        config: Cache store configuration, defaults when omitted
        
    Returns:
        ReadThroughCache or FallbackCache

    With the Redis backend and no cache passed, the component's cache is a
    RedisStore that owns its client; call `await component.cache.close()`
    at shutdown.
    """
    config = config or CacheStoreConfig()
    selected_policy = resolve_policy(policy if policy is not None else config.policy)
    
    if cache is None and config.cache_backend is StoreBackend.REDIS:
        cache = RedisStore.from_url(config.redis_url, key_prefix=config.redis_key_prefix)
    
    cache_cls = POLICY_CLASSES[selected_policy]
    logger.info(
        "Creating %s (cache backend: %s)",
        cache_cls.__name__,
        type(cache).__name__ if cache is not None else "InMemoryStore"
    )
    
    return cache_cls(
        CacheStoreOptions(store=store, cache=cache),
        log_cache_operations=config.log_cache_operations
    )
