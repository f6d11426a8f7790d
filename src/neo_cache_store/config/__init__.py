"""Configuration for neo-cache-store: cache store settings and logging."""

from .cache_store_config import (
    CacheStoreConfig,
    CachePolicy,
    StoreBackend,
    ConfigSource,
    create_cache_store_config,
)

from .logging_config import (
    setup_logging,
    get_logger,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    "CacheStoreConfig",
    "CachePolicy",
    "StoreBackend",
    "ConfigSource",
    "create_cache_store_config",
    "setup_logging",
    "get_logger",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]
