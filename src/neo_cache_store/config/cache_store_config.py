"""Cache store configuration management.

ONLY cache store configuration functionality - handles policy selection,
backend settings, defaults, validation and environment/file loading.

Following maximum separation architecture - one file = one purpose.
"""

import json
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..core.exceptions.configuration_error import CacheStoreConfigurationError


class ConfigSource(Enum):
    """Configuration source types."""
    ENVIRONMENT = "environment"
    FILE = "file"
    DEFAULTS = "defaults"
    OVERRIDE = "override"


class CachePolicy(str, Enum):
    """Caching policies."""
    READ_THROUGH = "read_through"  # cache first, populate on miss
    FALLBACK = "fallback"          # store first, cache as fallback


class StoreBackend(str, Enum):
    """Backends available for the default cache store."""
    MEMORY = "memory"
    REDIS = "redis"


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_enum(enum_cls, field_name: str, value: Any):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise CacheStoreConfigurationError(
            f"Invalid {field_name} '{value}' (expected one of: {allowed})",
            field=field_name,
            value=value
        ) from None


@dataclass
class CacheStoreConfig:
    """Main cache store configuration.
    
    Centralizes cache store settings with environment variable support,
    file-based configuration and validation.
    """
    
    # Core settings
    policy: CachePolicy = CachePolicy.READ_THROUGH
    log_cache_operations: bool = False
    
    # Backend for the cache when no cache store is supplied
    cache_backend: StoreBackend = StoreBackend.MEMORY
    redis_url: str = "redis://localhost:6379/0"
    redis_key_prefix: str = "cache-store:"
    
    # Configuration metadata
    config_source: ConfigSource = ConfigSource.DEFAULTS
    config_file_path: Optional[str] = None
    environment_prefix: str = "NEO_CACHE_STORE"
    
    def __post_init__(self):
        """Post-initialization normalization and validation."""
        self.policy = _parse_enum(CachePolicy, "policy", self.policy)
        self.cache_backend = _parse_enum(StoreBackend, "cache_backend", self.cache_backend)
        if isinstance(self.config_source, str):
            self.config_source = ConfigSource(self.config_source)
        self._validate_configuration()
    
    def _validate_configuration(self):
        """Validate configuration values."""
        if self.cache_backend is StoreBackend.REDIS:
            if not self.redis_url:
                raise CacheStoreConfigurationError(
                    "redis_url is required when cache_backend is redis",
                    field="redis_url",
                    value=self.redis_url
                )
            if not self.redis_url.startswith(("redis://", "rediss://", "unix://")):
                raise CacheStoreConfigurationError(
                    "redis_url must use the redis://, rediss:// or unix:// scheme",
                    field="redis_url",
                    value=self.redis_url
                )
        
        if not self.redis_key_prefix:
            raise CacheStoreConfigurationError(
                "redis_key_prefix must not be empty",
                field="redis_key_prefix",
                value=self.redis_key_prefix
            )
    
    @classmethod
    def from_environment(
        cls,
        prefix: str = "NEO_CACHE_STORE",
        defaults: Optional["CacheStoreConfig"] = None
    ) -> "CacheStoreConfig":
        """Create configuration from environment variables.
        
        Args:
            prefix: Environment variable prefix
            defaults: Default configuration to override
            
        Returns:
            Configuration instance
        """
        base_config = defaults or cls()
        
        env_mapping = {
            f"{prefix}_POLICY": ("policy", str),
            f"{prefix}_LOG_CACHE_OPERATIONS": ("log_cache_operations", _parse_bool),
            f"{prefix}_CACHE_BACKEND": ("cache_backend", str),
            f"{prefix}_REDIS_URL": ("redis_url", str),
            f"{prefix}_REDIS_KEY_PREFIX": ("redis_key_prefix", str),
        }
        
        config_dict = {}
        
        for env_var, (field_name, converter) in env_mapping.items():
            env_value = os.getenv(env_var)
            if env_value is not None:
                config_dict[field_name] = converter(env_value)
        
        config_dict.update({
            "config_source": ConfigSource.ENVIRONMENT,
            "environment_prefix": prefix
        })
        
        return cls(**{**base_config.__dict__, **config_dict})
    
    @classmethod
    def from_file(
        cls,
        file_path: Union[str, Path],
        defaults: Optional["CacheStoreConfig"] = None
    ) -> "CacheStoreConfig":
        """Create configuration from file (JSON or YAML).
        
        Args:
            file_path: Path to configuration file
            defaults: Default configuration to override
            
        Returns:
            Configuration instance
        """
        file_path = Path(file_path)
        
        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")
        
        with open(file_path, "r") as f:
            if file_path.suffix.lower() in [".yaml", ".yml"]:
                config_data = yaml.safe_load(f) or {}
            elif file_path.suffix.lower() == ".json":
                config_data = json.load(f)
            else:
                raise CacheStoreConfigurationError(
                    f"Unsupported configuration file format: {file_path.suffix}",
                    field="config_file_path",
                    value=str(file_path)
                )
        
        if not isinstance(config_data, dict):
            raise CacheStoreConfigurationError(
                f"Configuration file must contain a mapping: {file_path}",
                field="config_file_path",
                value=str(file_path)
            )
        
        base_config = defaults or cls()
        config_data.update({
            "config_source": ConfigSource.FILE,
            "config_file_path": str(file_path)
        })
        
        return cls(**{**base_config.__dict__, **config_data})
    
    @classmethod
    def from_dict(
        cls,
        config_dict: Dict[str, Any],
        source: ConfigSource = ConfigSource.OVERRIDE
    ) -> "CacheStoreConfig":
        """Create configuration from dictionary."""
        config_data = dict(config_dict)
        config_data["config_source"] = source
        
        return cls(**config_data)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        config_dict = {}
        
        for field_name, field_value in self.__dict__.items():
            if isinstance(field_value, Enum):
                config_dict[field_name] = field_value.value
            else:
                config_dict[field_name] = field_value
        
        return config_dict
    
    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)
    
    def to_yaml(self) -> str:
        """Convert configuration to YAML string."""
        return yaml.safe_dump(self.to_dict(), default_flow_style=False)
    
    def update(self, **kwargs) -> "CacheStoreConfig":
        """Create new configuration with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        return self.from_dict(config_dict, source=ConfigSource.OVERRIDE)


def create_cache_store_config(
    source: str = "defaults",
    file_path: Optional[Union[str, Path]] = None,
    prefix: str = "NEO_CACHE_STORE",
    overrides: Optional[Dict[str, Any]] = None
) -> CacheStoreConfig:
    """Create cache store configuration from the named source.
    
    Args:
        source: "defaults", "environment" or "file"
        file_path: Configuration file, required for source="file"
        prefix: Environment variable prefix for source="environment"
        overrides: Values applied on top of the loaded configuration
        
    Returns:
        Configuration instance
    """
    if source == "environment":
        config = CacheStoreConfig.from_environment(prefix=prefix)
    elif source == "file":
        if file_path is None:
            raise CacheStoreConfigurationError(
                "file_path is required when source is 'file'",
                field="file_path",
                value=None
            )
        config = CacheStoreConfig.from_file(file_path)
    elif source == "defaults":
        config = CacheStoreConfig()
    else:
        raise CacheStoreConfigurationError(
            f"Unknown configuration source: {source}",
            field="source",
            value=source
        )
    
    if overrides:
        config = config.update(**overrides)
    
    return config
