"""Cache store configuration exception.

ONLY configuration errors - raised when constructor options or loaded
configuration values are invalid.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Optional

from .base import CacheStoreError


class CacheStoreConfigurationError(CacheStoreError):
    """Invalid cache store options or configuration.
    
    Raised for:
    - Missing authoritative store
    - Store objects that do not satisfy the Store capability
    - Unknown caching policy or backend names
    - Out-of-range configuration values
    """
    
    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        error_code: Optional[str] = None
    ):
        details = {}
        if field is not None:
            details["field"] = field
            details["value"] = repr(value)
        
        super().__init__(
            message,
            error_code=error_code or "CACHE_STORE_CONFIGURATION_INVALID",
            details=details
        )
        self.field = field
        self.value = value
    
    @classmethod
    def missing_store(cls) -> "CacheStoreConfigurationError":
        """Create exception for an omitted authoritative store."""
        return cls(
            "An authoritative store is required",
            field="store",
            value=None,
            error_code="CACHE_STORE_MISSING"
        )
    
    @classmethod
    def not_a_store(cls, field: str, value: Any) -> "CacheStoreConfigurationError":
        """Create exception for an object lacking the Store operations."""
        return cls(
            f"'{field}' must implement get, set, delete, has and clear; "
            f"got {type(value).__name__}",
            field=field,
            value=value,
            error_code="CACHE_STORE_INVALID"
        )
