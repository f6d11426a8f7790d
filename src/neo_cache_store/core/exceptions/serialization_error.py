"""Store value serialization exceptions.

ONLY serialization errors - raised when a value cannot be converted to or
from the wire format of a remote store.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Optional

from .base import CacheStoreError


class StoreSerializationError(CacheStoreError):
    """Value could not be serialized for storage."""
    
    def __init__(
        self,
        message: str,
        value_type: Optional[str] = None,
        serializer: str = "json",
        original_error: Optional[Exception] = None
    ):
        super().__init__(
            message,
            error_code="STORE_SERIALIZATION_FAILED",
            details={
                "value_type": value_type,
                "serializer": serializer,
                "original_error": str(original_error) if original_error else None,
            }
        )
        self.value_type = value_type
        self.serializer = serializer
        self.original_error = original_error


class StoreDeserializationError(CacheStoreError):
    """Stored payload could not be deserialized."""
    
    def __init__(
        self,
        message: str,
        data_size: Optional[int] = None,
        serializer: str = "json",
        original_error: Optional[Exception] = None
    ):
        super().__init__(
            message,
            error_code="STORE_DESERIALIZATION_FAILED",
            details={
                "data_size": data_size,
                "serializer": serializer,
                "original_error": str(original_error) if original_error else None,
            }
        )
        self.data_size = data_size
        self.serializer = serializer
        self.original_error = original_error
