"""JSON store serializer.

ONLY JSON serialization - converts values to and from the byte payloads
kept by remote stores, preserving common Python types.

Following maximum separation architecture - one file = one purpose.
"""

import json
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Union
from uuid import UUID

from ...core.exceptions.serialization_error import (
    StoreDeserializationError,
    StoreSerializationError,
)


class ExtendedJSONEncoder(json.JSONEncoder):
    """JSON encoder tagging non-standard types for round-tripping."""
    
    def default(self, obj: Any) -> Any:
        """Handle non-standard JSON types."""
        # datetime is a date subclass, check it first
        if isinstance(obj, datetime):
            return {"__datetime__": obj.isoformat()}
        elif isinstance(obj, date):
            return {"__date__": obj.isoformat()}
        elif isinstance(obj, Decimal):
            return {"__decimal__": str(obj)}
        elif isinstance(obj, UUID):
            return {"__uuid__": str(obj)}
        elif isinstance(obj, frozenset):
            return {"__frozenset__": list(obj)}
        elif isinstance(obj, set):
            return {"__set__": list(obj)}
        elif isinstance(obj, bytes):
            return {"__bytes__": obj.hex()}
        
        return super().default(obj)


def decode_json_object(obj: Dict[str, Any]) -> Any:
    """Decode tagged JSON objects back to Python types."""
    if len(obj) != 1:
        return obj
    
    if "__datetime__" in obj:
        return datetime.fromisoformat(obj["__datetime__"])
    elif "__date__" in obj:
        return date.fromisoformat(obj["__date__"])
    elif "__decimal__" in obj:
        return Decimal(obj["__decimal__"])
    elif "__uuid__" in obj:
        return UUID(obj["__uuid__"])
    elif "__set__" in obj:
        return set(obj["__set__"])
    elif "__frozenset__" in obj:
        return frozenset(obj["__frozenset__"])
    elif "__bytes__" in obj:
        return bytes.fromhex(obj["__bytes__"])
    
    return obj


class JSONSerializer:
    """JSON serializer for store values.
    
    Supports datetime, date, Decimal, UUID, set, frozenset and bytes on top
    of the native JSON types. Anything else raises StoreSerializationError.
    """
    
    def __init__(self, ensure_ascii: bool = False, sort_keys: bool = False):
        """Initialize JSON serializer.
        
        Args:
            ensure_ascii: If True, escape non-ASCII characters
            sort_keys: Sort dictionary keys
        """
        self._ensure_ascii = ensure_ascii
        self._sort_keys = sort_keys
    
    def serialize(self, value: Any) -> bytes:
        """Serialize value to JSON bytes."""
        try:
            json_str = json.dumps(
                value,
                cls=ExtendedJSONEncoder,
                ensure_ascii=self._ensure_ascii,
                separators=(",", ":"),
                sort_keys=self._sort_keys
            )
        except (TypeError, ValueError, OverflowError) as e:
            raise StoreSerializationError(
                f"JSON serialization failed: {e}",
                value_type=type(value).__name__,
                original_error=e
            ) from e
        
        return json_str.encode("utf-8")
    
    def deserialize(self, data: Union[bytes, str]) -> Any:
        """Deserialize JSON bytes back to Python object."""
        try:
            if isinstance(data, bytes):
                data = data.decode("utf-8")
            return json.loads(data, object_hook=decode_json_object)
        except (json.JSONDecodeError, UnicodeDecodeError, ValueError) as e:
            raise StoreDeserializationError(
                f"JSON deserialization failed: {e}",
                data_size=len(data),
                original_error=e
            ) from e
