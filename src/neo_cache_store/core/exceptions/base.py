"""Base exceptions for neo-cache-store.

This module defines the base exception hierarchy for the cache store library.
All exceptions inherit from CacheStoreError and include error codes and
details for structured logging and error reporting.

Failures raised by the underlying stores are never wrapped in these types;
they reach the caller of the cache operation unchanged.
"""

from typing import Any, Dict, Optional


class CacheStoreError(Exception):
    """Base exception for all neo-cache-store errors.
    
    Carries structured error information so callers can log or report
    failures without parsing messages.
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }
