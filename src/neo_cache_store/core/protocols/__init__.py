"""Cache store protocols."""

from .store import Store, is_store

__all__ = [
    "Store",
    "is_store",
]
