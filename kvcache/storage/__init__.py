"""Store backends that own cache entries.

This module provides:
- Store: Abstract base class for bounded stores
- SizedStore: Store that tracks aggregate byte size
- LRUStore: Count-bounded LRU store with lazy TTL
- SizedLRUStore: LRU store bounded by aggregate size
"""

from kvcache.storage.base import SizedStore, Store
from kvcache.storage.lru_store import LRUStore, SizedLRUStore

__all__ = [
    "LRUStore",
    "SizedLRUStore",
    "SizedStore",
    "Store",
]
