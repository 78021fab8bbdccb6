"""kvcache - size-bounded, TTL-aware in-memory cache with key namespaces."""

from kvcache.cache import (
    Cache,
    KeyEnumeration,
    PrefixingCache,
    SizeAccounting,
    SizedCache,
    create_cache,
)
from kvcache.errors import (
    CacheError,
    InvalidNamespace,
    MisconfiguredCapacity,
    SizeAccountingUnsupported,
)
from kvcache.models import CacheOptions, CacheStats
from kvcache.sizing import json_bytes_size_calculator
from kvcache.storage import LRUStore, SizedLRUStore, SizedStore, Store

__all__ = [
    # Facades
    "Cache",
    "KeyEnumeration",
    "PrefixingCache",
    "SizeAccounting",
    "SizedCache",
    "create_cache",
    # Stores
    "LRUStore",
    "SizedLRUStore",
    "SizedStore",
    "Store",
    # Models
    "CacheOptions",
    "CacheStats",
    # Errors
    "CacheError",
    "InvalidNamespace",
    "MisconfiguredCapacity",
    "SizeAccountingUnsupported",
    # Sizing
    "json_bytes_size_calculator",
]
