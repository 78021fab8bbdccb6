"""Cache facades composed over stores."""

from kvcache.cache.base import Cache, KeyEnumeration, SizeAccounting
from kvcache.cache.factory import create_cache
from kvcache.cache.prefixing import PrefixingCache
from kvcache.cache.sized_cache import SizedCache

__all__ = [
    "Cache",
    "KeyEnumeration",
    "PrefixingCache",
    "SizeAccounting",
    "SizedCache",
    "create_cache",
]
