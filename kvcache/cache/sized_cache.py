"""Sized cache facade over a bounded store.

Uses a SizedLRUStore with the JSON byte-size estimator by default, while
exposing the generic Cache contract and the aggregate size for monitoring.
"""

import logging
from typing import Any

from kvcache.cache.base import Cache, KeyEnumeration, SizeAccounting
from kvcache.consts import DEFAULT_MAX_SIZE_BYTES
from kvcache.errors import SizeAccountingUnsupported
from kvcache.models.model_cache import CacheStats, SizeCalculator
from kvcache.sizing import json_bytes_size_calculator
from kvcache.storage.base import SizedStore, Store
from kvcache.storage.lru_store import Clock, SizedLRUStore

logger = logging.getLogger(__name__)


class SizedCache(Cache, SizeAccounting, KeyEnumeration):
    """Cache facade that delegates every operation to a store.

    get/set/delete/clear are forwarded untransformed, so all store contracts
    (lazy TTL, LRU eviction, boolean rejection of oversized values) hold
    at this layer too.
    """

    def __init__(
        self,
        store: Store | None = None,
        max_size_bytes: int | None = None,
        max_entries: int | None = None,
        size_calculation: SizeCalculator | None = None,
        default_ttl: int | None = None,
        clock: Clock | None = None,
    ):
        """Initialize SizedCache.

        Args:
            store: Optional store to use. If provided, max_size_bytes,
                max_entries, size_calculation and clock are ignored.
            max_size_bytes: Aggregate size bound. None falls back to
                DEFAULT_MAX_SIZE_BYTES, never to an unbounded store.
            max_entries: Optional entry count bound.
            size_calculation: Size estimator. Defaults to the JSON byte size.
            default_ttl: TTL in milliseconds applied when set() gets none.
            clock: Millisecond clock passed to the created store.
        """
        if store is None:
            if max_size_bytes is None:
                max_size_bytes = DEFAULT_MAX_SIZE_BYTES
            store = SizedLRUStore(
                size_calculation=size_calculation or json_bytes_size_calculator,
                max_size_bytes=max_size_bytes,
                max_entries=max_entries,
                clock=clock,
            )
        self._store = store
        self.default_ttl = default_ttl
        logger.debug(f"SizedCache over {type(store).__name__} (default_ttl={default_ttl})")

    @property
    def store(self) -> Store:
        return self._store

    def get(self, key: str) -> Any | None:
        return self._store.get(key)

    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        effective_ttl = ttl if ttl is not None else self.default_ttl
        return self._store.set(key, value, effective_ttl)

    def delete(self, key: str) -> bool:
        return self._store.delete(key)

    def has(self, key: str) -> bool:
        return self._store.has(key)

    def clear(self) -> None:
        self._store.clear()

    def keys(self) -> list[str]:
        return self._store.keys()

    def get_total_size(self) -> int:
        """Aggregate byte size of all entries in the store.

        Returns:
            The store's running size total.

        Raises:
            SizeAccountingUnsupported: If the store was built without a size
                function. Zero is never returned in place of "not measured".
        """
        if isinstance(self._store, SizedStore):
            return self._store.total_size_bytes()
        raise SizeAccountingUnsupported(type(self._store).__name__)

    def get_stats(self) -> CacheStats:
        return self._store.get_stats()


def main() -> None:
    """Example usage of SizedCache."""
    logging.basicConfig(level=logging.DEBUG)

    cache = SizedCache(max_size_bytes=64, max_entries=10)

    print("=== SizedCache Example ===\n")

    print("1. Caching two query results...")
    cache.set("query:users", {"users": ["alice", "bob"]})
    cache.set("query:config", {"debug": True})
    print(f"   Total size: {cache.get_total_size()} bytes")

    print("\n2. Retrieving a result...")
    print(f"   query:users = {cache.get('query:users')}")

    print("\n3. Caching a value too large for the cache...")
    stored = cache.set("query:huge", {"rows": list(range(100))})
    print(f"   Stored: {stored}")

    print("\n4. Clearing...")
    cache.clear()
    print(f"   Total size after clear: {cache.get_total_size()}")


if __name__ == "__main__":
    main()
