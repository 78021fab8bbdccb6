"""Bounded in-memory stores with least-recently-used eviction.

Entries live in an OrderedDict ordered by recency (least recently used at
the front). Count and aggregate size are kept as running totals updated on
every mutation, so capacity checks never scan the store.
"""

import logging
import time
from collections import OrderedDict
from collections.abc import Callable
from typing import Any

from kvcache.consts import DEFAULT_MAX_SIZE_BYTES
from kvcache.errors import MisconfiguredCapacity
from kvcache.models.model_cache import CacheEntry, CacheStats, SizeCalculator
from kvcache.storage.base import SizedStore, Store

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


def _validate_bound(name: str, value: Any) -> None:
    """Reject bounds that are not finite positive integers."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise MisconfiguredCapacity(f"{name} must be a finite integer, got {value!r}")
    if value < 1:
        raise MisconfiguredCapacity(f"{name} must be >= 1, got {value}")


def _is_valid_size(size: Any) -> bool:
    return isinstance(size, int) and not isinstance(size, bool) and size >= 0


def _is_valid_ttl(ttl: Any) -> bool:
    if ttl is None:
        return True
    if isinstance(ttl, bool) or not isinstance(ttl, int | float):
        return False
    return ttl >= 0


class LRUStore(Store):
    """Count-bounded LRU store with lazy per-entry TTL.

    Entries carry no size; use :class:`SizedLRUStore` when the aggregate
    payload size must be bounded as well.
    """

    max_size_bytes: int | None = None

    def __init__(self, max_entries: int | None = None, clock: Clock | None = None):
        """Initialize LRUStore.

        Args:
            max_entries: Maximum number of live entries.
            clock: Returns the current time in milliseconds. Defaults to a
                monotonic clock.

        Raises:
            MisconfiguredCapacity: If the store would have no finite bound.
        """
        if max_entries is not None:
            _validate_bound("max_entries", max_entries)
        if max_entries is None and self.max_size_bytes is None:
            raise MisconfiguredCapacity(
                f"{type(self).__name__} needs max_entries or max_size_bytes"
            )

        self.max_entries = max_entries
        self._clock = clock or _monotonic_ms
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._total_size = 0
        self.evictions = 0
        self.expirations = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entry_count(self) -> int:
        """Number of stored entries, including ones not yet expired lazily."""
        return len(self._entries)

    def _size_of(self, value: Any) -> int:
        return 0

    def _over_capacity(self) -> bool:
        if self.max_entries is not None and len(self._entries) > self.max_entries:
            return True
        return self.max_size_bytes is not None and self._total_size > self.max_size_bytes

    def _remove(self, key: str) -> CacheEntry:
        entry = self._entries.pop(key)
        self._total_size -= entry.size
        return entry

    def _evict(self) -> None:
        """Drop least recently used entries until both bounds hold."""
        while self._over_capacity():
            key, entry = self._entries.popitem(last=False)
            self._total_size -= entry.size
            self.evictions += 1
            logger.debug(f"Evicted key={key} (size={entry.size})")

    def _live_entry(self, key: str) -> CacheEntry | None:
        """Return the entry for key, destroying it first if it has expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            self._remove(key)
            self.expirations += 1
            logger.debug(f"Expired key={key} (ttl={entry.ttl}ms)")
            return None
        return entry

    def get(self, key: str) -> Any | None:
        """Get a value and mark it as most recently used.

        Args:
            key: Unique identifier for the stored value.

        Returns:
            Stored value if found and not expired, None otherwise. A stored
            None reads as a miss; has() tells them apart.
        """
        entry = self._live_entry(key)
        if entry is None:
            return None
        self._entries.move_to_end(key)
        return entry.value

    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Store a value as the most recently used entry.

        Replacing an existing key renews its insertion time. Least recently
        used entries are evicted until the capacity bounds hold again.

        Args:
            key: Unique identifier for the value.
            value: Value to store.
            ttl: Time-to-live in milliseconds. None or 0 means no expiry.

        Returns:
            True if stored. False if the value can never fit or the input is
            ill-formed; the store is left untouched in that case.
        """
        if not _is_valid_ttl(ttl):
            logger.warning(f"Rejected key={key}: invalid ttl {ttl!r}")
            return False

        size = self._size_of(value)
        if not _is_valid_size(size):
            logger.warning(f"Rejected key={key}: size calculation returned {size!r}")
            return False
        if self.max_size_bytes is not None and size > self.max_size_bytes:
            logger.debug(
                f"Rejected key={key}: size {size} exceeds max_size_bytes={self.max_size_bytes}"
            )
            return False

        if key in self._entries:
            self._remove(key)
        self._entries[key] = CacheEntry(value=value, size=size, inserted_at=self._clock(), ttl=ttl)
        self._total_size += size
        self._evict()
        return True

    def delete(self, key: str) -> bool:
        """Delete a value from the store.

        Args:
            key: Unique identifier for the stored value.

        Returns:
            True if value was deleted, False if not found.
        """
        if key not in self._entries:
            return False
        self._remove(key)
        return True

    def has(self, key: str) -> bool:
        return self._live_entry(key) is not None

    def clear(self) -> None:
        self._entries.clear()
        self._total_size = 0

    def keys(self) -> list[str]:
        return list(self._entries)

    def get_stats(self) -> CacheStats:
        """Get store statistics.

        Returns:
            CacheStats with counts, bounds and eviction/expiration totals.
        """
        return CacheStats(
            entry_count=len(self._entries),
            total_size_bytes=self._total_size if isinstance(self, SizedStore) else None,
            max_entries=self.max_entries,
            max_size_bytes=self.max_size_bytes,
            evictions=self.evictions,
            expirations=self.expirations,
        )


class SizedLRUStore(LRUStore, SizedStore):
    """LRU store bounded by aggregate payload size and optionally entry count."""

    def __init__(
        self,
        size_calculation: SizeCalculator,
        max_size_bytes: int = DEFAULT_MAX_SIZE_BYTES,
        max_entries: int | None = None,
        clock: Clock | None = None,
    ):
        """Initialize SizedLRUStore.

        Args:
            size_calculation: Maps a value to its accounted byte size. Must be
                pure and return a non-negative int. Exceptions it raises
                propagate to the caller of set().
            max_size_bytes: Maximum aggregate size of all entries.
            max_entries: Optional maximum number of live entries.
            clock: Returns the current time in milliseconds.

        Raises:
            MisconfiguredCapacity: If max_size_bytes is not a finite positive int.
        """
        _validate_bound("max_size_bytes", max_size_bytes)
        self.max_size_bytes = max_size_bytes
        self.size_calculation = size_calculation
        super().__init__(max_entries=max_entries, clock=clock)

    def _size_of(self, value: Any) -> int:
        return self.size_calculation(value)

    def total_size_bytes(self) -> int:
        return self._total_size


def main() -> None:
    """Example usage of SizedLRUStore."""
    logging.basicConfig(level=logging.DEBUG)

    store = SizedLRUStore(size_calculation=len, max_size_bytes=10, max_entries=3)

    print("=== SizedLRUStore Example ===\n")

    print("1. Storing three values...")
    store.set("a", "aaaa")
    store.set("b", "bbb")
    store.set("c", "cc")
    print(f"   Keys: {store.keys()}, total size: {store.total_size_bytes()}")

    print("\n2. Reading 'a' to make it most recently used...")
    print(f"   a = {store.get('a')}")

    print("\n3. Storing 'd' (size 4) forces eviction of the LRU entry...")
    store.set("d", "dddd")
    print(f"   Keys: {store.keys()}, total size: {store.total_size_bytes()}")

    print("\n4. Storing an oversized value...")
    stored = store.set("huge", "x" * 11)
    print(f"   Stored: {stored}")

    print("\n5. Statistics...")
    print(f"   {store.get_stats()}")


if __name__ == "__main__":
    main()
