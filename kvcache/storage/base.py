"""Abstract base classes for in-memory store backends.

A store is the leaf of a cache chain: it owns the entries and is the only
layer that evicts. Size accounting is a separate capability so callers can
check for it with ``isinstance`` instead of probing attributes.
"""

from abc import ABC, abstractmethod
from typing import Any

from kvcache.models.model_cache import CacheStats


class Store(ABC):
    """Abstract base class for bounded key-value stores.

    Stores hold entries under a recency-ordered eviction policy with
    optional per-entry TTL. Expiration is lazy: it is discovered when an
    entry is read.
    """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Get a value from the store.

        Args:
            key: Unique identifier for the stored value.

        Returns:
            Stored value if found and not expired, None otherwise. A stored
            None is indistinguishable from a miss; use has() to tell them apart.
        """
        ...

    @abstractmethod
    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Store a value.

        Args:
            key: Unique identifier for the value.
            value: Value to store.
            ttl: Time-to-live in milliseconds. None or 0 means no expiry.

        Returns:
            True if the value was stored, False if it was rejected.
        """
        ...

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete a value from the store.

        Args:
            key: Unique identifier for the stored value.

        Returns:
            True if value was deleted, False if not found.
        """
        ...

    @abstractmethod
    def has(self, key: str) -> bool:
        """Check if a key is present and not expired, without touching recency."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove every entry."""
        ...

    @abstractmethod
    def keys(self) -> list[str]:
        """Snapshot of the stored keys.

        Expiration is not checked, so the snapshot may include entries that
        a subsequent ``get`` would report as absent.
        """
        ...

    @abstractmethod
    def get_stats(self) -> CacheStats:
        """Get point-in-time statistics about the store."""
        ...


class SizedStore(Store):
    """A store that tracks the aggregate byte size of its entries."""

    @abstractmethod
    def total_size_bytes(self) -> int:
        """Aggregate size of all stored entries.

        May include entries that have expired but not yet been removed.
        """
        ...
