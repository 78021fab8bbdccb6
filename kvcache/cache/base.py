"""Abstract base classes for cache facades.

Facades wrap a store (or another facade) by composition. Whether a facade
can report its aggregate size is expressed by the SizeAccounting base
class rather than by the presence of an attribute.
"""

from abc import ABC, abstractmethod
from typing import Any


class Cache(ABC):
    """Generic cache contract shared by every facade."""

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Get a value from the cache.

        Args:
            key: Unique identifier for the cached value.

        Returns:
            Cached value if found and not expired, None otherwise. A cached
            None reads the same as a miss.
        """
        ...

    @abstractmethod
    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Store a value in the cache.

        Args:
            key: Unique identifier for the cached value.
            value: Value to cache.
            ttl: Time-to-live in milliseconds. None uses the cache's default.

        Returns:
            True if the value was cached, False if it was rejected.
        """
        ...

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete a value from the cache.

        Args:
            key: Unique identifier for the cached value.

        Returns:
            True if value was deleted, False if not found.
        """
        ...

    @abstractmethod
    def clear(self) -> None:
        """Clear cached values."""
        ...


class SizeAccounting(ABC):
    """Capability of reporting the aggregate size of cached values."""

    @abstractmethod
    def get_total_size(self) -> int:
        """Aggregate byte size of the cached values.

        Raises:
            SizeAccountingUnsupported: If the backing layer has no size function.
        """
        ...


class KeyEnumeration(ABC):
    """Capability of listing every key held by a cache."""

    @abstractmethod
    def keys(self) -> list[str]:
        """Snapshot of the cached keys. May include lazily expired entries."""
        ...
