"""Key-prefixing cache facade.

Lets several logical caches share one physical cache without key
collisions. Only keys are isolated: every namespace competes for the same
capacity in the underlying store.
"""

import logging
from typing import Any

from kvcache.cache.base import Cache, KeyEnumeration, SizeAccounting
from kvcache.consts import NAMESPACE_SEPARATOR
from kvcache.errors import CacheError, InvalidNamespace, SizeAccountingUnsupported

logger = logging.getLogger(__name__)


class PrefixingCache(Cache, SizeAccounting):
    """Cache view that prepends a fixed prefix to every key.

    Holds a non-owning reference to the wrapped cache. Key enumeration is
    deliberately not exposed, so a namespaced view never lists the keys of
    sibling namespaces.

    A prefix is a name followed by NAMESPACE_SEPARATOR, and the name itself
    may not contain the separator. No valid prefix is then a prefix of
    another, so "user:" and "users:" never see each other's keys.
    """

    def __init__(self, wrapped: Cache, prefix: str):
        """Initialize PrefixingCache.

        Args:
            wrapped: Cache that actually stores the entries.
            prefix: String prepended to every key before delegation, e.g. "tenant:".

        Raises:
            InvalidNamespace: If the prefix could overlap another namespace.
        """
        name, sep, rest = prefix.partition(NAMESPACE_SEPARATOR)
        if not name or not sep or rest:
            raise InvalidNamespace(
                f"Prefix {prefix!r} must be a non-empty name followed by a single "
                f"{NAMESPACE_SEPARATOR!r}"
            )
        self._wrapped = wrapped
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        return self._prefix

    def _key(self, key: str) -> str:
        return self._prefix + key

    def get(self, key: str) -> Any | None:
        return self._wrapped.get(self._key(key))

    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        return self._wrapped.set(self._key(key), value, ttl)

    def delete(self, key: str) -> bool:
        return self._wrapped.delete(self._key(key))

    def clear(self) -> None:
        """Delete every entry in this namespace, leaving siblings untouched.

        Raises:
            CacheError: If the wrapped cache cannot enumerate its keys.
        """
        if not isinstance(self._wrapped, KeyEnumeration):
            raise CacheError(
                f"Cannot clear namespace {self._prefix!r}: "
                f"{type(self._wrapped).__name__} does not enumerate keys"
            )
        removed = 0
        for key in self._wrapped.keys():
            if key.startswith(self._prefix) and self._wrapped.delete(key):
                removed += 1
        logger.debug(f"Cleared {removed} entries from namespace {self._prefix!r}")

    def get_total_size(self) -> int:
        """Aggregate size reported by the wrapped cache.

        This is the size of the whole shared store, not of this namespace.

        Raises:
            SizeAccountingUnsupported: If the wrapped cache has no size accounting.
        """
        if isinstance(self._wrapped, SizeAccounting):
            return self._wrapped.get_total_size()
        raise SizeAccountingUnsupported(type(self._wrapped).__name__)
