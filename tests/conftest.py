"""Pytest configuration and fixtures."""

from typing import Any

import pytest

from kvcache.cache.base import Cache
from kvcache.cache.sized_cache import SizedCache
from kvcache.storage.lru_store import SizedLRUStore


class FakeClock:
    """Millisecond clock advanced manually by tests."""

    def __init__(self, start: float = 1_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


class DictCache(Cache):
    """Plain dict cache with no size accounting and no key enumeration."""

    def __init__(self) -> None:
        self.data: dict[str, Any] = {}

    def get(self, key: str) -> Any | None:
        return self.data.get(key)

    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        self.data[key] = value
        return True

    def delete(self, key: str) -> bool:
        return self.data.pop(key, None) is not None

    def clear(self) -> None:
        self.data.clear()


@pytest.fixture
def clock() -> FakeClock:
    """Create a controllable millisecond clock."""
    return FakeClock()


@pytest.fixture
def sized_store(clock: FakeClock) -> SizedLRUStore:
    """Create a store that sizes string values by their length."""
    return SizedLRUStore(size_calculation=len, max_size_bytes=10, max_entries=3, clock=clock)


@pytest.fixture
def shared_cache(clock: FakeClock) -> SizedCache:
    """Create a SizedCache with the default JSON size estimator."""
    return SizedCache(max_size_bytes=1_000, max_entries=100, clock=clock)


@pytest.fixture
def dict_cache() -> DictCache:
    """Create a cache without size accounting."""
    return DictCache()
