"""Tests for building caches from options."""

from kvcache.cache.factory import create_cache
from kvcache.cache.prefixing import PrefixingCache
from kvcache.cache.sized_cache import SizedCache
from kvcache.consts import DEFAULT_MAX_SIZE_BYTES
from kvcache.models.model_cache import CacheOptions


class TestCreateCache:
    """Tests for create_cache."""

    def test_default_cache(self) -> None:
        """Test that no options yields a finite sized cache."""
        cache = create_cache()

        assert isinstance(cache, SizedCache)
        assert cache.store.max_size_bytes == DEFAULT_MAX_SIZE_BYTES
        assert cache.get_total_size() == 0

    def test_namespace_wraps_in_prefixing_cache(self) -> None:
        """Test that a namespace option produces a prefixing facade."""
        cache = create_cache(CacheOptions(namespace="apollo"))

        assert isinstance(cache, PrefixingCache)
        assert cache.prefix == "apollo:"
        cache.set("k", "v")
        assert cache.get("k") == "v"
        assert cache.get_total_size() == 3

    def test_bounds_applied(self) -> None:
        """Test that entry and size bounds reach the store."""
        cache = create_cache(CacheOptions(max_entries=2, max_size_bytes=20))
        cache.set("a", "a")
        cache.set("b", "b")
        cache.set("c", "c")

        assert cache.get("a") is None
        stats = cache.get_stats()
        assert stats.max_entries == 2
        assert stats.max_size_bytes == 20

    def test_custom_size_calculation(self) -> None:
        """Test that size_calculation overrides the JSON estimator."""
        cache = create_cache(CacheOptions(size_calculation=lambda value: 7))
        cache.set("a", {"anything": "at all"})

        assert cache.get_total_size() == 7

    def test_default_ttl_with_clock(self, clock) -> None:
        """Test that default_ttl and the clock are passed through."""
        cache = create_cache(CacheOptions(default_ttl=10, namespace="ns"), clock=clock)
        cache.set("k", "v")
        clock.advance(11)

        assert cache.get("k") is None
