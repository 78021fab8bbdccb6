"""Build a cache chain from CacheOptions."""

import logging

from kvcache.cache.base import Cache
from kvcache.cache.prefixing import PrefixingCache
from kvcache.cache.sized_cache import SizedCache
from kvcache.consts import NAMESPACE_SEPARATOR
from kvcache.models.model_cache import CacheOptions
from kvcache.storage.lru_store import Clock

logger = logging.getLogger(__name__)


def create_cache(options: CacheOptions | None = None, clock: Clock | None = None) -> Cache:
    """Create a sized cache, namespaced when options.namespace is set.

    Args:
        options: Cache configuration. Defaults to CacheOptions().
        clock: Millisecond clock for the underlying store.

    Returns:
        A SizedCache, or a PrefixingCache with prefix "<namespace>:" wrapping one.
    """
    options = options or CacheOptions()
    cache: Cache = SizedCache(
        max_size_bytes=options.effective_max_size_bytes,
        max_entries=options.max_entries,
        size_calculation=options.size_calculation,
        default_ttl=options.default_ttl,
        clock=clock,
    )
    logger.info(
        f"Created cache (max_entries={options.max_entries}, "
        f"max_size_bytes={options.effective_max_size_bytes}, namespace={options.namespace})"
    )
    if options.namespace is not None:
        cache = PrefixingCache(cache, options.namespace + NAMESPACE_SEPARATOR)
    return cache
