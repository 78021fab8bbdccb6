"""Pydantic models and entry types for kvcache."""

from kvcache.models.model_cache import (
    CacheEntry,
    CacheOptions,
    CacheStats,
    SizeCalculator,
)

__all__ = [
    "CacheEntry",
    "CacheOptions",
    "CacheStats",
    "SizeCalculator",
]
