"""Data models for cache configuration, entries and statistics."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from kvcache.consts import DEFAULT_MAX_SIZE_BYTES

SizeCalculator = Callable[[Any], int]


@dataclass
class CacheEntry:
    """A single stored value. Owned by the store that created it."""

    value: Any
    size: int
    inserted_at: float  # milliseconds, from the store's clock
    ttl: int | None = None  # milliseconds, None means no expiry

    def is_expired(self, now: float) -> bool:
        """Check whether the entry outlived its TTL at time ``now``."""
        if not self.ttl:
            return False
        return now - self.inserted_at > self.ttl


class CacheOptions(BaseModel):
    """Construction-time configuration for :func:`kvcache.create_cache`."""

    model_config = ConfigDict(frozen=True)

    max_entries: int | None = Field(default=None, ge=1, description="Cap on live entry count")
    max_size_bytes: int | None = Field(
        default=None,
        ge=1,
        description=f"Cap on aggregate size. None falls back to {DEFAULT_MAX_SIZE_BYTES}",
    )
    size_calculation: SizeCalculator | None = Field(
        default=None, description="Overrides the JSON byte-size estimator"
    )
    namespace: str | None = Field(
        default=None,
        min_length=1,
        pattern=r"^[^:]+$",
        description="Namespace name; keys are prefixed with '<namespace>:'",
    )
    default_ttl: int | None = Field(
        default=None, ge=0, description="TTL in milliseconds used when set() gets none"
    )

    @property
    def effective_max_size_bytes(self) -> int:
        """Aggregate size bound actually enforced by the store."""
        if self.max_size_bytes is None:
            return DEFAULT_MAX_SIZE_BYTES
        return self.max_size_bytes


class CacheStats(BaseModel):
    """Point-in-time statistics for a store."""

    entry_count: int = Field(ge=0)
    total_size_bytes: int | None = Field(
        default=None, ge=0, description="None when the store has no size function"
    )
    max_entries: int | None = None
    max_size_bytes: int | None = None
    evictions: int = Field(default=0, ge=0, description="Entries removed for capacity")
    expirations: int = Field(default=0, ge=0, description="Entries removed for TTL")
