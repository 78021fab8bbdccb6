"""Exceptions raised by kvcache.

Capacity rejections on the data path are not exceptions: ``set`` reports
them by returning False so that a failed cache write never fails the
caller's primary operation.
"""


class CacheError(Exception):
    """Base class for all cache errors."""


class SizeAccountingUnsupported(CacheError):
    """Raised when a total-size query hits a layer without a size function."""

    def __init__(self, layer: str):
        super().__init__(f"{layer} does not support size accounting")
        self.layer = layer


class MisconfiguredCapacity(CacheError, ValueError):
    """Raised when a store is constructed without a finite upper bound."""


class InvalidNamespace(CacheError, ValueError):
    """Raised when a key prefix could overlap a sibling namespace."""
