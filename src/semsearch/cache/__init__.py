"""Bounded in-memory caches.

Usage:
    from semsearch.cache import FIFOCache

    cache = FIFOCache(capacity=100)
    cache.set("codigo", ("codigo", "kodigo"))
    cache.get("codigo")  # ("codigo", "kodigo")
"""

from semsearch.cache.base import Cache, CacheEntry
from semsearch.cache.fifo import DEFAULT_CAPACITY, FIFOCache

__all__ = [
    # Base classes
    "Cache",
    "CacheEntry",
    # Implementations
    "FIFOCache",
    "DEFAULT_CAPACITY",
]
