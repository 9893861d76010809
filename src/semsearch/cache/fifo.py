"""Bounded first-in first-out cache."""

import threading
from collections import OrderedDict
from collections.abc import Hashable
from typing import Any

from semsearch.cache.base import Cache, CacheEntry

DEFAULT_CAPACITY = 200


class FIFOCache(Cache):
    """In-memory cache that evicts its oldest entry once full.

    Reads do not refresh an entry's position: eviction order is insertion
    order. There is no TTL. All operations hold a lock so the cache can be
    shared with a debouncer's timer thread.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        """Initialize the cache.

        Args:
            capacity: Maximum number of entries. Must be at least 1.
        """
        if capacity < 1:
            raise ValueError(f"Cache capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._entries: OrderedDict[Hashable, CacheEntry] = OrderedDict()
        self._lock = threading.RLock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, key: Hashable) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None
            entry.hits += 1
            self._hits += 1
            return entry.value

    def set(self, key: Hashable, value: Any) -> CacheEntry:
        with self._lock:
            if key in self._entries:
                # Replacing keeps the original insertion slot
                entry = self._entries[key]
                entry.value = value
                return entry

            while len(self._entries) >= self.capacity:
                self._entries.popitem(last=False)
                self._evictions += 1

            entry = CacheEntry(key=key, value=value)
            self._entries[key] = entry
            return entry

    def delete(self, key: Hashable) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> int:
        with self._lock:
            cleared = len(self._entries)
            self._entries.clear()
            return cleared

    def count(self) -> int:
        with self._lock:
            return len(self._entries)

    def keys(self) -> list[Hashable]:
        """Cached keys, oldest first."""
        with self._lock:
            return list(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        return self.count()

    def stats(self) -> dict[str, Any]:
        with self._lock:
            lookups = self._hits + self._misses
            return {
                "entries": len(self._entries),
                "capacity": self.capacity,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
                "hit_rate": self._hits / lookups if lookups else 0.0,
            }
