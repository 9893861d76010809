"""Cache protocol and base classes."""

from abc import ABC, abstractmethod
from collections.abc import Hashable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class CacheEntry:
    """Represents a cached value.

    Attributes:
        key: Cache key.
        value: The cached value.
        created_at: When the entry was created.
        hits: Number of times the entry was read.
    """

    key: Hashable
    value: Any
    created_at: datetime = field(default_factory=datetime.now)
    hits: int = 0


class Cache(ABC):
    """Abstract base class for in-memory caches.

    This defines the interface that the phonetic variation cache and the
    per-session result cache implement.
    """

    @abstractmethod
    def get(self, key: Hashable) -> Any | None:
        """Retrieve a value from the cache.

        Args:
            key: The cache key to look up.

        Returns:
            The cached value, or None on a miss.
        """
        pass

    @abstractmethod
    def set(self, key: Hashable, value: Any) -> CacheEntry:
        """Store a value in the cache.

        Args:
            key: Cache key.
            value: Value to store.

        Returns:
            The created CacheEntry.
        """
        pass

    @abstractmethod
    def delete(self, key: Hashable) -> bool:
        """Delete an entry from the cache.

        Args:
            key: The cache key to delete.

        Returns:
            True if the entry was deleted, False if it didn't exist.
        """
        pass

    @abstractmethod
    def clear(self) -> int:
        """Clear all entries from the cache.

        Returns:
            The number of entries that were cleared.
        """
        pass

    def exists(self, key: Hashable) -> bool:
        """Check if a key is cached.

        Args:
            key: The cache key to check.

        Returns:
            True if the key exists.
        """
        return self.get(key) is not None

    @abstractmethod
    def count(self) -> int:
        """Get the total number of entries in the cache.

        Returns:
            The number of cached entries.
        """
        pass

    @abstractmethod
    def stats(self) -> dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dictionary with cache statistics like hit rate, size, etc.
        """
        pass
