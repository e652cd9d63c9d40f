"""
Disk-based caching of fetched record sets.

The dashboard fetches the raw record collection once per page load. The
result is parked in a diskcache.Cache under the page load token so the
callbacks that follow (search, sort, paging) reuse the same data without
shipping it through the browser.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, TypeVar

import diskcache

from consign_tracker.lib import logs

LOG = logs.logger(__file__)

T = TypeVar("T")


@dataclass
class CacheEntry:
    """
    Wrapper around a cached value.

    Attributes:
        value: The cached value.
        loaded: True when the value was produced by the loader on this call.
    """

    value: Any
    loaded: bool = False


class DiskCache:
    """
    Disk-based cache with TTL support.

    Thread-safe and process-safe, so several Dash workers can share it.

    Attributes:
        cache_dir: Path to the cache directory.
    """

    def __init__(self, cache_dir: str | Path) -> None:
        """
        Initialize the disk cache.

        Args:
            cache_dir: Directory path for storing cache files.
                       Created if it doesn't exist.
        """
        self.cache_dir = Path(cache_dir)
        self._cache = diskcache.Cache(str(self.cache_dir))

    def get_or_load(
        self,
        key: str,
        loader: Callable[[], T],
        expire: int | None = None,
    ) -> CacheEntry:
        """
        Get a value from cache or load it using the provided function.

        The loader is only called on a miss; its exceptions propagate and
        nothing is stored.

        Args:
            key: Cache key string.
            loader: Function to call if cache miss (no arguments).
            expire: TTL in seconds. None means no expiration.

        Returns:
            CacheEntry containing the value.
        """
        cached = self._cache.get(key, default=None)
        if cached is not None:
            return CacheEntry(value=cached)

        LOG.info("Cache miss - key:%s", key)
        value = loader()
        self._cache.set(key, value, expire=expire)
        return CacheEntry(value=value, loaded=True)

    def get(self, key: str) -> CacheEntry | None:
        """Return the cached entry for key, or None."""
        cached = self._cache.get(key, default=None)
        if cached is not None:
            return CacheEntry(value=cached)
        return None

    def set(self, key: str, value: Any, expire: int | None = None) -> None:
        """Store a value, replacing any previous entry."""
        self._cache.set(key, value, expire=expire)

    def delete(self, key: str) -> None:
        self._cache.delete(key)

    def clear(self) -> None:
        """Clear all entries from the cache."""
        self._cache.clear()

    def close(self) -> None:
        """Close the cache and release resources."""
        self._cache.close()
