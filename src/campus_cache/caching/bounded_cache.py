"""
Bounded TTL Cache - Capacity-Bounded Caching with Load-on-Miss.

Provides thread-safe caching for expensive lookups.

Design Notes:
    - TTL-based expiration, checked lazily
    - Oldest-created entry evicted when max size reached (not LRU)
    - One readers-writer lock per instance
    - Loads on miss are serialized cache-wide, across all keys
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Generic, Hashable, Optional, Set, TypeVar

from campus_cache.caching.locks import ReadWriteLock
from campus_cache.domain.entry import CacheEntry
from campus_cache.domain.value_objects import CacheStats, TtlLike, ttl_to_seconds

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

DEFAULT_MAX_SIZE = 1000
DEFAULT_TTL_SECONDS = 3600.0


class BoundedTTLCache(Generic[K, V]):
    """
    Capacity-bounded TTL cache guarded by a readers-writer lock.

    Features:
        - Shared lock for reads, exclusive lock for writes
        - get(key, loader) loads at most once per key while the result
          stays cached: the miss path holds the exclusive lock for the
          whole cache, so loads for different keys also run one at a time
        - Eviction by creation time, ignoring access recency
        - size(), key_set() and stats() sweep expired entries first;
          get() never deletes

    A loader may call back into the same cache from inside the load
    (the write side is reentrant), which keeps recursive memoized
    functions working. A slow loader blocks every other caller.
    """

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        default_ttl: Optional[TtlLike] = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Initialize cache.

        Args:
            max_size: Maximum number of entries (must be >= 1)
            default_ttl: TTL for put() without explicit TTL (None = never expire)
            clock: Time source returning epoch seconds

        Raises:
            ValueError: If max_size < 1
        """
        if max_size < 1:
            raise ValueError(f"max_size must be >= 1, got {max_size}")
        self._max_size = max_size
        self._default_ttl = ttl_to_seconds(default_ttl)
        self._clock = clock
        self._cache: Dict[K, CacheEntry[V]] = {}
        self._lock = ReadWriteLock()

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def default_ttl(self) -> Optional[float]:
        """Default TTL in seconds, or None when entries never expire."""
        return self._default_ttl

    @property
    def clock(self) -> Callable[[], float]:
        return self._clock

    def get(
        self,
        key: K,
        loader: Optional[Callable[[K], Optional[V]]] = None,
    ) -> Optional[V]:
        """
        Get value from cache, loading it on a miss when a loader is given.

        Args:
            key: Cache key
            loader: Optional function computing the value for ``key``

        Returns:
            Cached or loaded value; None if not found/expired and no loader
            (or the loader returned None)

        Raises:
            Exception: Whatever the loader raises, unchanged
        """
        value = self._get(key)
        if value is not None or loader is None:
            return value

        with self._lock.write_locked():
            # Another thread may have loaded it while we waited
            entry = self._cache.get(key)
            if entry is not None and not entry.is_expired(self._clock()):
                return entry.get_value()

            logger.debug(f"Cache LOAD: {key}")
            loaded = loader(key)
            if loaded is not None:
                self.put(key, loaded)
            return loaded

    def _get(self, key: K) -> Optional[V]:
        with self._lock.read_locked():
            entry = self._cache.get(key)
            if entry is None or entry.is_expired(self._clock()):
                return None
            return entry.get_value()

    def put(self, key: K, value: V, ttl: Optional[TtlLike] = None) -> None:
        """
        Set value in cache.

        A None key or value is ignored.

        Args:
            key: Cache key
            value: Value to cache
            ttl: TTL (seconds or timedelta); uses the default if None,
                never expires if <= 0
        """
        if key is None or value is None:
            return

        effective_ttl = ttl if ttl is not None else self._default_ttl

        with self._lock.write_locked():
            if key not in self._cache and len(self._cache) >= self._max_size:
                self._evict_oldest()

            # Re-insert so dict order follows creation order
            self._cache.pop(key, None)
            self._cache[key] = CacheEntry(value, ttl=effective_ttl, clock=self._clock)

    def remove(self, key: K) -> Optional[V]:
        """
        Remove an entry.

        Returns:
            The removed value, or None if the key was not cached
        """
        with self._lock.write_locked():
            entry = self._cache.pop(key, None)
            # Removal is not an access; read the raw value
            return entry._value if entry is not None else None

    def contains_key(self, key: K) -> bool:
        """Check for a live entry without touching it."""
        with self._lock.read_locked():
            entry = self._cache.get(key)
            return entry is not None and not entry.is_expired(self._clock())

    def clear(self) -> None:
        """Clear all cache entries."""
        with self._lock.write_locked():
            self._cache.clear()
            logger.info("Cache CLEARED")

    def size(self) -> int:
        """Number of live entries (expired entries are swept first)."""
        with self._lock.write_locked():
            self._purge_expired()
            return len(self._cache)

    def is_empty(self) -> bool:
        return self.size() == 0

    def key_set(self) -> Set[K]:
        """Copy of the live keys (expired entries are swept first)."""
        with self._lock.write_locked():
            self._purge_expired()
            return set(self._cache)

    def stats(self) -> CacheStats:
        """
        Get cache statistics.

        ``expired_count`` is the number of entries swept by this call.
        """
        with self._lock.write_locked():
            expired = self._purge_expired()
            size = len(self._cache)
            total_accesses = sum(entry.access_count for entry in self._cache.values())
            hit_rate = size / total_accesses if total_accesses > 0 else 0.0
            return CacheStats(
                size=size,
                max_size=self._max_size,
                total_accesses=total_accesses,
                hit_rate=hit_rate,
                expired_count=expired,
            )

    def entries(self, include_expired: bool = True) -> Dict[K, CacheEntry[V]]:
        """
        Snapshot of key -> entry for inspection and maintenance.

        The mapping is a copy; the entries are the live objects.
        """
        with self._lock.read_locked():
            if include_expired:
                return dict(self._cache)
            now = self._clock()
            return {k: e for k, e in self._cache.items() if not e.is_expired(now)}

    def _purge_expired(self) -> int:
        """Remove expired entries (internal, must hold write lock)."""
        now = self._clock()
        expired = [k for k, e in self._cache.items() if e.is_expired(now)]
        for key in expired:
            del self._cache[key]
        if expired:
            logger.debug(f"Cache SWEPT {len(expired)} expired entries")
        return len(expired)

    def _evict_oldest(self) -> None:
        """Evict the entry with the smallest created_at (internal, must hold write lock)."""
        if not self._cache:
            return
        oldest_key = min(self._cache.items(), key=lambda item: item[1].created_at)[0]
        del self._cache[oldest_key]
        logger.debug(f"Cache EVICTED (oldest): {oldest_key}")

    def __repr__(self) -> str:
        return (
            f"BoundedTTLCache(max_size={self._max_size}, "
            f"default_ttl={self._default_ttl}, entries={len(self._cache)})"
        )
