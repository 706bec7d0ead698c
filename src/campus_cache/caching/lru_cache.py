"""
LRU Cache - Access-Ordered Bounded Cache.

Design Notes:
    - OrderedDict keeps recency order (LRU first, MRU last)
    - move_to_end on access, popitem(last=False) to evict
    - Expiry lives in a separate key -> expires_at table
    - NOT thread-safe: callers sharing an instance across threads must
      serialize every call with their own lock, otherwise the value map
      and the expiry table can drift apart
"""

from __future__ import annotations

import logging
import time
from collections import OrderedDict
from typing import Any, Callable, Dict, Generic, Hashable, List, Optional, TypeVar

from campus_cache.domain.entry import CacheEntry
from campus_cache.domain.value_objects import TtlLike, ttl_to_seconds

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class _Record:
    __slots__ = ("value", "created_at", "last_accessed", "access_count")

    def __init__(self, value: Any, now: float) -> None:
        self.value = value
        self.created_at = now
        self.last_accessed = now
        self.access_count = 0


class LRUCache(Generic[K, V]):
    """
    Least-recently-used cache with optional per-entry TTL.

    Every successful get() moves the key to the most-recently-used end.
    When an insert pushes the size over max_size, the least-recently-used
    entry is dropped together with its expiry row.

    Example:
        >>> cache = LRUCache(max_size=2)
        >>> cache.put("a", 1)
        >>> cache.put("b", 2)
        >>> cache.get("a")
        1
        >>> cache.put("c", 3)
        >>> cache.keys()
        ['a', 'c']
    """

    def __init__(
        self,
        max_size: int,
        default_ttl: Optional[TtlLike] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Initialize cache.

        Args:
            max_size: Maximum number of entries (must be >= 1)
            default_ttl: TTL applied by put() without one (None = no expiry)
            clock: Time source returning epoch seconds

        Raises:
            ValueError: If max_size < 1
        """
        if max_size < 1:
            raise ValueError(f"max_size must be >= 1, got {max_size}")
        self._max_size = max_size
        self._default_ttl = ttl_to_seconds(default_ttl)
        self._clock = clock
        self._map: OrderedDict[K, _Record] = OrderedDict()
        self._expirations: Dict[K, float] = {}

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def default_ttl(self) -> Optional[float]:
        return self._default_ttl

    @property
    def clock(self) -> Callable[[], float]:
        return self._clock

    def get(self, key: K) -> Optional[V]:
        """
        Get value and mark it most recently used.

        Sweeps every expired key before the lookup.

        Returns:
            Cached value or None if not found/expired
        """
        self._sweep()

        expires_at = self._expirations.get(key)
        if expires_at is not None and self._clock() > expires_at:
            self.remove(key)
            return None

        record = self._map.get(key)
        if record is None:
            return None
        record.access_count += 1
        record.last_accessed = self._clock()
        self._map.move_to_end(key)
        return record.value

    def put(self, key: K, value: V, ttl: Optional[TtlLike] = None) -> None:
        """
        Insert or replace a value.

        A None key or value is ignored. Without a TTL (and no default_ttl)
        any previous expiry for the key is cleared. Replacing a key starts
        a fresh entry (new created_at, zero accesses) at the MRU end.

        Args:
            key: Cache key
            value: Value to cache
            ttl: TTL (seconds or timedelta); <= 0 means no expiry
        """
        if key is None or value is None:
            return

        self._sweep()

        now = self._clock()
        seconds = ttl_to_seconds(ttl) if ttl is not None else self._default_ttl
        if seconds is not None:
            self._expirations[key] = now + seconds
        else:
            self._expirations.pop(key, None)

        self._map[key] = _Record(value, now)
        self._map.move_to_end(key)
        if len(self._map) > self._max_size:
            self._evict_eldest()

    def remove(self, key: K) -> Optional[V]:
        """Remove an entry and return its value (None if absent)."""
        self._expirations.pop(key, None)
        record = self._map.pop(key, None)
        return record.value if record is not None else None

    def contains_key(self, key: K) -> bool:
        """Check for a live entry without changing recency."""
        if key not in self._map:
            return False
        expires_at = self._expirations.get(key)
        return expires_at is None or self._clock() <= expires_at

    def clear(self) -> None:
        self._expirations.clear()
        self._map.clear()

    def size(self) -> int:
        return len(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def keys(self) -> List[K]:
        """Keys from least to most recently used."""
        return list(self._map)

    def clean_expired(self) -> int:
        """Remove all expired entries and return how many were removed."""
        return self._sweep()

    def remaining_ttl(self, key: K) -> Optional[float]:
        """
        Seconds until ``key`` expires.

        Returns:
            Remaining seconds (0.0 once passed), or None if the key is
            missing or has no expiry
        """
        if key not in self._map:
            return None
        expires_at = self._expirations.get(key)
        if expires_at is None:
            return None
        return max(0.0, expires_at - self._clock())

    def entries(self, include_expired: bool = True) -> Dict[K, CacheEntry[V]]:
        """
        Snapshot of key -> entry in LRU order, for maintenance.

        Entries are detached copies; reading them does not change recency.
        """
        now = self._clock()
        result: Dict[K, CacheEntry[V]] = {}
        for key, record in self._map.items():
            expires_at = self._expirations.get(key)
            if include_expired or expires_at is None or now <= expires_at:
                result[key] = CacheEntry.snapshot(
                    record.value,
                    created_at=record.created_at,
                    expires_at=expires_at,
                    last_accessed=record.last_accessed,
                    access_count=record.access_count,
                    clock=self._clock,
                )
        return result

    def _sweep(self) -> int:
        now = self._clock()
        expired = [k for k, expires_at in self._expirations.items() if now > expires_at]
        for key in expired:
            self.remove(key)
        if expired:
            logger.debug(f"LRU SWEPT {len(expired)} expired entries")
        return len(expired)

    def _evict_eldest(self) -> None:
        key, _ = self._map.popitem(last=False)
        self._expirations.pop(key, None)
        logger.debug(f"LRU EVICTED: {key}")

    def __repr__(self) -> str:
        return f"LRUCache(max_size={self._max_size}, entries={len(self._map)})"
