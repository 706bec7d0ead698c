"""
Cache Entry - A Cached Value with Access Tracking.

Design Notes:
    - Reading the value and touching the entry are the same operation
    - expires_at is fixed at construction
    - Metadata is mutable independently of the value
"""

from __future__ import annotations

import time
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

from campus_cache.domain.value_objects import TtlLike, ttl_to_seconds

V = TypeVar("V")

Clock = Callable[[], float]


class CacheEntry(Generic[V]):
    """
    A single cache entry with timing and access metadata.

    ``get_value()`` is the only way to read the value; every call updates
    ``last_accessed`` and ``access_count``.
    """

    __slots__ = (
        "_value",
        "_clock",
        "created_at",
        "expires_at",
        "last_accessed",
        "access_count",
        "_metadata",
    )

    def __init__(
        self,
        value: V,
        ttl: Optional[TtlLike] = None,
        clock: Clock = time.time,
        created_at: Optional[float] = None,
    ) -> None:
        """
        Initialize entry.

        Args:
            value: Value to hold
            ttl: Time-to-live; None or <= 0 means never expires
            clock: Time source returning epoch seconds
            created_at: Creation time override (defaults to clock())
        """
        self._value = value
        self._clock = clock
        self.created_at: float = clock() if created_at is None else created_at
        ttl_seconds = ttl_to_seconds(ttl)
        self.expires_at: Optional[float] = (
            self.created_at + ttl_seconds if ttl_seconds is not None else None
        )
        self.last_accessed: float = self.created_at
        self.access_count: int = 0
        self._metadata: Dict[str, Any] = {}

    @classmethod
    def snapshot(
        cls,
        value: V,
        created_at: float,
        expires_at: Optional[float],
        last_accessed: float,
        access_count: int,
        clock: Clock = time.time,
    ) -> "CacheEntry[V]":
        """Build an entry from already-known timing fields."""
        entry: CacheEntry[V] = cls(value, clock=clock, created_at=created_at)
        entry.expires_at = expires_at
        entry.last_accessed = last_accessed
        entry.access_count = access_count
        return entry

    def get_value(self) -> V:
        """Return the value and record the access."""
        self.last_accessed = self._clock()
        self.access_count += 1
        return self._value

    def is_expired(self, now: Optional[float] = None) -> bool:
        """Check whether the entry has expired at ``now`` (default: clock())."""
        if self.expires_at is None:
            return False
        if now is None:
            now = self._clock()
        return now > self.expires_at

    def age(self, now: Optional[float] = None) -> float:
        """Seconds since creation."""
        return (self._clock() if now is None else now) - self.created_at

    def time_since_last_access(self, now: Optional[float] = None) -> float:
        """Seconds since the last read (or creation if never read)."""
        return (self._clock() if now is None else now) - self.last_accessed

    @property
    def metadata(self) -> Dict[str, Any]:
        """Copy of the entry metadata."""
        return dict(self._metadata)

    def set_metadata(self, key: str, value: Any) -> None:
        self._metadata[key] = value

    def get_metadata(self, key: str) -> Optional[Any]:
        return self._metadata.get(key)

    def __repr__(self) -> str:
        return (
            f"CacheEntry(created_at={self.created_at}, expires_at={self.expires_at}, "
            f"access_count={self.access_count})"
        )
