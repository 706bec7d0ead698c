"""
Cache Protocols.

Maintenance functions never reach into a cache's private storage; they
enumerate entries through ``entries()`` and delete through ``remove()``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Protocol, runtime_checkable

from campus_cache.domain.entry import CacheEntry
from campus_cache.domain.value_objects import TtlLike


# Computes the value for a key that is not cached. Expected to be pure.
Loader = Callable[[Any], Any]


@runtime_checkable
class CacheProtocol(Protocol):
    """Read/write surface shared by cache implementations."""

    def get(self, key: Any) -> Optional[Any]:
        """Get value from cache, or None if missing/expired."""
        ...

    def put(self, key: Any, value: Any, ttl: Optional[TtlLike] = None) -> None:
        """Store value with optional TTL."""
        ...

    def remove(self, key: Any) -> Optional[Any]:
        """Remove entry and return its previous value."""
        ...

    def contains_key(self, key: Any) -> bool:
        """Check for a live (non-expired) entry."""
        ...

    def clear(self) -> None:
        """Remove all entries."""
        ...


@runtime_checkable
class InspectableCache(Protocol):
    """Cache exposing an explicit enumeration API for maintenance."""

    @property
    def clock(self) -> Callable[[], float]:
        """Time source used for expiry decisions."""
        ...

    def entries(self, include_expired: bool = True) -> Dict[Any, CacheEntry[Any]]:
        """
        Snapshot of key -> entry.

        Args:
            include_expired: Whether expired-but-unswept entries are included
        """
        ...

    def remove(self, key: Any) -> Optional[Any]:
        """Remove entry and return its previous value."""
        ...
