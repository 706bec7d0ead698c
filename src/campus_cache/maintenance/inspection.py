"""
Cache Inspection - Read-Only Queries over Cache Entries.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict, List, Optional, Union

from campus_cache.domain.entry import CacheEntry
from campus_cache.interfaces.cache import InspectableCache


def as_seconds(duration: Union[int, float, timedelta]) -> float:
    """Convert seconds or a timedelta to float seconds."""
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    return float(duration)


def get_all_entries(cache: Optional[InspectableCache]) -> Dict[Any, CacheEntry[Any]]:
    """All live (non-expired) entries keyed by cache key."""
    if cache is None:
        return {}
    return cache.entries(include_expired=False)


def keys_by_age(
    cache: Optional[InspectableCache],
    older_than: Union[int, float, timedelta],
    now: Optional[float] = None,
) -> List[Any]:
    """
    Keys whose entry was created before ``now - older_than``.

    Args:
        cache: Cache to inspect
        older_than: Age threshold (seconds or timedelta)
        now: Reference time (default: the cache's clock)

    Returns:
        Matching keys, expired entries included
    """
    if cache is None:
        return []
    reference = cache.clock() if now is None else now
    threshold = reference - as_seconds(older_than)
    return [k for k, e in cache.entries().items() if e.created_at < threshold]


def keys_by_access_count(cache: Optional[InspectableCache], min_accesses: int) -> List[Any]:
    """Keys read at least ``min_accesses`` times."""
    if cache is None:
        return []
    return [k for k, e in cache.entries().items() if e.access_count >= min_accesses]
