"""
Cache Sweeper - Expiry Sweeps and Forced Evictions.

Design Notes:
    - "now" is read once per call
    - Evictions ignore remaining TTL
    - Keys are collected from a snapshot, then removed one by one
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Optional, Union

from campus_cache.interfaces.cache import InspectableCache
from campus_cache.maintenance.inspection import keys_by_age

logger = logging.getLogger(__name__)


def clean_expired(cache: Optional[InspectableCache]) -> int:
    """
    Remove every entry whose expiry has passed.

    Returns:
        Number of entries removed
    """
    if cache is None:
        return 0

    now = cache.clock()
    expired = [k for k, e in cache.entries().items() if e.is_expired(now)]
    for key in expired:
        cache.remove(key)

    if expired:
        logger.debug(f"Cleaned {len(expired)} expired entries")
    return len(expired)


def evict_lru(cache: Optional[InspectableCache], count: int) -> int:
    """
    Evict up to ``count`` least recently accessed entries.

    Args:
        cache: Cache to evict from
        count: Maximum number of entries to evict

    Returns:
        Number of entries evicted
    """
    if cache is None or count <= 0:
        return 0

    # sorted() is stable, so ties keep the cache's own ordering
    ordered = sorted(cache.entries().items(), key=lambda item: item[1].last_accessed)
    victims = [key for key, _ in ordered[:count]]
    for key in victims:
        cache.remove(key)

    if victims:
        logger.debug(f"Evicted {len(victims)} least recently used entries")
    return len(victims)


def evict_older_than(
    cache: Optional[InspectableCache],
    age: Union[int, float, timedelta],
) -> int:
    """
    Evict entries created more than ``age`` ago.

    Returns:
        Number of entries evicted
    """
    if cache is None:
        return 0

    old_keys = keys_by_age(cache, age)
    for key in old_keys:
        cache.remove(key)

    if old_keys:
        logger.debug(f"Evicted {len(old_keys)} entries older than {age}")
    return len(old_keys)
