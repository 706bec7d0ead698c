"""
Campus Cache - In-Process Caching Core.

Generic in-memory caching for the campus administration services:
time-to-live expiry, capacity-bounded storage, least-recently-used
eviction, and memoization built on top of them.

Architecture:
    - Two cache variants with different concurrency contracts
    - Maintenance operates through an explicit inspection protocol
    - Configuration-driven defaults via YAML

Main Components:
    - domain: CacheEntry and CacheStats
    - interfaces: Protocols for caches and inspectable caches
    - caching: BoundedTTLCache, LRUCache, CacheBuilder, key helpers
    - maintenance: Sweeps, evictions, inspection, bulk operations
    - memoization: memoize() and memoize_supplier()
    - warming: warm_up() and warm_up_async()
    - config: Configuration models and loaders

Example:
    >>> from campus_cache import new_builder
    >>> cache = new_builder().max_size(500).default_ttl(600).build()
    >>> cache.put("student:42", {"name": "Ada"})
    >>> cache.get("student:42")
    {'name': 'Ada'}

"""

import logging

__version__ = "0.2.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Campus Cache.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import campus_cache
        >>> campus_cache.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("campus_cache").setLevel(level)


from campus_cache.caching import (  # noqa: E402
    BoundedTTLCache,
    CacheBuilder,
    LRUCache,
    new_builder,
)
from campus_cache.domain import CacheEntry, CacheStats  # noqa: E402
from campus_cache.maintenance import (  # noqa: E402
    clean_expired,
    evict_lru,
    evict_older_than,
)
from campus_cache.memoization import memoize, memoize_supplier  # noqa: E402
from campus_cache.warming import warm_up, warm_up_async  # noqa: E402

__all__ = [
    "BoundedTTLCache",
    "CacheBuilder",
    "CacheEntry",
    "CacheStats",
    "LRUCache",
    "clean_expired",
    "configure_logging",
    "evict_lru",
    "evict_older_than",
    "memoize",
    "memoize_supplier",
    "new_builder",
    "warm_up",
    "warm_up_async",
]
