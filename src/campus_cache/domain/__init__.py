"""
Domain Layer - Cache Entries and Statistics.

Entities:
    - CacheEntry: A cached value with timing, access and metadata tracking

Value Objects:
    - CacheStats: Immutable snapshot of a cache's state
    - TtlLike: Accepted time-to-live representations

Design Principles:
    - Immutable where possible (frozen pydantic models)
    - Timestamps are epoch seconds from an injectable clock
    - No infrastructure dependencies
"""

from campus_cache.domain.entry import CacheEntry
from campus_cache.domain.value_objects import CacheStats, TtlLike, ttl_to_seconds

__all__ = ["CacheEntry", "CacheStats", "TtlLike", "ttl_to_seconds"]
