"""
Caching Layer.

Provides the two cache variants and their construction helpers:
    - BoundedTTLCache: Thread-safe, capacity-bounded, TTL, load-on-miss
    - LRUCache: Unsynchronized, access-ordered, optional per-entry TTL
    - CacheBuilder / new_builder: Fluent BoundedTTLCache construction
    - ReadWriteLock: Shared/exclusive lock used by BoundedTTLCache
    - Key helpers: generate_key, normalize_key, generate_hash_key
"""

from campus_cache.caching.bounded_cache import BoundedTTLCache
from campus_cache.caching.builder import CacheBuilder, new_builder
from campus_cache.caching.keys import (
    generate_hash_key,
    generate_key,
    normalize_key,
)
from campus_cache.caching.locks import ReadWriteLock
from campus_cache.caching.lru_cache import LRUCache

__all__ = [
    "BoundedTTLCache",
    "CacheBuilder",
    "LRUCache",
    "ReadWriteLock",
    "generate_hash_key",
    "generate_key",
    "new_builder",
    "normalize_key",
]
