"""
Bulk Cache Operations.

put_all, get_all and remove_all accept either cache variant; refresh
needs load-on-miss and so takes a BoundedTTLCache.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from campus_cache.caching.bounded_cache import BoundedTTLCache
from campus_cache.domain.value_objects import TtlLike
from campus_cache.interfaces.cache import CacheProtocol


def put_all(
    cache: Optional[CacheProtocol],
    entries: Optional[Mapping[Any, Any]],
    ttl: Optional[TtlLike] = None,
) -> None:
    """Put every mapping item, with ``ttl`` or the cache default."""
    if cache is None or entries is None:
        return
    for key, value in entries.items():
        cache.put(key, value, ttl)


def get_all(cache: Optional[CacheProtocol], keys: Optional[Iterable[Any]]) -> Dict[Any, Any]:
    """Values for the given keys; missing or expired keys are left out."""
    if cache is None or keys is None:
        return {}
    result: Dict[Any, Any] = {}
    for key in keys:
        value = cache.get(key)
        if value is not None:
            result[key] = value
    return result


def remove_all(cache: Optional[CacheProtocol], keys: Optional[Iterable[Any]]) -> None:
    if cache is None or keys is None:
        return
    for key in keys:
        cache.remove(key)


def refresh(
    cache: Optional[BoundedTTLCache],
    key: Any,
    loader: Optional[Callable[[Any], Any]],
) -> Optional[Any]:
    """
    Drop ``key`` and load it again.

    Returns:
        The freshly loaded value (None if any argument is None)
    """
    if cache is None or key is None or loader is None:
        return None
    cache.remove(key)
    return cache.get(key, loader)
