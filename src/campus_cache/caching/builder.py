"""
Cache Builder - Fluent Construction of BoundedTTLCache.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Callable, Generic, Hashable, Optional, TypeVar

from campus_cache.caching.bounded_cache import (
    DEFAULT_MAX_SIZE,
    DEFAULT_TTL_SECONDS,
    BoundedTTLCache,
)
from campus_cache.domain.value_objects import TtlLike

if TYPE_CHECKING:
    from campus_cache.config.models import CacheSettings

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class CacheBuilder(Generic[K, V]):
    """
    Builder for BoundedTTLCache.

    Example:
        >>> cache = CacheBuilder().max_size(100).default_ttl(60).build()
    """

    def __init__(self) -> None:
        self._max_size = DEFAULT_MAX_SIZE
        self._default_ttl: Optional[TtlLike] = DEFAULT_TTL_SECONDS
        self._clock: Callable[[], float] = time.time

    @classmethod
    def from_settings(cls, settings: "CacheSettings") -> "CacheBuilder[K, V]":
        """Start a builder pre-filled from configuration."""
        return cls().max_size(settings.max_size).default_ttl(settings.default_ttl_seconds)

    def max_size(self, max_size: int) -> "CacheBuilder[K, V]":
        self._max_size = max_size
        return self

    def default_ttl(self, ttl: Optional[TtlLike]) -> "CacheBuilder[K, V]":
        self._default_ttl = ttl
        return self

    def clock(self, clock: Callable[[], float]) -> "CacheBuilder[K, V]":
        self._clock = clock
        return self

    def build(self) -> BoundedTTLCache[K, V]:
        """
        Build the cache.

        Raises:
            ValueError: If max_size < 1
        """
        return BoundedTTLCache(
            max_size=self._max_size,
            default_ttl=self._default_ttl,
            clock=self._clock,
        )


def new_builder() -> CacheBuilder:
    """Create a new cache builder with defaults (1000 entries, 1 hour TTL)."""
    return CacheBuilder()
