"""
Factory - Build Cache Components from Configuration.

Wires CacheLibraryConfig sections into concrete caches, memoizers and
warm-up calls so services can be configured from a single YAML file.

Example:
    >>> from campus_cache.config import load_config
    >>> config = load_config("config/cache.yaml")
    >>> roster_cache = create_cache(config)
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional

from campus_cache.caching.bounded_cache import BoundedTTLCache
from campus_cache.caching.builder import CacheBuilder
from campus_cache.caching.lru_cache import LRUCache
from campus_cache.config.models import CacheLibraryConfig
from campus_cache.memoization.memoize import memoize
from campus_cache.resilience.error_handler import PartialResult
from campus_cache.warming.warmer import warm_up

logger = logging.getLogger(__name__)


def create_cache(config: Optional[CacheLibraryConfig] = None) -> BoundedTTLCache:
    """Create a BoundedTTLCache from the ``cache`` section."""
    config = config or CacheLibraryConfig()
    cache: BoundedTTLCache = CacheBuilder.from_settings(config.cache).build()
    logger.debug(f"Created {cache!r}")
    return cache


def create_lru_cache(config: Optional[CacheLibraryConfig] = None) -> LRUCache:
    """Create an LRUCache from the ``lru`` section."""
    config = config or CacheLibraryConfig()
    return LRUCache(
        max_size=config.lru.max_size,
        default_ttl=config.lru.default_ttl_seconds,
    )


def create_memoizer(
    config: Optional[CacheLibraryConfig] = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Return a memoize decorator using the ``memoize`` section."""
    config = config or CacheLibraryConfig()
    return memoize(
        max_size=config.memoize.max_size,
        ttl=config.memoize.ttl_seconds,
    )


def warm_up_from_config(
    cache: BoundedTTLCache,
    loader: Callable[[Any], Any],
    keys: Iterable[Any],
    config: Optional[CacheLibraryConfig] = None,
) -> PartialResult[Any]:
    """warm_up() with pool size from the ``warm_up`` section."""
    config = config or CacheLibraryConfig()
    return warm_up(cache, loader, keys, max_workers=config.warm_up.max_workers)


def configure_from(config: CacheLibraryConfig) -> None:
    """Apply the configured log level to the package logger."""
    logging.getLogger("campus_cache").setLevel(config.log_level)
