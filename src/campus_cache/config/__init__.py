"""
Configuration Package - Models and Loaders.

This package handles cache configuration:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Cache settings read from a nested section of an app config

Configuration Structure:
    - CacheLibraryConfig: Root configuration object
    - CacheSettings: BoundedTTLCache defaults
    - LRUSettings: LRUCache defaults
    - MemoizeSettings: memoize() defaults
    - WarmUpSettings: warm_up() pool sizing

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Lives inside the host application's YAML
"""

from campus_cache.config.loader import ConfigLoader, load_config
from campus_cache.config.models import (
    CacheLibraryConfig,
    CacheSettings,
    LRUSettings,
    MemoizeSettings,
    WarmUpSettings,
)

__all__ = [
    "CacheLibraryConfig",
    "CacheSettings",
    "ConfigLoader",
    "LRUSettings",
    "MemoizeSettings",
    "WarmUpSettings",
    "load_config",
]
