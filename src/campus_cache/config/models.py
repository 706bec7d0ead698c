"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field


class CacheSettings(BaseModel):
    """Defaults for BoundedTTLCache."""

    max_size: int = Field(default=1000, ge=1)
    # None or 0 means entries never expire
    default_ttl_seconds: Optional[float] = Field(default=3600.0, ge=0)


class LRUSettings(BaseModel):
    """Defaults for LRUCache."""

    max_size: int = Field(default=256, ge=1)
    default_ttl_seconds: Optional[float] = Field(default=None, ge=0)


class MemoizeSettings(BaseModel):
    """Defaults for memoize()."""

    max_size: int = Field(default=1000, ge=1)
    ttl_seconds: Optional[float] = Field(default=3600.0, ge=0)


class WarmUpSettings(BaseModel):
    """Thread pool sizing for warm_up()."""

    max_workers: Optional[int] = Field(default=None, ge=1)


class CacheLibraryConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    cache: CacheSettings = Field(default_factory=CacheSettings)
    lru: LRUSettings = Field(default_factory=LRUSettings)
    memoize: MemoizeSettings = Field(default_factory=MemoizeSettings)
    warm_up: WarmUpSettings = Field(default_factory=WarmUpSettings)
