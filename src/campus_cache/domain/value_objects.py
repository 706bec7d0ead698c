"""
Value Objects for the Domain Layer.

Value objects are immutable objects that describe the state of a cache
but have no conceptual identity.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional, Union

from pydantic import BaseModel, Field, computed_field


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# A time-to-live given as seconds or as a timedelta
TtlLike = Union[int, float, timedelta]


def ttl_to_seconds(ttl: Optional[TtlLike]) -> Optional[float]:
    """
    Normalize a TTL to seconds.

    A missing or non-positive TTL means the entry never expires.

    Args:
        ttl: Seconds, timedelta or None

    Returns:
        Positive number of seconds, or None for "no expiry"
    """
    if ttl is None:
        return None
    seconds = ttl.total_seconds() if isinstance(ttl, timedelta) else float(ttl)
    return seconds if seconds > 0 else None


class CacheStats(BaseModel):
    """
    Snapshot of a cache at one point in time.

    Note:
        ``hit_rate`` is ``size / total_accesses``, not hits over lookups.
        The formula is kept as the callers have always seen it.
    """

    size: int = Field(ge=0)
    max_size: int = Field(ge=0)
    total_accesses: int = Field(default=0, ge=0)
    hit_rate: float = Field(default=0.0, ge=0)
    expired_count: int = Field(default=0, ge=0)

    model_config = {"frozen": True}

    @computed_field
    @property
    def utilization(self) -> float:
        """Fraction of capacity in use."""
        return self.size / self.max_size if self.max_size > 0 else 0.0

    def __str__(self) -> str:
        return (
            f"CacheStats(size={self.size}, max_size={self.max_size}, "
            f"utilization={self.utilization:.2%}, hit_rate={self.hit_rate:.2%}, "
            f"total_accesses={self.total_accesses}, expired={self.expired_count})"
        )
