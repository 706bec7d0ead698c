"""
Memoization.

Wraps functions with a private BoundedTTLCache:
    - memoize: one cached result per argument (usable as a decorator)
    - memoize_supplier: one cached result for a zero-argument callable
"""

from campus_cache.memoization.memoize import (
    SUPPLIER_KEY,
    memoize,
    memoize_supplier,
)

__all__ = ["SUPPLIER_KEY", "memoize", "memoize_supplier"]
