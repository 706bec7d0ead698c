"""
Interfaces Layer - Abstract Protocols for Caches.

Following the Dependency Inversion Principle, maintenance, warming and
memoization depend on these abstractions rather than on a concrete cache.

Protocols:
    - CacheProtocol: Read/write surface shared by both cache variants
    - InspectableCache: Cache that can enumerate its entries for maintenance
    - Loader: Callable computing a value for a missing key

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Interface Segregation: Small, focused interfaces
    - No implementation details leak into interfaces
"""

from campus_cache.interfaces.cache import CacheProtocol, InspectableCache, Loader

__all__ = ["CacheProtocol", "InspectableCache", "Loader"]
