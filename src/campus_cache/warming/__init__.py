"""
Cache Warming.

Pre-populates a cache from a loader:
    - warm_up: parallel, synchronous, per-key failures logged and collected
    - warm_up_async: same work on a background thread, fire-and-forget
"""

from campus_cache.warming.warmer import warm_up, warm_up_async

__all__ = ["warm_up", "warm_up_async"]
