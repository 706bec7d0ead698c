"""
Performance Tests.

Benchmarks for cache hot paths:
    - Cached reads far cheaper than loads
    - Eviction at capacity stays fast
    - LRU get/put constant time
"""
