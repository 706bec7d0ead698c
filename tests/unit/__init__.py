"""
Unit Tests - Testing Individual Components in Isolation.

Time-dependent tests use the FakeClock fixture from conftest.py
instead of sleeping.

Test Files:
    - test_bounded_cache.py: BoundedTTLCache
    - test_lru_cache.py: LRUCache
    - test_maintenance.py: Sweeps, evictions, inspection, bulk helpers
    - test_memoize.py: memoize() and memoize_supplier()
    - test_config_loader.py: Configuration loading/validation
"""
