"""
Integration Tests - Concurrent Use of the Caches.

Test Files:
    - test_concurrent_loading.py: Load-once behaviour under thread contention
"""
