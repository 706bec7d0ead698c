"""
Integration Tests for Concurrent Loading.

Test Aspects Covered:
    ✅ Business Logic: Load-once under contention
    ✅ State: All callers observe the same value
    ✅ Performance: Loads are serialized cache-wide
    ✅ Integration: memoize() over BoundedTTLCache under threads
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

from campus_cache.caching.bounded_cache import BoundedTTLCache
from campus_cache.memoization import memoize

N_THREADS = 16


class TestConcurrentLoad:
    """N threads racing on a missing key."""

    def test_loader_invoked_exactly_once(self) -> None:
        """
        SCENARIO: N threads call get(key, loader) on an absent key at once
        EXPECTED: Loader runs once, every thread gets the same object
        """
        cache: BoundedTTLCache[str, object] = BoundedTTLCache(max_size=10)
        calls = []
        calls_lock = threading.Lock()
        start = threading.Barrier(N_THREADS)

        def loader(key: str) -> object:
            with calls_lock:
                calls.append(key)
            time.sleep(0.05)
            return object()

        def worker(_: int) -> object:
            start.wait()
            return cache.get("transcript:42", loader)

        with ThreadPoolExecutor(max_workers=N_THREADS) as executor:
            results = list(executor.map(worker, range(N_THREADS)))

        assert calls == ["transcript:42"]
        assert all(r is results[0] for r in results)

    def test_loads_for_distinct_keys_do_not_overlap(self) -> None:
        """
        SCENARIO: Concurrent misses on different keys
        EXPECTED: Loader executions never overlap (cache-wide write lock)
        """
        cache: BoundedTTLCache[int, int] = BoundedTTLCache(max_size=100)
        active = 0
        max_active = 0
        counter_lock = threading.Lock()

        def loader(key: int) -> int:
            nonlocal active, max_active
            with counter_lock:
                active += 1
                max_active = max(max_active, active)
            time.sleep(0.01)
            with counter_lock:
                active -= 1
            return key * key

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda k: cache.get(k, loader), range(8)))

        assert results == [k * k for k in range(8)]
        assert max_active == 1

    def test_readers_not_blocked_by_hits(self) -> None:
        cache: BoundedTTLCache[str, str] = BoundedTTLCache(max_size=10)
        cache.put("k", "v")

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda _: cache.get("k"), range(200)))

        assert set(results) == {"v"}
        # Access counts are bumped under the shared lock and may undercount
        assert 0 < cache.stats().total_accesses <= 200


class TestConcurrentMemoize:
    def test_memoized_function_runs_once_per_argument(self) -> None:
        calls = []
        calls_lock = threading.Lock()

        @memoize
        def expensive(course_id: int) -> str:
            with calls_lock:
                calls.append(course_id)
            time.sleep(0.02)
            return f"roster-{course_id}"

        args = [1, 2, 3] * 10
        with ThreadPoolExecutor(max_workers=10) as executor:
            results = list(executor.map(expensive, args))

        assert results == [f"roster-{a}" for a in args]
        assert sorted(calls) == [1, 2, 3]
