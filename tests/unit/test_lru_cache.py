"""
Unit Tests for LRUCache.

Test Aspects Covered:
    ✅ Business Logic: Recency ordering, eviction of least recently used
    ✅ Edge Cases: Replacement, missing keys, capacity 1, max_size < 1
    ✅ Time Logic: Expiry side table, sweep on get/put
    ✅ State: Value map and expiry table stay consistent
"""

from __future__ import annotations

import pytest

from campus_cache.caching.lru_cache import LRUCache


class TestLRUOrdering:
    """Recency and eviction tests."""

    def test_get_refreshes_recency_before_eviction(self, lru) -> None:
        """
        SCENARIO: Capacity 2, put a, put b, get a, put c
        EXPECTED: b evicted; a and c present
        """
        lru.put("a", 1)
        lru.put("b", 2)
        lru.get("a")
        lru.put("c", 3)

        assert lru.get("b") is None
        assert lru.get("a") == 1
        assert lru.get("c") == 3

    def test_without_access_evicts_first_inserted(self, lru) -> None:
        lru.put("a", 1)
        lru.put("b", 2)
        lru.put("c", 3)
        assert lru.keys() == ["b", "c"]

    def test_keys_in_access_order(self, clock) -> None:
        lru = LRUCache(max_size=5, clock=clock)
        for key in "abcd":
            lru.put(key, key.upper())
        lru.get("b")
        lru.get("a")
        assert lru.keys() == ["c", "d", "b", "a"]

    def test_replacement_counts_as_access(self, lru) -> None:
        lru.put("a", 1)
        lru.put("b", 2)
        lru.put("a", 10)
        lru.put("c", 3)

        assert lru.keys() == ["a", "c"]
        assert lru.get("a") == 10

    def test_replacement_starts_fresh_entry(self, lru, clock) -> None:
        lru.put("a", 1)
        lru.get("a")
        clock.advance(20)
        lru.put("a", 2)

        entry = lru.entries()["a"]
        assert entry.created_at == clock()
        assert entry.access_count == 0
        assert lru.get("a") == 2

    def test_contains_key_does_not_reorder(self, lru) -> None:
        lru.put("a", 1)
        lru.put("b", 2)
        assert lru.contains_key("a")
        lru.put("c", 3)
        assert not lru.contains_key("a")

    def test_size_bounded(self, clock) -> None:
        lru = LRUCache(max_size=3, clock=clock)
        for i in range(10):
            lru.put(i, i)
            assert lru.size() <= 3
        assert len(lru) == 3

    def test_capacity_one(self, clock) -> None:
        lru = LRUCache(max_size=1, clock=clock)
        lru.put("a", 1)
        lru.put("b", 2)
        assert lru.keys() == ["b"]

    @pytest.mark.parametrize("max_size", [0, -3])
    def test_rejects_non_positive_max_size(self, max_size) -> None:
        with pytest.raises(ValueError):
            LRUCache(max_size=max_size)


class TestLRUBasic:
    """Basic operation tests."""

    def test_missing_key(self, lru) -> None:
        assert lru.get("nope") is None

    def test_remove(self, lru) -> None:
        lru.put("a", 1, ttl=30)
        assert lru.remove("a") == 1
        assert lru.remove("a") is None
        assert lru.remaining_ttl("a") is None
        assert lru.keys() == []

    def test_put_none_is_noop(self, lru) -> None:
        lru.put(None, 1)
        lru.put("a", None)
        assert lru.size() == 0

    def test_clear(self, lru) -> None:
        lru.put("a", 1, ttl=10)
        lru.put("b", 2)
        lru.clear()
        assert lru.size() == 0
        assert lru.keys() == []
        lru.put("c", 3)
        assert lru.keys() == ["c"]


class TestLRUExpiry:
    """Expiry side table tests."""

    def test_entry_expires(self, lru, clock) -> None:
        lru.put("a", 1, ttl=5)
        clock.advance(4)
        assert lru.get("a") == 1
        clock.advance(2)
        assert lru.get("a") is None
        assert lru.size() == 0

    def test_get_sweeps_all_expired(self, clock) -> None:
        """
        SCENARIO: Several expired keys, get() on an unrelated key
        EXPECTED: Every expired key removed by the sweep
        """
        lru = LRUCache(max_size=5, clock=clock)
        lru.put("x", 1, ttl=1)
        lru.put("y", 2, ttl=1)
        lru.put("z", 3)
        clock.advance(2)

        assert lru.get("z") == 3
        assert lru.keys() == ["z"]

    def test_put_without_ttl_clears_previous_expiry(self, lru, clock) -> None:
        lru.put("a", 1, ttl=5)
        lru.put("a", 2)
        clock.advance(100)
        assert lru.get("a") == 2
        assert lru.remaining_ttl("a") is None

    def test_default_ttl_applied(self, clock) -> None:
        lru = LRUCache(max_size=3, default_ttl=10, clock=clock)
        lru.put("a", 1)
        assert lru.remaining_ttl("a") == 10
        clock.advance(11)
        assert lru.get("a") is None

    def test_eviction_drops_expiry_row(self, lru, clock) -> None:
        lru.put("a", 1, ttl=50)
        lru.put("b", 2)
        lru.put("c", 3)
        assert lru.remaining_ttl("a") is None
        assert "a" not in lru.entries()

    def test_clean_expired_returns_count(self, clock) -> None:
        lru = LRUCache(max_size=5, clock=clock)
        lru.put("a", 1, ttl=1)
        lru.put("b", 2, ttl=1)
        lru.put("c", 3, ttl=100)
        clock.advance(2)
        assert lru.clean_expired() == 2
        assert lru.keys() == ["c"]

    def test_remaining_ttl_floors_at_zero(self, lru, clock) -> None:
        lru.put("a", 1, ttl=5)
        clock.advance(3)
        assert lru.remaining_ttl("a") == 2
        clock.advance(10)
        assert lru.remaining_ttl("a") == 0.0


class TestLRUEntries:
    """Inspection snapshot tests."""

    def test_entries_snapshot(self, lru, clock) -> None:
        lru.put("a", 1, ttl=10)
        clock.advance(1)
        lru.put("b", 2)
        clock.advance(1)
        lru.get("a")

        entries = lru.entries()

        assert list(entries) == ["b", "a"]
        assert entries["a"].access_count == 1
        assert entries["a"].expires_at == entries["a"].created_at + 10
        assert entries["b"].expires_at is None

    def test_entries_excluding_expired(self, clock) -> None:
        lru = LRUCache(max_size=5, clock=clock)
        lru.put("a", 1, ttl=1)
        lru.put("b", 2)
        clock.advance(2)
        assert list(lru.entries(include_expired=False)) == ["b"]
        assert list(lru.entries()) == ["a", "b"]
