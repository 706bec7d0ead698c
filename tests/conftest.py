"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import logging

import pytest

from campus_cache.caching.bounded_cache import BoundedTTLCache
from campus_cache.caching.lru_cache import LRUCache


class FakeClock:
    """Manually advanced time source (epoch seconds)."""

    def __init__(self, start: float = 1_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Deterministic clock for TTL tests."""
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> BoundedTTLCache:
    """Small bounded cache on the fake clock (10 entries, 60s TTL)."""
    return BoundedTTLCache(max_size=10, default_ttl=60, clock=clock)


@pytest.fixture
def lru(clock: FakeClock) -> LRUCache:
    """LRU cache of capacity 2 on the fake clock."""
    return LRUCache(max_size=2, clock=clock)


@pytest.fixture(autouse=True)
def debug_logging(caplog: pytest.LogCaptureFixture):
    """Capture campus_cache logs at DEBUG for assertions."""
    caplog.set_level(logging.DEBUG, logger="campus_cache")
    yield
