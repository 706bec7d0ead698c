"""
Test Suite for Campus Cache.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Multi-threaded and cross-component tests
    - performance/: Timing benchmarks for hot paths

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest -m "not performance"             # Skip benchmarks
    pytest --cov=src/campus_cache           # With coverage
"""
