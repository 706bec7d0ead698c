"""
Resilience Package - Partial Failure Handling.

This package lets batch operations keep going past individual failures:
    - ErrorHandler: Runs a processor over items, optionally in parallel,
      collecting per-item failures instead of aborting
    - PartialResult: What succeeded and what failed

Design Principles:
    - One bad item never aborts the batch
    - Every failure is logged and kept for the caller
"""

from campus_cache.resilience.error_handler import ErrorHandler, PartialResult

__all__ = ["ErrorHandler", "PartialResult"]
