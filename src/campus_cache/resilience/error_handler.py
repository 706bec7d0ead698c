"""
Error Handler - Partial Failure Handling for Batch Operations.

Provides:
    - Per-item failure isolation
    - Optional parallel fan-out over a thread pool

Design Notes:
    - Failures are logged at WARNING and collected, never re-raised
    - max_workers=1 runs sequentially in the calling thread
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class PartialResult(Generic[T]):
    """Result of a partial success operation."""
    successful: List[T] = field(default_factory=list)
    failed: List[Tuple[Any, Exception]] = field(default_factory=list)

    @property
    def success_rate(self) -> float:
        """Calculate success rate (0.0 to 1.0)."""
        total = len(self.successful) + len(self.failed)
        if total == 0:
            return 1.0
        return len(self.successful) / total

    @property
    def has_failures(self) -> bool:
        """Check if any failures occurred."""
        return len(self.failed) > 0

    @property
    def all_failed(self) -> bool:
        """Check if all operations failed."""
        return len(self.successful) == 0 and len(self.failed) > 0

    @property
    def failed_items(self) -> List[Any]:
        return [item for item, _ in self.failed]


class ErrorHandler:
    """
    Runs batch work item by item, isolating failures.

    Features:
        - Thread pool fan-out (ThreadPoolExecutor)
        - Partial failure collection
    """

    def __init__(
        self,
        max_workers: Optional[int] = None,
        thread_name_prefix: str = "campus-cache-batch",
    ) -> None:
        """
        Initialize error handler.

        Args:
            max_workers: Pool size (None = executor default, 1 = sequential)
            thread_name_prefix: Name prefix for pool threads
        """
        self.max_workers = max_workers
        self.thread_name_prefix = thread_name_prefix

    def handle_partial_failure(
        self,
        items: Iterable[Any],
        processor: Callable[[Any], T],
        operation_name: str = "batch operation",
    ) -> PartialResult[T]:
        """
        Process items, allowing partial failures.

        Args:
            items: Items to process
            processor: Function to process each item
            operation_name: Name for logging

        Returns:
            PartialResult with successful results and failed items
        """
        items = list(items)
        result: PartialResult[T] = PartialResult()

        if self.max_workers == 1:
            for item in items:
                self._process_one(item, processor, result, operation_name)
        else:
            with ThreadPoolExecutor(
                max_workers=self.max_workers,
                thread_name_prefix=self.thread_name_prefix,
            ) as executor:
                futures = {executor.submit(processor, item): item for item in items}
                for future in as_completed(futures):
                    item = futures[future]
                    try:
                        result.successful.append(future.result())
                    except Exception as e:
                        result.failed.append((item, e))
                        logger.warning(f"{operation_name} failed for {item!r}: {e}")

        if result.has_failures:
            logger.warning(
                f"{operation_name} completed with {len(result.failed)} failures "
                f"({result.success_rate:.1%} success rate)"
            )

        return result

    def _process_one(
        self,
        item: Any,
        processor: Callable[[Any], T],
        result: PartialResult[T],
        operation_name: str,
    ) -> None:
        try:
            result.successful.append(processor(item))
        except Exception as e:
            result.failed.append((item, e))
            logger.warning(f"{operation_name} failed for {item!r}: {e}")
