"""
Cache Warmer - Bulk Pre-Loading of Cache Entries.

Design Notes:
    - Loader calls fan out over a thread pool (ErrorHandler)
    - Loader runs outside the cache lock; results go in via put()
    - A failing key is logged and skipped, the batch continues
    - warm_up_async returns nothing to wait on, poll or cancel
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Iterable, Optional

from campus_cache.caching.bounded_cache import BoundedTTLCache
from campus_cache.interfaces.cache import Loader
from campus_cache.resilience.error_handler import ErrorHandler, PartialResult

logger = logging.getLogger(__name__)


def warm_up(
    cache: Optional[BoundedTTLCache],
    loader: Optional[Loader],
    keys: Optional[Iterable[Any]],
    max_workers: Optional[int] = None,
) -> PartialResult[Any]:
    """
    Load ``keys`` into ``cache`` in parallel.

    Args:
        cache: Cache to fill
        loader: Function computing the value for a key
        keys: Keys to load
        max_workers: Thread pool size (None = executor default)

    Returns:
        PartialResult whose ``successful`` lists the keys processed and
        whose ``failed`` lists ``(key, exception)`` pairs
    """
    if cache is None or loader is None or keys is None:
        return PartialResult()

    def load_one(key: Any) -> Any:
        value = loader(key)
        if value is not None:
            cache.put(key, value)
        return key

    handler = ErrorHandler(max_workers=max_workers, thread_name_prefix="cache-warm-up")
    result = handler.handle_partial_failure(keys, load_one, operation_name="Cache warm-up")
    logger.debug(
        f"Cache warm-up finished: {len(result.successful)} loaded, {len(result.failed)} failed"
    )
    return result


def warm_up_async(
    cache: Optional[BoundedTTLCache],
    loader: Optional[Loader],
    keys: Optional[Iterable[Any]],
    max_workers: Optional[int] = None,
) -> None:
    """
    Run warm_up() on a daemon thread and return immediately.

    There is no handle for awaiting, observing or cancelling the work.
    """
    if cache is None or loader is None or keys is None:
        return

    # Materialize now so the caller may mutate its collection afterwards
    key_list = list(keys)
    thread = threading.Thread(
        target=warm_up,
        args=(cache, loader, key_list, max_workers),
        name="cache-warm-up-async",
        daemon=True,
    )
    thread.start()
