"""
Memoize - Function Result Caching over BoundedTTLCache.

Design Notes:
    - Each memoized function owns its cache
    - Loads go through cache.get(key, loader), so concurrent first calls
      with the same argument run the function once
    - None results are not cached
    - Arguments must be hashable
"""

from __future__ import annotations

import functools
import time
from typing import Any, Callable, Dict, Optional, Tuple, TypeVar, Union

from campus_cache.caching.bounded_cache import BoundedTTLCache
from campus_cache.domain.value_objects import TtlLike

R = TypeVar("R")

DEFAULT_MEMO_SIZE = 1000
DEFAULT_MEMO_TTL_SECONDS = 3600.0

SUPPLIER_KEY = "singleton"

_ARGS_MARK = object()
_KWARGS_MARK = object()


def _call_key(args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Any:
    """
    Build the cache key for one call.

    A single non-tuple positional argument is its own key. Every other
    call shape is tagged so that f((1, 2)) and f(1, 2) never collide.
    """
    if len(args) == 1 and not kwargs and not isinstance(args[0], tuple):
        return args[0]
    key = (_ARGS_MARK,) + args
    if kwargs:
        key += (_KWARGS_MARK,) + tuple(sorted(kwargs.items()))
    return key


def memoize(
    func: Optional[Callable[..., R]] = None,
    max_size: int = DEFAULT_MEMO_SIZE,
    ttl: Optional[TtlLike] = DEFAULT_MEMO_TTL_SECONDS,
    *,
    clock: Callable[[], float] = time.time,
) -> Union[Callable[..., R], Callable[[Callable[..., R]], Callable[..., R]]]:
    """
    Cache a function's results keyed by its arguments.

    Usable as ``memoize(fn)``, ``memoize(fn, max_size, ttl)``, ``@memoize``
    or ``@memoize(max_size=..., ttl=...)``.

    Args:
        func: Function to wrap
        max_size: Capacity of the private cache
        ttl: Lifetime of each result (None or <= 0 = forever)
        clock: Time source for the private cache

    Returns:
        Wrapped function exposing ``.cache`` and ``.cache_clear()``

    Example:
        >>> @memoize(max_size=10)
        ... def square(x):
        ...     return x * x
        >>> square(4)
        16
    """

    def decorator(fn: Callable[..., R]) -> Callable[..., R]:
        cache: BoundedTTLCache[Any, R] = BoundedTTLCache(
            max_size=max_size, default_ttl=ttl, clock=clock
        )

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> R:
            key = _call_key(args, kwargs)
            return cache.get(key, lambda _key: fn(*args, **kwargs))

        wrapper.cache = cache  # type: ignore[attr-defined]
        wrapper.cache_clear = cache.clear  # type: ignore[attr-defined]
        return wrapper

    if func is not None:
        return decorator(func)
    return decorator


def memoize_supplier(
    supplier: Callable[[], R],
    ttl: Optional[TtlLike] = DEFAULT_MEMO_TTL_SECONDS,
    clock: Callable[[], float] = time.time,
) -> Callable[[], R]:
    """
    Cache the result of a zero-argument callable.

    Args:
        supplier: Callable producing the value
        ttl: Lifetime of the cached value
        clock: Time source for the private cache

    Returns:
        Zero-argument callable exposing ``.cache`` and ``.cache_clear()``
    """
    cache: BoundedTTLCache[str, R] = BoundedTTLCache(max_size=1, default_ttl=ttl, clock=clock)

    @functools.wraps(supplier)
    def wrapper() -> R:
        return cache.get(SUPPLIER_KEY, lambda _key: supplier())

    wrapper.cache = cache  # type: ignore[attr-defined]
    wrapper.cache_clear = cache.clear  # type: ignore[attr-defined]
    return wrapper
