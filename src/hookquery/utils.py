"""Utility functions for hookquery.

Shared helpers for name validation, argument normalization and future
continuations.
"""

import math
from concurrent.futures import Future
from numbers import Real
from typing import Any, Callable, Optional, Tuple

from .constants import COLLECTION_NAME_PATTERN, SortDirection
from .exceptions import ConstructionError
from .types import Direction, OnComplete, OnError

# ===========================================================================
# Validation / normalization
# ===========================================================================


def validate_collection_name(name: Any) -> str:
    """Validate a collection identifier.

    Only lowercase letters, digits, underscores and slashes are accepted.

    Raises:
        ConstructionError: If `name` is not a non-empty string of that charset
    """
    if not isinstance(name, str) or not COLLECTION_NAME_PATTERN.fullmatch(name):
        raise ConstructionError("Invalid name", name=name)
    return name


def normalize_direction(direction: Direction) -> Any:
    """Normalize a sort direction.

    - numeric -1 -> "desc"
    - any other number, or a falsy value -> "asc"
    - any other truthy value is returned verbatim
    """
    if not direction:
        return SortDirection.ASC
    if isinstance(direction, Real) and not isinstance(direction, bool):
        # truncated like an integer parse; nan and infinities sort ascending
        if not math.isfinite(direction):
            return SortDirection.ASC
        return SortDirection.DESC if int(direction) == -1 else SortDirection.ASC
    return direction


def flatten_args(args: Tuple[Any, ...]) -> Tuple[Any, ...]:
    """Accept both `f("a", "b")` and `f(["a", "b"])` call styles."""
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        return tuple(args[0])
    return tuple(args)


# ===========================================================================
# Future continuations
# ===========================================================================


def attach(
    future: Future,
    on_complete: Optional[OnComplete] = None,
    on_error: Optional[OnError] = None,
) -> Future:
    """Attach success/failure continuations to `future` and return it unchanged.

    Cancelled futures run neither continuation.
    """
    if on_complete is None and on_error is None:
        return future

    def _done(fut: Future) -> None:
        if fut.cancelled():
            return
        exc = fut.exception()
        if exc is not None:
            if on_error is not None:
                on_error(exc)
        elif on_complete is not None:
            on_complete(fut.result())

    future.add_done_callback(_done)
    return future


def chain(future: Future, fn: Callable[[Any], Any]) -> Future:
    """Return a new future resolved with `fn(result)` once `future` succeeds.

    Failures (from `future` or raised by `fn`) propagate to the new future.
    """
    chained: Future = Future()

    def _done(fut: Future) -> None:
        if fut.cancelled():
            chained.cancel()
            return
        exc = fut.exception()
        if exc is not None:
            chained.set_exception(exc)
            return
        try:
            chained.set_result(fn(fut.result()))
        except Exception as e:
            chained.set_exception(e)

    future.add_done_callback(_done)
    return chained
