"""
Zip combinators
===============

Sequential pairing (for interleaved pairing see parallel.in_parallel_with).
"""

from __future__ import annotations

from collections.abc import Callable

from .._types import Pair
from ..core import Coroutine
from ..lift.up import succeed


def zip[S, E, A, B](
    first: Coroutine[S, E, A],
    second: Coroutine[S, E, B],
) -> Coroutine[S, E, Pair[A, B]]:
    """
    Run `first` to completion, then `second`, return both values.

    Failure on either side short-circuits.
    """
    return first.bind(lambda a: second.bind(lambda b: succeed((a, b))))


def zip_with[S, E, A, B, R](
    first: Coroutine[S, E, A],
    second: Coroutine[S, E, B],
    *,
    combiner: Callable[[A, B], R],
) -> Coroutine[S, E, R]:
    """Run in sequence, transform results with function."""
    return zip(first, second).map(lambda pair: combiner(*pair))


__all__ = ("zip", "zip_with")
