"""Replicate combinators"""

from __future__ import annotations

from ..core import Coroutine


def replicate[S, E, T](
    interp: Coroutine[S, E, T],
    n: int,
) -> tuple[Coroutine[S, E, T], ...]:
    """
    N unexecuted copies of the coroutine.

    Nothing runs here: coroutines are immutable, so every copy starts from the
    beginning when driven. `n <= 0` gives an empty tuple. Pair with
    `sequence` to run them (Haskell's replicateM).
    """
    if n <= 0:
        return ()
    return tuple(interp for _ in range(n))


__all__ = ("replicate",)
