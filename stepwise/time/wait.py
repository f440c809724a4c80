"""Wait combinators

Tick-based delays. A tick is one external invocation of the coroutine."""

from __future__ import annotations

from typing import Never

from .._types import Unit
from ..core import Coroutine
from ..lift.up import succeed, suspend


def wait[S](ticks: int) -> Coroutine[S, Never, Unit]:
    """
    Suspend for `ticks` drives, complete on the next one.

    Driving `wait(n)` yields Suspended exactly n times, the (n+1)-th drive
    yields Completed. `ticks <= 0` completes immediately.
    """
    if ticks <= 0:
        return succeed(None)
    return suspend().bind(lambda _: wait(ticks - 1))


# Alias.
delay = wait


def delayed[S, E, T](
    interp: Coroutine[S, E, T],
    *,
    ticks: int,
) -> Coroutine[S, E, T]:
    """Wait `ticks` drives before running."""
    return wait(ticks).bind(lambda _: interp)


__all__ = ("wait", "delay", "delayed")
