"""
Fallback combinators
====================

Комбинаторы для fallback логики: try an alternative when the primary fails.
"""

from __future__ import annotations

import logging

from ..core import Coroutine, Failed, Outcome

logger = logging.getLogger(__name__)


def or_else[S, E, T](
    primary: Coroutine[S, E, T],
    alternative: Coroutine[S, E, T],
) -> Coroutine[S, E, T]:
    """
    Run `alternative` with the original state if `primary` fails.

    A failure is both an explicit fail(...) and a captured exception.

    NOTE: Only the tick `primary` is invoked on is guarded. A Suspended
          outcome passes through unchanged, so a failure after resumption
          is not recovered here.
    """

    def step(state: S) -> Outcome[S, E, T]:
        outcome = primary(state)
        match outcome:
            case Failed(error):
                logger.debug("or_else: primary failed with %r, running alternative", error)
                return alternative(state)
            case _:
                return outcome

    return Coroutine(step)


def fallback_chain[S, E, T](*interps: Coroutine[S, E, T]) -> Coroutine[S, E, T]:
    """Try each until one succeeds. Returns last error if all fail."""
    if not interps:
        raise ValueError("fallback_chain() requires at least one coroutine")

    chained = interps[-1]
    for interp in reversed(interps[:-1]):
        chained = or_else(interp, chained)
    return chained


__all__ = (
    "or_else",
    "fallback_chain",
)
