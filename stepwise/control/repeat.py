"""Repeat combinators

Sequence a procedure a fixed number of times, or while/until a predicate over
the current state holds. Completed iterations run back to back within one
tick; a suspension inside an iteration is passed outward and the loop picks up
right after it on resume."""

from __future__ import annotations

from typing import assert_never

from .._types import Predicate, Unit
from ..core import Completed, Coroutine, Failed, Outcome, Suspended


def repeat[S, E, T](
    interp: Coroutine[S, E, T],
    *,
    times: int,
) -> Coroutine[S, E, Unit]:
    """
    Run `interp` `times` times in sequence, as if bound `times` times.

    `times <= 0` is a no-op completing immediately.
    """

    def step(state: S) -> Outcome[S, E, Unit]:
        remaining = times
        while remaining > 0:
            match interp(state):
                case Completed(_, next_state):
                    state = next_state
                    remaining -= 1
                case Suspended(snapshot, continuation):
                    rest = remaining - 1
                    return Suspended(
                        snapshot,
                        continuation.bind(lambda _: repeat(interp, times=rest)),
                    )
                case Failed() as failed:
                    return failed
                case _ as unreachable:
                    assert_never(unreachable)
        return Completed(None, state)

    return Coroutine(step)


def repeat_while[S, E, T](
    interp: Coroutine[S, E, T],
    predicate: Predicate[S],
) -> Coroutine[S, E, Unit]:
    """
    Run `interp` as long as `predicate(state)` holds.

    The predicate is checked against the current state before every
    iteration and never suspends.
    """

    def step(state: S) -> Outcome[S, E, Unit]:
        while predicate(state):
            match interp(state):
                case Completed(_, next_state):
                    state = next_state
                case Suspended(snapshot, continuation):
                    return Suspended(
                        snapshot,
                        continuation.bind(lambda _: repeat_while(interp, predicate)),
                    )
                case Failed() as failed:
                    return failed
                case _ as unreachable:
                    assert_never(unreachable)
        return Completed(None, state)

    return Coroutine(step)


def repeat_until[S, E, T](
    interp: Coroutine[S, E, T],
    predicate: Predicate[S],
) -> Coroutine[S, E, Unit]:
    """Run `interp` until `predicate(state)` holds. Dual of repeat_while."""
    return repeat_while(interp, lambda state: not predicate(state))


__all__ = ("repeat", "repeat_while", "repeat_until")
