"""Collect combinators

Same loop as repeat_while/repeat_until, but every produced value is kept."""

from __future__ import annotations

from typing import assert_never

from .._helpers import append
from .._types import Predicate
from ..core import Completed, Coroutine, Failed, Outcome, Suspended


def _collecting[S, E, T](
    interp: Coroutine[S, E, T],
    keep_going: Predicate[S],
    collected: tuple[T, ...],
) -> Coroutine[S, E, tuple[T, ...]]:
    def step(state: S) -> Outcome[S, E, tuple[T, ...]]:
        acc = collected
        while keep_going(state):
            match interp(state):
                case Completed(value, next_state):
                    acc = append(acc, value)
                    state = next_state
                case Suspended(snapshot, continuation):
                    return Suspended(snapshot, _resume(continuation, interp, keep_going, acc))
                case Failed() as failed:
                    return failed
                case _ as unreachable:
                    assert_never(unreachable)
        return Completed(acc, state)

    return Coroutine(step)


def _resume[S, E, T](
    continuation: Coroutine[S, E, T],
    interp: Coroutine[S, E, T],
    keep_going: Predicate[S],
    collected: tuple[T, ...],
) -> Coroutine[S, E, tuple[T, ...]]:
    return continuation.bind(
        lambda value: _collecting(interp, keep_going, append(collected, value))
    )


def collect_while[S, E, T](
    interp: Coroutine[S, E, T],
    predicate: Predicate[S],
) -> Coroutine[S, E, tuple[T, ...]]:
    """
    Run `interp` while `predicate(state)` holds, collecting each value.

    Most recent value goes last. Empty tuple if the predicate is false
    right away.
    """
    return _collecting(interp, predicate, ())


def collect_until[S, E, T](
    interp: Coroutine[S, E, T],
    predicate: Predicate[S],
) -> Coroutine[S, E, tuple[T, ...]]:
    """
    Run `interp` until `predicate(state)` holds, collecting each value.

    Example:
        transform(lambda s: s + 1).collect_until(lambda s: s >= 3)
        # from state 0 -> (1, 2, 3)
    """
    return _collecting(interp, lambda state: not predicate(state), ())


__all__ = ("collect_while", "collect_until")
