"""
Parallel combinators
====================

Step both sides once per drive until both are done. Fail-fast on first error.
"""

from __future__ import annotations

from typing import assert_never

from .._types import Pair
from ..core import Completed, Coroutine, Failed, Outcome, Suspended

# A side is either still running or already finished with its result.
type _Side[S, E, T] = Coroutine[S, E, T] | Completed[S, T]


def _advance[S, E, T](side: _Side[S, E, T], state: S) -> Outcome[S, E, T]:
    if isinstance(side, Completed):
        return side
    return side(state)


def _remaining[S, E, T](outcome: Completed[S, T] | Suspended[S, E, T]) -> _Side[S, E, T]:
    if isinstance(outcome, Suspended):
        return outcome.continuation
    return outcome


def _lockstep[S, E, A, B](
    left: _Side[S, E, A],
    right: _Side[S, E, B],
) -> Coroutine[S, E, Pair[A, B]]:
    def step(state: S) -> Outcome[S, E, Pair[A, B]]:
        left_outcome = _advance(left, state)
        right_outcome = _advance(right, state)
        match left_outcome, right_outcome:
            case Failed() as failed, _:
                return failed
            case _, Failed() as failed:
                return failed
            case Completed(left_value, left_state), Completed(right_value, right_state):
                # State of whichever side finished on this drive, right wins a tie
                final_state = right_state if not isinstance(right, Completed) else left_state
                return Completed((left_value, right_value), final_state)
            case (Suspended(snapshot, _), _) | (_, Suspended(snapshot, _)):
                return Suspended(
                    snapshot,
                    _lockstep(_remaining(left_outcome), _remaining(right_outcome)),
                )
            case _ as unreachable:
                assert_never(unreachable)

    return Coroutine(step)


def in_parallel_with[S, E, A, B](
    left: Coroutine[S, E, A],
    right: Coroutine[S, E, B],
) -> Coroutine[S, E, Pair[A, B]]:
    """
    Interleave two coroutines, pairing their results.

    Each drive steps every unfinished side once against the same state. The
    pair completes on the drive where the slower side completes. A failure on
    either side is terminal for the whole pair, left side checked first.
    """
    return _lockstep(left, right)


__all__ = ("in_parallel_with",)
