"""
Race combinators
================

Two coroutines stepped in lockstep, one tick each per drive, against the
same state. Single-step interleaving: no real simultaneity.
"""

from __future__ import annotations

import logging
from typing import assert_never

from .._types import Either, Left, Right
from ..core import Completed, Coroutine, Failed, Outcome, Suspended

logger = logging.getLogger(__name__)


def race[S, E, A, B](
    left: Coroutine[S, E, A],
    right: Coroutine[S, E, B],
) -> Coroutine[S, E, Either[A, B]]:
    """
    Return the result of whichever side completes first.

    Decision table for one drive (both sides already stepped):
    - left Failed                -> left's failure
    - right Failed               -> right's failure
    - left Completed             -> Left(value), ties go to the left side
    - right Completed            -> Right(value)
    - both Suspended             -> Suspended, race the continuations next tick

    NOTE: Both tie-breaks are policy. When one side completes on the same
          drive the other suspends, the suspended side gets no extra step.
    """

    def step(state: S) -> Outcome[S, E, Either[A, B]]:
        left_outcome = left(state)
        right_outcome = right(state)
        match left_outcome, right_outcome:
            case Failed() as failed, _:
                logger.debug("race: left side failed with %r", failed.error)
                return failed
            case _, Failed() as failed:
                logger.debug("race: right side failed with %r", failed.error)
                return failed
            case Completed(value, next_state), _:
                logger.debug("race: left side won")
                return Completed(Left(value), next_state)
            case Suspended(), Completed(value, next_state):
                logger.debug("race: right side won")
                return Completed(Right(value), next_state)
            case Suspended(snapshot, left_rest), Suspended(_, right_rest):
                return Suspended(snapshot, race(left_rest, right_rest))
            case _ as unreachable:
                assert_never(unreachable)

    return Coroutine(step)


__all__ = ("race",)
