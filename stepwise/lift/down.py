"""
Опускание монады в значение.

Driver adapter: execute a Coroutine one tick at a time and translate the
Outcome into a caller-facing result. This is the boundary where failures
become raised exceptions.
"""

from __future__ import annotations

import logging
from typing import assert_never

from .._errors import CoroutineFailedError, StillSuspendedError, TicksExhaustedError
from .._types import Either, Left, Pair, Right
from ..core import Completed, Coroutine, Failed, Suspended

logger = logging.getLogger(__name__)


def run_once[S, E, A](
    coroutine: Coroutine[S, E, A],
    state: S,
) -> Either[Coroutine[S, E, A], Pair[A, S]]:
    """
    Invoke coroutine exactly once. Raises on failure.

    - Completed(a, s') -> Right((a, s'))
    - Suspended(_, k)  -> Left(k), resume by calling run_once(k, fresh_state)
    - Failed(e)        -> raises CoroutineFailedError

    Example:
        program = wait(1).bind(lambda _: transform(lambda s: s * 2))
        while True:
            match L.down.run_once(program, 1):
                case Left(program):
                    continue
                case Right((value, state)):
                    break

    NOTE: Never loops or blocks. The snapshot state of a suspension is
          dropped, the caller owns the state between ticks.
    """
    match coroutine(state):
        case Completed(value, next_state):
            logger.debug("tick: completed with %r", value)
            return Right((value, next_state))
        case Suspended(_, continuation):
            logger.debug("tick: suspended")
            return Left(continuation)
        case Failed(error):
            logger.debug("tick: failed with %r", error)
            if isinstance(error, BaseException):
                raise CoroutineFailedError(error) from error
            raise CoroutineFailedError(error)
        case _ as unreachable:
            assert_never(unreachable)


def run_and_extract[S, E, A](coroutine: Coroutine[S, E, A], state: S) -> Pair[A, S]:
    """
    Run a single tick and unwrap, raises if still suspended.

    **When to use:** When the coroutine is known to complete in one tick.
    """
    match run_once(coroutine, state):
        case Right(done):
            return done
        case Left(continuation):
            raise StillSuspendedError(continuation)
        case _ as unreachable:
            assert_never(unreachable)


def drive[S, E, A](
    coroutine: Coroutine[S, E, A],
    state: S,
    *,
    max_ticks: int,
) -> Pair[A, S]:
    """
    Tick the coroutine against the same state until it completes.

    Gives up with TicksExhaustedError after `max_ticks` suspended ticks, so
    `wait(n)` needs `max_ticks >= n`.

    NOTE: This is a convenience for scripts and tests, not a scheduler.
          Real drivers call run_once from their own loop with fresh state.
    """
    if max_ticks < 0:
        raise ValueError(f"drive(): max_ticks must be >= 0, got {max_ticks}")

    current = coroutine
    for _ in range(max_ticks + 1):
        match run_once(current, state):
            case Right(done):
                return done
            case Left(continuation):
                current = continuation
    raise TicksExhaustedError(max_ticks)


__all__ = (
    "run_once",
    "run_and_extract",
    "drive",
)
