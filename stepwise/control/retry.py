"""
Retry combinators
=================

Re-run the original coroutine when it fails. Backoff is measured in ticks:
the retrying coroutine suspends for that many drives before the next attempt.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import assert_never

from .._types import Predicate
from ..core import Completed, Coroutine, Failed, Outcome, Suspended
from ..time.wait import delayed

logger = logging.getLogger(__name__)


# BackoffStrategy = (attempt_num, error) -> delay_ticks
type BackoffStrategy[E] = Callable[[int, E], int]


def _fixed_backoff[E](delay: int) -> BackoffStrategy[E]:
    """Same delay every retry."""
    def strategy(attempt: int, error: E) -> int:
        _ = (attempt, error)
        return delay
    return strategy


def _exponential_backoff[E](
    initial: int,
    multiplier: int = 2,
    max_delay: int = 64,
) -> BackoffStrategy[E]:
    """Delay grows: initial * multiplier^attempt (capped at max_delay)."""
    def strategy(attempt: int, error: E) -> int:
        _ = error
        delay = initial * (multiplier ** attempt)
        return min(delay, max_delay)
    return strategy


@dataclass(frozen=True, slots=True)
class RetryPolicy[E]:
    """
    Retry configuration with pluggable backoff strategy.

    `retries` is the number of additional attempts after the first one.
    """

    retries: int
    backoff: BackoffStrategy[E] = _fixed_backoff(0)
    retry_on: Predicate[E] | None = None

    def __post_init__(self) -> None:
        if self.retries < 0:
            raise ValueError("RetryPolicy.retries must be >= 0")

    @classmethod
    def fixed(
        cls,
        retries: int,
        delay_ticks: int = 0,
        retry_on: Predicate[E] | None = None,
    ) -> RetryPolicy[E]:
        """Same delay every retry. Zero ticks retries within the same drive."""
        if delay_ticks < 0:
            raise ValueError("delay_ticks must be >= 0")
        return cls(retries=retries, backoff=_fixed_backoff(delay_ticks), retry_on=retry_on)

    @classmethod
    def exponential(
        cls,
        retries: int,
        initial: int = 1,
        multiplier: int = 2,
        max_delay: int = 64,
        retry_on: Predicate[E] | None = None,
    ) -> RetryPolicy[E]:
        """Back off more aggressively with each failure."""
        if initial < 0:
            raise ValueError("initial must be >= 0")
        if multiplier < 1:
            raise ValueError("multiplier must be >= 1")
        if max_delay < initial:
            raise ValueError("max_delay must be >= initial")
        return cls(
            retries=retries,
            backoff=_exponential_backoff(initial, multiplier, max_delay),
            retry_on=retry_on,
        )


def _should_retry[E](*, policy: RetryPolicy[E], attempt: int, error: E) -> bool:
    if attempt >= policy.retries:
        return False
    if policy.retry_on is not None and not policy.retry_on(error):
        return False
    return True


def _retrying[S, E, T](
    original: Coroutine[S, E, T],
    current: Coroutine[S, E, T],
    *,
    policy: RetryPolicy[E],
    attempt: int,
) -> Coroutine[S, E, T]:
    def step(state: S) -> Outcome[S, E, T]:
        running = current
        n = attempt
        while True:
            outcome = running(state)
            match outcome:
                case Completed():
                    return outcome
                case Suspended(snapshot, continuation):
                    return Suspended(
                        snapshot,
                        _retrying(original, continuation, policy=policy, attempt=n),
                    )
                case Failed(error):
                    if not _should_retry(policy=policy, attempt=n, error=error):
                        logger.debug("retry: giving up after %d attempt(s): %r", n + 1, error)
                        return outcome
                    delay = policy.backoff(n, error)
                    logger.debug("retry: attempt %d failed with %r, next in %d tick(s)", n + 1, error, delay)
                    n += 1
                    if delay > 0:
                        again = _retrying(original, original, policy=policy, attempt=n)
                        return Suspended(state, delayed(again, ticks=delay - 1))
                    running = original
                case _ as unreachable:
                    assert_never(unreachable)

    return Coroutine(step)


def retry[S, E, T](
    interp: Coroutine[S, E, T],
    *,
    times: int | None = None,
    policy: RetryPolicy[E] | None = None,
) -> Coroutine[S, E, T]:
    """
    Re-run `interp` on failure up to `times` additional times.

    The error surfaced on exhaustion is the last one observed, not the first.
    `times <= 0` means no retry. Pass `policy` instead of `times` for
    backoff or a `retry_on` filter.

    A suspended attempt keeps its place: if its continuation fails later,
    the original coroutine starts over against the state of that tick.

    NOTE: Side effects inside compute/transform/effect are re-executed on
          every attempt.
    """
    if (times is None) == (policy is None):
        raise ValueError("retry(): pass exactly one of times= or policy=")
    if policy is None:
        policy = RetryPolicy.fixed(max(times or 0, 0))
    return _retrying(interp, interp, policy=policy, attempt=0)


__all__ = (
    "RetryPolicy",
    "retry",
)
