"""Coroutine Monad

A stackless, cooperative, stateful and fallible computation:
- State (every step reads the state handed in by the driver)
- Result (a step may fail with E)
- Suspension (a step may pause and hand back the rest of the program)

Invoking a Coroutine once with a state yields exactly one Outcome.
Nothing is ever mutated in place: every combinator builds a new Coroutine."""

from __future__ import annotations

import typing
from collections.abc import Callable
from typing import assert_never

from .._types import Either, Pair, Predicate, Unit
from .outcome import Completed, Failed, Outcome, Suspended

if typing.TYPE_CHECKING:
    from ..control.retry import RetryPolicy


class Coroutine[S, E, A]:
    """Stateful fallible coroutine.

    Wraps a single step function `S -> Outcome[S, E, A]`.

    Monadic laws:
    - Left identity: succeed(a).bind(f) ≡ f(a)
    - Right identity: m.bind(succeed) ≡ m
    - Associativity: m.bind(f).bind(g) ≡ m.bind(x => f(x).bind(g))
    """

    __slots__ = ("_step",)

    def __init__(self, step: Callable[[S], Outcome[S, E, A]], /) -> None:
        """Create Coroutine from a step function."""
        self._step = step

    def __call__(self, state: S, /) -> Outcome[S, E, A]:
        """Perform exactly one step against `state`."""
        return self._step(state)

    def __repr__(self) -> str:
        name = getattr(self._step, "__qualname__", type(self._step).__name__)
        return f"Coroutine({name})"

    # Functor operations

    def map[B](self, f: Callable[[A], B], /) -> Coroutine[S, E, B]:
        """Functor fmap - apply function to the final value, even past suspensions."""
        return map_coroutine(self, f)

    def unit(self) -> Coroutine[S, E, Unit]:
        """Discard the produced value."""
        return map_coroutine(self, _discard)

    def as_[B](self, value: B, /) -> Coroutine[S, E, B]:
        """Replace the produced value with `value`."""
        return map_coroutine(self, lambda _: value)

    # Monad operations

    def join[B](self: Coroutine[S, E, Coroutine[S, E, B]]) -> Coroutine[S, E, B]:
        """Flatten one level of nesting."""
        return join_coroutine(self)

    def bind[B](self, f: Callable[[A], Coroutine[S, E, B]], /) -> Coroutine[S, E, B]:
        """
        Monadic bind (>>=).

        - On Completed: runs f(value) against the resulting state, same tick
        - On Suspended: pushes the bind into the continuation, f is not called
        - On Failed: short-circuit
        """
        return bind_coroutine(self, f)

    def flat_map[B](self, f: Callable[[A], Coroutine[S, E, B]], /) -> Coroutine[S, E, B]:
        """Alias for bind."""
        return bind_coroutine(self, f)

    def then[B](self, f: Callable[[A], Coroutine[S, E, B]], /) -> Coroutine[S, E, B]:
        """Alias for bind."""
        return bind_coroutine(self, f)

    def suspending(self) -> Coroutine[S, E, Unit]:
        """Run to completion, then pause once."""
        from ..lift.up import suspend
        return self.bind(lambda _: suspend())

    # Combinators

    def zip[B](self, other: Coroutine[S, E, B], /) -> Coroutine[S, E, Pair[A, B]]:
        from ..concurrency.zip import zip
        return zip(self, other)

    def or_else(self, alternative: Coroutine[S, E, A], /) -> Coroutine[S, E, A]:
        from ..control.fallback import or_else
        return or_else(self, alternative)

    def retry(
        self,
        times: int | None = None,
        *,
        policy: RetryPolicy[E] | None = None,
    ) -> Coroutine[S, E, A]:
        from ..control.retry import retry
        return retry(self, times=times, policy=policy)

    def repeat(self, times: int, /) -> Coroutine[S, E, Unit]:
        from ..control.repeat import repeat
        return repeat(self, times=times)

    def repeat_while(self, predicate: Predicate[S], /) -> Coroutine[S, E, Unit]:
        from ..control.repeat import repeat_while
        return repeat_while(self, predicate)

    def repeat_until(self, predicate: Predicate[S], /) -> Coroutine[S, E, Unit]:
        from ..control.repeat import repeat_until
        return repeat_until(self, predicate)

    def collect_while(self, predicate: Predicate[S], /) -> Coroutine[S, E, tuple[A, ...]]:
        from ..control.collect import collect_while
        return collect_while(self, predicate)

    def collect_until(self, predicate: Predicate[S], /) -> Coroutine[S, E, tuple[A, ...]]:
        from ..control.collect import collect_until
        return collect_until(self, predicate)

    def replicate(self, n: int, /) -> tuple[Coroutine[S, E, A], ...]:
        from ..collection.replicate import replicate
        return replicate(self, n)

    def race_against[B](self, competitor: Coroutine[S, E, B], /) -> Coroutine[S, E, Either[A, B]]:
        from ..concurrency.race import race
        return race(self, competitor)

    def in_parallel_with[B](self, other: Coroutine[S, E, B], /) -> Coroutine[S, E, Pair[A, B]]:
        from ..concurrency.parallel import in_parallel_with
        return in_parallel_with(self, other)

    def delayed(self, ticks: int, /) -> Coroutine[S, E, A]:
        from ..time.wait import delayed
        return delayed(self, ticks=ticks)

    # Driver

    def run_once(self, state: S, /) -> Either[Coroutine[S, E, A], Pair[A, S]]:
        from ..lift.down import run_once
        return run_once(self, state)

    def run_and_extract(self, state: S, /) -> Pair[A, S]:
        from ..lift.down import run_and_extract
        return run_and_extract(self, state)


def _discard(_: typing.Any) -> Unit:
    return None


# ============================================================================
# Sequencing algebra
# ============================================================================


def map_coroutine[S, E, A, B](
    coroutine: Coroutine[S, E, A],
    f: Callable[[A], B],
) -> Coroutine[S, E, B]:
    """
    Transform Coroutine[S, E, A] into Coroutine[S, E, B].

    Suspensions are passed outward with the mapping pushed into the
    continuation, so `f` still applies once the chain eventually completes.
    Errors are opaque to map.
    """

    def step(state: S) -> Outcome[S, E, B]:
        match coroutine(state):
            case Completed(value, next_state):
                return Completed(f(value), next_state)
            case Suspended(snapshot, continuation):
                return Suspended(snapshot, map_coroutine(continuation, f))
            case Failed() as failed:
                return failed
            case _ as unreachable:
                assert_never(unreachable)

    return Coroutine(step)


def join_coroutine[S, E, A](
    nested: Coroutine[S, E, Coroutine[S, E, A]],
) -> Coroutine[S, E, A]:
    """
    Flatten a nested Coroutine into a single-level Coroutine.

    When the outer layer completes, the inner coroutine is invoked right away
    with the resulting state and its outcome is returned as is.
    """

    def step(state: S) -> Outcome[S, E, A]:
        match nested(state):
            case Completed(inner, next_state):
                return inner(next_state)
            case Suspended(snapshot, continuation):
                return Suspended(snapshot, join_coroutine(continuation))
            case Failed() as failed:
                return failed
            case _ as unreachable:
                assert_never(unreachable)

    return Coroutine(step)


def bind_coroutine[S, E, A, B](
    coroutine: Coroutine[S, E, A],
    f: Callable[[A], Coroutine[S, E, B]],
) -> Coroutine[S, E, B]:
    """Sequence two computations: join(map(f))."""
    return join_coroutine(map_coroutine(coroutine, f))


__all__ = (
    "Coroutine",
    "map_coroutine",
    "join_coroutine",
    "bind_coroutine",
)
