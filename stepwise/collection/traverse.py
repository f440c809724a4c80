"""Traverse combinators

Monadic traverse: run one coroutine per item, in order, threading state."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import assert_never

from .._helpers import append
from ..core import Completed, Coroutine, Failed, Outcome, Suspended


def _traversing[S, E, T](
    pending: tuple[Coroutine[S, E, T], ...],
    collected: tuple[T, ...],
) -> Coroutine[S, E, tuple[T, ...]]:
    def step(state: S) -> Outcome[S, E, tuple[T, ...]]:
        acc = collected
        for index, interp in enumerate(pending):
            match interp(state):
                case Completed(value, next_state):
                    acc = append(acc, value)
                    state = next_state
                case Suspended(snapshot, continuation):
                    rest = pending[index + 1:]
                    done = acc
                    return Suspended(
                        snapshot,
                        continuation.bind(lambda value: _traversing(rest, append(done, value))),
                    )
                case Failed() as failed:
                    return failed
                case _ as unreachable:
                    assert_never(unreachable)
        return Completed(acc, state)

    return Coroutine(step)


def traverse[A, S, E, T](
    items: Iterable[A],
    handler: Callable[[A], Coroutine[S, E, T]],
) -> Coroutine[S, E, tuple[T, ...]]:
    """
    Monadic map: A -> Coroutine[T]. Sequential to preserve effect order.

    Suspensions inside any element are carried through; the remaining
    elements run after it resumes. Fail-fast on first error.
    """
    return _traversing(tuple(handler(item) for item in items), ())


# Alias.
for_each = traverse

__all__ = ("traverse", "for_each")
