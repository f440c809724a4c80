"""Sequence combinators

Structure flipping: [Coroutine[T]] -> Coroutine[(T, ...)]."""

from __future__ import annotations

from collections.abc import Iterable

from .._helpers import identity
from ..core import Coroutine


def sequence[S, E, T](interps: Iterable[Coroutine[S, E, T]]) -> Coroutine[S, E, tuple[T, ...]]:
    """
    Flip structure: [Coroutine[T]] -> Coroutine[(T, ...)].

    Implemented as traverse(id).
    """
    from .traverse import traverse
    return traverse(interps, identity)


__all__ = ("sequence",)
