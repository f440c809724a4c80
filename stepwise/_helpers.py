"""Internal helpers for combinators.

Common functions used across multiple combinator modules.
These are not part of the public API but can be used for writing custom combinators."""

from __future__ import annotations

import typing
from collections.abc import Callable


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def const[T](value: T) -> Callable[[typing.Any], T]:
    """
    Constant function: ignores its argument, always returns `value`.

    Usage:
        wait(3).map(const("done"))
    """
    def fn(_: typing.Any) -> T:
        return value
    return fn


def append[A](items: tuple[A, ...], item: A) -> tuple[A, ...]:
    """Immutable append: most recent value goes last."""
    return (*items, item)


__all__ = (
    "identity",
    "const",
    "append",
)
