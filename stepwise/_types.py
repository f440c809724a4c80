"""
Core type definitions for stepwise.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value (usually the current state)
type Predicate[T] = Callable[[T], bool]

# Unit = result of computations that only matter for their effect
# NOTE: None играет роль пустого значения `()` из ML-языков.
type Unit = None

# Pair = plain tuple, no wrapper needed
type Pair[A, B] = tuple[A, B]

# NoError = type representing "never fails" semantic
type NoError = typing.Never

# ============================================================================
# Either (left/right branching)
# ============================================================================


@dataclass(frozen=True, slots=True)
class Left[L]:
    """Left branch. For `race` it means the left-hand operand won."""

    value: L

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Right[R]:
    """Right branch. For `run_once` it carries the completed (value, state) pair."""

    value: R

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True


type Either[L, R] = Left[L] | Right[R]

__all__ = (
    "Predicate",
    "Unit",
    "Pair",
    "NoError",
    "Left",
    "Right",
    "Either",
)
