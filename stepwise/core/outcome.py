"""
Outcome - result of invoking a Coroutine once
=============================================

Two-level tagged union:

    Outcome  = Completed | NoResult
    NoResult = Failed | Suspended

Combinators dispatch on it structurally with `match`.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

if typing.TYPE_CHECKING:
    from .coroutine import Coroutine


@dataclass(frozen=True, slots=True)
class Completed[S, A]:
    """The computation finished. Invoking it again is meaningless."""

    value: A
    state: S


@dataclass(frozen=True, slots=True)
class Suspended[S, E, A]:
    """
    The computation paused.

    `state` is the state as of the pause point, `continuation` is the rest
    of the program. Resume by invoking the continuation (with the same or an
    externally modified state).
    """

    state: S
    continuation: Coroutine[S, E, A]


@dataclass(frozen=True, slots=True)
class Failed[E]:
    """Terminal failure. No continuation is retained."""

    error: E


type NoResult[S, E, A] = Failed[E] | Suspended[S, E, A]
type Outcome[S, E, A] = Completed[S, A] | NoResult[S, E, A]


__all__ = ("Completed", "Suspended", "Failed", "NoResult", "Outcome")
