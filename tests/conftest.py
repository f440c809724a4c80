"""
Pytest configuration for stepwise tests.

Provides a driving fixture: tick a coroutine until it completes or fails and
return every outcome observed along the way.
"""

from collections.abc import Callable
from typing import Any

import pytest

from stepwise import Coroutine, Outcome, Suspended

Driver = Callable[..., list[Outcome[Any, Any, Any]]]


def drive_outcomes(
    coroutine: Coroutine[Any, Any, Any],
    state: Any = None,
    *,
    limit: int = 1_000,
) -> list[Outcome[Any, Any, Any]]:
    """Tick until Completed/Failed, feeding each snapshot state into the next tick."""
    outcomes: list[Outcome[Any, Any, Any]] = []
    current = coroutine
    for _ in range(limit):
        outcome = current(state)
        outcomes.append(outcome)
        match outcome:
            case Suspended(snapshot, continuation):
                state = snapshot
                current = continuation
            case _:
                return outcomes
    raise AssertionError(f"coroutine still suspended after {limit} ticks")


@pytest.fixture
def outcomes() -> Driver:
    """Drive a coroutine to the end, return the outcome of every tick."""
    return drive_outcomes


@pytest.fixture
def counter() -> list[int]:
    """Mutable call counter for side-effect assertions."""
    return [0]
