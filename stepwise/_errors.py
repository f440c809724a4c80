from __future__ import annotations

import typing

if typing.TYPE_CHECKING:
    from .core.coroutine import Coroutine


class CoroutineFailedError(Exception):
    """Coroutine reached Failed at the driver boundary."""

    error: object

    def __init__(self, error: object) -> None:
        self.error = error
        super().__init__(f"Coroutine failed with: {error!r}")


class StillSuspendedError(Exception):
    """run_and_extract() expected completion but got a suspension."""

    continuation: Coroutine[typing.Any, typing.Any, typing.Any]

    def __init__(self, continuation: Coroutine[typing.Any, typing.Any, typing.Any]) -> None:
        self.continuation = continuation
        super().__init__("Coroutine is still suspended after a single step")


class TicksExhaustedError(Exception):
    """drive() ran out of ticks before the coroutine completed."""

    ticks: int

    def __init__(self, ticks: int) -> None:
        self.ticks = ticks
        super().__init__(f"Coroutine did not complete within {ticks} ticks")


__all__ = ("CoroutineFailedError", "StillSuspendedError", "TicksExhaustedError")
