"""
Подъем значений в монаду (Coroutine).

Constructors turning plain values, Result, Option, Either and exception-based
code into single-step coroutines. The escape hatches (`compute`, `transform`,
`effect`) are the only places where an exception is caught: it is converted
into a Failed outcome and never leaks past this boundary.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Never

from kungfu import Error, Nothing, Ok, Option, Result, Some

from .._types import Either, Left, Right, Unit
from ..core import Completed, Coroutine, Failed, Outcome, Suspended


def succeed[S, T](value: T) -> Coroutine[S, Never, T]:
    """
    Lift pure value into an always-completing Coroutine.

    **When to use:** When you have a plain value and need to start a chain.

    Example:
        from stepwise import lift as L

        hero = L.up.succeed(Hero(hp=10))
        L.down.run_once(hero, world)  # Right((Hero(hp=10), world))

    NOTE: `value` must already be computed. Exceptions raised while producing
          it happen before the Coroutine exists and are not captured.
    """
    def step(state: S) -> Outcome[S, Never, T]:
        return Completed(value, state)

    return Coroutine(step)


def fail[S, E](error: E) -> Coroutine[S, E, Never]:
    """
    Create always-failing Coroutine. Dual of succeed().

    Example:
        L.up.fail(OutOfMana(needed=5))
    """
    def step(state: S) -> Outcome[S, E, Never]:
        _ = state
        return Failed(error)

    return Coroutine(step)


def unit[S]() -> Coroutine[S, Never, Unit]:
    """Completed coroutine producing None."""
    return succeed(None)


def suspend[S]() -> Coroutine[S, Never, Unit]:
    """
    A single pause point.

    The first invocation yields Suspended(state, succeed(None)), the
    continuation completes on the next tick.
    """
    def step(state: S) -> Outcome[S, Never, Unit]:
        return Suspended(state, succeed(None))

    return Coroutine(step)


def compute[S, T](f: Callable[[S], T]) -> Coroutine[S, Exception, T]:
    """
    Read-only computation over the state, exceptions captured.

    **When to use:** Deriving a value from the current state. The state stays
    unchanged; use `transform` to evolve it.

    Example:
        L.up.compute(lambda world: world.player.position)
    """
    def step(state: S) -> Outcome[S, Exception, T]:
        try:
            value = f(state)
        except Exception as exc:
            return Failed(exc)
        return Completed(value, state)

    return Coroutine(step)


def transform[S](f: Callable[[S], S]) -> Coroutine[S, Exception, S]:
    """
    State transition, exceptions captured.

    The produced value IS the new state and replaces it going forward.

    Example:
        L.up.transform(lambda tick: tick + 1)
    """
    def step(state: S) -> Outcome[S, Exception, S]:
        try:
            new_state = f(state)
        except Exception as exc:
            return Failed(exc)
        return Completed(new_state, new_state)

    return Coroutine(step)


def effect[T](f: Callable[[], T]) -> Coroutine[None, Exception, T]:
    """
    Stateless side effect (I/O, logging), exceptions captured.

    Same contract as `compute`, the state argument is ignored.

    NOTE: Side effects run again on every retry. Make them idempotent
          if the coroutine is wrapped in `retry`.
    """
    return compute(lambda _: f())


def from_option[S, T](opt: Option[T]) -> Coroutine[S, Unit, T]:
    """
    Lift kungfu Option. Nothing becomes fail(None).

    Example:
        L.up.from_option(inventory.find("key"))
    """
    match opt:
        case Some(value):
            return succeed(value)
        case Nothing() | None:
            return fail(None)
        case _:
            raise TypeError(f"from_option(): expected Option, got {type(opt).__name__}")


def optional[S, T, E](
    value: T | None,
    *,
    error: Callable[[], E],
) -> Coroutine[S, E, T]:
    """
    Convert Optional to Coroutine. None becomes fail(error()).

    NOTE: error is a thunk to avoid building the error when value is present.
    """
    if value is None:
        return fail(error())
    return succeed(value)


def from_either[S, E, T](either: Either[E, T]) -> Coroutine[S, E, T]:
    """Lift Either: Left -> fail, Right -> succeed."""
    match either:
        case Left(error):
            return fail(error)
        case Right(value):
            return succeed(value)
        case _:
            raise TypeError(f"from_either(): expected Left or Right, got {type(either).__name__}")


def from_result[S, T, E](result: Result[T, E]) -> Coroutine[S, E, T]:
    """
    Lift already-computed kungfu Result: Error -> fail, Ok -> succeed.

    **When to use:** Bridging sync functions returning Result into a chain.

    Example:
        hero.bind(lambda h: L.up.from_result(validate(h)))
    """
    match result:
        case Ok(value):
            return succeed(value)
        case Error(error):
            return fail(error)
        case _:
            raise TypeError(f"from_result(): expected Result, got {type(result).__name__}")


__all__ = (
    "succeed",
    "fail",
    "unit",
    "suspend",
    "compute",
    "transform",
    "effect",
    "from_option",
    "optional",
    "from_either",
    "from_result",
)
