"""Tests for the primitive constructors (lift.up)."""

import pytest
from kungfu import Error, Nothing, Ok, Some

from stepwise import (
    Completed,
    CoroutineFailedError,
    Failed,
    Left,
    Right,
    Suspended,
    compute,
    effect,
    fail,
    from_either,
    from_option,
    from_result,
    optional,
    run_and_extract,
    run_once,
    succeed,
    suspend,
    transform,
    unit,
)


def test_succeed_completes_with_state_untouched():
    assert succeed(10)(1) == Completed(10, 1)
    assert run_and_extract(succeed(10), 1) == (10, 1)


def test_unit_completes_with_none():
    assert unit()("state") == Completed(None, "state")


def test_fail_yields_failed_for_any_state():
    program = fail("Error!")
    assert program(1) == Failed("Error!")
    assert program("other") == Failed("Error!")


def test_fail_raises_at_driver():
    with pytest.raises(CoroutineFailedError):
        run_once(fail("Error!"), 1)


def test_suspend_pauses_exactly_once():
    outcome = suspend()(1)
    assert isinstance(outcome, Suspended)
    assert outcome.state == 1
    assert outcome.continuation(5) == Completed(None, 5)


def test_suspend_is_left_at_driver():
    assert isinstance(run_once(suspend(), 1), Left)


def test_compute_reads_state_without_changing_it():
    assert compute(lambda s: s + 1)(1) == Completed(2, 1)


def test_compute_captures_exception():
    def boom(_: int) -> int:
        raise ZeroDivisionError("nope")

    outcome = compute(boom)(1)
    assert isinstance(outcome, Failed)
    assert isinstance(outcome.error, ZeroDivisionError)


def test_compute_exception_never_leaks_raw():
    def boom(_: int) -> int:
        raise KeyError("missing")

    with pytest.raises(CoroutineFailedError) as exc_info:
        run_once(compute(boom), 1)
    assert isinstance(exc_info.value.error, KeyError)
    assert exc_info.value.__cause__ is exc_info.value.error
    assert "KeyError" in str(exc_info.value)


def test_transform_replaces_state():
    assert transform(lambda s: s + "y")("x") == Completed("xy", "xy")


def test_transform_captures_exception():
    def boom(_: int) -> int:
        raise ValueError("bad state")

    outcome = transform(boom)(1)
    assert isinstance(outcome, Failed)
    assert isinstance(outcome.error, ValueError)


def test_effect_ignores_state():
    assert run_and_extract(effect(lambda: "y"), None) == ("y", None)


def test_effect_captures_exception():
    def boom() -> bool:
        raise RuntimeError("io")

    with pytest.raises(CoroutineFailedError):
        run_once(effect(boom), None)


def test_effect_runs_on_every_invocation(counter):
    def bump() -> int:
        counter[0] += 1
        return counter[0]

    program = effect(bump)
    program(None)
    program(None)
    assert counter[0] == 2


def test_from_option_some():
    assert from_option(Some(3))(0) == Completed(3, 0)


def test_from_option_nothing_fails_with_unit():
    assert from_option(Nothing())(0) == Failed(None)


def test_optional():
    assert optional(5, error=lambda: "missing")(0) == Completed(5, 0)
    assert optional(None, error=lambda: "missing")(0) == Failed("missing")


def test_from_either():
    assert from_either(Right(7))(0) == Completed(7, 0)
    assert from_either(Left("left side"))(0) == Failed("left side")


def test_from_either_rejects_other_values():
    with pytest.raises(TypeError):
        from_either(7)


def test_from_result():
    assert from_result(Ok(1))("s") == Completed(1, "s")
    assert from_result(Error("err"))("s") == Failed("err")
