"""Tests for map / join / bind and the monad laws."""

import pytest

from stepwise import (
    Completed,
    Failed,
    Suspended,
    compute,
    fail,
    join_coroutine,
    succeed,
    suspend,
    transform,
    wait,
)


def test_map_completed():
    assert succeed(2).map(lambda x: x * 10)(0) == Completed(20, 0)


def test_map_keeps_state_produced_by_source():
    assert transform(lambda s: s + 1).map(str)(4) == Completed("5", 5)


def test_map_does_not_touch_errors(counter):
    def f(x):
        counter[0] += 1
        return x

    assert fail("boom").map(f)(0) == Failed("boom")
    assert counter[0] == 0


def test_map_is_pushed_into_continuation(outcomes):
    history = outcomes(wait(2).as_(3).map(lambda x: x + 1), 0)
    assert [type(o) for o in history] == [Suspended, Suspended, Completed]
    assert history[-1] == Completed(4, 0)


def test_join_flattens_completed():
    nested = succeed(succeed(3))
    assert join_coroutine(nested)(0) == Completed(3, 0)
    assert nested.join()(0) == Completed(3, 0)


def test_join_runs_inner_on_same_tick():
    nested = transform(lambda s: s + 1).map(lambda _: compute(lambda s: s * 100))
    assert nested.join()(1) == Completed(200, 2)


def test_join_returns_inner_suspension_directly():
    outcome = succeed(suspend()).join()(9)
    assert isinstance(outcome, Suspended)
    assert outcome.state == 9
    assert outcome.continuation(9) == Completed(None, 9)


def test_join_passes_failure():
    assert fail("outer").join()(0) == Failed("outer")


def test_bind_is_strict_while_suspended(counter):
    def f(_):
        counter[0] += 1
        return succeed("next")

    program = wait(1).bind(f)
    first = program(0)
    assert isinstance(first, Suspended)
    assert counter[0] == 0
    assert first.continuation(0) == Completed("next", 0)
    assert counter[0] == 1


def test_flat_map_and_then_are_bind():
    f = lambda x: succeed(x + 1)
    assert succeed(1).flat_map(f)(0) == succeed(1).bind(f)(0) == succeed(1).then(f)(0)


def test_unit_and_as():
    assert succeed(5).unit()(0) == Completed(None, 0)
    assert succeed(5).as_("five")(0) == Completed("five", 0)


def test_suspending_pauses_after_completion(outcomes):
    history = outcomes(transform(lambda s: s + 1).suspending(), 0)
    assert [type(o) for o in history] == [Suspended, Completed]
    assert history[-1] == Completed(None, 1)


# Monad laws, compared on the final outcome and the number of ticks.

MONADS = [
    pytest.param(lambda: succeed(2), id="succeed"),
    pytest.param(lambda: wait(2).as_(2), id="suspending"),
    pytest.param(lambda: fail("boom"), id="failing"),
    pytest.param(lambda: transform(lambda s: s + 1), id="transform"),
]


def f(x):
    return transform(lambda s: s + x)


def g(y):
    return wait(1).as_(y * 10)


@pytest.mark.parametrize("value", [0, 1, 7])
def test_left_identity(outcomes, value):
    left = outcomes(succeed(value).bind(f), 3)
    right = outcomes(f(value), 3)
    assert left[-1] == right[-1]
    assert len(left) == len(right)


@pytest.mark.parametrize("make", MONADS)
def test_right_identity(outcomes, make):
    left = outcomes(make().bind(succeed), 0)
    right = outcomes(make(), 0)
    assert left[-1] == right[-1]
    assert len(left) == len(right)


@pytest.mark.parametrize("make", MONADS)
def test_associativity(outcomes, make):
    left = outcomes(make().bind(f).bind(g), 0)
    right = outcomes(make().bind(lambda x: f(x).bind(g)), 0)
    assert left[-1] == right[-1]
    assert len(left) == len(right)
