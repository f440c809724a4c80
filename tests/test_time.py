"""Tests for tick-based waiting."""

import pytest

from stepwise import Completed, Suspended, delay, delayed, succeed, wait


@pytest.mark.parametrize("n", [0, 1, 2, 5, 10])
def test_wait_suspends_exactly_n_times(outcomes, n):
    history = outcomes(wait(n), "s")
    assert [type(o) for o in history] == [Suspended] * n + [Completed]
    assert history[-1] == Completed(None, "s")


def test_wait_negative_completes_immediately():
    assert wait(-3)(0) == Completed(None, 0)


def test_wait_snapshot_is_state_of_that_tick():
    first = wait(2)(7)
    assert isinstance(first, Suspended)
    assert first.state == 7
    second = first.continuation(8)
    assert isinstance(second, Suspended)
    assert second.state == 8


def test_wait_long_delay_keeps_continuation_shallow(outcomes):
    history = outcomes(wait(500), None, limit=600)
    assert len(history) == 501


def test_delay_is_wait(outcomes):
    assert len(outcomes(delay(3), None)) == 4


def test_delayed(outcomes):
    history = outcomes(delayed(succeed("x"), ticks=2), None)
    assert len(history) == 3
    assert history[-1] == Completed("x", None)
    assert succeed("x").delayed(0)(None) == Completed("x", None)
