"""Tests for replicate / sequence / traverse."""

import pytest

from stepwise import (
    Completed,
    Failed,
    Suspended,
    compute,
    effect,
    fail,
    for_each,
    replicate,
    sequence,
    succeed,
    transform,
    traverse,
    wait,
)


def test_replicate_makes_unexecuted_copies(counter):
    def bump():
        counter[0] += 1

    program = effect(bump)
    copies = program.replicate(3)
    assert len(copies) == 3
    assert all(copy is program for copy in copies)
    assert counter[0] == 0


@pytest.mark.parametrize("n", [0, -1])
def test_replicate_non_positive(n):
    assert replicate(succeed(1), n) == ()


def test_sequence_replicated(counter):
    def bump():
        counter[0] += 1
        return counter[0]

    assert sequence(replicate(effect(bump), 3))(None) == Completed((1, 2, 3), None)


def test_sequence_across_suspensions(outcomes):
    program = sequence([wait(1).as_(1), succeed(2), wait(2).as_(3)])
    history = outcomes(program, None)
    assert [type(o) for o in history] == [Suspended, Suspended, Suspended, Completed]
    assert history[-1] == Completed((1, 2, 3), None)


def test_sequence_fail_fast(counter):
    def bump():
        counter[0] += 1

    assert sequence([succeed(1), fail("stop"), effect(bump)])(None) == Failed("stop")
    assert counter[0] == 0


def test_sequence_empty():
    assert sequence([])("s") == Completed((), "s")


def test_traverse_threads_state():
    program = traverse([1, 2, 3], lambda x: transform(lambda s: s + x))
    assert program(0) == Completed((1, 3, 6), 6)


def test_for_each_is_traverse():
    program = for_each(["a", "b"], lambda x: compute(lambda s: f"{s}:{x}"))
    assert program("k") == Completed(("k:a", "k:b"), "k")
