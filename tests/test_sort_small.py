import io
from itertools import permutations

import pytest

from pushswap.operations import Operations
from pushswap.sort_small import sort_three
from pushswap.stack import Stack


def run(values):
    ops = Operations(Stack(values), Stack(), io.StringIO())
    sort_three(ops)
    return ops


@pytest.mark.parametrize("values", list(permutations([10, 20, 30])))
def test_every_order_of_three_is_sorted(values):
    ops = run(values)
    assert ops.a.values() == sorted(values)
    assert len(ops.moves) <= 2


def test_sorted_input_needs_no_moves():
    assert run([1, 2, 3]).moves == []


def test_swap_only():
    assert run([2, 1, 3]).moves == ["sa"]


def test_largest_on_top():
    assert run([3, 2, 1]).moves == ["ra", "sa"]


def test_two_elements():
    ops = run([2, 1])
    assert ops.a.values() == [1, 2]
    assert len(ops.moves) == 1


def test_output_matches_moves():
    ops = run([1, 3, 2])
    assert ops.out.getvalue() == "".join(m + "\n" for m in ops.moves)
    assert ops.a.values() == [1, 2, 3]