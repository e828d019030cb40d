import io

from pushswap.operations import Operations
from pushswap.stack import Stack


def make(a, b=()):
    out = io.StringIO()
    return Operations(Stack(a), Stack(b), out), out


def test_swap_a_writes_name():
    ops, out = make([2, 1])
    ops.swap_a()
    assert ops.a.values() == [1, 2]
    assert out.getvalue() == "sa\n"


def test_swap_a_on_single_writes_nothing():
    ops, out = make([1])
    ops.swap_a()
    assert out.getvalue() == ""
    assert ops.moves == []


def test_swap_b():
    ops, out = make([], [4, 5])
    ops.swap_b()
    assert ops.b.values() == [5, 4]
    assert out.getvalue() == "sb\n"


def test_push_b_then_push_a_round_trip():
    ops, out = make([1, 2, 3])
    ops.push_b()
    assert ops.a.values() == [2, 3]
    assert ops.b.values() == [1]
    ops.push_a()
    assert ops.a.values() == [1, 2, 3]
    assert ops.b.values() == []
    assert out.getvalue() == "pb\npa\n"


def test_push_from_empty_writes_nothing():
    ops, out = make([1])
    ops.push_a()
    assert ops.a.values() == [1]
    assert out.getvalue() == ""


def test_rotations_on_a():
    ops, out = make([1, 2, 3])
    ops.rotate_a()
    assert ops.a.values() == [2, 3, 1]
    ops.reverse_rotate_a()
    assert ops.a.values() == [1, 2, 3]
    assert ops.moves == ["ra", "rra"]


def test_rotations_on_b():
    ops, out = make([], [7, 8])
    ops.rotate_b()
    ops.reverse_rotate_b()
    assert ops.b.values() == [7, 8]
    assert out.getvalue() == "rb\nrrb\n"


def test_double_moves_always_written():
    ops, out = make([1, 2], [])
    ops.swap_both()
    ops.rotate_both()
    ops.reverse_rotate_both()
    assert out.getvalue() == "ss\nrr\nrrr\n"
    assert ops.a.values() == [2, 1]


def test_rotate_both_moves_both():
    ops, _ = make([1, 2, 3], [4, 5, 6])
    ops.rotate_both()
    assert ops.a.values() == [2, 3, 1]
    assert ops.b.values() == [5, 6, 4]