import io
import random
from itertools import permutations

import pytest

from pushswap.cli import find_median, main, rotate_min_to_top, solve
from pushswap.operations import Operations
from pushswap.stack import Stack


def _swap(s):
    if len(s) >= 2:
        s[0], s[1] = s[1], s[0]


def _rot(s):
    if len(s) >= 2:
        s.append(s.pop(0))


def _rrot(s):
    if len(s) >= 2:
        s.insert(0, s.pop())


def replay(values, moves):
    a, b = list(values), []
    for move in moves:
        if move == "sa":
            _swap(a)
        elif move == "sb":
            _swap(b)
        elif move == "ss":
            _swap(a)
            _swap(b)
        elif move == "pa":
            if b:
                a.insert(0, b.pop(0))
        elif move == "pb":
            if a:
                b.insert(0, a.pop(0))
        elif move == "ra":
            _rot(a)
        elif move == "rb":
            _rot(b)
        elif move == "rr":
            _rot(a)
            _rot(b)
        elif move == "rra":
            _rrot(a)
        elif move == "rrb":
            _rrot(b)
        elif move == "rrr":
            _rrot(a)
            _rrot(b)
        else:
            raise AssertionError(f"unknown move {move!r}")
    return a, b


def run_solve(values):
    ops = Operations(Stack(values), Stack(), io.StringIO())
    solve(ops)
    return ops


def test_find_median():
    assert find_median(Stack([5, 1, 4, 2, 3])) == 3


def test_find_median_empty():
    assert find_median(Stack()) == 0


def test_rotate_min_to_top():
    ops = Operations(Stack([3, 4, 1, 2]), Stack(), io.StringIO())
    rotate_min_to_top(ops)
    assert ops.a.values() == [1, 2, 3, 4]


def test_rotate_min_to_top_empty():
    ops = Operations(Stack(), Stack(), io.StringIO())
    rotate_min_to_top(ops)
    assert ops.moves == []


@pytest.mark.parametrize("values", list(permutations([3, -1, 7, 0, 5])))
def test_solve_sorts_every_order_of_five(values):
    ops = run_solve(values)
    assert ops.a.values() == sorted(values)
    assert len(ops.b) == 0
    a, b = replay(values, ops.moves)
    assert a == sorted(values)
    assert b == []


def test_solve_sorts_a_hundred():
    values = random.Random(42).sample(range(-10000, 10000), 100)
    ops = run_solve(values)
    a, b = replay(values, ops.moves)
    assert a == sorted(values)
    assert b == []


def test_solve_sorted_input_needs_no_moves():
    assert run_solve([1, 2, 3, 4, 5, 6]).moves == []


def test_main_prints_moves_that_sort(capsys):
    args = ["4", "-2", "9", "0", "7", "1"]
    assert main(args) == 0
    moves = capsys.readouterr().out.split()
    a, b = replay([int(x) for x in args], moves)
    assert a == sorted(int(x) for x in args)
    assert b == []


def test_main_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_duplicate_reports_error(capsys):
    assert main(["1", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_non_integer_reports_error(capsys):
    assert main(["1", "two"]) == 1
    assert capsys.readouterr().err == "Error\n"