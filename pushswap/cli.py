"""Command-line entry point: print a sequence of moves that sorts the input."""

from __future__ import annotations

import sys
from typing import List, Optional

from .operations import Operations
from .output import putendl
from .parsing import ParseError, parse_args
from .sort_large import calculate_cost, execute_best_node, find_next_bigger
from .sort_small import sort_three
from .stack import Stack


def find_median(stack: Stack) -> int:
    """Return the value at index ``len // 2`` in sorted order, or 0 if empty."""
    median = stack.find_min()
    if median is None:
        return 0
    for _ in range(len(stack) // 2):
        median = find_next_bigger(stack, median.value)
    return median.value


def rotate_min_to_top(ops: Operations) -> None:
    """Rotate stack ``a`` the shorter way until its smallest value is on top."""
    a = ops.a
    smallest = a.find_min()
    if smallest is None:
        return
    if a.position(smallest.value) <= len(a) // 2:
        while a.top() is not smallest:
            ops.rotate_a()
    else:
        while a.top() is not smallest:
            ops.reverse_rotate_a()


def solve(ops: Operations) -> None:
    """Sort stack ``a`` of ``ops`` in ascending order using stack ``b``."""
    median = find_median(ops.a)
    remaining = len(ops.a)
    while remaining > 3 and not ops.a.is_sorted():
        ops.push_b()
        if ops.b.top().value > median:
            ops.rotate_b()
        remaining -= 1
    sort_three(ops)
    for _ in range(len(ops.b)):
        calculate_cost(ops.a, ops.b)
        execute_best_node(ops)
    rotate_min_to_top(ops)


def main(argv: Optional[List[str]] = None) -> int:
    """Parse the integers in ``argv`` and print the moves that sort them."""
    args = sys.argv[1:] if argv is None else argv
    try:
        stack_a = parse_args(args)
    except ParseError:
        putendl("Error", sys.stderr)
        return 1
    solve(Operations(stack_a, Stack(), sys.stdout))
    return 0


if __name__ == "__main__":
    sys.exit(main())