"""Sorting a stack of at most three elements."""

from __future__ import annotations

from .operations import Operations


def sort_three(ops: Operations) -> None:
    """Sort stack ``a`` of ``ops`` when it holds at most three elements."""
    a = ops.a
    if a.is_sorted():
        return
    largest = a.find_max()
    values = a.values()
    if values[0] == largest:
        ops.rotate_a()
    elif values[1] == largest:
        ops.reverse_rotate_a()
    values = a.values()
    if values[0] > values[1]:
        ops.swap_a()