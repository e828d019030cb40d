"""Cost-driven insertion of stack ``b`` back into stack ``a``."""

from __future__ import annotations

from typing import Optional

from .conversions import INT_MAX
from .operations import Operations
from .stack import Node, Stack

# Marks the rotation direction that was not chosen for a node.
UNUSED = INT_MAX


def find_next_bigger(stack: Stack, value: int) -> Optional[Node]:
    """Return the node with the smallest value above ``value``.

    When there is none, the node with the smallest value is returned.
    """
    bigger = [node for node in stack if node.value > value]
    if not bigger:
        return stack.find_min()
    return min(bigger, key=lambda node: node.value)


def calculate_cost(stack_a: Stack, stack_b: Stack) -> None:
    """Store on every node of ``stack_b`` the rotations needed to bring it and
    its place in ``stack_a`` to the tops of their stacks."""
    size_a = len(stack_a)
    size_b = len(stack_b)
    for position, node in enumerate(stack_b):
        target = find_next_bigger(stack_a, node.value)
        target_position = stack_a.position(target.value)
        if position <= size_b // 2:
            node.rot_b, node.rev_rot_b = position, UNUSED
            node.total_cost = position
        else:
            node.rot_b, node.rev_rot_b = UNUSED, size_b - position
            node.total_cost = size_b - position
        if target_position <= size_a // 2:
            node.rot_a, node.rev_rot_a = target_position, UNUSED
            node.total_cost += target_position
        else:
            node.rot_a, node.rev_rot_a = UNUSED, size_a - target_position
            node.total_cost += size_a - target_position


def get_lowest_cost(stack: Stack) -> Optional[Node]:
    """Return the first node with the lowest total cost, or ``None`` if empty."""
    return min(stack, key=lambda node: node.total_cost, default=None)


def execute_best_node(ops: Operations) -> None:
    """Move the cheapest node of ``b`` to its place in ``a``.

    Costs must have been computed by ``calculate_cost`` beforehand.
    """
    best = get_lowest_cost(ops.b)
    if best is None:
        return
    rot_a, rot_b = best.rot_a, best.rot_b
    rev_a, rev_b = best.rev_rot_a, best.rev_rot_b
    if rot_a < rev_a and rot_b < rev_b:
        shared = min(rot_a, rot_b)
        for _ in range(shared):
            ops.rotate_both()
        rot_a -= shared
        rot_b -= shared
    elif rot_a > rev_a and rot_b > rev_b:
        shared = min(rev_a, rev_b)
        for _ in range(shared):
            ops.reverse_rotate_both()
        rev_a -= shared
        rev_b -= shared
    if rot_b < rev_b:
        for _ in range(rot_b):
            ops.rotate_b()
    else:
        for _ in range(rev_b):
            ops.reverse_rotate_b()
    if rot_a < rev_a:
        for _ in range(rot_a):
            ops.rotate_a()
    else:
        for _ in range(rev_a):
            ops.reverse_rotate_a()
    best.rot_a, best.rot_b, best.rev_rot_a, best.rev_rot_b = 0, 0, 0, 0
    ops.push_a()