"""The stack of integers that the sorting moves act on."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional


@dataclass(eq=False)
class Node:
    """One element of a stack, with the move costs computed for it.

    ``rot_a``/``rev_rot_a`` and ``rot_b``/``rev_rot_b`` hold the number of
    forward or reverse rotations needed on each stack. The direction not
    chosen holds a large sentinel, so the smaller of a pair is the one to do.
    """

    value: int
    total_cost: int = 0
    rot_a: int = 0
    rot_b: int = 0
    rev_rot_a: int = 0
    rev_rot_b: int = 0


class Stack:
    """A stack of nodes whose top is the first element."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._nodes: deque[Node] = deque(Node(value) for value in values)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __contains__(self, value: object) -> bool:
        return any(node.value == value for node in self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def top(self) -> Optional[Node]:
        """Return the top node, or ``None`` when the stack is empty."""
        return self._nodes[0] if self._nodes else None

    def values(self) -> List[int]:
        """Return the values from top to bottom."""
        return [node.value for node in self._nodes]

    def is_sorted(self) -> bool:
        """Return True when the values ascend from top to bottom."""
        values = self.values()
        return all(left <= right for left, right in zip(values, values[1:]))

    def find_min(self) -> Optional[Node]:
        """Return the first node with the smallest value, or ``None`` if empty."""
        return min(self._nodes, key=lambda node: node.value, default=None)

    def find_max(self) -> int:
        """Return the largest value; raise ``ValueError`` on an empty stack."""
        if not self._nodes:
            raise ValueError("find_max of an empty stack")
        return max(self.values())

    def position(self, value: int) -> Optional[int]:
        """Return the index of ``value`` counted from the top, or ``None``."""
        return next(
            (index for index, node in enumerate(self._nodes) if node.value == value),
            None,
        )

    def append(self, value: int) -> Node:
        """Add a new node holding ``value`` at the bottom and return it."""
        node = Node(value)
        self._nodes.append(node)
        return node

    def pop(self) -> Node:
        """Remove and return the top node; raise ``IndexError`` when empty."""
        if not self._nodes:
            raise IndexError("pop from an empty stack")
        return self._nodes.popleft()

    def push(self, node: Node) -> None:
        """Place ``node`` on top."""
        self._nodes.appendleft(node)

    def swap(self) -> bool:
        """Exchange the two top nodes. Return False if there are fewer than two."""
        if len(self._nodes) < 2:
            return False
        first = self._nodes.popleft()
        second = self._nodes.popleft()
        self._nodes.appendleft(first)
        self._nodes.appendleft(second)
        return True

    def rotate(self) -> bool:
        """Move the top node to the bottom. Return False if there are fewer than two."""
        if len(self._nodes) < 2:
            return False
        self._nodes.rotate(-1)
        return True

    def reverse_rotate(self) -> bool:
        """Move the bottom node to the top. Return False if there are fewer than two."""
        if len(self._nodes) < 2:
            return False
        self._nodes.rotate(1)
        return True