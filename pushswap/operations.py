"""The named moves on a pair of stacks, each announced on an output stream."""

from __future__ import annotations

from typing import List, Optional, TextIO

from .output import putstr
from .stack import Stack


class Operations:
    """Performs moves on stacks ``a`` and ``b`` and writes each move's name.

    A single-stack move that has no effect is neither written nor recorded.
    The double moves ``ss``, ``rr`` and ``rrr`` are always written. Every
    written move is also appended to ``moves``.
    """

    def __init__(
        self,
        a: Optional[Stack] = None,
        b: Optional[Stack] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self.a = a if a is not None else Stack()
        self.b = b if b is not None else Stack()
        self.out = out
        self.moves: List[str] = []

    def _emit(self, name: str) -> None:
        self.moves.append(name)
        putstr(name + "\n", self.out)

    def swap_a(self) -> None:
        if self.a.swap():
            self._emit("sa")

    def swap_b(self) -> None:
        if self.b.swap():
            self._emit("sb")

    def push_a(self) -> None:
        if self.b:
            self.a.push(self.b.pop())
            self._emit("pa")

    def push_b(self) -> None:
        if self.a:
            self.b.push(self.a.pop())
            self._emit("pb")

    def rotate_a(self) -> None:
        if self.a.rotate():
            self._emit("ra")

    def rotate_b(self) -> None:
        if self.b.rotate():
            self._emit("rb")

    def reverse_rotate_a(self) -> None:
        if self.a.reverse_rotate():
            self._emit("rra")

    def reverse_rotate_b(self) -> None:
        if self.b.reverse_rotate():
            self._emit("rrb")

    def swap_both(self) -> None:
        self.a.swap()
        self.b.swap()
        self._emit("ss")

    def rotate_both(self) -> None:
        self.a.rotate()
        self.b.rotate()
        self._emit("rr")

    def reverse_rotate_both(self) -> None:
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self._emit("rrr")