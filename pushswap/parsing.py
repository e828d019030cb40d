"""Reading the initial stack from command-line arguments."""

from __future__ import annotations

from typing import Iterable

from .conversions import INT_MAX, INT_MIN, atoi
from .ctype import isdigit
from .stack import Stack


class ParseError(ValueError):
    """An argument is not an integer, is out of range, or repeats a value."""


def is_integer(text: str) -> bool:
    """Return True when ``text`` is an optional sign followed by digits and
    its value fits in a signed 32-bit integer."""
    if not text:
        return False
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not all(isdigit(ch) for ch in digits):
        return False
    return INT_MIN <= int(text) <= INT_MAX


def parse_args(args: Iterable[str]) -> Stack:
    """Build stack ``a`` from ``args``, the first argument on top.

    Raises ``ParseError`` for a non-integer argument or a repeated value.
    """
    stack = Stack()
    for arg in args:
        if not is_integer(arg):
            raise ParseError(f"not an integer: {arg!r}")
        value = atoi(arg)
        if value in stack:
            raise ParseError(f"duplicate value: {value}")
        stack.append(value)
    return stack