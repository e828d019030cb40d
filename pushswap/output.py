"""Writing characters, strings and numbers to a text stream.

Every writer takes an ``out`` stream, which defaults to standard output when
it is ``None``. Functions that report a count return the number of characters
written.
"""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO, Union

CharLike = Union[int, str]

_INT_BITS = 32
_LONG_BITS = 64
_HEX_DIGITS = "0123456789abcdef"


def _stream(out: Optional[TextIO]) -> TextIO:
    return sys.stdout if out is None else out


def _emit(text: str, out: Optional[TextIO]) -> int:
    _stream(out).write(text)
    return len(text)


def _check_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} expects an int, not {type(value).__name__}")
    return value


def _as_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    return value - (1 << bits) if value >= 1 << (bits - 1) else value


def _as_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _char(c: CharLike) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a character code or a one-character string")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return c
    raise TypeError("expected a character code or a one-character string")


def putchar(c: CharLike, out: Optional[TextIO] = None) -> int:
    """Write one character; return 1."""
    return _emit(_char(c), out)


def putstr(s: Optional[str], out: Optional[TextIO] = None) -> int:
    """Write ``s``, or ``(null)`` when it is ``None``; return the count."""
    if s is None:
        return _emit("(null)", out)
    if not isinstance(s, str):
        raise TypeError(f"putstr expects a str, not {type(s).__name__}")
    return _emit(s, out)


def putendl(s: str, out: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline."""
    if not isinstance(s, str):
        raise TypeError(f"putendl expects a str, not {type(s).__name__}")
    _emit(s + "\n", out)


def putnbr(n: int, out: Optional[TextIO] = None) -> int:
    """Write ``n`` in signed decimal; return the count."""
    return _emit(str(_check_int(n, "putnbr")), out)


def putuint(n: int, out: Optional[TextIO] = None) -> int:
    """Write the non-negative ``n`` in decimal; return the count."""
    if _check_int(n, "putuint") < 0:
        raise ValueError(f"putuint expects a non-negative int, got {n}")
    return _emit(str(n), out)


def _hex(n: int, lower: bool) -> str:
    digits = []
    while True:
        n, digit = divmod(n, 16)
        digits.append(_HEX_DIGITS[digit])
        if n == 0:
            break
    text = "".join(reversed(digits))
    return text if lower else text.upper()


def puthex(n: int, lower: bool = True, out: Optional[TextIO] = None) -> int:
    """Write the non-negative ``n`` in hexadecimal; return the count.

    Letters are lower case when ``lower`` is true, upper case otherwise.
    """
    if _check_int(n, "puthex") < 0:
        raise ValueError(f"puthex expects a non-negative int, got {n}")
    return _emit(_hex(n, lower), out)


def putptr(ptr: Optional[int], out: Optional[TextIO] = None) -> int:
    """Write an address as ``0x`` and lower-case hex, or ``(nil)`` for 0.

    Returns the count.
    """
    if ptr is None or ptr == 0:
        return _emit("(nil)", out)
    if _check_int(ptr, "putptr") < 0:
        raise ValueError(f"putptr expects a non-negative address, got {ptr}")
    return _emit("0x" + _hex(ptr, True), out)


def _format_one(spec: str, args: list, out: Optional[TextIO]) -> int:
    if spec == "%":
        return putchar("%", out)
    if spec not in "csdixXup":
        return 0
    if not args:
        raise TypeError(f"not enough arguments for format %{spec}")
    arg = args.pop(0)
    if spec == "c":
        return putchar(arg, out)
    if spec == "s":
        return putstr(arg, out)
    if spec in "di":
        return putnbr(_as_signed(_check_int(arg, "%" + spec), _INT_BITS), out)
    if spec in "xX":
        value = _as_unsigned(_check_int(arg, "%" + spec), _INT_BITS)
        return puthex(value, spec == "x", out)
    if spec == "u":
        return putuint(_as_unsigned(_check_int(arg, "%u"), _INT_BITS), out)
    if arg is None:
        return putptr(None, out)
    return putptr(_as_unsigned(_check_int(arg, "%p"), _LONG_BITS), out)


def printf(fmt: str, *args: Any, out: Optional[TextIO] = None) -> int:
    """Write ``fmt`` with its conversions filled from ``args``.

    Supported conversions are ``%c %s %d %i %u %x %X %p %%``. Integers for
    ``%d``, ``%i``, ``%u``, ``%x`` and ``%X`` are taken as 32-bit values and
    those for ``%p`` as 64-bit addresses. An unknown conversion writes
    nothing, and so does a lone ``%`` at the end. Returns the count.
    """
    if not isinstance(fmt, str):
        raise TypeError("printf expects a format string")
    pending = list(args)
    count = 0
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            count += putchar(ch, out)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        count += _format_one(spec, pending, out)
    return count