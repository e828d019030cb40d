"""Length, search, comparison and bounded copy of strings.

Positions are returned as indices into the string, or ``None`` where there is
no match. Searching for the terminator (code 0) finds the end of the string,
the position just past the last character. The bounded copy functions return
the resulting text together with the length they tried to create. That length
is compared with ``size`` to detect truncation.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

CharLike = Union[int, str]

_TERMINATOR = "\0"


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


def _check_size(size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError("size must be an int")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of ``c`` in ``s``.

    Searching for the terminator returns ``len(s)``. Returns ``None`` when
    ``c`` does not occur.
    """
    ch = _char(c)
    if ch == _TERMINATOR:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of ``c`` in ``s``.

    Searching for the terminator returns ``len(s)``. Returns ``None`` when
    ``c`` does not occur.
    """
    ch = _char(c)
    if ch == _TERMINATOR:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of ``s1`` and ``s2``.

    Returns the difference of the codes of the first differing characters,
    with the end of a string counting as code 0, or 0 when the compared
    prefixes are equal.
    """
    _check_size(n)
    for left, right in zip(s1[:n] + _TERMINATOR, s2[:n] + _TERMINATOR):
        if left != right:
            return ord(left) - ord(right)
        if left == _TERMINATOR:
            break
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return the index of the first occurrence of ``little`` that lies wholly
    within the first ``length`` characters of ``big``.

    An empty ``little`` matches at index 0. Returns ``None`` when there is no
    such occurrence.
    """
    _check_size(length)
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text, at most ``size - 1`` characters, and the length
    of ``src``. A ``size`` of 0 copies nothing.
    """
    _check_size(size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters, terminator
    included.

    Returns the resulting text and the length it tried to create. When
    ``size`` is not larger than ``len(dst)`` the text is left unchanged and the
    length reported is ``len(src) + size``.
    """
    _check_size(size)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)