"""String conversion and transformation helpers.

This module covers integer parsing and formatting, splitting on a
separator, joining, trimming, and applying a function per character.
"""

from __future__ import annotations

import operator
from typing import Callable, MutableSequence, Optional, TypeVar

T = TypeVar("T")

_INT_MIN = -(2**31)
_WHITESPACE = " \t\n\v\f\r"


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def atoi(text: Optional[str]) -> int:
    """Parse a leading decimal integer the way the C library does.

    Leading whitespace and one optional sign are accepted. Parsing stops
    at the first non-digit. A magnitude that overflows a 64-bit signed
    accumulator gives 0. The result is reduced to a 32-bit signed
    integer, so ``"2147483648"`` wraps to ``-2147483648``. None gives 0.
    """
    if text is None:
        return 0
    i = 0
    while i < len(text) and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < len(text) and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    total = 0
    for ch in text[i:]:
        if not "0" <= ch <= "9":
            break
        total = _wrap(total * 10 + (ord(ch) - ord("0")), 64)
        if total < _INT_MIN:
            return 0
    return _wrap(total * sign, 32)


def itoa(n: int) -> str:
    """Return the decimal form of ``n``."""
    return format(operator.index(n), "d")


def _separator(sep: str) -> str:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return sep


def count_words(text: Optional[str], sep: str) -> int:
    """Count the non-empty runs of characters other than ``sep``."""
    if not text:
        return 0
    return len(split(text, sep))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    if text is None:
        raise TypeError("cannot split None")
    return [word for word in text.split(_separator(sep)) if word]


def strjoin(a: Optional[str], b: Optional[str]) -> Optional[str]:
    """Concatenate two strings; None when either is missing."""
    if a is None or b is None:
        return None
    return a + b


def strtrim(text: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters found in ``charset`` from both ends of ``text``.

    None text stays None; a None charset returns the text unchanged.
    """
    if text is None:
        return None
    if charset is None or not text:
        return str(text)
    return text.strip(charset)


def strmapi(
    text: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Build a new string from ``func(index, char)`` for every character."""
    if text is None or func is None:
        return None
    return "".join(func(i, ch) for i, ch in enumerate(text))


def striteri(
    text: Optional[MutableSequence[T]],
    func: Callable[[int, T], Optional[T]],
) -> None:
    """Call ``func(index, item)`` for every item of ``text`` in place.

    A value returned by ``func`` replaces the item; None leaves it as is.
    """
    if text is None:
        return
    for i, item in enumerate(list(text)):
        result = func(i, item)
        if result is not None:
            text[i] = result