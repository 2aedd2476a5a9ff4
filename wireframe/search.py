"""String length, search, comparison and bounded copy helpers.

Positions are returned as indices into the text, or None where the text
holds no match. A NUL character (``"\\0"`` or code 0) stands for the
terminator: searching for it finds the position just past the last
character.
"""

from __future__ import annotations

import operator
from typing import Optional, Tuple, Union

CharLike = Union[str, int]


def _target(c: CharLike) -> str:
    """Return the character searched for, with integer codes taken as a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _code_at(text: str, i: int) -> int:
    """Return the code at ``i``, or 0 past the end of the text."""
    return ord(text[i]) if i < len(text) else 0


def strlen(text: Optional[str]) -> int:
    """Return the length of ``text``; None counts as empty."""
    return len(text) if text else 0


def strchr(text: Optional[str], c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for NUL returns ``len(text)``.
    """
    if text is None:
        return None
    target = _target(c)
    if target == "\0":
        nul = text.find("\0")
        return len(text) if nul < 0 else nul
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: Optional[str], c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for NUL returns ``len(text)``.
    """
    if text is None:
        return None
    target = _target(c)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(a: Optional[str], b: Optional[str], n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first unequal codes, the end of a string
    counting as code 0, or 0 when the compared parts match. A missing
    string compares by the first code of the other one alone.
    """
    if a is None:
        return 0 if b is None else -_code_at(b, 0)
    if b is None:
        return _code_at(a, 0)
    n = operator.index(n)
    for i in range(max(n, 0)):
        ca, cb = _code_at(a, i), _code_at(b, i)
        if ca != cb or ca == 0:
            return ca - cb
    return 0


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Return the index of ``little`` lying wholly within the first ``n``
    characters of ``big``, or None. An empty ``little`` is found at 0."""
    if not little:
        return 0
    n = operator.index(n)
    end = min(max(n, 0), len(big))
    index = big.find(little, 0, end)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text, truncated to ``size - 1`` characters (empty
    when ``size`` is 0), and the full length of ``src``.
    """
    size = operator.index(size)
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had: ``len(src) + size`` when ``size`` is smaller than ``dest``,
    otherwise ``len(dest) + len(src)``.
    """
    size = operator.index(size)
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return dest, len(src)
    room = max(size - 1 - len(dest), 0)
    result = dest + src[:room]
    if size < len(dest):
        return result, len(src) + size
    return result, len(dest) + len(src)


def strdup(text: Optional[str]) -> Optional[str]:
    """Return a copy of ``text``; None stays None."""
    if text is None:
        return None
    return str(text)


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end gives an empty string; None stays None.
    """
    if text is None:
        return None
    start = operator.index(start)
    length = operator.index(length)
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]