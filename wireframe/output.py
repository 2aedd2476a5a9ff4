"""Write characters, strings and integers to a text stream."""

from __future__ import annotations

import operator
from typing import Optional, TextIO, Union


def putchar_fd(c: Union[str, int], stream: TextIO) -> None:
    """Write one character; an integer is taken as a byte code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        stream.write(c)
    else:
        stream.write(chr(operator.index(c) & 0xFF))


def putstr_fd(text: Optional[str], stream: TextIO) -> None:
    """Write ``text``; None writes nothing."""
    if text is None:
        return
    stream.write(text)


def putendl_fd(text: Optional[str], stream: TextIO) -> None:
    """Write ``text`` followed by a newline."""
    putstr_fd(text, stream)
    stream.write("\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal form of ``n``."""
    n = operator.index(n)
    if n < 0:
        stream.write("-")
        n = -n
    stream.write(format(n, "d"))