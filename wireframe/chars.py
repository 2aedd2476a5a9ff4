"""ASCII character classification and case conversion.

Each function takes either a one-character string or an integer code.
The classifiers return a bool. The case converters return the same kind
of value they were given.
"""

from __future__ import annotations

import operator
from typing import Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    """Return the integer code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _byte(c: CharLike) -> int:
    """Return the code reduced to an unsigned byte."""
    return _code(c) & 0xFF


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter; the code is taken modulo 256."""
    b = _byte(c)
    return ord("A") <= b <= ord("Z") or ord("a") <= b <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit; the code is taken modulo 256."""
    return ord("0") <= _byte(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True when the code lies in 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) < 127


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return _convert(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return _convert(c, code)