"""Byte-buffer helpers working on bytes and bytearray objects."""

from __future__ import annotations

import operator
import sys
from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: Buffer) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")
    return n


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf`` in place."""
    n = _check_count(n, buf)
    buf[:n] = bytes(n)


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` taken as a byte."""
    n = _check_count(n, buf)
    buf[:n] = bytes([operator.index(value) & 0xFF]) * n
    return buf


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count`` elements of ``size`` bytes."""
    count = operator.index(count)
    size = operator.index(size)
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > sys.maxsize // size:
        raise OverflowError("requested size is too large")
    return bytearray(count * size)


def memchr(data: Buffer, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` in the first ``n``
    bytes, or None when there is none."""
    n = _check_count(n, data)
    target = operator.index(value) & 0xFF
    index = bytes(data[:n]).find(bytes([target]))
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first
    unequal pair, or 0 when they match."""
    n = _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    n = _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled correctly.
    """
    n = _check_count(n)
    dest = operator.index(dest)
    src = operator.index(src)
    for offset in (dest, src):
        if offset < 0 or offset + n > len(buf):
            raise ValueError(f"region at {offset} of {n} bytes is out of range")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf