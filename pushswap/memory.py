"""Byte-buffer operations over ``bytearray`` and bytes-like objects."""

from __future__ import annotations

from typing import Optional

_SIZE_LIMIT = 2**64


def _check_span(length: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > length:
        raise IndexError(f"{what} holds {length} bytes, {n} requested")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` (taken mod 256)."""
    _check_span(len(buffer), n, "buffer")
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` into the start of ``dest``."""
    _check_span(len(dest), n, "destination")
    _check_span(len(src), n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to ``dest``.

    The regions may overlap.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_span(len(buffer) - max(dest, src), n, "buffer")
    if dest != src and n:
        buffer[dest : dest + n] = bytes(buffer[src : src + n])
    return buffer


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Offset of the first byte equal to ``value`` among the first ``n``, or ``None``."""
    _check_span(len(data), n, "data")
    index = bytes(data[:n]).find(value & 0xFF)
    return index if index >= 0 else None


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Difference of the first unequal bytes within ``n``, or 0."""
    _check_span(len(a), n, "first buffer")
    _check_span(len(b), n, "second buffer")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Zeroed buffer of ``count * size`` bytes.

    A zero count or size gives a single-byte buffer; a total that does not
    fit in 64 bits raises ``OverflowError``.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if not count or not size:
        return bytearray(1)
    total = count * size
    if total >= _SIZE_LIMIT:
        raise OverflowError("allocation size overflows")
    return bytearray(total)