"""Null-terminated style string helpers working on Python strings.

A ``"\\0"`` inside a string ends it, just as the terminator would.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \t\n\v\f\r"


def _terminated(text: str) -> str:
    end = text.find("\0")
    return text if end < 0 else text[:end]


def _as_char(c: Union[str, int]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c % 256)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def str_len(text: str) -> int:
    """Length of ``text`` up to its terminator."""
    return len(_terminated(text))


def str_chr(text: str, c: Union[str, int]) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or ``None``.

    Searching for the terminator gives the string's length.
    """
    text = _terminated(text)
    char = _as_char(c)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return index if index >= 0 else None


def str_rchr(text: str, c: Union[str, int]) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or ``None``.

    Searching for the terminator gives the string's length.
    """
    text = _terminated(text)
    char = _as_char(c)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def str_ncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells the order."""
    s1, s2 = _terminated(s1), _terminated(s2)
    for position in range(min(n, max(len(s1), len(s2)))):
        a = ord(s1[position]) if position < len(s1) else 0
        b = ord(s2[position]) if position < len(s2) else 0
        if a != b:
            return a - b
    return 0


def str_nstr(big: str, little: str, n: int) -> Optional[int]:
    """Index of ``little`` inside the first ``n`` characters of ``big``, or ``None``."""
    big, little = _terminated(big), _terminated(little)
    if not little:
        return 0
    for start in range(min(n, len(big))):
        if start + len(little) > n:
            break
        if big.startswith(little, start):
            return start
    return None


def atoi(text: str) -> int:
    """Parse a leading, optionally signed decimal integer; 0 when there is none.

    Leading whitespace is skipped and the value wraps to a 32-bit int.
    """
    text = _terminated(text).lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    value = 0
    for char in text:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
    return _to_int32(value * sign)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)


def strlcpy(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the resulting text and the full length of ``src``; with a size
    of zero ``dst`` comes back unchanged.
    """
    src = _terminated(src)
    if size == 0:
        return dst, len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    """
    dst, src = _terminated(dst), _terminated(src)
    dst_len = min(len(dst), size)
    if size <= dst_len:
        return dst, size + len(src)
    room = size - 1 - dst_len
    return dst + src[:room], dst_len + len(src)