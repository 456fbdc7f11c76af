"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    """Return the integer code of a single character or an integer code."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _in_range(code: int, low: str, high: str) -> bool:
    return ord(low) <= code <= ord(high)


def is_alpha(c: CharLike) -> bool:
    """True if ``c`` is an ASCII letter."""
    code = _code(c)
    return _in_range(code, "a", "z") or _in_range(code, "A", "Z")


def is_digit(c: CharLike) -> bool:
    """True if ``c`` is an ASCII decimal digit."""
    return _in_range(_code(c), "0", "9")


def is_alnum(c: CharLike) -> bool:
    """True if ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(code: CharLike) -> bool:
    """True if ``code`` lies in the 7-bit ASCII range 0..127."""
    return 0 <= _code(code) <= 127


def is_print(code: CharLike) -> bool:
    """True if ``code`` is a printable ASCII character (space through tilde)."""
    return 32 <= _code(code) < 127


def _convert(code: CharLike, low: str, high: str, shift: int) -> CharLike:
    value = _code(code)
    if _in_range(value, low, high):
        value += shift
    return chr(value) if isinstance(code, str) else value


def to_upper(code: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; other values pass through.

    A character argument gives a character back, an integer gives an integer.
    """
    return _convert(code, "a", "z", -32)


def to_lower(code: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; other values pass through.

    A character argument gives a character back, an integer gives an integer.
    """
    return _convert(code, "A", "Z", 32)