"""Allocating string operations: substrings, joins, trimming, splitting, mapping.

As in :mod:`pushswap.strings`, a ``"\\0"`` inside a string ends it.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional

from pushswap.strings import str_len


def _terminated(text: str) -> str:
    if text is None:
        raise TypeError("expected a string, got None")
    return text[: str_len(text)]


def _separator(sep: str) -> str:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return sep


def strdup(text: str) -> str:
    """Copy of ``text`` up to its terminator."""
    return _terminated(text)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _terminated(text)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of ``s1`` and ``s2``."""
    return _terminated(s1) + _terminated(s2)


def strtrim(text: str, charset: str) -> str:
    """``text`` with every character of ``charset`` removed from both ends."""
    text = _terminated(text)
    charset = _terminated(charset)
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: str) -> List[str]:
    """Non-empty words of ``text`` separated by runs of ``sep``."""
    text = _terminated(text)
    sep = _separator(sep)
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def count_words(text: str, sep: str) -> int:
    """Number of words ``split`` would return."""
    return len(split(text, sep))


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """New string built from ``func(index, char)`` for each character."""
    if func is None:
        raise TypeError("func must be callable")
    return "".join(func(index, char) for index, char in enumerate(_terminated(text)))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` on each character of ``chars`` in place.

    A non-``None`` result replaces the character. Iteration stops at a
    ``"\\0"`` element.
    """
    if func is None:
        raise TypeError("func must be callable")
    for index, char in enumerate(list(chars)):
        if char == "\0":
            break
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement