"""Validation and parsing of command-line numbers into an indexed stack."""

from __future__ import annotations

from typing import List, Sequence

from pushswap.chars import is_digit
from pushswap.sorting import is_sorted
from pushswap.strings import INT_MAX, INT_MIN
from pushswap.textops import split

_WHITESPACE = " \t\n\v\f\r"
_SIGNS = ("+", "-")
_MAX_TOKEN_LENGTH = 11


class PushSwapError(Exception):
    """Invalid input; ``message`` is what the program writes to stderr."""

    def __init__(self, message: str = "Error\n") -> None:
        super().__init__(message)
        self.message = message


class AlreadySorted(Exception):
    """The numbers are already in order, so there is nothing to do."""


def check_args(args: Sequence[str]) -> None:
    """Reject arguments holding anything but digits, spaces and lone signs.

    No arguments at all raises :class:`PushSwapError` with an empty message.
    """
    if not args:
        raise PushSwapError("")
    for arg in args:
        if not arg or arg[0] == " ":
            raise PushSwapError()
        for char, following in zip(arg, arg[1:] + "\0"):
            if not is_digit(char) and char not in (" ", "+", "-"):
                raise PushSwapError()
            if char in _SIGNS and following in (" ", "\0", "+", "-"):
                raise PushSwapError()


def combine_args(args: Sequence[str]) -> str:
    """All arguments joined by single spaces."""
    return " ".join(args)


def parse_int(token: str) -> int:
    """Parse a signed decimal token that must fit in a 32-bit int.

    Leading whitespace and one sign are allowed; a token longer than eleven
    characters, a non-digit or an out-of-range value raises
    :class:`PushSwapError`. A token with no digits parses as 0.
    """
    body = token.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in _SIGNS:
        if body[0] == "-":
            sign = -1
        body = body[1:]
    if not body:
        return 0
    if len(token) > _MAX_TOKEN_LENGTH:
        raise PushSwapError()
    if not all(is_digit(char) for char in body):
        raise PushSwapError()
    value = sign * int(body)
    if not INT_MIN <= value <= INT_MAX:
        raise PushSwapError()
    return value


def fill_numbers(text: str) -> List[int]:
    """Parse every space-separated token of ``text``."""
    return [parse_int(token) for token in split(text, " ")]


def check_duplicates_and_order(numbers: Sequence[int]) -> None:
    """Raise on repeated values, or :class:`AlreadySorted` if already ordered."""
    if len(set(numbers)) != len(numbers):
        raise PushSwapError()
    if is_sorted(numbers):
        raise AlreadySorted()


def index_numbers(numbers: Sequence[int]) -> List[int]:
    """Replace each value with the count of values smaller than it."""
    return [sum(1 for other in numbers if value > other) for value in numbers]


def parse_stack(args: Sequence[str]) -> List[int]:
    """Validate ``args`` and return stack A as ranks from 0 upward."""
    check_args(args)
    numbers = fill_numbers(combine_args(args))
    check_duplicates_and_order(numbers)
    return index_numbers(numbers)