"""Stack operations that print the instruction they perform."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, TextIO, Union

from pushswap.output import put_endl, put_str


class Direction(Enum):
    """Which way a rotation moves the elements."""

    UP = "up"
    DOWN = "down"


def swap(stack: List[int], label: str, stream: Optional[TextIO] = None) -> None:
    """Exchange the top two elements and print ``label``.

    Stacks of two elements or fewer are left untouched and nothing is printed.
    """
    if len(stack) <= 2:
        return
    stack[0], stack[1] = stack[1], stack[0]
    put_endl(label, stream)


def rotate(
    stack: List[int],
    direction: Union[Direction, str],
    label: str,
    stream: Optional[TextIO] = None,
) -> None:
    """Rotate ``stack`` one place and print the instruction.

    Up moves the top element to the bottom and prints ``r<label>``; down
    moves the bottom element to the top and prints ``rr<label>``.
    """
    direction = Direction(direction)
    if direction is Direction.UP:
        if stack:
            stack.append(stack.pop(0))
        put_str("r", stream)
    else:
        if stack:
            stack.insert(0, stack.pop())
        put_str("rr", stream)
    put_endl(label, stream)