"""Order checks on stacks of integers."""

from __future__ import annotations

from typing import Sequence


def is_sorted(numbers: Sequence[int]) -> bool:
    """True if ``numbers`` never decreases from the top of the stack down."""
    return all(a <= b for a, b in zip(numbers, numbers[1:]))