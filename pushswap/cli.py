"""Command entry point: parse the numbers and show the indexed stack."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from pushswap.parsing import AlreadySorted, PushSwapError, parse_stack


def format_stack(values: Sequence[int]) -> str:
    """One-line description of stack A."""
    numbers = " ".join(str(value) for value in values)
    return f"Stack A (size = {len(values)}): {numbers}"


def main(argv: Optional[List[str]] = None) -> int:
    """Run the program on ``argv`` (defaults to the command line).

    The exit status is 1 on every path, as the program always reports.
    """
    args = sys.argv[1:] if argv is None else argv
    try:
        stack = parse_stack(args)
    except PushSwapError as error:
        sys.stderr.write(error.message)
        return 1
    except AlreadySorted:
        return 1
    print(format_stack(stack))
    return 1


if __name__ == "__main__":
    sys.exit(main())