# pushswap

`pushswap` reads a list of integers from the command line, checks that it is
well formed, and prints the numbers replaced by their rank: each value becomes
the count of values smaller than it.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

Numbers may be given as separate arguments, as one quoted argument, or both:

```
pushswap 3 -1 42
pushswap "3 -1 42"
pushswap "3 -1" 42
```

All three print the ranked stack on standard output:

```
Stack A (size = 3): 1 0 2
```

The command exits with status 1 on every path, including success.

- With no arguments it prints nothing.
- It writes `Error` to standard error when an argument is empty, begins with a
  space, holds a character other than digits, spaces, `+` or `-`, or has a
  sign followed by a space, another sign or the end of the argument; when a
  number is not a plain signed integer, is longer than eleven characters or
  lies outside the 32-bit signed range; or when a number is repeated.
- If the numbers are already in ascending order it prints nothing.

## What it does not do

The command stops after ranking the numbers. It does not work out or print a
sequence of stack moves that sorts them.

## Library

The same steps can be called from Python:

```python
from pushswap.parsing import parse_stack, PushSwapError, AlreadySorted

ranks = parse_stack(["3 -1", "42"])   # [1, 0, 2]
```

`parse_stack` raises `PushSwapError` for bad input (its `message` attribute is
the text the command writes to standard error) and `AlreadySorted` when the
numbers are already in order.

`pushswap.parsing` also exposes the individual stages: `check_args`,
`combine_args`, `fill_numbers`, `parse_int`, `check_duplicates_and_order` and
`index_numbers`. `pushswap.sorting.is_sorted` tells whether a sequence never
decreases, and `pushswap.cli.format_stack` builds the line the command prints.

`pushswap.operations` changes a list in place and writes the name of the move
to a stream (standard output by default):

- `swap(stack, label, stream=None)` exchanges the first two elements and writes
  `label` and a newline; a stack of two elements or fewer is left alone and
  nothing is written.
- `rotate(stack, direction, label, stream=None)` with `Direction.UP` (or
  `"up"`) moves the first element to the end and writes `r<label>`; with
  `Direction.DOWN` (or `"down"`) it moves the last element to the front and
  writes `rr<label>`.

### Helpers

- `pushswap.chars`: ASCII tests and case mapping (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`).
- `pushswap.strings`: `str_len`, `str_chr`, `str_rchr`, `str_ncmp`,
  `str_nstr`, `atoi`, `itoa`, `strlcpy`, `strlcat`; a `"\0"` inside a string
  ends it.
- `pushswap.textops`: `strdup`, `substr`, `strjoin`, `strtrim`, `split`,
  `count_words`, `strmapi`, `striteri`.
- `pushswap.memory`: `bytearray` operations `memset`, `bzero`, `memcpy`,
  `memmove`, `memchr`, `memcmp`, `calloc`.
- `pushswap.linkedlist`: a singly linked `LinkedList` of `Node`s with
  `push_front`, `push_back`, `last`, `for_each`, `map` and `clear`.
- `pushswap.output`: `put_char`, `put_str`, `put_endl`, `put_nbr` writing to a
  text stream.