# ftlib

A compact library of small helpers for characters, byte buffers, strings,
linked lists and line-by-line reading. It has no dependencies outside the
standard library.

## Modules

- `ftlib.chars`: ASCII classification and case conversion: `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`.
  Each accepts an integer code or a one-character string. The case
  converters give back the same kind they were given.
- `ftlib.memory`: byte-buffer helpers: `memset`, `bzero`, `memcpy`,
  `memmove` (copies between possibly overlapping ranges of one buffer),
  `memchr` (returns an index or `None`), `memcmp` and `calloc` (returns a
  zeroed `bytearray` and raises `OverflowError` when the size would not fit
  in `SIZE_MAX`). Counts larger than a buffer raise `ValueError`.
- `ftlib.strings`: `strlen`, `strlcpy` and `strlcat` (each returns the
  resulting text together with the length the full result would have had),
  `strchr`, `strrchr` and `strnstr` (each returns an index or `None`),
  `strncmp`, `strdup`, `atoi` (wraps like a 32-bit signed integer) and
  `itoa` (raises `OverflowError` outside `INT_MIN`..`INT_MAX`).
- `ftlib.text`: building new strings: `substr`, `strjoin`, `strtrim`,
  `strmapi`, `striteri` (changes a mutable sequence of characters in place)
  and `split` (drops empty pieces).
- `ftlib.linked_list`: a singly linked list of `Node` objects, with
  `lst_new`, `lst_add_front`, `lst_add_back`, `lst_size`, `lst_last`,
  `lst_del_one`, `lst_clear`, `lst_iter` and `lst_map`. Functions that can
  change the head return the new head. Iterating over a `Node` yields the
  content of that node and every node after it.
- `ftlib.next_line`: `LineReader` reads a file descriptor a buffer at a time
  and returns one line per `read_line()` call (or per iteration step), with
  its newline kept; `get_next_line(fd)` does the same while keeping separate
  state for each descriptor below `MAX_FD`.

## Installation

```
pip install .
```

## Examples

```python
from ftlib.chars import to_upper
from ftlib.strings import atoi, itoa, strchr, strlcpy
from ftlib.text import split, strtrim

to_upper("a")                  # "A"
atoi("   -42abc")              # -42
itoa(-2147483648)              # "-2147483648"
strchr("hello", "l")           # 2
strlcpy("hello", 3)            # ("he", 5)
split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")         # "hi"
```

A linked list:

```python
from ftlib.linked_list import lst_add_back, lst_new, lst_size

head = lst_new(1)
head = lst_add_back(head, lst_new(2))
head = lst_add_back(head, lst_new(3))
list(head)       # [1, 2, 3]
lst_size(head)   # 3
```

Reading lines from a file descriptor:

```python
import os
from ftlib.next_line import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 1024):
    print(line, end="")
os.close(fd)
```

## What it does not do

The package has no formatted-output function in the style of `printf` and
no helpers that write characters, strings or numbers to a file descriptor;
use Python's own string formatting and `os.write` for those. It provides no
command-line program.

## Running the tests

```
pip install ".[test]"
pytest
```