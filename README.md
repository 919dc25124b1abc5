# ftkit

Helpers modelled on the classic C standard library, written for Python.
Positions are returned as indices, with `None` for "not found". Errors such
as negative counts or out-of-range sizes raise exceptions.

## Modules

- `ftkit.chars`: ASCII character classes and case conversion. `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii` and `is_print` return `bool`.
  `to_lower` and `to_upper` return the same kind of value they were given.
  Every function accepts either an integer code or a one-character string.
- `ftkit.search`: searching and comparing strings.
  - `strchr(s, c)` and `strrchr(s, c)` return the index of the first or last
    occurrence. Asking for the NUL character gives `len(s)`.
  - `strncmp(s1, s2, n)` returns the code-point difference at the first
    mismatch, or 0.
  - `strnstr(big, little, length=None)` finds `little` within the first
    `length` characters of `big`.
- `ftkit.memory`: operations on bytes-like buffers.
  - `memset`, `bzero`, `memcpy` and `memmove(buffer, dest, src, n)` modify a
    mutable buffer such as a `bytearray`. For `memmove`, `dest` and `src`
    are offsets within one buffer, and the two regions may overlap.
  - `memchr` and `memcmp` search and compare buffers.
  - `calloc(nmemb, size)` returns a zero-filled `bytearray`. It raises
    `OverflowError` when the total size would overflow.
  - A count that reaches past the end of a buffer raises `ValueError`.
- `ftkit.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`
  write to a file descriptor.
  - `putstr_fd` and `putendl_fd` write nothing for `None` or for
    descriptor 0.
  - `putnbr_fd` accepts only 32-bit signed integers.
- `ftkit.text`: string length and integer conversion. Strings end at their
  first NUL character.
  - `strlen` and `strdup` work up to that NUL.
  - `strlcpy(src, size)` and `strlcat(dst, src, size)` return a pair: the
    resulting text and the length they tried to create.
  - `atoi` parses a leading decimal integer, wrapping as a 32-bit signed
    integer does.
  - `itoa` formats a 32-bit signed integer.
- `ftkit.transform`: building new strings.
  - `substr(s, start, length)`, `strjoin(s1, s2)` and `strtrim(s, charset)`.
  - `split(s, sep)` splits on one character and drops empty pieces.
  - `strmapi(s, func)` builds a string from `func(index, char)`.
  - `striteri(chars, func)` calls `func(index, item)` over a mutable
    sequence. A non-`None` result replaces the item.
  - `rotate_letter(i, c)` shifts an ASCII letter `i` places along the
    alphabet, keeping its case.
- `ftkit.lines`: reading a file descriptor line by line.
  - `LineReader(fd, buffer_size=10)` reads in chunks of `buffer_size` bytes.
    It has a `read_line()` method and can be iterated over.
  - `get_next_line(fd)` uses a single buffer shared by all calls.
  - Lines keep their trailing newline. `None` means nothing is left.
- `ftkit.printf`: a minimal formatter for `%c %s %p %d %i %u %x %X %%`.
  - `format_string(fmt, *args)` returns the text.
  - `printf(fmt, *args)` writes it to standard output and returns its length.
  - Other conversion characters produce nothing. `%s` of `None` gives
    `(null)`, and `%p` of 0 or `None` gives `(nil)`.

## Installation

```
pip install .
```

## Examples

```python
from ftkit.text import atoi, itoa
from ftkit.transform import split
from ftkit.printf import format_string

atoi("  -42abc")                          # -42
itoa(-2147483648)                         # "-2147483648"
split("  hello  world  ", " ")            # ["hello", "world"]
format_string("%d items at %x", 3, 255)   # "3 items at ff"
```

Reading lines from a file:

```python
import os
from ftkit.lines import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
try:
    for line in LineReader(fd, 10):
        print(line, end="")
finally:
    os.close(fd)
```

## Limitations

`ftkit` is a library only. It installs no command-line program. The
formatter supports no flags, field widths or precision.

## Running the tests

```
pip install .[test]
pytest
```