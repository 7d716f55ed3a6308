# ftkit

A small library of text and number helpers with strict, predictable rules.
It has no dependencies beyond the standard library and provides no command-line
program. It is meant to be imported.

## Modules

- `ftkit.numbers`
  - `atoi(text)` parses a whole string as a 32-bit int. Leading whitespace and
    one sign are allowed. It returns `0` when the text is malformed or out of range.
  - `parse_int(text)` follows the same rules but raises `ValueError` instead of returning `0`.
  - `atoull(text)` reads the leading unsigned decimal and wraps it at 64 bits.
  - `itoa(n)` returns the decimal string of `n`.
  - `int_len(n)` returns the length of that string, sign included.
  - `exact_sqrt(nb)` returns the root of a perfect square, and `0` otherwise.
    It also returns `0` for values outside `1..2147395600`.
  - `is_number(text)` is true for an optional sign followed only by digits.
- `ftkit.chars`
  - ASCII classes: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`
    (space is not printable here) and `is_whitespace`.
  - Case mapping: `to_lower` and `to_upper`.
  - Each function accepts a one-character string or an integer code. The case
    functions return a value of the same kind they were given.
- `ftkit.lists`
  - `merge_sort(items, cmp)` returns a new, stably sorted list. `cmp(a, b)`
    must return a negative number, zero or a positive number.
- `ftkit.reader`
  - `LineReader(stream, buffer_size=4096)` reads a binary or text stream in
    chunks of `buffer_size`. `read_line()` returns the next line without its
    newline, or `None` at the end. A `LineReader` can also be iterated.
  - `iter_lines(stream, buffer_size=4096)` yields the lines directly.
  - A `buffer_size` below 1 raises `ValueError`.
- `ftkit.text`
  - Counting: `count_char`, `count_if`, `count_printable_words`, `count_words`
    and `count_number_words`.
  - Splitting: `split_printable`, `split_char` and `split_words`. Empty pieces are dropped.
  - `trim` strips spaces, tabs and newlines.
  - `substring(s, start, length)` raises `ValueError` when the slice does not fit.
  - Searching: `find` and `find_within` return an index or `-1`.
  - C-style comparison: `compare` and `compare_n`.
- `ftkit.spec`
  - `parse_spec(fmt, pos, args)` parses one `%` directive into a
    `ConversionSpec`. The spec holds the flags, width, precision, `Length`
    modifier and conversion character.
  - `ConversionSpec.int_value` and `ConversionSpec.unsigned_value` wrap an
    argument to the integer type that the length modifier selects.
  - `to_base(n, base)` writes `n` in upper case in bases 2 to 36.
- `ftkit.printf`
  - `sprintf(fmt, *args)` supports the conversions `c s p d i u o x X %`.
  - It accepts the flags `- + 0 # space`, a width, a precision, `*`, and the
    length modifiers `hh h l ll j z`.
  - It raises `TypeError` when the format needs more arguments than were given.
  - `printf(fmt, *args)` writes the result to standard output and returns its length.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
import io

from ftkit.numbers import parse_int, itoa
from ftkit.printf import sprintf
from ftkit.text import split_char
from ftkit.reader import iter_lines

parse_int("  -42")           # -42
parse_int("99999999999")     # raises ValueError (outside the 32-bit range)
itoa(-2147483648)            # "-2147483648"

sprintf("%05d|%-4s|%#x", 42, "ab", 255)   # "00042|ab  |0xff"

split_char("a,,b,c", ",")    # ["a", "b", "c"]

for line in iter_lines(io.StringIO("room 1 2\nroom2 3 4\n"), 8):
    print(line)
```

## What it does not do

- `sprintf` has no floating-point conversions such as `%f`, `%e` or `%g`.
- The package ships no command-line tool. It is a set of importable helpers only.