"""String searching, comparison, trimming and word-splitting helpers."""

from itertools import groupby

from ftkit.chars import is_digit, is_print

_TRIM_CHARS = " \t\n"


def _single_char(c):
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _runs(s, keep):
    """Return the maximal runs of characters of ``s`` for which ``keep`` holds."""
    return ["".join(group) for kept, group in groupby(s, key=keep) if kept]


def count_char(s, c):
    """Return how many times the character ``c`` occurs in ``s``."""
    return s.count(_single_char(c))


def count_if(items, predicate):
    """Return how many of ``items`` satisfy ``predicate``."""
    return sum(1 for item in items if predicate(item))


def count_printable_words(s):
    """Count the runs of visible ASCII characters in ``s``; None counts as empty."""
    if s is None:
        return 0
    return len(_runs(s, is_print))


def count_words(s, c):
    """Count the runs of characters other than ``c`` in ``s``; None counts as empty."""
    if s is None:
        return 0
    c = _single_char(c)
    return len(_runs(s, lambda ch: ch != c))


def count_number_words(s, c):
    """Count the words of ``s`` split on ``c``, or 0 if ``s`` holds anything
    besides ``c``, '-' and decimal digits."""
    if s is None:
        return 0
    c = _single_char(c)
    if any(ch != c and ch != "-" and not is_digit(ch) for ch in s):
        return 0
    return count_words(s, c)


def split_printable(s, wd):
    """Return at most ``wd`` runs of visible ASCII characters from ``s``."""
    if wd <= 0:
        raise ValueError("word count must be positive")
    return _runs(s, is_print)[:wd]


def split_char(s, c):
    """Split ``s`` on the character ``c``, dropping empty pieces."""
    c = _single_char(c)
    return _runs(s, lambda ch: ch != c)


def split_words(s, c, wd):
    """Split ``s`` on the character ``c`` and keep at most ``wd`` non-empty pieces."""
    if wd < 0:
        raise ValueError("word count must not be negative")
    return split_char(s, c)[:wd]


def trim(s):
    """Strip spaces, tabs and newlines from both ends of ``s``."""
    return s.strip(_TRIM_CHARS)


def substring(s, start, length):
    """Return ``length`` characters of ``s`` from ``start``; the slice must fit."""
    if start < 0 or length < 0 or start + length > len(s):
        raise ValueError(
            f"substring [{start}:{start + length}] out of range for length {len(s)}"
        )
    return s[start:start + length]


def find(haystack, needle):
    """Return the index of the first ``needle`` in ``haystack``, or -1."""
    return haystack.find(needle)


def find_within(haystack, needle, length):
    """Return the index of the first ``needle`` ending within the first
    ``length`` characters of ``haystack``, or -1."""
    if length < 0:
        raise ValueError("length must not be negative")
    return haystack.find(needle, 0, length)


def compare(s1, s2):
    """Compare two strings, returning the code difference at the first mismatch.

    The end of a string compares as code 0.
    """
    for a, b in zip(s1, s2):
        if a != b:
            return ord(a) - ord(b)
    if len(s1) > len(s2):
        return ord(s1[len(s2)])
    if len(s2) > len(s1):
        return -ord(s2[len(s1)])
    return 0


def compare_n(s1, s2, n):
    """Compare at most the first ``n`` characters of two strings, as ``compare``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return compare(s1[:n], s2[:n])