"""Integer parsing and formatting helpers with 32-bit C semantics."""

import math
import re

INT_MAX = 2147483647
INT_MIN = -2147483648
_ULLONG_MOD = 1 << 64
_SQRT_LIMIT = 2147395600

_INT_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_UNSIGNED_PATTERN = re.compile(r"[ \t\n\v\f\r]*\+?([0-9]*)")


def _scan_int(text):
    """Return the int held by ``text``, or None if it is malformed or out of range."""
    if text is None:
        return None
    match = _INT_PATTERN.fullmatch(text)
    if match is None:
        return None
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        return -value if value <= -INT_MIN else None
    return value if value <= INT_MAX else None


def atoi(text):
    """Parse a whole string as a 32-bit int, returning 0 when it is not one."""
    value = _scan_int(text)
    return 0 if value is None else value


def parse_int(text):
    """Parse a whole string as a 32-bit int, raising ValueError when it is not one."""
    value = _scan_int(text)
    if value is None:
        raise ValueError(f"not a 32-bit integer: {text!r}")
    return value


def atoull(text):
    """Parse the leading unsigned decimal of ``text``, wrapping at 64 bits."""
    match = _UNSIGNED_PATTERN.match(text)
    digits = match.group(1)
    return (int(digits) if digits else 0) % _ULLONG_MOD


def itoa(n):
    """Return the decimal representation of ``n``."""
    return str(n)


def int_len(n):
    """Return the number of characters in the decimal form of ``n``, sign included."""
    return len(str(n))


def exact_sqrt(nb):
    """Return the integer square root of ``nb`` if it is a perfect square, else 0."""
    if nb <= 0 or nb > _SQRT_LIMIT:
        return 0
    root = math.isqrt(nb)
    return root if root * root == nb else 0


def is_number(text):
    """Tell whether ``text`` is an optional sign followed only by ASCII digits."""
    if text is None:
        return False
    body = text
    if body[:1] in ("+", "-") and body:
        body = body[1:]
        if not body:
            return False
    return all("0" <= ch <= "9" for ch in body)