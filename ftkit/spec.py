"""Parsing of printf conversion specifications and argument normalisation."""

from dataclasses import dataclass
from enum import Enum

from ftkit.numbers import atoi

_SPEC_CHARS = frozenset("'+-0# *.123456789hlLjz")
_FLAG_ATTRS = {"+": "plus", "-": "minus", "0": "zero", "#": "hash", " ": "space"}
_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_MISSING = object()


class Length(Enum):
    """Length modifier of a conversion."""

    NONE = ""
    HH = "hh"
    H = "h"
    L = "l"
    LL = "ll"
    J = "j"
    Z = "z"


_SIGNED_BITS = {
    Length.NONE: 32,
    Length.HH: 8,
    Length.H: 16,
    Length.L: 64,
    Length.LL: 64,
    Length.J: 64,
    Length.Z: 64,
}
_UNSIGNED_BITS = _SIGNED_BITS


def _wrap_unsigned(value, bits):
    return value % (1 << bits)


def _wrap_signed(value, bits):
    value = _wrap_unsigned(value, bits)
    return value - (1 << bits) if value >= 1 << (bits - 1) else value


@dataclass
class ConversionSpec:
    """Flags, width, precision, length and conversion character of one directive.

    ``precision`` is None when no precision applies; ``conversion`` is None when
    the format ended before a conversion character.
    """

    plus: bool = False
    minus: bool = False
    zero: bool = False
    hash: bool = False
    space: bool = False
    width: int = 0
    precision: int | None = None
    length: Length = Length.NONE
    conversion: str | None = None

    def int_value(self, arg):
        """Return ``arg`` as the signed integer type selected by the length modifier."""
        return _wrap_signed(int(arg), _SIGNED_BITS[self.length])

    def unsigned_value(self, arg):
        """Return ``arg`` as the unsigned integer type selected by the length modifier."""
        return _wrap_unsigned(int(arg), _UNSIGNED_BITS[self.length])


def _next_int(args):
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError("not enough arguments for format string")
    return _wrap_signed(int(value), 32)


def _digit_run_end(fmt, i):
    while i < len(fmt) and "0" <= fmt[i] <= "9":
        i += 1
    return i


def _parse_length(fmt, i, spec):
    ch = fmt[i]
    following = fmt[i + 1] if i + 1 < len(fmt) else ""
    if ch == "l" and following != "l" and spec.length is Length.NONE:
        spec.length = Length.L
    elif ch == "l" and following == "l":
        spec.length = Length.LL
    elif ch == "h" and following != "h" and spec.length is Length.NONE:
        spec.length = Length.H
    elif ch == "h" and following == "h":
        spec.length = Length.HH
    elif ch == "j":
        spec.length = Length.J
    elif ch == "z":
        spec.length = Length.Z


def _parse_precision(fmt, i, spec, args):
    """Handle a '.' at ``i`` and return the position after what it consumed."""
    if spec.precision is not None:
        return i + 1
    following = fmt[i + 1] if i + 1 < len(fmt) else ""
    if following == "*":
        value = _next_int(args)
        spec.precision = value if value >= 0 else None
        return i + 2
    if "0" <= following <= "9":
        end = _digit_run_end(fmt, i + 1)
        spec.precision = atoi(fmt[i + 1:end])
        return end
    spec.precision = 0
    return i + 1


def parse_spec(fmt, pos, args):
    """Parse the directive starting at the '%' at ``fmt[pos]``.

    ``args`` is an iterator; '*' widths and precisions take their values from it.
    Returns the spec and the position just after the directive.
    """
    if fmt[pos:pos + 1] != "%":
        raise ValueError(f"no conversion directive at position {pos}")
    spec = ConversionSpec()
    i = pos + 1
    while i < len(fmt) and fmt[i] in _SPEC_CHARS:
        ch = fmt[i]
        if ch in _FLAG_ATTRS:
            setattr(spec, _FLAG_ATTRS[ch], True)
        elif ch == "*":
            width = _next_int(args)
            if width < 0:
                width = -width
                spec.minus = True
            spec.width = width
        elif ch in "hlLjz":
            _parse_length(fmt, i, spec)
        if ch == ".":
            i = _parse_precision(fmt, i, spec, args)
        elif "0" <= ch <= "9":
            end = _digit_run_end(fmt, i)
            spec.width = atoi(fmt[i:end])
            i = end
        else:
            i += 1
    if i >= len(fmt):
        return spec, len(fmt)
    spec.conversion = fmt[i]
    return spec, i + 1


def to_base(n, base):
    """Return the upper-case representation of the non-negative ``n`` in ``base``."""
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")
    if n < 0:
        raise ValueError("n must not be negative")
    digits = []
    while True:
        n, remainder = divmod(n, base)
        digits.append(_DIGITS[remainder])
        if n == 0:
            break
    return "".join(reversed(digits))