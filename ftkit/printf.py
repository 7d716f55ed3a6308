"""printf-style formatting of values into strings and onto standard output."""

import sys

from ftkit.spec import parse_spec, to_base

_MISSING = object()
_NULL_STRING = "(null)"


def _next_arg(args):
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError("not enough arguments for format string")
    return value


def _pad(text, count, fill, left_justify):
    """Add ``count`` copies of ``fill`` after or before ``text``."""
    padding = fill * max(count, 0)
    return text + padding if left_justify else padding + text


def _pad_char(spec, ch, zero):
    fill = "0" if zero else " "
    return _pad(ch, spec.width - 1, fill, spec.minus)


def _as_char(arg):
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError(f"%c requires a single character, got {arg!r}")
        return arg
    return chr(int(arg) % 256)


def _format_char(spec, args):
    zero = spec.zero and not spec.minus
    return _pad_char(spec, _as_char(_next_arg(args)), zero)


def _format_string(spec, args):
    arg = _next_arg(args)
    text = _NULL_STRING if arg is None else str(arg)
    if spec.precision is not None:
        text = text[:spec.precision]
    fill = "0" if spec.zero and not spec.minus else " "
    return _pad(text, spec.width - len(text), fill, spec.minus)


def _format_percent(spec, args):
    fill = "0" if spec.zero and not spec.minus else " "
    return _pad("%", spec.width - 1, fill, spec.minus)


def _address(arg):
    if arg is None:
        return 0
    if isinstance(arg, int):
        return arg % (1 << 64)
    return id(arg)


def _format_pointer(spec, args):
    value = _address(_next_arg(args))
    digits = "" if spec.precision == 0 else to_base(value, 16).lower()
    if spec.precision is not None and spec.precision > len(digits):
        digits = digits.rjust(spec.precision, "0")
    text = "0x" + digits
    return _pad(text, spec.width - len(text), " ", spec.minus)


def _format_integer(spec, digits, sign):
    """Apply precision, sign and width to the decimal ``digits``."""
    precision = spec.precision
    zero = spec.zero and precision is None
    if precision is not None:
        if precision > len(digits):
            digits = digits.rjust(precision, "0")
        if precision == 0 and digits == "0":
            digits = ""
    missing = spec.width - len(digits) - len(sign)
    if zero and not spec.minus:
        return sign + "0" * max(missing, 0) + digits
    return _pad(sign + digits, missing, " ", spec.minus)


def _format_signed(spec, args):
    value = spec.int_value(_next_arg(args))
    if value < 0:
        sign = "-"
    elif spec.plus:
        sign = "+"
    elif spec.space:
        sign = " "
    else:
        sign = ""
    return _format_integer(spec, str(abs(value)), sign)


def _format_unsigned(spec, args):
    value = spec.unsigned_value(_next_arg(args))
    return _format_integer(spec, str(value), "")


def _format_based(spec, args):
    conversion = spec.conversion
    precision = spec.precision
    zero = spec.zero and not spec.minus and precision is None
    value = spec.unsigned_value(_next_arg(args))
    digits = to_base(value, 8 if conversion == "o" else 16)
    if conversion == "x":
        digits = digits.lower()
    use_hash = spec.hash and (conversion == "o" or value != 0)
    if precision is not None and precision > len(digits):
        digits = digits.rjust(precision, "0")
    if use_hash:
        prefix = "" if conversion == "o" else "0" + conversion
        if spec.width and zero:
            digits = digits.rjust(spec.width - len(prefix), "0")
        if conversion == "o":
            if digits[0] != "0":
                digits = "0" + digits
        else:
            digits = prefix + digits

    counts_digits = value != 0 or not (spec.width and precision == 0)
    count = spec.width - len(digits) if counts_digits else spec.width
    padding = ("0" if zero else " ") * max(count, 0)

    hidden = precision == 0 and value == 0 and not (conversion == "o" and spec.hash)
    shown = "" if hidden else digits
    return shown + padding if spec.minus else padding + shown


_HANDLERS = {
    "c": _format_char,
    "s": _format_string,
    "%": _format_percent,
    "p": _format_pointer,
    "d": _format_signed,
    "i": _format_signed,
    "u": _format_unsigned,
    "o": _format_based,
    "x": _format_based,
    "X": _format_based,
}


def sprintf(fmt, *args):
    """Return ``fmt`` with its conversion directives replaced by ``args``.

    Raises TypeError when the format asks for more arguments than given.
    """
    if fmt is None:
        return ""
    arg_iter = iter(args)
    pieces = []
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:percent])
        spec, pos = parse_spec(fmt, percent, arg_iter)
        if spec.conversion is None:
            continue
        handler = _HANDLERS.get(spec.conversion)
        if handler is None:
            pieces.append(_pad_char(spec, spec.conversion, spec.zero))
        else:
            pieces.append(handler(spec, arg_iter))
    return "".join(pieces)


def printf(fmt, *args):
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)