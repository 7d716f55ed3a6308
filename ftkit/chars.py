"""ASCII character classification and case conversion.

Each function accepts either a one-character string or an integer code.
"""


def _code(c):
    return ord(c) if isinstance(c, str) else c


def _like(original, code):
    return chr(code) if isinstance(original, str) else code


def is_alpha(c):
    """Tell whether ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c):
    """Tell whether ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c):
    """Tell whether ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c):
    """Tell whether ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c):
    """Tell whether ``c`` is a visible ASCII character; space does not count."""
    return ord(" ") < _code(c) <= ord("~")


def is_whitespace(c):
    """Tell whether ``c`` is space, tab, newline, vertical tab, form feed or CR."""
    code = _code(c)
    return code == 32 or 9 <= code <= 13


def to_lower(c):
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _like(c, code + 32)
    return c


def to_upper(c):
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _like(c, code - 32)
    return c