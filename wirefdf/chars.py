"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_ASCII_DIGITS = frozenset("0123456789")
_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


def _code(c: str | int) -> int:
    """Return the code point of a one-character string, or the integer itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer, got {type(c).__name__}")


def _wrap32(value: int) -> int:
    """Reduce an integer to the signed 32-bit range, wrapping around."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value > _INT_MAX else value


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the map reader expects.

    Leading whitespace is skipped. A single sign is allowed; more than one
    sign character makes the result 0. Parsing stops at the first non-digit.
    The result wraps to the signed 32-bit range.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1

    sign = 1
    sign_count = 0
    while pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -sign
        sign_count += 1
        pos += 1
    if sign_count > 1:
        return 0

    value = 0
    while pos < length and text[pos] in _ASCII_DIGITS:
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return _wrap32(value * sign)


def itoa(n: int) -> str:
    """Render a signed 32-bit integer in decimal."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)