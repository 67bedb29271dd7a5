"""Writing characters, strings and numbers to text streams, and a small printf."""

from __future__ import annotations

import sys
from typing import TextIO

from wirefdf.chars import itoa

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _as_char(c: str | int) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer, got {type(c).__name__}")


def _int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def put_char(c: str | int, stream: TextIO | None = None) -> int:
    """Write one character; an integer is taken by its low byte. Returns 1."""
    _target(stream).write(_as_char(c))
    return 1


def put_str(text: str | None, stream: TextIO | None = None) -> int:
    """Write text and return how many characters were written; None writes nothing."""
    if text is None:
        return 0
    _target(stream).write(text)
    return len(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> int:
    """Write text followed by a newline; None writes nothing."""
    if text is None:
        return 0
    _target(stream).write(text + "\n")
    return len(text) + 1


def put_nbr(n: int, stream: TextIO | None = None) -> int:
    """Write a signed 32-bit integer in decimal and return the characters written."""
    return put_str(itoa(n), stream)


def format_number(n: int, base: str) -> str:
    """Render n with the digits of base; negative numbers get a leading minus."""
    radix = len(base)
    if radix < 2:
        raise ValueError("a base needs at least two digits")
    value = abs(n)
    digits = []
    while True:
        value, remainder = divmod(value, radix)
        digits.append(base[remainder])
        if not value:
            break
    sign = "-" if n < 0 else ""
    return sign + "".join(reversed(digits))


def format_pointer(address: int | None) -> str:
    """Render an address as 0x-prefixed lower-case hex; a null address is "(nil)"."""
    if not address:
        return NULL_POINTER
    return "0x" + format_number(address & _UINT64_MASK, HEX_LOWER)


def _convert(spec: str, arg: object) -> str:
    if spec == "c":
        return _as_char(arg)  # type: ignore[arg-type]
    if spec == "s":
        return NULL_STRING if arg is None else str(arg)
    if spec == "p":
        return format_pointer(arg)  # type: ignore[arg-type]
    if spec in "di":
        return format_number(_int32(int(arg)), DECIMAL)  # type: ignore[call-overload]
    if spec == "u":
        return format_number(int(arg) & _UINT32_MASK, DECIMAL)  # type: ignore[call-overload]
    if spec == "x":
        return format_number(int(arg) & _UINT32_MASK, HEX_LOWER)  # type: ignore[call-overload]
    return format_number(int(arg) & _UINT32_MASK, HEX_UPPER)  # type: ignore[call-overload]


def printf(fmt: str, *args: object, stream: TextIO | None = None) -> int:
    """Format and write fmt, returning the number of characters written.

    Supported conversions are %c %s %p %d %i %u %x %X and %%. A percent sign
    followed by anything else is dropped together with that character.
    """
    if fmt is None:
        raise TypeError("a format string is required")
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, "")
        if spec == "%":
            pieces.append("%")
        elif spec and spec in "cspdiuxX":
            try:
                arg = next(remaining)
            except StopIteration:
                raise TypeError(f"missing argument for %{spec}") from None
            pieces.append(_convert(spec, arg))
    return put_str("".join(pieces), stream)