"""String helpers: splitting, searching, bounded copies and comparisons."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _check_char(c: str, what: str = "character") -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single {what}, got {c!r}")


def _check_non_negative(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative")


def split(text: str, sep: str) -> list[str]:
    """Split text on sep, dropping the empty pieces between repeated separators."""
    _check_char(sep, "separator")
    return [word for word in text.split(sep) if word]


def strchr(text: str, c: str) -> int | None:
    """Index of the first occurrence of c in text, or None.

    Searching for the NUL character finds the end of the text.
    """
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> int | None:
    """Index of the last occurrence of c in text, or None.

    Searching for the NUL character finds the end of the text.
    """
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return an equal copy of text."""
    return "".join(text)


def strlen(text: str) -> int:
    """Number of characters in text."""
    return len(text)


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> MutableSequence[str]:
    """Replace each character in place with func(index, character)."""
    for index, char in enumerate(chars):
        chars[index] = func(index, char)
    return chars


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """New string made of func(index, character) for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def strjoin(a: str, b: str) -> str:
    """Concatenate two strings."""
    if a is None or b is None:
        raise TypeError("both strings are required")
    return a + b


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest as if in a buffer of size characters, terminator included.

    Returns the resulting string and the length that was tried to be built.
    When dest is longer than size, or size is 0, dest is left as is and the
    returned length is size plus the length of src.
    """
    _check_non_negative(size, "size")
    if len(dest) > size or size == 0:
        return dest, size + len(src)
    room = max(0, size - 1 - len(dest))
    return dest + src[:room], len(dest) + len(src)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src as if into a buffer of size characters, terminator included.

    Returns the copied text and the full length of src.
    """
    _check_non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters; the difference of the first mismatch, or 0.

    The end of a string compares as the NUL character.
    """
    _check_non_negative(n, "count")
    if n == 0:
        return 0

    def code(text: str, index: int) -> int:
        return ord(text[index]) if index < len(text) else 0

    index = 0
    while index < n - 1:
        ca, cb = code(a, index), code(b, index)
        if not ca or not cb or ca != cb:
            break
        index += 1
    return code(a, index) - code(b, index)


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of little within the first length characters of big, or None."""
    _check_non_negative(length, "length")
    if not little:
        return 0
    if not big or length == 0:
        return None
    for position in range(len(big)):
        if length - position < len(little):
            break
        if big.startswith(little, position):
            return position
    return None


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most length characters of text from start; empty when start is past the end."""
    _check_non_negative(start, "start")
    _check_non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]