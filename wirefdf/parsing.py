"""Reading height maps: one row per line, one integer height per word."""

from __future__ import annotations

import os
from collections.abc import Iterable

from wirefdf.chars import atoi
from wirefdf.geometry import Point, WireMap
from wirefdf.lineread import read_lines
from wirefdf.strings import split

SEPARATOR = " "


class MapError(Exception):
    """A map file cannot be opened or its contents do not form a map."""


def count_words(text: str | None, sep: str = SEPARATOR) -> int:
    """Number of runs of characters other than sep."""
    if text is None:
        return 0
    return len(split(text, sep))


def get_width(line: str) -> int:
    """Number of space-separated words on a map line."""
    return len(split(line, SEPARATOR))


def fill_row(line: str, y: int, width: int) -> list[Point]:
    """The first width points of a map line, at row y."""
    words = split(line, SEPARATOR)
    if len(words) < width:
        raise MapError(f"row {y} has {len(words)} values, expected {width}")
    return [Point(float(x), float(y), float(atoi(word))) for x, word in enumerate(words[:width])]


def parse_map(lines: Iterable[str], strict: bool = False) -> WireMap:
    """Build a map from its lines.

    The map width is that of the last line. With strict, every line must
    have the same width.
    """
    rows = list(lines)
    widths = [get_width(line) for line in rows]
    if strict and any(w != widths[0] for w in widths):
        raise MapError("MAP NOT SQUARE")
    width = widths[-1] if widths else 0
    return WireMap([fill_row(line, y, width) for y, line in enumerate(rows)])


def read_map(path: str | os.PathLike[str], strict: bool = False) -> WireMap:
    """Read a map file."""
    try:
        handle = open(path, encoding="utf-8", newline="")
    except OSError as exc:
        raise MapError("Error opening file") from exc
    with handle:
        return parse_map(read_lines(handle), strict)