"""Command that renders a height map as an isometric wireframe image."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from wirefdf.chars import is_digit
from wirefdf.drawing import Image, draw_edges
from wirefdf.geometry import WIN_HEIGHT, WIN_WIDTH, isometric
from wirefdf.output import printf
from wirefdf.parsing import MapError, read_map


def is_number(text: str | None) -> bool:
    """True when text is an optional sign followed by digits up to the first blank."""
    if text is None:
        return False
    body = text[1:] if text[:1] in ("-", "+") else text
    for char in body:
        if char in " \t\n":
            break
        if not is_digit(char):
            return False
    return True


def render(path: str | os.PathLike[str]) -> Image:
    """Read a map and draw its isometric wireframe into a window-sized image."""
    image = Image(WIN_WIDTH, WIN_HEIGHT)
    wire_map = read_map(path)
    isometric(wire_map)
    draw_edges(image, wire_map)
    return image


def main(argv: Sequence[str] | None = None) -> int:
    """Render the map named on the command line and write it to stdout as PPM."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        printf("error: %s", "1 ARGUMENT PLEASE")
        return 1
    try:
        image = render(args[0])
    except MapError as exc:
        printf("error: %s", str(exc))
        return 1
    out = sys.stdout.buffer
    out.write(image.to_ppm())
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())