"""A 32-bit pixel image and line drawing onto it."""

from __future__ import annotations

import math

from wirefdf.geometry import WireMap

WHITE = 0x00FFFFFF
BITS_PER_PIXEL = 32
_BYTES_PER_PIXEL = BITS_PER_PIXEL // 8


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Image:
    """Pixels stored as little-endian 32-bit words, row after row."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image dimensions must be positive")
        self.width = width
        self.height = height
        self.bits_per_pixel = BITS_PER_PIXEL
        self.line_length = width * _BYTES_PER_PIXEL
        self.data = bytearray(self.line_length * height)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _offset(self, x: int, y: int) -> int:
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        return y * self.line_length + x * _BYTES_PER_PIXEL

    def put_pixel(self, x: int, y: int, color: int) -> None:
        offset = self._offset(x, y)
        self.data[offset:offset + _BYTES_PER_PIXEL] = (color & 0xFFFFFFFF).to_bytes(4, "little")

    def get_pixel(self, x: int, y: int) -> int:
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + _BYTES_PER_PIXEL], "little")

    def to_ppm(self) -> bytes:
        """The image as a binary PPM (P6) file."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        rgb = bytearray(self.width * self.height * 3)
        rgb[0::3] = self.data[2::4]
        rgb[1::3] = self.data[1::4]
        rgb[2::3] = self.data[0::4]
        return header + bytes(rgb)


def _plot(image: Image, x: float, y: float) -> None:
    px, py = _round(x), _round(y)
    if image._contains(px, py):
        image.put_pixel(px, py, WHITE)


def dda_line_draw(image: Image, x1: float, y1: float, x2: float, y2: float) -> None:
    """Draw a white line; the parts outside the image are skipped."""
    dx, dy = x2 - x1, y2 - y1
    if dx == 0 and dy == 0:
        _plot(image, x1, y1)
        return
    steps = max(abs(dx), abs(dy))
    x_inc, y_inc = dx / steps, dy / steps
    x, y = x1, y1
    for _ in range(math.floor(steps) + 1):
        if 0 <= x < image.width and 0 <= y < image.height:
            _plot(image, x, y)
        x += x_inc
        y += y_inc


def draw_edges(image: Image, wire_map: WireMap) -> None:
    """Join every point to its right and lower neighbours."""
    rows = wire_map.points
    for y, row in enumerate(rows):
        for x, current in enumerate(row):
            if x < len(row) - 1:
                right = row[x + 1]
                dda_line_draw(image, current.x, current.y, right.x, right.y)
            if y < len(rows) - 1:
                below = rows[y + 1][x]
                dda_line_draw(image, current.x, current.y, below.x, below.y)