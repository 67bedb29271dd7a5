"""Map points, rotation matrices and the isometric projection."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

WIN_WIDTH = 1920
WIN_HEIGHT = 1080
SCALE = 45
Z_SCALE = 10
ANGLE = 0.523599  # 30 degrees in radians

AXIS_X = 0
AXIS_Y = 1
AXIS_Z = 2

ISOMETRIC_ANGLES = (30, 330, 45)

Matrix = Sequence[Sequence[float]]


@dataclass
class Point:
    """A point of the wireframe."""

    x: float
    y: float
    z: float = 0.0


@dataclass
class WireMap:
    """A grid of points, one row per map line, with rotation angles in degrees."""

    points: list[list[Point]] = field(default_factory=list)
    angles: list[int] = field(default_factory=lambda: [0, 0, 0])

    @property
    def height(self) -> int:
        return len(self.points)

    @property
    def width(self) -> int:
        return len(self.points[0]) if self.points else 0

    def points_iter(self) -> Iterator[Point]:
        """Every point, row by row."""
        for row in self.points:
            yield from row


def matrix_multiply(matrix: Matrix, point: Point) -> Point:
    """Multiply a 3x3 matrix by a point taken as a column vector."""
    if len(matrix) != 3 or any(len(row) != 3 for row in matrix):
        raise ValueError("a 3x3 matrix is required")
    x, y, z = (
        row[0] * point.x + row[1] * point.y + row[2] * point.z for row in matrix
    )
    return Point(x, y, z)


def _radians(wire_map: WireMap, axis: int, degrees: float | None) -> float:
    return math.radians(wire_map.angles[axis] if degrees is None else degrees)


def _apply(wire_map: WireMap, matrix: Matrix) -> None:
    for row in wire_map.points:
        row[:] = [matrix_multiply(matrix, point) for point in row]


def rotation_x(wire_map: WireMap, degrees: float | None = None) -> None:
    """Rotate every point about the x axis; by default by the map's x angle."""
    r = _radians(wire_map, AXIS_X, degrees)
    c, s = math.cos(r), math.sin(r)
    _apply(wire_map, ((1, 0, 0), (0, c, -s), (0, s, c)))


def rotation_y(wire_map: WireMap, degrees: float | None = None) -> None:
    """Rotate every point about the y axis; by default by the map's y angle."""
    r = _radians(wire_map, AXIS_Y, degrees)
    c, s = math.cos(r), math.sin(r)
    _apply(wire_map, ((c, 0, s), (0, 1, 0), (-s, 0, c)))


def rotation_z(wire_map: WireMap, degrees: float | None = None) -> None:
    """Rotate every point about the z axis; by default by the map's z angle."""
    r = _radians(wire_map, AXIS_Z, degrees)
    c, s = math.cos(r), math.sin(r)
    _apply(wire_map, ((c, -s, 0), (s, c, 0), (0, 0, 1)))


def isometric(wire_map: WireMap) -> None:
    """Rotate the map into the isometric view, then scale and place it in the window."""
    wire_map.angles = list(ISOMETRIC_ANGLES)
    rotation_x(wire_map)
    rotation_y(wire_map)
    rotation_z(wire_map)
    for point in wire_map.points_iter():
        point.x = point.x * SCALE + WIN_WIDTH * 0.5
        point.y = point.y * SCALE + WIN_HEIGHT * 0.1