"""Isometric wireframe rendering of text height maps, with small text and buffer helpers."""

__version__ = "0.1.0"

__all__ = [
    "app",
    "chars",
    "drawing",
    "geometry",
    "lineread",
    "memory",
    "output",
    "parsing",
    "strings",
]