# wirefdf

Turn a plain-text height map into an isometric wireframe picture.

A map file (conventionally ending in `.fdf`) is a grid of integers, one row
per line, values separated by spaces. Each number is the height of a point:

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

Every point is joined to its right-hand and lower neighbour, the grid is
rotated into an isometric view (30° about x, 330° about y, 45° about z),
scaled and placed on a 1920×1080 canvas, and the edges are drawn in white on
black. Parts of lines that fall outside the canvas are skipped.

## Installation

```
pip install .
```

Python 3.10 or later is needed. The package has no runtime dependencies.

## Command line

```
wirefdf path/to/map.fdf
```

The program takes exactly one argument, the map file. It writes the rendered
image as a binary PPM (P6) to standard output, so redirect it to a file:

```
wirefdf maps/pyramid.fdf > pyramid.ppm
```

With the wrong number of arguments it prints `error: 1 ARGUMENT PLEASE`, and
with a file that cannot be opened `error: Error opening file`; in both cases
it exits with status 1.

## Library use

```python
from wirefdf.app import render

image = render("maps/pyramid.fdf")
with open("pyramid.ppm", "wb") as out:
    out.write(image.to_ppm())
```

The steps are available separately:

```python
from wirefdf.parsing import read_map
from wirefdf.geometry import WIN_WIDTH, WIN_HEIGHT, isometric
from wirefdf.drawing import Image, draw_edges

wire_map = read_map("maps/pyramid.fdf", strict=True)
isometric(wire_map)
image = Image(WIN_WIDTH, WIN_HEIGHT)
draw_edges(image, wire_map)
print(hex(image.get_pixel(960, 108)))
```

- `wirefdf.parsing` reads maps (`read_map`, `parse_map`, `fill_row`,
  `get_width`, `count_words`). Without `strict`, the map width is taken from
  the last line; with `strict=True`, rows of differing width raise
  `MapError("MAP NOT SQUARE")`. A row shorter than the map width also raises
  `MapError`.
- `wirefdf.geometry` holds `Point`, `WireMap` (with `height`, `width`,
  `angles` and `points_iter()`), `matrix_multiply`, the rotations
  `rotation_x`, `rotation_y`, `rotation_z` (by a given number of degrees, or
  by the map's own angle) and the `isometric` projection.
- `wirefdf.drawing` holds the `Image` canvas (32-bit pixels, `put_pixel`,
  `get_pixel`, `to_ppm`), the DDA line drawer `dda_line_draw` and
  `draw_edges`.
- `wirefdf.app` holds `render`, `is_number` and the command's `main`.

Small helpers live alongside:

- `wirefdf.chars`: ASCII character classes, `to_lower`/`to_upper`, `atoi`
  (one optional sign, 32-bit wrap-around) and `itoa`.
- `wirefdf.strings`: `split`, `substr`, `strtrim`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat` and similar string operations.
- `wirefdf.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy`, `memmove` on bytearrays.
- `wirefdf.lineread`: `LineReader` and `read_lines`, reading a text or
  binary stream line by line through a fixed-size buffer.
- `wirefdf.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`,
  `format_number`, `format_pointer` and a small `printf` supporting
  `%c %s %p %d %i %u %x %X %%`.

## What it does not do

There is no interactive window: the image is only produced as a PPM file or
as an `Image` in memory. Colours are not read from the map, and the view
cannot be rotated, zoomed or moved after rendering.

## Tests

```
pip install .[test]
pytest
```