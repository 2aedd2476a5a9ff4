# wireframe

`wireframe` reads a height map and renders it as an isometric wireframe image
in binary PPM (P6) format.

A height map is a plain text file. Each line is one row, and each
space-separated number on that row is the altitude of one point:

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

Each point is placed on a 50-pixel grid centred in a 1920×1080 canvas. It is
then projected isometrically about the canvas centre, and higher altitudes
lift it up the screen. Neighbouring points on the same row and in the same
column are joined by red (`0xFF0000`) lines drawn with Bresenham's algorithm,
on a black background. Pixels that fall outside the canvas are skipped.

## Installation

```
pip install .
```

## Command line

```
wireframe path/to/map.fdf
wireframe path/to/map.fdf -o map.ppm
```

The command reads the map, draws it, and writes the image to the file given
with `-o`/`--output` (default `fdf.ppm`). A map file that cannot be opened, an
empty map, or rows of different lengths are reported as `Error: ...` on
standard error, and the command exits with status 1. A failure to write the
output file is reported the same way.

## Library use

```python
from wireframe.mapfile import parse_map
from wireframe.raster import Canvas, draw_map

height_map = parse_map("map.fdf")
canvas = Canvas()
draw_map(canvas, height_map)
canvas.save("map.ppm")
```

The building blocks can also be used on their own:

- `wireframe.mapfile`: `parse_lines` and `parse_map` build a `HeightMap` of
  frozen `Point3D(x, y, z)` values, indexed as `points[row][col]`, with `rows`
  and `cols` properties. They raise `MapError` for an unreadable file, an empty
  map, or rows of different lengths. Words are read as integers the way C's
  `atoi` does, so a word that is not a number counts as 0.
- `wireframe.projection`: `place` scales a point and centres its grid,
  `isometric` projects a placed point, and `prepare_map` returns a new map with
  both applied to every point.
- `wireframe.raster`: `line_points` yields the pixels of a segment, with both
  ends included, and `draw_line` draws it. `draw_map` projects a map, draws its
  edges and returns the projected map. `Canvas(width, height)` holds 24-bit
  pixels. It has `put_pixel`, `pixel` (which raises `IndexError` outside the
  canvas), `to_ppm` and `save`.
- `wireframe.linereader`: `LineReader(stream, buffer_size=15)` splits a text
  or binary stream into lines, newlines kept, through a fixed-size read
  buffer. `read_lines` returns every line of a text file.

The package also has small text and byte helpers in `wireframe.chars`,
`wireframe.search`, `wireframe.transform`, `wireframe.memory` and
`wireframe.output`, and a singly linked `LinkedList` of `Node` values in
`wireframe.linked`.

## What it does not do

`wireframe` does not open a window or show the image on screen. There is no
interactive view, and it cannot zoom, rotate or move the map. The result is
only a PPM file, which any image viewer that reads PPM can display. Line
colour, grid step, altitude scale and canvas size for the command are fixed.

## Tests

```
pip install .[test]
pytest
```