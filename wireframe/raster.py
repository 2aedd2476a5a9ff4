"""An RGB canvas and Bresenham line drawing of wireframe maps."""

from __future__ import annotations

from os import PathLike
from typing import Iterator, Tuple, Union

from .mapfile import HeightMap, Point3D
from .projection import WIN_HEIGHT, WIN_WIDTH, prepare_map

LINE_COLOR = 0x00FF0000


class Canvas:
    """A fixed-size image of 24-bit colours, initially black."""

    def __init__(self, width: int = WIN_WIDTH, height: int = WIN_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self._data = bytearray(width * height * 3)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set a pixel; coordinates outside the canvas are ignored."""
        if not self._contains(x, y):
            return
        offset = (y * self.width + x) * 3
        self._data[offset:offset + 3] = bytes(
            ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)
        )

    def pixel(self, x: int, y: int) -> int:
        """Return the colour of a pixel as ``0xRRGGBB``."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        offset = (y * self.width + x) * 3
        r, g, b = self._data[offset:offset + 3]
        return (r << 16) | (g << 8) | b

    def to_ppm(self) -> bytes:
        """Return the image as a binary PPM (P6) file."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        return header + bytes(self._data)

    def save(self, path: Union[str, PathLike]) -> None:
        """Write the image to ``path`` as a binary PPM file."""
        with open(path, "wb") as stream:
            stream.write(self.to_ppm())


def line_points(a: Point3D, b: Point3D) -> Iterator[Tuple[int, int]]:
    """Yield the pixels of the segment from ``a`` to ``b``, both included."""
    dx, dy = b.x - a.x, b.y - a.y
    adx, ady = abs(dx), abs(dy)
    sx = 1 if dx > 0 else -1
    sy = 1 if dy > 0 else -1
    x, y = a.x, a.y
    yield x, y
    if adx > ady:
        p = 2 * ady - adx
        for _ in range(adx):
            x += sx
            if p < 0:
                p += 2 * ady
            else:
                y += sy
                p += 2 * ady - 2 * adx
            yield x, y
    else:
        p = 2 * adx - ady
        for _ in range(ady):
            y += sy
            if p < 0:
                p += 2 * adx
            else:
                x += sx
                p += 2 * adx - 2 * ady
            yield x, y


def draw_line(canvas: Canvas, a: Point3D, b: Point3D, color: int = LINE_COLOR) -> None:
    """Draw the segment from ``a`` to ``b`` on ``canvas``."""
    for x, y in line_points(a, b):
        canvas.put_pixel(x, y, color)


def _edges(grid: HeightMap) -> Iterator[Tuple[Point3D, Point3D]]:
    points = grid.points
    for x in range(grid.cols):
        for y in range(grid.rows):
            if x + 1 < grid.cols:
                yield points[y][x], points[y][x + 1]
            if y + 1 < grid.rows:
                yield points[y][x], points[y + 1][x]


def draw_map(canvas: Canvas, height_map: HeightMap) -> HeightMap:
    """Project ``height_map`` and draw its wireframe; return the projection."""
    projected = prepare_map(height_map)
    for a, b in _edges(projected):
        draw_line(canvas, a, b)
    return projected