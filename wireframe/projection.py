"""Placing grid points on screen and projecting them isometrically."""

from __future__ import annotations

import math

from .mapfile import HeightMap, Point3D

WIN_WIDTH = 1920
WIN_HEIGHT = 1080
STEP = 50
ALTITUDE_SCALE = 5


def place(point: Point3D, rows: int, cols: int) -> Point3D:
    """Scale a grid point by ``STEP`` and centre a ``rows`` x ``cols`` grid
    in the window. The altitude is kept."""
    x = point.x * STEP + WIN_WIDTH // 2 - (cols * STEP) // 2
    y = point.y * STEP + WIN_HEIGHT // 2 - (rows * STEP) // 2
    return Point3D(x, y, point.z)


def isometric(point: Point3D) -> Point3D:
    """Rotate a placed point about the window centre into isometric view.

    Higher altitudes move the point up the screen. Coordinates are
    truncated toward zero.
    """
    tx = point.x - WIN_WIDTH // 2
    ty = point.y - WIN_HEIGHT // 2
    r2 = 1 / math.sqrt(2)
    r6 = 1 / math.sqrt(6)
    x = int(r2 * tx + r2 * ty)
    y = int(-(r6 * tx) + r6 * ty - (2 / math.sqrt(6) * point.z * ALTITUDE_SCALE))
    return Point3D(x + WIN_WIDTH // 2, y + WIN_HEIGHT // 2, point.z)


def prepare_map(height_map: HeightMap) -> HeightMap:
    """Return a map whose points are placed and projected to the screen."""
    rows, cols = height_map.rows, height_map.cols
    return HeightMap(
        [[isometric(place(p, rows, cols)) for p in row] for row in height_map.points]
    )