"""Height-map files: whitespace-separated altitudes, one grid row per line."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, Iterator, Union

from .linereader import read_lines
from .transform import atoi, split


class MapError(Exception):
    """Raised when a map file cannot be read or is malformed."""


@dataclass(frozen=True)
class Point3D:
    """A grid point: column, row and altitude, or screen coordinates."""

    x: int
    y: int
    z: int


@dataclass
class HeightMap:
    """A rectangular grid of points, indexed as ``points[row][col]``."""

    points: list[list[Point3D]] = field(default_factory=list)

    def __post_init__(self) -> None:
        widths = {len(row) for row in self.points}
        if len(widths) > 1:
            raise MapError("rows of the map have different lengths")

    @property
    def rows(self) -> int:
        """Number of rows in the grid."""
        return len(self.points)

    @property
    def cols(self) -> int:
        """Number of columns in the grid."""
        return len(self.points[0]) if self.points else 0

    def __iter__(self) -> Iterator[Point3D]:
        for row in self.points:
            yield from row


def parse_lines(lines: Iterable[str]) -> HeightMap:
    """Build a height map from lines of space-separated altitudes.

    The point in row ``i`` and column ``j`` gets ``x=j``, ``y=i`` and the
    altitude read from the ``j``-th word of the line.
    """
    points: list[list[Point3D]] = []
    for i, line in enumerate(lines):
        if line.endswith("\n"):
            line = line[:-1]
        points.append(
            [Point3D(j, i, atoi(word)) for j, word in enumerate(split(line, " "))]
        )
    if not points:
        raise MapError("empty map")
    return HeightMap(points)


def parse_map(path: Union[str, PathLike]) -> HeightMap:
    """Read and parse the map file at ``path``."""
    try:
        lines = read_lines(path)
    except OSError as exc:
        raise MapError(f"cannot open {path}: {exc.strerror or exc}") from exc
    return parse_lines(lines)