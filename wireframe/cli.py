"""Command line: render a height map as an isometric wireframe image."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .mapfile import MapError, parse_map
from .projection import WIN_HEIGHT, WIN_WIDTH
from .raster import Canvas, draw_map


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the map named on the command line to a PPM image."""
    parser = argparse.ArgumentParser(
        prog="fdf", description="Render a height map as an isometric wireframe."
    )
    parser.add_argument("map", help="map file of space-separated altitudes")
    parser.add_argument(
        "-o", "--output", default="fdf.ppm", help="output image (PPM), default fdf.ppm"
    )
    args = parser.parse_args(argv)
    try:
        height_map = parse_map(args.map)
        canvas = Canvas(WIN_WIDTH, WIN_HEIGHT)
        draw_map(canvas, height_map)
        canvas.save(args.output)
    except MapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error: cannot write {args.output}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())