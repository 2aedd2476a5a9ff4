"""Isometric wireframe rendering of text height maps to PPM images."""

__version__ = "0.1.0"