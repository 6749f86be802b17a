"""Wireframe rendering of height maps: projection, shaded lines, view controls and helpers."""

__version__ = "1.0.0"
__all__ = ["controls", "image", "line_reader", "printf", "render", "shapes", "textutil", "view"]