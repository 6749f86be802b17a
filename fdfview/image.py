"""An in-memory 32-bit pixel buffer that drawing code writes into."""

from __future__ import annotations

_COLOR_MASK = 0xFFFFFFFF


class Image:
    """A ``width`` x ``height`` grid of 32-bit colors, initially all zero."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image width and height must be positive")
        self.width = width
        self.height = height
        self._pixels = [0] * (width * height)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at ``(x, y)``; coordinates outside the image are ignored."""
        if not self._contains(x, y):
            return
        self._pixels[y * self.width + x] = color & _COLOR_MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return the color at ``(x, y)``."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return self._pixels[y * self.width + x]

    def clear(self) -> None:
        """Reset every pixel to zero."""
        self._pixels = [0] * (self.width * self.height)