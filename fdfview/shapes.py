"""Simple test patterns drawn straight into an image."""

from __future__ import annotations

from .image import Image

ORANGE = (255 << 16) + (127 << 8)
SIERPINSKI_COLOR = 0xFF8000
BORDER_COLOR = (30 << 16) + (180 << 8) + 255
_WHITE = 0xFFFFFF


def draw_ellipse(image: Image, width: int, height: int) -> None:
    """Fill an ellipse centred in a ``width`` x ``height`` area with half its size as axes."""
    cx, cy = width / 2.0, height / 2.0
    rx2, ry2 = (width / 4.0) ** 2, (height / 4.0) ** 2
    for i in range(width):
        for j in range(height):
            if (i - cx) ** 2 / rx2 + (j - cy) ** 2 / ry2 <= 1.0:
                image.put_pixel(i, j, ORANGE)


def draw_sierpinski(image: Image, width: int, height: int) -> None:
    """Draw a Sierpinski triangle grown by the XOR rule from one cell in the top row.

    The color steps by one on every row and wraps back to orange at white.
    """
    if width < 1 or height < 0:
        raise ValueError("width must be positive and height not negative")
    line = [0] * width
    line[width // 2] = 1
    color = SIERPINSKI_COLOR
    for j in range(height):
        following = [0] * width
        for i in range(1, width - 1):
            if line[i]:
                image.put_pixel(i, j, color)
            following[i] = line[i - 1] ^ line[i + 1]
        line = following
        color += 1
        if color >= _WHITE:
            color = ORANGE


def draw_dot(image: Image, x: int, y: int) -> None:
    """Mark a small dot of radius one around ``(x, y)``."""
    radius = 1
    for i in range(x - radius, min(image.width, x + radius + 1)):
        for j in range(y - radius, min(image.height, y + radius)):
            if (i - x) ** 2 + (j - y) ** 2 <= radius ** 2:
                image.put_pixel(i, j, ORANGE)


def draw_border(image: Image) -> None:
    """Draw a one-pixel frame along the image edges."""
    for i in range(image.width):
        image.put_pixel(i, 0, BORDER_COLOR)
        image.put_pixel(i, image.height - 1, BORDER_COLOR)
    for j in range(image.height):
        image.put_pixel(0, j, BORDER_COLOR)
        image.put_pixel(image.width - 1, j, BORDER_COLOR)