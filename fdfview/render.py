"""Project a height map onto an image and join the points with shaded lines."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import chain, zip_longest
from typing import Iterable, Sequence

from .image import Image
from .view import View


@dataclass
class Point:
    """A map point: its projected image position, its height and its color."""

    x: int = 0
    y: int = 0
    z: int = 0
    color: int = 0


Grid = Sequence[Sequence[Point]]


def color_grade(start: Point, current: Point, end: Point) -> int:
    """Return the color for ``current`` on the gradient from ``start`` to ``end``.

    Each of the four 8-bit channels is interpolated by how far ``current``
    lies from ``start`` relative to the whole length of the line.
    """
    if start.color == end.color:
        return start.color
    total = math.hypot(end.x - start.x, end.y - start.y)
    if total == 0:
        return start.color
    ratio = math.hypot(current.x - start.x, current.y - start.y) / total
    color = 0
    for shift in (24, 16, 8, 0):
        first = (start.color >> shift) & 255
        last = (end.color >> shift) & 255
        color += (first + int((last - first) * ratio)) << shift
    return color


def draw_segment(image: Image, start: Point, end: Point) -> None:
    """Draw a shaded line from ``start`` up to, but not including, ``end``."""
    x, y, color = start.x, start.y, start.color
    dx = abs(end.x - x)
    step_x = 1 if x < end.x else -1
    dy = -abs(end.y - y)
    step_y = 1 if y < end.y else -1
    error = dx + dy
    while x != end.x or y != end.y:
        image.put_pixel(x, y, color)
        doubled = 2 * error
        if doubled >= dy and x != end.x:
            error += dy
            x += step_x
        if doubled <= dx and y != end.y:
            error += dx
            y += step_y
        color = color_grade(start, Point(x, y), end)


def _place(point: Point, view: View, trig, x_index: int, y_index: int) -> None:
    x = math.trunc(x_index * trig.cos_a + y_index * trig.sin_a)
    y = math.trunc(y_index * trig.cos_a - x_index * trig.sin_a)
    depth = math.trunc(y * trig.sin_g + point.z * trig.cos_g * view.div)
    y = math.trunc(y * trig.cos_g - point.z * trig.sin_g * view.div)
    x = math.trunc(x * trig.cos_b + depth * trig.sin_b)
    point.x = x + view.x_trans
    point.y = y + view.y_trans


def project_grid(grid: Iterable[Iterable[Point]], image: Image, view: View) -> None:
    """Compute every point's image position and plot it as a single pixel."""
    trig = view.trig()
    y_index = -(view.rows // 2) * view.div
    for row in grid:
        x_index = -(view.columns // 2) * view.div
        for point in row:
            _place(point, view, trig, x_index, y_index)
            x_index += view.div
            image.put_pixel(point.x, point.y, point.color)
        y_index += view.div


def draw_lines(grid: Grid, image: Image) -> None:
    """Join each point to its right-hand neighbour and to the point below it."""
    rows = list(grid)
    for row, below in zip(rows, chain(rows[1:], [()])):
        below_points = iter(below)
        for point, right in zip_longest(row, row[1:]):
            if right is not None:
                draw_segment(image, point, right)
            down = next(below_points, None)
            if down is not None:
                draw_segment(image, point, down)


def render(grid: Grid, view: View, image: Image) -> Image:
    """Clear ``image`` and draw the whole grid on it as seen through ``view``."""
    image.clear()
    project_grid(grid, image, view)
    draw_lines(grid, image)
    return image