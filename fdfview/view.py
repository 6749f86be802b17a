"""Viewing parameters for a projected height map: scale, offset and angles."""

from __future__ import annotations

import math
from dataclasses import dataclass

BASE_COLOR = 0x1BFF80
ALPHA = math.pi / 4
BETA = 0.0
GAMMA = 0.61548


@dataclass(frozen=True)
class Trig:
    """Cosines and sines of the three rotation angles."""

    cos_a: float
    sin_a: float
    cos_b: float
    sin_b: float
    cos_g: float
    sin_g: float


@dataclass
class View:
    """How a grid of ``columns`` x ``rows`` points is placed on an image.

    ``div`` is the spacing between neighbouring points, ``x_trans`` and
    ``y_trans`` the image position of the grid centre, and ``alpha``,
    ``beta`` and ``gamma`` the rotations about the z, y and x axes.
    """

    columns: int
    rows: int
    div: int = 1
    x_trans: int = 0
    y_trans: int = 0
    alpha: float = ALPHA
    beta: float = BETA
    gamma: float = GAMMA

    @classmethod
    def for_grid(cls, columns: int, rows: int, width: int, height: int) -> "View":
        """Return the default isometric view fitting the grid into half the image."""
        if columns <= 0 or rows <= 0:
            raise ValueError("grid must have at least one row and one column")
        div = min(width // 2 // columns, height // 2 // rows)
        if div == 0:
            div = 1
        return cls(
            columns=columns,
            rows=rows,
            div=div,
            x_trans=width // 2,
            y_trans=height // 2,
        )

    def trig(self) -> Trig:
        """Return the cosines and sines of the current angles."""
        return Trig(
            cos_a=math.cos(self.alpha),
            sin_a=math.sin(self.alpha),
            cos_b=math.cos(self.beta),
            sin_b=math.sin(self.beta),
            cos_g=math.cos(self.gamma),
            sin_g=math.sin(self.gamma),
        )