"""
Bolt arrangement geometry.

This module contains *input* data structures only (bolt pattern geometry).
Analysis is performed by `evaluate` in `bolty.analysis`.

Coordinates are (x, y) in millimetres, measured from the centroid of the
bolt group. x runs along the columns, y along the rows.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Literal, Union

import numpy as np

Point2D = tuple[float, float]  # (x, y)
ArrangementKind = Literal["rectangular", "circular"]


@dataclass(frozen=True)
class BoltGroupProperties:
    """Geometric properties of a bolt group about its centroid.

    Attributes:
        n: Number of bolts
        Cx, Cy: Centroid of the bolt positions (mm)
        Ibp: Polar moment of the bolt group taking each bolt as unit area (mm⁴)
        xm: Reference half-width for minor-axis bending (mm)
        ym: Reference half-depth for major-axis bending (mm)
    """

    n: int
    Cx: float
    Cy: float
    Ibp: float
    xm: float
    ym: float


@dataclass(frozen=True)
class RectangularArrangement:
    """Grid of `num_rows` x `num_cols` bolts centred on the origin."""

    num_rows: int
    num_cols: int
    row_spacing: float
    col_spacing: float

    def __post_init__(self) -> None:
        _check_count("num_rows", self.num_rows)
        _check_count("num_cols", self.num_cols)
        if self.num_rows < 1 or self.num_cols < 1:
            raise ValueError("num_rows and num_cols must be at least 1")
        if self.row_spacing <= 0.0:
            raise ValueError("row_spacing must be positive")
        if self.col_spacing <= 0.0:
            raise ValueError("col_spacing must be positive")

    @property
    def kind(self) -> ArrangementKind:
        return "rectangular"

    @property
    def n(self) -> int:
        return self.num_rows * self.num_cols

    @property
    def points(self) -> list[Point2D]:
        """Bolt positions in row-major order."""
        x_start = -(self.num_cols - 1) * self.col_spacing / 2.0
        y_start = -(self.num_rows - 1) * self.row_spacing / 2.0

        points: list[Point2D] = []
        for row in range(self.num_rows):
            for col in range(self.num_cols):
                x = x_start + col * self.col_spacing
                y = y_start + row * self.row_spacing
                points.append((x, y))
        return points

    @property
    def properties(self) -> BoltGroupProperties:
        x_arr, y_arr = _as_arrays(self.points)
        return BoltGroupProperties(
            n=self.n,
            Cx=float(np.mean(x_arr)),
            Cy=float(np.mean(y_arr)),
            Ibp=float(np.sum(x_arr**2 + y_arr**2)),
            xm=self.num_cols * self.col_spacing / 2.0,
            ym=self.num_rows * self.row_spacing / 2.0,
        )


@dataclass(frozen=True)
class CircularArrangement:
    """`num_bolts` bolts evenly spaced on a circle of the given diameter.

    Bolt 0 sits on the positive x axis; the rest follow counter-clockwise.
    """

    diameter: float
    num_bolts: int

    def __post_init__(self) -> None:
        if self.diameter <= 0.0:
            raise ValueError("diameter must be positive")
        _check_count("num_bolts", self.num_bolts)
        if self.num_bolts < 1:
            raise ValueError("num_bolts must be at least 1")

    @property
    def kind(self) -> ArrangementKind:
        return "circular"

    @property
    def n(self) -> int:
        return self.num_bolts

    @property
    def radius(self) -> float:
        return self.diameter / 2.0

    @property
    def points(self) -> list[Point2D]:
        step = 2.0 * math.pi / self.num_bolts
        points: list[Point2D] = []
        for i in range(self.num_bolts):
            angle = i * step
            points.append((self.radius * math.cos(angle), self.radius * math.sin(angle)))
        return points

    @property
    def properties(self) -> BoltGroupProperties:
        x_arr, y_arr = _as_arrays(self.points)
        # All bolts sit at the same radius, so Ibp has a closed form.
        return BoltGroupProperties(
            n=self.n,
            Cx=float(np.mean(x_arr)),
            Cy=float(np.mean(y_arr)),
            Ibp=self.n * self.radius**2,
            xm=self.radius,
            ym=self.radius,
        )


Arrangement = Union[RectangularArrangement, CircularArrangement]


def _check_count(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} must be an integer, got {value!r}")


def _as_arrays(points: list[Point2D]) -> tuple[np.ndarray, np.ndarray]:
    x_arr = np.array([p[0] for p in points], dtype=float)
    y_arr = np.array([p[1] for p in points], dtype=float)
    return x_arr, y_arr


__all__ = [
    "Point2D",
    "ArrangementKind",
    "Arrangement",
    "BoltGroupProperties",
    "RectangularArrangement",
    "CircularArrangement",
]
