"""Plane geometry value types shared by the curve, the handles and the input layer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple, Union


@dataclass(frozen=True)
class Point:
    """Immutable 2D coordinate.

    Arithmetic never mutates: ``a + b``, ``a - b`` and ``a * k`` all return new
    points. Equality is structural.
    """

    x: float
    y: float

    @classmethod
    def of(cls, value: Union["Point", Sequence[float]]) -> "Point":
        """Coerce a point or an ``(x, y)`` pair into a :class:`Point`."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(float(x), float(y))

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def lerp(self, other: "Point", alpha: float) -> "Point":
        return lerp(self, other, alpha)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


ORIGIN = Point(0.0, 0.0)


def lerp(a: Point, b: Point, alpha: float) -> Point:
    """Interpolate from ``a`` toward ``b`` by ``alpha``, independently per axis.

    Equivalent to ``a + (b - a) * alpha``. It is written as a weighted sum so
    that ``alpha == 0`` yields ``a`` and ``alpha == 1`` yields ``b`` exactly.
    ``alpha`` is not clamped; values outside ``[0, 1]`` extrapolate.
    """
    inverse = 1.0 - alpha
    return Point(a.x * inverse + b.x * alpha, a.y * inverse + b.y * alpha)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box anchored at its top-left corner ``(x, y)``."""

    x: float
    y: float
    width: float
    height: float

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2.0, self.y + self.height / 2.0)

    def contains(self, point: Point) -> bool:
        """Boundary-exclusive containment test; points on an edge are outside."""
        return (
            self.x < point.x < self.x + self.width
            and self.y < point.y < self.y + self.height
        )
