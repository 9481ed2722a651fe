"""Bezier curve evaluation by repeated pairwise interpolation.

A curve point is found by interpolating every adjacent pair of control points
at the same fraction ``t``, which turns ``k`` points into ``k - 1``. Repeating
the step until a single point is left gives the point on the curve at ``t``
(de Casteljau's construction). Tessellation repeats the evaluation across an
evenly spaced set of parameters to build a polyline for drawing.

Every function here is pure: inputs are never mutated and identical inputs
always produce identical output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from .geometry import Point, lerp

logger = logging.getLogger(__name__)


MIN_RESOLUTION = 2


class InvalidInputError(ValueError):
    """Raised when the evaluator is given input it cannot reduce to a curve."""


def reduce_once(points: Sequence[Point], t: float) -> List[Point]:
    """Interpolate each adjacent pair of ``points`` at ``t`` (k points -> k-1)."""
    return [lerp(points[i], points[i + 1], t) for i in range(len(points) - 1)]


def evaluate(control_points: Sequence[Point], t: float) -> Point:
    """Return the point on the Bezier curve at parameter ``t``.

    Parameters
    ----------
    control_points : Sequence[Point]
        Ordered control points; order defines the curve.
    t : float
        Curve parameter. ``0`` maps to the first control point and ``1`` to
        the last. Values outside ``[0, 1]`` are not rejected and extrapolate.

    Returns
    -------
    Point
        The single point left after repeatedly reducing the control points.

    Raises
    ------
    InvalidInputError
        If ``control_points`` is empty.
    """
    level = list(control_points)
    if not level:
        raise InvalidInputError("Cannot evaluate a curve without control points")
    while len(level) > 1:
        level = reduce_once(level, t)
    return level[0]


def effective_denominator(resolution: int) -> int:
    """Return the step denominator used by :func:`tessellate`.

    Odd resolutions are rounded down to the previous even number, so a
    resolution of 25 samples the curve in 24 steps. The rounding is kept on
    purpose; callers relying on the exact sample density should pass an even
    resolution.

    Raises
    ------
    InvalidInputError
        If ``resolution`` is lower than 2.
    """
    resolution = int(resolution)
    if resolution < MIN_RESOLUTION:
        raise InvalidInputError(
            f"Resolution must be at least {MIN_RESOLUTION}, got {resolution}"
        )
    return resolution - resolution % 2


def sample_parameters(resolution: int) -> List[float]:
    """Return the curve parameters sampled for ``resolution``.

    The values are ``i / d`` for ``i`` in ``0..d`` where ``d`` is the effective
    denominator. They are computed from the sample index instead of being
    accumulated, so the last value is exactly ``1.0`` and appears once.
    """
    denominator = effective_denominator(resolution)
    return [index / denominator for index in range(denominator + 1)]


def tessellate(control_points: Sequence[Point], resolution: int) -> List[Point]:
    """Sample the curve into a polyline of ``effective_denominator + 1`` points.

    Raises
    ------
    InvalidInputError
        If ``control_points`` is empty or ``resolution`` is lower than 2.
    """
    points = list(control_points)
    if not points:
        raise InvalidInputError("Cannot tessellate a curve without control points")
    return [evaluate(points, t) for t in sample_parameters(resolution)]


def polyline_array(points: Sequence[Point]) -> np.ndarray:
    """Convert a polyline into an ``(n, 2)`` float array for plotting."""
    if not points:
        return np.empty((0, 2), dtype=np.float64)
    return np.array([(point.x, point.y) for point in points], dtype=np.float64)


@dataclass(frozen=True)
class CurveEvaluator:
    """Curve evaluation bound to a fixed sampling resolution."""

    resolution: int

    def __post_init__(self) -> None:
        # Validates eagerly so a bad resolution fails at construction.
        effective_denominator(self.resolution)

    @property
    def denominator(self) -> int:
        return effective_denominator(self.resolution)

    @property
    def sample_count(self) -> int:
        return self.denominator + 1

    def evaluate(self, control_points: Sequence[Point], t: float) -> Point:
        return evaluate(control_points, t)

    def tessellate(self, control_points: Sequence[Point]) -> List[Point]:
        return tessellate(control_points, self.resolution)
