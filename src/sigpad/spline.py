"""Smooth cubic Bezier splines through freehand stroke samples.

Two ways of fitting a stroke are provided:

- ``get_curve_control_points`` solves the tridiagonal system of a smooth
  spline through all knots at once and returns the control points of every
  segment (fit after the stroke has ended).
- ``SplineGenerator`` is fed one sample at a time while the stroke is drawn.
  It seeds the curve by solving the system for the first three samples and
  afterwards continues with a point reflection of the previous control point,
  which costs O(1) per sample.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from sigpad.common import MIN_CURVE_POINTS, PointLike
from sigpad.errors import GeneratorStateError
from sigpad.geom import ControlPointPair, GeomMath, Point

# Diagonal of the last row of the tridiagonal system, interior rows use 4.0
_LAST_ROW_DIAGONAL: float = 3.5
_INTERIOR_DIAGONAL: float = 4.0
_FIRST_ROW_DIAGONAL: float = 2.0


###############################################################################
# CurveControlPoints
###############################################################################
@dataclass(frozen=True)
class CurveControlPoints:
    """Control points of all cubic segments of a fitted stroke.

    Segment ``i`` runs from knot ``i`` to knot ``i + 1`` using
    ``first_control_points[i]`` and ``second_control_points[i]``.

    Attributes:
        first_control_points (Tuple[Point, ...]): control points next to the segment starts
        second_control_points (Tuple[Point, ...]): control points next to the segment ends
    """

    first_control_points: Tuple[Point, ...]
    second_control_points: Tuple[Point, ...]

    def __len__(self) -> int:
        return len(self.first_control_points)

    def pair(self, index: int) -> ControlPointPair:
        """Return the control points of segment _index_ as ControlPointPair."""
        return ControlPointPair(self.first_control_points[index], self.second_control_points[index])

    def segments(self, points: Sequence[PointLike]) -> Iterator[Tuple[Point, Point, Point, Point]]:
        """Iterate the segments as (start, control1, control2, end) using the fitted _points_."""
        if len(points) != len(self) + 1:
            raise ValueError(f"Expected {len(self) + 1} knots for {len(self)} segments, got {len(points)}")
        for i, (first, second) in enumerate(zip(self.first_control_points, self.second_control_points)):
            yield Point.of(points[i]), first, second, Point.of(points[i + 1])


###############################################################################
# Batch solver
###############################################################################
def get_curve_control_points(points: Sequence[PointLike]) -> Optional[CurveControlPoints]:
    """
    Calculate the Bezier control points of a smooth curve through the given _points_.

    The first control points are the solution of a tridiagonal linear system
    (one per axis, solved together). The second control points are derived
    from the first ones so that neighbouring segments share their tangent
    at the common knot.

    Args:
        points (Sequence[PointLike]): the knots in drawing order

    Returns:
        Optional[CurveControlPoints]: control points of the len(points) - 1 segments,
            None if there are less than 3 points (no curve, draw straight lines instead)
    """
    if points is None or len(points) < MIN_CURVE_POINTS:
        return None

    knots = np.array([tuple(Point.of(point)) for point in points], dtype=np.float64)
    n = len(knots) - 1

    rhs = _right_hand_side_vector(knots)
    first = _solve_first_control_points(rhs)

    second = np.empty_like(first)
    second[: n - 1] = 2 * knots[1:n] - first[1:n]
    second[n - 1] = (knots[n] + first[n - 1]) / 2

    return CurveControlPoints(
        first_control_points=tuple(Point(float(x), float(y)) for x, y in first),
        second_control_points=tuple(Point(float(x), float(y)) for x, y in second),
    )


def _right_hand_side_vector(knots: NDArray[np.float64]) -> NDArray[np.float64]:
    """Right hand side of the system, shape (n, 2) for the n segments of _knots_."""
    n = len(knots) - 1
    rhs = np.empty((n, 2), dtype=np.float64)
    # interior knots
    rhs[1 : n - 1] = 4 * knots[1 : n - 1] + 2 * knots[2:n]
    # end knots
    rhs[0] = knots[0] + 2 * knots[1]
    rhs[n - 1] = (8 * knots[n - 1] + knots[n]) / 2
    return rhs


def _solve_first_control_points(rhs: NDArray[np.float64]) -> NDArray[np.float64]:
    """Thomas algorithm for the fixed system (diagonal 2, 4, ..., 4, 3.5; off-diagonals 1)."""
    n = len(rhs)
    result = np.empty_like(rhs)
    tmp = np.zeros(n, dtype=np.float64)

    b = _FIRST_ROW_DIAGONAL
    result[0] = rhs[0] / b
    # Decomposition and forward substitution
    for i in range(1, n):
        tmp[i] = 1 / b
        b = (_INTERIOR_DIAGONAL if i < n - 1 else _LAST_ROW_DIAGONAL) - tmp[i]
        result[i] = (rhs[i] - result[i - 1]) / b
    # Back substitution
    for i in range(1, n):
        result[n - i - 1] -= tmp[n - i] * result[n - i]

    return result


###############################################################################
# Streaming generator
###############################################################################
class GeneratorState(Enum):
    """Lifecycle states of a SplineGenerator."""

    IDLE = auto()  # never started
    BUFFERING = auto()  # less than 3 samples received
    ACTIVE = auto()  # producing a control point pair per sample
    STOPPED = auto()  # stroke ended or canceled


class SplineGenerator:
    """Incremental spline for a stroke that is still being drawn.

    One instance belongs to one stroke at a time: ``start()`` when the
    pointer goes down, ``supply()`` for every sample and ``stop()`` when the
    pointer goes up. ``supply`` returns the control points of the segment
    ending at the supplied sample, or None while the first two samples are
    buffered.

    Example:
        >>> generator = SplineGenerator()
        >>> generator.start()
        >>> generator.supply((0, 0)), generator.supply((10, 0))
        (None, None)
        >>> pair = generator.supply((10, 10))
    """

    def __init__(self):
        self._state = GeneratorState.IDLE
        self._points_received = 0
        self.p_minus_2: Optional[Point] = None
        self.p_minus_1: Optional[Point] = None
        self.p: Optional[Point] = None
        self.control1: Optional[Point] = None
        self.control2: Optional[Point] = None

    @property
    def state(self) -> GeneratorState:
        """GeneratorState: the current lifecycle state."""
        return self._state

    @property
    def points_received(self) -> int:
        """int: number of samples supplied since the last start()."""
        return self._points_received

    def start(self) -> None:
        """Reset all state and start buffering a new curve."""
        self._reset()
        self._state = GeneratorState.BUFFERING

    def stop(self) -> None:
        """Discard all state. A later start() begins an independent curve."""
        self._reset()
        self._state = GeneratorState.STOPPED

    def supply(self, point: PointLike) -> Optional[ControlPointPair]:
        """
        Feed the next sample of the stroke.

        Args:
            point (PointLike): the sample, in drawing order

        Raises:
            GeneratorStateError: if the generator is not started or already stopped

        Returns:
            Optional[ControlPointPair]: control points of the segment from the previous
                sample to _point_, None for the first two samples
        """
        if self._state not in (GeneratorState.BUFFERING, GeneratorState.ACTIVE):
            raise GeneratorStateError(f"supply() called on a generator in state {self._state.name}")

        point = Point.of(point)
        self._points_received += 1

        if self._state == GeneratorState.BUFFERING:
            return self._buffer(point)

        # the previous sample is the knot the new segment starts at
        self.control1 = GeomMath.reflect(self.control2, around=self.p)
        self.control2 = GeomMath.midpoint(point, self.control1)
        self._shift(point)
        return ControlPointPair(self.control1, self.control2)

    def _buffer(self, point: Point) -> Optional[ControlPointPair]:
        """Store _point_ until three samples are known, then seed the curve."""
        self._shift(point)
        if self._points_received < MIN_CURVE_POINTS:
            return None

        seed = get_curve_control_points([self.p_minus_2, self.p_minus_1, self.p])
        self.control1 = seed.first_control_points[1]
        self.control2 = seed.second_control_points[1]
        self._state = GeneratorState.ACTIVE
        return ControlPointPair(self.control1, self.control2)

    def _shift(self, point: Point) -> None:
        self.p_minus_2 = self.p_minus_1
        self.p_minus_1 = self.p
        self.p = point

    def _reset(self) -> None:
        self._points_received = 0
        self.p_minus_2 = None
        self.p_minus_1 = None
        self.p = None
        self.control1 = None
        self.control2 = None

    def recent_points(self) -> List[Point]:
        """Return the last (at most three) supplied samples, oldest first."""
        return [point for point in (self.p_minus_2, self.p_minus_1, self.p) if point is not None]
