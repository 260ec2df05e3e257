"""Handling points, control points and boxes"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from sigpad.common import PointLike


###############################################################################
# Point
###############################################################################
@dataclass(frozen=True)
class Point:
    """An immutable 2D point in drawing surface coordinates.

    Attributes:
        x (float): The x-coordinate.
        y (float): The y-coordinate.
    """

    x: float
    y: float

    @classmethod
    def of(cls, point: PointLike) -> Point:
        """Return _point_ as Point, accepting Point instances and (x, y) pairs."""
        if isinstance(point, Point):
            return point
        return cls(float(point[0]), float(point[1]))

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self):
        return f"Point(x={self.x}, y={self.y})"


###############################################################################
# ControlPointPair
###############################################################################
@dataclass(frozen=True)
class ControlPointPair:
    """The two control points of the cubic segment ending at a knot.

    Attributes:
        c1 (Point): Control point next to the segment start.
        c2 (Point): Control point next to the segment end.
    """

    c1: Point
    c2: Point

    def dampened(self, knot: Point, max_distance: Optional[float]) -> ControlPointPair:
        """Pull both control points towards _knot_ until they are within _max_distance_.

        Args:
            knot (Point): the knot the segment ends at
            max_distance (Optional[float]): allowed distance. None disables dampening.

        Returns:
            ControlPointPair: the dampened pair (self if nothing changed)
        """
        if max_distance is None:
            return self
        c1 = GeomMath.dampen_point(self.c1, knot, max_distance)
        c2 = GeomMath.dampen_point(self.c2, knot, max_distance)
        if c1 == self.c1 and c2 == self.c2:
            return self
        return ControlPointPair(c1, c2)


###############################################################################
# GeomMath
###############################################################################
class GeomMath:
    """Class to provide various static methods related to geometry handling."""

    @staticmethod
    def reflect(point: Point, around: Point) -> Point:
        """Point reflection of _point_ through the anchor _around_: 2*around - point."""
        return Point(2 * around.x - point.x, 2 * around.y - point.y)

    @staticmethod
    def midpoint(point1: Point, point2: Point) -> Point:
        """Return the point halfway between _point1_ and _point2_."""
        return Point(point1.x / 2 + point2.x / 2, point1.y / 2 + point2.y / 2)

    @staticmethod
    def distance(point1: Point, point2: Point) -> float:
        """Return the euclidean distance between _point1_ and _point2_."""
        return math.hypot(point2.x - point1.x, point2.y - point1.y)

    @staticmethod
    def dampen_point(control: Point, knot: Point, max_distance: float) -> Point:
        """
        Move _control_ halfway towards _knot_ as long as it is further away than _max_distance_.

        Each step halves the distance, so the loop terminates and the result
        never passes the knot. Points with non-finite coordinates are returned
        unchanged. A distance overflowing for large finite coordinates is
        halved like any other.

        Args:
            control (Point): the proposed control point
            knot (Point): the reference knot
            max_distance (float): allowed distance, must be > 0

        Returns:
            Point: the dampened control point
        """
        if max_distance <= 0:
            raise ValueError(f"max_distance must be positive, got {max_distance}")

        if not all(math.isfinite(value) for value in (*control, *knot)):
            return control
        dist = GeomMath.distance(control, knot)
        while dist > max_distance:
            midpoint = GeomMath.midpoint(control, knot)
            if midpoint == control:
                # no float left between control and knot
                break
            control = midpoint
            dist = GeomMath.distance(control, knot)
        return control
