"""Renderers receiving the segments of strokes while they are drawn."""

from __future__ import annotations

from typing import List, Optional, Protocol, Tuple

import numpy as np
from numpy.typing import NDArray

from sigpad.bezier import BezierCurve
from sigpad.geom import Point


class StrokeRenderer(Protocol):
    """Anything that can draw strokes made of lines and cubic Bezier curves."""

    def move_to(self, point: Point) -> None:
        """Start a new stroke at _point_."""

    def line_to(self, point: Point) -> None:
        """Draw a straight line from the current point to _point_."""

    def curve_to(self, control1: Point, control2: Point, point: Point) -> None:
        """Draw a cubic Bezier curve from the current point to _point_."""

    def clear(self) -> None:
        """Remove everything drawn so far."""


class PolylineRenderer:
    """
    Records strokes as polylines.

    Curves are polygonized with BezierCurve, each stroke becomes one
    NDArray of shape (n, 2). Useful as a headless canvas and for tests.
    """

    def __init__(self, steps: Optional[int] = None):
        """
        Args:
            steps (Optional[int]): fixed number of line pieces per curve.
                Defaults to None, i.e. derived from the size of each curve.
        """
        self._steps = steps
        self._strokes: List[List[NDArray[np.float64]]] = []
        self._current: Optional[Point] = None

    @property
    def strokes(self) -> List[NDArray[np.float64]]:
        """List[NDArray[np.float64]]: one (n, 2) array per stroke."""
        return [np.concatenate(parts) for parts in self._strokes]

    def move_to(self, point: Point) -> None:
        self._strokes.append([np.array([[point.x, point.y]], dtype=np.float64)])
        self._current = point

    def line_to(self, point: Point) -> None:
        self._ensure_stroke(point)
        self._strokes[-1].append(np.array([[point.x, point.y]], dtype=np.float64))
        self._current = point

    def curve_to(self, control1: Point, control2: Point, point: Point) -> None:
        self._ensure_stroke(point)
        curve_points = [tuple(self._current), tuple(control1), tuple(control2), tuple(point)]
        steps = self._steps or BezierCurve.steps_for_curve(curve_points)
        polyline = BezierCurve.polygonize_cubic_curve(curve_points, steps)
        # first point is the current point which is already recorded
        self._strokes[-1].append(polyline[1:])
        self._current = point

    def clear(self) -> None:
        self._strokes = []
        self._current = None

    def extent(self) -> Optional[Tuple[float, float, float, float]]:
        """Return (xmin, ymin, xmax, ymax) of everything drawn, None if nothing was drawn."""
        if not self._strokes:
            return None
        points = np.concatenate(self.strokes)
        xmin, ymin = points.min(axis=0)
        xmax, ymax = points.max(axis=0)
        return float(xmin), float(ymin), float(xmax), float(ymax)

    def _ensure_stroke(self, point: Point) -> None:
        if self._current is None:
            raise ValueError(f"Cannot draw to {point} without a preceding move_to()")
