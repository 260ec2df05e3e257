"""Collecting the samples of a stroke for the batch spline solver."""

from __future__ import annotations

from typing import List, Tuple

from sigpad.common import BEZIER_SKIP, PointLike
from sigpad.geom import Point


class PointDecimator:
    """
    Keeps every _interval_-th pointer sample of a stroke as a knot.

    The first sample of a stroke is always a knot. Samples between two knots
    are kept as pending samples so that a stroke which is too short for a
    curve can still be drawn with straight lines.
    """

    def __init__(self, interval: int = BEZIER_SKIP):
        if interval < 1:
            raise ValueError(f"Decimation interval must be at least 1, got {interval}")
        self._interval = interval
        self._knots: List[Point] = []
        self._pending: List[Point] = []
        self._samples: List[Point] = []
        self._skip_counter = 0

    @property
    def interval(self) -> int:
        """int: number of samples per knot."""
        return self._interval

    @property
    def knots(self) -> Tuple[Point, ...]:
        """Tuple[Point, ...]: the samples kept for curve fitting."""
        return tuple(self._knots)

    @property
    def pending(self) -> Tuple[Point, ...]:
        """Tuple[Point, ...]: samples received since the last knot."""
        return tuple(self._pending)

    @property
    def samples(self) -> Tuple[Point, ...]:
        """Tuple[Point, ...]: every sample of the stroke."""
        return tuple(self._samples)

    def start(self, point: PointLike) -> None:
        """Start a new stroke at _point_."""
        self.reset()
        point = Point.of(point)
        self._knots.append(point)
        self._samples.append(point)

    def add(self, point: PointLike) -> bool:
        """
        Add the next sample of the stroke.

        Returns:
            bool: True if the sample became a knot
        """
        point = Point.of(point)
        self._samples.append(point)
        self._pending.append(point)
        self._skip_counter += 1
        if self._skip_counter >= self._interval:
            self._pending = []
            self._skip_counter = 0
            self._knots.append(point)
            return True
        return False

    def reset(self) -> None:
        self._knots = []
        self._pending = []
        self._samples = []
        self._skip_counter = 0
