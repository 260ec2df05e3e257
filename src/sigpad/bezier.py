"""Cubic Bezier curve evaluation used to turn stroke segments into polylines."""

from __future__ import annotations

import math
from typing import Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

# Pixels per polyline step when the step count is derived from the control polygon
_PIXELS_PER_STEP: float = 3.0
_MIN_STEPS: int = 2


class BezierCurve:
    """Class to handle cubic Bezier curve operations.

    A curve is given by its four points: start, control1, control2, end.
    """

    @classmethod
    def polygonize_cubic_curve(
        cls, points: Union[Sequence[Tuple[float, float]], NDArray[np.float64]], steps: int
    ) -> NDArray[np.float64]:
        """
        Polygonize a cubic Bezier curve into line segments.
        Uses direct evaluation with vectorized operations.

        Args:
            points: Control points as Sequence[Tuple[float, float]] or NDArray[np.float64]
                    Must contain exactly 4 points: start, control1, control2, end
            steps: Number of segments to divide the curve into

        Returns:
            NDArray[np.float64] of shape (steps+1, 2) containing the polygonized points (x, y)
        """
        if steps < 1:
            raise ValueError(f"At least one step is required to polygonize a curve, got {steps}")
        points_array = np.asarray(points, dtype=np.float64)
        if points_array.shape != (4, 2):
            raise ValueError("Cubic polygonization requires exactly four (x, y) points.")

        t = np.linspace(0, 1, steps + 1, dtype=np.float64)

        # Cubic Bezier basis functions
        # B(t) = (1-t)^3*P0 + 3*(1-t)^2*t*P1 + 3*(1-t)*t^2*P2 + t^3*P3
        omt = 1 - t
        omt2 = omt**2
        omt3 = omt2 * omt
        t2 = t**2
        t3 = t2 * t
        basis = np.stack([omt3, 3 * omt2 * t, 3 * omt * t2, t3], axis=1)

        result = basis @ points_array
        # end points exactly as given, independent of rounding in the basis
        result[0] = points_array[0]
        result[-1] = points_array[3]
        return result

    @classmethod
    def steps_for_curve(cls, points: Union[Sequence[Tuple[float, float]], NDArray[np.float64]]) -> int:
        """Return a step count so that polyline pieces are roughly a few pixels long.

        The length of the control polygon is an upper bound of the curve length.
        """
        points_array = np.asarray(points, dtype=np.float64)
        polygon_length = float(np.sum(np.hypot(*np.diff(points_array, axis=0).T)))
        if not math.isfinite(polygon_length):
            return _MIN_STEPS
        return max(_MIN_STEPS, int(polygon_length / _PIXELS_PER_STEP))
