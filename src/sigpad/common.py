"""Central module containing constants and definitions for stroke fitting and SVG output."""

from __future__ import annotations

from enum import Enum, auto
from typing import Literal, Sequence, Tuple, Union

###############################################################################
# Types
###############################################################################


SigPathCmds = Literal[  # Type-Definition for SvgPath-Commands written by the signature pad
    # MoveTo (2) - start a new subpath and move the current point to (x,y)
    "M",
    # LineTo (2) - draw a straight line from the current point to (x,y)
    "L",
    # Cubic Bezier To (6) - draw a cubic Bezier curve with two control points and an endpoint (x,y)
    "C",
    # Smooth cubic Bezier To (4) - cubic curve to (x,y) using the reflection of the previous control point
    "S",
]

# Anything that carries an x and a y coordinate, e.g. (x, y) tuples or Point instances
PointLike = Union[Sequence[float], Tuple[float, float]]


###############################################################################
# Enums and Consts
###############################################################################


class StrokeMode(Enum):
    """Enum to define how a stroke is turned into curve segments."""

    STREAMING = auto()  # 3-point seed, then one reflected control point pair per sample
    BATCH = auto()  # decimated knots, solved once when the stroke ends


# Number of pointer move events between two knots handed to the batch solver.
# Higher values result in smaller svg files but reduced accuracy on quick strokes.
BEZIER_SKIP: int = 2

# Maximum distance between a control point and its knot before it gets pulled in
MAX_CONTROL_DISTANCE: float = 8.0

# Minimum number of knots needed to fit a curve
MIN_CURVE_POINTS: int = 3

DEFAULT_WIDTH: int = 200
DEFAULT_HEIGHT: int = 200
DEFAULT_LINE_WIDTH: int = 3

SVG_DATA_URL_PREFIX: str = "data:image/svg+xml;base64,"
