"""Writing and reading the SVG paths of strokes"""

from __future__ import annotations

import math
import re
from typing import Callable, ClassVar, Iterator, Optional, Pattern, Tuple

import svgpathtools

from sigpad.common import SigPathCmds
from sigpad.errors import InvalidSvgError
from sigpad.geom import Point

# A drawing primitive of a parsed path: ("M", (p,)), ("L", (p,)) or ("C", (c1, c2, p))
PathSegment = Tuple[SigPathCmds, Tuple[Point, ...]]


def round_half_up(value: float) -> float:
    """Round to the nearest integer, halves away from -infinity (2.5 -> 3, -2.5 -> -2)."""
    return float(math.floor(value + 0.5))


class SvgPath:
    """
    Static helpers for the path strings of strokes.

    Strokes are written with M, L, C and S using integer coordinates.
    Any path svgpathtools understands can be read back, as long as it
    consists of lines and cubic curves only.
    """

    # A path consisting of a single moveto, like the stroke of a single click
    MOVETO_ONLY: ClassVar[Pattern[str]] = re.compile(
        r"\s*[Mm][\s,]*([-+]?[0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?)"
        r"[\s,]*([-+]?[0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?)\s*$"
    )

    ###########################################################################
    # Writing
    ###########################################################################

    @staticmethod
    def format_point(point: Point, round_func: Optional[Callable] = round_half_up) -> str:
        """Return "x y" of _point_, each coordinate rounded by _round_func_ if given."""
        x, y = point
        if round_func:
            x, y = round_func(x), round_func(y)
        return f"{x:g} {y:g}"

    @staticmethod
    def move_to(point: Point, round_func: Optional[Callable] = round_half_up) -> str:
        """Return the MoveTo command for _point_."""
        return f"M {SvgPath.format_point(point, round_func)}"

    @staticmethod
    def line_to(point: Point, round_func: Optional[Callable] = round_half_up) -> str:
        """Return the LineTo command for _point_."""
        return f"L {SvgPath.format_point(point, round_func)}"

    @staticmethod
    def curve_to(
        control1: Point, control2: Point, point: Point, round_func: Optional[Callable] = round_half_up
    ) -> str:
        """Return the cubic Bezier command ending at _point_."""
        return (
            f"C {SvgPath.format_point(control1, round_func)}, "
            f"{SvgPath.format_point(control2, round_func)}, "
            f"{SvgPath.format_point(point, round_func)}"
        )

    @staticmethod
    def smooth_curve_to(control2: Point, point: Point, round_func: Optional[Callable] = round_half_up) -> str:
        """Return the smooth cubic Bezier command ending at _point_.

        The first control point is the reflection of the previous segment's
        second control point, so only _control2_ is written.
        """
        return f"S {SvgPath.format_point(control2, round_func)}, {SvgPath.format_point(point, round_func)}"


    ###########################################################################
    # Reading
    ###########################################################################

    @staticmethod
    def parse_segments(path_string: str) -> Iterator[PathSegment]:
        """
        Iterate the drawing primitives of _path_string_ using absolute coordinates.

        The path is parsed by svgpathtools, so relative commands, H, V, S and Z
        are already resolved into lines and cubic curves. Each continuous
        subpath starts with a moveto.

        Args:
            path_string (str): SVG path string

        Raises:
            InvalidSvgError: on quadratic curves and arcs or if _path_string_ cannot be parsed

        Yields:
            PathSegment: ("M", (point,)), ("L", (point,)) or ("C", (control1, control2, point))
        """
        try:
            path_collection = svgpathtools.parse_path(path_string)
        except (IndexError, ValueError) as err:
            raise InvalidSvgError(f"Cannot parse path '{path_string}': {err}") from err

        if not len(path_collection):
            # a single moveto has no segments
            match = SvgPath.MOVETO_ONLY.match(path_string)
            if match:
                yield "M", (Point(float(match.group(1)), float(match.group(2))),)
            return

        for sub_path in path_collection.continuous_subpaths():
            yield "M", (SvgPath._point(sub_path.start),)
            for segment in sub_path:
                if isinstance(segment, svgpathtools.CubicBezier):
                    yield "C", (
                        SvgPath._point(segment.control1),
                        SvgPath._point(segment.control2),
                        SvgPath._point(segment.end),
                    )
                elif isinstance(segment, svgpathtools.Line):
                    yield "L", (SvgPath._point(segment.end),)
                else:
                    raise InvalidSvgError(f"Unsupported segment in stroke path: {segment}")

    @staticmethod
    def _point(coord: complex) -> Point:
        return Point(coord.real, coord.imag)
