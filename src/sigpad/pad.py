"""Signature pad: turns pointer strokes into smooth SVG paths.

The pad owns the lifecycle of a stroke (pointer down, moves, pointer up).
Depending on ``SignaturePadOptions.mode`` each stroke is fitted either while
it is drawn (``StrokeMode.STREAMING``, via ``SplineGenerator``) or once it
ends (``StrokeMode.BATCH``, via ``get_curve_control_points`` on decimated
samples). Segments are forwarded to an optional renderer and written to
the SVG document.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from sigpad.common import StrokeMode
from sigpad.document import SignatureDocument
from sigpad.errors import StrokeStateError
from sigpad.geom import ControlPointPair, Point
from sigpad.options import SignaturePadOptions
from sigpad.render import StrokeRenderer
from sigpad.spline import SplineGenerator, get_curve_control_points
from sigpad.stroke import PointDecimator
from sigpad.svgpath import PathSegment, SvgPath

logger = logging.getLogger(__name__)


class SignaturePad:
    """Captures strokes and outputs them as SVG document.

    Example:
        >>> pad = SignaturePad(SignaturePadOptions(width=300, height=100))
        >>> pad.begin_stroke(10, 10)
        >>> for x, y in [(20, 12), (30, 18), (40, 20)]:
        ...     pad.move_to(x, y)
        >>> svg = pad.end_stroke()
    """

    def __init__(
        self,
        options: Optional[SignaturePadOptions] = None,
        renderer: Optional[StrokeRenderer] = None,
        container_width: Optional[float] = None,
        container_height: Optional[float] = None,
    ):
        """
        Args:
            options (Optional[SignaturePadOptions]): pad settings. Defaults to SignaturePadOptions().
            renderer (Optional[StrokeRenderer]): receives the segments while drawing. Defaults to None.
            container_width (Optional[float]): container size for percent widths
            container_height (Optional[float]): container size for percent heights
        """
        self.options = options or SignaturePadOptions()
        self.renderer = renderer
        width, height = self.options.resolve_size(container_width, container_height)
        self.document = SignatureDocument(width, height, self.options.line_width)

        self._generator = SplineGenerator()
        self._decimator = PointDecimator(self.options.decimation_interval)
        self._commands: List[str] = []
        self._drawing = False
        self._curve_started = False

    @property
    def is_empty(self) -> bool:
        """bool: True if nothing has been drawn or loaded."""
        return self.document.is_empty and not self._drawing

    @property
    def is_drawing(self) -> bool:
        """bool: True while a stroke is in progress."""
        return self._drawing

    ###########################################################################
    # Stroke lifecycle
    ###########################################################################

    def begin_stroke(self, x: float, y: float) -> None:
        """Start a new stroke at (x, y), e.g. on pointer down.

        A stroke still in progress is ended first.
        """
        if self._drawing:
            logger.debug("Stroke still in progress on begin_stroke(), ending it")
            self.end_stroke()

        point = Point(float(x), float(y))
        self._commands = [SvgPath.move_to(point)]
        self._drawing = True
        self._curve_started = False
        self._decimator.start(point)
        if self.options.mode == StrokeMode.STREAMING:
            self._generator.start()
            self._generator.supply(point)
        if self.renderer is not None:
            self.renderer.move_to(point)
        logger.debug("Stroke started at %s (%s)", point, self.options.mode.name)

    def move_to(self, x: float, y: float) -> None:
        """Add a sample to the stroke in progress, e.g. on pointer move.

        Raises:
            StrokeStateError: if no stroke is in progress
        """
        if not self._drawing:
            raise StrokeStateError("move_to() called without a stroke in progress")

        point = Point(float(x), float(y))
        self._decimator.add(point)
        if self.options.mode != StrokeMode.STREAMING:
            # preview, replaced by the fitted stroke on end_stroke()
            if self.renderer is not None:
                self.renderer.line_to(point)
            return

        pair = self._generator.supply(point)
        if pair is None:
            return
        if not self._curve_started:
            # the seed pair belongs to the second segment, the first one is drawn straight
            self._line_to(self._generator.p_minus_1)
            self._curve_started = True
        self._curve_to(pair, point)

    def end_stroke(self) -> Optional[str]:
        """Finish the stroke in progress, e.g. on pointer up.

        Returns:
            Optional[str]: the updated document (see to_svg()), None if no stroke was in progress
        """
        if not self._drawing:
            logger.warning("end_stroke() called without a stroke in progress")
            return None

        if self.options.mode == StrokeMode.STREAMING:
            if not self._curve_started:
                self._draw_linear(self._generator.recent_points()[1:])
            self._generator.stop()
        else:
            self._draw_batch()

        self.document.add_path(" ".join(self._commands))
        if self.options.mode == StrokeMode.BATCH and self.renderer is not None:
            self._render_document()
        logger.debug("Stroke ended with %d path commands", len(self._commands))
        self._reset_stroke()
        return self.to_svg()

    def cancel_stroke(self) -> None:
        """Discard the stroke in progress without adding it to the document."""
        was_drawing = self._drawing
        self._generator.stop()
        self._reset_stroke()
        if was_drawing:
            logger.debug("Stroke canceled")
            if self.renderer is not None:
                self._render_document()

    def _reset_stroke(self) -> None:
        self._decimator.reset()
        self._commands = []
        self._drawing = False
        self._curve_started = False

    ###########################################################################
    # Segments
    ###########################################################################

    def _line_to(self, point: Point) -> None:
        self._commands.append(SvgPath.line_to(point))
        if self.renderer is not None:
            self.renderer.line_to(point)

    def _curve_to(self, pair: ControlPointPair, point: Point) -> None:
        pair = pair.dampened(point, self.options.max_control_distance)
        self._commands.append(SvgPath.curve_to(pair.c1, pair.c2, point))
        if self.renderer is not None:
            self.renderer.curve_to(pair.c1, pair.c2, point)

    def _draw_linear(self, points: Sequence[Point]) -> None:
        """Straight line fallback for strokes too short for a curve."""
        for point in points:
            self._line_to(point)

    def _draw_batch(self) -> None:
        """Fit the decimated knots of the stroke and write the curve segments.

        Only the path commands are written, the renderer is updated from the document afterwards.
        """
        knots = self._decimator.knots
        curve = get_curve_control_points(knots)
        if curve is None:
            logger.debug("Only %d knots, drawing the stroke with straight lines", len(knots))
            self._commands.extend(SvgPath.line_to(point) for point in self._decimator.samples[1:])
            return

        max_distance = self.options.max_control_distance
        previous_unchanged = False
        for i, (_, first, second, end) in enumerate(curve.segments(knots)):
            fitted = ControlPointPair(first, second)
            pair = fitted.dampened(end, max_distance)
            unchanged = pair == fitted
            # S reflects the previous control point, which only holds while nothing was dampened
            if i > 0 and unchanged and previous_unchanged:
                self._commands.append(SvgPath.smooth_curve_to(pair.c2, end))
            else:
                self._commands.append(SvgPath.curve_to(pair.c1, pair.c2, end))
            previous_unchanged = unchanged
        self._commands.extend(SvgPath.line_to(point) for point in self._decimator.pending)

    ###########################################################################
    # Document
    ###########################################################################

    def to_svg(self) -> str:
        """Return the document as SVG text, or as data URL if the base64 option is set."""
        if self.options.base64:
            return self.document.to_data_url()
        return self.document.to_string()

    def clear(self) -> str:
        """Remove all strokes and return the empty document."""
        self.cancel_stroke()
        self.document.clear()
        if self.renderer is not None:
            self.renderer.clear()
        return self.to_svg()

    def load_svg(self, data: str) -> Optional[str]:
        """
        Load an SVG written by a signature pad, replacing the current drawing.

        SVG generated from text has the same effect as clear(). Loaded strokes are
        replayed on the renderer and further strokes are appended to them.

        Args:
            data (str): SVG text or base64 data URL. Empty data is ignored.

        Raises:
            InvalidSvgError: if _data_ cannot be decoded or uses unsupported path commands

        Returns:
            Optional[str]: the loaded document (see to_svg()), None if _data_ was empty
        """
        if not data:
            return None

        document = SignatureDocument.from_string(
            data, self.document.width, self.document.height, self.options.line_width
        )
        if document.is_empty:
            return self.clear()

        # parse everything before replacing the current drawing
        strokes = [list(SvgPath.parse_segments(path_string)) for path_string in document.paths]

        self.cancel_stroke()
        self.document = document
        if self.renderer is not None:
            self._replay(strokes)
        logger.debug("Loaded %d strokes", len(strokes))
        return self.to_svg()

    def _render_document(self) -> None:
        self._replay([list(SvgPath.parse_segments(path_string)) for path_string in self.document.paths])

    def _replay(self, strokes: List[List[PathSegment]]) -> None:
        """Redraw the renderer from the parsed paths of the document."""
        self.renderer.clear()
        for segments in strokes:
            for command, points in segments:
                if command == "M":
                    self.renderer.move_to(points[0])
                elif command == "L":
                    self.renderer.line_to(points[0])
                else:
                    self.renderer.curve_to(*points)
