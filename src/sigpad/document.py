"""SVG document holding the strokes drawn on a signature pad."""

from __future__ import annotations

import base64
import binascii
import io
import logging
import re
from typing import List, Optional, Tuple

import svgwrite

from sigpad.common import DEFAULT_LINE_WIDTH, SVG_DATA_URL_PREFIX
from sigpad.errors import InvalidSvgError

logger = logging.getLogger(__name__)

_STROKE_WIDTH = re.compile(r'stroke-width\s?=\s?"(\d+(?:\.\d+)?)"')
_VIEWBOX = re.compile(r'viewBox\s?=\s?"\s*([-+\d.eE]+)[\s,]+([-+\d.eE]+)[\s,]+([-+\d.eE]+)[\s,]+([-+\d.eE]+)\s*"')
_PATH_DATA = re.compile(r'<path\b[^>]*?\sd\s?=\s?"([^"]*)"')
_WHITESPACE = re.compile(r"\s+")


class SignatureDocument:
    """An SVG document (canvas) containing one path per stroke.

    The viewbox uses the pad's pixel coordinates left-to-right and top-to-bottom.
    Strokes are drawn unfilled in black with round line caps.
    """

    def __init__(self, width: int, height: int, line_width: float = DEFAULT_LINE_WIDTH):
        """
        Args:
            width (int): width of the viewbox in px
            height (int): height of the viewbox in px
            line_width (float, optional): stroke width in px. Defaults to 3.
        """
        self._width = width
        self._height = height
        self._line_width = line_width
        self._paths: List[str] = []

    @property
    def width(self) -> int:
        """int: width of the viewbox."""
        return self._width

    @property
    def height(self) -> int:
        """int: height of the viewbox."""
        return self._height

    @property
    def line_width(self) -> float:
        """float: stroke width of all paths."""
        return self._line_width

    @property
    def paths(self) -> Tuple[str, ...]:
        """Tuple[str, ...]: the path data ("d" attribute) of each stroke."""
        return tuple(self._paths)

    @property
    def is_empty(self) -> bool:
        """bool: True if the document contains no strokes."""
        return not self._paths

    def add_path(self, path_string: str) -> None:
        """Append a stroke given by its SVG path data."""
        self._paths.append(path_string.strip())

    def clear(self) -> None:
        """Remove all strokes."""
        self._paths = []

    def drawing(self) -> svgwrite.Drawing:
        """Assemble an svgwrite Drawing of the current strokes."""
        line_width = f"{self._line_width:g}"
        # no width and height, the document scales to its container like the pad
        drawing = svgwrite.Drawing(
            size=None,
            profile="full",
            debug=False,
            fill="none",
            stroke="black",
            stroke_linecap="round",
            stroke_width=line_width,
        )
        drawing["viewBox"] = f"0 0 {self._width} {self._height}"
        for path_string in self._paths:
            drawing.add(drawing.path(d=path_string))
        return drawing

    def to_string(self) -> str:
        """Return the document as SVG text on a single line."""
        svg_buffer = io.StringIO()
        self.drawing().write(svg_buffer, pretty=False)
        return _WHITESPACE.sub(" ", svg_buffer.getvalue()).strip()

    def to_data_url(self) -> str:
        """Return the document as base64 encoded data URL."""
        encoded = base64.b64encode(self.to_string().encode("utf-8")).decode("ascii")
        return f"{SVG_DATA_URL_PREFIX}{encoded}"

    @classmethod
    def decode(cls, data: str) -> str:
        """Return SVG text from _data_, which is either SVG text or a base64 (data URL) string.

        Raises:
            InvalidSvgError: if _data_ is empty or not valid base64
        """
        if not data or not data.strip():
            raise InvalidSvgError("No SVG data given")
        data = data.strip()
        if data.startswith("<"):
            return data
        try:
            raw = base64.b64decode(data.replace(SVG_DATA_URL_PREFIX, "").strip(), validate=True)
            return raw.decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as err:
            raise InvalidSvgError(f"SVG data is neither SVG text nor base64: {err}") from err

    @classmethod
    def from_string(
        cls,
        data: str,
        width: Optional[int] = None,
        height: Optional[int] = None,
        line_width: Optional[float] = None,
    ) -> SignatureDocument:
        """
        Load a document previously written by a signature pad.

        Documents generated from text (containing a <text> element) are not
        drawings and result in an empty document. Size and stroke width are
        taken from the SVG where present, otherwise from the given defaults.

        Args:
            data (str): SVG text or base64 data URL
            width (Optional[int]): width if the SVG has no viewBox
            height (Optional[int]): height if the SVG has no viewBox
            line_width (Optional[float]): stroke width if the SVG has none

        Raises:
            InvalidSvgError: if _data_ cannot be decoded or has no size

        Returns:
            SignatureDocument: the loaded document
        """
        svg_text = cls.decode(data)

        viewbox = _VIEWBOX.search(svg_text)
        if viewbox:
            width = int(float(viewbox.group(3)))
            height = int(float(viewbox.group(4)))
        if width is None or height is None:
            raise InvalidSvgError("SVG has no viewBox and no size was given")

        stroke_width = _STROKE_WIDTH.search(svg_text)
        if stroke_width:
            line_width = float(stroke_width.group(1))
        document = cls(width, height, line_width or DEFAULT_LINE_WIDTH)

        if re.search(r"<text\b", svg_text):
            logger.warning("Ignoring SVG generated from text, loading an empty document instead")
            return document

        for path_string in _PATH_DATA.findall(svg_text):
            document.add_path(path_string)
        logger.debug("Loaded SVG document %sx%s with %d paths", width, height, len(document.paths))
        return document
