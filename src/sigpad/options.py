"""Configuration of a signature pad."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from sigpad.common import (
    BEZIER_SKIP,
    DEFAULT_HEIGHT,
    DEFAULT_LINE_WIDTH,
    DEFAULT_WIDTH,
    MAX_CONTROL_DISTANCE,
    StrokeMode,
)
from sigpad.errors import InvalidOptionsError

# A dimension is either pixels or a string like "200", "200px" or "50%"
Dimension = Union[int, float, str]

_LEADING_NUMBER = re.compile(r"^\s*([-+]?\d+(?:\.\d+)?)")


@dataclass(frozen=True)
class SignaturePadOptions:
    """Settings of a signature pad.

    Attributes:
        width: pad width in px, or percent of the container width (e.g. "50%")
        height: pad height in px, or percent of the container height
        line_width: stroke width in px
        base64: True to output data URLs instead of plain SVG text
        mode: how strokes are fitted, see StrokeMode
        decimation_interval: pointer samples per knot in StrokeMode.BATCH
        max_control_distance: dampening limit for control points, None disables dampening
    """

    width: Dimension = DEFAULT_WIDTH
    height: Dimension = DEFAULT_HEIGHT
    line_width: float = DEFAULT_LINE_WIDTH
    base64: bool = False
    mode: StrokeMode = StrokeMode.STREAMING
    decimation_interval: int = BEZIER_SKIP
    max_control_distance: Optional[float] = MAX_CONTROL_DISTANCE

    def __post_init__(self):
        if self.line_width <= 0:
            raise InvalidOptionsError(f"line_width must be positive, got {self.line_width}")
        if self.decimation_interval < 1:
            raise InvalidOptionsError(f"decimation_interval must be at least 1, got {self.decimation_interval}")
        if self.max_control_distance is not None and self.max_control_distance <= 0:
            raise InvalidOptionsError(f"max_control_distance must be positive, got {self.max_control_distance}")
        if not isinstance(self.mode, StrokeMode):
            raise InvalidOptionsError(f"mode must be a StrokeMode, got {self.mode!r}")

    def resolve_size(
        self, container_width: Optional[float] = None, container_height: Optional[float] = None
    ) -> Tuple[int, int]:
        """
        Return (width, height) in pixels.

        Percent dimensions are relative to the container size and rounded up.

        Raises:
            InvalidOptionsError: if a percent dimension has no container size or a size is not positive
        """
        width = self._resolve_dimension("width", self.width, container_width)
        height = self._resolve_dimension("height", self.height, container_height)
        return width, height

    @staticmethod
    def _resolve_dimension(name: str, value: Dimension, container: Optional[float]) -> int:
        if isinstance(value, str):
            match = _LEADING_NUMBER.match(value)
            if not match:
                raise InvalidOptionsError(f"Cannot parse {name} {value!r}")
            number = int(float(match.group(1)))
            if value.strip().endswith("%"):
                if container is None:
                    raise InvalidOptionsError(f"{name} {value!r} is relative but no container {name} is given")
                pixels = math.ceil(container * number / 100)
            else:
                pixels = number
        else:
            pixels = int(value)

        if pixels <= 0:
            raise InvalidOptionsError(f"{name} must be positive, got {value!r}")
        return pixels

    def to_dict(self) -> dict:
        """Convert options to a dictionary for serialization."""
        return {
            "width": self.width,
            "height": self.height,
            "line_width": self.line_width,
            "base64": self.base64,
            "mode": self.mode.name.lower(),
            "decimation_interval": self.decimation_interval,
            "max_control_distance": self.max_control_distance,
        }

    @classmethod
    def from_dict(cls, data: dict) -> SignaturePadOptions:
        """Create SignaturePadOptions from a dictionary, missing keys use the defaults."""
        mode = data.get("mode", StrokeMode.STREAMING)
        if isinstance(mode, str):
            try:
                mode = StrokeMode[mode.upper()]
            except KeyError as err:
                raise InvalidOptionsError(f"Unknown stroke mode {mode!r}") from err
        return cls(
            width=data.get("width", DEFAULT_WIDTH),
            height=data.get("height", DEFAULT_HEIGHT),
            line_width=data.get("line_width") or DEFAULT_LINE_WIDTH,
            base64=bool(data.get("base64", False)),
            mode=mode,
            decimation_interval=data.get("decimation_interval", BEZIER_SKIP),
            max_control_distance=data.get("max_control_distance", MAX_CONTROL_DISTANCE),
        )
