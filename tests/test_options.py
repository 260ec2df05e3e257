"""Test module for sigpad.options

The tests are run using pytest.
"""

import pytest

from sigpad.common import StrokeMode
from sigpad.errors import InvalidOptionsError
from sigpad.options import SignaturePadOptions


def test_defaults():
    """Default pad: 200 x 200, line width 3, plain text output."""
    options = SignaturePadOptions()
    assert options.resolve_size() == (200, 200)
    assert options.line_width == 3
    assert options.base64 is False
    assert options.mode == StrokeMode.STREAMING
    assert options.decimation_interval == 2
    assert options.max_control_distance == 8.0


@pytest.mark.parametrize(
    "width, container, expected",
    [
        ("50%", 301, 151),
        ("100%", 640, 640),
        ("200px", None, 200),
        ("120", None, 120),
        (250, None, 250),
        (99.9, None, 99),
    ],
)
def test_resolve_width(width, container, expected):
    """Percent sizes are relative to the container and rounded up, others are parsed as integers."""
    options = SignaturePadOptions(width=width)
    assert options.resolve_size(container_width=container)[0] == expected


def test_resolve_height_percent():
    """Heights use the container height."""
    options = SignaturePadOptions(height="25%")
    assert options.resolve_size(container_width=1000, container_height=90) == (200, 23)


def test_percent_without_container():
    """A relative size needs a container size."""
    with pytest.raises(InvalidOptionsError):
        SignaturePadOptions(width="50%").resolve_size()


@pytest.mark.parametrize("width", [0, -10, "abc", "0%"])
def test_invalid_width(width):
    """Sizes must be positive numbers."""
    with pytest.raises(InvalidOptionsError):
        SignaturePadOptions(width=width).resolve_size(container_width=100)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"line_width": 0},
        {"decimation_interval": 0},
        {"max_control_distance": 0},
        {"max_control_distance": -1.0},
        {"mode": "streaming"},
    ],
)
def test_invalid_options(kwargs):
    """Out of range settings are rejected on construction."""
    with pytest.raises(InvalidOptionsError):
        SignaturePadOptions(**kwargs)


def test_dampening_can_be_disabled():
    """None disables control point dampening."""
    assert SignaturePadOptions(max_control_distance=None).max_control_distance is None


def test_dict_round_trip():
    """to_dict and from_dict are inverse."""
    options = SignaturePadOptions(
        width="50%", height=120, line_width=2, base64=True, mode=StrokeMode.BATCH, decimation_interval=3
    )
    assert SignaturePadOptions.from_dict(options.to_dict()) == options


def test_from_dict_defaults():
    """Missing keys use the defaults, a missing or zero line width falls back to 3."""
    options = SignaturePadOptions.from_dict({"width": 300, "line_width": 0})
    assert options == SignaturePadOptions(width=300)


def test_from_dict_mode_name():
    """Modes are given by name."""
    assert SignaturePadOptions.from_dict({"mode": "Batch"}).mode == StrokeMode.BATCH


def test_from_dict_unknown_mode():
    """Unknown modes are rejected."""
    with pytest.raises(InvalidOptionsError):
        SignaturePadOptions.from_dict({"mode": "spline"})
