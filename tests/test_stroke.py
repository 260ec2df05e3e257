"""Test module for sigpad.stroke

The tests are run using pytest.
"""

import pytest

from sigpad.geom import Point
from sigpad.stroke import PointDecimator


def test_first_sample_is_knot():
    """The start of a stroke is always a knot."""
    decimator = PointDecimator(2)
    decimator.start((5, 5))
    assert decimator.knots == (Point(5, 5),)
    assert decimator.pending == ()


def test_every_second_sample_is_knot():
    """With interval 2 every second move becomes a knot, the others stay pending."""
    decimator = PointDecimator(2)
    decimator.start((0, 0))

    assert decimator.add((1, 1)) is False
    assert decimator.pending == (Point(1, 1),)
    assert decimator.add((2, 2)) is True
    assert decimator.pending == ()
    assert decimator.add((3, 3)) is False

    assert decimator.knots == (Point(0, 0), Point(2, 2))
    assert decimator.pending == (Point(3, 3),)
    assert len(decimator.samples) == 4


def test_interval_one_keeps_everything():
    """Interval 1 turns every sample into a knot."""
    decimator = PointDecimator(1)
    decimator.start((0, 0))
    for i in range(1, 5):
        assert decimator.add((i, 0))
    assert len(decimator.knots) == 5
    assert decimator.samples == decimator.knots


def test_default_interval():
    """The default interval is 2."""
    assert PointDecimator().interval == 2


def test_start_resets():
    """Starting a new stroke forgets the previous one."""
    decimator = PointDecimator(3)
    decimator.start((0, 0))
    decimator.add((1, 1))
    decimator.add((2, 2))
    decimator.start((9, 9))
    assert decimator.knots == (Point(9, 9),)
    assert decimator.pending == ()
    assert decimator.samples == (Point(9, 9),)
    # the skip counter restarts as well
    decimator.add((10, 10))
    assert decimator.add((11, 11)) is False
    assert decimator.add((12, 12)) is True


@pytest.mark.parametrize("interval", [0, -1])
def test_invalid_interval(interval):
    """Intervals below one are rejected."""
    with pytest.raises(ValueError):
        PointDecimator(interval)
