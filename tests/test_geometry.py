from __future__ import annotations

import math

import pytest

from blueprint_playground.geometry import (
    Point,
    bounding_box,
    component_spans,
    distance,
    ensure_finite,
    round_to_grid,
    segment_length,
    segments_array,
    total_length,
)
from conftest import seg


def test_distance_and_length():
    assert distance(Point(0.0, 0.0), Point(3.0, 4.0)) == 5.0
    assert segment_length(seg(1, 1, 4, 5)) == 5.0


@pytest.mark.parametrize(
    "value,pitch,expected",
    [(0.0, 20.0, 0.0), (9.0, 20.0, 0.0), (11.0, 20.0, 20.0), (198.0, 20.0, 200.0), (-11.0, 20.0, -20.0), (14.0, 10.0, 10.0)],
)
def test_round_to_grid(value, pitch, expected):
    assert round_to_grid(value, pitch) == expected


def test_spans_and_bounds():
    wall = seg(100, 10, 40, 90)
    assert component_spans(wall) == (60.0, 80.0)
    assert bounding_box(wall) == (Point(40.0, 10.0), Point(100.0, 90.0))


def test_ensure_finite():
    assert ensure_finite(Point(1.0, 2.0)) == Point(1.0, 2.0)
    with pytest.raises(ValueError):
        ensure_finite(Point(math.nan, 2.0))


def test_numpy_helpers():
    walls = [seg(0, 0, 3, 4), seg(0, 0, 0, 10)]
    assert segments_array(walls).shape == (2, 4)
    assert total_length(walls) == pytest.approx(15.0)
    assert segments_array([]).shape == (0, 4)
    assert total_length([]) == 0.0


def test_degenerate_segment():
    assert seg(5, 5, 5, 5).is_degenerate()
    assert not seg(5, 5, 5, 6).is_degenerate()
