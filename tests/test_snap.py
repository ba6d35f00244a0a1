from __future__ import annotations

import math

import pytest

from blueprint_playground.geometry import Point
from blueprint_playground.snap import (
    SnapKind,
    align_to_segments,
    nearest_endpoint,
    resolve,
    resolve_with_kind,
)
from conftest import seg


@pytest.mark.parametrize("x,y", [(0.0, 0.0), (40.0, 60.0), (-20.0, 100.0)])
def test_grid_point_is_fixed_point(x, y):
    assert resolve(Point(x, y), (), 20.0) == Point(x, y)


def test_free_point_rounds_to_grid():
    result = resolve_with_kind(Point(27.0, 52.0), (), 20.0)
    assert result.point == Point(20.0, 60.0)
    assert result.kind == SnapKind.GRID


def test_endpoint_snap_returns_exact_endpoint():
    walls = (seg(0, 0, 100, 0),)
    assert resolve(Point(101.0, 1.0), walls, 20.0) == Point(100.0, 0.0)


def test_endpoint_beats_grid_and_alignment():
    walls = (seg(5, 5, 105, 5),)
    result = resolve_with_kind(Point(12.0, 9.0), walls, 20.0)
    assert result.point == Point(5.0, 5.0)
    assert result.kind == SnapKind.END


def test_endpoint_threshold_is_strict():
    walls = (seg(0, 0, 100, 0),)
    # exactly pitch/2 away: no endpoint snap, grid + alignment instead
    result = resolve_with_kind(Point(110.0, 0.0), walls, 20.0)
    assert result.kind != SnapKind.END


def test_endpoint_picks_closest_across_walls():
    walls = (seg(0, 0, 50, 50), seg(8, 0, 200, 200))
    assert nearest_endpoint(Point(7.0, 0.0), walls, 10.0) == Point(8.0, 0.0)


def test_endpoint_tie_keeps_first_wall():
    walls = (seg(10, 0, 100, 100), seg(-10, 0, 200, 200))
    assert resolve(Point(0.0, 0.0), walls, 40.0) == Point(10.0, 0.0)


def test_endpoint_tie_prefers_start_over_end():
    walls = (seg(10, 0, -10, 0),)
    assert resolve(Point(0.0, 0.0), walls, 40.0) == Point(10.0, 0.0)


def test_alignment_last_match_wins_over_closest():
    walls = (seg(0, 100, 300, 100), seg(500, 93, 600, 93))
    result = resolve_with_kind(Point(247.0, 98.0), walls, 20.0)
    assert result.point == Point(240.0, 93.0)
    assert result.kind == SnapKind.ALIGN


def test_alignment_end_overrides_start_in_same_wall():
    walls = (seg(0, 100, 400, 104),)
    point, aligned = align_to_segments(Point(200.0, 102.0), walls, 20.0)
    assert aligned
    assert point == Point(200.0, 104.0)


def test_alignment_axes_are_independent():
    walls = (seg(0, 0, 0, 100),)
    assert resolve(Point(198.0, 3.0), walls, 20.0) == Point(200.0, 0.0)
    assert resolve(Point(3.0, 198.0), walls, 20.0) == Point(0.0, 200.0)


def test_non_finite_input_fails_fast():
    with pytest.raises(ValueError):
        resolve(Point(math.nan, 0.0), (), 20.0)
    with pytest.raises(ValueError):
        resolve(Point(0.0, math.inf), (), 20.0)


def test_non_positive_pitch_rejected():
    with pytest.raises(ValueError):
        resolve(Point(1.0, 1.0), (), 0.0)
    with pytest.raises(ValueError):
        resolve(Point(1.0, 1.0), (), math.inf)
