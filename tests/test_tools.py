from __future__ import annotations

import pytest

pytest.importorskip("PySide6.QtCore")

from blueprint_playground.geometry import Point
from blueprint_playground.tools import WallTool, on_surface, point_from_event
from conftest import seg


class _Pos:
    def __init__(self, x, y):
        self._x, self._y = x, y

    def x(self):
        return self._x

    def y(self):
        return self._y


class _MoveEvent:
    def __init__(self, x, y):
        self._pos = _Pos(x, y)

    def position(self):
        return self._pos


class _Canvas:
    def __init__(self, state):
        self.state = state
        self.refreshes = 0

    def world_from_event(self, event):
        return point_from_event(event)

    def refresh(self):
        self.refreshes += 1


@pytest.mark.parametrize(
    "x,y,inside",
    [(0.0, 0.0, True), (799.0, 599.0, True), (800.0, 10.0, False), (-1.0, 10.0, False), (10.0, 600.0, False)],
)
def test_on_surface(x, y, inside):
    assert on_surface(Point(x, y), (800.0, 600.0)) is inside


def test_dragging_off_the_surface_commits_the_wall(editor):
    tool = WallTool(_Canvas(editor))
    editor.begin_drag(Point(100.0, 100.0))
    tool.mouse_move(_MoveEvent(300.0, 102.0))
    assert editor.is_dragging()
    tool.mouse_move(_MoveEvent(900.0, 100.0))
    assert not editor.is_dragging()
    assert editor.get_segments() == (seg(100, 100, 300, 100),)
    assert editor.hover_point is None


def test_moves_off_the_surface_do_not_update_hover(editor):
    tool = WallTool(_Canvas(editor))
    tool.mouse_move(_MoveEvent(-5.0, 40.0))
    assert editor.hover_point is None
    tool.mouse_move(_MoveEvent(41.0, 39.0))
    assert editor.hover_point == Point(40.0, 40.0)
