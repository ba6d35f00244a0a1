from __future__ import annotations

import pytest

from blueprint_playground.config import CONFIG_ENV_VAR, EditorConfig
from blueprint_playground.geometry import Point, Segment
from blueprint_playground.session import EditorState


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.fixture
def editor() -> EditorState:
    return EditorState(config=EditorConfig(grid_pitch=20.0, thickness=4.0))


def seg(x1: float, y1: float, x2: float, y2: float, thickness: float = 4.0) -> Segment:
    return Segment(Point(x1, y1), Point(x2, y2), thickness)


def draw(state: EditorState, start: tuple[float, float], end: tuple[float, float]):
    state.begin_drag(Point(*start))
    state.move_drag(Point(*end))
    return state.end_drag()
