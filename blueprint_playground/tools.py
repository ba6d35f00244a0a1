"""Interactive tools for the Blueprint Playground canvas."""
from __future__ import annotations

from typing import Tuple

from PySide6.QtCore import Qt

from .geometry import Point


class ToolBase:
    """Common interface every tool implements."""

    def __init__(self, canvas):
        self.canvas = canvas

    def mouse_press(self, event):  # pragma: no cover - GUI entry point
        pass

    def mouse_move(self, event):  # pragma: no cover - GUI entry point
        pass

    def mouse_release(self, event):  # pragma: no cover - GUI entry point
        pass

    def leave(self):  # pragma: no cover - GUI entry point
        pass

    def key_press(self, event) -> bool:  # pragma: no cover - GUI entry point
        return False


class WallTool(ToolBase):
    """Press-drag-release wall drawing backed by the editor state."""

    def mouse_press(self, event):  # pragma: no cover - GUI entry point
        if event.button() != Qt.LeftButton:
            return
        self.canvas.state.begin_drag(self.canvas.world_from_event(event))
        self.canvas.refresh()

    def mouse_move(self, event):
        state = self.canvas.state
        point = self.canvas.world_from_event(event)
        # a held button grabs the mouse, so leaveEvent only arrives after release
        if not on_surface(point, state.config.bounds()):
            if state.is_dragging() or state.hover_point is not None:
                self.leave()
            return
        state.pointer_move(point)
        self.canvas.refresh()

    def mouse_release(self, event):  # pragma: no cover - GUI entry point
        if event.button() != Qt.LeftButton:
            return
        wall = self.canvas.state.end_drag()
        if wall is not None:
            self.canvas.post_status_message("Wall added")
        self.canvas.refresh()

    def leave(self):
        self.canvas.state.pointer_leave()
        self.canvas.refresh()

    def key_press(self, event) -> bool:  # pragma: no cover - GUI entry point
        if event.key() != Qt.Key_Z:
            return False
        modifiers = event.modifiers()
        key = "Z" if modifiers & Qt.ShiftModifier else "z"
        handled = self.canvas.state.key_down(
            key,
            ctrl=bool(modifiers & Qt.ControlModifier),
            meta=bool(modifiers & Qt.MetaModifier),
        )
        if handled:
            self.canvas.refresh()
        return handled


def point_from_event(event) -> Point:
    pos = event.position()
    return Point(float(pos.x()), float(pos.y()))


def on_surface(point: Point, bounds: Tuple[float, float]) -> bool:
    """True when ``point`` lies on a drawing surface of size ``bounds``."""
    width, height = bounds
    return 0.0 <= point.x < width and 0.0 <= point.y < height
