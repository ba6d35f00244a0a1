"""Editor state: committed walls, edit history and the live drag.

``EditorState`` is the only mutable object in the core. Hosts feed it raw
pointer coordinates and key signals, then call :func:`render` to obtain a
side-effect free :class:`DisplayModel` to paint.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from loguru import logger

from .config import EditorConfig
from .geometry import Point, Segment, SegmentSet, ensure_finite
from .guides import Guide, drag_guides, hover_guides
from .history import EMPTY_SNAPSHOT, EditHistory
from .snap import SnapKind, SnapResult, resolve_with_kind

UNDO_KEY = "z"


class SegmentStore:
    """The committed walls, kept as an immutable tuple."""

    def __init__(self) -> None:
        self._segments: SegmentSet = EMPTY_SNAPSHOT

    @property
    def segments(self) -> SegmentSet:
        return self._segments

    def __len__(self) -> int:
        return len(self._segments)

    def append(self, segment: Segment) -> SegmentSet:
        self._segments = self._segments + (segment,)
        return self._segments

    def replace(self, snapshot: SegmentSet) -> None:
        self._segments = tuple(snapshot)

    def clear(self) -> None:
        self._segments = EMPTY_SNAPSHOT


class DragState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass
class DrawingSession:
    state: DragState = DragState.IDLE
    anchor: Optional[Point] = None
    preview: Optional[Segment] = None

    @property
    def active(self) -> bool:
        return self.state is DragState.DRAGGING

    def open(self, anchor: Point, thickness: float) -> None:
        self.state = DragState.DRAGGING
        self.anchor = anchor
        self.preview = Segment(anchor, anchor, thickness)

    def reset(self) -> None:
        self.state = DragState.IDLE
        self.anchor = None
        self.preview = None


@dataclass(frozen=True)
class DisplayModel:
    segments: SegmentSet
    preview: Optional[Segment]
    hover_point: Optional[Point]
    snap_kind: Optional[SnapKind]
    hover_guides: Tuple[Guide, ...]
    drag_guides: Tuple[Guide, ...]
    grid_pitch: float
    grid_color: str
    thickness: float
    canvas_width: float
    canvas_height: float


@dataclass
class EditorState:
    config: EditorConfig = field(default_factory=EditorConfig)
    store: SegmentStore = field(default_factory=SegmentStore)
    history: EditHistory = field(default_factory=EditHistory)
    session: DrawingSession = field(default_factory=DrawingSession)
    hover_point: Optional[Point] = None
    last_snap: Optional[SnapResult] = None

    # ------------------------------------------------------------------
    # Read side
    def get_segments(self) -> SegmentSet:
        return self.store.segments

    def get_preview(self) -> Optional[Segment]:
        return self.session.preview if self.session.active else None

    def get_hover_guides(self) -> Tuple[Guide, ...]:
        return tuple(
            hover_guides(
                self.hover_point,
                self.store.segments,
                self.config.grid_pitch,
                self.config.bounds(),
                dragging=self.session.active,
            )
        )

    def get_drag_guides(self) -> Tuple[Guide, ...]:
        return tuple(
            drag_guides(self.get_preview(), self.store.segments, self.config.grid_pitch, self.config.bounds())
        )

    def is_dragging(self) -> bool:
        return self.session.active

    # ------------------------------------------------------------------
    # Pointer input
    def _resolve(self, raw: Point) -> Point:
        ensure_finite(raw)
        self.last_snap = resolve_with_kind(raw, self.store.segments, self.config.grid_pitch)
        return self.last_snap.point

    def begin_drag(self, raw: Point) -> Segment:
        """Anchor a new wall at the resolved pointer-down location."""
        if self.session.active:
            logger.debug("pointer down during drag: re-anchoring")
        anchor = self._resolve(raw)
        self.hover_point = anchor
        self.session.open(anchor, self.config.thickness)
        return self.session.preview

    def move_drag(self, raw: Point) -> Optional[Segment]:
        """Move the free end of the preview; the anchor never moves."""
        end = self._resolve(raw)
        self.hover_point = end
        if not self.session.active or self.session.anchor is None:
            return None
        self.session.preview = Segment(self.session.anchor, end, self.config.thickness)
        return self.session.preview

    def pointer_move(self, raw: Point) -> Optional[Segment]:
        return self.move_drag(raw)

    def end_drag(self) -> Optional[Segment]:
        """Commit the preview unless it has zero length; returns the wall committed."""
        if not self.session.active:
            return None
        preview = self.session.preview
        self.session.reset()
        if preview is None or preview.is_degenerate():
            logger.debug("discarded zero-length wall")
            return None
        snapshot = self.store.append(preview)
        self.history.commit(snapshot)
        logger.debug("committed wall {} -> {}", preview.start.as_tuple(), preview.end.as_tuple())
        return preview

    def pointer_leave(self) -> Optional[Segment]:
        """Leaving the surface ends an active drag exactly like pointer-up."""
        self.hover_point = None
        self.last_snap = None
        return self.end_drag()

    # ------------------------------------------------------------------
    # Commands
    def undo(self) -> bool:
        snapshot = self.history.undo()
        if snapshot is None:
            return False
        self.store.replace(snapshot)
        return True

    def clear(self) -> None:
        self.session.reset()
        self.store.clear()
        self.history.clear()
        logger.debug("editor cleared")

    def key_down(self, key: str, *, ctrl: bool = False, meta: bool = False) -> bool:
        """Handle a key signal; True means the host must suppress its default action."""
        if (ctrl or meta) and key == UNDO_KEY:
            self.undo()
            return True
        return False

    # ------------------------------------------------------------------
    # Configuration; committed walls are never re-snapped
    def set_grid_pitch(self, pitch: float) -> None:
        self.apply_config(grid_pitch=pitch)

    def set_thickness(self, thickness: float) -> None:
        self.apply_config(thickness=thickness)

    def set_grid_color(self, color: str) -> None:
        self.apply_config(grid_color=color)

    def apply_config(self, **changes: Any) -> EditorConfig:
        """Apply every change or none of them; ``None`` values are skipped."""
        changes = {key: value for key, value in changes.items() if value is not None}
        for key in ("grid_pitch", "thickness"):
            if key in changes:
                value = float(changes[key])
                if not (math.isfinite(value) and value > 0.0):
                    raise ValueError(f"{key} must be a positive finite number, got {changes[key]}")
        config = self.config.updated(**changes)
        self.config = config
        logger.debug("config updated: {}", changes)
        return config


def render(state: EditorState) -> DisplayModel:
    """Project the editor state into everything a renderer needs to paint."""
    snap = state.last_snap
    return DisplayModel(
        segments=state.get_segments(),
        preview=state.get_preview(),
        hover_point=state.hover_point,
        snap_kind=snap.kind if snap is not None and state.hover_point is not None else None,
        hover_guides=state.get_hover_guides(),
        drag_guides=state.get_drag_guides(),
        grid_pitch=state.config.grid_pitch,
        grid_color=state.config.grid_color,
        thickness=state.config.thickness,
        canvas_width=state.config.canvas_width,
        canvas_height=state.config.canvas_height,
    )


def _point_dict(point: Optional[Point]) -> Optional[Dict[str, float]]:
    if point is None:
        return None
    return {"x": point.x, "y": point.y}


def _segment_dict(segment: Optional[Segment]) -> Optional[Dict[str, Any]]:
    if segment is None:
        return None
    return {
        "start": _point_dict(segment.start),
        "end": _point_dict(segment.end),
        "thickness": segment.thickness,
    }


def _guide_dict(guide: Guide) -> Dict[str, Any]:
    return {
        "kind": guide.kind.value,
        "start": _point_dict(guide.start),
        "end": _point_dict(guide.end),
        "radius": guide.radius,
    }


def display_to_dict(model: DisplayModel) -> Dict[str, Any]:
    """Flatten a display model into JSON-friendly primitives."""
    return {
        "segments": [_segment_dict(s) for s in model.segments],
        "preview": _segment_dict(model.preview),
        "hover_point": _point_dict(model.hover_point),
        "snap_kind": model.snap_kind.value if model.snap_kind is not None else None,
        "hover_guides": [_guide_dict(g) for g in model.hover_guides],
        "drag_guides": [_guide_dict(g) for g in model.drag_guides],
        "grid_pitch": model.grid_pitch,
        "grid_color": model.grid_color,
        "thickness": model.thickness,
        "canvas_width": model.canvas_width,
        "canvas_height": model.canvas_height,
    }


__all__ = [
    "UNDO_KEY",
    "SegmentStore",
    "DragState",
    "DrawingSession",
    "DisplayModel",
    "EditorState",
    "render",
    "display_to_dict",
]
