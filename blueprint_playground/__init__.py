"""Blueprint Playground: snap-assisted wall drawing.

Only the Qt-free core is re-exported here; the desktop host lives in
``blueprint_playground.app`` and needs PySide6.
"""
from __future__ import annotations

from .config import EditorConfig, load_config
from .geometry import Point, Segment, distance, round_to_grid, segment_length
from .guides import Guide, GuideKind, find_alignment_guides
from .history import EditHistory
from .session import DisplayModel, EditorState, display_to_dict, render
from .snap import SnapKind, SnapResult, resolve, resolve_with_kind

__version__ = "0.1.0"

__all__ = [
    "EditorConfig",
    "load_config",
    "Point",
    "Segment",
    "distance",
    "round_to_grid",
    "segment_length",
    "Guide",
    "GuideKind",
    "find_alignment_guides",
    "EditHistory",
    "DisplayModel",
    "EditorState",
    "display_to_dict",
    "render",
    "SnapKind",
    "SnapResult",
    "resolve",
    "resolve_with_kind",
]
