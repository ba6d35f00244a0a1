"""Advisory guide geometry shown while drawing walls.

Guides never feed back into the drawing; they only describe what a renderer
should paint: full-width alignment rulers, equal-length markers, the
near-square outline of the wall being drawn and endpoint highlights around
the hover point.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .geometry import Point, Segment, bounding_box, component_spans, distance, segment_length
from .snap import snap_threshold

Bounds = Tuple[float, float]

MARKER_RADIUS = 6.0


class GuideKind(str, Enum):
    RULER = "ruler"
    LENGTH = "length"
    SQUARE = "square"
    ENDPOINT = "endpoint"


@dataclass(frozen=True)
class Guide:
    """One piece of advisory geometry.

    Rulers and square outlines span ``start`` to ``end`` (for squares these are
    the min/max corners). Markers are circles of ``radius`` centred on
    ``start``, with ``end`` equal to ``start``.
    """

    kind: GuideKind
    start: Point
    end: Point
    radius: float = 0.0


def _horizontal_ruler(y: float, bounds: Bounds) -> Guide:
    return Guide(GuideKind.RULER, Point(0.0, y), Point(float(bounds[0]), y))


def _vertical_ruler(x: float, bounds: Bounds) -> Guide:
    return Guide(GuideKind.RULER, Point(x, 0.0), Point(x, float(bounds[1])))


def _marker(kind: GuideKind, center: Point) -> Guide:
    return Guide(kind, center, center, MARKER_RADIUS)


def alignment_rulers(target: Point, segments: Sequence[Segment], pitch: float, bounds: Bounds) -> List[Guide]:
    """One ruler per (wall, axis) whose endpoints line up with ``target``.

    Within a wall the end coordinate wins over the start coordinate when both
    qualify, matching the resolver's last-match rule, so a ruler always sits on
    the coordinate a snap would land on.
    """
    threshold = snap_threshold(pitch)
    guides: List[Guide] = []
    for segment in segments:
        align_y: Optional[float] = None
        if abs(target.y - segment.start.y) < threshold:
            align_y = segment.start.y
        if abs(target.y - segment.end.y) < threshold:
            align_y = segment.end.y
        if align_y is not None:
            guides.append(_horizontal_ruler(align_y, bounds))

        align_x: Optional[float] = None
        if abs(target.x - segment.start.x) < threshold:
            align_x = segment.start.x
        if abs(target.x - segment.end.x) < threshold:
            align_x = segment.end.x
        if align_x is not None:
            guides.append(_vertical_ruler(align_x, bounds))
    return guides


def find_alignment_guides(subject: Segment, segments: Sequence[Segment], pitch: float, bounds: Bounds) -> List[Guide]:
    return alignment_rulers(subject.end, segments, pitch, bounds)


def length_match_markers(subject: Segment, segments: Sequence[Segment], pitch: float) -> List[Guide]:
    """Mark ``subject.end`` once if any wall has nearly the same length."""
    threshold = snap_threshold(pitch)
    current = segment_length(subject)
    for segment in segments:
        if abs(current - segment_length(segment)) < threshold:
            return [_marker(GuideKind.LENGTH, subject.end)]
    return []


def square_marker(subject: Segment, pitch: float) -> List[Guide]:
    """Outline the bounding box when its width and height nearly agree."""
    dx, dy = component_spans(subject)
    if abs(dx - dy) >= snap_threshold(pitch):
        return []
    lo, hi = bounding_box(subject)
    return [Guide(GuideKind.SQUARE, lo, hi)]


def endpoint_highlights(point: Point, segments: Sequence[Segment], pitch: float) -> List[Guide]:
    # Looser than the alignment threshold: a full pitch.
    guides: List[Guide] = []
    for segment in segments:
        if distance(point, segment.start) < pitch or distance(point, segment.end) < pitch:
            guides.append(_marker(GuideKind.ENDPOINT, segment.start))
            guides.append(_marker(GuideKind.ENDPOINT, segment.end))
    return guides


def hover_guides(
    point: Optional[Point],
    segments: Sequence[Segment],
    pitch: float,
    bounds: Bounds,
    dragging: bool = False,
) -> List[Guide]:
    """Guides around a resting pointer; empty while a drag is active."""
    if point is None or dragging:
        return []
    return alignment_rulers(point, segments, pitch, bounds) + endpoint_highlights(point, segments, pitch)


def drag_guides(preview: Optional[Segment], segments: Sequence[Segment], pitch: float, bounds: Bounds) -> List[Guide]:
    if preview is None:
        return []
    guides = find_alignment_guides(preview, segments, pitch, bounds)
    guides += length_match_markers(preview, segments, pitch)
    guides += square_marker(preview, pitch)
    return guides


__all__ = [
    "Bounds",
    "MARKER_RADIUS",
    "GuideKind",
    "Guide",
    "alignment_rulers",
    "find_alignment_guides",
    "length_match_markers",
    "square_marker",
    "endpoint_highlights",
    "hover_guides",
    "drag_guides",
]
