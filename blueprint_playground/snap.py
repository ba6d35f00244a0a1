"""Snap resolution for wall endpoints.

A raw pointer location is mapped to a canonical point with a fixed priority:

1. the nearest existing wall endpoint within half a grid pitch, returned
   verbatim;
2. otherwise the grid-rounded point, with each axis overridden by any wall
   endpoint coordinate that lies within half a pitch on that axis.

Walls are scanned in insertion order. Endpoint ties keep the first candidate
found (start before end); axis alignment keeps the *last* qualifying
coordinate, not the closest one.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .geometry import Point, Segment, distance, ensure_finite, round_to_grid

class SnapKind(str, Enum):
    END = "end"
    ALIGN = "align"
    GRID = "grid"


@dataclass(frozen=True)
class SnapResult:
    point: Point
    kind: SnapKind


def snap_threshold(pitch: float) -> float:
    return pitch / 2.0


def nearest_endpoint(raw: Point, segments: Sequence[Segment], threshold: float) -> Optional[Point]:
    """Return the closest wall endpoint strictly within ``threshold`` of ``raw``."""
    best: Optional[Point] = None
    best_dist = float(threshold)
    for segment in segments:
        for candidate in (segment.start, segment.end):
            dist = distance(raw, candidate)
            if dist < best_dist:
                best = candidate
                best_dist = dist
    return best


def align_to_segments(raw: Point, segments: Sequence[Segment], pitch: float) -> tuple[Point, bool]:
    """Grid-round ``raw`` then apply per-axis alignment overrides.

    Returns the resolved point and whether any axis was aligned to a wall.
    """
    threshold = snap_threshold(pitch)
    x = round_to_grid(raw.x, pitch)
    y = round_to_grid(raw.y, pitch)
    aligned = False
    for segment in segments:
        if abs(raw.y - segment.start.y) < threshold:
            y = segment.start.y
            aligned = True
        if abs(raw.y - segment.end.y) < threshold:
            y = segment.end.y
            aligned = True
        if abs(raw.x - segment.start.x) < threshold:
            x = segment.start.x
            aligned = True
        if abs(raw.x - segment.end.x) < threshold:
            x = segment.end.x
            aligned = True
    return Point(x, y), aligned


def resolve_with_kind(raw: Point, segments: Sequence[Segment], pitch: float) -> SnapResult:
    """Resolve ``raw`` and report which rule produced the result."""
    ensure_finite(raw)
    if not (math.isfinite(pitch) and pitch > 0):
        raise ValueError(f"Grid pitch must be a positive finite number, got {pitch}")
    endpoint = nearest_endpoint(raw, segments, snap_threshold(pitch))
    if endpoint is not None:
        return SnapResult(endpoint, SnapKind.END)
    point, aligned = align_to_segments(raw, segments, pitch)
    return SnapResult(point, SnapKind.ALIGN if aligned else SnapKind.GRID)


def resolve(raw: Point, segments: Sequence[Segment], pitch: float) -> Point:
    return resolve_with_kind(raw, segments, pitch).point


__all__ = [
    "SnapKind",
    "SnapResult",
    "snap_threshold",
    "nearest_endpoint",
    "align_to_segments",
    "resolve_with_kind",
    "resolve",
]
