"""Geometry helpers for the Blueprint Playground.

Points and walls are small immutable value types so snapshots of the drawing
can be shared freely between the segment store, the edit history and any
renderer without defensive copies.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

import numpy as np


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Segment:
    """A straight wall between two points.

    ``thickness`` is a display attribute only and never enters the geometry.
    """

    start: Point
    end: Point
    thickness: float = 1.0

    def is_degenerate(self) -> bool:
        return self.start == self.end

    def with_end(self, end: Point) -> "Segment":
        return Segment(self.start, end, self.thickness)


SegmentSet = Tuple[Segment, ...]


def ensure_finite(point: Point) -> Point:
    """Reject NaN/inf coordinates before they reach the resolver."""
    if not (math.isfinite(point.x) and math.isfinite(point.y)):
        raise ValueError(f"Point coordinates must be finite, got ({point.x}, {point.y})")
    return point


def distance(a: Point, b: Point) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def segment_length(segment: Segment) -> float:
    """Return the Euclidean length of ``segment``."""
    return distance(segment.start, segment.end)


def round_to_grid(value: float, pitch: float) -> float:
    """Return the multiple of ``pitch`` nearest to ``value``."""
    return round(value / pitch) * pitch


def component_spans(segment: Segment) -> Tuple[float, float]:
    """Absolute x and y extents of ``segment``."""
    return (abs(segment.end.x - segment.start.x), abs(segment.end.y - segment.start.y))


def bounding_box(segment: Segment) -> Tuple[Point, Point]:
    """Return the (min corner, max corner) of the segment's bounding box."""
    lo = Point(min(segment.start.x, segment.end.x), min(segment.start.y, segment.end.y))
    hi = Point(max(segment.start.x, segment.end.x), max(segment.start.y, segment.end.y))
    return lo, hi


def segments_array(segments: Sequence[Segment]) -> np.ndarray:
    """Pack walls into an ``(n, 4)`` array of ``x1, y1, x2, y2`` rows."""
    if not segments:
        return np.zeros((0, 4), dtype=float)
    return np.array(
        [(s.start.x, s.start.y, s.end.x, s.end.y) for s in segments],
        dtype=float,
    )


def total_length(segments: Iterable[Segment]) -> float:
    """Return the summed length of all walls."""
    data = segments_array(list(segments))
    if data.size == 0:
        return 0.0
    return float(np.sum(np.hypot(data[:, 2] - data[:, 0], data[:, 3] - data[:, 1])))


__all__ = [
    "Point",
    "Segment",
    "SegmentSet",
    "ensure_finite",
    "distance",
    "segment_length",
    "round_to_grid",
    "component_spans",
    "bounding_box",
    "segments_array",
    "total_length",
]
