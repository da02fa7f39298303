"""Leaf-node geometry helpers. No engine imports.

Coordinate convention: y axis points up. ``orientation_sign`` is positive when
a point lies left of the directed line, negative when it lies right.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

Point = tuple[float, float]

TWO_PI = 2 * math.pi

# |det| below this means the two segments are parallel or collinear.
PARALLEL_TOLERANCE = 1e-4


def as_points(points: Iterable[Sequence[float]] | np.ndarray) -> list[Point]:
    """Normalise any (N, 2) input into a list of float tuples."""
    arr = np.asarray(points if isinstance(points, np.ndarray) else list(points), dtype=float)
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected an (N, 2) point array, got shape {arr.shape}")
    if not np.isfinite(arr).all():
        raise ValueError("Point coordinates must be finite")
    return [(float(x), float(y)) for x, y in arr]


def distance(a: Point, b: Point) -> float:
    """Euclidean distance."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def angle_to(a: Point, b: Point) -> float:
    """Heading of the vector a->b in radians, normalised into [0, 2π)."""
    radians = math.atan2(b[1] - a[1], b[0] - a[0])
    while radians < 0:
        radians += TWO_PI
    return radians


def orientation_sign(p1: Point, p2: Point, p: Point) -> float:
    """Cross product of (p2 - p1) and (p - p1). > 0 = left, < 0 = right."""
    return (p2[0] - p1[0]) * (p[1] - p1[1]) - (p[0] - p1[0]) * (p2[1] - p1[1])


def point_to_line_distance(p: Point, a: Point, b: Point) -> float:
    """Perpendicular distance from p to the infinite line through a and b.

    Coincident a and b do not define a line; fall back to distance(p, a).
    """
    if a == b:
        return distance(p, a)
    return abs(orientation_sign(a, b, p)) / distance(a, b)


@dataclass(frozen=True)
class Segment:
    """Directed segment start -> end."""

    start: Point
    end: Point

    @property
    def dx(self) -> float:
        return self.end[0] - self.start[0]

    @property
    def dy(self) -> float:
        return self.end[1] - self.start[1]

    @property
    def heading(self) -> float:
        return angle_to(self.start, self.end)

    @property
    def length(self) -> float:
        return distance(self.start, self.end)

    def intersects(self, other: Segment, tolerance: float = PARALLEL_TOLERANCE) -> bool:
        return segments_intersect(self, other, tolerance)

    def intersects_any(
        self, others: Iterable[Segment], tolerance: float = PARALLEL_TOLERANCE
    ) -> bool:
        return any(segments_intersect(self, other, tolerance) for other in others)


def segments_intersect(
    s1: Segment, s2: Segment, tolerance: float = PARALLEL_TOLERANCE
) -> bool:
    """True iff the open segments cross at an interior point of both.

    Parallel and collinear pairs never intersect. Touching at an endpoint
    (parameter exactly 0 or 1) does not count.
    """
    det = s1.dx * s2.dy - s2.dx * s1.dy
    if abs(det) < tolerance:
        return False

    ox = s1.start[0] - s2.start[0]
    oy = s1.start[1] - s2.start[1]

    t = (oy * s2.dx - ox * s2.dy) / det
    if not 0.0 < t < 1.0:
        return False
    u = (oy * s1.dx - ox * s1.dy) / det
    return 0.0 < u < 1.0


def hull_edges(hull: Sequence[Point]) -> list[Segment]:
    """Edges of a closed polygon, including the closing edge last -> first."""
    if len(hull) < 2:
        return []
    if len(hull) == 2:
        return [Segment(hull[0], hull[1])]
    return [Segment(hull[i], hull[(i + 1) % len(hull)]) for i in range(len(hull))]


def signed_area(hull: Sequence[Point]) -> float:
    """Shoelace formula over the closed polygon. Positive = CCW, Negative = CW."""
    if len(hull) < 3:
        return 0.0
    pts = np.asarray(hull, dtype=float)
    x = pts[:, 0]
    y = pts[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))
