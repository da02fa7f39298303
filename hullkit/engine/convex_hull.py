"""Convex hull — QuickHull divide and conquer.

The leftmost and rightmost points seed a diameter. Each side of it is
extended by repeatedly taking the point furthest from the current edge and
discarding everything inside the triangle it forms. Output is
counter-clockwise (y up), starting at the lowest (x, y) point.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, NamedTuple

from hullkit.engine.context import HullResult
from hullkit.engine.registry import algorithm
from hullkit.utils.geometry import Point, as_points, orientation_sign, point_to_line_distance

if TYPE_CHECKING:
    from hullkit.engine.config import HullConfig
    from hullkit.models.requests import HullRequest

logger = logging.getLogger(__name__)


class _Edge(NamedTuple):
    """Pending hull edge with the points still outside it."""

    points: list[Point]
    start: Point
    end: Point


def split_by_line(points: Sequence[Point], a: Point, b: Point) -> tuple[list[Point], list[Point]]:
    """Partition into (strictly right of a->b, strictly right of b->a).

    Points on the line belong to neither side.
    """
    right: list[Point] = []
    left: list[Point] = []
    for p in points:
        sign = orientation_sign(a, b, p)
        if sign < 0:
            right.append(p)
        elif sign > 0:
            left.append(p)
    return right, left


def furthest_index(points: Sequence[Point], a: Point, b: Point) -> int:
    """Index of the point furthest from line a-b. Ties go to the earliest point."""
    return max(range(len(points)), key=lambda i: point_to_line_distance(points[i], a, b))


def find_hull(points: list[Point], start: Point, end: Point) -> list[Point]:
    """Hull vertices strictly between start and end, for points right of start->end.

    Work-list instead of recursion: each popped edge either is final (no
    points outside it) or is split at its furthest point into two edges.
    Pushing (far, end), then far, then (start, far) emits vertices in order.
    """
    chain: list[Point] = []
    stack: list[_Edge | Point] = [_Edge(points, start, end)]

    while stack:
        item = stack.pop()
        if not isinstance(item, _Edge):
            chain.append(item)
            continue
        if not item.points:
            continue

        index = furthest_index(item.points, item.start, item.end)
        far = item.points[index]
        rest = item.points[:index] + item.points[index + 1:]

        outer_start: list[Point] = []
        outer_end: list[Point] = []
        for p in rest:
            if orientation_sign(item.start, far, p) < 0:
                outer_start.append(p)
            elif orientation_sign(far, item.end, p) < 0:
                outer_end.append(p)
            # else: inside triangle (start, far, end)

        stack.append(_Edge(outer_end, far, item.end))
        stack.append(far)
        stack.append(_Edge(outer_start, item.start, far))

    return chain


def compute_convex_hull(points) -> list[Point]:
    """Convex hull of a 2D point set, counter-clockwise from the leftmost point.

    Fewer than two points come back unchanged. Collinear input reduces to its
    two extreme points; identical points reduce to one.
    """
    pts = as_points(points)
    if len(pts) < 2:
        return pts

    ordered = sorted(pts)
    p1, p2 = ordered[0], ordered[-1]
    if p1 == p2:
        return [p1]

    below, above = split_by_line(ordered[1:-1], p1, p2)
    hull = [p1, *find_hull(below, p1, p2), p2, *find_hull(above, p2, p1)]

    logger.debug("Convex hull: %d of %d points on boundary", len(hull), len(pts))
    return hull


@algorithm(id="convex", description="QuickHull convex boundary")
def run_convex(request: HullRequest, config: HullConfig) -> HullResult:
    return HullResult(method="convex", points=compute_convex_hull(request.points))
