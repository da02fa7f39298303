"""Concave hull — greedy k-nearest-neighbour boundary walk.

Starting from the leftmost point, the walk repeatedly looks at the k nearest
unvisited points, ranks them by how little they turn left of the current
heading, and takes the first one whose edge does not cross the path so far.
When none qualifies the search widens by k until it covers the whole pool;
past that the walk stops and the partial path is returned.

Headings are measured relative to the previous edge, starting from straight
down, so the boundary is traced counter-clockwise with the interior kept on
the left.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from hullkit.engine.config import HullConfig
from hullkit.engine.context import HullResult
from hullkit.engine.registry import algorithm
from hullkit.utils.geometry import TWO_PI, Point, Segment, as_points

if TYPE_CHECKING:
    from hullkit.models.requests import HullRequest

logger = logging.getLogger(__name__)


def nearest_indices(pool: Sequence[Point], origin: Point, count: int) -> list[int]:
    """Indices of the ``count`` pool points nearest to origin, nearest first."""
    arr = np.asarray(pool, dtype=float)
    dists = np.hypot(arr[:, 0] - origin[0], arr[:, 1] - origin[1])
    return [int(i) for i in np.argsort(dists, kind="stable")[:count]]


def turn_angle(heading: float, previous: float) -> float:
    """Counter-clockwise rotation from the previous heading, in [0, 2π)."""
    return (heading - previous) % TWO_PI


def _next_step(
    tail: Point,
    previous_heading: float,
    pool: list[Point],
    segments: list[Segment],
    k: int,
    config: HullConfig,
) -> tuple[int, Segment] | None:
    """Pick the next boundary point, widening the search by k on failure."""
    # The last committed segment ends at the tail, so it is adjacent to
    # every candidate and cannot be crossed.
    committed = segments[:-1]
    working_k = k

    while True:
        candidates = nearest_indices(pool, tail, working_k)
        headings = [(i, Segment(tail, pool[i])) for i in candidates]
        headings.sort(key=lambda item: turn_angle(item[1].heading, previous_heading))

        for index, segment in headings:
            if not segment.intersects_any(committed, config.parallel_tolerance):
                return index, segment

        if len(candidates) >= len(pool):
            return None
        working_k += k
        logger.debug("No clear edge from %s, widening search to k=%d", tail, working_k)


def concave_hull_walk(points, k: int, config: HullConfig | None = None) -> HullResult:
    """Run one boundary walk with initial search width k.

    Never raises on a stuck walk: the result is flagged incomplete instead.
    """
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    config = config or HullConfig()

    pts = as_points(points)
    if len(pts) <= 3:
        return HullResult(method="concave", points=pts, k=k)

    ordered = list(dict.fromkeys(sorted(pts)))
    path = [ordered[0]]
    pool = ordered[1:]
    segments: list[Segment] = []
    heading = config.start_heading

    while pool:
        step = _next_step(path[-1], heading, pool, segments, k, config)
        if step is None:
            logger.info(
                "Concave walk stuck at %s with %d of %d points left (k=%d)",
                path[-1],
                len(pool),
                len(ordered),
                k,
            )
            return HullResult(method="concave", points=path, complete=False, closed=False, k=k)

        index, segment = step
        segments.append(segment)
        path.append(segment.end)
        pool = pool[:index] + pool[index + 1:]
        heading = segment.heading

    # Closing edge touches the first and last segments at their endpoints.
    closing = Segment(path[-1], path[0])
    closed = not closing.intersects_any(segments[1:-1], config.parallel_tolerance)

    logger.debug("Concave walk complete: %d points, closed=%s (k=%d)", len(path), closed, k)
    return HullResult(method="concave", points=path, closed=closed, k=k)


def compute_concave_hull(points, k: int) -> list[Point]:
    """Concave boundary as an ordered point list.

    May be a partial, open path when the walk gets stuck; use
    ``concave_hull_walk`` to find out. The next boundary point is only ever
    looked for among the k nearest (then 2k, ...) points, so even points in
    convex position can trap a single walk unless k >= n - 1.
    ``concave_hull_adaptive`` retries until the boundary closes.
    """
    return concave_hull_walk(points, k).points


def concave_hull_adaptive(
    points,
    k: int = 3,
    max_k: int | None = None,
    config: HullConfig | None = None,
) -> HullResult:
    """Retry the walk with k, k+1, ... until it completes and closes cleanly.

    Falls back to the attempt that reached the most points.
    """
    pts = as_points(points)
    limit = max(max_k if max_k is not None else len(pts) - 1, k)

    best: HullResult | None = None
    attempts = 0
    for trial_k in range(k, limit + 1):
        attempts += 1
        result = concave_hull_walk(pts, trial_k, config)
        if result.complete and result.closed:
            result.attempts = attempts
            return result
        if best is None or len(result) > len(best):
            best = result
        logger.debug("Concave attempt k=%d reached %d points, retrying", trial_k, len(result))

    logger.info("Concave hull did not close after %d attempts (k=%d..%d)", attempts, k, limit)
    best.attempts = attempts
    return best


@algorithm(id="concave", description="k-nearest-neighbour concave boundary", uses_k=True)
def run_concave(request: HullRequest, config: HullConfig) -> HullResult:
    if request.adaptive:
        return concave_hull_adaptive(request.points, request.k, config=config)
    return concave_hull_walk(request.points, request.k, config)
