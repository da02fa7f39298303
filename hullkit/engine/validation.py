"""Validate hulls — containment, self-intersection, simplicity."""

from __future__ import annotations

from collections.abc import Sequence

from shapely.geometry import LinearRing, Polygon

from hullkit.utils.geometry import Point, Segment, as_points, hull_edges, orientation_sign


def crossing_edges(hull: Sequence[Point], closed: bool = True) -> list[tuple[int, int]]:
    """Index pairs of non-adjacent edges that cross each other.

    Edge i runs from hull[i] to hull[i + 1]. With ``closed`` the final edge
    back to hull[0] is included and is adjacent to edge 0.
    """
    if closed:
        edges = hull_edges(hull)
    else:
        edges = [Segment(hull[i], hull[i + 1]) for i in range(len(hull) - 1)]
    n = len(edges)

    pairs: list[tuple[int, int]] = []
    for i in range(n):
        for j in range(i + 2, n):
            if closed and i == 0 and j == n - 1:
                continue
            if edges[i].intersects(edges[j]):
                pairs.append((i, j))
    return pairs


def contains_all(hull: Sequence[Point], points, tolerance: float = 1e-9) -> bool:
    """True if every point is on or inside a counter-clockwise convex hull."""
    pts = as_points(points)
    if not hull:
        return not pts
    if len(hull) == 1:
        return all(p == hull[0] for p in pts)
    if len(hull) == 2:
        # Zero-area hull: points must lie on its line
        return all(abs(orientation_sign(hull[0], hull[1], p)) <= tolerance for p in pts)
    for edge in hull_edges(hull):
        for p in pts:
            if orientation_sign(edge.start, edge.end, p) < -tolerance:
                return False
    return True


def validate_hull(hull: Sequence[Point], points=None) -> dict:
    """Check a closed hull and report what is wrong with it.

    Returns a dict with:
    - valid: bool
    - vertex_count: int
    - area: float (shapely, 0 for fewer than 3 vertices)
    - simple: bool (shapely ring simplicity)
    - issues: list[str]
    """
    hull = as_points(hull)
    issues: list[str] = []

    if len(hull) < 3:
        return {
            "valid": len(hull) > 0,
            "vertex_count": len(hull),
            "area": 0.0,
            "simple": True,
            "issues": [] if hull else ["Empty hull"],
        }

    for i, j in crossing_edges(hull):
        issues.append(f"Edge {i} crosses edge {j}")

    simple = bool(LinearRing(hull).is_simple)
    if not simple and not issues:
        issues.append("Ring touches or overlaps itself")

    if points is not None:
        inputs = set(as_points(points))
        invented = [p for p in hull if p not in inputs]
        if invented:
            issues.append(f"{len(invented)} hull vertices are not input points")
    if len(set(hull)) != len(hull):
        issues.append("Hull repeats a vertex")

    return {
        "valid": len(issues) == 0,
        "vertex_count": len(hull),
        "area": float(Polygon(hull).area),
        "simple": simple,
        "issues": issues,
    }
