"""hullkit — convex and concave boundaries of 2D point sets."""

from hullkit.engine import (
    HullConfig,
    HullPipeline,
    HullResult,
    compute_concave_hull,
    compute_convex_hull,
    concave_hull_adaptive,
    concave_hull_walk,
)
from hullkit.utils.geometry import Point, Segment

__version__ = "0.1.0"

__all__ = [
    "HullConfig",
    "HullPipeline",
    "HullResult",
    "Point",
    "Segment",
    "compute_concave_hull",
    "compute_convex_hull",
    "concave_hull_adaptive",
    "concave_hull_walk",
]
