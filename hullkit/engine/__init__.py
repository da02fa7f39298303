"""Hull engines — convex QuickHull and concave k-nearest-neighbour walk."""

from hullkit.engine.registry import algorithm, get_registry
from hullkit.engine.context import HullResult
from hullkit.engine.config import HullConfig
from hullkit.engine.convex_hull import compute_convex_hull
from hullkit.engine.concave_hull import (
    compute_concave_hull,
    concave_hull_adaptive,
    concave_hull_walk,
)
from hullkit.engine.pipeline import HullPipeline, create_pipeline

__all__ = [
    "algorithm",
    "get_registry",
    "HullResult",
    "HullConfig",
    "compute_convex_hull",
    "compute_concave_hull",
    "concave_hull_adaptive",
    "concave_hull_walk",
    "HullPipeline",
    "create_pipeline",
]
