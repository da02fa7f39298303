"""Hull engine configuration — tolerances and walk defaults."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class HullConfig:
    """Tunables shared by the convex and concave engines."""

    # Segment intersection: |det| below this = parallel/collinear
    parallel_tolerance: float = 1e-4

    # Concave walk: heading the start point is considered to arrive with.
    # Straight down, so the walk leaves along the lower boundary.
    start_heading: float = 1.5 * math.pi

    # Initial k-nearest search width
    default_k: int = 3
