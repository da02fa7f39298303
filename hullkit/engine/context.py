"""HullResult — the value each hull computation hands back to its caller."""

from __future__ import annotations

from dataclasses import dataclass, field

from hullkit.utils.geometry import Point


@dataclass
class HullResult:
    """Boundary produced by one hull computation.

    ``complete`` is False when the concave walk ran out of non-crossing
    candidates before visiting every point; ``points`` then holds the open
    path built so far. ``closed`` reports whether the implicit edge from the
    last point back to the first avoids every non-adjacent edge.
    """

    method: str
    points: list[Point] = field(default_factory=list)
    complete: bool = True
    closed: bool = True
    # Starting search width (concave only)
    k: int | None = None
    attempts: int = 1

    @property
    def partial(self) -> bool:
        return not self.complete

    def __len__(self) -> int:
        return len(self.points)
