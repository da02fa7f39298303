"""Algorithm registry — every hull algorithm is a function registered via decorator.

Usage:
    @algorithm(id="convex", description="QuickHull convex boundary")
    def run_convex(request: HullRequest, config: HullConfig) -> HullResult:
        return HullResult(method="convex", points=compute_convex_hull(request.points))

Adding a new algorithm = one decorated function. The pipeline picks it up by id.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from hullkit.engine.config import HullConfig
    from hullkit.engine.context import HullResult
    from hullkit.models.requests import HullRequest

logger = logging.getLogger(__name__)

AlgorithmFn = Callable[["HullRequest", "HullConfig"], "HullResult"]


@dataclass
class AlgorithmSpec:
    id: str
    fn: AlgorithmFn
    description: str = ""
    # True when the algorithm reads request.k
    uses_k: bool = False


class AlgorithmRegistry:
    """Registry of hull algorithms keyed by id."""

    def __init__(self) -> None:
        self._algorithms: dict[str, AlgorithmSpec] = {}

    def register(self, spec: AlgorithmSpec) -> None:
        if spec.id in self._algorithms:
            raise ValueError(f"Duplicate algorithm ID: {spec.id}")
        self._algorithms[spec.id] = spec
        logger.debug("Registered hull algorithm %s", spec.id)

    def get(self, algorithm_id: str) -> AlgorithmSpec:
        return self._algorithms[algorithm_id]

    def all(self) -> list[AlgorithmSpec]:
        return sorted(self._algorithms.values(), key=lambda s: s.id)

    def __contains__(self, algorithm_id: str) -> bool:
        return algorithm_id in self._algorithms

    @property
    def count(self) -> int:
        return len(self._algorithms)


# Module-level singleton
_registry = AlgorithmRegistry()


def get_registry() -> AlgorithmRegistry:
    return _registry


def algorithm(*, id: str, description: str = "", uses_k: bool = False):
    """Decorator to register a hull algorithm."""

    def decorator(fn: AlgorithmFn):
        _registry.register(AlgorithmSpec(id=id, fn=fn, description=description, uses_k=uses_k))
        return fn

    return decorator
