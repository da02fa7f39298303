"""Hull pipeline — runs the requested algorithm with timing and error capture."""

from __future__ import annotations

import logging
import time

from hullkit.config import settings
from hullkit.engine.config import HullConfig
from hullkit.engine.registry import AlgorithmRegistry, get_registry
from hullkit.models.requests import HullRequest
from hullkit.models.responses import HullResponse

logger = logging.getLogger(__name__)


class HullPipeline:
    """Dispatches hull requests to registered algorithms."""

    def __init__(
        self,
        registry: AlgorithmRegistry | None = None,
        config: HullConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or HullConfig()

    def run(self, request: HullRequest) -> HullResponse:
        """Compute the hull described by the request.

        Algorithm failures are recorded in ``errors`` rather than raised, so
        callers always get a response back.
        """
        spec = self.registry.get(request.method)
        if spec.uses_k and request.k is None:
            request = request.model_copy(update={"k": self.config.default_k})

        response = HullResponse(method=request.method, input_count=len(request.points))

        t0 = time.perf_counter()
        try:
            result = spec.fn(request, self.config)
        except Exception as e:
            response.errors[spec.id] = str(e)
            response.complete = False
            response.closed = False
            logger.warning("  %s FAILED: %s", spec.id, e)
        else:
            response.hull = result.points
            response.complete = result.complete
            response.closed = result.closed
            response.k = result.k
            response.attempts = result.attempts
            response.hull_count = len(result.points)
        response.processing_time_ms = round((time.perf_counter() - t0) * 1000, 3)

        logger.info(
            "Hull %s: %d -> %d points in %.1fms%s",
            spec.id,
            response.input_count,
            response.hull_count,
            response.processing_time_ms,
            "" if response.complete else " (partial)",
        )
        return response


def create_pipeline(config: HullConfig | None = None) -> HullPipeline:
    """Factory function for creating a pipeline instance.

    Without an explicit config the concave default k comes from settings.
    """
    return HullPipeline(config=config or HullConfig(default_k=settings.hullkit_default_k))
