"""Hull request model."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class HullRequest(BaseModel):
    method: Literal["convex", "concave"] = "convex"
    points: list[tuple[float, float]] = Field(default_factory=list)
    # Initial neighbour search width for the concave walk; None = configured default
    k: int | None = Field(default=None, ge=1)
    # Concave only: retry with larger k until the boundary closes
    adaptive: bool = False
