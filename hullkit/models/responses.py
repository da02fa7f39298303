"""Hull response model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HullResponse(BaseModel):
    method: str
    hull: list[tuple[float, float]] = Field(default_factory=list)
    complete: bool = True
    closed: bool = True
    k: int | None = None
    attempts: int = 0
    input_count: int = 0
    hull_count: int = 0
    processing_time_ms: float = 0.0
    errors: dict[str, str] = Field(default_factory=dict)
