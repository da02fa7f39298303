"""Application configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    hullkit_env: str = "development"
    hullkit_log_level: str = "info"

    # Concave walk starting search width when none is given
    hullkit_default_k: int = 3

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Root logging setup for entry points. Libraries never call this on import."""
    name = (level or settings.hullkit_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
