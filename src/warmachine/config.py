"""Lightweight configuration for the war machine."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, overridable through ``WARMACHINE_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="WARMACHINE_", env_file=".env", env_file_encoding="utf-8"
    )

    rules_version: str = Field(default="1.0", description="Ruleset version used by the domain")
    world_seed: str = Field(
        default="war-machine",
        description="Root of every deterministic seed (war targeting, battle rolls)",
        min_length=1,
    )
    validate_static_data: bool = Field(
        default=True,
        description="Check the adjacency, border and city tables when a world is built",
    )
    initialize_wars: bool = Field(
        default=True,
        description="Let expansionist countries declare their opening wars when a world is built",
    )
    log_level: str = Field(default="INFO", description="Level applied to the warmachine logger")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Apply the configured level to the package logger; handlers are left to the host."""

    settings = settings or get_settings()
    logger = logging.getLogger("warmachine")
    logger.setLevel(settings.log_level)
    return logger
