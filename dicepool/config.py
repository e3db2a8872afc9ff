"""Application configuration using pydantic-settings."""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field can be set with a DICEPOOL_ prefixed variable, e.g.
    DICEPOOL_DEFAULT_FACE_TYPE=u8.
    """

    model_config = SettingsConfigDict(
        env_prefix="DICEPOOL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Dice
    default_face_type: str = "u32"  # Used when no face type is passed
    max_dice: int | None = None  # Largest die count the notation parser accepts; None is no cap

    # Logging
    log_level: str = "WARNING"
    debug: bool = False  # Forces DEBUG logging in the CLI

    @field_validator("default_face_type")
    @classmethod
    def _known_face_type(cls, value: str) -> str:
        # Imported here: the dice package reads settings at call time
        from dicepool.dice.faces import FACE_TYPES

        value = value.lower()
        if value not in FACE_TYPES:
            raise ValueError(f"unknown face type {value!r}")
        return value

    @field_validator("max_dice")
    @classmethod
    def _positive_max_dice(cls, value: int | None) -> int | None:
        if value is not None and value < 1:
            raise ValueError("max_dice must be at least 1")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return value

    @property
    def effective_log_level(self) -> int:
        """Numeric logging level, honoring the debug switch."""
        if self.debug:
            return logging.DEBUG
        return logging.getLevelNamesMapping()[self.log_level]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
