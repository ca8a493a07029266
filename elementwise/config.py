"""
Configuration settings for ElementWise.

Uses Pydantic Settings for environment variable management with .env file support.
Every field can be overridden with an ``ELEMENTWISE_`` prefixed variable,
e.g. ``ELEMENTWISE_MEMORY_PAIRS=4``.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ELEMENTWISE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Element Catalog
    # ========================================
    data_path: Path | None = Field(
        default=None,
        description="Override path for the element dataset (defaults to the packaged JSON)",
    )

    # ========================================
    # Periodic Table View
    # ========================================
    default_temperature_k: float = Field(
        default=298.0,
        description="Temperature used for the state view when none is given",
    )
    bohr_canvas_size: int = Field(
        default=200,
        ge=20,
        description="Canvas size for the detail-view Bohr diagram",
    )
    max_compare: int = Field(
        default=4,
        ge=1,
        le=4,
        description="Maximum number of elements in the comparison set",
    )

    # ========================================
    # Learning Modes
    # ========================================
    quiz_default_difficulty: Literal["easy", "medium", "hard"] = Field(
        default="easy",
        description="Difficulty tier a new quiz session starts on",
    )
    memory_pairs: int = Field(
        default=6,
        ge=1,
        description="Number of element pairs dealt in a memory game",
    )
    memory_match_delay_s: float = Field(
        default=0.5,
        ge=0.0,
        description="Seconds a matched pair stays revealed before it is locked in",
    )
    memory_mismatch_delay_s: float = Field(
        default=1.0,
        ge=0.0,
        description="Seconds a mismatched pair stays revealed before it is hidden",
    )
    flashcard_deck_size: int = Field(
        default=20,
        ge=1,
        description="Maximum number of cards dealt into a flashcard deck",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for reproducible sessions (unset = system entropy)",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: str = Field(
        default="WARNING",
        description="Minimum loguru level written to stderr by the CLI",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
