"""
Configuration settings for the birdly practice engine.

Uses Pydantic Settings for environment variable management with .env file support.
Every tuning constant of the scheduler, the mastery update rule and the word-search
generator lives here so it can be overridden without code changes.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables (prefix ``BIRDLY_``)."""

    model_config = SettingsConfigDict(
        env_prefix="BIRDLY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Introduction Pacing
    # ========================================
    intro_window: float = Field(
        default=0.5,
        gt=0.0,
        le=1.0,
        description="Fraction of set progress within which all groups should be introduced",
    )
    intro_probability_floor: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Introduction probability at the end of the window",
    )
    intro_probability_span: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Extra introduction probability at the start of the window",
    )

    # ========================================
    # Group / Variant Selection
    # ========================================
    min_group_weight: float = Field(
        default=0.1,
        gt=0.0,
        description="Minimum selection weight of an introduced group",
    )
    graduation_threshold: float = Field(
        default=80.0,
        ge=0.0,
        le=100.0,
        description="Primary mastery above which the primary variant loses its preference",
    )
    min_exposure_threshold: float = Field(
        default=20.0,
        ge=0.0,
        le=100.0,
        description="Primary mastery required before alternate variants are shown",
    )
    primary_floor_weight: float = Field(
        default=0.5,
        gt=0.0,
        description="Lowest selection weight of the primary variant",
    )
    alternate_base_weight: float = Field(
        default=0.2,
        gt=0.0,
        le=1.0,
        description="Alternate variant weight right at the exposure threshold",
    )
    primary_variant: str = Field(
        default="primary",
        description="Variant tag identifying a group's primary representation",
    )

    # ========================================
    # Mastery Update Rule
    # ========================================
    intro_bootstrap_mastery: float = Field(
        default=5.0,
        gt=0.0,
        le=100.0,
        description="Mastery assigned when an introduction completes",
    )
    penalty_floor: float = Field(
        default=1.0,
        gt=0.0,
        le=100.0,
        description="Lowest mastery an introduced entity can fall to",
    )
    gain_min_base: float = Field(
        default=10.0,
        ge=0.0,
        description="Lower bound of the gain draw before difficulty and scaling",
    )
    gain_max_base: float = Field(
        default=15.0,
        ge=0.0,
        description="Upper bound of the gain draw before difficulty and scaling",
    )
    gain_difficulty_factor: float = Field(
        default=20.0,
        ge=0.0,
        description="Extra gain per unit of exercise difficulty",
    )
    min_gain_scale: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Smallest diminishing-returns multiplier",
    )
    gain_scale_decay: float = Field(
        default=0.4,
        ge=0.0,
        le=1.0,
        description="Multiplier drop from 0% to 100% mastery",
    )
    penalty_base: float = Field(
        default=5.0,
        ge=0.0,
        description="Mastery lost on a wrong answer at difficulty 0",
    )
    penalty_difficulty_factor: float = Field(
        default=2.0,
        ge=0.0,
        description="Penalty reduction per unit of exercise difficulty",
    )

    # ========================================
    # Word Search Generation
    # ========================================
    max_grid_size: int = Field(
        default=10,
        ge=1,
        le=30,
        description="Largest grid edge the generator may grow to",
    )
    min_grid_size: int = Field(
        default=4,
        ge=1,
        description="Smallest grid edge the generator starts from",
    )
    grid_size_step: int = Field(
        default=2,
        ge=1,
        description="Grid edge growth after a failed search round",
    )
    max_size_rounds: int = Field(
        default=3,
        ge=1,
        description="Number of grid sizes tried before giving up",
    )
    attempts_per_size: int = Field(
        default=100,
        ge=1,
        description="Random restarts of the path search per grid size",
    )
    max_expansions_per_attempt: int | None = Field(
        default=20_000,
        ge=1,
        description="Cap on cell placements per search attempt (None = exhaustive)",
    )
    filler_alphabet: str = Field(
        default="ABCDEFGHIJKLMNOPQRSTUVWXYZ",
        min_length=1,
        description="Letters used to fill non-path cells",
    )

    # ========================================
    # Exercises
    # ========================================
    max_incorrect_attempts: int = Field(
        default=3,
        ge=1,
        description="Wrong answers allowed in letter selection and word search",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: str = Field(
        default="WARNING",
        description="Log level for CLI runs",
    )

    def get_scheduler_config(self) -> dict[str, float | str]:
        """Get scheduler tuning values as a dictionary."""
        return {
            "intro_window": self.intro_window,
            "intro_probability_floor": self.intro_probability_floor,
            "intro_probability_span": self.intro_probability_span,
            "min_group_weight": self.min_group_weight,
            "graduation_threshold": self.graduation_threshold,
            "min_exposure_threshold": self.min_exposure_threshold,
            "primary_floor_weight": self.primary_floor_weight,
            "alternate_base_weight": self.alternate_base_weight,
            "primary_variant": self.primary_variant,
        }

    def get_mastery_update_config(self) -> dict[str, float]:
        """Get mastery update rule values as a dictionary."""
        return {
            "intro_bootstrap_mastery": self.intro_bootstrap_mastery,
            "penalty_floor": self.penalty_floor,
            "gain_min_base": self.gain_min_base,
            "gain_max_base": self.gain_max_base,
            "gain_difficulty_factor": self.gain_difficulty_factor,
            "min_gain_scale": self.min_gain_scale,
            "gain_scale_decay": self.gain_scale_decay,
            "penalty_base": self.penalty_base,
            "penalty_difficulty_factor": self.penalty_difficulty_factor,
        }

    def get_word_search_config(self) -> dict[str, int | str | None]:
        """Get word-search generation values as a dictionary."""
        return {
            "max_grid_size": self.max_grid_size,
            "min_grid_size": self.min_grid_size,
            "grid_size_step": self.grid_size_step,
            "max_size_rounds": self.max_size_rounds,
            "attempts_per_size": self.attempts_per_size,
            "max_expansions_per_attempt": self.max_expansions_per_attempt,
            "filler_alphabet": self.filler_alphabet,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
