"""
Game settings using Pydantic.

World tuning lives in an immutable WorldConfig that is passed to the
session. Application settings are loaded from environment variables
with .env file support.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class WorldConfig(BaseModel):
    """World dimensions and physics tuning."""

    model_config = ConfigDict(frozen=True)

    # Grid (cells)
    screen_width: int = Field(default=80, gt=0)
    screen_height: int = Field(default=60, gt=0)

    # Physics step duration in milliseconds
    physics_step_ms: float = Field(default=75.0, gt=0.0)

    # Bird spawn cell
    bird_start_x: int = 5
    bird_start_y: int = Field(default=25, ge=0)

    # Gap center range, half-open [gap_min, gap_max)
    gap_min: int = 10
    gap_max: int = 40

    # Gap size narrows by one per point down to the floor
    base_gap_size: int = 20
    min_gap_size: int = Field(default=2, ge=2)

    # Bird velocity, in cells per physics step
    gravity_step: float = Field(default=0.2, gt=0.0)
    gravity_cap: float = 2.0
    flap_impulse: float = -2.0

    @model_validator(mode="after")
    def _check_ranges(self) -> "WorldConfig":
        if self.gap_max <= self.gap_min:
            raise ValueError("gap_max must be greater than gap_min")
        if self.base_gap_size < self.min_gap_size:
            raise ValueError("base_gap_size must not be below min_gap_size")
        return self


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="FLYBIRD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Window
    title: str = "Fly Bird"
    fps: int = Field(default=30, gt=0)
    cell_size: int = Field(default=12, ge=4)  # pixels per glyph cell

    # Optional log file, truncated on each run
    log_file: Path | None = None

    # Fixed seed for reproducible obstacle layouts
    seed: int | None = None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
