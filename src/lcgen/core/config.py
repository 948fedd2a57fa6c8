"""
lcgen Configuration

Loads generator defaults from environment variables and .env files.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from lcgen.constants import (
    CLI_COUNT_DEFAULT,
    CLI_COUNT_MAX,
    LCG_INCREMENT_DEFAULT,
    LCG_MULTIPLIER_DEFAULT,
    LCG_RANGE_END_DEFAULT,
    LCG_RANGE_START_DEFAULT,
    LCG_SEED_DEFAULT,
)
from lcgen.core.models import LcgParams
from lcgen.lcg import Lcg


class Settings(BaseSettings):
    """lcgen settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LCGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Output range [range_start, range_end)
    range_start: int = LCG_RANGE_START_DEFAULT
    range_end: int = LCG_RANGE_END_DEFAULT

    # Recurrence parameters
    multiplier: int = LCG_MULTIPLIER_DEFAULT
    increment: int = LCG_INCREMENT_DEFAULT
    seed: int = LCG_SEED_DEFAULT

    # CLI
    count: int = Field(default=CLI_COUNT_DEFAULT, ge=0, le=CLI_COUNT_MAX)
    log_level: str = "WARNING"

    def to_params(self) -> LcgParams:
        """Convert settings to LcgParams (validates integer widths)."""
        return LcgParams(
            start=self.range_start,
            end=self.range_end,
            multiplier=self.multiplier,
            increment=self.increment,
            seed=self.seed,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def get_generator() -> Lcg:
    """Build a generator from the current settings."""
    return get_settings().to_params().build()
