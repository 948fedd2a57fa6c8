"""
lcgen Core Data Models

These models define the parameter sets used by configuration and the CLI:
- Generator parameters: validated at the boundary before a generator is built
- Reports: summaries of a sampled sequence
"""

from enum import Enum

from pydantic import BaseModel, Field

from lcgen.constants import (
    I64_MAX,
    I64_MIN,
    LCG_INCREMENT_DEFAULT,
    LCG_MULTIPLIER_DEFAULT,
    LCG_SEED_DEFAULT,
    U64_MAX,
)
from lcgen.lcg import Lcg
from lcgen.raw import RawLcg


# =============================================================================
# Enums
# =============================================================================


class OutputFormat(str, Enum):
    """How the CLI renders generated values."""

    PLAIN = "plain"  # One value per line
    JSON = "json"  # A JSON array
    TABLE = "table"  # Rich table with step index


# =============================================================================
# Parameter Models
# =============================================================================


class LcgParams(BaseModel):
    """Parameters for a range-confined generator.

    Only integer widths are checked here; range emptiness and size are
    checked by Lcg.new().
    """

    start: int = Field(ge=I64_MIN, le=I64_MAX)
    end: int = Field(ge=I64_MIN, le=I64_MAX)
    multiplier: int = Field(default=LCG_MULTIPLIER_DEFAULT, ge=0, le=U64_MAX)
    increment: int = Field(default=LCG_INCREMENT_DEFAULT, ge=0, le=U64_MAX)
    seed: int = Field(default=LCG_SEED_DEFAULT, ge=0, le=U64_MAX)

    @property
    def span(self) -> range:
        return range(self.start, self.end)

    def build(self) -> Lcg:
        """Build a generator. Raises ConstructionError on a bad range."""
        return Lcg.new(self.span, self.multiplier, self.increment, self.seed)


class RawLcgParams(BaseModel):
    """Parameters for a raw, unbounded generator."""

    modulus: int = Field(ge=1, le=U64_MAX)
    multiplier: int = Field(default=LCG_MULTIPLIER_DEFAULT, ge=0, le=U64_MAX)
    increment: int = Field(default=LCG_INCREMENT_DEFAULT, ge=0, le=U64_MAX)
    seed: int = Field(default=LCG_SEED_DEFAULT, ge=0, le=U64_MAX)

    def build(self) -> RawLcg:
        return RawLcg.new(self.modulus, self.multiplier, self.increment, self.seed)


# =============================================================================
# Report Models
# =============================================================================


class SequenceReport(BaseModel):
    """Summary of a sampled run of a generator."""

    params: LcgParams
    count: int
    observed_min: int | None = None
    observed_max: int | None = None
    distinct_count: int = 0
    out_of_range_count: int = 0
    final_seed: int

    @property
    def all_in_range(self) -> bool:
        return self.out_of_range_count == 0


def summarize(params: LcgParams, count: int) -> SequenceReport:
    """Sample `count` values from a fresh generator and summarize them.

    Raises ConstructionError if the parameters describe a bad range.
    """
    assert count >= 0, f"count ({count}) must be non-negative"
    generator = params.build()
    span = generator.span

    values = generator.take(count)
    return SequenceReport(
        params=params,
        count=count,
        observed_min=min(values) if values else None,
        observed_max=max(values) if values else None,
        distinct_count=len(set(values)),
        out_of_range_count=sum(1 for value in values if value not in span),
        final_seed=generator.seed,
    )
