"""
RawLcg - Unbounded Linear Congruential Generator

Lower-level primitive: built directly from (modulus, multiplier, increment, seed),
outputs the raw unsigned state with no range remapping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from .constants import U64_MASK, U64_MAX

logger = logging.getLogger(__name__)


@dataclass
class RawLcg:
    """Raw LCG over [0, modulus) with unsigned 64-bit output.

    TigerStyle: No validated constructor; a zero modulus is a programmer
    error and fails the assertion.
    """

    _modulus: int
    _multiplier: int
    _increment: int
    _seed: int

    def __post_init__(self) -> None:
        assert 0 < self._modulus <= U64_MAX, f"modulus ({self._modulus}) must be in (0, U64_MAX]"
        for name in ("multiplier", "increment", "seed"):
            value = getattr(self, f"_{name}")
            assert 0 <= value <= U64_MAX, f"{name} ({value}) must fit in an unsigned 64-bit integer"

    @classmethod
    def new(cls, modulus: int, multiplier: int, increment: int, seed: int) -> RawLcg:
        """Create a raw generator.

        Args:
            modulus: Exclusive upper bound on the state. Must be positive.
            multiplier: LCG multiplier.
            increment: LCG increment.
            seed: Initial state.
        """
        generator = cls(_modulus=modulus, _multiplier=multiplier, _increment=increment, _seed=seed)
        logger.debug(f"Created RawLcg with modulus={modulus} multiplier={multiplier} increment={increment}")
        return generator

    @property
    def modulus(self) -> int:
        return self._modulus

    @property
    def multiplier(self) -> int:
        return self._multiplier

    @property
    def increment(self) -> int:
        return self._increment

    @property
    def seed(self) -> int:
        """Current state, also the last output."""
        return self._seed

    def step(self) -> int:
        """Advance the state once and return it."""
        self._seed = ((self._multiplier * self._seed + self._increment) & U64_MASK) % self._modulus
        return self._seed

    def take(self, count: int) -> list[int]:
        assert count >= 0, f"count ({count}) must be non-negative"
        return [self.step() for _ in range(count)]

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.step()
