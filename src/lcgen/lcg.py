"""
Lcg - Range-Confined Linear Congruential Generator

TigerStyle: All randomness is seeded and reproducible.
seed' = (multiplier * seed + increment) mod 2^64 mod modulus, output = seed' + min.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from .constants import I64_MAX, I64_MIN, U64_MASK, U64_MAX

logger = logging.getLogger(__name__)


class ConstructionError(Exception):
    """Base error for generator construction.

    TigerStyle: Explicit error types.
    """

    def __init__(self, message: str, start: int, end: int) -> None:
        super().__init__(message)
        self.start = start
        self.end = end


class EmptyRangeError(ConstructionError):
    """The requested range contains no values (start >= end)."""

    pass


class RangeTooLargeError(ConstructionError):
    """The requested range is wider than a signed 64-bit integer can hold."""

    pass


def _assert_u64(name: str, value: int) -> None:
    assert 0 <= value <= U64_MAX, f"{name} ({value}) must fit in an unsigned 64-bit integer"


@dataclass
class Lcg:
    """Linear congruential generator confined to [min, min + modulus).

    TigerStyle:
    - Same parameters always produce the same sequence
    - Intermediate multiply/add wraps modulo 2^64, never errors
    - Exclusively owned, no internal locking

    Build instances with Lcg.new(); the dataclass constructor is unchecked
    apart from its assertions.
    """

    _min: int
    _modulus: int
    _multiplier: int
    _increment: int
    _seed: int

    def __post_init__(self) -> None:
        """Validate state.

        TigerStyle: Assert preconditions.
        """
        assert I64_MIN <= self._min <= I64_MAX, f"min ({self._min}) must fit in a signed 64-bit integer"
        assert 0 < self._modulus <= I64_MAX, f"modulus ({self._modulus}) must be in (0, I64_MAX]"
        assert self._min + self._modulus - 1 <= I64_MAX, "output range must fit in a signed 64-bit integer"
        _assert_u64("multiplier", self._multiplier)
        _assert_u64("increment", self._increment)
        _assert_u64("seed", self._seed)

    @classmethod
    def new(cls, span: range, multiplier: int, increment: int, seed: int) -> Lcg:
        """Create a generator whose outputs lie in the half-open range `span`.

        Args:
            span: Output range [start, end). Must have a step of 1.
            multiplier: LCG multiplier, accepted as-is.
            increment: LCG increment, accepted as-is.
            seed: Initial state, accepted as-is.

        Raises:
            EmptyRangeError: If span.start >= span.stop.
            RangeTooLargeError: If span.stop - span.start exceeds I64_MAX.
        """
        assert span.step == 1, f"range step ({span.step}) must be 1"
        start, end = span.start, span.stop
        assert I64_MIN <= start <= I64_MAX, f"range start ({start}) must fit in a signed 64-bit integer"
        assert I64_MIN <= end <= I64_MAX, f"range end ({end}) must fit in a signed 64-bit integer"

        # len() overflows for spans wider than sys.maxsize, compare bounds instead
        if start >= end:
            logger.warning(f"Rejected empty range [{start}, {end})")
            raise EmptyRangeError(f"Invalid range was given: [{start}, {end}) is empty", start, end)
        if end - start > I64_MAX:
            logger.warning(f"Rejected oversized range [{start}, {end})")
            raise RangeTooLargeError(
                f"Too large range was given: [{start}, {end}) is wider than {I64_MAX}", start, end
            )

        generator = cls(
            _min=start,
            _modulus=end - start,
            _multiplier=multiplier,
            _increment=increment,
            _seed=seed,
        )
        logger.debug(
            f"Created Lcg over [{start}, {end}) with multiplier={multiplier} "
            f"increment={increment} seed={seed}"
        )
        return generator

    @property
    def min(self) -> int:
        """Lower bound of the output range (inclusive)."""
        return self._min

    @property
    def max(self) -> int:
        """Upper bound of the output range (exclusive)."""
        return self._min + self._modulus

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
        """Current state. Satisfies 0 <= seed < modulus after any step."""
        return self._seed

    @property
    def span(self) -> range:
        """The output range as a Python range."""
        return range(self._min, self._min + self._modulus)

    def step(self) -> int:
        """Advance the state once and return the next value.

        Never fails. The returned value always lies in [min, min + modulus).
        """
        self._seed = ((self._multiplier * self._seed + self._increment) & U64_MASK) % self._modulus
        # seed < modulus <= I64_MAX, so the signed reinterpretation is the identity
        return self._seed + self._min

    def take(self, count: int) -> list[int]:
        """Step `count` times and return the produced values in order."""
        assert count >= 0, f"count ({count}) must be non-negative"
        return [self.step() for _ in range(count)]

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.step()
