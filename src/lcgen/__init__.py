"""
lcgen - Deterministic Linear Congruential Generator

A seedable, non-cryptographic integer sequence generator:
- Outputs are confined to a caller-specified half-open range [start, end)
- Identical parameters always reproduce the identical sequence
- Arithmetic follows fixed 64-bit wraparound semantics

Components:
- Lcg - range-confined generator with signed output
- RawLcg - unbounded primitive with unsigned output and no remapping
"""

from .lcg import ConstructionError, EmptyRangeError, Lcg, RangeTooLargeError
from .raw import RawLcg

__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Generators
    "Lcg",
    "RawLcg",
    # Errors
    "ConstructionError",
    "EmptyRangeError",
    "RangeTooLargeError",
]
