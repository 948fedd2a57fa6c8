"""
lcgen Constants - TigerStyle

All limits are explicit, named with units, big-endian naming convention.
Category comes first, specifics last: I64_MAX not MAX_I64.
"""

# =============================================================================
# Integer Width Limits
# =============================================================================

I64_MIN: int = -(2**63)
I64_MAX: int = 2**63 - 1
U64_MAX: int = 2**64 - 1
U64_MASK: int = U64_MAX  # Truncates to the low 64 bits (two's-complement wrap)

# =============================================================================
# Generator Defaults
# =============================================================================

LCG_MULTIPLIER_DEFAULT: int = 1_103_515_245  # ANSI C rand() multiplier
LCG_INCREMENT_DEFAULT: int = 12_345  # ANSI C rand() increment
LCG_SEED_DEFAULT: int = 0
LCG_RANGE_START_DEFAULT: int = 0
LCG_RANGE_END_DEFAULT: int = 2**31

# =============================================================================
# CLI Limits
# =============================================================================

CLI_COUNT_DEFAULT: int = 10  # Values printed per invocation
CLI_COUNT_MAX: int = 1_000_000  # Max values per invocation
