"""
bignumbers core constants (limb domain)
=======================================

Only fixed integer constants live here: limb geometry, radix bounds for text
I/O, and the signed ranges used by the narrowing accessors.
"""

# NOTE: Magnitudes are tuples of LIMB_BITS-wide unsigned limbs, least-significant first.

# ---------------------------------------------------------------------------
# Limb geometry
# ---------------------------------------------------------------------------

#: Width of one magnitude limb, in bits.
LIMB_BITS: int = 32
LIMB_BASE: int = 1 << LIMB_BITS
LIMB_MASK: int = LIMB_BASE - 1

#: Bytes per limb (binary codec grouping).
LIMB_BYTES: int = LIMB_BITS // 8


# ---------------------------------------------------------------------------
# Text I/O
# ---------------------------------------------------------------------------

MIN_RADIX: int = 2
MAX_RADIX: int = 36

#: Digit alphabet for radix 2..36 (lower-case on output, case-insensitive on input).
DIGITS: str = "0123456789abcdefghijklmnopqrstuvwxyz"

#: Plain decimal notation is used down to this adjusted exponent (inclusive).
SCIENTIFIC_ADJUSTED_MIN: int = -6


# ---------------------------------------------------------------------------
# Signed ranges for narrowing conversions
# ---------------------------------------------------------------------------

BYTE_BITS: int = 8
SHORT_BITS: int = 16
INT_BITS: int = 32
LONG_BITS: int = 64

BYTE_MIN: int = -(1 << (BYTE_BITS - 1))
BYTE_MAX: int = (1 << (BYTE_BITS - 1)) - 1
SHORT_MIN: int = -(1 << (SHORT_BITS - 1))
SHORT_MAX: int = (1 << (SHORT_BITS - 1)) - 1
INT_MIN: int = -(1 << (INT_BITS - 1))
INT_MAX: int = (1 << (INT_BITS - 1)) - 1
LONG_MIN: int = -(1 << (LONG_BITS - 1))
LONG_MAX: int = (1 << (LONG_BITS - 1)) - 1


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "LIMB_BITS",
    "LIMB_BASE",
    "LIMB_MASK",
    "LIMB_BYTES",
    "MIN_RADIX",
    "MAX_RADIX",
    "DIGITS",
    "SCIENTIFIC_ADJUSTED_MIN",
    "BYTE_BITS",
    "SHORT_BITS",
    "INT_BITS",
    "LONG_BITS",
    "BYTE_MIN",
    "BYTE_MAX",
    "SHORT_MIN",
    "SHORT_MAX",
    "INT_MIN",
    "INT_MAX",
    "LONG_MIN",
    "LONG_MAX",
]
