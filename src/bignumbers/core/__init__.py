"""
bignumbers Core
===============

Limb-domain primitives shared by BigInteger and BigDecimal.
All raw arithmetic runs on Magnitude tuples (32-bit limbs, least-significant
first); sign and scale rules are applied one level up.

Core exposes the Magnitude kernel, the Codec (radix text and two's-complement
bytes), the decimal text grammar and the error kinds as public API.
"""

# NOTE:
#   The `core` package never imports BigInteger/BigDecimal. Codec and fmt work on
#   raw (signum, Magnitude) pairs so both number types can build on them.

# Limb-domain constants
from .constants import (
    LIMB_BITS,
    LIMB_BASE,
    LIMB_MASK,
    MIN_RADIX,
    MAX_RADIX,
    DIGITS,
)

# Magnitude kernel (module kept namespaced: `magnitude.add`, `magnitude.compare`, ...)
from . import magnitude
from .magnitude import Magnitude

# Codec: radix text and two's-complement bytes
from .codec import (
    parse_signed,
    format_signed,
    to_byte_array,
    from_byte_array,
)

# Decimal text grammar
from .fmt import (
    parse_decimal,
    format_canonical,
    format_plain,
)

# Capability contracts
from .contracts import IntegerContract, DecimalContract

# Core exceptions
from .exc import (
    NumberFormatError,
    InvalidArgumentError,
    DivisionByZeroError,
    InvalidModulusError,
    NonTerminatingExpansionError,
    ArithmeticOverflowError,
    InvariantViolation,
)

__all__ = [
    # constants
    "LIMB_BITS",
    "LIMB_BASE",
    "LIMB_MASK",
    "MIN_RADIX",
    "MAX_RADIX",
    "DIGITS",
    # magnitude
    "magnitude",
    "Magnitude",
    # codec
    "parse_signed",
    "format_signed",
    "to_byte_array",
    "from_byte_array",
    # fmt
    "parse_decimal",
    "format_canonical",
    "format_plain",
    # contracts
    "IntegerContract",
    "DecimalContract",
    # exceptions
    "NumberFormatError",
    "InvalidArgumentError",
    "DivisionByZeroError",
    "InvalidModulusError",
    "NonTerminatingExpansionError",
    "ArithmeticOverflowError",
    "InvariantViolation",
]
