# Top-level API for bignumbers (limb engine).
"""
Top-level API for bignumbers.

This module exposes the stable, immutable number types:
  - BigInteger: signed arbitrary-precision integer (sign, Magnitude)
  - BigDecimal: arbitrary-precision decimal (unscaled BigInteger, scale)

Both are implemented on the pure-Python limb engine in `bignumbers.core`;
nothing is delegated to a host big-number type.
"""

from __future__ import annotations

from .biginteger import BigInteger
from .bigdecimal import BigDecimal

# Error kinds: re-exported so callers need not import from core.
from .core import (
    NumberFormatError,
    InvalidArgumentError,
    DivisionByZeroError,
    InvalidModulusError,
    NonTerminatingExpansionError,
    ArithmeticOverflowError,
)

__version__ = "0.1.0"

__all__ = [
    # number types
    "BigInteger",
    "BigDecimal",
    # exceptions
    "NumberFormatError",
    "InvalidArgumentError",
    "DivisionByZeroError",
    "InvalidModulusError",
    "NonTerminatingExpansionError",
    "ArithmeticOverflowError",
]
