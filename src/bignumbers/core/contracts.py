"""
Capability contracts for the integer and decimal types.

The limb engine (``bignumbers.BigInteger`` / ``bignumbers.BigDecimal``) is one
implementation of these contracts; another backend may implement them as long
as it honours the same operation semantics.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class IntegerContract(ABC):
    """Immutable signed arbitrary-precision integer."""

    @abstractmethod
    def add(self, other): ...

    @abstractmethod
    def subtract(self, other): ...

    @abstractmethod
    def multiply(self, other): ...

    @abstractmethod
    def divide(self, other):
        """Truncating quotient; raises DivisionByZeroError for a zero divisor."""

    @abstractmethod
    def remainder(self, other):
        """Remainder with the sign of the dividend (or zero)."""

    @abstractmethod
    def mod(self, m):
        """Non-negative residue in [0, m); raises InvalidModulusError for m <= 0."""

    @abstractmethod
    def xor(self, other): ...

    @abstractmethod
    def and_(self, other): ...

    @abstractmethod
    def shift_left(self, n: int): ...

    @abstractmethod
    def shift_right(self, n: int): ...

    @abstractmethod
    def signum(self) -> int: ...

    @abstractmethod
    def to_string(self, radix: int = 10) -> str: ...

    @abstractmethod
    def to_byte_array(self) -> bytes: ...

    @abstractmethod
    def byte_value_exact(self) -> int: ...

    @abstractmethod
    def compare_to(self, other) -> int: ...


class DecimalContract(ABC):
    """Immutable arbitrary-precision decimal, unscaled x 10^-scale."""

    @abstractmethod
    def add(self, other): ...

    @abstractmethod
    def subtract(self, other): ...

    @abstractmethod
    def multiply(self, other): ...

    @abstractmethod
    def divide(self, other):
        """Exact quotient; raises NonTerminatingExpansionError when none exists."""

    @abstractmethod
    def remainder(self, other): ...

    @abstractmethod
    def signum(self) -> int: ...

    @abstractmethod
    def to_string(self) -> str: ...

    @abstractmethod
    def byte_value_exact(self) -> int: ...

    @abstractmethod
    def compare_to(self, other) -> int:
        """Numeric comparison, ignoring scale."""


__all__ = [
    "IntegerContract",
    "DecimalContract",
]
