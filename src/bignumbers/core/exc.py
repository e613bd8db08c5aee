"""
Core exception types for bignumbers.core.

These are dependency-free and may be imported by all core modules. Each error
kind also derives from the closest Python builtin so callers can catch either.
"""

__all__ = [
    "NumberFormatError",
    "InvalidArgumentError",
    "DivisionByZeroError",
    "InvalidModulusError",
    "NonTerminatingExpansionError",
    "ArithmeticOverflowError",
    "InvariantViolation",
]


class NumberFormatError(ValueError):
    """Raised when textual or binary input cannot be parsed as a number."""
    pass


class InvalidArgumentError(ValueError):
    """Raised on malformed arguments (bad sign/magnitude pair, radix out of range, ...)."""
    pass


class DivisionByZeroError(ZeroDivisionError):
    """Raised by divide/remainder/mod when the divisor is zero."""
    pass


class InvalidModulusError(ArithmeticError):
    """Raised by mod() when the modulus is not strictly positive."""

    def __init__(self, modulus):
        super().__init__(f"modulus not positive: {modulus}")
        self.modulus = modulus


class NonTerminatingExpansionError(ArithmeticError):
    """Raised when an exact decimal quotient has no terminating expansion.

    Attributes
    ----------
    dividend : Any
        The dividend of the failed division (domain object), for context.
    divisor : Any
        The divisor of the failed division.
    """

    def __init__(self, dividend, divisor):
        super().__init__(
            f"Non-terminating decimal expansion; no exact representable quotient for {dividend} / {divisor}"
        )
        self.dividend = dividend
        self.divisor = divisor


class ArithmeticOverflowError(OverflowError):
    """Raised when a narrowing conversion would lose information."""
    pass


class InvariantViolation(Exception):
    """Raised when a kernel precondition that callers must guarantee is broken."""
    pass
