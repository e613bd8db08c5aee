"""
BigDecimal: arbitrary-precision decimal as (unscaled BigInteger, scale).

- Value = unscaled * 10^(-scale); scale may be negative.
- Equality (``==``/hash) is representation equality: 1.0 != 1.00.
  ``compare_to`` and ``numerically_equals`` compare numeric value only.
- add/subtract align both operands to max(scaleA, scaleB); multiply adds
  the scales; divide is exact-only and raises NonTerminatingExpansionError
  when the quotient has no finite decimal expansion.

# Alignment notes:
# - Canonical text follows the JVM BigDecimal.toString() adjusted-exponent
#   rule (see core.fmt); parse(str(d)) recovers the identical pair.
# - Exact divide yields the quotient at the smallest scale >= the preferred
#   scale (scaleA - scaleB), as BigDecimal.divide(BigDecimal) does.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Tuple, Union

from .biginteger import BigInteger
from .core import fmt
from .core import magnitude as mag
from .core.contracts import DecimalContract
from .core.exc import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    InvalidArgumentError,
    NonTerminatingExpansionError,
)

# Debug printing control
DEBUG_DECIMAL = False

def _dbg(msg: str) -> None:
    if DEBUG_DECIMAL:
        print(msg)


DecimalLike = Union["BigDecimal", BigInteger, int]

_TEN_POW_CACHE: Dict[int, BigInteger] = {}


def _ten_pow(n: int) -> BigInteger:
    """Return 10**n as a BigInteger for n >= 0 (small powers are cached)."""
    if n < 0:
        raise ValueError("_ten_pow expects non-negative exponent")
    if n < 32:
        cached = _TEN_POW_CACHE.get(n)
        if cached is None:
            cached = BigInteger.TEN.pow(n)
            _TEN_POW_CACHE[n] = cached
        return cached
    return BigInteger.TEN.pow(n)


def _coerce(value: DecimalLike) -> "BigDecimal":
    if isinstance(value, BigDecimal):
        return value
    if isinstance(value, BigInteger):
        return BigDecimal(value, 0)
    if isinstance(value, int):
        return BigDecimal.value_of(value)
    raise InvalidArgumentError(f"BigDecimal arithmetic requires BigDecimal operands, got {type(value).__name__}")


def _strip_zeros(unscaled: BigInteger, scale: int, floor_scale: Optional[int] = None) -> Tuple[BigInteger, int]:
    """Remove trailing decimal zeros while scale stays above floor_scale (unbounded if None)."""
    while (floor_scale is None or scale > floor_scale) and unscaled.sign != 0:
        q, r = unscaled.divide_and_remainder(BigInteger.TEN)
        if r.sign != 0:
            break
        unscaled = q
        scale -= 1
    return unscaled, scale


def _remove_factor(n: BigInteger, p: int) -> Tuple[BigInteger, int]:
    """Divide out every factor p from n; return (rest, count)."""
    count = 0
    divisor = BigInteger.value_of(p)
    while True:
        q, r = n.divide_and_remainder(divisor)
        if r.sign != 0:
            return n, count
        n = q
        count += 1


@dataclass(frozen=True)
class BigDecimal(DecimalContract):
    """Decimal number: unscaled * 10^(-scale)."""
    unscaled: BigInteger
    scale: int = 0

    ZERO: ClassVar["BigDecimal"]
    ONE: ClassVar["BigDecimal"]
    TEN: ClassVar["BigDecimal"]

    def __post_init__(self):
        if not isinstance(self.unscaled, BigInteger):
            raise InvalidArgumentError("unscaled value must be a BigInteger")
        if not isinstance(self.scale, int) or isinstance(self.scale, bool):
            raise InvalidArgumentError(f"scale must be int, got {type(self.scale).__name__}")

    # ------------- constructors -------------

    @classmethod
    def parse(cls, text: str) -> "BigDecimal":
        """Parse ``[+|-]int[.frac][E[+|-]exp]`` (see core.fmt)."""
        sign, m, scale = fmt.parse_decimal(text)
        return cls(BigInteger._from_parts(sign, m), scale)

    @classmethod
    def from_big_integer(cls, value: BigInteger, scale: int = 0) -> "BigDecimal":
        return cls(value, scale)

    @classmethod
    def value_of(cls, value: int, scale: int = 0) -> "BigDecimal":
        return cls(BigInteger.value_of(value), scale)

    # ------------- accessors -------------

    @property
    def unscaled_value(self) -> BigInteger:
        return self.unscaled

    def signum(self) -> int:
        return self.unscaled.sign

    def is_zero(self) -> bool:
        return self.unscaled.sign == 0

    def precision(self) -> int:
        """Number of decimal digits in the unscaled value (1 for zero)."""
        return len(mag.to_radix_string(self.unscaled.magnitude, 10))

    # ------------- scale alignment -------------

    def _upscaled(self, scale: int) -> BigInteger:
        """Unscaled value re-expressed at a scale >= self.scale (exact)."""
        if scale == self.scale:
            return self.unscaled
        return self.unscaled.multiply(_ten_pow(scale - self.scale))

    def _aligned(self, other: "BigDecimal") -> Tuple[BigInteger, BigInteger, int]:
        scale = max(self.scale, other.scale)
        return self._upscaled(scale), other._upscaled(scale), scale

    # ------------- comparisons -------------

    def compare_to(self, other: DecimalLike) -> int:
        """Numeric comparison; 2.0 and 2.00 compare equal."""
        other = _coerce(other)
        if self.signum() != other.signum():
            return -1 if self.signum() < other.signum() else 1
        a, b, _ = self._aligned(other)
        return a.compare_to(b)

    def numerically_equals(self, other: DecimalLike) -> bool:
        return self.compare_to(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (BigDecimal, BigInteger, int)):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, (BigDecimal, BigInteger, int)):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, (BigDecimal, BigInteger, int)):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, (BigDecimal, BigInteger, int)):
            return NotImplemented
        return self.compare_to(other) >= 0

    # ------------- arithmetic -------------

    def negate(self) -> "BigDecimal":
        return BigDecimal(self.unscaled.negate(), self.scale)

    def abs(self) -> "BigDecimal":
        return self.negate() if self.signum() < 0 else self

    def add(self, other: DecimalLike) -> "BigDecimal":
        other = _coerce(other)
        a, b, scale = self._aligned(other)
        return BigDecimal(a.add(b), scale)

    def subtract(self, other: DecimalLike) -> "BigDecimal":
        other = _coerce(other)
        a, b, scale = self._aligned(other)
        return BigDecimal(a.subtract(b), scale)

    def multiply(self, other: DecimalLike) -> "BigDecimal":
        other = _coerce(other)
        return BigDecimal(self.unscaled.multiply(other.unscaled), self.scale + other.scale)

    def divide(self, other: DecimalLike) -> "BigDecimal":
        """Exact quotient at the smallest scale >= self.scale - other.scale."""
        other = _coerce(other)
        if other.signum() == 0:
            raise DivisionByZeroError("division by zero")
        preferred = self.scale - other.scale
        if self.signum() == 0:
            return BigDecimal(BigInteger.ZERO, preferred)

        # reduce the fraction unscaledA / unscaledB
        g = self.unscaled.gcd(other.unscaled)
        num = self.unscaled.divide(g)
        den = other.unscaled.divide(g)
        if den.sign < 0:
            num, den = num.negate(), den.negate()

        # den must be 2^a * 5^b for a terminating expansion
        rest, twos = _remove_factor(den, 2)
        rest, fives = _remove_factor(rest, 5)
        _dbg(f"divide: preferred_scale={preferred}, den=2^{twos}*5^{fives}*{rest}")
        if rest.compare_to(BigInteger.ONE) != 0:
            raise NonTerminatingExpansionError(self, other)

        k = max(twos, fives)
        unscaled = num.multiply(_ten_pow(k).divide(den))
        unscaled, scale = _strip_zeros(unscaled, preferred + k, preferred)
        return BigDecimal(unscaled, scale)

    def divide_to_integral_value(self, other: DecimalLike) -> "BigDecimal":
        """Truncated integer part of self / other, at preferred scale self.scale - other.scale."""
        other = _coerce(other)
        if other.signum() == 0:
            raise DivisionByZeroError("division by zero")
        preferred = self.scale - other.scale
        a, b, _ = self._aligned(other)
        q = a.divide(b)
        if preferred < 0:
            unscaled, scale = _strip_zeros(q, 0, preferred)
            return BigDecimal(unscaled, scale)
        return BigDecimal(q.multiply(_ten_pow(preferred)), preferred)

    def remainder(self, other: DecimalLike) -> "BigDecimal":
        """self - divide_to_integral_value(other) * other; sign follows self."""
        other = _coerce(other)
        q = self.divide_to_integral_value(other)
        return self.subtract(q.multiply(other))

    def divide_and_remainder(self, other: DecimalLike) -> Tuple["BigDecimal", "BigDecimal"]:
        other = _coerce(other)
        q = self.divide_to_integral_value(other)
        return q, self.subtract(q.multiply(other))

    # ------------- representation -------------

    def strip_trailing_zeros(self) -> "BigDecimal":
        """Numerically equal value with the smallest scale; zero becomes 0 (scale 0)."""
        if self.is_zero():
            return BigDecimal.ZERO
        unscaled, scale = _strip_zeros(self.unscaled, self.scale)
        return BigDecimal(unscaled, scale)

    def to_string(self) -> str:
        return fmt.format_canonical(self.unscaled.sign, self.unscaled.magnitude, self.scale)

    def to_plain_string(self) -> str:
        return fmt.format_plain(self.unscaled.sign, self.unscaled.magnitude, self.scale)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigDecimal('{self.to_string()}')"

    # ------------- conversions -------------

    def to_big_integer(self) -> BigInteger:
        """Integer part, discarding any fraction (truncates toward zero)."""
        if self.scale <= 0:
            return self.unscaled.multiply(_ten_pow(-self.scale))
        return self.unscaled.divide(_ten_pow(self.scale))

    def to_big_integer_exact(self) -> BigInteger:
        if self.scale <= 0:
            return self.unscaled.multiply(_ten_pow(-self.scale))
        q, r = self.unscaled.divide_and_remainder(_ten_pow(self.scale))
        if r.sign != 0:
            raise ArithmeticOverflowError(f"BigDecimal has a non-zero fractional part: {self}")
        return q

    def to_byte(self) -> int:
        return self.to_big_integer().to_byte()

    def to_short(self) -> int:
        return self.to_big_integer().to_short()

    def to_int(self) -> int:
        return self.to_big_integer().to_int()

    def to_long(self) -> int:
        return self.to_big_integer().to_long()

    def byte_value_exact(self) -> int:
        return self.to_big_integer_exact().byte_value_exact()

    def short_value_exact(self) -> int:
        return self.to_big_integer_exact().short_value_exact()

    def int_value_exact(self) -> int:
        return self.to_big_integer_exact().int_value_exact()

    def long_value_exact(self) -> int:
        return self.to_big_integer_exact().long_value_exact()

    # ------------- operator protocol -------------

    def __add__(self, other: DecimalLike) -> "BigDecimal":
        if not isinstance(other, (BigDecimal, BigInteger, int)):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: DecimalLike) -> "BigDecimal":
        if not isinstance(other, (BigDecimal, BigInteger, int)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: DecimalLike) -> "BigDecimal":
        if not isinstance(other, (BigDecimal, BigInteger, int)):
            return NotImplemented
        return _coerce(other).subtract(self)

    def __mul__(self, other: DecimalLike) -> "BigDecimal":
        if not isinstance(other, (BigDecimal, BigInteger, int)):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: DecimalLike) -> "BigDecimal":
        if not isinstance(other, (BigDecimal, BigInteger, int)):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> "BigDecimal":
        return self.negate()

    def __abs__(self) -> "BigDecimal":
        return self.abs()


BigDecimal.ZERO = BigDecimal(BigInteger.ZERO, 0)
BigDecimal.ONE = BigDecimal(BigInteger.ONE, 0)
BigDecimal.TEN = BigDecimal(BigInteger.TEN, 0)


__all__ = [
    "BigDecimal",
]
