"""
BigInteger: signed arbitrary-precision integer as (sign, Magnitude).

- Immutable: every operation returns a new instance; neither receiver nor
  argument is ever modified.
- sign is -1, 0 or +1 and is 0 exactly when the magnitude is empty.
- Division truncates toward zero; the remainder carries the sign of the
  dividend (JVM integer-division semantics). ``mod`` is the separate
  non-negative residue.
- Bitwise operators and shifts act on the conceptual infinite-width
  two's-complement form, so ``-1`` is all ones and ``>>`` is arithmetic.

Raw limb work is delegated to ``core.magnitude``; sign rules live here.
``//`` and ``%`` are not defined because Python's floor semantics would
disagree with ``divide``/``remainder``.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Callable, ClassVar, Tuple, Union

from .core import codec
from .core import magnitude as mag
from .core.constants import (
    BYTE_BITS,
    INT_BITS,
    LIMB_MASK,
    LONG_BITS,
    SHORT_BITS,
)
from .core.contracts import IntegerContract
from .core.exc import (
    ArithmeticOverflowError,
    InvalidArgumentError,
    InvalidModulusError,
)
from .core.magnitude import Magnitude

IntLike = Union["BigInteger", int]


def _coerce(value: IntLike) -> "BigInteger":
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int):
        return BigInteger.value_of(value)
    raise InvalidArgumentError(f"BigInteger arithmetic requires BigInteger or int operands, got {type(value).__name__}")


def _twos_complement_limbs(x: "BigInteger", size: int) -> Tuple[list, int]:
    """Return (limbs, extension limb) of x's two's-complement form over `size` limbs.

    Negative values use ~(|x| - 1), which equals the two's-complement limbs.
    """
    if x.sign < 0:
        m = mag.subtract(x.magnitude, mag.ONE)
        limbs = [limb ^ LIMB_MASK for limb in m]
        limbs.extend([LIMB_MASK] * (size - len(m)))
        return limbs, LIMB_MASK
    limbs = list(x.magnitude)
    limbs.extend([0] * (size - len(limbs)))
    return limbs, 0


def _bitwise(a: "BigInteger", b: "BigInteger", op: Callable[[int, int], int]) -> "BigInteger":
    """Apply a limb-wise logical op on the infinite two's-complement forms of a and b."""
    size = max(len(a.magnitude), len(b.magnitude))
    la, ext_a = _twos_complement_limbs(a, size)
    lb, ext_b = _twos_complement_limbs(b, size)
    z = [op(x, y) & LIMB_MASK for x, y in zip(la, lb)]
    ext_z = op(ext_a, ext_b) & LIMB_MASK

    if ext_z == 0:
        return BigInteger._from_parts(1, mag.normalize(z))
    # negative result: magnitude = ~z + 1
    inverted = mag.normalize([limb ^ LIMB_MASK for limb in z])
    return BigInteger._from_parts(-1, mag.add(inverted, mag.ONE))


@dataclass(frozen=True)
class BigInteger(IntegerContract):
    """Signed arbitrary-precision integer: sign * magnitude."""
    sign: int
    magnitude: Magnitude

    ZERO: ClassVar["BigInteger"]
    ONE: ClassVar["BigInteger"]
    TWO: ClassVar["BigInteger"]
    TEN: ClassVar["BigInteger"]

    def __post_init__(self):
        if self.sign not in (-1, 0, 1):
            raise InvalidArgumentError(f"invalid signum value: {self.sign}")
        if not isinstance(self.magnitude, tuple):
            raise InvalidArgumentError("magnitude must be a tuple of limbs")
        if self.magnitude and self.magnitude[-1] == 0:
            raise InvalidArgumentError("magnitude has a most-significant zero limb")
        if any(not 0 <= limb <= LIMB_MASK for limb in self.magnitude):
            raise InvalidArgumentError("magnitude limb out of range")
        if (self.sign == 0) != (len(self.magnitude) == 0):
            raise InvalidArgumentError("signum-magnitude mismatch")

    # ------------- constructors -------------

    @classmethod
    def _from_parts(cls, sign: int, m: Magnitude) -> "BigInteger":
        """Build from an already canonical magnitude; zero forces sign 0."""
        if not m:
            return cls.ZERO
        return cls(sign, m)

    @classmethod
    def value_of(cls, value: int) -> "BigInteger":
        if not isinstance(value, int):
            raise InvalidArgumentError(f"value_of expects int, got {type(value).__name__}")
        if value == 0:
            return cls.ZERO
        if value < 0:
            return cls(-1, mag.from_int(-value))
        return cls(1, mag.from_int(value))

    @classmethod
    def parse(cls, text: str, radix: int = 10) -> "BigInteger":
        """Parse ``[+|-]digits`` in the given radix (2..36)."""
        sign, m = codec.parse_signed(text, radix)
        return cls._from_parts(sign, m)

    @classmethod
    def from_signum_and_magnitude(cls, signum: int, magnitude_bytes: bytes) -> "BigInteger":
        """Build from a signum and an unsigned big-endian magnitude."""
        sign, m = codec.from_signum_and_magnitude(signum, magnitude_bytes)
        return cls._from_parts(sign, m)

    @classmethod
    def from_byte_array(cls, data: bytes) -> "BigInteger":
        """Decode a big-endian two's-complement byte string."""
        sign, m = codec.from_byte_array(data)
        return cls._from_parts(sign, m)

    # ------------- predicates / accessors -------------

    def signum(self) -> int:
        return self.sign

    def is_zero(self) -> bool:
        return self.sign == 0

    def bit_length(self) -> int:
        """Two's-complement bit length, excluding the sign bit."""
        return codec.twos_complement_bit_length(self.sign, self.magnitude)

    def test_bit(self, n: int) -> bool:
        """True if bit n of the two's-complement form is set."""
        if n < 0:
            raise InvalidArgumentError(f"negative bit address: {n}")
        if self.sign >= 0:
            return mag.test_bit(self.magnitude, n)
        # bit n of -m is the complement of bit n of (m - 1)
        return not mag.test_bit(mag.subtract(self.magnitude, mag.ONE), n)

    # ------------- comparisons -------------

    def compare_to(self, other: IntLike) -> int:
        other = _coerce(other)
        if self.sign != other.sign:
            return -1 if self.sign < other.sign else 1
        c = mag.compare(self.magnitude, other.magnitude)
        return -c if self.sign < 0 else c

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.compare_to(other) >= 0

    def min(self, other: IntLike) -> "BigInteger":
        other = _coerce(other)
        return self if self.compare_to(other) <= 0 else other

    def max(self, other: IntLike) -> "BigInteger":
        other = _coerce(other)
        return self if self.compare_to(other) >= 0 else other

    # ------------- arithmetic -------------

    def negate(self) -> "BigInteger":
        return BigInteger._from_parts(-self.sign, self.magnitude)

    def abs(self) -> "BigInteger":
        return self.negate() if self.sign < 0 else self

    def add(self, other: IntLike) -> "BigInteger":
        other = _coerce(other)
        if other.sign == 0:
            return self
        if self.sign == 0:
            return other
        if self.sign == other.sign:
            return BigInteger._from_parts(self.sign, mag.add(self.magnitude, other.magnitude))

        # opposite signs: difference of magnitudes, sign of the larger
        c = mag.compare(self.magnitude, other.magnitude)
        if c == 0:
            return BigInteger.ZERO
        if c > 0:
            return BigInteger._from_parts(self.sign, mag.subtract(self.magnitude, other.magnitude))
        return BigInteger._from_parts(other.sign, mag.subtract(other.magnitude, self.magnitude))

    def subtract(self, other: IntLike) -> "BigInteger":
        return self.add(_coerce(other).negate())

    def multiply(self, other: IntLike) -> "BigInteger":
        other = _coerce(other)
        if self.sign == 0 or other.sign == 0:
            return BigInteger.ZERO
        return BigInteger._from_parts(self.sign * other.sign, mag.multiply(self.magnitude, other.magnitude))

    def divide_and_remainder(self, other: IntLike) -> Tuple["BigInteger", "BigInteger"]:
        """Truncating (quotient, remainder); remainder has the sign of self."""
        other = _coerce(other)
        q, r = mag.divide_and_remainder(self.magnitude, other.magnitude)
        return (
            BigInteger._from_parts(self.sign * other.sign, q),
            BigInteger._from_parts(self.sign, r),
        )

    def divide(self, other: IntLike) -> "BigInteger":
        return self.divide_and_remainder(other)[0]

    def remainder(self, other: IntLike) -> "BigInteger":
        return self.divide_and_remainder(other)[1]

    def mod(self, m: IntLike) -> "BigInteger":
        """Non-negative residue in [0, m); m must be positive."""
        m = _coerce(m)
        if m.sign <= 0:
            raise InvalidModulusError(m)
        _, r = mag.divide_and_remainder(self.magnitude, m.magnitude)
        if self.sign < 0 and r:
            r = mag.subtract(m.magnitude, r)
        return BigInteger._from_parts(1, r)

    def pow(self, exponent: int) -> "BigInteger":
        """self ** exponent by square-and-multiply (exponent >= 0)."""
        if exponent < 0:
            raise InvalidArgumentError(f"negative exponent: {exponent}")
        result = mag.ONE
        base = self.magnitude
        e = exponent
        while e:
            if e & 1:
                result = mag.multiply(result, base)
            e >>= 1
            if e:
                base = mag.multiply(base, base)
        sign = -1 if (self.sign < 0 and exponent & 1) else 1
        return BigInteger._from_parts(sign, result)

    def gcd(self, other: IntLike) -> "BigInteger":
        """Greatest common divisor of |self| and |other| (gcd(0, 0) == 0)."""
        a, b = self.magnitude, _coerce(other).magnitude
        while b:
            _, r = mag.divide_and_remainder(a, b)
            a, b = b, r
        return BigInteger._from_parts(1, a)

    # ------------- bitwise (two's-complement semantics) -------------

    def and_(self, other: IntLike) -> "BigInteger":
        """Negative iff both operands are negative."""
        return _bitwise(self, _coerce(other), operator.and_)

    def or_(self, other: IntLike) -> "BigInteger":
        """Negative iff either operand is negative."""
        return _bitwise(self, _coerce(other), operator.or_)

    def xor(self, other: IntLike) -> "BigInteger":
        """Negative iff exactly one operand is negative."""
        return _bitwise(self, _coerce(other), operator.xor)

    def and_not(self, other: IntLike) -> "BigInteger":
        """self & ~other."""
        return _bitwise(self, _coerce(other), lambda x, y: x & ~y)

    def not_(self) -> "BigInteger":
        """~self == -self - 1."""
        return self.add(BigInteger.ONE).negate()

    def shift_left(self, n: int) -> "BigInteger":
        """floor(self * 2**n); a negative n shifts right."""
        if n < 0:
            return self.shift_right(-n)
        if self.sign == 0:
            return self
        return BigInteger._from_parts(self.sign, mag.shift_left(self.magnitude, n))

    def shift_right(self, n: int) -> "BigInteger":
        """Arithmetic shift: floor(self / 2**n); a negative n shifts left."""
        if n < 0:
            return self.shift_left(-n)
        if self.sign == 0:
            return self
        q = mag.shift_right(self.magnitude, n)
        if self.sign < 0 and mag.lowest_set_bit(self.magnitude) < n:
            # one bits shifted out: round toward negative infinity
            q = mag.add_small(q, 1)
        return BigInteger._from_parts(self.sign, q)

    # ------------- conversions -------------

    def to_string(self, radix: int = 10) -> str:
        return codec.format_signed(self.sign, self.magnitude, radix)

    def to_byte_array(self) -> bytes:
        """Minimal big-endian two's-complement encoding."""
        return codec.to_byte_array(self.sign, self.magnitude)

    def _narrow_exact(self, bits: int, kind: str) -> int:
        if self.bit_length() >= bits:
            raise ArithmeticOverflowError(f"BigInteger out of {kind} range: {self}")
        return codec.low_bits_signed(self.sign, self.magnitude, bits)

    def to_byte(self) -> int:
        return codec.low_bits_signed(self.sign, self.magnitude, BYTE_BITS)

    def to_short(self) -> int:
        return codec.low_bits_signed(self.sign, self.magnitude, SHORT_BITS)

    def to_int(self) -> int:
        return codec.low_bits_signed(self.sign, self.magnitude, INT_BITS)

    def to_long(self) -> int:
        return codec.low_bits_signed(self.sign, self.magnitude, LONG_BITS)

    def byte_value_exact(self) -> int:
        return self._narrow_exact(BYTE_BITS, "byte")

    def short_value_exact(self) -> int:
        return self._narrow_exact(SHORT_BITS, "short")

    def int_value_exact(self) -> int:
        return self._narrow_exact(INT_BITS, "int")

    def long_value_exact(self) -> int:
        return self._narrow_exact(LONG_BITS, "long")

    def __int__(self) -> int:
        value = mag.to_int(self.magnitude)
        return -value if self.sign < 0 else value

    __index__ = __int__

    def __bool__(self) -> bool:
        return self.sign != 0

    def __str__(self) -> str:
        return self.to_string(10)

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_string(10)}')"

    # ------------- operator protocol -------------

    def __add__(self, other: IntLike) -> "BigInteger":
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: IntLike) -> "BigInteger":
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: int) -> "BigInteger":
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return _coerce(other).subtract(self)

    def __mul__(self, other: IntLike) -> "BigInteger":
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __neg__(self) -> "BigInteger":
        return self.negate()

    def __pos__(self) -> "BigInteger":
        return self

    def __abs__(self) -> "BigInteger":
        return self.abs()

    def __and__(self, other: IntLike) -> "BigInteger":
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.and_(other)

    __rand__ = __and__

    def __or__(self, other: IntLike) -> "BigInteger":
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.or_(other)

    __ror__ = __or__

    def __xor__(self, other: IntLike) -> "BigInteger":
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.xor(other)

    __rxor__ = __xor__

    def __invert__(self) -> "BigInteger":
        return self.not_()

    def __lshift__(self, n: int) -> "BigInteger":
        return self.shift_left(int(n))

    def __rshift__(self, n: int) -> "BigInteger":
        return self.shift_right(int(n))


BigInteger.ZERO = BigInteger(0, mag.ZERO)
BigInteger.ONE = BigInteger(1, mag.ONE)
BigInteger.TWO = BigInteger(1, (2,))
BigInteger.TEN = BigInteger(1, (10,))


__all__ = [
    "BigInteger",
]
