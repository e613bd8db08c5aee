"""
Magnitude primitives: unsigned arbitrary-precision integers as limb tuples.

- A magnitude is a ``tuple[int, ...]`` of LIMB_BITS-wide unsigned limbs,
  least-significant limb first.
- Canonical form has no most-significant zero limb; zero is the empty tuple.
- Every function is pure: inputs are never mutated and outputs never alias an
  input buffer (working storage is a fresh list, returned as a tuple).
- No sign is carried here; sign rules live in BigInteger.

# Alignment notes:
# - add/subtract follow the classic carry/borrow limb loops.
# - divide_and_remainder is Knuth's Algorithm D (TAOCP vol. 2, 4.3.1) with a
#   single-limb fast path; the quotient digit estimate may overshoot by one and
#   is corrected by an add-back step.
"""

from __future__ import annotations

from typing import List, Tuple

from .constants import DIGITS, LIMB_BASE, LIMB_BITS, LIMB_MASK, MAX_RADIX, MIN_RADIX
from .exc import DivisionByZeroError, InvalidArgumentError, InvariantViolation, NumberFormatError

Magnitude = Tuple[int, ...]

ZERO: Magnitude = ()
ONE: Magnitude = (1,)

# Debug printing control
DEBUG_MAGNITUDE = False

def _dbg(msg: str) -> None:
    if DEBUG_MAGNITUDE:
        print(msg)


# ----------------------------
# Canonicalisation helpers
# ----------------------------

def normalize(limbs: List[int]) -> Magnitude:
    """Drop most-significant zero limbs and freeze the buffer."""
    n = len(limbs)
    while n > 0 and limbs[n - 1] == 0:
        n -= 1
    return tuple(limbs[:n])


def is_zero(a: Magnitude) -> bool:
    return len(a) == 0


def from_int(n: int) -> Magnitude:
    """Split a non-negative native int into limbs (bridge for value_of)."""
    if n < 0:
        raise InvariantViolation("from_int expects n >= 0")
    limbs = []
    while n:
        limbs.append(n & LIMB_MASK)
        n >>= LIMB_BITS
    return tuple(limbs)


def to_int(a: Magnitude) -> int:
    """Reassemble limbs into a native int (bridge for narrowing accessors)."""
    n = 0
    for limb in reversed(a):
        n = (n << LIMB_BITS) | limb
    return n


# ----------------------------
# Comparison
# ----------------------------

def compare(a: Magnitude, b: Magnitude) -> int:
    """Return -1, 0 or 1 as a is less than, equal to, or greater than b."""
    la, lb = len(a), len(b)
    if la != lb:
        return -1 if la < lb else 1
    for i in range(la - 1, -1, -1):
        x, y = a[i], b[i]
        if x != y:
            return -1 if x < y else 1
    return 0


# ----------------------------
# Addition / subtraction
# ----------------------------

def add(a: Magnitude, b: Magnitude) -> Magnitude:
    """Limb-wise sum with carry propagation."""
    if len(a) < len(b):
        a, b = b, a
    size_a, size_b = len(a), len(b)
    z = [0] * (size_a + 1)
    carry = 0
    i = 0
    while i < size_b:
        carry += a[i] + b[i]
        z[i] = carry & LIMB_MASK
        carry >>= LIMB_BITS
        i += 1
    while i < size_a:
        carry += a[i]
        z[i] = carry & LIMB_MASK
        carry >>= LIMB_BITS
        i += 1
    z[i] = carry
    return normalize(z)


def subtract(a: Magnitude, b: Magnitude) -> Magnitude:
    """Return a - b; requires a >= b (callers check with compare())."""
    size_a, size_b = len(a), len(b)
    if size_a < size_b:
        raise InvariantViolation("magnitude subtraction underflow")
    z = [0] * size_a
    borrow = 0
    i = 0
    while i < size_b:
        d = a[i] - b[i] - borrow
        borrow = 1 if d < 0 else 0
        z[i] = d & LIMB_MASK
        i += 1
    while i < size_a:
        d = a[i] - borrow
        borrow = 1 if d < 0 else 0
        z[i] = d & LIMB_MASK
        i += 1
    if borrow:
        raise InvariantViolation("magnitude subtraction underflow")
    return normalize(z)


def add_small(a: Magnitude, k: int) -> Magnitude:
    """Return a + k for a single-limb k >= 0."""
    if not 0 <= k <= LIMB_MASK:
        raise InvariantViolation("add_small expects a single limb")
    z = list(a) + [0]
    i = 0
    carry = k
    while carry:
        carry += z[i]
        z[i] = carry & LIMB_MASK
        carry >>= LIMB_BITS
        i += 1
    return normalize(z)


# ----------------------------
# Multiplication
# ----------------------------

def multiply(a: Magnitude, b: Magnitude) -> Magnitude:
    """Schoolbook O(n*m) product."""
    if not a or not b:
        return ZERO
    if len(a) < len(b):
        a, b = b, a
    size_a, size_b = len(a), len(b)
    z = [0] * (size_a + size_b)
    for j in range(size_b):
        bj = b[j]
        if bj == 0:
            continue
        carry = 0
        k = j
        for ai in a:
            carry += z[k] + ai * bj
            z[k] = carry & LIMB_MASK
            carry >>= LIMB_BITS
            k += 1
        z[k] = carry
    return normalize(z)


def muladd_small(a: Magnitude, k: int, extra: int = 0) -> Magnitude:
    """Return a * k + extra for single-limb k and extra (radix parsing step)."""
    if not (0 <= k <= LIMB_MASK and 0 <= extra <= LIMB_MASK):
        raise InvariantViolation("muladd_small expects single-limb operands")
    z = [0] * (len(a) + 1)
    carry = extra
    for i, limb in enumerate(a):
        carry += limb * k
        z[i] = carry & LIMB_MASK
        carry >>= LIMB_BITS
    z[len(a)] = carry
    return normalize(z)


# ----------------------------
# Division
# ----------------------------

def divrem_small(a: Magnitude, d: int) -> Tuple[Magnitude, int]:
    """Divide by a single non-zero limb; return (quotient, remainder limb)."""
    if d == 0:
        raise DivisionByZeroError("division by zero")
    if not 0 < d <= LIMB_MASK:
        raise InvariantViolation("divrem_small expects a single-limb divisor")
    q = [0] * len(a)
    rem = 0
    for i in range(len(a) - 1, -1, -1):
        rem = (rem << LIMB_BITS) | a[i]
        q[i] = rem // d
        rem -= q[i] * d
    return normalize(q), rem


def _knuth_divrem(a: Magnitude, b: Magnitude) -> Tuple[Magnitude, Magnitude]:
    """Algorithm D for len(b) >= 2 and a >= b."""
    n = len(b)
    m = len(a) - n

    # normalise: shift so the divisor's top limb has its high bit set
    s = LIMB_BITS - b[-1].bit_length()
    _dbg(f"knuth: len(a)={len(a)}, len(b)={n}, norm_shift={s}")
    v = list(_shl_bits(b, s, n))
    u = list(_shl_bits(a, s, len(a) + 1))
    v_top = v[n - 1]
    v_next = v[n - 2]

    q = [0] * (m + 1)
    for j in range(m, -1, -1):
        num = (u[j + n] << LIMB_BITS) | u[j + n - 1]
        qhat = num // v_top
        rhat = num - qhat * v_top
        while qhat >= LIMB_BASE or qhat * v_next > ((rhat << LIMB_BITS) | u[j + n - 2]):
            qhat -= 1
            rhat += v_top
            if rhat >= LIMB_BASE:
                break

        # multiply and subtract qhat * v from u[j .. j+n]
        borrow = 0
        carry = 0
        for i in range(n):
            p = qhat * v[i] + carry
            carry = p >> LIMB_BITS
            t = u[i + j] - (p & LIMB_MASK) - borrow
            borrow = 1 if t < 0 else 0
            u[i + j] = t & LIMB_MASK
        t = u[j + n] - carry - borrow

        if t < 0:
            # qhat was one too large; add v back (rare)
            _dbg(f"knuth: add-back at j={j}")
            u[j + n] = t & LIMB_MASK
            qhat -= 1
            carry = 0
            for i in range(n):
                carry += u[i + j] + v[i]
                u[i + j] = carry & LIMB_MASK
                carry >>= LIMB_BITS
            u[j + n] = (u[j + n] + carry) & LIMB_MASK
        else:
            u[j + n] = t
        q[j] = qhat

    rem = shift_right(normalize(u[:n]), s)
    return normalize(q), rem


def divide_and_remainder(a: Magnitude, b: Magnitude) -> Tuple[Magnitude, Magnitude]:
    """Return (quotient, remainder) with quotient*b + remainder == a and remainder < b."""
    if not b:
        raise DivisionByZeroError("division by zero")
    if compare(a, b) < 0:
        return ZERO, tuple(a)
    if len(b) == 1:
        _dbg(f"divrem: single-limb path, len(a)={len(a)}")
        q, r = divrem_small(a, b[0])
        return q, from_int(r)
    return _knuth_divrem(a, b)


# ----------------------------
# Shifts and bits
# ----------------------------

def _shl_bits(a: Magnitude, s: int, width: int) -> List[int]:
    """Shift left by 0 <= s < LIMB_BITS into a zero-padded buffer of `width` limbs."""
    z = [0] * width
    if s == 0:
        z[:len(a)] = a
        return z
    carry = 0
    for i, limb in enumerate(a):
        z[i] = ((limb << s) | carry) & LIMB_MASK
        carry = limb >> (LIMB_BITS - s)
    if carry:
        z[len(a)] = carry
    return z


def shift_left(a: Magnitude, n: int) -> Magnitude:
    """Return a * 2**n for n >= 0."""
    if n < 0:
        raise InvariantViolation("shift_left expects n >= 0")
    if not a:
        return ZERO
    limb_shift, bit_shift = divmod(n, LIMB_BITS)
    shifted = _shl_bits(a, bit_shift, len(a) + 1)
    return normalize([0] * limb_shift + shifted)


def shift_right(a: Magnitude, n: int) -> Magnitude:
    """Return floor(a / 2**n) for n >= 0."""
    if n < 0:
        raise InvariantViolation("shift_right expects n >= 0")
    limb_shift, bit_shift = divmod(n, LIMB_BITS)
    if limb_shift >= len(a):
        return ZERO
    src = a[limb_shift:]
    if bit_shift == 0:
        return tuple(src)
    z = [0] * len(src)
    for i in range(len(src)):
        hi = src[i + 1] if i + 1 < len(src) else 0
        z[i] = ((src[i] >> bit_shift) | (hi << (LIMB_BITS - bit_shift))) & LIMB_MASK
    return normalize(z)


def bit_length(a: Magnitude) -> int:
    if not a:
        return 0
    return (len(a) - 1) * LIMB_BITS + a[-1].bit_length()


def test_bit(a: Magnitude, i: int) -> bool:
    if i < 0:
        raise InvalidArgumentError(f"negative bit index: {i}")
    limb, bit = divmod(i, LIMB_BITS)
    if limb >= len(a):
        return False
    return (a[limb] >> bit) & 1 == 1


def lowest_set_bit(a: Magnitude) -> int:
    """Index of the lowest one bit, or -1 for zero."""
    for i, limb in enumerate(a):
        if limb:
            return i * LIMB_BITS + ((limb & -limb).bit_length() - 1)
    return -1


# ----------------------------
# Radix text (unsigned)
# ----------------------------

def _radix_chunk(radix: int) -> Tuple[int, int]:
    """Largest (radix**k, k) that still fits in one limb."""
    power, k = radix, 1
    while power * radix <= LIMB_MASK:
        power *= radix
        k += 1
    return power, k


def _check_radix(radix: int) -> None:
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise InvalidArgumentError(f"radix out of range [{MIN_RADIX}, {MAX_RADIX}]: {radix}")


def to_radix_string(a: Magnitude, radix: int = 10) -> str:
    """Digits of a in the given radix, most significant first; "0" for zero."""
    _check_radix(radix)
    if not a:
        return "0"
    power, k = _radix_chunk(radix)
    chunks = []
    rest = a
    while rest:
        rest, chunk = divrem_small(rest, power)
        chunks.append(chunk)

    parts = []
    for idx in range(len(chunks) - 1, -1, -1):
        chunk = chunks[idx]
        digits = []
        while chunk:
            chunk, d = divmod(chunk, radix)
            digits.append(DIGITS[d])
        text = "".join(reversed(digits))
        if idx != len(chunks) - 1:
            text = text.rjust(k, "0")
        parts.append(text)
    return "".join(parts)


def _digit_value(ch: str, radix: int) -> int:
    value = DIGITS.find(ch.lower()) if ch.isascii() else -1
    if value < 0 or value >= radix:
        raise NumberFormatError(f"invalid digit {ch!r} for radix {radix}")
    return value


def parse_radix_string(s: str, radix: int = 10) -> Magnitude:
    """Parse an unsigned digit string (no sign, at least one digit)."""
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise NumberFormatError(f"radix out of range [{MIN_RADIX}, {MAX_RADIX}]: {radix}")
    if not s:
        raise NumberFormatError("zero-length digit string")
    power, k = _radix_chunk(radix)

    # the first chunk absorbs the remainder so all later chunks are exactly k digits
    first = len(s) % k or k
    mag = ZERO
    pos = 0
    width = first
    while pos < len(s):
        value = 0
        for ch in s[pos:pos + width]:
            value = value * radix + _digit_value(ch, radix)
        scale = power if width == k else radix ** width
        mag = muladd_small(mag, scale, value)
        pos += width
        width = k
    return mag


__all__ = [
    "Magnitude",
    "ZERO",
    "ONE",
    "normalize",
    "is_zero",
    "from_int",
    "to_int",
    "compare",
    "add",
    "subtract",
    "add_small",
    "multiply",
    "muladd_small",
    "divrem_small",
    "divide_and_remainder",
    "shift_left",
    "shift_right",
    "bit_length",
    "test_bit",
    "lowest_set_bit",
    "to_radix_string",
    "parse_radix_string",
]
