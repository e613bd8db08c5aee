"""
Codec: stateless conversions between (signum, magnitude) pairs and external formats.

- Radix text: ``[-|+]digit+`` for radix 2..36; output is lower-case with a
  leading ``-`` for negative values and the single digit ``"0"`` for zero.
- Binary: big-endian two's-complement byte strings of minimal length; the
  sign bit is always present, so the length is ``bit_length // 8 + 1``.

Both BigInteger and BigDecimal construct and format through these helpers,
so the functions deal in raw ``(signum, Magnitude)`` pairs, not domain types.
"""

from __future__ import annotations

from typing import Tuple

from . import magnitude as mag
from .constants import LIMB_BITS, LIMB_BYTES, MAX_RADIX, MIN_RADIX
from .exc import InvalidArgumentError, NumberFormatError
from .magnitude import Magnitude

# Debug printing control
DEBUG_CODEC = False

def _dbg(msg: str) -> None:
    if DEBUG_CODEC:
        print(msg)


SignedMagnitude = Tuple[int, Magnitude]


# ---------------------------------------------------------------------------
# Radix text
# ---------------------------------------------------------------------------

def parse_signed(text: str, radix: int = 10) -> SignedMagnitude:
    """Parse optional sign plus digits into (signum, magnitude)."""
    if not isinstance(text, str):
        raise NumberFormatError(f"expected str, got {type(text).__name__}")
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise NumberFormatError(f"radix out of range [{MIN_RADIX}, {MAX_RADIX}]: {radix}")
    if not text:
        raise NumberFormatError("zero-length number string")

    sign = 1
    digits = text
    if text[0] in "+-":
        sign = -1 if text[0] == "-" else 1
        digits = text[1:]
    if not digits:
        raise NumberFormatError(f"no digits in {text!r}")

    m = mag.parse_radix_string(digits, radix)
    _dbg(f"parse_signed: {text!r} radix={radix} -> limbs={len(m)}")
    if mag.is_zero(m):
        return 0, mag.ZERO
    return sign, m


def format_signed(signum: int, m: Magnitude, radix: int = 10) -> str:
    """Render (signum, magnitude) in the given radix."""
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise InvalidArgumentError(f"radix out of range [{MIN_RADIX}, {MAX_RADIX}]: {radix}")
    text = mag.to_radix_string(m, radix)
    return "-" + text if signum < 0 else text


# ---------------------------------------------------------------------------
# Unsigned big-endian bytes <-> magnitude
# ---------------------------------------------------------------------------

def magnitude_from_bytes(data: bytes) -> Magnitude:
    """Unsigned big-endian bytes to magnitude (leading zero bytes allowed)."""
    limbs = []
    end = len(data)
    while end > 0:
        start = max(0, end - LIMB_BYTES)
        limb = 0
        for byte in data[start:end]:
            limb = (limb << 8) | byte
        limbs.append(limb)
        end = start
    return mag.normalize(limbs)


def magnitude_to_bytes(m: Magnitude, length: int) -> bytearray:
    """Magnitude to unsigned big-endian bytes, zero-padded to `length`."""
    out = bytearray(length)
    pos = length - 1
    for limb in m:
        for _ in range(LIMB_BYTES):
            if pos < 0:
                break
            out[pos] = limb & 0xFF
            limb >>= 8
            pos -= 1
    return out


def _negate_in_place(buf: bytearray) -> None:
    """Two's-complement negate a big-endian buffer (invert, then add one)."""
    carry = 1
    for i in range(len(buf) - 1, -1, -1):
        value = (buf[i] ^ 0xFF) + carry
        buf[i] = value & 0xFF
        carry = value >> 8


# ---------------------------------------------------------------------------
# Two's-complement bytes
# ---------------------------------------------------------------------------

def twos_complement_bit_length(signum: int, m: Magnitude) -> int:
    """Minimal two's-complement width excluding the sign bit.

    For negative values this is the bit length of |x| - 1, so -1 -> 0 and
    -128 -> 7, matching the JVM BigInteger.bitLength() contract.
    """
    n = mag.bit_length(m)
    if signum < 0 and mag.lowest_set_bit(m) == n - 1:
        # |x| is a power of two
        n -= 1
    return n


def to_byte_array(signum: int, m: Magnitude) -> bytes:
    """Minimal big-endian two's-complement encoding."""
    length = twos_complement_bit_length(signum, m) // 8 + 1
    buf = magnitude_to_bytes(m, length)
    if signum < 0:
        _negate_in_place(buf)
    return bytes(buf)


def from_byte_array(data: bytes) -> SignedMagnitude:
    """Decode big-endian two's-complement bytes into (signum, magnitude)."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise NumberFormatError(f"expected bytes, got {type(data).__name__}")
    if len(data) == 0:
        raise NumberFormatError("zero-length byte array")
    buf = bytearray(data)
    if buf[0] & 0x80:
        _negate_in_place(buf)
        m = magnitude_from_bytes(buf)
        _dbg(f"from_byte_array: negative, {len(data)} bytes -> limbs={len(m)}")
        return -1, m
    m = magnitude_from_bytes(buf)
    return (1 if m else 0), m


def from_signum_and_magnitude(signum: int, magnitude_bytes: bytes) -> SignedMagnitude:
    """Validate a (signum, unsigned big-endian magnitude bytes) pair."""
    if signum not in (-1, 0, 1):
        raise InvalidArgumentError(f"invalid signum value: {signum}")
    m = magnitude_from_bytes(bytes(magnitude_bytes))
    if signum == 0 and m:
        raise InvalidArgumentError("signum-magnitude mismatch: signum 0 with non-zero magnitude")
    if not m:
        return 0, mag.ZERO
    return signum, m


def low_bits_signed(signum: int, m: Magnitude, bits: int) -> int:
    """Low `bits` bits of the two's-complement form, read back as a signed int."""
    limbs = -(-bits // LIMB_BITS)
    low = mag.to_int(m[:limbs]) & ((1 << bits) - 1)
    if signum < 0:
        low = (-low) & ((1 << bits) - 1)
    if low >> (bits - 1):
        low -= 1 << bits
    return low


__all__ = [
    "parse_signed",
    "format_signed",
    "magnitude_from_bytes",
    "magnitude_to_bytes",
    "twos_complement_bit_length",
    "to_byte_array",
    "from_byte_array",
    "from_signum_and_magnitude",
    "low_bits_signed",
]
