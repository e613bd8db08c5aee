import pytest

from bignumbers.core import magnitude as mag
from bignumbers.core.constants import LIMB_BITS, LIMB_MASK
from bignumbers.core.exc import (
    DivisionByZeroError,
    InvalidArgumentError,
    InvariantViolation,
    NumberFormatError,
)


def _m(n: int):
    """Helper: magnitude from a non-negative native int."""
    return mag.from_int(n)


# -----------------------------
# Canonical form
# -----------------------------

def test_zero_is_empty_and_from_int_is_canonical():
    print("[canonical] zero -> (), 2**32 -> (0, 1), no top zero limb")
    assert mag.from_int(0) == ()
    assert mag.from_int(1 << LIMB_BITS) == (0, 1)
    assert mag.normalize([5, 0, 0]) == (5,)
    assert mag.normalize([0, 0]) == ()
    assert mag.to_int((0, 1)) == 1 << LIMB_BITS


def test_from_int_negative_raises():
    print("[from_int-negative] -1 -> InvariantViolation")
    with pytest.raises(InvariantViolation):
        mag.from_int(-1)


# -----------------------------
# Comparison
# -----------------------------

@pytest.mark.parametrize(
    "a,b,expected",
    [
        (0, 0, 0),
        (0, 1, -1),
        (1 << 40, 1 << 39, 1),
        (LIMB_MASK, 1 << LIMB_BITS, -1),
        ((7 << 64) | 3, (7 << 64) | 2, 1),
        (12345678901234567890, 12345678901234567890, 0),
    ],
)
def test_compare(a, b, expected):
    print(f"[compare] {a} vs {b} -> expect {expected}")
    assert mag.compare(_m(a), _m(b)) == expected


# -----------------------------
# Addition / subtraction
# -----------------------------

def test_add_carry_ripples_into_new_limb():
    print("[add-carry] (2**96 - 1) + 1 -> 2**96, one extra limb")
    a = _m((1 << 96) - 1)
    z = mag.add(a, mag.ONE)
    assert z == (0, 0, 0, 1)
    assert len(z) <= max(len(a), 1) + 1


def test_add_is_pure():
    print("[add-pure] inputs are untouched and output does not alias them")
    a = _m(123456789123456789)
    b = _m(987654321)
    before = (a, b)
    z = mag.add(a, b)
    assert (a, b) == before
    assert mag.to_int(z) == 123456789123456789 + 987654321


def test_subtract_borrow_and_trim():
    print("[sub-borrow] 2**64 - 1 -> two all-ones limbs; x - x -> ()")
    assert mag.subtract(_m(1 << 64), mag.ONE) == (LIMB_MASK, LIMB_MASK)
    x = _m(99999999999999999999)
    assert mag.subtract(x, x) == ()


def test_subtract_underflow_raises():
    print("[sub-underflow] 1 - 2 and short - long -> InvariantViolation")
    with pytest.raises(InvariantViolation):
        mag.subtract(_m(1), _m(2))
    with pytest.raises(InvariantViolation):
        mag.subtract(_m(1), _m(1 << 40))


# -----------------------------
# Multiplication
# -----------------------------

def test_multiply_matches_native():
    print("[mul] multi-limb product equals native product")
    a = 0xFFFFFFFF_FFFFFFFF_FFFFFFFF
    b = 0x1_00000001_00000001
    assert mag.to_int(mag.multiply(_m(a), _m(b))) == a * b
    assert mag.multiply(_m(a), mag.ZERO) == ()


def test_muladd_small():
    print("[muladd] (2**32 - 1) * 10 + 9")
    assert mag.to_int(mag.muladd_small(_m(LIMB_MASK), 10, 9)) == LIMB_MASK * 10 + 9


# -----------------------------
# Division
# -----------------------------

def test_divide_by_zero_raises():
    print("[div-zero] a / 0 -> DivisionByZeroError")
    with pytest.raises(DivisionByZeroError):
        mag.divide_and_remainder(_m(10), mag.ZERO)


def test_divide_small_divisor():
    print("[div-single-limb] 10**30 / 7")
    q, r = mag.divide_and_remainder(_m(10 ** 30), _m(7))
    assert mag.to_int(q) == 10 ** 30 // 7
    assert mag.to_int(r) == 10 ** 30 % 7


def test_divide_dividend_smaller_than_divisor():
    print("[div-small-dividend] 5 / 2**70 -> (0, 5)")
    q, r = mag.divide_and_remainder(_m(5), _m(1 << 70))
    assert q == ()
    assert r == (5,)


@pytest.mark.parametrize(
    "a,b",
    [
        (2 ** 200 + 12345, 2 ** 64 + 1),
        (3 ** 150, 7 ** 40),
        ((1 << 128) - 1, (1 << 64) - 1),
        # divisor top limbs at the normalisation boundary
        (0x7FFF_FFFF_8000_0000_0000_0000_0000_0000, 0x8000_0000_0000_0000_0000_0001),
        (0x8000_0000_0000_0000_0000_0000_0000_0003, 0x2000_0000_0000_0000_0000_0001),
    ],
)
def test_divide_knuth_matches_native(a, b):
    print(f"[div-knuth] {a} / {b}")
    q, r = mag.divide_and_remainder(_m(a), _m(b))
    assert mag.to_int(q) == a // b
    assert mag.to_int(r) == a % b
    assert mag.compare(r, _m(b)) < 0


# -----------------------------
# Shifts and bits
# -----------------------------

def test_shifts():
    print("[shift] 1 << 100 >> 37 and shift past length")
    one = mag.ONE
    assert mag.to_int(mag.shift_left(one, 100)) == 1 << 100
    assert mag.to_int(mag.shift_right(mag.shift_left(one, 100), 37)) == 1 << 63
    assert mag.shift_right(_m(12345), 64) == ()
    assert mag.shift_left(mag.ZERO, 5) == ()
    with pytest.raises(InvariantViolation):
        mag.shift_left(one, -1)


def test_bit_length_test_bit_lowest_set_bit():
    print("[bits] bit_length/test_bit/lowest_set_bit on 2**70 + 8")
    a = _m((1 << 70) + 8)
    assert mag.bit_length(a) == 71
    assert mag.test_bit(a, 70)
    assert mag.test_bit(a, 3)
    assert not mag.test_bit(a, 4)
    assert not mag.test_bit(a, 500)
    assert mag.lowest_set_bit(a) == 3
    assert mag.lowest_set_bit(mag.ZERO) == -1
    assert mag.bit_length(mag.ZERO) == 0
    with pytest.raises(InvalidArgumentError):
        mag.test_bit(a, -1)


# -----------------------------
# Radix text (unsigned)
# -----------------------------

@pytest.mark.parametrize(
    "n,radix,text",
    [
        (0, 10, "0"),
        (255, 16, "ff"),
        (255, 2, "11111111"),
        (35, 36, "z"),
        (10 ** 25, 10, "1" + "0" * 25),
        (2 ** 64, 16, "1" + "0" * 16),
    ],
)
def test_to_radix_string(n, radix, text):
    print(f"[to_radix] {n} radix {radix} -> {text}")
    assert mag.to_radix_string(_m(n), radix) == text


def test_parse_radix_string_case_insensitive_and_leading_zeros():
    print("[parse_radix] 'FF' and '00ff' radix 16 -> 255; long decimal")
    assert mag.parse_radix_string("FF", 16) == (255,)
    assert mag.parse_radix_string("00ff", 16) == (255,)
    digits = "98765432109876543210987654321"
    assert mag.to_int(mag.parse_radix_string(digits, 10)) == 98765432109876543210987654321


@pytest.mark.parametrize("text,radix", [("", 10), ("12a", 10), ("2", 2), ("1 2", 10), ("-1", 10)])
def test_parse_radix_string_rejects_malformed(text, radix):
    print(f"[parse_radix-malformed] {text!r} radix {radix} -> NumberFormatError")
    with pytest.raises(NumberFormatError):
        mag.parse_radix_string(text, radix)


def test_radix_out_of_range():
    print("[radix-range] radix 1 / 37 -> parse NumberFormatError, format InvalidArgumentError")
    with pytest.raises(NumberFormatError):
        mag.parse_radix_string("1", 37)
    with pytest.raises(InvalidArgumentError):
        mag.to_radix_string(mag.ONE, 1)
