"""
Property-based tests using Hypothesis.

Every BigInteger result is checked against the native int, which serves as
the reference implementation for the limb engine.
"""

import math

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from bignumbers import BigDecimal, BigInteger
from bignumbers.core.constants import LIMB_BASE


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def big_ints(bits: int = 320):
    """Hypothesis strategy mixing small values with multi-limb ones."""
    bound = 1 << bits
    near_limbs = st.sampled_from([LIMB_BASE ** k + d for k in (1, 2, 3) for d in (-1, 0, 1)])
    return st.one_of(
        st.integers(min_value=-1000, max_value=1000),
        st.integers(min_value=-bound, max_value=bound),
        near_limbs,
        near_limbs.map(lambda v: -v),
    )


def _bi(x: int) -> BigInteger:
    return BigInteger.value_of(x)


decimals = st.builds(
    lambda unscaled, scale: BigDecimal.value_of(unscaled, scale),
    big_ints(128),
    st.integers(min_value=-40, max_value=40),
)


# ---------------------------------------------------------------------------
# Round-trip properties
# ---------------------------------------------------------------------------

class TestRoundTrip:

    @given(x=big_ints(), radix=st.integers(min_value=2, max_value=36))
    def test_string_round_trip(self, x, radix):
        text = _bi(x).to_string(radix)
        assert BigInteger.parse(text, radix) == _bi(x)
        assert int(text, radix) == x

    @given(x=big_ints())
    def test_decimal_string_matches_native(self, x):
        assert str(_bi(x)) == str(x)

    @given(x=big_ints())
    def test_byte_array_round_trip(self, x):
        data = _bi(x).to_byte_array()
        assert BigInteger.from_byte_array(data) == _bi(x)
        assert int.from_bytes(data, "big", signed=True) == x
        # minimal: one sign bit beyond the two's-complement bit length
        assert len(data) == (x if x >= 0 else ~x).bit_length() // 8 + 1

    @given(d=decimals)
    def test_decimal_round_trip(self, d):
        back = BigDecimal.parse(d.to_string())
        assert back == d
        assert back.unscaled == d.unscaled
        assert back.scale == d.scale

    @given(d=decimals)
    def test_plain_string_is_numerically_equal(self, d):
        assert BigDecimal.parse(d.to_plain_string()).compare_to(d) == 0


# ---------------------------------------------------------------------------
# Additive and multiplicative properties
# ---------------------------------------------------------------------------

class TestArithmeticProperties:

    @given(x=big_ints())
    def test_additive_identity(self, x):
        assert _bi(x).add(BigInteger.ZERO) == _bi(x)

    @given(x=big_ints())
    def test_additive_inverse(self, x):
        neg = BigInteger.ZERO.subtract(_bi(x))
        assert neg == _bi(x).negate()
        assert _bi(x).add(neg) == BigInteger.ZERO

    @given(a=big_ints(), b=big_ints())
    def test_add_and_multiply_commute(self, a, b):
        assert _bi(a).add(_bi(b)) == _bi(b).add(_bi(a))
        assert _bi(a).multiply(_bi(b)) == _bi(b).multiply(_bi(a))
        assert _bi(a).add(_bi(b)) == _bi(a + b)
        assert _bi(a).multiply(_bi(b)) == _bi(a * b)

    @given(a=big_ints(), b=big_ints(), c=big_ints())
    @settings(max_examples=100)
    def test_add_and_multiply_associate(self, a, b, c):
        A, B, C = _bi(a), _bi(b), _bi(c)
        assert A.add(B).add(C) == A.add(B.add(C))
        assert A.multiply(B).multiply(C) == A.multiply(B.multiply(C))

    @given(a=big_ints(), b=big_ints())
    def test_subtract_matches_native(self, a, b):
        assert _bi(a).subtract(_bi(b)) == _bi(a - b)


# ---------------------------------------------------------------------------
# Division properties
# ---------------------------------------------------------------------------

class TestDivisionProperties:

    @given(a=big_ints(), b=big_ints())
    def test_division_contract(self, a, b):
        assume(b != 0)
        A, B = _bi(a), _bi(b)
        q = A.divide(B)
        r = A.remainder(B)
        assert q.multiply(B).add(r) == A
        assert r.signum() in (0, A.signum())
        assert r.abs().compare_to(B.abs()) < 0

    @given(a=big_ints(), b=big_ints())
    def test_divide_truncates_toward_zero(self, a, b):
        assume(b != 0)
        expected = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            expected = -expected
        assert int(_bi(a).divide(_bi(b))) == expected

    @given(a=big_ints(), m=big_ints())
    def test_mod_contract(self, a, m):
        assume(m > 0)
        A, M = _bi(a), _bi(m)
        r = A.mod(M)
        assert BigInteger.ZERO.compare_to(r) <= 0 < M.compare_to(r)
        assert r == A.remainder(M).add(M).remainder(M)
        assert int(r) == a % m

    @given(a=big_ints(), b=big_ints())
    @settings(max_examples=100)
    def test_gcd_matches_native(self, a, b):
        assert int(_bi(a).gcd(_bi(b))) == math.gcd(a, b)


# ---------------------------------------------------------------------------
# Bitwise and shift properties
# ---------------------------------------------------------------------------

class TestBitwiseProperties:

    @given(a=big_ints(), b=big_ints())
    def test_sign_rules(self, a, b):
        A, B = _bi(a), _bi(b)
        assert (A.xor(B).signum() < 0) == ((a < 0) != (b < 0))
        assert (A.and_(B).signum() < 0) == (a < 0 and b < 0)
        assert (A.or_(B).signum() < 0) == (a < 0 or b < 0)

    @given(a=big_ints(), b=big_ints())
    def test_bitwise_matches_native(self, a, b):
        A, B = _bi(a), _bi(b)
        assert int(A.and_(B)) == a & b
        assert int(A.or_(B)) == a | b
        assert int(A.xor(B)) == a ^ b
        assert int(A.and_not(B)) == a & ~b
        assert int(A.not_()) == ~a

    @given(a=big_ints(), n=st.integers(min_value=-200, max_value=200))
    def test_shift_inversion(self, a, n):
        assert _bi(a).shift_left(n) == _bi(a).shift_right(-n)

    @given(a=big_ints(), n=st.integers(min_value=0, max_value=200))
    def test_shifts_match_native(self, a, n):
        assert int(_bi(a).shift_left(n)) == a << n
        assert int(_bi(a).shift_right(n)) == a >> n

    @given(a=big_ints())
    def test_bit_length_matches_native(self, a):
        assert _bi(a).bit_length() == (a if a >= 0 else ~a).bit_length()

    @given(a=big_ints(), n=st.integers(min_value=0, max_value=400))
    def test_test_bit_matches_native(self, a, n):
        assert _bi(a).test_bit(n) == bool((a >> n) & 1)


# ---------------------------------------------------------------------------
# Example scenarios
# ---------------------------------------------------------------------------

def test_integer_scenarios():
    print("[scenario] 123 + -23, 7 / 2, 7 rem 2, -7 mod 3")
    assert BigInteger.parse("123").add(BigInteger.parse("-23")) == BigInteger.parse("100")
    assert BigInteger.parse("7").divide(BigInteger.parse("2")) == _bi(3)
    assert BigInteger.parse("7").remainder(BigInteger.parse("2")) == _bi(1)
    assert BigInteger.parse("-7").mod(BigInteger.parse("3")) == _bi(2)


@pytest.mark.parametrize("build,expected", [
    (lambda: BigDecimal.parse("1.23E+3"), "1.23E+3"),
    (lambda: BigDecimal.parse("123").multiply(BigDecimal.parse("0.1")), "12.3"),
])
def test_decimal_scenarios(build, expected):
    print(f"[scenario] decimal -> {expected}")
    assert build().to_string() == expected
