"""
Decimal text grammar (parse and canonical formatting) for BigDecimal.

Input grammar::

    [+|-] ( digits [ "." [digits] ] | "." digits ) [ ("e"|"E") [+|-] digits ]

The unscaled value is the concatenation of integer and fraction digits; the
scale is ``len(fraction) - exponent``.

Canonical output uses the adjusted exponent ``-scale + (ndigits - 1)``:
plain notation when ``scale >= 0`` and ``adjusted >= -6``, otherwise
scientific notation with one digit before the point and an explicit signed
exponent (``E+3`` / ``E-9``). Parsing the canonical form recovers the
identical (unscaled, scale) pair.
"""

from __future__ import annotations

from typing import Tuple

from . import magnitude as mag
from .constants import SCIENTIFIC_ADJUSTED_MIN
from .exc import NumberFormatError
from .magnitude import Magnitude

_DECIMAL_DIGITS = frozenset("0123456789")


def _all_digits(s: str) -> bool:
    return all(ch in _DECIMAL_DIGITS for ch in s)


def parse_decimal(text: str) -> Tuple[int, Magnitude, int]:
    """Split decimal text into (signum, unscaled magnitude, scale)."""
    if not isinstance(text, str):
        raise NumberFormatError(f"expected str, got {type(text).__name__}")
    if not text:
        raise NumberFormatError("zero-length decimal string")

    body = text
    sign = 1
    if body[0] in "+-":
        sign = -1 if body[0] == "-" else 1
        body = body[1:]

    exponent = 0
    cut = max(body.find("e"), body.find("E"))
    if cut >= 0:
        exp_text = body[cut + 1:]
        body = body[:cut]
        exp_digits = exp_text[1:] if exp_text[:1] in ("+", "-") else exp_text
        if not exp_digits or not _all_digits(exp_digits):
            raise NumberFormatError(f"malformed exponent in {text!r}")
        exponent = int(exp_digits)
        if exp_text[:1] == "-":
            exponent = -exponent

    int_part, dot, frac_part = body.partition(".")
    if "." in frac_part:
        raise NumberFormatError(f"more than one decimal point in {text!r}")
    if not int_part and not frac_part:
        raise NumberFormatError(f"no digits in {text!r}")
    if not _all_digits(int_part) or not _all_digits(frac_part):
        raise NumberFormatError(f"invalid character in {text!r}")

    m = mag.parse_radix_string(int_part + frac_part, 10)
    scale = len(frac_part) - exponent
    return (sign if m else 0), m, scale


def adjusted_exponent(m: Magnitude, scale: int) -> int:
    """Exponent of the leading digit when written as d.ddd x 10^adj."""
    return -scale + (len(mag.to_radix_string(m, 10)) - 1)


def format_canonical(signum: int, m: Magnitude, scale: int) -> str:
    """Canonical (plain or scientific) string for an (unscaled, scale) pair."""
    coeff = mag.to_radix_string(m, 10)
    adjusted = -scale + (len(coeff) - 1)
    prefix = "-" if signum < 0 else ""

    if scale == 0:
        return prefix + coeff
    if scale > 0 and adjusted >= SCIENTIFIC_ADJUSTED_MIN:
        return prefix + _insert_point(coeff, scale)

    # scientific notation
    mantissa = coeff[0] if len(coeff) == 1 else coeff[0] + "." + coeff[1:]
    exp_sign = "+" if adjusted >= 0 else "-"
    return f"{prefix}{mantissa}E{exp_sign}{abs(adjusted)}"


def format_plain(signum: int, m: Magnitude, scale: int) -> str:
    """Plain notation, never using an exponent."""
    coeff = mag.to_radix_string(m, 10)
    prefix = "-" if signum < 0 else ""
    if scale <= 0:
        if coeff == "0":
            return "0"
        return prefix + coeff + "0" * (-scale)
    return prefix + _insert_point(coeff, scale)


def _insert_point(coeff: str, scale: int) -> str:
    if len(coeff) > scale:
        return coeff[:-scale] + "." + coeff[-scale:]
    return "0." + "0" * (scale - len(coeff)) + coeff


__all__ = [
    "parse_decimal",
    "adjusted_exponent",
    "format_canonical",
    "format_plain",
]
