from __future__ import annotations
from typing import List

import pytest
from hypothesis import settings

from bignumbers import BigDecimal, BigInteger
from bignumbers.core.constants import LIMB_BASE


# -----------------------------
# Hypothesis profiles
# -----------------------------

settings.register_profile("default", max_examples=200, deadline=None)
settings.register_profile("ci", max_examples=1000, deadline=None)
settings.load_profile("default")


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def limb_boundary_values() -> List[int]:
    """Native ints straddling 32/64/96-bit limb boundaries, both signs."""
    base = []
    for k in (1, 2, 3):
        edge = LIMB_BASE ** k
        base.extend([edge - 1, edge, edge + 1])
    return [0, 1, 2, 255, 256] + base + [-v for v in base]


@pytest.fixture()
def limb_boundary_integers(limb_boundary_values) -> List[BigInteger]:
    return [BigInteger.value_of(v) for v in limb_boundary_values]


@pytest.fixture()
def sample_decimals() -> List[BigDecimal]:
    texts = ["0", "0.00", "1", "-1.5", "123.4500", "1.23E+3", "1E-7", "-0.000001", "9.99E+10"]
    return [BigDecimal.parse(t) for t in texts]
