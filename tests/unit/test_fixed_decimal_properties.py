"""
Property-based tests for FixedDecimal

Uses Hypothesis to verify:
  1. test_floor_law                   – stored/display round trip equals floor(x*1000)/1000
                                        (x limited to +/-999 999: larger display values
                                         cannot be converted to stored form)
  2. test_serialize_round_trip        – from_serialized(serialize()) is exact
  3. test_arithmetic_result_shape     – DISPLAY tag, at most 3 fractional digits
  4. test_divide_by_zero_any_tag      – zero divisor always raises DivisionByZero
  5. test_floor_never_exceeds_input   – floor(x) <= x < floor(x) + 0.001
"""

from decimal import ROUND_FLOOR, Decimal

import pytest
from hypothesis import HealthCheck, given
from hypothesis import settings as h_settings
from hypothesis import strategies as st

from fixed_decimal import DivisionByZero, FixedDecimal, Representation
from fixed_decimal.core.math.fixed_point import floor_to_precision, to_exact_decimal

# ── Hypothesis configuration ──────────────────────────────────────────────────
h_settings.register_profile(
    "ci",
    max_examples=300,
    suppress_health_check=[HealthCheck.too_slow],
)
h_settings.load_profile("ci")


# ── Strategy helpers ──────────────────────────────────────────────────────────

# The floor law holds for every finite in-range x, but to_stored() raises
# OutOfRange once display * 1000 exceeds MAX_VALUE (display > 999 999.999),
# so the round-trip strategy is narrowed to display values that fit stored form.
_storable_display = st.floats(
    min_value=-999_999.0,
    max_value=999_999.0,
    allow_nan=False,
    allow_infinity=False,
)

_small_stored = st.integers(min_value=-1_000_000, max_value=1_000_000)


@st.composite
def fixed_decimals(draw) -> FixedDecimal:
    """FixedDecimal in either representation, display value within +/-1000."""
    stored = draw(_small_stored)
    value = FixedDecimal.from_stored_integer(stored)
    if draw(st.booleans()):
        return value.to_display()
    return value


def _expected_floor(x: float) -> float:
    exact = Decimal(repr(x)).quantize(Decimal("0.001"), rounding=ROUND_FLOOR)
    return float(exact) + 0.0


# ── Properties ────────────────────────────────────────────────────────────────


class TestFixedDecimalProperties:
    @given(x=_storable_display)
    def test_floor_law(self, x: float) -> None:
        value = FixedDecimal.from_display_number(x)
        assert value.to_stored().to_display().to_number() == _expected_floor(x)

    @given(x=_storable_display)
    def test_floor_never_exceeds_input(self, x: float) -> None:
        floored = to_exact_decimal(FixedDecimal.from_display_number(x).to_number())
        exact = Decimal(repr(x))
        assert floored <= exact < floored + Decimal("0.001")

    @given(value=fixed_decimals())
    def test_serialize_round_trip(self, value: FixedDecimal) -> None:
        restored = FixedDecimal.from_serialized(value.serialize())
        assert restored.serialize() == value.serialize()
        assert type(restored.magnitude) is type(value.magnitude)

    @given(
        left=fixed_decimals(),
        right=fixed_decimals(),
        op=st.sampled_from(["add", "subtract", "multiply", "divide"]),
    )
    def test_arithmetic_result_shape(
        self, left: FixedDecimal, right: FixedDecimal, op: str
    ) -> None:
        if op == "divide" and right.is_zero():
            return
        result = getattr(left, op)(right)
        assert result.representation is Representation.DISPLAY
        exact = to_exact_decimal(result.magnitude)
        assert floor_to_precision(exact) == exact

    @given(left=fixed_decimals(), stored_zero=st.booleans())
    def test_divide_by_zero_any_tag(self, left: FixedDecimal, stored_zero: bool) -> None:
        zero = FixedDecimal.from_stored_integer(0) if stored_zero else FixedDecimal.zero()
        with pytest.raises(DivisionByZero):
            left.divide(zero)
