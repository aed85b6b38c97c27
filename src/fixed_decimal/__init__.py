"""
fixed_decimal — decimal values with a fixed precision of 3 fractional digits.

Values are kept either as a scaled integer ("stored") or as a human-facing
decimal ("display"); every operation returns a new, validated instance and
rounds toward negative infinity at the third decimal.

    from fixed_decimal import FixedDecimal

    a = FixedDecimal.from_display_number(1.234)
    b = FixedDecimal.from_display_number(2.345)
    a.add(b).to_text()                    # "3.579"
    a.multiply(b).to_text()               # "2.893"
    a.to_stored().serialize()             # {"value": 1234, "state": "stored"}
"""

from fixed_decimal.core.domain import (
    FixedDecimal,
    Representation,
    SerializedFixedDecimal,
    fixed_sum,
)
from fixed_decimal.core.math import (
    MAX_VALUE,
    MIN_VALUE,
    PRECISION,
    SCALE_FACTOR,
    DivisionByZero,
    FixedDecimalError,
    InvalidValue,
    OutOfRange,
)

__version__ = "1.0.0"

__all__ = [
    # Value type
    "FixedDecimal",
    "Representation",
    "SerializedFixedDecimal",
    "fixed_sum",
    # Constants
    "MAX_VALUE",
    "MIN_VALUE",
    "PRECISION",
    "SCALE_FACTOR",
    # Exceptions
    "FixedDecimalError",
    "InvalidValue",
    "OutOfRange",
    "DivisionByZero",
]
