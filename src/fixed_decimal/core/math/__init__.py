"""
Core math modules для fixed_decimal

Валидация чисел и точная decimal-арифметика с floor-квантованием.
"""

# Numerical Safeguards
from fixed_decimal.core.math.numerical_safeguards import (
    # Constants
    MAX_VALUE,
    MIN_VALUE,
    PRECISION,
    SCALE_FACTOR,
    # Exceptions
    DivisionByZero,
    FixedDecimalError,
    InvalidValue,
    OutOfRange,
    # Checks
    is_real_number,
    is_valid_float,
    validate_divisor,
    validate_finite,
    validate_in_range,
    validate_magnitude,
)

# Fixed Point
from fixed_decimal.core.math.fixed_point import (
    QUANTUM,
    WORKING_PRECISION,
    as_float,
    display_to_stored,
    exact_add,
    exact_divide,
    exact_multiply,
    exact_subtract,
    floor_to_precision,
    stored_to_display,
    to_exact_decimal,
)

__all__ = [
    # Numerical Safeguards — Constants
    "MAX_VALUE",
    "MIN_VALUE",
    "PRECISION",
    "SCALE_FACTOR",
    # Numerical Safeguards — Exceptions
    "DivisionByZero",
    "FixedDecimalError",
    "InvalidValue",
    "OutOfRange",
    # Numerical Safeguards — Checks
    "is_real_number",
    "is_valid_float",
    "validate_divisor",
    "validate_finite",
    "validate_in_range",
    "validate_magnitude",
    # Fixed Point — Constants
    "QUANTUM",
    "WORKING_PRECISION",
    # Fixed Point — Functions
    "as_float",
    "display_to_stored",
    "exact_add",
    "exact_divide",
    "exact_multiply",
    "exact_subtract",
    "floor_to_precision",
    "stored_to_display",
    "to_exact_decimal",
]
