"""
Numerical Safeguards — валидация входных чисел для FixedDecimal

Модуль обеспечивает единые правила приёма числа в FixedDecimal:
- NaN/Inf отклоняются (InvalidValue)
- Значения вне диапазона [MIN_VALUE, MAX_VALUE] отклоняются (OutOfRange)
- Деление на ноль отклоняется (DivisionByZero)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Невалидное значение никогда не попадает внутрь FixedDecimal
2. Ошибка поднимается синхронно в точке обнаружения, без fallback
3. Все проверки детерминированы и не имеют побочных эффектов (кроме debug-лога)
"""

import math
from decimal import Decimal
from numbers import Real
from typing import Final

import structlog

logger = structlog.get_logger(__name__)


# =============================================================================
# ДИАПАЗОН И ТОЧНОСТЬ
# =============================================================================

# Количество дробных знаков (фиксировано)
PRECISION: Final[int] = 3

# Множитель display -> stored (10 ** PRECISION)
SCALE_FACTOR: Final[int] = 10**PRECISION

# Допустимый диапазон magnitude (одинаков для stored и display)
MIN_VALUE: Final[int] = -999_999_999
MAX_VALUE: Final[int] = 999_999_999


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FixedDecimalError(Exception):
    """Базовая ошибка FixedDecimal."""


class InvalidValue(FixedDecimalError, ValueError):
    """Значение не является конечным вещественным числом (NaN, Inf, не число)."""


class OutOfRange(FixedDecimalError, ValueError):
    """Значение вне диапазона [MIN_VALUE, MAX_VALUE]."""


class DivisionByZero(FixedDecimalError, ZeroDivisionError):
    """Делитель равен нулю (по to_number(), независимо от представления)."""


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_real_number(value: object) -> bool:
    """
    Проверка, что value — вещественное число.

    bool исключён: True/False не принимаются как magnitude.
    Decimal принимается наравне с int/float.
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, (Real, Decimal))


def is_valid_float(value: float | Decimal) -> bool:
    """True если значение конечное (не NaN, не Inf)."""
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


def validate_finite(value: object) -> None:
    """
    Валидация, что значение — конечное число.

    Raises:
        InvalidValue: если value не число, NaN или Inf
    """
    if not is_real_number(value):
        logger.debug("fixed_decimal_rejected", reason="not_a_number", value=repr(value))
        raise InvalidValue(f"value must be a real number, got {type(value).__name__}")

    if not is_valid_float(value):
        logger.debug("fixed_decimal_rejected", reason="not_finite", value=repr(value))
        raise InvalidValue(f"value must be finite (not NaN/Inf), got {value}")


def validate_in_range(
    value: float | Decimal,
    min_value: float = MIN_VALUE,
    max_value: float = MAX_VALUE,
) -> None:
    """
    Валидация, что значение в заданном диапазоне (границы включительно).

    Raises:
        OutOfRange: если value < min_value или value > max_value
    """
    if value < min_value or value > max_value:
        logger.debug(
            "fixed_decimal_rejected",
            reason="out_of_range",
            value=repr(value),
            min_value=min_value,
            max_value=max_value,
        )
        raise OutOfRange(f"value must be in [{min_value}, {max_value}], got {value}")


def validate_magnitude(value: object) -> None:
    """
    Полная валидация magnitude: конечность, затем диапазон.

    Вызывается каждым конструктором FixedDecimal и при десериализации.

    Raises:
        InvalidValue: NaN/Inf/не число
        OutOfRange: вне [MIN_VALUE, MAX_VALUE]

    Examples:
        >>> validate_magnitude(1.5)
        >>> validate_magnitude(1e10)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        OutOfRange: ...
    """
    validate_finite(value)
    validate_in_range(value)


def validate_divisor(value: float | Decimal) -> None:
    """
    Проверка делителя: ровно 0 запрещён (без epsilon-зоны).

    Raises:
        DivisionByZero: если value == 0
    """
    if value == 0:
        logger.debug("fixed_decimal_rejected", reason="division_by_zero")
        raise DivisionByZero("cannot divide by a zero-valued FixedDecimal")
