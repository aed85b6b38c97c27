"""
Fixed Point — точная decimal-арифметика для FixedDecimal

Все промежуточные вычисления выполняются в decimal.Decimal над точной
десятичной записью операндов (кратчайший repr для float). Так 1.234 остаётся
1.234, а не 1.2339999999999999857..., и floor не «съедает» последнюю цифру.

Округление всегда к минус бесконечности (ROUND_FLOOR) на PRECISION-м знаке:
    1.2345  -> 1.234
   -1.2345  -> -1.235
"""

from decimal import ROUND_FLOOR, Decimal, localcontext
from typing import Final

from fixed_decimal.core.math.numerical_safeguards import PRECISION, SCALE_FACTOR

# Шаг квантования: 0.001
QUANTUM: Final[Decimal] = Decimal(1).scaleb(-PRECISION)

# Точность контекста для промежуточных результатов (произведение двух
# 9-значных чисел с дробной частью + запас для деления)
WORKING_PRECISION: Final[int] = 60


def to_exact_decimal(value: int | float | Decimal) -> Decimal:
    """
    Точная десятичная запись числа.

    float конвертируется через repr (кратчайшая запись, восстанавливающая
    тот же float), а не через Decimal(float), который раскрывает двоичную
    погрешность.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(repr(float(value)))


def floor_to_precision(value: int | float | Decimal) -> Decimal:
    """
    floor(value * 10**PRECISION) / 10**PRECISION, вычисленный точно.

    Examples:
        >>> floor_to_precision(1.2345)
        Decimal('1.234')
        >>> floor_to_precision(-1.2345)
        Decimal('-1.235')
    """
    with localcontext() as ctx:
        ctx.prec = WORKING_PRECISION
        return to_exact_decimal(value).quantize(QUANTUM, rounding=ROUND_FLOOR)


def display_to_stored(value: int | float | Decimal) -> int:
    """floor(display * SCALE_FACTOR) как int."""
    with localcontext() as ctx:
        ctx.prec = WORKING_PRECISION
        scaled = to_exact_decimal(value) * SCALE_FACTOR
        return int(scaled.to_integral_value(rounding=ROUND_FLOOR))


def stored_to_display(value: int | float | Decimal) -> Decimal:
    """stored / SCALE_FACTOR без округления."""
    with localcontext() as ctx:
        ctx.prec = WORKING_PRECISION
        return to_exact_decimal(value) / SCALE_FACTOR


def as_float(value: Decimal) -> float:
    """Decimal -> float с нормализацией -0.0 в 0.0."""
    return float(value) + 0.0


def exact_add(a: Decimal, b: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = WORKING_PRECISION
        return a + b


def exact_subtract(a: Decimal, b: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = WORKING_PRECISION
        return a - b


def exact_multiply(a: Decimal, b: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = WORKING_PRECISION
        return a * b


def exact_divide(a: Decimal, b: Decimal) -> Decimal:
    """
    a / b с WORKING_PRECISION значащими цифрами.

    Вызывающий код обязан проверить b != 0 заранее (validate_divisor).
    """
    with localcontext() as ctx:
        ctx.prec = WORKING_PRECISION
        return a / b
