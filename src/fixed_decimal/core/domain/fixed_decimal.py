"""
FixedDecimal — значение с фиксированной точностью (3 дробных знака)

Immutable value object для денежных сумм и очков там, где float-арифметика
накапливает ошибку.

Два представления (Representation):
- STORED:  magnitude = floor(display * 1000), целое для хранения
- DISPLAY: magnitude = stored / 1000, десятичное для людей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. magnitude всегда конечен и в [MIN_VALUE, MAX_VALUE]
2. Экземпляр никогда не мутирует: каждая операция возвращает новый объект
3. Результат арифметики всегда DISPLAY и проходит from_display_number
   (повторная валидация + floor на 3-м знаке)
4. Округление только к минус бесконечности, никогда half-up/half-even

Конструирование — только через фабрики:
    FixedDecimal.from_display_number(1.234)
    FixedDecimal.from_stored_integer(1234)
    FixedDecimal.zero()
    FixedDecimal.from_serialized({"value": 1234, "state": "stored"})
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Union

import structlog

from fixed_decimal.core.domain.serialized import Representation, SerializedFixedDecimal
from fixed_decimal.core.math.fixed_point import (
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
from fixed_decimal.core.math.numerical_safeguards import (
    PRECISION,
    is_real_number,
    validate_divisor,
    validate_magnitude,
)

logger = structlog.get_logger(__name__)


Number = Union[int, float, Decimal]


# =============================================================================
# FIXED DECIMAL
# =============================================================================


@dataclass(frozen=True, eq=False, slots=True)
class FixedDecimal:
    """
    Десятичное значение с фиксированными 3 дробными знаками.

    Прямой вызов конструктора не предусмотрен; используйте фабрики.
    __post_init__ всё равно валидирует magnitude, так что невалидный
    экземпляр не может быть создан ни одним путём.

    Attributes:
        magnitude: Сырое значение (stored: масштабированное, display: десятичное)
        representation: STORED или DISPLAY
    """

    magnitude: Number
    representation: Representation

    def __post_init__(self) -> None:
        validate_magnitude(self.magnitude)
        if not isinstance(self.representation, Representation):
            object.__setattr__(
                self, "representation", Representation(self.representation)
            )

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_display_number(cls, value: Number) -> FixedDecimal:
        """
        Создание из display-числа с floor на 3-м знаке.

        Округление к минус бесконечности, в том числе для отрицательных:
            1.2345  -> 1.234
           -1.2345  -> -1.235

        Raises:
            InvalidValue: NaN/Inf/не число
            OutOfRange: вне [MIN_VALUE, MAX_VALUE]
        """
        validate_magnitude(value)
        return cls(as_float(floor_to_precision(value)), Representation.DISPLAY)

    @classmethod
    def from_stored_integer(cls, value: Number) -> FixedDecimal:
        """Создание из stored-значения без масштабирования."""
        return cls(value, Representation.STORED)

    @classmethod
    def zero(cls) -> FixedDecimal:
        return cls(0.0, Representation.DISPLAY)

    @classmethod
    def from_serialized(
        cls, data: Mapping[str, Any] | SerializedFixedDecimal
    ) -> FixedDecimal:
        """
        Десериализация из записи {"value": ..., "state": "stored" | "display"}.

        Точная инверсия serialize(): value не преобразуется.

        Args:
            data: dict-подобная запись или SerializedFixedDecimal

        Raises:
            pydantic.ValidationError: запись некорректной формы
            InvalidValue / OutOfRange: value не проходит валидацию
        """
        if isinstance(data, SerializedFixedDecimal):
            record = data
        else:
            record = SerializedFixedDecimal.model_validate(data)
        return cls(record.value, record.state)

    # -------------------------------------------------------------------------
    # Конверсия представлений
    # -------------------------------------------------------------------------

    @property
    def is_stored(self) -> bool:
        return self.representation is Representation.STORED

    @property
    def is_display(self) -> bool:
        return self.representation is Representation.DISPLAY

    def to_display(self) -> FixedDecimal:
        """No-op для DISPLAY; иначе stored / 1000."""
        if self.is_display:
            return self
        return FixedDecimal(
            as_float(stored_to_display(self.magnitude)), Representation.DISPLAY
        )

    def to_stored(self) -> FixedDecimal:
        """
        No-op для STORED; иначе floor(display * 1000).

        Raises:
            OutOfRange: если масштабированное значение вне диапазона
                (display > 999 999.999 не помещается в stored)
        """
        if self.is_stored:
            return self
        return FixedDecimal(display_to_stored(self.magnitude), Representation.STORED)

    def to_number(self) -> Number:
        """Display-эквивалент независимо от представления."""
        if self.is_stored:
            return as_float(stored_to_display(self.magnitude))
        return self.magnitude

    def to_text(self) -> str:
        """to_number() ровно с 3 дробными знаками."""
        return f"{self.to_number():.{PRECISION}f}"

    def is_zero(self) -> bool:
        return self.to_number() == 0

    def _exact_number(self) -> Decimal:
        if self.is_stored:
            return stored_to_display(self.magnitude)
        return to_exact_decimal(self.magnitude)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: FixedDecimal | Number) -> FixedDecimal:
        other = _coerce_operand(other)
        return FixedDecimal.from_display_number(
            exact_add(self._exact_number(), other._exact_number())
        )

    def subtract(self, other: FixedDecimal | Number) -> FixedDecimal:
        other = _coerce_operand(other)
        return FixedDecimal.from_display_number(
            exact_subtract(self._exact_number(), other._exact_number())
        )

    def multiply(self, other: FixedDecimal | Number) -> FixedDecimal:
        """
        Произведение с floor на 3-м знаке.

        1.234 * 2.345 = 2.89373 -> 2.893
        """
        other = _coerce_operand(other)
        return FixedDecimal.from_display_number(
            exact_multiply(self._exact_number(), other._exact_number())
        )

    def divide(self, other: FixedDecimal | Number) -> FixedDecimal:
        """
        Частное с floor на 3-м знаке.

        Raises:
            DivisionByZero: если other.to_number() == 0 (любое представление)
        """
        other = _coerce_operand(other)
        validate_divisor(other.to_number())
        return FixedDecimal.from_display_number(
            exact_divide(self._exact_number(), other._exact_number())
        )

    def absolute_value(self) -> FixedDecimal:
        return FixedDecimal.from_display_number(abs(self._exact_number()))

    def negate(self) -> FixedDecimal:
        return FixedDecimal.from_display_number(-self._exact_number())

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def equals(self, other: FixedDecimal | Number) -> bool:
        return self.to_number() == _comparable(other)

    def greater_than(self, other: FixedDecimal | Number) -> bool:
        return self.to_number() > _comparable(other)

    def less_than(self, other: FixedDecimal | Number) -> bool:
        return self.to_number() < _comparable(other)

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def serialize(self) -> dict[str, Any]:
        """
        Запись {"value": magnitude, "state": "stored" | "display"}.

        value — сырое magnitude, не to_number(): STORED отдаёт
        масштабированное целое, DISPLAY — десятичное.
        """
        return {"value": self.magnitude, "state": self.representation.value}

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> FixedDecimal:
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> FixedDecimal:
        # sum() стартует с int 0
        if not _is_operand(other):
            return NotImplemented
        return _coerce_operand(other).add(self)

    def __sub__(self, other: object) -> FixedDecimal:
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: object) -> FixedDecimal:
        if not _is_operand(other):
            return NotImplemented
        return _coerce_operand(other).subtract(self)

    def __mul__(self, other: object) -> FixedDecimal:
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: object) -> FixedDecimal:
        if not _is_operand(other):
            return NotImplemented
        return _coerce_operand(other).multiply(self)

    def __truediv__(self, other: object) -> FixedDecimal:
        if not _is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: object) -> FixedDecimal:
        if not _is_operand(other):
            return NotImplemented
        return _coerce_operand(other).divide(self)

    def __neg__(self) -> FixedDecimal:
        return self.negate()

    def __abs__(self) -> FixedDecimal:
        return self.absolute_value()

    def __eq__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.to_number() <= _comparable(other)

    def __gt__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.to_number() >= _comparable(other)

    def __hash__(self) -> int:
        return hash(self.to_number())

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __float__(self) -> float:
        return float(self.to_number())

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"FixedDecimal({self.magnitude!r}, {self.representation.value})"


# =============================================================================
# HELPERS
# =============================================================================


def _is_operand(value: object) -> bool:
    return isinstance(value, FixedDecimal) or is_real_number(value)


def _coerce_operand(value: FixedDecimal | Number) -> FixedDecimal:
    """Сырое число проходит через from_display_number (floor + валидация)."""
    if isinstance(value, FixedDecimal):
        return value
    return FixedDecimal.from_display_number(value)


def _comparable(value: FixedDecimal | Number) -> Number:
    if isinstance(value, FixedDecimal):
        return value.to_number()
    if not is_real_number(value):
        raise TypeError(
            f"cannot compare FixedDecimal with {type(value).__name__}"
        )
    return value


def fixed_sum(values: Iterable[FixedDecimal]) -> FixedDecimal:
    """
    Сумма последовательности через add(), начиная с zero().

    Каждый промежуточный результат валидируется: переполнение диапазона
    на любом шаге поднимает OutOfRange.
    """
    total = FixedDecimal.zero()
    count = 0
    for value in values:
        total = total.add(value)
        count += 1
    logger.debug("fixed_sum_computed", count=count, total=total.to_text())
    return total
