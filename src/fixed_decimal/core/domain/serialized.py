"""
SerializedFixedDecimal — модель сериализованной записи FixedDecimal

Immutable Pydantic модель границы {"value": number, "state": "stored" | "display"}.
Полная совместимость с JSON Schema (contracts/schema/fixed_decimal.json).

Модель проверяет только форму записи. Конечность и диапазон value
проверяет FixedDecimal при конструировании (InvalidValue / OutOfRange).
"""

from enum import Enum

from pydantic import BaseModel, Field, StrictFloat, StrictInt


# =============================================================================
# ENUMS
# =============================================================================


class Representation(str, Enum):
    """
    Представление magnitude.

    Значения совпадают с полем state сериализованной записи.
    """

    STORED = "stored"
    DISPLAY = "display"


# =============================================================================
# RECORD MODEL
# =============================================================================


class SerializedFixedDecimal(BaseModel):
    """
    Сериализованная запись FixedDecimal.

    value хранится без преобразования: int остаётся int (stored),
    float остаётся float (display). Strict-типы: bool и числовые строки
    не приводятся к числу, а отклоняются как некорректная запись.
    """

    value: StrictInt | StrictFloat = Field(..., description="Сырое magnitude (без to_number())")
    state: Representation = Field(..., description="Представление: stored или display")

    model_config = {"frozen": True, "extra": "forbid"}
