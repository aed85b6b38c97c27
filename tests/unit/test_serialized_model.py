"""
Tests for SerializedFixedDecimal Pydantic model

Покрывает:
- Создание и валидацию записи
- Сохранение типа value (int остаётся int, float остаётся float)
- Enum валидацию state
- Запрет лишних полей
- Immutability (frozen=True)
- JSON сериализацию/десериализацию
"""

import pytest
from pydantic import ValidationError

from fixed_decimal import Representation, SerializedFixedDecimal


def test_record_creation():
    """Тест создания записи из dict."""
    record = SerializedFixedDecimal.model_validate({"value": 1234, "state": "stored"})

    assert record.value == 1234
    assert record.state is Representation.STORED


def test_record_keeps_value_type():
    """int не превращается в float и наоборот."""
    stored = SerializedFixedDecimal(value=1234, state="stored")
    display = SerializedFixedDecimal(value=1.234, state="display")

    assert isinstance(stored.value, int)
    assert isinstance(display.value, float)


def test_record_state_enum_validation():
    """Тест enum валидации state."""
    with pytest.raises(ValidationError, match="Input should be"):
        SerializedFixedDecimal(value=1, state="cents")


def test_record_required_fields():
    """Тест обязательных полей."""
    with pytest.raises(ValidationError):
        SerializedFixedDecimal.model_validate({"state": "display"})

    with pytest.raises(ValidationError):
        SerializedFixedDecimal.model_validate({"value": 1.0})


def test_record_forbids_extra_fields():
    """Тест запрета лишних полей."""
    with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
        SerializedFixedDecimal.model_validate(
            {"value": 1.0, "state": "display", "currency": "EUR"}
        )


def test_record_rejects_non_numeric_value():
    """Тест типа value."""
    with pytest.raises(ValidationError):
        SerializedFixedDecimal.model_validate({"value": "abc", "state": "display"})


@pytest.mark.parametrize("value", [True, False, "1234", "1.5"])
def test_record_strict_value_type(value):
    """Тест strict-типа value: bool и числовые строки не приводятся."""
    with pytest.raises(ValidationError):
        SerializedFixedDecimal.model_validate({"value": value, "state": "stored"})


def test_record_immutability():
    """Тест immutability записи (frozen=True)."""
    record = SerializedFixedDecimal(value=1.5, state="display")

    with pytest.raises(ValidationError, match="frozen"):
        record.value = 2.5  # type: ignore


def test_record_json_round_trip():
    """Тест JSON сериализации/десериализации."""
    record = SerializedFixedDecimal(value=1234, state="stored")

    json_text = record.model_dump_json()
    restored = SerializedFixedDecimal.model_validate_json(json_text)

    assert restored == record
    assert record.model_dump(mode="json") == {"value": 1234, "state": "stored"}
