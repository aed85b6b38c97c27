"""
JSON codec для FixedDecimal

Транспорт записи {"value", "state"} в виде JSON-текста.
Каждое направление проходит через контракт fixed_decimal.json.
"""

import json

import structlog

from fixed_decimal.core.contracts.validators import validate_fixed_decimal
from fixed_decimal.core.domain.fixed_decimal import FixedDecimal

logger = structlog.get_logger(__name__)


def encode_json(value: FixedDecimal) -> str:
    """
    FixedDecimal -> JSON-текст.

    Raises:
        ValidationError: если запись не соответствует схеме
    """
    record = value.serialize()
    validate_fixed_decimal(record)
    return json.dumps(record)


def decode_json(text: str | bytes) -> FixedDecimal:
    """
    JSON-текст -> FixedDecimal.

    Порядок: json.loads -> JSON Schema -> FixedDecimal.from_serialized.

    Raises:
        json.JSONDecodeError: текст не является JSON
        ValidationError: запись не соответствует схеме
        InvalidValue: value не конечно (NaN в тексте)
    """
    data = json.loads(text)
    validate_fixed_decimal(data)
    value = FixedDecimal.from_serialized(data)
    logger.debug("fixed_decimal_decoded", state=value.representation.value)
    return value
