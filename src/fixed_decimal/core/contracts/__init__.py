"""
Contract Validation Module

Модуль для валидации JSON контракта сериализованной записи FixedDecimal.
"""

from .json_codec import decode_json, encode_json
from .validators import (
    ContractValidator,
    FixedDecimalValidator,
    SchemaLoader,
    validate_fixed_decimal,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FixedDecimalValidator",
    # Functions
    "validate_fixed_decimal",
    "encode_json",
    "decode_json",
]
