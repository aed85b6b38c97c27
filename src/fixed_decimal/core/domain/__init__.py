"""
Domain models and value objects.

Contains the FixedDecimal value type and its serialized record model.
"""

from fixed_decimal.core.domain.fixed_decimal import FixedDecimal, fixed_sum
from fixed_decimal.core.domain.serialized import Representation, SerializedFixedDecimal

__all__ = [
    # Value type
    "FixedDecimal",
    "Representation",
    "fixed_sum",
    # Serialized record
    "SerializedFixedDecimal",
]
