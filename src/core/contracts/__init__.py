"""
Contract Validation Module

Модуль для валидации JSON контракта FixedDecimal.
"""

from .validators import (
    StrictIntegerValidator,
    fixed_decimal_from_contract,
    fixed_decimal_to_contract,
    fixed_decimal_validator,
    load_fixed_decimal_schema,
    validate_fixed_decimal,
)

__all__ = [
    # Classes
    "StrictIntegerValidator",
    # Functions
    "load_fixed_decimal_schema",
    "fixed_decimal_validator",
    "validate_fixed_decimal",
    "fixed_decimal_from_contract",
    "fixed_decimal_to_contract",
]
