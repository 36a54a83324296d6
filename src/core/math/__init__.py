"""
Core math modules для FixedDecimal

Примитивы exponent-арифметики. Алгоритмы округления находятся в
src.core.math.rounding (зависят от src.core.domain).
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Constants
    EXPONENT_BITS,
    EXPONENT_MAX,
    EXPONENT_MIN,
    RADIX,
    ROUNDING_BIAS_DIGIT,
    # Exceptions
    ExponentOverflow,
    # Exponent arithmetic
    checked_exponent_sum,
    exponent_distance,
    is_exponent_in_range,
    smaller_exponent,
    # Integer primitives
    pow10,
    truncating_divide,
    # Large integers
    decimal_digits,
    max_decimal_digits,
    strip_trailing_zeros,
    # Validation
    validate_places,
)

__all__ = [
    # Constants
    "EXPONENT_BITS",
    "EXPONENT_MAX",
    "EXPONENT_MIN",
    "RADIX",
    "ROUNDING_BIAS_DIGIT",
    # Exceptions
    "ExponentOverflow",
    # Exponent arithmetic
    "checked_exponent_sum",
    "exponent_distance",
    "is_exponent_in_range",
    "smaller_exponent",
    # Integer primitives
    "pow10",
    "truncating_divide",
    # Large integers
    "decimal_digits",
    "max_decimal_digits",
    "strip_trailing_zeros",
    # Validation
    "validate_places",
]
