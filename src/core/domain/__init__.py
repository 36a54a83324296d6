"""
Domain models and value objects.

Contains the FixedDecimal value type.
"""

from src.core.domain.fixed_decimal import FixedDecimal, Ordering, new

__all__ = [
    "FixedDecimal",
    "Ordering",
    "new",
]
