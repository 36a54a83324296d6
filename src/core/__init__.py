"""
Core fixed-point decimal engine.

Contains the FixedDecimal value type, exponent safeguards, rounding
algorithms and the JSON contract for the value's dict form.
"""
