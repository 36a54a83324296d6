"""
Rounding — Half-Away-From-Zero & Banker's Rounding

Модуль обеспечивает детерминированное округление FixedDecimal
до заданного количества дробных разрядов places (exponent результата = -places):
- round_half_away_from_zero: 5.5 → 6, -5.5 → -6
- round_half_even (banker's rounding): 2.5 → 2, 3.5 → 4
- string_fixed / string_fixed_bank: округление + рендеринг без обрезки нулей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Exponent результата всегда равен -places
2. Округление симметрично относительно знака
3. Не-граничные случаи (не ровно половина) одинаковы для обоих алгоритмов
4. Входное значение не изменяется

АЛГОРИТМ (half away from zero):
    r = truncate(value, -places - 1)          # один лишний разряд
    r.coefficient += sign(r) × 5              # смещение на половину единицы
    q, m = divmod(r.coefficient, 10)          # floor-деление
    if q < 0 and m != 0: q += 1               # floor → усечение для отрицательных
    result = (q, -places)

АЛГОРИТМ (half to even):
    candidate = round_half_away_from_zero(value, places)
    if |value - candidate| == 5 × 10^(-places-1) and candidate нечётный:
        candidate сдвигается на единицу к нулю
"""

from src.core.domain.fixed_decimal import FixedDecimal, Ordering
from src.core.math.numerical_safeguards import (
    RADIX,
    ROUNDING_BIAS_DIGIT,
    validate_places,
)


# =============================================================================
# ROUND HALF AWAY FROM ZERO
# =============================================================================


def round_half_away_from_zero(value: FixedDecimal, places: int) -> FixedDecimal:
    """
    Округление до places дробных разрядов, половина — от нуля.

    Args:
        value: Округляемое значение
        places: Количество дробных разрядов (отрицательное — до десятков и т.д.)

    Returns:
        Новый FixedDecimal с exponent = -places

    Raises:
        ValueError: если places вне допустимого диапазона

    Examples:
        >>> round_half_away_from_zero(new(55, -1), 0).coefficient
        6
        >>> round_half_away_from_zero(new(-55, -1), 0).coefficient
        -6
        >>> str(round_half_away_from_zero(new(1234, -3), 2))
        '1.23'
    """
    validate_places(places)

    truncated = value.rescale(-places - 1)
    coefficient = truncated.coefficient

    if coefficient < 0:
        coefficient -= ROUNDING_BIAS_DIGIT
    else:
        coefficient += ROUNDING_BIAS_DIGIT

    quotient, remainder = divmod(coefficient, RADIX)
    if quotient < 0 and remainder != 0:
        quotient += 1

    return FixedDecimal(coefficient=quotient, exponent=-places)


# =============================================================================
# ROUND HALF TO EVEN (BANKER'S ROUNDING)
# =============================================================================


def round_half_even(value: FixedDecimal, places: int) -> FixedDecimal:
    """
    Банковское округление: половина — к ближайшему чётному.

    Кандидат берётся из round_half_away_from_zero; если исходное значение
    лежит ровно посередине и последняя цифра кандидата нечётная,
    кандидат сдвигается на единицу к нулю.

    Args:
        value: Округляемое значение
        places: Количество дробных разрядов

    Returns:
        Новый FixedDecimal с exponent = -places

    Examples:
        >>> round_half_even(new(25, -1), 0).coefficient
        2
        >>> round_half_even(new(35, -1), 0).coefficient
        4
        >>> round_half_even(new(-25, -1), 0).coefficient
        -2
    """
    candidate = round_half_away_from_zero(value, places)
    remainder = value.sub(candidate).abs()
    half = FixedDecimal(coefficient=ROUNDING_BIAS_DIGIT, exponent=-places - 1)

    if remainder.cmp(half) is not Ordering.EQUAL or candidate.coefficient & 1 == 0:
        return candidate

    if candidate.coefficient < 0:
        return FixedDecimal(coefficient=candidate.coefficient + 1, exponent=candidate.exponent)
    return FixedDecimal(coefficient=candidate.coefficient - 1, exponent=candidate.exponent)


# =============================================================================
# ROUND + RENDER
# =============================================================================


def string_fixed(value: FixedDecimal, places: int) -> str:
    """
    round_half_away_from_zero + рендеринг без обрезки хвостовых нулей.

    Examples:
        >>> string_fixed(new(5, 0), 2)
        '5.00'
    """
    return round_half_away_from_zero(value, places).to_string(trim_trailing_zeros=False)


def string_fixed_bank(value: FixedDecimal, places: int) -> str:
    """
    round_half_even + рендеринг без обрезки хвостовых нулей.

    Examples:
        >>> string_fixed_bank(new(1005, -2), 1)
        '10.0'
        >>> string_fixed_bank(new(1015, -2), 1)
        '10.2'
    """
    return round_half_even(value, places).to_string(trim_trailing_zeros=False)
