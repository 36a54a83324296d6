"""
Тесты для Rounding — Half-Away-From-Zero & Banker's Rounding

Проверяемые инварианты:
1. Exponent результата == -places
2. Симметрия half-away-from-zero: 5.5 → 6, -5.5 → -6
3. Банковское округление: ничьи → к чётной цифре
4. Не-ничьи: оба алгоритма совпадают
5. Идемпотентность округления
6. Рендеринг после округления без обрезки нулей
"""

import pytest

from src.core.domain import FixedDecimal, new
from src.core.math.numerical_safeguards import EXPONENT_MAX
from src.core.math.rounding import (
    round_half_away_from_zero,
    round_half_even,
    string_fixed,
    string_fixed_bank,
)


@pytest.fixture
def values() -> list[FixedDecimal]:
    """Значения с ничьями и без, разных знаков."""
    return [
        new(55, -1),
        new(-55, -1),
        new(25, -1),
        new(-25, -1),
        new(1005, -2),
        new(-1015, -2),
        new(12349, -4),
        new(-12351, -4),
        new(2500, -3),
        new(0, -3),
        new(7, 2),
        new(31415926535897932384626, -22),
    ]


# =============================================================================
# ТЕСТЫ: Round half away from zero
# =============================================================================


class TestRoundHalfAwayFromZero:
    """Тесты round_half_away_from_zero."""

    @pytest.mark.parametrize(
        "coefficient, exponent, places, expected",
        [
            (55, -1, 0, 6),
            (-55, -1, 0, -6),
            (25, -1, 0, 3),
            (-25, -1, 0, -3),
            (5, -1, 0, 1),
            (-5, -1, 0, -1),
            (4, -1, 0, 0),
            (-4, -1, 0, 0),
            (1234, -3, 2, 123),
            (1235, -3, 2, 124),
            (-1234, -3, 2, -123),
            (-1235, -3, 2, -124),
            (12349, -4, 2, 123),
            (-12351, -4, 2, -124),
            (5, 0, 2, 500),
            (-5, 0, 2, -500),
        ],
    )
    def test_table(self, coefficient, exponent, places, expected):
        result = round_half_away_from_zero(new(coefficient, exponent), places)
        assert result.coefficient == expected
        assert result.exponent == -places

    def test_symmetry(self, values):
        """round(-v) == -round(v)."""
        for v in values:
            for places in (0, 1, 2, 5):
                assert round_half_away_from_zero(-v, places) == -round_half_away_from_zero(v, places)

    def test_negative_places(self):
        """Отрицательные places — округление до десятков/сотен."""
        result = round_half_away_from_zero(new(1250, 0), -2)
        assert (result.coefficient, result.exponent) == (13, 2)
        assert str(result) == "1300"

        result = round_half_away_from_zero(new(1249, 0), -2)
        assert (result.coefficient, result.exponent) == (12, 2)

    def test_extreme_places(self):
        """places = -EXPONENT_MAX: результат 0 с exponent EXPONENT_MAX."""
        result = round_half_away_from_zero(new(1, 0), -EXPONENT_MAX)
        assert (result.coefficient, result.exponent) == (0, EXPONENT_MAX)

    def test_idempotent(self, values):
        for v in values:
            for places in (-1, 0, 1, 2, 3):
                once = round_half_away_from_zero(v, places)
                twice = round_half_away_from_zero(once, places)
                assert (twice.coefficient, twice.exponent) == (once.coefficient, once.exponent)

    def test_input_not_mutated(self):
        v = new(-1235, -3)
        round_half_away_from_zero(v, 2)
        assert (v.coefficient, v.exponent) == (-1235, -3)

    @pytest.mark.parametrize("places", [EXPONENT_MAX + 1, 1.5, True])
    def test_invalid_places(self, places):
        with pytest.raises(ValueError):
            round_half_away_from_zero(new(1, 0), places)


# =============================================================================
# ТЕСТЫ: Round half to even
# =============================================================================


class TestRoundHalfEven:
    """Тесты round_half_even (banker's rounding)."""

    @pytest.mark.parametrize(
        "coefficient, exponent, places, expected",
        [
            (25, -1, 0, 2),
            (35, -1, 0, 4),
            (-25, -1, 0, -2),
            (-35, -1, 0, -4),
            (5, -1, 0, 0),
            (-5, -1, 0, 0),
            (15, -1, 0, 2),
            (1005, -3, 2, 100),
            (1015, -3, 2, 102),
            (2500, -3, 0, 2),
            (25001, -4, 0, 3),
            (251, -2, 0, 3),
            (249, -2, 0, 2),
            (1250, 0, -2, 12),
            (1350, 0, -2, 14),
        ],
    )
    def test_table(self, coefficient, exponent, places, expected):
        result = round_half_even(new(coefficient, exponent), places)
        assert result.coefficient == expected
        assert result.exponent == -places

    def test_ties_round_to_even(self):
        """k + 0.5 → ближайшее чётное, на расстоянии ровно 0.5."""
        half = new(5, -1)
        for k in range(-10, 10):
            tie = new((2 * k + 1) * 5, -1)
            result = round_half_even(tie, 0)
            assert result.coefficient % 2 == 0
            assert (tie - result).abs() == half

    def test_non_ties_match_half_away(self, values):
        """Без ничьей результат совпадает с half-away-from-zero."""
        for v in values:
            for places in (0, 1, 2, 3):
                away = round_half_away_from_zero(v, places)
                exact_tie = (v - away).abs() == new(5, -places - 1)
                if not exact_tie:
                    bank = round_half_even(v, places)
                    assert (bank.coefficient, bank.exponent) == (away.coefficient, away.exponent)

    def test_idempotent(self, values):
        for v in values:
            for places in (0, 1, 2):
                once = round_half_even(v, places)
                assert round_half_even(once, places) == once

    def test_input_not_mutated(self):
        v = new(25, -1)
        round_half_even(v, 0)
        assert (v.coefficient, v.exponent) == (25, -1)


# =============================================================================
# ТЕСТЫ: Округление + рендеринг
# =============================================================================


class TestStringFixed:
    """Тесты string_fixed / string_fixed_bank."""

    @pytest.mark.parametrize(
        "coefficient, exponent, places, expected",
        [
            (1005, -2, 1, "10.0"),
            (1015, -2, 1, "10.2"),
            (-25, -1, 0, "-2"),
            (5, 0, 2, "5.00"),
            (-4, -1, 0, "0"),
            (-1, -3, 2, "0.00"),
            (123456, -3, 2, "123.46"),
            (1250, 0, -2, "1200"),
        ],
    )
    def test_string_fixed_bank(self, coefficient, exponent, places, expected):
        assert string_fixed_bank(new(coefficient, exponent), places) == expected

    @pytest.mark.parametrize(
        "coefficient, exponent, places, expected",
        [
            (1005, -2, 1, "10.1"),
            (25, -1, 0, "3"),
            (-25, -1, 0, "-3"),
            (5, 0, 2, "5.00"),
            (-1, -3, 2, "0.00"),
        ],
    )
    def test_string_fixed(self, coefficient, exponent, places, expected):
        assert string_fixed(new(coefficient, exponent), places) == expected

    def test_negative_zero_result_unsigned(self):
        """Отрицательное значение, округлённое до нуля, выводится без "-"."""
        assert not string_fixed_bank(new(-4, -3), 2).startswith("-")
        assert not string_fixed(new(-4, -3), 2).startswith("-")
