"""
FixedDecimal — Arbitrary-Precision Fixed-Point Decimal

Immutable Pydantic модель десятичного числа с фиксированной точкой:

    value = coefficient × 10^exponent

- coefficient: Python int (неограниченная точность, со знаком)
- exponent: int32

Пара (coefficient, exponent) НЕ нормализуется: хвостовые нули coefficient
сохраняются. Равенство значений определяется только после приведения
к общему exponent (rescale), а не сравнением сырых пар.

Все операции возвращают новый экземпляр; операнды не изменяются.
"""

from enum import Enum

from pydantic import BaseModel, Field, StrictInt

from src.core.math.numerical_safeguards import (
    EXPONENT_MAX,
    EXPONENT_MIN,
    checked_exponent_sum,
    decimal_digits,
    exponent_distance,
    max_decimal_digits,
    pow10,
    smaller_exponent,
    strip_trailing_zeros,
    truncating_divide,
)


# =============================================================================
# ENUMS
# =============================================================================


class Ordering(int, Enum):
    """Результат сравнения двух значений"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _ordering(a: int, b: int) -> Ordering:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


# =============================================================================
# FIXED DECIMAL MODEL
# =============================================================================


class FixedDecimal(BaseModel):
    """
    Десятичное число с фиксированной точкой.

    Immutable модель (frozen=True): все операции создают новый экземпляр.
    Поддерживает операторы +, -, *, унарный -, abs() и сравнения.
    """

    coefficient: StrictInt = Field(..., description="Коэффициент (неограниченный int)")
    exponent: StrictInt = Field(
        0, ge=EXPONENT_MIN, le=EXPONENT_MAX, description="Степень 10 (int32)"
    )

    model_config = {"frozen": True}  # Immutable

    # -------------------------------------------------------------------------
    # Rescale
    # -------------------------------------------------------------------------

    def rescale(self, exponent: int) -> "FixedDecimal":
        """
        Приведение к другому exponent.

        - exponent > self.exponent: деление на 10^k с усечением к нулю (с потерями)
        - exponent < self.exponent: умножение на 10^k (без потерь)
        - exponent == self.exponent: эквивалентное значение

        Args:
            exponent: Целевой exponent (int32)

        Returns:
            Новый FixedDecimal с заданным exponent

        Examples:
            >>> new(1259, -2).rescale(-1)
            FixedDecimal(coefficient=125, exponent=-1)
            >>> new(12, 0).rescale(-3)
            FixedDecimal(coefficient=12000, exponent=-3)
        """
        distance = exponent_distance(self.exponent, exponent)

        if self.coefficient == 0:
            coefficient = 0
        elif exponent > self.exponent and distance > max_decimal_digits(abs(self.coefficient)):
            # Все цифры отбрасываются, 10^distance не строится
            coefficient = 0
        elif exponent > self.exponent:
            coefficient = truncating_divide(self.coefficient, pow10(distance))
        elif exponent < self.exponent:
            coefficient = self.coefficient * pow10(distance)
        else:
            coefficient = self.coefficient

        return FixedDecimal(coefficient=coefficient, exponent=exponent)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: "FixedDecimal") -> "FixedDecimal":
        """Сумма; exponent результата = min(e1, e2)."""
        base = smaller_exponent(self.exponent, other.exponent)
        return FixedDecimal(
            coefficient=self.rescale(base).coefficient + other.rescale(base).coefficient,
            exponent=base,
        )

    def sub(self, other: "FixedDecimal") -> "FixedDecimal":
        """Разность; exponent результата = min(e1, e2)."""
        base = smaller_exponent(self.exponent, other.exponent)
        return FixedDecimal(
            coefficient=self.rescale(base).coefficient - other.rescale(base).coefficient,
            exponent=base,
        )

    def mul(self, other: "FixedDecimal") -> "FixedDecimal":
        """
        Произведение: c = c1 × c2, e = e1 + e2.

        Raises:
            ExponentOverflow: если e1 + e2 не помещается в int32.
                Денежный результат с завёрнутым exponent был бы неверным,
                поэтому вычисление прерывается.
        """
        exponent = checked_exponent_sum(self.exponent, other.exponent)
        return FixedDecimal(
            coefficient=self.coefficient * other.coefficient,
            exponent=exponent,
        )

    def abs(self) -> "FixedDecimal":
        """Модуль значения, exponent сохраняется."""
        return FixedDecimal(coefficient=abs(self.coefficient), exponent=self.exponent)

    def neg(self) -> "FixedDecimal":
        """Смена знака, exponent сохраняется."""
        return FixedDecimal(coefficient=-self.coefficient, exponent=self.exponent)

    def cmp(self, other: "FixedDecimal") -> Ordering:
        """
        Сравнение значений.

        При равных exponent сравниваются coefficient, иначе оба операнда
        сначала приводятся к меньшему exponent.

        Returns:
            Ordering.LESS / Ordering.EQUAL / Ordering.GREATER
        """
        if self.exponent == other.exponent:
            return _ordering(self.coefficient, other.coefficient)

        base = smaller_exponent(self.exponent, other.exponent)
        return _ordering(self.rescale(base).coefficient, other.rescale(base).coefficient)

    def sign(self) -> int:
        """Знак: -1, 0 или 1."""
        return _ordering(self.coefficient, 0).value

    def is_zero(self) -> bool:
        return self.coefficient == 0

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def to_string(self, trim_trailing_zeros: bool = True) -> str:
        """
        Каноническое десятичное представление без экспоненциальной записи.

        Дробная часть дополняется ведущими нулями до -exponent цифр.
        При trim_trailing_zeros хвостовые нули дробной части удаляются;
        если дробная часть исчезла полностью, точка не выводится.
        Ноль никогда не получает знак "-".

        Examples:
            >>> new(-5, -3).to_string()
            '-0.005'
            >>> new(1200, -3).to_string()
            '1.2'
            >>> new(1200, -3).to_string(trim_trailing_zeros=False)
            '1.200'
        """
        if self.exponent >= 0:
            integer = self.rescale(0).coefficient
            return ("-" if integer < 0 else "") + decimal_digits(abs(integer))

        digits = decimal_digits(abs(self.coefficient))
        scale = -self.exponent

        if len(digits) > scale:
            int_part = digits[: len(digits) - scale]
            fractional_part = digits[len(digits) - scale :]
        else:
            int_part = "0"
            fractional_part = "0" * (scale - len(digits)) + digits

        if trim_trailing_zeros:
            fractional_part = fractional_part.rstrip("0")

        number = int_part
        if fractional_part:
            number += "." + fractional_part

        if self.coefficient < 0:
            return "-" + number
        return number

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string(trim_trailing_zeros=True)

    def __repr__(self) -> str:
        return f"FixedDecimal(coefficient={self.coefficient}, exponent={self.exponent})"

    def __add__(self, other: object) -> "FixedDecimal":
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "FixedDecimal":
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> "FixedDecimal":
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self.mul(other)

    def __neg__(self) -> "FixedDecimal":
        return self.neg()

    def __abs__(self) -> "FixedDecimal":
        return self.abs()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self.cmp(other) is Ordering.EQUAL

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self.cmp(other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self.cmp(other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self.cmp(other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self.cmp(other) is not Ordering.LESS

    def __hash__(self) -> int:
        # Равные значения с разными exponent должны давать одинаковый hash
        if self.coefficient == 0:
            return hash((0, 0))
        coefficient, stripped = strip_trailing_zeros(self.coefficient)
        return hash((coefficient, self.exponent + stripped))


# =============================================================================
# CONSTRUCTOR
# =============================================================================


def new(coefficient: int, exponent: int = 0) -> FixedDecimal:
    """
    Создание значения coefficient × 10^exponent.

    Raises:
        pydantic.ValidationError: если coefficient/exponent не int
            или exponent вне int32

    Examples:
        >>> str(new(1005, -2))
        '10.05'
    """
    return FixedDecimal(coefficient=coefficient, exponent=exponent)
