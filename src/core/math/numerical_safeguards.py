"""
Numerical Safeguards — Exponent & Integer Primitives

Модуль обеспечивает безопасную арифметику над компонентами FixedDecimal:
- Диапазон exponent (int32) и его проверка
- Вычисление разности/суммы exponent в расширенном integer-домене
- Усечение (truncation) к нулю при делении coefficient на 10^k
- Валидация параметра places для округления

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Exponent всегда в диапазоне [EXPONENT_MIN, EXPONENT_MAX]
2. Переполнение exponent никогда не заворачивается (wrap) — только ExponentOverflow
3. Разность exponent считается в Python int, без float-промежуточных значений
4. Все операции детерминированы и воспроизводимы
"""

import logging
from typing import Final

logger = logging.getLogger(__name__)

# =============================================================================
# ДИАПАЗОН EXPONENT
# =============================================================================

# Разрядность exponent (знаковое целое)
EXPONENT_BITS: Final[int] = 32

# Границы exponent (int32)
EXPONENT_MIN: Final[int] = -(2 ** (EXPONENT_BITS - 1))
EXPONENT_MAX: Final[int] = 2 ** (EXPONENT_BITS - 1) - 1

# Основание системы счисления
RADIX: Final[int] = 10

# Смещение "половина единицы" в разряде, следующем за последним сохраняемым
ROUNDING_BIAS_DIGIT: Final[int] = 5

# log10(2) сверху рациональной дробью (для оценки числа цифр по bit_length)
LOG10_2_UPPER_NUM: Final[int] = 30103
LOG10_2_UPPER_DEN: Final[int] = 100000

# Размер блока цифр при рендеринге (str(int) в CPython ограничен 4300 цифрами)
DIGIT_CHUNK: Final[int] = 1000


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ExponentOverflow(OverflowError):
    """
    Критическое переполнение exponent (выход за пределы int32).

    Возникает при умножении, если сумма exponent не помещается в int32.
    Результат вычисления не может быть представлен корректно, поэтому
    вызывающий код обязан прервать текущий денежный расчёт.

    Исключение НЕ перехватывается внутри движка.
    """

    pass


# =============================================================================
# EXPONENT ARITHMETIC
# =============================================================================


def is_exponent_in_range(exponent: int) -> bool:
    """
    Проверка, помещается ли exponent в int32.

    Args:
        exponent: Проверяемое значение

    Returns:
        True если EXPONENT_MIN <= exponent <= EXPONENT_MAX
    """
    return EXPONENT_MIN <= exponent <= EXPONENT_MAX


def exponent_distance(from_exponent: int, to_exponent: int) -> int:
    """
    Абсолютная разность двух exponent.

    Вычисляется в Python int (неограниченная точность), поэтому
    не переполняется даже при exponent на границах int32
    (максимум 2**32 - 1) и не теряет точность, как float.

    Args:
        from_exponent: Исходный exponent
        to_exponent: Целевой exponent

    Returns:
        |to_exponent - from_exponent|

    Examples:
        >>> exponent_distance(-2, 3)
        5
        >>> exponent_distance(EXPONENT_MAX, EXPONENT_MIN)
        4294967295
    """
    return abs(to_exponent - from_exponent)


def checked_exponent_sum(a: int, b: int) -> int:
    """
    Сумма exponent с проверкой переполнения int32.

    Используется при умножении: exponent результата = e1 + e2.

    Args:
        a: Exponent первого множителя
        b: Exponent второго множителя

    Returns:
        a + b, если сумма в диапазоне int32

    Raises:
        ExponentOverflow: если сумма выходит за пределы int32

    Examples:
        >>> checked_exponent_sum(-2, -3)
        -5
        >>> checked_exponent_sum(EXPONENT_MAX, 1)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ExponentOverflow: ...
    """
    total = a + b
    if not is_exponent_in_range(total):
        logger.critical(
            "Exponent overflow: %d + %d = %d is outside [%d, %d]",
            a, b, total, EXPONENT_MIN, EXPONENT_MAX,
        )
        raise ExponentOverflow(f"exponent {total} overflows an int32")
    return total


def smaller_exponent(a: int, b: int) -> int:
    """Общий exponent для выравнивания: меньший (более точный) из двух."""
    return b if a >= b else a


# =============================================================================
# INTEGER PRIMITIVES
# =============================================================================


def pow10(power: int) -> int:
    """
    10 ** power для неотрицательного power.

    Raises:
        ValueError: если power < 0
    """
    if power < 0:
        raise ValueError(f"power must be non-negative, got {power}")
    return RADIX**power


def truncating_divide(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Оператор // в Python округляет к -inf; здесь результат
    усекается к нулю (как при отбрасывании младших цифр).

    Args:
        numerator: Делимое (любого знака)
        denominator: Делитель (положительный)

    Returns:
        Частное, усечённое к нулю

    Examples:
        >>> truncating_divide(1259, 100)
        12
        >>> truncating_divide(-1259, 100)
        -12
    """
    if denominator <= 0:
        raise ValueError(f"denominator must be positive, got {denominator}")

    quotient = abs(numerator) // denominator
    return -quotient if numerator < 0 else quotient


def max_decimal_digits(magnitude: int) -> int:
    """
    Верхняя оценка количества десятичных цифр неотрицательного int.

    Считается по bit_length() без str() и без построения 10^k:
    magnitude < 2^b ≤ 10^(b × 0.30103), log10(2) < 0.30103.

    Examples:
        >>> max_decimal_digits(999)
        4
        >>> max_decimal_digits(0)
        1
    """
    return (magnitude.bit_length() * LOG10_2_UPPER_NUM) // LOG10_2_UPPER_DEN + 1


def decimal_digits(magnitude: int) -> str:
    """
    Десятичная запись неотрицательного int любой длины.

    str() в CPython по умолчанию ограничен 4300 цифрами, поэтому
    большие значения делятся через divmod на 10^k пополам,
    младшая половина дополняется ведущими нулями до k цифр.
    Процессный лимит (sys.set_int_max_str_digits) не изменяется.

    Args:
        magnitude: Неотрицательное целое

    Returns:
        Строка цифр без знака и без ведущих нулей

    Raises:
        ValueError: если magnitude < 0
    """
    if magnitude < 0:
        raise ValueError("magnitude must be non-negative")

    if max_decimal_digits(magnitude) <= DIGIT_CHUNK:
        return str(magnitude)

    split = max_decimal_digits(magnitude) // 2
    high, low = divmod(magnitude, pow10(split))
    return decimal_digits(high) + decimal_digits(low).rjust(split, "0")


def strip_trailing_zeros(coefficient: int) -> tuple[int, int]:
    """
    Удаление хвостовых десятичных нулей coefficient.

    Делит на 10^step с удвоением step, пока делится, и уменьшает step
    при первом остатке: O(log) больших делений вместо одного на каждый ноль.

    Args:
        coefficient: Ненулевое целое

    Returns:
        (coefficient без хвостовых нулей, количество удалённых нулей)

    Examples:
        >>> strip_trailing_zeros(-12000)
        (-12, 3)
    """
    if coefficient == 0:
        raise ValueError("coefficient must be non-zero")

    stripped = 0
    step = 1
    while coefficient % RADIX == 0:
        scale = pow10(step)
        if coefficient % scale == 0:
            coefficient //= scale
            stripped += step
            step *= 2
        else:
            step = max(1, step // 2)
    return coefficient, stripped


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_places(places: int) -> int:
    """
    Валидация количества дробных разрядов для округления.

    Итоговый exponent равен -places, промежуточный -places - 1;
    оба должны помещаться в int32.

    Args:
        places: Количество дробных разрядов (может быть отрицательным)

    Returns:
        places без изменений

    Raises:
        ValueError: если places не int или -places / -places - 1 вне int32
    """
    if isinstance(places, bool) or not isinstance(places, int):
        raise ValueError(f"places must be an int, got {type(places).__name__}")

    if not (is_exponent_in_range(-places) and is_exponent_in_range(-places - 1)):
        raise ValueError(
            f"places must be in [{-EXPONENT_MAX}, {EXPONENT_MAX}], got {places}"
        )
    return places
