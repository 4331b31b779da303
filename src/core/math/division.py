"""
Division Engine — длинное деление и остаток через trial digits

Алгоритм семейства Knuth algorithm D. divide и modulo разделяют одно ядро
divmod_magnitude, работающее с модулями операндов.

Fast paths (в порядке проверки):
1. |a| < |b|          → частное 0, остаток |a|
2. |a| < MAX_NATIVE   → native divmod
3. |b| < BASE²        → single-pass деление с переносом остатка (divide_by_native)
4. Иначе              → общий алгоритм с trial digits

КОНВЕНЦИЯ ЗНАКОВ:
- Частное усекается к нулю, знак = a.negative XOR b.negative
- Остаток = остаток модулей, всегда в [0, |b|)
- Следовательно |a| = |b| * |q| + r для любых знаков

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Trial digit никогда не меньше истинной цифры частного
2. Trial digit превышает истинную цифру не более чем на 1 (одна коррекция)
3. Рабочее делимое — копия, операнды не модифицируются
"""

import logging

from src.core.math.additive import subtract_by_complement
from src.core.math.digit_vector import (
    BASE,
    BASE_SQUARED_DIGITS,
    MAX_NATIVE_DIGITS,
    DigitVector,
    compare_magnitude,
    magnitude_from_int,
    magnitude_to_int,
    strip_leading_zeros,
)
from src.core.math.errors import DivisionByZero
from src.core.math.multiplicative import multiply_one_digit

logger = logging.getLogger(__name__)


# =============================================================================
# SHORT DIVISION
# =============================================================================


def divide_by_native(
    digits: tuple[int, ...],
    divisor: int,
) -> tuple[tuple[int, ...], int]:
    """
    Деление модуля на native делитель за один проход от старшей группы.

    На каждом шаге running remainder переносится в следующую группу:
        current = remainder * BASE + digits[i]

    Args:
        digits: Модуль делимого (canonical)
        divisor: Положительный native делитель (< BASE² в общем алгоритме)

    Returns:
        (canonical модуль частного, остаток)

    Raises:
        DivisionByZero: Если divisor == 0
    """
    if divisor == 0:
        raise DivisionByZero("division by zero")

    quotient = [0] * len(digits)
    remainder = 0

    for i in range(len(digits) - 1, -1, -1):
        current = remainder * BASE + digits[i]
        quotient[i], remainder = divmod(current, divisor)

    return strip_leading_zeros(tuple(quotient)), remainder


# =============================================================================
# TRIAL DIGITS
# =============================================================================


def first_two_digits(digits: tuple[int, ...]) -> int:
    """
    Значение двух старших групп модуля.

    Returns:
        0 для нуля, значение единственной группы для одногруппового модуля,
        иначе digits[-1] * BASE + digits[-2]
    """
    size = len(digits)

    if size == 0:
        return 0

    part = digits[size - 1]
    if size > 1:
        part = part * BASE + digits[size - 2]

    return part


def trial_digit(
    dividend: tuple[int, ...],
    first_two_divisor_digits: int,
    use_three_digits: bool,
) -> int:
    """
    Оценка следующей цифры частного по старшим группам.

    Обычно берутся две старшие группы делимого и делителя. Если две старшие
    группы делимого меньше делителя (use_three_digits), к делимому добавляется
    третья группа, а делитель эквивалентно сдвигается на одну группу:
        qt = (R2 * BASE + r3) // D2

    Args:
        dividend: Текущее рабочее делимое
        first_two_divisor_digits: Две старшие группы делителя (константа прогона)
        use_three_digits: Escape hatch для "недостаточного" делимого

    Returns:
        Trial digit в [0, BASE)
    """
    part = first_two_digits(dividend)

    if use_three_digits and len(dividend) > 2:
        part = part * BASE + dividend[len(dividend) - 3]

    return part // first_two_divisor_digits


def _long_division(
    dividend: tuple[int, ...],
    divisor: tuple[int, ...],
) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """
    Общий алгоритм для модулей: |dividend| >= |divisor| >= BASE².

    Returns:
        (модуль частного, модуль остатка)
    """
    logger.debug(
        "long division: dividend=%d groups, divisor=%d groups",
        len(dividend),
        len(divisor),
    )

    working = dividend
    first_two_divisor_digits = first_two_digits(divisor)

    pos = len(working) - len(divisor)
    use_three_digits = False

    if first_two_divisor_digits > first_two_digits(working):
        pos -= 1
        use_three_digits = True

    quotient = [0] * (pos + 1)

    while pos >= 0:
        qt = trial_digit(working, first_two_divisor_digits, use_three_digits)
        product = multiply_one_digit(divisor, qt, pos)

        # Переоценка не больше чем на 1
        if compare_magnitude(product, working) > 0:
            qt -= 1
            product = multiply_one_digit(divisor, qt, pos)

        if qt == 0:
            pos -= 1
            use_three_digits = True
            continue

        working = subtract_by_complement(working, product)
        quotient[pos] = qt

        pos = len(working) - len(divisor)

        if pos >= 0 and first_two_divisor_digits > first_two_digits(working):
            pos -= 1
            use_three_digits = True
        else:
            use_three_digits = False

    return strip_leading_zeros(tuple(quotient)), working


# =============================================================================
# DIVMOD
# =============================================================================


def divmod_magnitude(
    dividend: tuple[int, ...],
    divisor: tuple[int, ...],
) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """
    Частное и остаток модулей с выбором fast path.

    Args:
        dividend: Модуль делимого
        divisor: Модуль делителя

    Returns:
        (модуль частного, модуль остатка), остаток в [0, divisor)

    Raises:
        DivisionByZero: Если divisor == 0
    """
    if not divisor:
        raise DivisionByZero("division by zero")

    if compare_magnitude(dividend, divisor) < 0:
        return (), dividend

    if compare_magnitude(dividend, MAX_NATIVE_DIGITS) < 0:
        quotient, remainder = divmod(magnitude_to_int(dividend), magnitude_to_int(divisor))
        return magnitude_from_int(quotient), magnitude_from_int(remainder)

    if compare_magnitude(divisor, BASE_SQUARED_DIGITS) < 0:
        quotient, remainder = divide_by_native(dividend, magnitude_to_int(divisor))
        return quotient, magnitude_from_int(remainder)

    return _long_division(dividend, divisor)


def divmod_vector(a: DigitVector, b: DigitVector) -> tuple[DigitVector, DigitVector]:
    """
    Частное (усечение к нулю) и неотрицательный остаток.

    Raises:
        DivisionByZero: Если b == 0
    """
    quotient, remainder = divmod_magnitude(a.digits, b.digits)
    return (
        DigitVector.from_digits(quotient, a.negative != b.negative),
        DigitVector.from_digits(remainder, False),
    )


def divide(a: DigitVector, b: DigitVector) -> DigitVector:
    """
    Частное a / b, усечённое к нулю.

    Raises:
        DivisionByZero: Если b == 0
    """
    return divmod_vector(a, b)[0]


def modulo(a: DigitVector, b: DigitVector) -> DigitVector:
    """
    Остаток |a| mod |b| в [0, |b|).

    Raises:
        DivisionByZero: Если b == 0
    """
    return divmod_vector(a, b)[1]


def remainder_by_native(digits: tuple[int, ...], divisor: int) -> int:
    """Остаток модуля по малому native делителю (без построения частного)."""
    if divisor == 0:
        raise DivisionByZero("division by zero")

    remainder = 0
    for i in range(len(digits) - 1, -1, -1):
        remainder = (remainder * BASE + digits[i]) % divisor
    return remainder
