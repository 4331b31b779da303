"""
Additive Engine — длинное сложение и вычитание методом дополнения

Диспетчеризация по четырём комбинациям знаков:
- Одинаковые знаки при сложении → long addition
- Разные знаки при сложении → a + b = a - (-b)
- Разные знаки при вычитании → long addition модулей
- Одинаковые знаки при вычитании → complement subtraction меньшего модуля из большего

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Существует ровно один алгоритм вычитания (complement subtraction)
2. Результат всегда в canonical form
3. Операнды не модифицируются
"""

from src.core.math.digit_vector import (
    BASE,
    DigitVector,
    compare_magnitude,
    strip_leading_zeros,
)

# =============================================================================
# МОДУЛИ
# =============================================================================


def long_addition(a: tuple[int, ...], b: tuple[int, ...]) -> tuple[int, ...]:
    """
    Сложение модулей с переносом carry = floor(sum / BASE).

    Если финальный carry ненулевой, добавляется старшая группа.

    Examples:
        >>> long_addition((999999,), (1,))
        (0, 1)
    """
    if len(a) < len(b):
        a, b = b, a

    result = []
    carry = 0

    for i in range(len(a)):
        partial = a[i] + carry
        if i < len(b):
            partial += b[i]
        carry, digit = divmod(partial, BASE)
        result.append(digit)

    if carry != 0:
        result.append(carry)

    return tuple(result)


def subtract_by_complement(
    minuend: tuple[int, ...],
    subtrahend: tuple[int, ...],
) -> tuple[int, ...]:
    """
    Разность модулей M - S (M >= S) методом дополнения.

    Алгоритм:
        C[i] = BASE - 1 - S[i]  для i < len(S)
        M + C + 1 = M - S + BASE^len(S)
        затем вычитается одна единица в позиции len(S) (не len(M))

    Args:
        minuend: Модуль M (уменьшаемое)
        subtrahend: Модуль S (вычитаемое), |S| <= |M|

    Returns:
        Canonical модуль M - S
    """
    if not subtrahend:
        return minuend

    complement = tuple(BASE - 1 - digit for digit in subtrahend)

    total = list(long_addition(long_addition(minuend, complement), (1,)))

    # Снимаем BASE^len(S); заём проходит через нулевые группы
    position = len(subtrahend)
    while total[position] == 0:
        total[position] = BASE - 1
        position += 1
    total[position] -= 1

    return strip_leading_zeros(tuple(total))


# =============================================================================
# ЗНАКОВЫЕ ОПЕРАЦИИ
# =============================================================================


def add(a: DigitVector, b: DigitVector) -> DigitVector:
    """
    Сумма a + b.

    Одинаковые знаки: long addition, знак операндов.
    Разные знаки: сводится к subtract(a, -b).
    """
    if b.is_zero():
        return a

    if a.is_zero():
        return b

    if a.negative == b.negative:
        return DigitVector.from_digits(long_addition(a.digits, b.digits), a.negative)

    return subtract(a, b.negate())


def subtract(a: DigitVector, b: DigitVector) -> DigitVector:
    """
    Разность a - b.

    Разные знаки: модули складываются, результат со знаком a.
    Одинаковые знаки: из большего модуля вычитается меньший,
    знак результата = a.negative XOR (|a| < |b|).

    Examples:
        5 - 9 = -(9 - 5)
        (-9) - (-5) = -(9 - 5)
        (-5) - (-9) = +(9 - 5)
    """
    if b.is_zero():
        return a

    if a.negative != b.negative:
        return DigitVector.from_digits(long_addition(a.digits, b.digits), a.negative)

    if compare_magnitude(a.digits, b.digits) >= 0:
        difference = subtract_by_complement(a.digits, b.digits)
        return DigitVector.from_digits(difference, a.negative)

    difference = subtract_by_complement(b.digits, a.digits)
    return DigitVector.from_digits(difference, not a.negative)
