"""
Multiplicative Engine — schoolbook умножение

Произведение накапливается как сумма a * b[i] * BASE^i через long addition.
Знак результата = XOR знаков операндов, ноль никогда не отрицательный.
"""

from src.core.math.additive import long_addition
from src.core.math.digit_vector import BASE, DigitVector


def multiply_one_digit(
    digits: tuple[int, ...],
    digit: int,
    magnitude: int = 0,
) -> tuple[int, ...]:
    """
    Умножение модуля на одну группу со сдвигом на magnitude позиций.

    Args:
        digits: Модуль (canonical)
        digit: Множитель в [0, BASE)
        magnitude: Количество нулевых младших групп в результате

    Returns:
        Canonical модуль digits * digit * BASE^magnitude

    Examples:
        >>> multiply_one_digit((500000,), 4, 1)
        (0, 0, 2)
    """
    if digit == 0 or not digits:
        return ()

    result = [0] * magnitude
    carry = 0

    for value in digits:
        carry, low = divmod(digit * value + carry, BASE)
        result.append(low)

    if carry != 0:
        result.append(carry)

    return tuple(result)


def multiply_magnitudes(a: tuple[int, ...], b: tuple[int, ...]) -> tuple[int, ...]:
    """Произведение модулей: Σ multiply_one_digit(a, b[i], i)."""
    product: tuple[int, ...] = ()

    for i, digit in enumerate(b):
        if digit != 0:
            product = long_addition(product, multiply_one_digit(a, digit, i))

    return product


def multiply(a: DigitVector, b: DigitVector) -> DigitVector:
    """Произведение a * b."""
    return DigitVector.from_digits(
        multiply_magnitudes(a.digits, b.digits),
        a.negative != b.negative,
    )
