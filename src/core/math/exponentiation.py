"""
Exponentiation Engine — возведение в степень (в т.ч. по модулю)

Оба алгоритма — итеративный square-and-multiply без рекурсии, поэтому глубина
стека не зависит от битовой длины показателя.

Цикл:
    while exponent > 0:
        exponent нечётный → result *= base, exponent -= 1
        exponent чётный   → base *= base, exponent /= 2
"""

from src.core.math.additive import subtract
from src.core.math.digit_vector import ONE_VECTOR, DigitVector
from src.core.math.division import divide_by_native, modulo
from src.core.math.errors import DivisionByZero, InvalidExponent
from src.core.math.multiplicative import multiply
from src.core.math.safeguards import validate_whole_number


def pow_native(base: DigitVector, exponent: int) -> DigitVector:
    """
    base ** exponent для native показателя.

    Args:
        base: Основание
        exponent: Неотрицательное целое (int или float с целым значением)

    Returns:
        base ** exponent, 0 ** 0 == 1

    Raises:
        InvalidExponent: Если exponent отрицательный или не целый
    """
    remaining = validate_whole_number(exponent, "exponent", error=InvalidExponent, min_value=0)

    result = ONE_VECTOR
    current = base

    while remaining > 0:
        if remaining % 2 == 1:
            result = multiply(result, current)
            remaining -= 1
        else:
            current = multiply(current, current)
            remaining //= 2

    return result


def mod_pow(base: DigitVector, exponent: DigitVector, modulus: DigitVector) -> DigitVector:
    """
    base ** exponent mod |modulus|.

    После каждого умножения результат редуцируется по модулю, поэтому
    промежуточные значения ограничены modulus².

    Отрицательное основание сначала приводится к неотрицательному вычету,
    результат всегда в [0, |modulus|).

    Args:
        base: Основание
        exponent: Неотрицательный показатель
        modulus: Ненулевой модуль

    Returns:
        Вычет в [0, |modulus|)

    Raises:
        InvalidExponent: Если exponent < 0
        DivisionByZero: Если modulus == 0
    """
    if exponent.negative:
        raise InvalidExponent("exponent must be non-negative")

    if modulus.is_zero():
        raise DivisionByZero("modulus must be non-zero")

    current = modulo(base, modulus)
    if base.negative and not current.is_zero():
        current = subtract(modulus.abs(), current)

    result = modulo(ONE_VECTOR, modulus)
    remaining = exponent

    while not remaining.is_zero():
        if remaining.is_even():
            current = modulo(multiply(current, current), modulus)
            halved, _ = divide_by_native(remaining.digits, 2)
            remaining = DigitVector.from_digits(halved)
        else:
            result = modulo(multiply(result, current), modulus)
            remaining = subtract(remaining, ONE_VECTOR)

    return result
