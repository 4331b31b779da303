"""
Radix Codec — строковое представление в системах счисления 2–36

- Base 10: сборка из digit groups (каждая младшая группа дополняется нулями до LOG_BASE)
- Другие основания: повторное деление на основание, остатки 0-35 → 0-9A-Z
- Разбор: Horner, цифры 0-9A-Z без учёта регистра

Отрицательные значения во всех основаниях начинаются с '-'.
"""

from typing import Final

from src.core.math.additive import add
from src.core.math.digit_vector import LOG_BASE, DigitVector
from src.core.math.division import divide_by_native
from src.core.math.errors import MalformedInput
from src.core.math.multiplicative import multiply
from src.core.math.safeguards import validate_radix

# Алфавит цифр для оснований до 36
DIGIT_ALPHABET: Final[str] = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def to_decimal_string(value: DigitVector) -> str:
    """Десятичная строка из digit groups."""
    if value.is_zero():
        return "0"

    digits = value.digits
    parts = [str(digits[-1])]
    parts.extend(str(digits[i]).zfill(LOG_BASE) for i in range(len(digits) - 2, -1, -1))

    return ("-" if value.negative else "") + "".join(parts)


def to_string(value: DigitVector, base: int = 10) -> str:
    """
    Строковое представление value в системе счисления base.

    Args:
        value: Значение
        base: Основание в [2, 36] (default: 10)

    Returns:
        Строка цифр 0-9A-Z с '-' для отрицательных значений

    Raises:
        InvalidBase: Если base вне [2, 36]

    Examples:
        >>> to_string(DigitVector.from_native(123456789), 16)
        '75BCD15'
    """
    radix = validate_radix(base)

    if radix == 10:
        return to_decimal_string(value)

    if value.is_zero():
        return "0"

    chars = []
    remaining = value.digits

    while remaining:
        remaining, digit = divide_by_native(remaining, radix)
        chars.append(DIGIT_ALPHABET[digit])

    if value.negative:
        chars.append("-")

    return "".join(reversed(chars))


def value_of(text: str, base: int = 10) -> DigitVector:
    """
    Разбор строки в системе счисления base (Horner).

    Args:
        text: Цифры 0-9A-Z (регистр не важен), необязательный ведущий '-'
        base: Основание в [2, 36]

    Returns:
        Canonical DigitVector

    Raises:
        InvalidBase: Если base вне [2, 36]
        MalformedInput: Если строка пуста, содержит посторонние символы
            или цифру >= base

    Examples:
        >>> value_of("ffffff", 16) == DigitVector.from_native(16777215)
        True
    """
    radix = validate_radix(base)

    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    negative = text.startswith("-")
    body = text[1:] if negative else text

    if not body:
        raise MalformedInput(f"no digits in {text!r}")

    radix_vector = DigitVector.from_native(radix)
    result = DigitVector.from_digits(())

    for ch in body:
        digit = DIGIT_ALPHABET.find(ch.upper()) if ch.isascii() else -1
        if digit < 0 or digit >= radix:
            raise MalformedInput(f"invalid digit {ch!r} for base {radix} in {text!r}")

        result = add(multiply(result, radix_vector), DigitVector.from_native(digit))

    return DigitVector.from_digits(result.digits, negative)
