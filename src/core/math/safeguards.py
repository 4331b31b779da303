"""
Safeguards — валидация аргументов арифметического ядра

Модуль обеспечивает единообразную проверку native аргументов:
- Целые числа (int или float с целым значением, но не bool)
- Положительные целые (количество witness-итераций)
- Основание системы счисления [2, 36]

Все проверки поднимают конкретный вид ошибки из errors.py, имя параметра
попадает в сообщение.
"""

import math
from typing import Final

from src.core.math.errors import InvalidBase

# =============================================================================
# ГРАНИЦЫ RADIX
# =============================================================================

# Минимальное основание для Radix Codec
MIN_RADIX: Final[int] = 2

# Максимальное основание для Radix Codec (0-9 + A-Z)
MAX_RADIX: Final[int] = 36


# =============================================================================
# ЦЕЛЫЕ ЧИСЛА
# =============================================================================


def as_whole_number(value: object) -> int | None:
    """
    Приведение native значения к int, если оно является целым числом.

    bool отвергается, хотя и является подклассом int.

    Args:
        value: Проверяемое значение

    Returns:
        int если value целое (int или float с целым значением), иначе None

    Examples:
        >>> as_whole_number(5)
        5
        >>> as_whole_number(5.0)
        5
        >>> as_whole_number(5.5) is None
        True
        >>> as_whole_number(True) is None
        True
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value

    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)

    return None


def validate_whole_number(
    value: object,
    name: str,
    error: type[Exception] = ValueError,
    min_value: int | None = None,
) -> int:
    """
    Валидация, что значение целое (и не меньше min_value).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        error: Класс исключения для нарушения
        min_value: Минимальное допустимое значение (optional)

    Returns:
        Значение, приведённое к int

    Raises:
        error: Если value не целое или меньше min_value
    """
    whole = as_whole_number(value)

    if whole is None:
        raise error(f"{name} must be a whole number, got {value!r}")

    if min_value is not None and whole < min_value:
        raise error(f"{name} must be >= {min_value}, got {whole}")

    return whole


def validate_positive_whole_number(
    value: object,
    name: str,
    error: type[Exception] = ValueError,
) -> int:
    """
    Валидация, что значение положительное целое (>= 1).

    Raises:
        error: Если value не целое или < 1
    """
    return validate_whole_number(value, name, error=error, min_value=1)


def validate_radix(base: object) -> int:
    """
    Валидация основания системы счисления.

    Args:
        base: Основание (ожидается целое в [MIN_RADIX, MAX_RADIX])

    Returns:
        Основание как int

    Raises:
        InvalidBase: Если base не целое или вне диапазона [2, 36]

    Examples:
        >>> validate_radix(16)
        16
        >>> validate_radix(37)
        Traceback (most recent call last):
        ...
        src.core.math.errors.InvalidBase: base must be in [2, 36], got 37
    """
    whole = as_whole_number(base)

    if whole is None or whole < MIN_RADIX or whole > MAX_RADIX:
        raise InvalidBase(f"base must be in [{MIN_RADIX}, {MAX_RADIX}], got {base!r}")

    return whole
