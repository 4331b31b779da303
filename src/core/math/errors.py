"""
Errors — виды ошибок арифметического ядра

Каждый вид ошибки наследуется от общего BigIntegerError и от соответствующего
builtin исключения, поэтому вызывающий код может ловить любой из них.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибка поднимается при первом обнаруженном нарушении
2. Частичные результаты никогда не возвращаются
3. Значения по умолчанию молча не подставляются
"""


# =============================================================================
# BASE
# =============================================================================


class BigIntegerError(Exception):
    """Базовый класс всех ошибок BigInteger."""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MalformedInput(BigIntegerError, ValueError):
    """
    Текстовое представление числа не может быть разобрано.

    Примеры: пустая строка, "-", посторонние символы, цифра >= основания.
    """


class DivisionByZero(BigIntegerError, ZeroDivisionError):
    """Делитель (или модуль) равен нулю."""


class InvalidExponent(BigIntegerError, ValueError):
    """Показатель степени отрицательный или не является целым числом."""


class InvalidBase(BigIntegerError, ValueError):
    """Основание системы счисления вне диапазона [2, 36]."""


class InvalidWitnessCount(BigIntegerError, ValueError):
    """Количество witness-итераций Miller–Rabin не является положительным целым."""


class ValueTooLarge(BigIntegerError, OverflowError):
    """
    Значение не помещается в native диапазон.

    Поднимается при конверсии в native int с ограничением MAX_NATIVE (2^53).
    """
