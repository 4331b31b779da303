"""
Digit Vector — каноническое представление целого произвольной длины

Значение хранится как знак + little-endian последовательность digit groups
по основанию BASE (index 0 = младшая группа).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Canonical form: нет старших нулевых групп, ноль = пустой tuple (не (0,))
2. Каждая группа 0 <= d < BASE
3. Ноль никогда не бывает отрицательным
4. Значения immutable: каждая операция возвращает новый DigitVector

BASE = 10^6 выбрано так, чтобы BASE² укладывался в 53-битный accumulator
(MAX_NATIVE = 2^53), в котором считаются переносы умножения и fast paths деления.
"""

from dataclasses import dataclass
from typing import Final

from src.core.math.errors import MalformedInput, ValueTooLarge

# =============================================================================
# КОНСТАНТЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание digit groups
BASE: Final[int] = 1_000_000

# log10(BASE): количество десятичных цифр в одной группе
LOG_BASE: Final[int] = 6

# BASE²: граница single-pass деления на "короткий" делитель
BASE_SQUARED: Final[int] = BASE * BASE

# Граница native accumulator (53-bit safe integer)
MAX_NATIVE: Final[int] = 2**53


# =============================================================================
# HELPERS
# =============================================================================


def strip_leading_zeros(digits: tuple[int, ...]) -> tuple[int, ...]:
    """
    Удаление старших нулевых групп.

    Возвращает новый tuple (re-slice), исходная последовательность не меняется.

    Examples:
        >>> strip_leading_zeros((5, 0, 0))
        (5,)
        >>> strip_leading_zeros((0, 0))
        ()
    """
    size = len(digits)
    while size > 0 and digits[size - 1] == 0:
        size -= 1
    return digits[:size]


def compare_magnitude(a: tuple[int, ...], b: tuple[int, ...]) -> int:
    """
    Сравнение модулей двух canonical последовательностей.

    Сначала по длине, затем поразрядно от старшей группы.

    Returns:
        -1 если |a| < |b|, 0 если равны, 1 если |a| > |b|
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1

    return 0


def magnitude_to_int(digits: tuple[int, ...]) -> int:
    """Значение модуля как native int (Horner от старшей группы)."""
    value = 0
    for digit in reversed(digits):
        value = value * BASE + digit
    return value


def magnitude_from_int(value: int) -> tuple[int, ...]:
    """Модуль неотрицательного native int как canonical digit groups."""
    digits = []
    while value > 0:
        value, digit = divmod(value, BASE)
        digits.append(digit)
    return tuple(digits)


# Модуль MAX_NATIVE в виде digit groups (для сравнений в fast paths)
MAX_NATIVE_DIGITS: Final[tuple[int, ...]] = magnitude_from_int(MAX_NATIVE)

# Модуль BASE² в виде digit groups
BASE_SQUARED_DIGITS: Final[tuple[int, ...]] = magnitude_from_int(BASE_SQUARED)


# =============================================================================
# DIGIT VECTOR
# =============================================================================


@dataclass(frozen=True)
class DigitVector:
    """
    Знак + canonical little-endian digit groups.

    Используется всеми движками как внутреннее представление. Конструктор
    не нормализует вход: для сырых групп используйте from_digits.
    """

    negative: bool
    digits: tuple[int, ...]

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_digits(cls, digits, negative: bool = False) -> "DigitVector":
        """
        Canonical DigitVector из сырых групп.

        Старшие нули удаляются, знак нуля сбрасывается.
        """
        stripped = strip_leading_zeros(tuple(digits))
        return cls(negative=bool(negative) and len(stripped) > 0, digits=stripped)

    @classmethod
    def from_native(cls, value: int) -> "DigitVector":
        """
        DigitVector из native int.

        Raises:
            TypeError: Если value не int
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")

        return cls.from_digits(magnitude_from_int(abs(value)), value < 0)

    @classmethod
    def from_decimal_string(cls, text: str) -> "DigitVector":
        """
        Разбор десятичной строки с необязательным ведущим '-'.

        Строка режется на группы по LOG_BASE цифр от младшего конца,
        старшая группа может быть короче.

        Raises:
            MalformedInput: Если после знака строка пуста или содержит не-цифры

        Examples:
            >>> DigitVector.from_decimal_string("-1234567").digits
            (234567, 1)
            >>> DigitVector.from_decimal_string("-000").negative
            False
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")

        negative = text.startswith("-")
        body = text[1:] if negative else text

        if not body:
            raise MalformedInput(f"no digits in {text!r}")

        # только ASCII цифры
        if any(ch not in "0123456789" for ch in body):
            raise MalformedInput(f"non-digit characters in {text!r}")

        groups = []
        end = len(body)
        while end > 0:
            start = max(0, end - LOG_BASE)
            groups.append(int(body[start:end]))
            end = start

        return cls.from_digits(groups, negative)

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return len(self.digits) == 0

    def is_even(self) -> bool:
        """Чётность по младшей группе (BASE чётное)."""
        if self.is_zero():
            return True
        return self.digits[0] % 2 == 0

    # -------------------------------------------------------------------------
    # Знак
    # -------------------------------------------------------------------------

    def abs(self) -> "DigitVector":
        if not self.negative:
            return self
        return DigitVector(negative=False, digits=self.digits)

    def negate(self) -> "DigitVector":
        if self.is_zero():
            return self
        return DigitVector(negative=not self.negative, digits=self.digits)

    # -------------------------------------------------------------------------
    # Сравнение и конверсия
    # -------------------------------------------------------------------------

    def compare(self, other: "DigitVector") -> int:
        """
        Полный порядок: знак, затем длина, затем группы от старшей.

        Returns:
            -1, 0 или 1
        """
        if self.is_zero() and other.is_zero():
            return 0

        if self.negative != other.negative:
            return -1 if self.negative else 1

        magnitude_order = compare_magnitude(self.digits, other.digits)
        return -magnitude_order if self.negative else magnitude_order

    def to_native(self) -> int:
        """
        Значение как native int в пределах ±MAX_NATIVE.

        Raises:
            ValueTooLarge: Если |value| > MAX_NATIVE
        """
        if compare_magnitude(self.digits, MAX_NATIVE_DIGITS) > 0:
            raise ValueTooLarge(
                f"value with {len(self.digits)} digit groups exceeds native range 2^53"
            )

        magnitude = magnitude_to_int(self.digits)
        return -magnitude if self.negative else magnitude


# =============================================================================
# CONSTANTS
# =============================================================================

ZERO_VECTOR: Final[DigitVector] = DigitVector(negative=False, digits=())
ONE_VECTOR: Final[DigitVector] = DigitVector(negative=False, digits=(1,))
TWO_VECTOR: Final[DigitVector] = DigitVector(negative=False, digits=(2,))
THREE_VECTOR: Final[DigitVector] = DigitVector(negative=False, digits=(3,))
