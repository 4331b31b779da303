"""
BigInteger — immutable целое произвольной длины

Immutable Pydantic модель: знак + canonical little-endian digit groups по
основанию BASE. Все арифметические операции делегируются движкам из
src.core.math и возвращают новое значение.

Инварианты (проверяются валидаторами при каждом создании):
1. Нет старших нулевых групп, ноль = пустой tuple
2. Каждая группа в [0, BASE)
3. Ноль никогда не отрицательный

Кэш десятичной строки не участвует в равенстве и hash.
"""

from typing import Final

from pydantic import BaseModel, Field, PrivateAttr, StrictInt, field_validator

from src.core.math.additive import add as _add
from src.core.math.additive import subtract as _subtract
from src.core.math.digit_vector import (
    BASE,
    DigitVector,
    magnitude_to_int,
    strip_leading_zeros,
)
from src.core.math.division import divmod_vector
from src.core.math.errors import InvalidExponent
from src.core.math.exponentiation import mod_pow as _mod_pow
from src.core.math.exponentiation import pow_native
from src.core.math.multiplicative import multiply as _multiply
from src.core.math.primality import is_prime as _is_prime
from src.core.math.radix import to_string as _to_string
from src.core.math.radix import value_of as _value_of
from src.core.math.sampling import RandomSource, random_below


class BigInteger(BaseModel):
    """
    Целое произвольной длины.

    Создание:
        BigInteger.of("-12345678901234567890")
        BigInteger.of(42)
        BigInteger(negative=True, digits=(5, 1))   # -1000005
    """

    negative: bool = Field(False, description="True если значение строго отрицательное")
    digits: tuple[StrictInt, ...] = Field(
        (), validate_default=True, description="Little-endian digit groups по основанию BASE"
    )

    _number_string: str | None = PrivateAttr(default=None)

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digits(cls, v: tuple[int, ...], info) -> tuple[int, ...]:
        """Проверка диапазона групп, canonical form и отсутствия "-0"."""
        for digit in v:
            if digit < 0 or digit >= BASE:
                raise ValueError(f"digit group {digit} outside [0, {BASE})")

        if strip_leading_zeros(v) != v:
            raise ValueError("digits must not have most-significant zero groups")

        if not v and info.data.get("negative"):
            raise ValueError("zero cannot be negative")

        return v

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_vector(cls, vector: DigitVector) -> "BigInteger":
        return cls(negative=vector.negative, digits=vector.digits)

    @classmethod
    def from_string(cls, text: str) -> "BigInteger":
        """
        Разбор десятичной строки с необязательным ведущим '-'.

        Raises:
            MalformedInput: Если строка пуста или содержит не-цифры
        """
        value = cls.from_vector(DigitVector.from_decimal_string(text))

        body = text[1:] if text.startswith("-") else text
        if not body.startswith("0"):
            value._number_string = text

        return value

    @classmethod
    def from_native(cls, value: int) -> "BigInteger":
        """
        Создание из native int.

        Raises:
            TypeError: Если value не int
        """
        return cls.from_vector(DigitVector.from_native(value))

    @classmethod
    def of(cls, value: "BigInteger | str | int") -> "BigInteger":
        """Создание из BigInteger, десятичной строки или int."""
        if isinstance(value, BigInteger):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        return cls.from_native(value)

    @classmethod
    def value_of(cls, text: str, base: int = 10) -> "BigInteger":
        """
        Разбор строки в системе счисления base ∈ [2, 36].

        Raises:
            InvalidBase: Если base вне [2, 36]
            MalformedInput: Если строка не разбирается
        """
        return cls.from_vector(_value_of(text, base))

    @classmethod
    def random(cls, limit: "BigInteger | int", rng: RandomSource | None = None) -> "BigInteger":
        """
        Равномерное случайное значение в [0, limit).

        Raises:
            ValueError: Если limit <= 0
        """
        return cls.from_vector(random_below(cls.of(limit).vector, rng))

    @classmethod
    def max(cls, *values: "BigInteger") -> "BigInteger":
        """Наибольшее из значений. ValueError без аргументов."""
        if not values:
            raise ValueError("max() requires at least one value")

        largest = values[0]
        for value in values[1:]:
            if value.compare(largest) > 0:
                largest = value
        return largest

    @classmethod
    def min(cls, *values: "BigInteger") -> "BigInteger":
        """Наименьшее из значений. ValueError без аргументов."""
        if not values:
            raise ValueError("min() requires at least one value")

        smallest = values[0]
        for value in values[1:]:
            if value.compare(smallest) < 0:
                smallest = value
        return smallest

    # =========================================================================
    # ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    @property
    def vector(self) -> DigitVector:
        """Внутреннее представление для движков."""
        return DigitVector(negative=self.negative, digits=self.digits)

    def is_zero(self) -> bool:
        return not self.digits

    def is_even(self) -> bool:
        return self.vector.is_even()

    def abs(self) -> "BigInteger":
        return self if not self.negative else BigInteger.from_vector(self.vector.abs())

    def negate(self) -> "BigInteger":
        return BigInteger.from_vector(self.vector.negate())

    def to_native(self) -> int:
        """
        Значение как native int в пределах ±2^53.

        Raises:
            ValueTooLarge: Если |value| > 2^53
        """
        return self.vector.to_native()

    def to_string(self, base: int = 10) -> str:
        """
        Строка в системе счисления base ∈ [2, 36].

        Для base 10 используется (и заполняется) кэш десятичной строки.

        Raises:
            InvalidBase: Если base вне [2, 36]
        """
        if base == 10 and self._number_string is not None:
            return self._number_string

        text = _to_string(self.vector, base)

        if base == 10:
            self._number_string = text

        return text

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare(self, other: "BigInteger | str | int") -> int:
        """
        Returns:
            -1 если self < other, 0 если равны, 1 если self > other
        """
        return self.vector.compare(BigInteger.of(other).vector)

    def equals(self, other: "BigInteger | str | int") -> bool:
        return self.compare(other) == 0

    def is_greater_than(self, other: "BigInteger | str | int") -> bool:
        return self.compare(other) > 0

    def is_less_than(self, other: "BigInteger | str | int") -> bool:
        return self.compare(other) < 0

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "BigInteger | str | int") -> "BigInteger":
        return BigInteger.from_vector(_add(self.vector, BigInteger.of(other).vector))

    def subtract(self, other: "BigInteger | str | int") -> "BigInteger":
        return BigInteger.from_vector(_subtract(self.vector, BigInteger.of(other).vector))

    def multiply(self, other: "BigInteger | str | int") -> "BigInteger":
        return BigInteger.from_vector(_multiply(self.vector, BigInteger.of(other).vector))

    def divmod(self, other: "BigInteger | str | int") -> tuple["BigInteger", "BigInteger"]:
        """
        Частное (усечение к нулю) и остаток модулей в [0, |other|).

        Raises:
            DivisionByZero: Если other == 0
        """
        quotient, remainder = divmod_vector(self.vector, BigInteger.of(other).vector)
        return BigInteger.from_vector(quotient), BigInteger.from_vector(remainder)

    def divide(self, other: "BigInteger | str | int") -> "BigInteger":
        """
        Частное, усечённое к нулю; знак = XOR знаков операндов.

        Raises:
            DivisionByZero: Если other == 0
        """
        return self.divmod(other)[0]

    def modulo(self, other: "BigInteger | str | int") -> "BigInteger":
        """
        Остаток |self| mod |other|, всегда в [0, |other|).

        Raises:
            DivisionByZero: Если other == 0
        """
        return self.divmod(other)[1]

    def pow(self, exponent: "BigInteger | int") -> "BigInteger":
        """
        self ** exponent для неотрицательного целого exponent.

        BigInteger показатель должен помещаться в native диапазон.

        Raises:
            InvalidExponent: Если exponent отрицательный или не целый
            ValueTooLarge: Если BigInteger показатель больше 2^53
        """
        if isinstance(exponent, BigInteger):
            if exponent.negative:
                raise InvalidExponent(f"exponent must be >= 0, got {exponent}")
            exponent = exponent.to_native()
        return BigInteger.from_vector(pow_native(self.vector, exponent))

    def mod_pow(
        self,
        exponent: "BigInteger | str | int",
        modulus: "BigInteger | str | int",
    ) -> "BigInteger":
        """
        self ** exponent mod |modulus|, результат в [0, |modulus|).

        Raises:
            InvalidExponent: Если exponent < 0
            DivisionByZero: Если modulus == 0
        """
        result = _mod_pow(
            self.vector,
            BigInteger.of(exponent).vector,
            BigInteger.of(modulus).vector,
        )
        return BigInteger.from_vector(result)

    def is_prime(
        self,
        witness_loops: int | None = None,
        rng: RandomSource | None = None,
    ) -> bool:
        """
        Miller–Rabin: False — точно составное (или <= 1), True — вероятно простое.

        Raises:
            InvalidWitnessCount: Если witness_loops задан и не положительное целое
        """
        return _is_prime(self.vector, witness_loops, rng)

    # =========================================================================
    # PYTHON PROTOCOLS
    # =========================================================================

    @staticmethod
    def _coerce(other: object) -> "BigInteger | None":
        if isinstance(other, BigInteger):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return BigInteger.from_native(other)
        return None

    def __eq__(self, other: object) -> bool:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.negative == coerced.negative and self.digits == coerced.digits

    def __hash__(self) -> int:
        # совпадает с hash равного int
        return hash(int(self))

    def __lt__(self, other: object) -> bool:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.compare(coerced) < 0

    def __le__(self, other: object) -> bool:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.compare(coerced) <= 0

    def __gt__(self, other: object) -> bool:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.compare(coerced) > 0

    def __ge__(self, other: object) -> bool:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.compare(coerced) >= 0

    def __add__(self, other: object) -> "BigInteger":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.add(coerced)

    def __radd__(self, other: object) -> "BigInteger":
        return self.__add__(other)

    def __sub__(self, other: object) -> "BigInteger":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.subtract(coerced)

    def __rsub__(self, other: object) -> "BigInteger":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.subtract(self)

    def __mul__(self, other: object) -> "BigInteger":
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.multiply(coerced)

    def __rmul__(self, other: object) -> "BigInteger":
        return self.__mul__(other)

    def __pow__(self, exponent: object, modulus: object = None) -> "BigInteger":
        if modulus is None:
            return self.pow(exponent)
        return self.mod_pow(exponent, modulus)

    def __neg__(self) -> "BigInteger":
        return self.negate()

    def __abs__(self) -> "BigInteger":
        return self.abs()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        magnitude = magnitude_to_int(self.digits)
        return -magnitude if self.negative else magnitude

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_string()}')"


# =============================================================================
# CONSTANTS
# =============================================================================

ZERO: Final[BigInteger] = BigInteger()
ONE: Final[BigInteger] = BigInteger.from_native(1)
TWO: Final[BigInteger] = BigInteger.from_native(2)
THREE: Final[BigInteger] = BigInteger.from_native(3)
TEN: Final[BigInteger] = BigInteger.from_native(10)
NEGATIVE_ONE: Final[BigInteger] = BigInteger.from_native(-1)
