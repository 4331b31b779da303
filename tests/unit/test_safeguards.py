"""
Тесты для Safeguards

Проверяет:
1. as_whole_number: int, float с целым значением, отказ для bool/NaN/Inf
2. validate_whole_number / validate_positive_whole_number
3. validate_radix
"""

import pytest

from src.core.math.errors import InvalidBase, InvalidExponent
from src.core.math.safeguards import (
    MAX_RADIX,
    MIN_RADIX,
    as_whole_number,
    validate_positive_whole_number,
    validate_radix,
    validate_whole_number,
)


class TestAsWholeNumber:
    """Тесты as_whole_number"""

    def test_int(self) -> None:
        """int возвращается как есть"""
        assert as_whole_number(5) == 5
        assert as_whole_number(-5) == -5
        assert as_whole_number(10**40) == 10**40

    def test_whole_float(self) -> None:
        """float с целым значением → int"""
        assert as_whole_number(5.0) == 5
        assert isinstance(as_whole_number(5.0), int)

    def test_rejected(self) -> None:
        """bool, дробные, NaN, Inf, строки → None"""
        for value in (True, False, 5.5, float("nan"), float("inf"), "5", None, [5]):
            assert as_whole_number(value) is None


class TestValidateWholeNumber:
    """Тесты validate_whole_number"""

    def test_valid(self) -> None:
        """Целое проходит"""
        assert validate_whole_number(3, "x") == 3
        assert validate_whole_number(3.0, "x", min_value=0) == 3

    def test_not_whole(self) -> None:
        """Не целое → error с именем параметра"""
        with pytest.raises(ValueError, match="x must be a whole number"):
            validate_whole_number(2.5, "x")

    def test_below_minimum(self) -> None:
        """Меньше min_value → error"""
        with pytest.raises(InvalidExponent, match="exponent must be >= 0, got -1"):
            validate_whole_number(-1, "exponent", error=InvalidExponent, min_value=0)

    def test_positive(self) -> None:
        """Положительное целое"""
        assert validate_positive_whole_number(1, "n") == 1
        with pytest.raises(ValueError, match="n must be >= 1"):
            validate_positive_whole_number(0, "n")


class TestValidateRadix:
    """Тесты validate_radix"""

    def test_bounds(self) -> None:
        """Границы включительно"""
        assert validate_radix(MIN_RADIX) == 2
        assert validate_radix(MAX_RADIX) == 36
        assert validate_radix(16.0) == 16

    @pytest.mark.parametrize("base", [1, 37, 0, -2, 2.5, True, "10"])
    def test_invalid(self, base) -> None:
        """Вне [2, 36] → InvalidBase"""
        with pytest.raises(InvalidBase):
            validate_radix(base)
