"""
Тесты для Division Engine

Проверяет:
1. Частное с усечением к нулю и знаком XOR
2. Остаток модулей в [0, |b|)
3. Каждый fast path и общий алгоритм с trial digits
4. DivisionByZero
5. Property: |a| = |b| * |q| + r против native int
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from src.core.math.digit_vector import BASE, DigitVector
from src.core.math.division import (
    divide,
    divide_by_native,
    divmod_magnitude,
    divmod_vector,
    first_two_digits,
    modulo,
    remainder_by_native,
    trial_digit,
)
from src.core.math.errors import DivisionByZero


def dv(value: int) -> DigitVector:
    return DigitVector.from_native(value)


def s(value: str) -> DigitVector:
    return DigitVector.from_decimal_string(value)


def expected_divmod(a: int, b: int) -> tuple[int, int]:
    """Частное с усечением к нулю и остаток модулей через native int."""
    quotient, remainder = divmod(abs(a), abs(b))
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, remainder


# Группы, провоцирующие граничные trial digits
_GROUPS = st.one_of(
    st.sampled_from([0, 1, 2, BASE // 2, BASE - 2, BASE - 1]),
    st.integers(min_value=0, max_value=BASE - 1),
)


def _from_groups(groups: list[int]) -> int:
    value = 0
    for group in reversed(groups):
        value = value * BASE + group
    return value


structured_magnitudes = st.lists(_GROUPS, min_size=1, max_size=9).map(_from_groups)

signed_integers = st.one_of(
    st.integers(min_value=-(10**60), max_value=10**60),
    st.tuples(st.booleans(), structured_magnitudes).map(lambda t: -t[1] if t[0] else t[1]),
)


# =============================================================================
# HELPERS
# =============================================================================


class TestDivideByNative:
    """Тесты divide_by_native"""

    def test_single_pass(self) -> None:
        """10^12 / 7"""
        quotient, remainder = divide_by_native((0, 0, 1), 7)
        assert quotient == (142857, 142857)
        assert remainder == 1

    def test_divisor_above_base(self) -> None:
        """Делитель до BASE²"""
        dividend = s("123456789012345678901234567890")
        quotient, remainder = divide_by_native(dividend.digits, 98765432109)
        expected_q, expected_r = divmod(123456789012345678901234567890, 98765432109)
        assert DigitVector.from_digits(quotient) == dv(expected_q)
        assert remainder == expected_r

    def test_zero_dividend(self) -> None:
        """0 / d = 0, остаток 0"""
        assert divide_by_native((), 5) == ((), 0)

    def test_zero_divisor(self) -> None:
        """Деление на 0 → DivisionByZero"""
        with pytest.raises(DivisionByZero):
            divide_by_native((1,), 0)

    def test_remainder_by_native(self) -> None:
        """Остаток без построения частного"""
        assert remainder_by_native((0, 0, 1), 3) == 1
        assert remainder_by_native((), 3) == 0
        assert remainder_by_native(s("123456789012345678901").digits, 97) == (
            123456789012345678901 % 97
        )

        with pytest.raises(DivisionByZero):
            remainder_by_native((1,), 0)


class TestTrialDigit:
    """Тесты first_two_digits / trial_digit"""

    def test_first_two_digits(self) -> None:
        """Значение двух старших групп"""
        assert first_two_digits(()) == 0
        assert first_two_digits((7,)) == 7
        assert first_two_digits((3, 2, 1)) == 1 * BASE + 2

    def test_two_digit_estimate(self) -> None:
        """qt = R2 // D2"""
        assert trial_digit((5, 7, 3), BASE, False) == 3

    def test_three_digit_escape(self) -> None:
        """qt = (R2 * BASE + r3) // D2"""
        assert trial_digit((5, 7, 3), 4 * BASE, True) == 750001

    def test_three_digit_flag_ignored_for_short_dividend(self) -> None:
        """Для двух групп третьей группы нет"""
        assert trial_digit((7, 3), 2, True) == (3 * BASE + 7) // 2


# =============================================================================
# FAST PATHS И ОБЩИЙ АЛГОРИТМ
# =============================================================================


class TestDivmodMagnitude:
    """Тесты divmod_magnitude"""

    def test_dividend_smaller(self) -> None:
        """|a| < |b| → (0, |a|)"""
        assert divmod_magnitude((5,), (7,)) == ((), (5,))

    def test_native_path(self) -> None:
        """|a| < 2^53 → native divmod"""
        quotient, remainder = divmod_magnitude(dv(1234567890).digits, dv(4545454).digits)
        assert quotient == dv(271).digits
        assert remainder == dv(2749856).digits

    def test_short_divisor_path(self) -> None:
        """|b| < BASE² → single-pass деление"""
        quotient, remainder = divmod_magnitude(dv(70000000000000000).digits, dv(5000000).digits)
        assert quotient == dv(14000000000).digits
        assert remainder == ()

    def test_long_division_path(self) -> None:
        """Общий алгоритм"""
        quotient, remainder = divmod_magnitude(
            dv(70000000000000000).digits, dv(20000000000000000).digits
        )
        assert quotient == (3,)
        assert remainder == dv(10000000000000000).digits

    def test_zero_divisor(self) -> None:
        """Делитель 0 → DivisionByZero"""
        with pytest.raises(DivisionByZero, match="division by zero"):
            divmod_magnitude((1,), ())

    def test_operands_unchanged(self) -> None:
        """Рабочее делимое — копия"""
        dividend = s("400000000000000000000")
        divisor = s("70000000000000000")
        divmod_magnitude(dividend.digits, divisor.digits)
        assert dividend == s("400000000000000000000")
        assert divisor == s("70000000000000000")

    @pytest.mark.parametrize(
        "a, b",
        [
            (10**30, 10**12 + 1),
            (10**36 - 1, 10**18 - 1),
            (2**200, 3**80),
            (int("999999" * 8), int("999999" * 4)),
            (int("1" + "000000" * 6), int("999999" + "000000" * 2 + "000001")),
            (int("999999" * 5 + "000000"), int("999999" + "000000" * 2)),
            (BASE**9 - 1, BASE**3),
            (BASE**7, BASE**2 + BASE - 1),
            (BASE**8 + 1, BASE**4 - BASE**2),
        ],
    )
    def test_boundary_trial_digits(self, a: int, b: int) -> None:
        """Граничные trial digits совпадают с native divmod"""
        quotient, remainder = divmod_magnitude(dv(a).digits, dv(b).digits)
        expected_q, expected_r = divmod(a, b)
        assert quotient == dv(expected_q).digits
        assert remainder == dv(expected_r).digits


# =============================================================================
# ЗНАКОВЫЕ ОПЕРАЦИИ
# =============================================================================


class TestDivide:
    """Тесты divide"""

    def test_exact_quotient_signs(self) -> None:
        """Знак = XOR знаков"""
        assert divide(dv(70000000000000000), dv(5000000)) == dv(14000000000)
        assert divide(dv(-70000000000000000), dv(5000000)) == dv(-14000000000)
        assert divide(dv(70000000000000000), dv(-5000000)) == dv(-14000000000)
        assert divide(dv(-70000000000000000), dv(-5000000)) == dv(14000000000)

    def test_truncation_toward_zero(self) -> None:
        """Частное усекается к нулю"""
        assert divide(dv(70000000000000000), dv(20000000000000000)) == dv(3)
        assert divide(dv(70000000000000000), dv(-20000000000000000)) == dv(-3)
        assert divide(dv(-7), dv(2)) == dv(-3)

    def test_general_algorithm(self) -> None:
        """Многошаговое длинное деление"""
        assert divide(s("400000000000000000000"), s("70000000000000000")) == dv(5714)
        assert divide(s("20000000000000000"), s("2000000000001234")) == dv(9)

    def test_zero_dividend(self) -> None:
        """0 / b = canonical 0"""
        result = divide(dv(0), dv(-5))
        assert result.is_zero()
        assert result.negative is False

    def test_small_negative_quotient_is_canonical_zero(self) -> None:
        """|a| < |b| с разными знаками → 0 без знака"""
        result = divide(dv(-3), dv(5))
        assert result.is_zero()
        assert result.negative is False

    def test_division_by_zero(self) -> None:
        """b == 0 → DivisionByZero (и ZeroDivisionError)"""
        with pytest.raises(DivisionByZero):
            divide(dv(5), dv(0))

        with pytest.raises(ZeroDivisionError):
            divide(dv(0), dv(0))


class TestModulo:
    """Тесты modulo"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("135546343434234528", "54657342556", "14566676004"),
            ("8326445093271549824986317", "8235329764373457", "2739574529170425"),
            ("3324094572302349474629238", "2355463456645787980", "944770484040977778"),
            ("46598234734957437345", "98340063749944", "90547237722777"),
            (
                "225094688443758234773948532",
                "576388348357322834364352",
                "303232584402329371851252",
            ),
        ],
    )
    def test_known_remainders(self, a: str, b: str, expected: str) -> None:
        """Остатки длинных значений"""
        assert modulo(s(a), s(b)) == s(expected)
        assert int(expected) == int(a) % int(b)

    def test_negative_dividend(self) -> None:
        """Остаток модулей: -1234567890 mod 4545454 = 2749856"""
        assert modulo(dv(-1234567890), dv(4545454)) == dv(2749856)

    def test_sign_independent(self) -> None:
        """Знаки операндов не влияют на остаток"""
        for a, b in ((17, 5), (-17, 5), (17, -5), (-17, -5)):
            assert modulo(dv(a), dv(b)) == dv(2)

    def test_remainder_zero(self) -> None:
        """Делимое кратно делителю"""
        result = modulo(dv(-10**20), dv(10**10))
        assert result.is_zero()
        assert result.negative is False

    def test_division_by_zero(self) -> None:
        """Модуль 0 → DivisionByZero"""
        with pytest.raises(DivisionByZero):
            modulo(dv(5), dv(0))


# =============================================================================
# PROPERTIES
# =============================================================================


class TestDivisionProperties:
    """Property-based проверки против native int"""

    @settings(max_examples=300, deadline=None)
    @given(a=signed_integers, b=signed_integers.filter(lambda v: v != 0))
    def test_matches_native(self, a: int, b: int) -> None:
        """Частное и остаток совпадают с native divmod модулей"""
        quotient, remainder = divmod_vector(dv(a), dv(b))
        expected_q, expected_r = expected_divmod(a, b)

        assert quotient == dv(expected_q)
        assert remainder == dv(expected_r)

    @settings(max_examples=200, deadline=None)
    @given(a=signed_integers, b=signed_integers.filter(lambda v: v != 0))
    def test_reconstruction(self, a: int, b: int) -> None:
        """|a| = |b| * |q| + r, 0 <= r < |b|"""
        quotient, remainder = divmod_vector(dv(a), dv(b))
        q = _from_groups(list(quotient.digits))
        r = _from_groups(list(remainder.digits))

        assert abs(a) == abs(b) * q + r
        assert 0 <= r < abs(b)
        assert remainder.negative is False
        assert quotient.negative == (q != 0 and (a < 0) != (b < 0))
