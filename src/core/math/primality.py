"""
Primality Tester — вероятностный тест Miller–Rabin

Порядок проверок:
1. n <= 1                                  → COMPOSITE (не простое)
2. n ∈ {2, 3, 5}                           → PRIME
3. n делится на 2, 3 или 5                 → COMPOSITE (дешёвый pre-filter)
4. n - 1 = d * 2^count
5. witness_loops раз: a ~ U[2, n-2], x = a^d mod n
   - x == 1 или x == n-1                  → witness пройден
   - до count-1 возведений x в квадрат:
       x == 1   → COMPOSITE (нетривиальный корень из 1)
       x == n-1 → witness пройден
   - иначе                                 → COMPOSITE
6. Все witnesses пройдены                  → PROBABLY PRIME

Вероятность false positive <= 4^(-witness_loops).

Pre-filter на 5 смотрит только младшую группу, когда BASE делится на 5
(BASE = 10^6); при другом BASE остаток считается через Division Engine.
"""

import logging
from dataclasses import dataclass
from typing import Final

from src.core.math.additive import add, subtract
from src.core.math.digit_vector import (
    BASE,
    ONE_VECTOR,
    THREE_VECTOR,
    TWO_VECTOR,
    DigitVector,
)
from src.core.math.division import divide_by_native, modulo, remainder_by_native
from src.core.math.errors import InvalidWitnessCount
from src.core.math.exponentiation import mod_pow
from src.core.math.multiplicative import multiply
from src.core.math.safeguards import validate_positive_whole_number
from src.core.math.sampling import RandomSource, random_below

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Количество witness-итераций по умолчанию
DEFAULT_WITNESS_LOOPS: Final[int] = 5

# Простые, которые pre-filter иначе отбросил бы как делящиеся на себя
_SMALL_PRIMES: Final[frozenset[int]] = frozenset({2, 3, 5})


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PrimalityConfig:
    """Конфигурация Miller–Rabin.

    Raises:
        InvalidWitnessCount: Если witness_loops не положительное целое
    """

    # Количество случайных witnesses
    witness_loops: int = DEFAULT_WITNESS_LOOPS

    def __post_init__(self) -> None:
        loops = validate_positive_whole_number(
            self.witness_loops, "witness_loops", error=InvalidWitnessCount
        )
        object.__setattr__(self, "witness_loops", loops)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class PrimalityResult:
    """Результат проверки на простоту."""

    probably_prime: bool
    reason: str

    # Сколько witnesses было проверено до решения
    witnesses_checked: int

    # Детали
    details: str


# =============================================================================
# TESTER
# =============================================================================


def _divisible_by_five(n: DigitVector) -> bool:
    if BASE % 5 == 0:
        return n.digits[0] % 5 == 0
    return remainder_by_native(n.digits, 5) == 0


class MillerRabinTester:
    """Miller–Rabin тест с внешним источником случайности.

    Источник случайности используется только для выбора witnesses.
    """

    def __init__(
        self,
        config: PrimalityConfig | None = None,
        rng: RandomSource | None = None,
    ):
        """Инициализация тестера.

        Args:
            config: конфигурация (опционально, используется default)
            rng: источник случайности (опционально, модульный default)
        """
        self.config = config or PrimalityConfig()
        self.rng = rng

    def evaluate(self, n: DigitVector) -> PrimalityResult:
        """Проверка n на простоту.

        Args:
            n: проверяемое значение (любого знака)

        Returns:
            PrimalityResult с решением и причиной
        """
        # 1. Тривиальные случаи
        if n.compare(ONE_VECTOR) <= 0:
            return PrimalityResult(False, "not_greater_than_one", 0, "n <= 1")

        if len(n.digits) == 1 and n.digits[0] in _SMALL_PRIMES:
            return PrimalityResult(True, "small_prime", 0, f"n = {n.digits[0]}")

        # 2. Pre-filter
        if n.is_even():
            return PrimalityResult(False, "divisible_by_2", 0, "n is even")

        if remainder_by_native(n.digits, 3) == 0:
            return PrimalityResult(False, "divisible_by_3", 0, "n mod 3 == 0")

        if _divisible_by_five(n):
            return PrimalityResult(False, "divisible_by_5", 0, "n mod 5 == 0")

        # 3. n - 1 = d * 2^count
        n_minus_one = subtract(n, ONE_VECTOR)
        d = n_minus_one
        count = 0

        while d.is_even():
            halved, _ = divide_by_native(d.digits, 2)
            d = DigitVector.from_digits(halved)
            count += 1

        logger.debug(
            "miller-rabin: n has %d digit groups, n-1 = d * 2^%d", len(n.digits), count
        )

        # 4. Witness loop
        witness_range = subtract(n, THREE_VECTOR)

        for loop in range(self.config.witness_loops):
            witness = add(random_below(witness_range, self.rng), TWO_VECTOR)
            x = mod_pow(witness, d, n)

            if x.compare(ONE_VECTOR) == 0 or x.compare(n_minus_one) == 0:
                continue

            passed = False
            for _ in range(count - 1):
                x = modulo(multiply(x, x), n)

                if x.compare(ONE_VECTOR) == 0:
                    logger.debug("miller-rabin: witness %d found non-trivial root", loop + 1)
                    return PrimalityResult(
                        False,
                        "nontrivial_square_root",
                        loop + 1,
                        "x^2 == 1 mod n with x != ±1",
                    )

                if x.compare(n_minus_one) == 0:
                    passed = True
                    break

            if not passed:
                logger.debug("miller-rabin: witness %d proved compositeness", loop + 1)
                return PrimalityResult(
                    False,
                    "witness_failed",
                    loop + 1,
                    "x never reached n-1",
                )

        return PrimalityResult(
            True,
            "all_witnesses_passed",
            self.config.witness_loops,
            f"false positive probability <= 4^-{self.config.witness_loops}",
        )


def is_prime(
    n: DigitVector,
    witness_loops: int | None = None,
    rng: RandomSource | None = None,
) -> bool:
    """
    Boolean shortcut для MillerRabinTester.

    Args:
        n: Проверяемое значение
        witness_loops: Количество witnesses (default: DEFAULT_WITNESS_LOOPS)
        rng: Источник случайности

    Returns:
        True если n вероятно простое, False если составное или <= 1

    Raises:
        InvalidWitnessCount: Если witness_loops задан и не положительное целое
    """
    if witness_loops is None:
        config = PrimalityConfig()
    else:
        config = PrimalityConfig(witness_loops=witness_loops)

    return MillerRabinTester(config=config, rng=rng).evaluate(n).probably_prime
