"""
Sampling — равномерные случайные значения в [0, limit)

Источник случайности внешний: любой объект с методом randrange
(random.Random, random.SystemRandom и т.п.). Криптографическая стойкость —
свойство переданного источника, а не этого модуля.

Алгоритм (rejection sampling):
    старшая группа ~ U[0, msd(limit)], остальные ~ U[0, BASE)
    кандидат >= limit отбрасывается
Вероятность принятия >= 1/2, распределение равномерное.
"""

import logging
import random
from typing import Final, Protocol

from src.core.math.digit_vector import (
    BASE,
    DigitVector,
    compare_magnitude,
    strip_leading_zeros,
)

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Минимальный интерфейс источника случайности."""

    def randrange(self, stop: int) -> int: ...


# Источник по умолчанию (не криптографический)
_DEFAULT_SOURCE: Final[random.Random] = random.Random()


def random_below(limit: DigitVector, rng: RandomSource | None = None) -> DigitVector:
    """
    Равномерное случайное значение в [0, limit).

    Args:
        limit: Положительная верхняя граница (исключительно)
        rng: Источник случайности (default: модульный random.Random)

    Returns:
        Неотрицательный DigitVector < limit

    Raises:
        ValueError: Если limit <= 0
    """
    if limit.negative or limit.is_zero():
        raise ValueError("limit must be positive")

    source = rng if rng is not None else _DEFAULT_SOURCE
    top = len(limit.digits) - 1
    rejected = 0

    while True:
        candidate = [source.randrange(BASE) for _ in range(top)]
        candidate.append(source.randrange(limit.digits[top] + 1))
        digits = strip_leading_zeros(tuple(candidate))

        if compare_magnitude(digits, limit.digits) < 0:
            if rejected:
                logger.debug("random_below: accepted after %d rejections", rejected)
            return DigitVector.from_digits(digits)

        rejected += 1
