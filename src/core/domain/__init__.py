"""
Domain models для BigInteger

Immutable публичные значения поверх арифметических движков src.core.math.
"""

from src.core.domain.big_integer import (
    NEGATIVE_ONE,
    ONE,
    TEN,
    THREE,
    TWO,
    ZERO,
    BigInteger,
)

__all__ = [
    # Types
    "BigInteger",
    # Constants
    "ZERO",
    "ONE",
    "TWO",
    "THREE",
    "TEN",
    "NEGATIVE_ONE",
]
