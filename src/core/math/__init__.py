"""
Core math modules для BigInteger

Арифметические движки над canonical digit vectors с точной целочисленной арифметикой.
"""

# Errors
from src.core.math.errors import (
    BigIntegerError,
    DivisionByZero,
    InvalidBase,
    InvalidExponent,
    InvalidWitnessCount,
    MalformedInput,
    ValueTooLarge,
)

# Safeguards
from src.core.math.safeguards import (
    MAX_RADIX,
    MIN_RADIX,
    as_whole_number,
    validate_positive_whole_number,
    validate_radix,
    validate_whole_number,
)

# Digit Vector
from src.core.math.digit_vector import (
    BASE,
    BASE_SQUARED,
    LOG_BASE,
    MAX_NATIVE,
    DigitVector,
    compare_magnitude,
    strip_leading_zeros,
)

# Engines
from src.core.math.additive import add, long_addition, subtract, subtract_by_complement
from src.core.math.multiplicative import multiply, multiply_one_digit
from src.core.math.division import (
    divide,
    divide_by_native,
    divmod_magnitude,
    divmod_vector,
    modulo,
)
from src.core.math.exponentiation import mod_pow, pow_native

# Primality & sampling
from src.core.math.sampling import RandomSource, random_below
from src.core.math.primality import (
    DEFAULT_WITNESS_LOOPS,
    MillerRabinTester,
    PrimalityConfig,
    PrimalityResult,
    is_prime,
)

# Radix Codec
from src.core.math.radix import DIGIT_ALPHABET, to_string, value_of

__all__ = [
    # Errors
    "BigIntegerError",
    "DivisionByZero",
    "InvalidBase",
    "InvalidExponent",
    "InvalidWitnessCount",
    "MalformedInput",
    "ValueTooLarge",
    # Safeguards
    "MAX_RADIX",
    "MIN_RADIX",
    "as_whole_number",
    "validate_positive_whole_number",
    "validate_radix",
    "validate_whole_number",
    # Digit Vector — Constants
    "BASE",
    "BASE_SQUARED",
    "LOG_BASE",
    "MAX_NATIVE",
    # Digit Vector — Types & helpers
    "DigitVector",
    "compare_magnitude",
    "strip_leading_zeros",
    # Additive Engine
    "add",
    "long_addition",
    "subtract",
    "subtract_by_complement",
    # Multiplicative Engine
    "multiply",
    "multiply_one_digit",
    # Division Engine
    "divide",
    "divide_by_native",
    "divmod_magnitude",
    "divmod_vector",
    "modulo",
    # Exponentiation Engine
    "mod_pow",
    "pow_native",
    # Sampling
    "RandomSource",
    "random_below",
    # Primality
    "DEFAULT_WITNESS_LOOPS",
    "MillerRabinTester",
    "PrimalityConfig",
    "PrimalityResult",
    "is_prime",
    # Radix Codec
    "DIGIT_ALPHABET",
    "to_string",
    "value_of",
]
