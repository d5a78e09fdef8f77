"""
Core math modules

Точная рациональная арифметика без ошибок округления float.
"""

from src.core.math.fraction import (
    FRACTION_SEPARATOR,
    I64_MAX,
    I64_MIN,
    ONE,
    ZERO,
    Fraction,
    gcd,
)

__all__ = [
    # Constants
    "FRACTION_SEPARATOR",
    "I64_MAX",
    "I64_MIN",
    "ONE",
    "ZERO",
    # Types
    "Fraction",
    # Functions
    "gcd",
]
