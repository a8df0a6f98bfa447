"""
Core math modules

Целые числа произвольной точности и беззнаковая арифметика над цифрами.
"""

# Machine integer bounds
from src.core.math.machine_int import (
    DEFAULT_MACHINE_INT_BITS,
    INT32,
    INT64,
    INT_MAX,
    INT_MIN,
    MAX_MACHINE_INT_BITS,
    MIN_MACHINE_INT_BITS,
    MachineIntBounds,
)

# Magnitude helpers
from src.core.math.magnitude import (
    BASE,
    compare_magnitudes,
    is_zero_magnitude,
    multiply_by_digit,
    strip_leading_zeroes,
    unsigned_add,
    unsigned_subtract,
)

# InfiniteInt
from src.core.math.infinite_int import InfiniteInt, InfiniteIntRangeError

__all__ = [
    # Machine integer — Constants
    "DEFAULT_MACHINE_INT_BITS",
    "MIN_MACHINE_INT_BITS",
    "MAX_MACHINE_INT_BITS",
    "INT32",
    "INT64",
    "INT_MIN",
    "INT_MAX",
    # Machine integer — Types
    "MachineIntBounds",
    # Magnitude — Constants
    "BASE",
    # Magnitude — Functions
    "compare_magnitudes",
    "is_zero_magnitude",
    "multiply_by_digit",
    "strip_leading_zeroes",
    "unsigned_add",
    "unsigned_subtract",
    # InfiniteInt — Exceptions
    "InfiniteIntRangeError",
    # InfiniteInt — Types
    "InfiniteInt",
]
