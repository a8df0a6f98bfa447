"""
Containers

Связные контейнеры, на которых построены числовые типы ядра.
"""

from src.core.containers.digit_sequence import (
    MAX_DIGIT,
    MIN_DIGIT,
    DigitSequence,
    DigitSequenceIterator,
    EmptyContainerError,
    InvalidPositionError,
    validate_digit,
)

__all__ = [
    # Constants
    "MIN_DIGIT",
    "MAX_DIGIT",
    # Exceptions
    "EmptyContainerError",
    "InvalidPositionError",
    # Types
    "DigitSequence",
    "DigitSequenceIterator",
    # Functions
    "validate_digit",
]
