"""
Text I/O

Текстовые адаптеры для InfiniteInt и DigitSequence.
"""

from src.core.text.formatting import (
    format_digit_sequence,
    format_infinite_int,
    parse_infinite_int,
    read_infinite_int,
    write_digit_sequence,
    write_infinite_int,
)
from src.core.text.stream import CharStream

__all__ = [
    # Types
    "CharStream",
    # Output
    "format_infinite_int",
    "format_digit_sequence",
    "write_infinite_int",
    "write_digit_sequence",
    # Input
    "read_infinite_int",
    "parse_infinite_int",
]
