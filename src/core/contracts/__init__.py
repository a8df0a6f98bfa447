"""
Contract Validation Module

Валидация и сериализация JSON контрактов для InfiniteInt и DigitSequence.
"""

from .serialization import (
    CONTRACT_SCHEMA_VERSION,
    digit_sequence_from_contract,
    digit_sequence_to_contract,
    infinite_int_from_contract,
    infinite_int_to_contract,
)
from .validators import (
    ContractValidator,
    DigitSequenceValidator,
    InfiniteIntValidator,
    SchemaLoader,
    validate_digit_sequence,
    validate_infinite_int,
)

__all__ = [
    # Constants
    "CONTRACT_SCHEMA_VERSION",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "InfiniteIntValidator",
    "DigitSequenceValidator",
    # Functions
    "validate_infinite_int",
    "validate_digit_sequence",
    "infinite_int_to_contract",
    "infinite_int_from_contract",
    "digit_sequence_to_contract",
    "digit_sequence_from_contract",
]
