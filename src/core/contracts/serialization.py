"""
Сериализация InfiniteInt и DigitSequence в контрактные dict

Формат описан схемами contracts/schema/*.json. Десериализация всегда
проходит через валидатор контракта.
"""

from typing import Any, Dict, Final

from src.core.containers.digit_sequence import DigitSequence
from src.core.contracts.validators import validate_digit_sequence, validate_infinite_int
from src.core.math.infinite_int import InfiniteInt

CONTRACT_SCHEMA_VERSION: Final[str] = "1"


def infinite_int_to_contract(value: InfiniteInt) -> Dict[str, Any]:
    """InfiniteInt → {"schema_version", "negative", "digits"}."""
    return {
        "schema_version": CONTRACT_SCHEMA_VERSION,
        "negative": value.is_negative,
        "digits": "".join(str(digit) for digit in value.digits()),
    }


def infinite_int_from_contract(data: Dict[str, Any]) -> InfiniteInt:
    """
    Восстановление InfiniteInt из контрактного dict.

    Raises:
        ValidationError: Если данные не соответствуют infinite_int.json
    """
    validate_infinite_int(data)
    digits = DigitSequence(int(ch) for ch in data["digits"])
    return InfiniteInt.from_digits(digits, data["negative"])


def digit_sequence_to_contract(digits: DigitSequence) -> Dict[str, Any]:
    """DigitSequence → {"schema_version", "digits": [...]}."""
    return {
        "schema_version": CONTRACT_SCHEMA_VERSION,
        "digits": list(digits),
    }


def digit_sequence_from_contract(data: Dict[str, Any]) -> DigitSequence:
    """
    Восстановление DigitSequence из контрактного dict.

    Raises:
        ValidationError: Если данные не соответствуют digit_sequence.json
    """
    validate_digit_sequence(data)
    return DigitSequence(data["digits"])
