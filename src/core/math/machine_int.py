"""
MachineIntBounds — границы машинного целого

Python int не ограничен, поэтому "машинное целое" задаётся явно:
знаковое целое в дополнительном коде шириной bits.

    min_value = -2^(bits-1)
    max_value =  2^(bits-1) - 1

По умолчанию используется 32-битное целое (INT32).
"""

from typing import Final

from pydantic import BaseModel, Field

DEFAULT_MACHINE_INT_BITS: Final[int] = 32
MIN_MACHINE_INT_BITS: Final[int] = 2
MAX_MACHINE_INT_BITS: Final[int] = 128


class MachineIntBounds(BaseModel):
    """
    Диапазон представимых значений знакового машинного целого.

    Immutable модель (frozen=True): границы не меняются после создания.
    """

    bits: int = Field(
        DEFAULT_MACHINE_INT_BITS,
        ge=MIN_MACHINE_INT_BITS,
        le=MAX_MACHINE_INT_BITS,
        description="Ширина целого в битах (дополнительный код)",
    )

    model_config = {"frozen": True}

    @property
    def min_value(self) -> int:
        """Минимальное значение: -2^(bits-1)."""
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        """Максимальное значение: 2^(bits-1) - 1."""
        return (1 << (self.bits - 1)) - 1

    def contains(self, value: int) -> bool:
        """True если min_value <= value <= max_value."""
        return self.min_value <= value <= self.max_value


INT32: Final[MachineIntBounds] = MachineIntBounds()
INT64: Final[MachineIntBounds] = MachineIntBounds(bits=64)

INT_MIN: Final[int] = INT32.min_value
INT_MAX: Final[int] = INT32.max_value
