"""
InfiniteInt — знаковое целое произвольной точности

Представление: magnitude (DigitSequence, старший разряд первым) + флаг знака.
Арифметика (школьные алгоритмы в десятичной системе):
- сложение с переносом (carry)
- вычитание с заёмом (borrow)
- умножение столбиком

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. magnitude не пуст и не содержит ведущих нулей (кроме самого нуля)
2. Канонический ноль: одна цифра 0, is_negative == False
3. Операции не изменяют операнды, результат является новым экземпляром
4. Знак меняется только через set_negative (и никогда у нуля)

ТАБЛИЦА ЗНАКОВ (a op b):
    +  одинаковые знаки → unsigned_add, знак общий
    +  разные знаки     → путь вычитания
    -  одинаковые знаки → путь вычитания
    -  разные знаки     → unsigned_add, знак левого операнда
    *  знак = XOR знаков операндов
"""

import functools
from typing import Union

from src.core.containers.digit_sequence import DigitSequence
from src.core.math.machine_int import INT32, MachineIntBounds
from src.core.math.magnitude import (
    BASE,
    compare_magnitudes,
    is_zero_magnitude,
    multiply_by_digit,
    strip_leading_zeroes,
    unsigned_add,
    unsigned_subtract,
)
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

Operand = Union["InfiniteInt", int]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InfiniteIntRangeError(OverflowError):
    """
    Значение InfiniteInt не представимо машинным целым.

    Возникает в to_int() / int(), если значение выходит за
    [bounds.min_value, bounds.max_value].
    """

    pass


# =============================================================================
# INFINITE INT
# =============================================================================


@functools.total_ordering
class InfiniteInt:
    """
    Целое число с произвольным количеством десятичных цифр.

    Examples:
        >>> InfiniteInt(5) + InfiniteInt(7)
        InfiniteInt(12)
        >>> InfiniteInt(-3) * InfiniteInt(4)
        InfiniteInt(-12)
        >>> int(InfiniteInt(100) - InfiniteInt(1))
        99
    """

    __slots__ = ("_digits", "_negative")

    def __init__(self, num: int = 0):
        """
        Создание из целого числа (по умолчанию канонический ноль).

        Отрицательное значение, модуль которого больше максимального
        положительного машинного целого (например, INT_MIN), сначала
        теряет цифру единиц, и только остаток меняет знак.

        Raises:
            TypeError: Если num не int (bool не принимается)
        """
        if isinstance(num, bool) or not isinstance(num, int):
            raise TypeError(f"InfiniteInt() expects int, got {type(num).__name__}")

        self._digits = DigitSequence()
        self._negative = num < 0

        if num < -INT32.max_value:
            # Отделяем цифру единиц, чтобы остаток был представим после смены знака
            ones = -(num % -BASE)
            self._digits.push_front(ones)
            num = -((num + ones) // BASE)
        else:
            num = abs(num)

        # Цикл выполняется хотя бы раз для нуля
        while num or self._digits.size() == 0:
            num, digit = divmod(num, BASE)
            self._digits.push_front(digit)

    @classmethod
    def _from_magnitude(cls, digits: DigitSequence, negative: bool = False) -> "InfiniteInt":
        """Сборка из готовой magnitude (последовательность переходит во владение)."""
        result = cls.__new__(cls)
        result._digits = digits
        result._negative = negative
        result._remove_leading_zeroes()
        if is_zero_magnitude(result._digits):
            result._negative = False
        return result

    @classmethod
    def from_digits(cls, digits: DigitSequence, negative: bool = False) -> "InfiniteInt":
        """
        Создание из последовательности цифр (старший разряд первым).

        Последовательность копируется; ведущие нули удаляются, пустая
        последовательность даёт ноль. Ноль всегда неотрицателен.
        """
        magnitude = digits.copy()
        if magnitude.size() == 0:
            magnitude.push_back(0)
        return cls._from_magnitude(magnitude, negative)

    @classmethod
    def from_string(cls, text: str) -> "InfiniteInt":
        """
        Строгий разбор десятичной записи: весь текст является одним целым.

        Допускаются пробельные символы по краям и ведущий '-'.

        Raises:
            ValueError: Если текст не является записью целого числа
        """
        body = text.strip()
        negative = body.startswith("-")
        if negative:
            body = body[1:]
        if not body or not all("0" <= ch <= "9" for ch in body):
            raise ValueError(f"Invalid literal for InfiniteInt: {text!r}")

        return cls._from_magnitude(DigitSequence(int(ch) for ch in body), negative)

    # -------------------------------------------------------------------------
    # Свойства и конверсия
    # -------------------------------------------------------------------------

    @property
    def is_negative(self) -> bool:
        """True если значение строго отрицательное."""
        return self._negative

    def set_negative(self, negative: bool) -> None:
        """
        Установка знака.

        Для нуля вызов ничего не меняет: отрицательного нуля не бывает.
        """
        if is_zero_magnitude(self._digits):
            return
        self._negative = bool(negative)

    def num_digits(self) -> int:
        """Количество десятичных цифр в magnitude."""
        return self._digits.size()

    def digits(self) -> DigitSequence:
        """Независимая копия magnitude (старший разряд первым)."""
        return self._digits.copy()

    def is_zero(self) -> bool:
        return is_zero_magnitude(self._digits)

    def to_int(self, bounds: MachineIntBounds = INT32) -> int:
        """
        Конверсия в машинное целое.

        Args:
            bounds: Границы машинного целого (default: INT32)

        Returns:
            Значение как int в пределах bounds

        Raises:
            InfiniteIntRangeError: Если значение вне [bounds.min_value, bounds.max_value]
        """
        if InfiniteInt(bounds.max_value) < self or self < InfiniteInt(bounds.min_value):
            logger.debug("InfiniteInt %s outside %d-bit range", self, bounds.bits)
            raise InfiniteIntRangeError(
                f"InfiniteInt outside range representable by {bounds.bits}-bit int: "
                f"[{bounds.min_value}, {bounds.max_value}]"
            )

        result = 0
        for digit in self._digits:
            result = result * BASE + digit

        return -result if self._negative else result

    def __int__(self) -> int:
        return self.to_int()

    def __bool__(self) -> bool:
        return not self.is_zero()

    # -------------------------------------------------------------------------
    # Копирование
    # -------------------------------------------------------------------------

    def copy(self) -> "InfiniteInt":
        """Глубокая копия."""
        result = InfiniteInt.__new__(InfiniteInt)
        result._digits = self._digits.copy()
        result._negative = self._negative
        return result

    def __copy__(self) -> "InfiniteInt":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "InfiniteInt":
        return self.copy()

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented

        if self.num_digits() != rhs.num_digits() or self._negative != rhs._negative:
            return False
        return all(a == b for a, b in zip(self._digits, rhs._digits))

    def __lt__(self, other: Operand) -> bool:
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented

        # Разные знаки: отрицательное меньше
        if self._negative != rhs._negative:
            return self._negative

        # Одинаковые знаки: сравнение модулей, инвертированное для отрицательных
        order = compare_magnitudes(self._digits, rhs._digits)
        if self._negative:
            return order > 0
        return order < 0

    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: Operand) -> "InfiniteInt":
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented

        if self._negative == rhs._negative:
            return InfiniteInt._from_magnitude(
                unsigned_add(self._digits, rhs._digits), self._negative
            )
        return self._subtract(rhs)

    def __radd__(self, other: int) -> "InfiniteInt":
        lhs = _coerce(other)
        if lhs is NotImplemented:
            return NotImplemented
        return lhs + self

    def __sub__(self, other: Operand) -> "InfiniteInt":
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented

        if self._negative != rhs._negative:
            return InfiniteInt._from_magnitude(
                unsigned_add(self._digits, rhs._digits), self._negative
            )
        return self._subtract(rhs)

    def __rsub__(self, other: int) -> "InfiniteInt":
        lhs = _coerce(other)
        if lhs is NotImplemented:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: Operand) -> "InfiniteInt":
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented

        if self.is_zero() or rhs.is_zero():
            return InfiniteInt()

        # Умножение столбиком: каждая цифра rhs (от младшей) на весь self
        total = DigitSequence()
        for shift, rhs_digit in enumerate(reversed(rhs._digits)):
            partial = multiply_by_digit(self._digits, rhs_digit, shift)
            total = unsigned_add(total, partial)

        return InfiniteInt._from_magnitude(total, self._negative != rhs._negative)

    def __rmul__(self, other: int) -> "InfiniteInt":
        lhs = _coerce(other)
        if lhs is NotImplemented:
            return NotImplemented
        return lhs * self

    def __neg__(self) -> "InfiniteInt":
        result = self.copy()
        result.set_negative(not self._negative)
        return result

    def __pos__(self) -> "InfiniteInt":
        return self.copy()

    def __abs__(self) -> "InfiniteInt":
        result = self.copy()
        result._negative = False
        return result

    def _subtract(self, rhs: "InfiniteInt") -> "InfiniteInt":
        """
        Путь вычитания для пар, где модули нужно вычесть.

        Меньший модуль вычитается из большего (при равенстве "большим"
        считается self). Результат отрицателен, если больший модуль у
        отрицательного self или у rhs при неотрицательном self.
        """
        lhs_abs = abs(self)
        rhs_abs = abs(rhs)

        rhs_is_larger = lhs_abs < rhs_abs
        if rhs_is_larger:
            larger, smaller = rhs_abs, lhs_abs
        else:
            larger, smaller = lhs_abs, rhs_abs

        negative = (self._negative and not rhs_is_larger) or (
            not self._negative and rhs_is_larger
        )
        # _from_magnitude возвращает канонический ноль при равных модулях
        return InfiniteInt._from_magnitude(
            unsigned_subtract(larger._digits, smaller._digits), negative
        )

    def _remove_leading_zeroes(self) -> None:
        strip_leading_zeroes(self._digits)

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        sign = "-" if self._negative else ""
        return sign + "".join(str(digit) for digit in self._digits)

    def __repr__(self) -> str:
        return f"InfiniteInt({self})"


def _coerce(value: object) -> "InfiniteInt":
    """InfiniteInt без изменений, int → InfiniteInt, иначе NotImplemented."""
    if isinstance(value, InfiniteInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return InfiniteInt(value)
    return NotImplemented
