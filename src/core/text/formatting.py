"""
Text I/O — текстовое представление InfiniteInt и DigitSequence

Вывод:
- InfiniteInt: необязательный '-' и цифры без ведущих нулей ("0" для нуля)
- DigitSequence: цифры от front к back, после каждой один пробел

Ввод (read_infinite_int):
1. Пропуск ведущих пробелов
2. Необязательный '-' (забирается условно)
3. Пропуск ведущих нулей
4. Чтение подряд идущих цифр; первый не-цифровой символ остаётся в потоке
5. Нет цифр → канонический ноль; если за '-' не было ни одной цифры,
   '-' возвращается в поток
"""

from typing import Protocol

from src.core.containers.digit_sequence import DigitSequence
from src.core.math.infinite_int import InfiniteInt
from src.core.text.stream import CharStream
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

DECIMAL_DIGITS = "0123456789"


class SupportsWrite(Protocol):
    def write(self, text: str) -> object: ...


# =============================================================================
# ВЫВОД
# =============================================================================


def format_infinite_int(value: InfiniteInt) -> str:
    """Десятичная запись InfiniteInt."""
    return str(value)


def format_digit_sequence(digits: DigitSequence) -> str:
    """Цифры через пробел, пробел после каждой: "1 2 3 "."""
    return str(digits)


def write_infinite_int(out: SupportsWrite, value: InfiniteInt) -> SupportsWrite:
    """
    Запись InfiniteInt в поток вывода.

    Returns:
        out (для цепочек вызовов)
    """
    out.write(format_infinite_int(value))
    return out


def write_digit_sequence(out: SupportsWrite, digits: DigitSequence) -> SupportsWrite:
    """
    Запись DigitSequence в поток вывода.

    Returns:
        out (для цепочек вызовов)
    """
    out.write(format_digit_sequence(digits))
    return out


# =============================================================================
# ВВОД
# =============================================================================


def read_infinite_int(stream: CharStream) -> InfiniteInt:
    """
    Чтение InfiniteInt из потока символов.

    Ошибок разбора не бывает: при отсутствии цифр результат равен нулю,
    а поток остаётся на первом непрочитанном символе.

    Args:
        stream: Поток символов (позиция сдвигается за прочитанное число)

    Returns:
        Прочитанное значение

    Examples:
        >>> stream = CharStream("-042abc")
        >>> read_infinite_int(stream)
        InfiniteInt(-42)
        >>> stream.remaining()
        'abc'
    """
    stream.skip_whitespace()

    negative = False
    if stream.peek() == "-":
        negative = True
        stream.ignore(1)

    zeroes_skipped = 0
    while stream.peek() == "0":
        stream.ignore(1)
        zeroes_skipped += 1

    digits = DigitSequence()
    while True:
        ch = stream.get()
        if not ch:
            break
        if ch not in DECIMAL_DIGITS:
            stream.putback(ch)
            break
        digits.push_back(DECIMAL_DIGITS.index(ch))

    if digits.size() == 0:
        if negative and zeroes_skipped == 0:
            logger.debug("No digits after '-', returning sign to the stream")
            stream.putback("-")
        return InfiniteInt()

    return InfiniteInt.from_digits(digits, negative)


def parse_infinite_int(text: str) -> tuple[InfiniteInt, str]:
    """
    Чтение InfiniteInt из начала строки.

    Returns:
        (значение, непрочитанный остаток строки)
    """
    stream = CharStream(text)
    value = read_infinite_int(stream)
    return value, stream.remaining()
