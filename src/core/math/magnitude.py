"""
Magnitude — беззнаковая арифметика над последовательностями цифр

Функции работают только с абсолютными значениями (magnitude), знак
разрешается уровнем выше, в InfiniteInt.

Все проходы идут от младшего разряда (back) к старшему (front), результат
собирается через push_front, поэтому порядок цифр в результате всегда
"старший разряд первым".

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входные последовательности не изменяются
2. Результат является новой независимой DigitSequence
3. unsigned_add не порождает ведущих нулей
4. unsigned_subtract удаляет ведущие нули (кроме единственного нуля)
"""

from typing import Final

from src.core.containers.digit_sequence import DigitSequence, validate_digit

BASE: Final[int] = 10


# =============================================================================
# НОРМАЛИЗАЦИЯ И СРАВНЕНИЕ
# =============================================================================


def strip_leading_zeroes(digits: DigitSequence) -> None:
    """
    Удаление ведущих нулей на месте.

    Цифра единиц не удаляется никогда: "000" → "0".
    """
    while digits.size() > 1 and digits.front() == 0:
        digits.pop_front()


def is_zero_magnitude(digits: DigitSequence) -> bool:
    """True если последовательность состоит ровно из одной цифры 0."""
    return digits.size() == 1 and digits.front() == 0


def compare_magnitudes(lhs: DigitSequence, rhs: DigitSequence) -> int:
    """
    Сравнение абсолютных значений без ведущих нулей.

    Меньше цифр → меньше значение; при равной длине решает первая
    различающаяся цифра, начиная со старшей.

    Returns:
        -1 если lhs < rhs, 0 если равны, 1 если lhs > rhs
    """
    if lhs.size() != rhs.size():
        return -1 if lhs.size() < rhs.size() else 1

    for lhs_digit, rhs_digit in zip(lhs, rhs):
        if lhs_digit != rhs_digit:
            return -1 if lhs_digit < rhs_digit else 1
    return 0


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def unsigned_add(lhs: DigitSequence, rhs: DigitSequence) -> DigitSequence:
    """
    Сумма абсолютных значений.

    Алгоритм:
        sum = digit(lhs) + digit(rhs) + carry
        цифра результата = sum mod 10, carry = sum div 10
    После исчерпания одного операнда carry протягивается через оставшиеся
    цифры другого; финальный carry становится старшей цифрой.

    Examples:
        >>> str(unsigned_add(DigitSequence([9, 9]), DigitSequence([1])))
        '1 0 0 '
    """
    result = DigitSequence()
    carry = 0
    lhs_cur = lhs.last()
    rhs_cur = rhs.last()

    while not lhs_cur.at_end() and not rhs_cur.at_end():
        partial_sum = lhs_cur.value + rhs_cur.value + carry
        carry, digit = divmod(partial_sum, BASE)
        result.push_front(digit)
        lhs_cur.retreat()
        rhs_cur.retreat()

    # Один из операндов исчерпан: протягиваем carry через остаток другого
    rest = rhs_cur if lhs_cur.at_end() else lhs_cur
    while not rest.at_end():
        partial_sum = rest.value + carry
        carry, digit = divmod(partial_sum, BASE)
        result.push_front(digit)
        rest.retreat()

    if carry > 0:
        result.push_front(carry)

    return result


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def unsigned_subtract(larger: DigitSequence, smaller: DigitSequence) -> DigitSequence:
    """
    Разность абсолютных значений: |larger| - |smaller|.

    Предусловие: |larger| >= |smaller| (проверяется вызывающей стороной).

    Алгоритм:
        diff = digit(larger) - digit(smaller) - borrow
        если diff < 0: diff += 10, borrow = 1, иначе borrow = 0
    После исчерпания smaller borrow протягивается через остаток larger.
    Ведущие нули результата удаляются.

    Raises:
        ValueError: Если после старшего разряда остался borrow (нарушено предусловие)

    Examples:
        >>> str(unsigned_subtract(DigitSequence([1, 0, 0]), DigitSequence([1])))
        '9 9 '
    """
    result = DigitSequence()
    borrow = 0
    larger_cur = larger.last()
    smaller_cur = smaller.last()

    while not larger_cur.at_end() and not smaller_cur.at_end():
        partial_diff = larger_cur.value - smaller_cur.value - borrow
        if partial_diff < 0:
            partial_diff += BASE
            borrow = 1
        else:
            borrow = 0
        result.push_front(partial_diff)
        larger_cur.retreat()
        smaller_cur.retreat()

    if not smaller_cur.at_end():
        raise ValueError("unsigned_subtract: minuend has fewer digits than subtrahend")

    while not larger_cur.at_end():
        partial_diff = larger_cur.value - borrow
        if partial_diff < 0:
            partial_diff += BASE
            borrow = 1
        else:
            borrow = 0
        result.push_front(partial_diff)
        larger_cur.retreat()

    if borrow:
        raise ValueError("unsigned_subtract: minuend magnitude is smaller than subtrahend")

    strip_leading_zeroes(result)
    return result


# =============================================================================
# УМНОЖЕНИЕ НА ЦИФРУ
# =============================================================================


def multiply_by_digit(digits: DigitSequence, digit: int, shift: int = 0) -> DigitSequence:
    """
    Частичное произведение столбиком: digits * digit * 10^shift.

    Каждая цифра digits (от младшей к старшей) умножается на digit с
    переносом; затем справа дописываются shift нулей.

    Args:
        digits: Многозначный множитель
        digit: Однозначный множитель [0, 9]
        shift: Позиция digit во втором множителе (0 для единиц)

    Raises:
        ValueError: Если digit не цифра или shift < 0
    """
    validate_digit(digit)
    if shift < 0:
        raise ValueError(f"shift must be non-negative, got {shift}")

    result = DigitSequence()
    carry = 0
    for current in reversed(digits):
        carry, product_digit = divmod(current * digit + carry, BASE)
        result.push_front(product_digit)

    if carry > 0:
        result.push_front(carry)

    for _ in range(shift):
        result.push_back(0)

    return result
