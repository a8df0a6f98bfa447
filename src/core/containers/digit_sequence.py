"""
DigitSequence — двусвязная двусторонняя очередь десятичных цифр

Хранилище цифр для InfiniteInt. Порядок: front это старший разряд,
back это младший разряд (единицы).

Модуль обеспечивает:
- push/pop с обоих концов за O(1)
- доступ к front/back
- двунаправленный итератор с sentinel-позицией end()
- глубокое копирование (узлы никогда не разделяются между очередями)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый элемент является цифрой в диапазоне [0, 9]
2. size() всегда равен числу узлов в цепочке
3. Копия полностью независима от оригинала
4. Итератор привязан ровно к одной очереди
"""

from typing import Final, Iterable, Iterator, Optional

MIN_DIGIT: Final[int] = 0
MAX_DIGIT: Final[int] = 9


# =============================================================================
# EXCEPTIONS
# =============================================================================


class EmptyContainerError(IndexError):
    """front/back/pop на пустой очереди."""

    pass


class InvalidPositionError(IndexError):
    """Разыменование или сдвиг итератора, стоящего на end()."""

    pass


def validate_digit(digit: int) -> int:
    """
    Проверка, что значение является десятичной цифрой.

    Args:
        digit: Проверяемое значение

    Returns:
        digit без изменений

    Raises:
        ValueError: Если digit не int или вне [0, 9]
    """
    if isinstance(digit, bool) or not isinstance(digit, int):
        raise ValueError(f"Digit must be int, got {type(digit).__name__}")
    if digit < MIN_DIGIT or digit > MAX_DIGIT:
        raise ValueError(f"Digit {digit} outside [{MIN_DIGIT}, {MAX_DIGIT}]")
    return digit


# =============================================================================
# NODE
# =============================================================================


class _Node:
    """Узел двусвязной цепочки."""

    __slots__ = ("data", "prev", "next")

    def __init__(self, data: int):
        self.data = data
        self.prev: Optional["_Node"] = None
        self.next: Optional["_Node"] = None


# =============================================================================
# DIGIT SEQUENCE
# =============================================================================


class DigitSequence:
    """
    Двусторонняя очередь цифр на двусвязном списке.

    Пустая очередь допустима как промежуточное состояние; InfiniteInt
    гарантирует, что его magnitude всегда содержит хотя бы одну цифру.

    Examples:
        >>> seq = DigitSequence([1, 2])
        >>> seq.push_front(0)
        >>> str(seq)
        '0 1 2 '
        >>> seq.back()
        2
    """

    def __init__(self, digits: Iterable[int] = ()):
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

        for digit in digits:
            self.push_back(digit)

    # -------------------------------------------------------------------------
    # Вставка
    # -------------------------------------------------------------------------

    def push_front(self, digit: int) -> None:
        """Вставка цифры в начало (старший разряд)."""
        node = _Node(validate_digit(digit))
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def push_back(self, digit: int) -> None:
        """Вставка цифры в конец (младший разряд)."""
        node = _Node(validate_digit(digit))
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    # -------------------------------------------------------------------------
    # Доступ и удаление
    # -------------------------------------------------------------------------

    def front(self) -> int:
        """
        Первая цифра очереди.

        Raises:
            EmptyContainerError: Если очередь пуста
        """
        if self._head is None:
            raise EmptyContainerError("front() called on empty DigitSequence")
        return self._head.data

    def back(self) -> int:
        """
        Последняя цифра очереди.

        Raises:
            EmptyContainerError: Если очередь пуста
        """
        if self._tail is None:
            raise EmptyContainerError("back() called on empty DigitSequence")
        return self._tail.data

    def pop_front(self) -> None:
        """
        Удаление первой цифры.

        Raises:
            EmptyContainerError: Если очередь пуста
        """
        if self._head is None:
            raise EmptyContainerError("pop_front() called on empty DigitSequence")

        removed = self._head
        self._head = removed.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        removed.next = None
        self._size -= 1

    def pop_back(self) -> None:
        """
        Удаление последней цифры.

        Raises:
            EmptyContainerError: Если очередь пуста
        """
        if self._tail is None:
            raise EmptyContainerError("pop_back() called on empty DigitSequence")

        removed = self._tail
        self._tail = removed.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        removed.prev = None
        self._size -= 1

    def size(self) -> int:
        """Количество цифр в очереди, O(1)."""
        return self._size

    def clear(self) -> None:
        """Удаление всех цифр с разрывом связей между узлами."""
        current = self._head
        while current is not None:
            following = current.next
            current.prev = current.next = None
            current = following
        self._head = self._tail = None
        self._size = 0

    # -------------------------------------------------------------------------
    # Копирование
    # -------------------------------------------------------------------------

    def copy(self) -> "DigitSequence":
        """Глубокая копия: новые узлы с теми же цифрами в том же порядке."""
        return DigitSequence(self)

    def assign(self, other: "DigitSequence") -> "DigitSequence":
        """
        Копирующее присваивание.

        Содержимое заменяется глубокой копией other. Если other та же самая
        очередь, ничего не меняется.

        Returns:
            self
        """
        if other is self:
            return self

        digits = list(other)
        self.clear()
        for digit in digits:
            self.push_back(digit)
        return self

    def __copy__(self) -> "DigitSequence":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "DigitSequence":
        return self.copy()

    # -------------------------------------------------------------------------
    # Итерация
    # -------------------------------------------------------------------------

    def begin(self) -> "DigitSequenceIterator":
        """Итератор на первую цифру (равен end() для пустой очереди)."""
        return DigitSequenceIterator(self, self._head)

    def last(self) -> "DigitSequenceIterator":
        """Итератор на последнюю цифру (равен end() для пустой очереди)."""
        return DigitSequenceIterator(self, self._tail)

    def end(self) -> "DigitSequenceIterator":
        """Sentinel-итератор: не ссылается ни на одну цифру."""
        return DigitSequenceIterator(self, None)

    def __iter__(self) -> Iterator[int]:
        current = self._head
        while current is not None:
            yield current.data
            current = current.next

    def __reversed__(self) -> Iterator[int]:
        current = self._tail
        while current is not None:
            yield current.data
            current = current.prev

    def __len__(self) -> int:
        return self._size

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        # Каждая цифра сопровождается одним пробелом, включая последнюю
        return "".join(f"{digit} " for digit in self)

    def __repr__(self) -> str:
        return f"DigitSequence({list(self)!r})"


# =============================================================================
# ITERATOR
# =============================================================================


class DigitSequenceIterator:
    """
    Двунаправленный итератор по DigitSequence.

    Позиция: узел очереди либо sentinel (None). Сдвиг за последний элемент
    (или перед первым) переводит итератор в sentinel. Любая мутация очереди
    не через этот итератор делает его недействительным.
    """

    __slots__ = ("_container", "_node")

    def __init__(self, container: DigitSequence, node: Optional[_Node]):
        self._container = container
        self._node = node

    @property
    def container(self) -> DigitSequence:
        """Очередь, к которой привязан итератор."""
        return self._container

    def at_end(self) -> bool:
        """True если итератор стоит на sentinel-позиции."""
        return self._node is None

    def _require_position(self, operation: str) -> _Node:
        if self._node is None:
            raise InvalidPositionError(f"{operation} on DigitSequence end() iterator")
        return self._node

    def advance(self) -> "DigitSequenceIterator":
        """
        Сдвиг к следующей цифре (к младшим разрядам).

        Returns:
            self

        Raises:
            InvalidPositionError: Если итератор стоит на end()
        """
        self._node = self._require_position("advance()").next
        return self

    def retreat(self) -> "DigitSequenceIterator":
        """
        Сдвиг к предыдущей цифре (к старшим разрядам).

        Returns:
            self

        Raises:
            InvalidPositionError: Если итератор стоит на end()
        """
        self._node = self._require_position("retreat()").prev
        return self

    @property
    def value(self) -> int:
        """
        Цифра в текущей позиции.

        Raises:
            InvalidPositionError: Если итератор стоит на end()
        """
        return self._require_position("dereference").data

    @value.setter
    def value(self, digit: int) -> None:
        node = self._require_position("assignment")
        node.data = validate_digit(digit)

    def copy(self) -> "DigitSequenceIterator":
        """Независимый итератор на ту же позицию."""
        return DigitSequenceIterator(self._container, self._node)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitSequenceIterator):
            return NotImplemented
        return self._container is other._container and self._node is other._node

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        position = "end" if self._node is None else str(self._node.data)
        return f"DigitSequenceIterator(position={position})"
