"""
Тесты для DigitSequence

Проверяет:
1. push/pop/front/back с обоих концов
2. Ошибки на пустой очереди
3. Глубокое копирование и присваивание
4. Двунаправленный итератор и sentinel end()
5. Формат печати
"""

import copy

import pytest

from src.core.containers import (
    DigitSequence,
    DigitSequenceIterator,
    EmptyContainerError,
    InvalidPositionError,
    validate_digit,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def seq_123() -> DigitSequence:
    """Очередь 1 2 3"""
    return DigitSequence([1, 2, 3])


# =============================================================================
# ТЕСТЫ КОНСТРУКТОРА И ВСТАВКИ
# =============================================================================


class TestConstruction:
    """Тесты для создания очереди"""

    def test_default_is_empty(self) -> None:
        """Новая очередь пуста"""
        seq = DigitSequence()
        assert seq.size() == 0
        assert len(seq) == 0
        assert str(seq) == ""

    def test_from_iterable(self, seq_123: DigitSequence) -> None:
        """Цифры сохраняются в порядке итерации"""
        assert list(seq_123) == [1, 2, 3]
        assert seq_123.size() == 3

    def test_invalid_digit_rejected(self) -> None:
        """Значения вне [0, 9] не принимаются"""
        with pytest.raises(ValueError, match="outside"):
            DigitSequence([1, 10])
        with pytest.raises(ValueError, match="outside"):
            DigitSequence().push_front(-1)
        with pytest.raises(ValueError, match="must be int"):
            DigitSequence().push_back(True)


class TestPush:
    """Тесты для push_front/push_back"""

    def test_push_front_empty(self) -> None:
        seq = DigitSequence()
        seq.push_front(1)
        assert seq.size() == 1
        assert str(seq) == "1 "

    def test_push_front_non_empty(self) -> None:
        seq = DigitSequence()
        seq.push_front(1)
        seq.push_front(2)
        assert seq.size() == 2
        assert str(seq) == "2 1 "

    def test_push_back_non_empty(self) -> None:
        seq = DigitSequence()
        seq.push_back(1)
        seq.push_back(2)
        assert str(seq) == "1 2 "

    def test_mixed_pushes(self) -> None:
        """push с обоих концов собирают единую цепочку"""
        seq = DigitSequence()
        seq.push_back(5)
        seq.push_front(4)
        seq.push_back(6)
        seq.push_front(3)
        assert list(seq) == [3, 4, 5, 6]
        assert list(reversed(seq)) == [6, 5, 4, 3]


# =============================================================================
# ТЕСТЫ ДОСТУПА И УДАЛЕНИЯ
# =============================================================================


class TestAccess:
    """Тесты для front/back"""

    def test_front_and_back(self, seq_123: DigitSequence) -> None:
        assert seq_123.front() == 1
        assert seq_123.back() == 3

    def test_single_item_front_equals_back(self) -> None:
        seq = DigitSequence([7])
        assert seq.front() == seq.back() == 7

    def test_front_on_empty_raises(self) -> None:
        """front() пустой очереди → EmptyContainerError"""
        with pytest.raises(EmptyContainerError):
            DigitSequence().front()

    def test_back_on_empty_raises(self) -> None:
        with pytest.raises(EmptyContainerError):
            DigitSequence().back()

    def test_empty_container_is_index_error(self) -> None:
        """EmptyContainerError ловится как IndexError"""
        with pytest.raises(IndexError):
            DigitSequence().front()


class TestPop:
    """Тесты для pop_front/pop_back"""

    def test_pop_front(self, seq_123: DigitSequence) -> None:
        assert seq_123.pop_front() is None
        assert list(seq_123) == [2, 3]
        assert seq_123.front() == 2

    def test_pop_back(self, seq_123: DigitSequence) -> None:
        seq_123.pop_back()
        assert list(seq_123) == [1, 2]
        assert seq_123.back() == 2

    def test_pop_to_empty_and_reuse(self) -> None:
        """После опустошения очередь снова работает"""
        seq = DigitSequence([4])
        seq.pop_back()
        assert seq.size() == 0
        with pytest.raises(EmptyContainerError):
            seq.back()

        seq.push_back(8)
        assert seq.front() == 8
        assert seq.back() == 8

    def test_pop_on_empty_raises(self) -> None:
        with pytest.raises(EmptyContainerError):
            DigitSequence().pop_front()
        with pytest.raises(EmptyContainerError):
            DigitSequence().pop_back()

    def test_failed_pop_leaves_size(self) -> None:
        seq = DigitSequence()
        with pytest.raises(EmptyContainerError):
            seq.pop_front()
        assert seq.size() == 0

    def test_clear(self, seq_123: DigitSequence) -> None:
        seq_123.clear()
        assert seq_123.size() == 0
        assert str(seq_123) == ""
        assert seq_123.begin() == seq_123.end()


# =============================================================================
# ТЕСТЫ КОПИРОВАНИЯ
# =============================================================================


class TestCopy:
    """Тесты глубокого копирования"""

    def test_copy_is_independent(self, seq_123: DigitSequence) -> None:
        clone = seq_123.copy()
        clone.push_back(4)
        clone.pop_front()

        assert list(seq_123) == [1, 2, 3]
        assert list(clone) == [2, 3, 4]

    def test_copy_module_support(self, seq_123: DigitSequence) -> None:
        for clone in (copy.copy(seq_123), copy.deepcopy(seq_123)):
            assert clone is not seq_123
            assert list(clone) == [1, 2, 3]
            clone.push_front(9)
            assert seq_123.front() == 1

    def test_copy_iterator_value_write_does_not_leak(self, seq_123: DigitSequence) -> None:
        clone = seq_123.copy()
        clone.begin().value = 9
        assert seq_123.front() == 1

    def test_assign_replaces_contents(self, seq_123: DigitSequence) -> None:
        target = DigitSequence([9, 9])
        assert target.assign(seq_123) is target
        assert list(target) == [1, 2, 3]

        target.push_back(0)
        assert list(seq_123) == [1, 2, 3]

    def test_assign_self_is_noop(self, seq_123: DigitSequence) -> None:
        seq_123.assign(seq_123)
        assert list(seq_123) == [1, 2, 3]


# =============================================================================
# ТЕСТЫ ИТЕРАТОРА
# =============================================================================


class TestIterator:
    """Тесты для DigitSequenceIterator"""

    def test_forward_traversal(self, seq_123: DigitSequence) -> None:
        values = []
        it = seq_123.begin()
        while it != seq_123.end():
            values.append(it.value)
            it.advance()
        assert values == [1, 2, 3]

    def test_backward_traversal(self, seq_123: DigitSequence) -> None:
        values = []
        it = seq_123.last()
        while it != seq_123.end():
            values.append(it.value)
            it.retreat()
        assert values == [3, 2, 1]

    def test_empty_begin_and_last_equal_end(self) -> None:
        seq = DigitSequence()
        assert seq.begin() == seq.end()
        assert seq.last() == seq.end()

    def test_advance_returns_self(self, seq_123: DigitSequence) -> None:
        it = seq_123.begin()
        assert it.advance() is it
        assert it.value == 2
        assert it.retreat() is it
        assert it.value == 1

    def test_dereference_end_raises(self, seq_123: DigitSequence) -> None:
        """Разыменование end() → InvalidPositionError"""
        with pytest.raises(InvalidPositionError):
            seq_123.end().value

    def test_advance_and_retreat_from_end_raise(self, seq_123: DigitSequence) -> None:
        with pytest.raises(InvalidPositionError):
            seq_123.end().advance()
        with pytest.raises(InvalidPositionError):
            seq_123.end().retreat()

    def test_retreat_past_first_reaches_end(self, seq_123: DigitSequence) -> None:
        it = seq_123.begin().retreat()
        assert it.at_end()
        assert it == seq_123.end()

    def test_value_assignment(self, seq_123: DigitSequence) -> None:
        it = seq_123.last()
        it.value = 7
        assert list(seq_123) == [1, 2, 7]

        with pytest.raises(ValueError):
            it.value = 12
        with pytest.raises(InvalidPositionError):
            seq_123.end().value = 1

    def test_equality_requires_same_container(self, seq_123: DigitSequence) -> None:
        """Итераторы разных очередей не равны, даже на end()"""
        other = seq_123.copy()
        assert seq_123.end() != other.end()
        assert seq_123.begin() != other.begin()
        assert seq_123.end() == seq_123.end()
        assert seq_123.begin() == seq_123.begin()

    def test_equality_requires_same_position(self, seq_123: DigitSequence) -> None:
        assert seq_123.begin() != seq_123.last()
        assert seq_123.begin().advance().advance() == seq_123.last()

    def test_copy_iterator_is_independent(self, seq_123: DigitSequence) -> None:
        it = seq_123.begin()
        saved = it.copy()
        it.advance()
        assert saved.value == 1
        assert it.value == 2
        assert saved.container is seq_123

    def test_not_equal_to_other_types(self, seq_123: DigitSequence) -> None:
        assert seq_123.begin() != 1
        assert isinstance(seq_123.begin(), DigitSequenceIterator)


# =============================================================================
# ТЕСТЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================


class TestRepresentation:
    """Тесты печати"""

    def test_str_trailing_space_after_each_digit(self, seq_123: DigitSequence) -> None:
        assert str(seq_123) == "1 2 3 "

    def test_repr(self, seq_123: DigitSequence) -> None:
        assert repr(seq_123) == "DigitSequence([1, 2, 3])"

    def test_validate_digit_bounds(self) -> None:
        assert validate_digit(0) == 0
        assert validate_digit(9) == 9
        with pytest.raises(ValueError):
            validate_digit(10)
