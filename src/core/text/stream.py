"""
CharStream — посимвольный поток ввода с возвратом символов

Поток поверх str: peek/get/putback/ignore. Возвращённые символы
читаются раньше оставшегося текста (LIFO).
"""


class CharStream:
    """
    Поток символов для разбора текстовых представлений.

    Examples:
        >>> stream = CharStream("  -42abc")
        >>> stream.skip_whitespace()
        >>> stream.get()
        '-'
        >>> stream.putback("-")
        >>> stream.remaining()
        '-42abc'
    """

    def __init__(self, text: str):
        self._text = text
        self._pos = 0
        self._pushed_back: list[str] = []

    def peek(self) -> str:
        """Следующий символ без извлечения ('' в конце потока)."""
        if self._pushed_back:
            return self._pushed_back[-1]
        if self._pos < len(self._text):
            return self._text[self._pos]
        return ""

    def get(self) -> str:
        """Извлечение следующего символа ('' в конце потока)."""
        if self._pushed_back:
            return self._pushed_back.pop()
        if self._pos < len(self._text):
            ch = self._text[self._pos]
            self._pos += 1
            return ch
        return ""

    def putback(self, ch: str) -> None:
        """
        Возврат одного символа в поток.

        Raises:
            ValueError: Если ch не одиночный символ
        """
        if len(ch) != 1:
            raise ValueError(f"putback expects a single character, got {ch!r}")
        self._pushed_back.append(ch)

    def ignore(self, count: int = 1) -> None:
        """Пропуск count символов (или до конца потока)."""
        for _ in range(count):
            if not self.get():
                break

    def skip_whitespace(self) -> None:
        """Пропуск ведущих пробельных символов."""
        while self.peek() and self.peek().isspace():
            self.get()

    def at_end(self) -> bool:
        return self.peek() == ""

    def remaining(self) -> str:
        """Непрочитанный остаток без извлечения."""
        return "".join(reversed(self._pushed_back)) + self._text[self._pos :]
