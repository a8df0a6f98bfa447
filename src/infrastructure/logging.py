"""
Logging — единая настройка логирования

Модули ядра получают логгер через get_logger(__name__) и никогда не
настраивают handlers при импорте. Настройка выполняется один раз на стороне
приложения или тестов через setup_logging().
"""

import logging
import sys
from typing import Final, Optional

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", format_string: Optional[str] = None) -> None:
    """
    Настройка логирования для приложения.

    Args:
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR)
        format_string: Формат записи (по умолчанию DEFAULT_LOG_FORMAT)

    Raises:
        ValueError: Если уровень логирования неизвестен
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown logging level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format=format_string or DEFAULT_LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """Логгер модуля (обычно name=__name__)."""
    return logging.getLogger(name)
