"""
utils/logging.py

Централизованное логирование решателя.
"""

import logging
import os
import sys
from typing import Optional, Union

DEFAULT_LOGGER_NAME = "peg_triangle"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Уровень по умолчанию можно переопределить через окружение
LOG_LEVEL_ENV = "PEG_SOLVER_LOG_LEVEL"


def level_from_env(default: int = logging.INFO) -> int:
    """Читает уровень логирования из PEG_SOLVER_LOG_LEVEL."""
    value = os.environ.get(LOG_LEVEL_ENV)
    if not value:
        return default
    return parse_level(value)


def parse_level(level: Union[int, str]) -> int:
    """'debug' / 'INFO' / 10 → числовой уровень logging."""
    if isinstance(level, int):
        return level
    numeric = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Неизвестный уровень логирования: {level}")
    return numeric


class SolverLogger:
    """Логгер для решателей."""

    def __init__(self, name: str = DEFAULT_LOGGER_NAME, level: int = logging.INFO):
        """
        Инициализирует логгер.

        Args:
            name: имя логгера
            level: уровень логирования
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Избегаем дублирования handlers
        if not self.logger.handlers:
            # stderr, чтобы не смешивать диагностику с отчётом на stdout
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            self.logger.addHandler(console_handler)

    def set_level(self, level: Union[int, str]):
        """Меняет уровень логгера и всех его handlers."""
        numeric = parse_level(level)
        self.logger.setLevel(numeric)
        for handler in self.logger.handlers:
            handler.setLevel(numeric)

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        self.logger.error(message, exc_info=exc_info)

    def critical(self, message: str, exc_info: bool = False):
        """Логирует критическую ошибку."""
        self.logger.critical(message, exc_info=exc_info)


# Глобальный логгер
_default_logger: Optional[SolverLogger] = None


def get_logger(name: str = DEFAULT_LOGGER_NAME,
               level: Optional[Union[int, str]] = None) -> SolverLogger:
    """
    Возвращает глобальный логгер или создаёт новый.

    Args:
        name: имя логгера
        level: уровень логирования (None берёт PEG_SOLVER_LOG_LEVEL, иначе INFO)

    Returns:
        SolverLogger
    """
    global _default_logger
    if _default_logger is None:
        _default_logger = SolverLogger(
            name, parse_level(level) if level is not None else level_from_env()
        )
    elif level is not None:
        _default_logger.set_level(level)
    return _default_logger


def setup_file_logging(log_file: str = "peg_triangle.log", level: int = logging.DEBUG):
    """
    Настраивает логирование в файл.

    Args:
        log_file: путь к файлу лога
        level: уровень логирования
    """
    logger = get_logger()

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger.logger.addHandler(file_handler)
    return file_handler
