"""
utils/error_handling.py

Исключения решателя и обработка фатальных ошибок.

Все ошибки здесь означают нарушение контракта, а не штатную ситуацию.
"Прыжок неприменим" моделируется через None, а не исключением.
"""

import sys
from typing import Callable, Optional
from functools import wraps

from .logging import get_logger


class SolverError(Exception):
    """Базовое исключение для решателей."""
    pass


class InvalidBoardError(SolverError):
    """Ошибка невалидной доски или позиции."""
    pass


class MemoFrozenError(SolverError):
    """Запись в уже заполненную таблицу результатов."""
    pass


class PreconditionViolation(SolverError):
    """
    Прыжок запрошен с пустой стартовой позиции.

    Это ошибка вызывающего кода: решатель берёт стартовые позиции
    только из занятых клеток состояния.
    """

    def __init__(self, state: int, from_pos: int, over: int, to: int):
        # pickle восстанавливает исключение через cls(*args)
        super().__init__(state, from_pos, over, to)
        self.state = state
        self.from_pos = from_pos
        self.over = over
        self.to = to

    def __str__(self) -> str:
        return (
            f"Недопустимый ход: позиция {self.from_pos} пуста "
            f"(прыжок {self.from_pos} → {self.over} → {self.to}, состояние {self.state:#06x})"
        )


class InvariantViolation(SolverError):
    """
    Состояние меньшего размера ещё не классифицировано.

    Означает, что нарушен порядок заполнения по числу колышков.
    """

    def __init__(self, state: int, target: int):
        super().__init__(state, target)
        self.state = state
        self.target = target

    def __str__(self) -> str:
        return (
            f"Нижний уровень не заполнен: состояние {self.state} "
            f"ссылается на неклассифицированное {self.target}"
        )


def fatal_errors(exit_code: int = 1, describe: Optional[Callable[[SolverError], str]] = None):
    """
    Декоратор для точки входа: SolverError → CRITICAL в лог и выход с ошибкой.

    Args:
        exit_code: код завершения процесса
        describe: дополнительное описание ошибки (например, отрисовка доски)
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except SolverError as e:
                logger = get_logger()
                logger.critical(f"{e.__class__.__name__}: {e}")
                if describe is not None:
                    details = describe(e)
                    if details:
                        logger.critical(details)
                sys.exit(exit_code)
        return wrapper
    return decorator
