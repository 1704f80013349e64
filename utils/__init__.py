"""
utils - Логирование, ошибки, мониторинг
"""

from .logging import get_logger, setup_file_logging
from .error_handling import (
    SolverError, InvalidBoardError, MemoFrozenError,
    PreconditionViolation, InvariantViolation, fatal_errors
)
from .monitoring import get_monitor, monitor_time

__all__ = [
    'get_logger', 'setup_file_logging',
    'SolverError', 'InvalidBoardError', 'MemoFrozenError',
    'PreconditionViolation', 'InvariantViolation', 'fatal_errors',
    'get_monitor', 'monitor_time',
]
