"""
core/bitboard.py

Кодирование состояния доски битовой маской.
Бит i установлен ⇔ в позиции i стоит колышек; для 15 лунок: 15 бит.
"""

from typing import Iterable, Tuple

from .utils import triangle_size, DEFAULT_ROWS
from utils.error_handling import InvalidBoardError

NUM_POSITIONS = triangle_size(DEFAULT_ROWS)
STATE_COUNT = 1 << NUM_POSITIONS


def bit(position: int) -> int:
    """Маска одной позиции: 2 ** position."""
    return 1 << position


def encode(positions: Iterable[int], num_positions: int = NUM_POSITIONS) -> int:
    """
    Множество занятых позиций → состояние.

    Повторы не меняют результат.

    Raises:
        InvalidBoardError: позиция вне [0, num_positions)
    """
    state = 0
    for pos in positions:
        if not 0 <= pos < num_positions:
            raise InvalidBoardError(f"Позиция {pos} вне доски (0..{num_positions - 1})")
        state |= 1 << pos
    return state


def decode(state: int) -> Tuple[int, ...]:
    """Состояние → отсортированный кортеж занятых позиций."""
    positions = []
    pos = 0
    while state:
        if state & 1:
            positions.append(pos)
        state >>= 1
        pos += 1
    return tuple(positions)


def occupied(state: int, position: int) -> bool:
    return bool(state & (1 << position))


def with_move(state: int, from_pos: int, over: int, to: int) -> int:
    """Снимает колышки с from_pos и over, ставит на to. Легальность не проверяет."""
    return (state & ~((1 << from_pos) | (1 << over))) | (1 << to)


def popcount(state: int) -> int:
    """Количество колышков."""
    return bin(state).count('1')
