"""
core/moves.py

Проверка и применение одного прыжка.
"""

from typing import Optional

from .bitboard import occupied, with_move
from utils.error_handling import PreconditionViolation


def try_jump(state: int, from_pos: int, over: int, to: int) -> Optional[int]:
    """
    Пробует прыжок from_pos → over → to.

    Args:
        state: текущее состояние
        from_pos: стартовая позиция (обязана быть занята)
        over: перепрыгиваемая позиция
        to: целевая позиция

    Returns:
        Новое состояние или None, если прыжок неприменим
        (over пуста или to занята)

    Raises:
        PreconditionViolation: from_pos пуста: ошибка вызывающего кода
    """
    if not occupied(state, from_pos):
        raise PreconditionViolation(state, from_pos, over, to)

    if not occupied(state, over):
        return None

    if occupied(state, to):
        return None

    return with_move(state, from_pos, over, to)
