"""
tests/test_moves.py

Тесты проверки прыжка try_jump.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pickle

import pytest

from core.bitboard import encode, occupied, popcount, STATE_COUNT
from core.moves import try_jump
from core.topology import TRIANGLE
from utils.error_handling import PreconditionViolation, SolverError


def test_jump_success():
    """{0, 1} и прыжок 0 → 1 → 3 оставляют только {3}."""
    result = try_jump(encode([0, 1]), 0, 1, 3)
    assert result == encode([3])


def test_jump_over_empty_returns_none():
    """{0}: over=1 пуста: ход неприменим, но это не нарушение контракта."""
    assert try_jump(encode([0]), 0, 1, 3) is None


def test_jump_into_occupied_returns_none():
    assert try_jump(encode([0, 1, 3]), 0, 1, 3) is None


@pytest.mark.parametrize("over_occupied", [False, True])
@pytest.mark.parametrize("to_occupied", [False, True])
def test_empty_start_always_raises(over_occupied, to_occupied):
    """Пустая стартовая позиция: всегда PreconditionViolation."""
    positions = [5]
    if over_occupied:
        positions.append(1)
    if to_occupied:
        positions.append(3)
    state = encode(positions)

    with pytest.raises(PreconditionViolation) as exc_info:
        try_jump(state, 0, 1, 3)

    error = exc_info.value
    assert isinstance(error, SolverError)
    assert (error.from_pos, error.over, error.to) == (0, 1, 3)
    assert error.state == state
    assert "0" in str(error)


def test_precondition_violation_survives_pickle():
    error = PreconditionViolation(7, 0, 1, 3)
    restored = pickle.loads(pickle.dumps(error))
    assert (restored.state, restored.from_pos, restored.over, restored.to) == (7, 0, 1, 3)


def test_success_changes_only_three_bits():
    """from и over очищены, to установлен, остальные биты не тронуты."""
    state = encode([0, 1, 6, 9, 13])
    result = try_jump(state, 0, 1, 3)
    assert result is not None
    assert not occupied(result, 0)
    assert not occupied(result, 1)
    assert occupied(result, 3)
    mask = (1 << 0) | (1 << 1) | (1 << 3)
    assert result & ~mask == state & ~mask


def test_every_jump_removes_exactly_one_peg():
    """Любой применимый прыжок уменьшает число колышков ровно на 1."""
    applied = 0
    for state in range(STATE_COUNT):
        pegs = popcount(state)
        for from_pos, over, to in TRIANGLE.all_jumps():
            if not occupied(state, from_pos):
                continue
            result = try_jump(state, from_pos, over, to)
            if result is None:
                assert not occupied(state, over) or occupied(state, to)
                continue
            applied += 1
            assert popcount(result) == pegs - 1
    assert applied > 0
