"""
tests/test_dp_solver.py

Тесты DP решателя и таблицы исходов.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pickle

import pytest

from analysis.symmetry import SymmetryTable
from core.bitboard import encode, popcount, STATE_COUNT
from core.topology import BoardTopology, TRIANGLE
from peg_io.report import count_wins
from solvers import DPSolver, MemoTable, Outcome, classify_state
from utils.error_handling import InvariantViolation, MemoFrozenError


@pytest.fixture(scope="module")
def solved():
    """Одна полная классификация на весь модуль."""
    solver = DPSolver()
    memo = solver.solve()
    return solver, memo


def test_every_state_is_classified(solved):
    _, memo = solved
    assert len(memo) == STATE_COUNT
    for state in range(STATE_COUNT):
        assert memo.get(state) in (Outcome.WIN, Outcome.LOSE)


def test_base_cases_are_wins(solved):
    """Ноль или один колышек: уже победа."""
    _, memo = solved
    assert memo.is_win(0)
    for pos in range(15):
        assert memo.get(1 << pos) == Outcome.WIN


def test_full_board_is_lose(solved):
    """С полной доски прыгать некуда."""
    _, memo = solved
    assert memo.get(TRIANGLE.full_mask) == Outcome.LOSE


def test_simple_positions(solved):
    _, memo = solved
    assert memo.is_win(encode([0, 1]))        # 0 → 1 → 3
    assert not memo.is_win(encode([1, 2]))    # ряд из двух, прыгать некуда
    assert not memo.is_win(encode([0, 14]))   # колышки не соседи


def test_known_counts(solved):
    """
    Регрессия по сводке:
    - 1 колышек: все 15;
    - 2 колышка: 30 соседних пар минус 3 пары на линиях длины 2;
    - 14 колышков: решается с любой начальной дырки;
    - 15 колышков: ходов нет.
    """
    _, memo = solved
    counts = count_wins(memo)
    assert counts[1] == 15
    assert counts[2] == 27
    assert counts[14] == 15
    assert counts[15] == 0


def test_classification_matches_definition(solved):
    """WIN ⇔ есть прыжок в WIN-состояние (для двух и более колышков)."""
    _, memo = solved
    moves = list(TRIANGLE.all_jumps())
    for state in range(STATE_COUNT):
        if popcount(state) < 2:
            continue
        has_winning_jump = False
        for from_pos, over, to in moves:
            if state >> from_pos & 1 and state >> over & 1 and not state >> to & 1:
                after = state & ~(1 << from_pos) & ~(1 << over) | (1 << to)
                if memo.is_win(after):
                    has_winning_jump = True
                    break
        assert memo.is_win(state) == has_winning_jump


def test_classification_is_symmetric(solved):
    _, memo = solved
    table = SymmetryTable()
    for state in range(0, STATE_COUNT, 7):
        outcomes = {memo.get(image) for image in table.all_symmetries(state)}
        assert len(outcomes) == 1


def test_stats(solved):
    solver, _ = solved
    # все состояния кроме пустого и 15 одиночных
    assert solver.stats.states_classified == STATE_COUNT - 16
    assert solver.stats.jumps_tried > 0
    assert solver.stats.states_skipped == 0
    assert solver.stats.time_elapsed > 0


def test_memo_is_frozen(solved):
    _, memo = solved
    assert memo.frozen
    with pytest.raises(MemoFrozenError):
        memo.set(3, Outcome.LOSE)


def test_deterministic():
    """Повторный прогон даёт ту же таблицу и ту же сводку."""
    first = DPSolver().solve()
    second = DPSolver().solve()
    assert first == second
    assert count_wins(first) == count_wins(second)


def test_symmetry_reduction_gives_same_table(solved):
    _, memo = solved
    solver = DPSolver(use_symmetry=True)
    reduced = solver.solve()
    assert reduced == memo
    assert solver.stats.states_skipped > 0
    assert solver.stats.states_classified == STATE_COUNT - 16


def test_progress_reports_every_tier():
    seen = []
    DPSolver(BoardTopology(4), progress=seen.append).solve()
    assert seen == list(range(2, 11))


def test_small_triangle_counts():
    topology = BoardTopology(3)
    counts = count_wins(DPSolver(topology).solve(), topology)
    assert counts[1] == 6
    assert counts[2] == 6
    assert counts[6] == 0


def test_tiny_triangles():
    assert count_wins(DPSolver(BoardTopology(1)).solve(), BoardTopology(1)) == {1: 1}
    topology = BoardTopology(2)
    assert count_wins(DPSolver(topology).solve(), topology) == {1: 3, 2: 0, 3: 0}


def test_classify_state_detects_missing_lower_tier():
    """Неклассифицированный потомок: InvariantViolation с обоими состояниями."""
    state = encode([0, 1])
    with pytest.raises(InvariantViolation) as exc_info:
        classify_state(lambda s: Outcome.UNKNOWN, TRIANGLE, state)
    assert exc_info.value.state == state
    assert exc_info.value.target == encode([3])


def test_skipped_tier_is_fatal():
    """Если пропустить уровень 2, уровень 3 ссылается на пустоту."""

    class SkippingSolver(DPSolver):
        def _tiers(self):
            return range(3, self.topology.num_positions + 1)

    with pytest.raises(InvariantViolation):
        SkippingSolver().solve()


def test_invariant_violation_survives_pickle():
    error = InvariantViolation(11, 8)
    restored = pickle.loads(pickle.dumps(error))
    assert (restored.state, restored.target) == (11, 8)
    assert str(restored) == str(error)


def test_memo_table_base_cases():
    memo = MemoTable.with_base_cases(4)
    assert len(memo) == 16
    assert [memo.get(s) for s in (0, 1, 2, 4, 8)] == [Outcome.WIN] * 5
    assert memo.get(3) == Outcome.UNKNOWN
    assert not memo.is_known(15)


def test_memo_table_from_bytes():
    data = bytes([Outcome.WIN, Outcome.LOSE, Outcome.WIN, Outcome.UNKNOWN])
    memo = MemoTable.from_bytes(2, data)
    assert memo.snapshot() == data
    with pytest.raises(ValueError):
        MemoTable.from_bytes(3, data)
