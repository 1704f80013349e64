"""
solvers/dp.py

Динамическое программирование по всем состояниям доски.

Уровни заполняются по возрастанию числа колышков: каждый прыжок
снимает ровно один колышек, поэтому исход состояния зависит только
от состояний предыдущего уровня.
"""

import time
from typing import Callable, List, Optional, Tuple

from .base import BaseSolver, SolverStats, ProgressCallback
from .memo import MemoTable, Outcome
from analysis.symmetry import SymmetryTable
from core.bitboard import decode
from core.moves import try_jump
from core.topology import BoardTopology, TRIANGLE
from utils.error_handling import InvariantViolation

Lookup = Callable[[int], int]


def classify_state(lookup: Lookup, topology: BoardTopology, state: int) -> Tuple[Outcome, int]:
    """
    Классифицирует одно состояние по уже заполненному нижнему уровню.

    Args:
        lookup: код исхода по состоянию (MemoTable.raw или bytes.__getitem__)
        topology: таблица прыжков
        state: состояние

    Returns:
        (исход, число проверенных прыжков)

    Raises:
        InvariantViolation: результат прыжка ещё не классифицирован
    """
    tried = 0
    for from_pos in decode(state):
        for over, to in topology.jumps_from(from_pos):
            tried += 1
            after = try_jump(state, from_pos, over, to)
            if after is None:
                continue
            outcome = lookup(after)
            if outcome == Outcome.UNKNOWN:
                raise InvariantViolation(state, after)
            if outcome == Outcome.WIN:
                return Outcome.WIN, tried
    return Outcome.LOSE, tried


class DPSolver(BaseSolver):
    """
    Последовательный DP решатель.

    Особенности:
    - Полный перебор всех 2^N состояний, по уровням
    - Ранний выход на первом выигрышном прыжке
    - Опционально классифицирует только канонические формы
      (use_symmetry) и копирует исход на остальную орбиту
    """

    def __init__(self, topology: BoardTopology = TRIANGLE, use_symmetry: bool = False,
                 progress: Optional[ProgressCallback] = None, verbose: bool = False):
        super().__init__(topology, progress, verbose)
        self.use_symmetry = use_symmetry
        self.symmetries = SymmetryTable(topology.rows) if use_symmetry else None

    def solve(self) -> MemoTable:
        """Заполняет таблицу целиком."""
        self.stats = SolverStats()
        start = time.perf_counter()

        memo = MemoTable.with_base_cases(self.topology.num_positions)
        self._log(f"Starting DP ({self.topology}, symmetry={self.use_symmetry})")

        for size in self._tiers():
            self._start_tier(size)
            tier_start = time.perf_counter()
            self._fill_tier(memo, size)
            self.monitor.record_time(f"tier_{size}", time.perf_counter() - tier_start)

        memo.freeze()
        self.stats.time_elapsed = time.perf_counter() - start
        self.monitor.increment_counter('jumps_tried', self.stats.jumps_tried)
        self._log(f"Done: {self.stats}")
        return memo

    def _fill_tier(self, memo: MemoTable, size: int) -> None:
        deferred: List[Tuple[int, int]] = []

        for state in self.tier_states(size):
            if self.symmetries is not None:
                canonical = self.symmetries.canonical(state)
                if canonical != state:
                    deferred.append((state, canonical))
                    continue
            self._store(memo, state, self.classify(memo, state))

        # Канонические формы того же уровня уже записаны
        for state, canonical in deferred:
            self.stats.states_skipped += 1
            self._store(memo, state, memo.get(canonical))

    def _store(self, memo: MemoTable, state: int, outcome: Outcome) -> None:
        memo.set(state, outcome)
        self.stats.states_classified += 1
        if outcome == Outcome.WIN:
            self.stats.wins += 1

    def classify(self, memo: MemoTable, state: int) -> Outcome:
        outcome, tried = classify_state(memo.raw, self.topology, state)
        self.stats.jumps_tried += tried
        return outcome
