"""
solvers/numba_dp.py

Numba-версия заполнения уровня.
Та же классификация, что в DPSolver, но горячий цикл скомпилирован.

Требует extras "fast": pip install -e .[fast]
"""

import time
from typing import Optional

import numpy as np
from numba import njit

from .base import BaseSolver, SolverStats, ProgressCallback
from .memo import MemoTable
from core.topology import BoardTopology, TRIANGLE
from utils.error_handling import InvariantViolation

_UNKNOWN = 0
_LOSE = 1
_WIN = 2


@njit(cache=True)
def fill_tier_numba(states, memo, jump_from, jump_over, jump_to):
    """
    Заполняет memo для всех states (один уровень).

    Args:
        states: int64 массив состояний уровня
        memo: uint8 таблица исходов (меняется на месте)
        jump_from, jump_over, jump_to: int64 массивы всех прыжков

    Returns:
        (индекс состояния с неклассифицированным потомком или -1,
         состояние-потомок, число проверенных прыжков)
    """
    tried = 0
    for i in range(states.shape[0]):
        state = states[i]
        result = _LOSE
        for j in range(jump_from.shape[0]):
            if ((state >> jump_from[j]) & 1) == 0:
                continue
            tried += 1
            if ((state >> jump_over[j]) & 1) == 0:
                continue
            if ((state >> jump_to[j]) & 1) == 1:
                continue
            after = state & ~((1 << jump_from[j]) | (1 << jump_over[j]))
            after = after | (1 << jump_to[j])
            outcome = memo[after]
            if outcome == _UNKNOWN:
                return i, after, tried
            if outcome == _WIN:
                result = _WIN
                break
        memo[state] = result
    return -1, 0, tried


def jump_arrays(topology: BoardTopology):
    """Таблица прыжков в виде трёх параллельных int64 массивов."""
    moves = list(topology.all_jumps())
    jump_from = np.array([m[0] for m in moves], dtype=np.int64)
    jump_over = np.array([m[1] for m in moves], dtype=np.int64)
    jump_to = np.array([m[2] for m in moves], dtype=np.int64)
    return jump_from, jump_over, jump_to


class NumbaDPSolver(BaseSolver):
    """
    DP решатель с numba-ядром.

    Состояния уровня перечисляются в Python, а классификация идёт в
    скомпилированном цикле над numpy массивами.
    """

    def __init__(self, topology: BoardTopology = TRIANGLE,
                 progress: Optional[ProgressCallback] = None, verbose: bool = False):
        super().__init__(topology, progress, verbose)
        self.jump_from, self.jump_over, self.jump_to = jump_arrays(topology)

    def solve(self) -> MemoTable:
        self.stats = SolverStats()
        start = time.perf_counter()
        n = self.topology.num_positions

        memo = np.zeros(1 << n, dtype=np.uint8)
        memo[0] = _WIN
        for pos in range(n):
            memo[1 << pos] = _WIN

        self._log(f"Starting numba DP ({self.topology})")

        for size in self._tiers():
            self._start_tier(size)
            tier_start = time.perf_counter()

            states = np.fromiter(self.tier_states(size), dtype=np.int64)
            failed, target, tried = fill_tier_numba(
                states, memo, self.jump_from, self.jump_over, self.jump_to
            )
            if failed >= 0:
                raise InvariantViolation(int(states[failed]), int(target))

            self.stats.jumps_tried += int(tried)
            self.stats.states_classified += states.shape[0]
            self.stats.wins += int(np.count_nonzero(memo[states] == _WIN))
            self.monitor.record_time(f"tier_{size}", time.perf_counter() - tier_start)

        table = MemoTable.from_bytes(n, memo.tobytes())
        table.freeze()
        self.stats.time_elapsed = time.perf_counter() - start
        self.monitor.increment_counter('jumps_tried', self.stats.jumps_tried)
        self._log(f"Done: {self.stats}")
        return table
