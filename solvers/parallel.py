"""
solvers/parallel.py

Параллельное заполнение уровня: несколько процессов.

Состояния одного уровня друг от друга не зависят, поэтому уровень
режется на куски. Следующий уровень начинается только после того,
как все куски текущего записаны в таблицу.
"""

import time
from typing import List, Optional, Sequence, Tuple
from concurrent.futures import ProcessPoolExecutor
import multiprocessing

from .base import BaseSolver, SolverStats, ProgressCallback
from .dp import classify_state
from .memo import MemoTable, Outcome
from core.topology import BoardTopology, TRIANGLE

ChunkResult = Tuple[List[Tuple[int, int]], int]


def _classify_chunk(args: Tuple[int, bytes, Sequence[int]]) -> ChunkResult:
    """Классифицирует кусок уровня (для запуска в отдельном процессе)."""
    rows, snapshot, states = args
    topology = TRIANGLE if rows == TRIANGLE.rows else BoardTopology(rows)

    results = []
    tried_total = 0
    for state in states:
        outcome, tried = classify_state(snapshot.__getitem__, topology, state)
        results.append((state, int(outcome)))
        tried_total += tried
    return results, tried_total


def _chunked(states: List[int], chunk_size: int) -> List[List[int]]:
    return [states[i:i + chunk_size] for i in range(0, len(states), chunk_size)]


class ParallelDPSolver(BaseSolver):
    """
    Параллельный DP решатель.

    Распределяет состояния уровня между процессами. Снимок таблицы
    передаётся в каждый кусок целиком (2^15 байт).
    """

    def __init__(self, topology: BoardTopology = TRIANGLE, num_workers: Optional[int] = None,
                 chunk_size: int = 512, progress: Optional[ProgressCallback] = None,
                 verbose: bool = False):
        super().__init__(topology, progress, verbose)
        self.num_workers = num_workers or multiprocessing.cpu_count()
        self.chunk_size = chunk_size

    def solve(self) -> MemoTable:
        self.stats = SolverStats()
        start = time.perf_counter()

        memo = MemoTable.with_base_cases(self.topology.num_positions)
        self._log(f"Starting parallel DP (workers={self.num_workers}, chunk={self.chunk_size})")

        with ProcessPoolExecutor(max_workers=self.num_workers) as executor:
            for size in self._tiers():
                self._start_tier(size)
                tier_start = time.perf_counter()

                snapshot = memo.snapshot()
                tasks = [
                    (self.topology.rows, snapshot, chunk)
                    for chunk in _chunked(list(self.tier_states(size)), self.chunk_size)
                ]
                # map() отдаёт результаты по порядку; исключение воркера
                # всплывает здесь же и прерывает решение
                for results, tried in executor.map(_classify_chunk, tasks):
                    self.stats.jumps_tried += tried
                    for state, outcome in results:
                        memo.set(state, Outcome(outcome))
                        self.stats.states_classified += 1
                        if outcome == Outcome.WIN:
                            self.stats.wins += 1

                self.monitor.record_time(f"tier_{size}", time.perf_counter() - tier_start)

        memo.freeze()
        self.stats.time_elapsed = time.perf_counter() - start
        self.monitor.increment_counter('jumps_tried', self.stats.jumps_tried)
        self._log(f"Done: {self.stats}")
        return memo
