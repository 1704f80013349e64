"""
solvers - Решатели треугольного Peg Solitaire

Экспортирует:
- DPSolver: последовательное DP по уровням (эталон)
- ParallelDPSolver: уровни режутся на куски между процессами
- MemoTable, Outcome: таблица исходов

NumbaDPSolver живёт в solvers.numba_dp и импортируется явно:
ему нужны numba и numpy (extras "fast").
"""

from .base import BaseSolver, SolverStats
from .memo import MemoTable, Outcome
from .dp import DPSolver, classify_state
from .parallel import ParallelDPSolver

__all__ = [
    'BaseSolver',
    'SolverStats',
    'MemoTable',
    'Outcome',
    'DPSolver',
    'classify_state',
    'ParallelDPSolver',
]
