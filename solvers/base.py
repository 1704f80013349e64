"""
solvers/base.py

Базовый класс для всех решателей.
"""

from abc import ABC, abstractmethod
from itertools import combinations
from typing import Callable, Iterator, Optional
from dataclasses import dataclass

from core.bitboard import encode
from core.topology import BoardTopology, TRIANGLE
from utils.logging import get_logger
from utils.monitoring import get_monitor
from .memo import MemoTable

ProgressCallback = Callable[[int], None]


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    states_classified: int = 0
    jumps_tried: int = 0
    wins: int = 0
    states_skipped: int = 0
    time_elapsed: float = 0.0

    def __str__(self) -> str:
        return (
            f"States: {self.states_classified}, "
            f"Wins: {self.wins}, "
            f"Jumps: {self.jumps_tried}, "
            f"Skipped: {self.states_skipped}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Все решатели заполняют таблицу исходов по уровням (числу колышков)
    снизу вверх и возвращают её замороженной.
    """

    def __init__(self, topology: BoardTopology = TRIANGLE,
                 progress: Optional[ProgressCallback] = None,
                 verbose: bool = False):
        self.topology = topology
        self.progress = progress
        self.verbose = verbose
        self.stats = SolverStats()
        self.logger = get_logger()
        self.monitor = get_monitor()

    @abstractmethod
    def solve(self) -> MemoTable:
        """
        Классифицирует все состояния доски.

        Returns:
            Замороженная таблица исходов
        """
        pass

    def tier_states(self, size: int) -> Iterator[int]:
        """Все состояния ровно с size колышками."""
        n = self.topology.num_positions
        for combo in combinations(range(n), size):
            yield encode(combo, n)

    def _tiers(self) -> range:
        """Уровни, требующие перебора: базовые 0 и 1 заполнены заранее."""
        return range(2, self.topology.num_positions + 1)

    def _start_tier(self, size: int) -> None:
        if self.progress is not None:
            self.progress(size)
        self._log(f"Tier {size}")

    def _log(self, message: str) -> None:
        """Пишет в лог, если verbose=True."""
        if self.verbose:
            self.logger.debug(f"[{self.__class__.__name__}] {message}")
