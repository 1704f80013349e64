"""
peg_io/report.py

Сводка по заполненной таблице: сколько выигрышных состояний
на каждое число колышков.
"""

from itertools import combinations
from typing import Dict, List

from core.bitboard import encode
from core.topology import BoardTopology, TRIANGLE
from solvers.memo import MemoTable
from utils.monitoring import monitor_time


@monitor_time('count_wins')
def count_wins(memo: MemoTable, topology: BoardTopology = TRIANGLE) -> Dict[int, int]:
    """
    Считает выигрышные состояния по числу колышков.

    Args:
        memo: заполненная таблица
        topology: доска

    Returns:
        {число колышков: количество выигрышных состояний}, от 1 до N
    """
    n = topology.num_positions
    counts = {}
    for size in range(1, n + 1):
        counts[size] = sum(
            1 for combo in combinations(range(n), size)
            if memo.is_win(encode(combo, n))
        )
    return counts


def format_report(counts: Dict[int, int]) -> List[str]:
    """Строки вида 'n: count' по возрастанию n."""
    return [f"{size}: {counts[size]}" for size in sorted(counts)]


def print_report(memo: MemoTable, topology: BoardTopology = TRIANGLE) -> Dict[int, int]:
    """Печатает сводку в stdout и возвращает её."""
    counts = count_wins(memo, topology)
    for line in format_report(counts):
        print(line)
    return counts
