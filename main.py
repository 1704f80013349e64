#!/usr/bin/env python3
"""
main.py

Точка входа: классифицирует все состояния треугольной доски
и печатает сводку выигрышных состояний по числу колышков.

Использование:
    python main.py                        # последовательный DP, 15 лунок
    python main.py --solver parallel      # уровни делятся между процессами
    python main.py --solver numba         # скомпилированное ядро (extras "fast")
    python main.py --symmetry --stats     # только канонические формы + тайминги
"""

import sys
import argparse
from typing import Dict, List, Optional

from core.topology import BoardTopology, MAX_ROWS
from core.utils import DEFAULT_ROWS
from peg_io import print_report, render_state
from solvers import DPSolver, ParallelDPSolver
from utils.error_handling import (
    SolverError, InvariantViolation, PreconditionViolation, fatal_errors
)
from utils.logging import get_logger, setup_file_logging
from utils.monitoring import get_monitor


SOLVERS = {
    'dp': DPSolver,
    'parallel': ParallelDPSolver,
}
SOLVER_NAMES = ['dp', 'parallel', 'numba']


def _print_progress(size: int) -> None:
    print(f"size {size}", flush=True)


def _solver_class(name: str):
    if name == 'numba':
        from solvers.numba_dp import NumbaDPSolver
        return NumbaDPSolver
    return SOLVERS[name]


def describe_error(error: SolverError, topology: BoardTopology) -> Optional[str]:
    """Отрисовка досок, фигурирующих в ошибке."""
    if isinstance(error, InvariantViolation):
        return (
            f"Состояние:\n{render_state(error.state, topology)}\n"
            f"Потомок:\n{render_state(error.target, topology)}"
        )
    if isinstance(error, PreconditionViolation):
        return f"Состояние:\n{render_state(error.state, topology)}"
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Triangular Peg Solitaire: win/lose for every board state',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py                        # 15 лунок, последовательно
  python main.py --solver parallel -w 4 # 4 процесса
  python main.py --rows 4               # треугольник на 10 лунок
        """
    )
    parser.add_argument(
        '--solver', '-s', choices=SOLVER_NAMES, default='dp',
        help='Выбор решателя (default: dp)'
    )
    parser.add_argument(
        '--workers', '-w', type=int, default=None,
        help='Число процессов для parallel (default: cpu_count)'
    )
    parser.add_argument(
        '--symmetry', action='store_true',
        help='Классифицировать только канонические формы (только для dp)'
    )
    parser.add_argument(
        '--rows', type=int, default=DEFAULT_ROWS,
        help=f'Число рядов треугольника, 1..{MAX_ROWS} (default: {DEFAULT_ROWS})'
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Отладочный лог')
    parser.add_argument('--log-file', help='Дублировать лог в файл')
    parser.add_argument('--stats', action='store_true', help='Показать тайминги уровней')
    return parser


def run(args: argparse.Namespace, topology: BoardTopology) -> Dict[int, int]:
    """Строит решатель, заполняет таблицу и печатает сводку."""
    solver_class = _solver_class(args.solver)
    kwargs = {'progress': _print_progress, 'verbose': args.verbose}
    if args.solver == 'parallel':
        kwargs['num_workers'] = args.workers
    if args.symmetry:
        kwargs['use_symmetry'] = True

    solver = solver_class(topology, **kwargs)
    memo = solver.solve()
    get_logger().info(f"{solver.__class__.__name__}: {solver.stats}")
    return print_report(memo, topology)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.symmetry and args.solver != 'dp':
        parser.error("--symmetry поддерживается только решателем dp")
    if args.solver == 'numba':
        try:
            _solver_class('numba')
        except ImportError as e:
            parser.error(f"решателю numba нужны numba и numpy (pip install -e .[fast]): {e}")

    logger = get_logger(level='DEBUG' if args.verbose else None)
    if args.log_file:
        setup_file_logging(args.log_file)

    try:
        topology = BoardTopology(args.rows)
    except SolverError as e:
        parser.error(str(e))

    @fatal_errors(describe=lambda e: describe_error(e, topology))
    def _solve():
        return run(args, topology)

    _solve()

    if args.stats:
        get_monitor().print_stats()
    logger.debug("Finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
