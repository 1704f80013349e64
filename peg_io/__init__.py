"""
peg_io - Вывод для треугольного Peg Solitaire

Экспортирует:
- Сводку выигрышных состояний по числу колышков
- Отрисовку доски
"""

from .report import count_wins, format_report, print_report
from .visualizer import render_state

__all__ = [
    'count_wins',
    'format_report',
    'print_report',
    'render_state',
]
