"""
peg_io/visualizer.py

Текстовая отрисовка треугольной доски.
"""

from typing import List

from core.bitboard import occupied
from core.topology import BoardTopology, TRIANGLE
from core.utils import PEG, HOLE, coords_to_pos


def render_state(state: int, topology: BoardTopology = TRIANGLE) -> str:
    """
    Рисует состояние треугольником:

        ●
       ● ○
      ○ ○ ○
    """
    rows = topology.rows
    lines: List[str] = []
    for r in range(rows):
        cells = [PEG if occupied(state, coords_to_pos(r, c)) else HOLE for c in range(r + 1)]
        lines.append(" " * (rows - 1 - r) + " ".join(cells))
    return "\n".join(lines)
