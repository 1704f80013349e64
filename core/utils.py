"""
core/utils.py

Общие утилиты и константы для треугольной доски.
"""

from typing import List, Tuple

# Направления прыжка в координатах (row, col) треугольника:
# вверх/вниз по "левой" диагонали, влево/вправо по ряду,
# вверх/вниз по "правой" диагонали
DIRECTIONS: List[Tuple[int, int]] = [
    (-1, 0), (1, 0),
    (0, -1), (0, 1),
    (-1, -1), (1, 1),
]

# Символы для отображения
PEG = '●'       # Колышек
HOLE = '○'      # Пустое место

DEFAULT_ROWS = 5


def triangle_size(rows: int) -> int:
    """Число лунок в треугольнике из rows рядов."""
    return rows * (rows + 1) // 2


def coords_to_pos(row: int, col: int) -> int:
    """(row, col) → линейная позиция."""
    return row * (row + 1) // 2 + col


def pos_to_coords(pos: int) -> Tuple[int, int]:
    """Линейная позиция → (row, col)."""
    row = 0
    while coords_to_pos(row + 1, 0) <= pos:
        row += 1
    return row, pos - coords_to_pos(row, 0)


def is_valid_position(r: int, c: int, rows: int) -> bool:
    """Проверяет, находится ли (r, c) внутри треугольника."""
    return 0 <= r < rows and 0 <= c <= r


def index_to_name(pos: int) -> str:
    """Позиция → нотация вида 'C2' (ряд буквой, столбец с единицы)."""
    row, col = pos_to_coords(pos)
    return f"{chr(row + ord('A'))}{col + 1}"
