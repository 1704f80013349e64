"""
core/topology.py

Таблица прыжков треугольной доски.

     0
    1 2
   3 4 5
  6 7 8 9
 10 11 12 13 14

Таблица строится по координатам, а не переписывается руками:
асимметрия в ручной таблице молча портит классификацию.
"""

from typing import Iterator, Tuple

from .utils import DIRECTIONS, DEFAULT_ROWS, coords_to_pos, is_valid_position, triangle_size
from utils.error_handling import InvalidBoardError

Jump = Tuple[int, int]            # (over, landing)
Move = Tuple[int, int, int]       # (from, over, landing)

# Памяти на таблицу 2^N хватает с запасом до 7 рядов (28 лунок)
MAX_ROWS = 7


def build_jump_table(rows: int = DEFAULT_ROWS) -> Tuple[Tuple[Jump, ...], ...]:
    """
    Генерирует для каждой позиции список прыжков (over, landing).

    Прыжок допустим, если и промежуточная, и целевая клетки
    лежат внутри треугольника.
    """
    table = []
    for r in range(rows):
        for c in range(r + 1):
            jumps = []
            for dr, dc in DIRECTIONS:
                mr, mc = r + dr, c + dc
                tr, tc = r + 2 * dr, c + 2 * dc
                if is_valid_position(mr, mc, rows) and is_valid_position(tr, tc, rows):
                    jumps.append((coords_to_pos(mr, mc), coords_to_pos(tr, tc)))
            table.append(tuple(jumps))
    return tuple(table)


class BoardTopology:
    """Неизменяемая топология треугольной доски."""
    __slots__ = ('rows', 'num_positions', 'jumps')

    def __init__(self, rows: int = DEFAULT_ROWS):
        if not 1 <= rows <= MAX_ROWS:
            raise InvalidBoardError(f"Число рядов должно быть от 1 до {MAX_ROWS}, получено {rows}")
        self.rows = rows
        self.num_positions = triangle_size(rows)
        self.jumps = build_jump_table(rows)
        self.check_reciprocity()

    @property
    def full_mask(self) -> int:
        return (1 << self.num_positions) - 1

    def jumps_from(self, position: int) -> Tuple[Jump, ...]:
        """Прыжки (over, landing), начинающиеся в position."""
        return self.jumps[position]

    def all_jumps(self) -> Iterator[Move]:
        """Все направленные прыжки (from, over, landing)."""
        for from_pos, jumps in enumerate(self.jumps):
            for over, landing in jumps:
                yield from_pos, over, landing

    def jump_count(self) -> int:
        return sum(len(jumps) for jumps in self.jumps)

    def check_reciprocity(self) -> None:
        """
        Проверяет обратимость: A → B → C влечёт C → B → A.

        Raises:
            InvalidBoardError: если таблица несимметрична
        """
        moves = set(self.all_jumps())
        for from_pos, over, landing in moves:
            if (landing, over, from_pos) not in moves:
                raise InvalidBoardError(
                    f"Нет обратного прыжка для {from_pos} → {over} → {landing}"
                )

    def __repr__(self) -> str:
        return f"BoardTopology(rows={self.rows}, jumps={self.jump_count()})"


# Стандартная доска на 15 лунок
TRIANGLE = BoardTopology(DEFAULT_ROWS)
