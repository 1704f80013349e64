"""
analysis/symmetry.py

Симметрии треугольной доски: 2 поворота + отражение (группа из 6 элементов).

Отображение хранится списком: mapping[i]: куда переходит позиция i.
"""

from typing import List, Tuple

from core.utils import DEFAULT_ROWS, coords_to_pos, triangle_size

Mapping = Tuple[int, ...]


def _mapping(rows: int, transform) -> Mapping:
    result = []
    for r in range(rows):
        for c in range(r + 1):
            result.append(coords_to_pos(*transform(r, c)))
    return tuple(result)


def rotation_120(rows: int = DEFAULT_ROWS) -> Mapping:
    """Поворот: верхний угол → левый нижний."""
    return _mapping(rows, lambda r, c: (rows - 1 - c, r - c))


def rotation_240(rows: int = DEFAULT_ROWS) -> Mapping:
    """Обратный поворот: верхний угол → правый нижний."""
    return _mapping(rows, lambda r, c: (rows - 1 - r + c, rows - 1 - r))


def reflection(rows: int = DEFAULT_ROWS) -> Mapping:
    """Отражение относительно вертикальной оси."""
    return _mapping(rows, lambda r, c: (r, r - c))


def compose(first: Mapping, second: Mapping) -> Mapping:
    """Сначала first, затем second."""
    return tuple(second[p] for p in first)


def symmetry_group(rows: int = DEFAULT_ROWS) -> List[Mapping]:
    """Все 6 симметрий, тождественная первой."""
    identity = tuple(range(triangle_size(rows)))
    rotations = [identity, rotation_120(rows), rotation_240(rows)]
    flip = reflection(rows)
    return rotations + [compose(rot, flip) for rot in rotations]


def transform_state(state: int, mapping: Mapping) -> int:
    """Применяет отображение позиций к битовой маске."""
    result = 0
    for pos, image in enumerate(mapping):
        if state & (1 << pos):
            result |= 1 << image
    return result


class SymmetryTable:
    """Предвычисленная группа симметрий для заданного числа рядов."""
    __slots__ = ('rows', 'mappings')

    def __init__(self, rows: int = DEFAULT_ROWS):
        self.rows = rows
        self.mappings = symmetry_group(rows)

    def all_symmetries(self, state: int) -> List[int]:
        return [transform_state(state, m) for m in self.mappings]

    def canonical(self, state: int) -> int:
        """
        Каноническая форма (минимальная из 6 симметрий).
        Используется для сокращения перебора.
        """
        return min(self.all_symmetries(state))

    def count_symmetries(self, state: int) -> int:
        """Размер орбиты; у симметричной позиции меньше 6."""
        return len(set(self.all_symmetries(state)))
