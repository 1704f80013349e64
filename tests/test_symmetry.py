"""
tests/test_symmetry.py

Тесты симметрий треугольной доски.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from analysis.symmetry import (
    SymmetryTable, rotation_120, rotation_240, reflection,
    compose, symmetry_group, transform_state
)
from core.bitboard import encode, popcount
from core.topology import TRIANGLE


# Исторические таблицы поворотов для 15 лунок
ROTATION_MAPS = [
    (10, 11, 6, 12, 7, 3, 13, 8, 4, 1, 14, 9, 5, 2, 0),
    (14, 9, 13, 5, 8, 12, 2, 4, 7, 11, 0, 1, 3, 6, 10),
]


def test_rotations_match_historical_tables():
    assert rotation_120() == ROTATION_MAPS[0]
    assert rotation_240() == ROTATION_MAPS[1]


def test_rotation_order_three():
    identity = tuple(range(15))
    rot = rotation_120()
    assert compose(rot, rot) == rotation_240()
    assert compose(compose(rot, rot), rot) == identity
    assert compose(reflection(), reflection()) == identity


@pytest.mark.parametrize("rows", [1, 2, 3, 4, 5, 6])
def test_group_has_six_permutations(rows):
    group = symmetry_group(rows)
    assert len(group) == 6
    size = rows * (rows + 1) // 2
    for mapping in group:
        assert sorted(mapping) == list(range(size))
    if rows >= 2:
        assert len(set(group)) == 6


def test_symmetries_preserve_jumps():
    """Образ любого прыжка: тоже прыжок."""
    moves = set(TRIANGLE.all_jumps())
    for mapping in symmetry_group():
        for from_pos, over, landing in moves:
            assert (mapping[from_pos], mapping[over], mapping[landing]) in moves


def test_transform_state_preserves_peg_count():
    state = encode([0, 4, 8, 13])
    for mapping in symmetry_group():
        assert popcount(transform_state(state, mapping)) == 4


def test_corner_images():
    """Угол 0 переходит в углы 10 и 14."""
    table = SymmetryTable()
    images = set(table.all_symmetries(encode([0])))
    assert images == {encode([0]), encode([10]), encode([14])}
    assert table.canonical(encode([14])) == encode([0])


def test_center_orbit():
    """Позиция 4 лежит на оси отражения: орбита из трёх."""
    table = SymmetryTable()
    assert table.count_symmetries(encode([4])) == 3
    assert table.count_symmetries(encode([0, 1, 3])) <= 6


def test_canonical_is_minimal_and_stable():
    table = SymmetryTable()
    state = encode([2, 5, 9, 11])
    canonical = table.canonical(state)
    assert canonical == min(table.all_symmetries(state))
    assert table.canonical(canonical) == canonical
