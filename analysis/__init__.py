"""
analysis - Симметрии доски

Экспортирует:
- Таблицы поворотов и отражения
- Каноническую форму состояния
"""

from .symmetry import (
    SymmetryTable, rotation_120, rotation_240, reflection,
    symmetry_group, transform_state
)

__all__ = [
    'SymmetryTable',
    'rotation_120',
    'rotation_240',
    'reflection',
    'symmetry_group',
    'transform_state',
]
