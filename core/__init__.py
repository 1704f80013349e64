"""
core - Ядро треугольного Peg Solitaire

Топология доски, битовое кодирование состояний и проверка прыжков.
"""

from .topology import BoardTopology, TRIANGLE, build_jump_table
from .bitboard import (
    NUM_POSITIONS, STATE_COUNT,
    bit, encode, decode, occupied, with_move, popcount
)
from .moves import try_jump
from .utils import (
    DIRECTIONS, PEG, HOLE, DEFAULT_ROWS,
    coords_to_pos, pos_to_coords, triangle_size, index_to_name
)

__all__ = [
    'BoardTopology', 'TRIANGLE', 'build_jump_table',
    'NUM_POSITIONS', 'STATE_COUNT',
    'bit', 'encode', 'decode', 'occupied', 'with_move', 'popcount',
    'try_jump',
    'DIRECTIONS', 'PEG', 'HOLE', 'DEFAULT_ROWS',
    'coords_to_pos', 'pos_to_coords', 'triangle_size', 'index_to_name',
]
