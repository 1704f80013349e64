"""
solvers/memo.py

Таблица результатов: состояние → {UNKNOWN, LOSE, WIN}.
"""

from enum import IntEnum

from utils.error_handling import MemoFrozenError


class Outcome(IntEnum):
    UNKNOWN = 0
    LOSE = 1
    WIN = 2


class MemoTable:
    """
    Плотная таблица исходов, индексируемая состоянием.

    Хранится в bytearray по байту на состояние. После завершения
    решателя таблица замораживается и дальше только читается.
    """
    __slots__ = ('num_positions', '_cells', '_frozen')

    def __init__(self, num_positions: int):
        self.num_positions = num_positions
        self._cells = bytearray(1 << num_positions)
        self._frozen = False

    @classmethod
    def with_base_cases(cls, num_positions: int) -> 'MemoTable':
        """Пустая доска и все позиции с одним колышком: уже победа."""
        memo = cls(num_positions)
        memo.set(0, Outcome.WIN)
        for pos in range(num_positions):
            memo.set(1 << pos, Outcome.WIN)
        return memo

    @classmethod
    def from_bytes(cls, num_positions: int, data: bytes) -> 'MemoTable':
        if len(data) != 1 << num_positions:
            raise ValueError(f"Ожидалось {1 << num_positions} байт, получено {len(data)}")
        memo = cls(num_positions)
        memo._cells[:] = data
        return memo

    def __len__(self) -> int:
        return len(self._cells)

    def get(self, state: int) -> Outcome:
        return Outcome(self._cells[state])

    def raw(self, state: int) -> int:
        """Код исхода без обёртки в Outcome: для горячих циклов."""
        return self._cells[state]

    def is_win(self, state: int) -> bool:
        return self._cells[state] == Outcome.WIN

    def is_known(self, state: int) -> bool:
        return self._cells[state] != Outcome.UNKNOWN

    def set(self, state: int, outcome: Outcome) -> None:
        if self._frozen:
            raise MemoFrozenError(f"Таблица заморожена, запись состояния {state} запрещена")
        self._cells[state] = outcome

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def snapshot(self) -> bytes:
        """Неизменяемая копия: для передачи в другие процессы."""
        return bytes(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MemoTable):
            return NotImplemented
        return self.num_positions == other.num_positions and self._cells == other._cells

    def __repr__(self) -> str:
        wins = self._cells.count(Outcome.WIN)
        return f"MemoTable({self.num_positions} positions, {wins} wins)"
