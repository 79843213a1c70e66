"""
core/moves.py

Поиск первого допустимого прыжка и его применение.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Board
from .utils import CellState, Coordinate, DIRECTIONS, midpoint
from utils.error_handling import InvariantViolationError

Offset = Tuple[int, int]


@dataclass(frozen=True)
class Move:
    """Прыжок колышка из from_ в to через соседнюю клетку."""
    from_: Coordinate
    to: Coordinate

    @property
    def over(self) -> Coordinate:
        """Клетка, через которую прыгает колышек."""
        return midpoint(self.from_, self.to)

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (*self.from_, *self.to)

    def __str__(self) -> str:
        (fr, fc), (tr, tc) = self.from_, self.to
        return f"({fr}, {fc}) ~> ({tr}, {tc})"


def is_jump_shape(move: Move) -> bool:
    """Ровно два шага по одной оси."""
    (fr, fc), (tr, tc) = move.from_, move.to
    dr, dc = abs(tr - fr), abs(tc - fc)
    return (dr, dc) in ((0, 2), (2, 0))


def is_legal_move(board: Board, move: Move) -> bool:
    """Проверяет, что ход допустим на текущей доске."""
    if not is_jump_shape(move):
        return False
    return (
        board.get(*move.from_) == CellState.OCCUPIED and
        board.get(*move.over) == CellState.OCCUPIED and
        board.get(*move.to) == CellState.EMPTY
    )


def find_move(board: Board, offset: Offset) -> Optional[Move]:
    """
    Находит первый допустимый прыжок.

    Клетки обходятся построчно, но к каждой координате прибавляется
    смещение по модулю размера доски: порядок обхода тот же, меняется
    только стартовая клетка. Направления проверяются в порядке DIRECTIONS.

    Args:
        board: текущая доска
        offset: (row_offset, column_offset), неотрицательные, любой величины

    Returns:
        Первый найденный ход или None, если ходов нет
    """
    size = board.size
    row_offset, column_offset = offset

    for row in range(size):
        for column in range(size):
            r = (row + row_offset) % size
            c = (column + column_offset) % size

            cell = board.get(r, c)
            if cell is None:
                raise InvariantViolationError(f"Клетка ({r}, {c}) вне доски {size}x{size}")
            if cell != CellState.OCCUPIED:
                continue

            for dr, dc in DIRECTIONS:
                if board.get(r + dr, c + dc) != CellState.OCCUPIED:
                    continue
                target = (r + 2 * dr, c + 2 * dc)
                if board.get(*target) != CellState.EMPTY:
                    continue
                return Move((r, c), target)

    return None


def apply_move(board: Board, move: Move) -> None:
    """
    Выполняет ход на месте.

    Raises:
        InvariantViolationError: если ход не является прыжком на два шага
            или клетки не в ожидаемом состоянии; доска при этом не меняется
    """
    if not is_jump_shape(move):
        raise InvariantViolationError(f"Ход {move} не является прыжком через одну клетку")

    expected = (
        (move.from_, CellState.OCCUPIED),
        (move.to, CellState.EMPTY),
        (move.over, CellState.OCCUPIED),
    )
    for coord, state in expected:
        actual = board.get(*coord)
        if actual != state:
            raise InvariantViolationError(
                f"Ход {move}: клетка {coord} в состоянии {actual}, ожидалось {state}"
            )

    board.set(move.from_, CellState.EMPTY)
    board.set(move.to, CellState.OCCUPIED)
    board.set(move.over, CellState.EMPTY)
