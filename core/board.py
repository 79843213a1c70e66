"""
core/board.py

Квадратная доска с вырезанными углами (крест).
"""

from typing import List, Optional, Iterator

from .utils import (
    CellState, Coordinate, CELL_CHARS, CHAR_CELLS,
    DEFAULT_BOARD_SIZE, is_valid_position
)
from utils.error_handling import InvalidBoardError, validate_board_size


class Board:
    """
    Изменяемая матрица состояний клеток.

    Принадлежит одной партии и меняется на месте через apply_move.
    """
    __slots__ = ('size', 'cells')

    def __init__(self, size: int, cells: List[List[CellState]]):
        self.size = size
        self.cells = cells

    @classmethod
    def make(cls, size: int = DEFAULT_BOARD_SIZE) -> 'Board':
        """
        Создаёт стартовую позицию: крест из колышков с пустым центром.

        Raises:
            InvalidBoardError: если размер чётный или меньше минимального
        """
        size = validate_board_size(size)
        cells = [[CellState.OCCUPIED for _ in range(size)] for _ in range(size)]

        for r in (0, size - 1):
            for c in (0, 1, size - 2, size - 1):
                cells[r][c] = CellState.UNUSABLE

        for r in (1, size - 2):
            for c in (0, size - 1):
                cells[r][c] = CellState.UNUSABLE

        cells[size // 2][size // 2] = CellState.EMPTY
        return cls(size, cells)

    @classmethod
    def from_string(cls, text: str) -> 'Board':
        """
        Разбирает доску из текстового вида (' ' / '.' / '@').

        Короткие строки дополняются пробелами справа.
        """
        lines = text.split('\n')
        if lines and lines[-1] == '':
            lines.pop()
        size = len(lines)
        if size == 0:
            raise InvalidBoardError("Пустое описание доски")

        cells = []
        for r, line in enumerate(lines):
            if len(line) > size:
                raise InvalidBoardError(f"Строка {r} длиннее стороны доски ({size})")
            row = []
            for char in line.ljust(size):
                if char not in CHAR_CELLS:
                    raise InvalidBoardError(f"Неизвестный символ клетки: {char!r}")
                row.append(CHAR_CELLS[char])
            cells.append(row)
        return cls(size, cells)

    def get(self, row: int, column: int) -> Optional[CellState]:
        """Состояние клетки или None, если координата вне доски."""
        if not is_valid_position(row, column, self.size):
            return None
        return self.cells[row][column]

    def set(self, coord: Coordinate, state: CellState) -> None:
        r, c = coord
        self.cells[r][c] = state

    def coords(self) -> Iterator[Coordinate]:
        """Все координаты в построчном порядке."""
        for r in range(self.size):
            for c in range(self.size):
                yield (r, c)

    def peg_count(self) -> int:
        """Количество колышков."""
        return sum(row.count(CellState.OCCUPIED) for row in self.cells)

    def count(self, state: CellState) -> int:
        return sum(row.count(state) for row in self.cells)

    def copy(self) -> 'Board':
        return Board(self.size, [list(row) for row in self.cells])

    def to_lines(self) -> List[str]:
        return [''.join(CELL_CHARS[cell] for cell in row) for row in self.cells]

    def to_string(self) -> str:
        """Текстовый вид доски: строка на ряд, с переводом строки в конце."""
        return ''.join(line + '\n' for line in self.to_lines())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return self.size == other.size and self.cells == other.cells

    def __repr__(self) -> str:
        return f"Board({self.size}x{self.size}, {self.peg_count()} pegs)"


def make_board(size: int = DEFAULT_BOARD_SIZE) -> Board:
    """Стартовая доска заданного нечётного размера."""
    return Board.make(size)


def get_cell(board: Board, row: int, column: int) -> Optional[CellState]:
    """Состояние клетки или None вне доски (в том числе для отрицательных координат)."""
    return board.get(row, column)


def score(board: Board) -> int:
    """Количество оставшихся колышков."""
    return board.peg_count()
